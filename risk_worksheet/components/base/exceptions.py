from typing import Optional, Dict, Any


class ComponentError(Exception):
    """Base exception for all component errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        component: str = "unknown",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.component = component
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "component": self.component,
            "details": self.details,
        }


# Input Validation Exceptions
class MissingParameterError(ComponentError):
    pass


class InvalidCardinalityError(ComponentError):
    pass


class InvalidEstimateError(ComponentError):
    pass


class InvalidWeightsError(ComponentError):
    pass


# Lookup Exceptions
class NotFoundError(ComponentError):
    status_code = 404


class RiskNotFoundError(NotFoundError):
    pass


class MeasureNotFoundError(NotFoundError):
    pass


class IndicatorNotFoundError(NotFoundError):
    pass


class MonitoringNotFoundError(NotFoundError):
    pass


# Catalog Exceptions
class CatalogLoadError(ComponentError):
    status_code = 500
