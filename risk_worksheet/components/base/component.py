from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from pydantic import BaseModel

from .logging import get_logger

TRequest = TypeVar("TRequest", bound=BaseModel)
TResponse = TypeVar("TResponse", bound=BaseModel)


class BaseComponent(ABC, Generic[TRequest, TResponse]):
    """Abstract base for every worksheet stage.

    Each stage implements this interface, providing:
    - component_name: identifier used in errors and log records
    - process(): main async entry point for the stage's primary operation
    - health_check(): component-level status
    """

    @property
    @abstractmethod
    def component_name(self) -> str:
        """Unique identifier for this component."""
        pass

    @abstractmethod
    async def process(self, request: TRequest) -> TResponse:
        """Main processing entry point."""
        pass

    @property
    def logger(self):
        return get_logger(f"risk_worksheet.{self.component_name}")

    async def health_check(self) -> dict:
        """Check component health status."""
        return {"component": self.component_name, "status": "healthy"}
