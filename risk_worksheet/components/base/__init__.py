from .component import BaseComponent
from .config import Settings, get_settings
from .exceptions import ComponentError, NotFoundError
from .logging import configure_logging, get_logger

__all__ = [
    "BaseComponent",
    "Settings",
    "get_settings",
    "ComponentError",
    "NotFoundError",
    "configure_logging",
    "get_logger",
]
