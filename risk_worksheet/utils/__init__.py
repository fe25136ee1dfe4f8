from .estimates import require, validate_panel

__all__ = ["require", "validate_panel"]
