"""Write Python values as JSON text through compact or pretty formatters."""

__version__ = "0.1.0"
__all__ = ["errors", "escape", "formatter", "serializer"]