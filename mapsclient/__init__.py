"""Static map and time zone requests, with shared map value types and field masks."""

__version__ = "0.1.0"

__all__ = ["fieldmasks", "staticmap", "timezone", "transport", "types"]