class InvalidCoordinateException(ValueError):
    """Raised when a coordinate conversion yields a non-finite value."""
