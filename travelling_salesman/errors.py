class InvalidArgumentError(ValueError):
    """Raised when a caller passes cities, routes or settings that break a precondition."""
