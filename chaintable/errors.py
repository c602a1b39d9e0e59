class InvalidArgument(ValueError):
    """Raised when a table is configured with an out-of-range capacity or load factor."""
