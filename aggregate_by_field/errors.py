class ConfigurationError(ValueError):
    """Raised when grouping parameters are missing or invalid."""
