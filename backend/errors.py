class ConfigurationError(ValueError):
    """Required backend setting is missing or malformed."""


class StorageUnavailable(RuntimeError):
    """Backing store could not be reached or rejected the connection check."""
