"""Application exception classes."""


class StorageError(Exception):
    """Raised when the location database fails for any reason other than a coordinate race."""
