"""
Storage exceptions.

Missing profiles are not errors; stores report them by returning None.
StorageError is reserved for genuine infrastructure faults.
"""


class StorageError(Exception):
    """Raised by a ProfileStore when the backing medium fails."""

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        super().__init__(message)


__all__ = ["StorageError"]
