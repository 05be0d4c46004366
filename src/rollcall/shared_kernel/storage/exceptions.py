"""Storage exceptions shared by every key-value store adapter."""


class StorageError(Exception):
    """Raised when the key-value store cannot be read, written or decoded.

    This is not locally recoverable. Callers should catch it and treat it as
    a generic failure, distinct from business-rule violations such as
    duplicate names.
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
