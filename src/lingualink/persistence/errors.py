"""
Errors raised by the persistence layer.
"""


class ObjectStoreError(Exception):
    """Failure reported by the object store (or the transport to it)."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class PersistenceError(Exception):
    """Generic repository failure surfaced to callers ("Failed to ...")."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
