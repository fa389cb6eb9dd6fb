"""Exceptions raised by employee stores."""


class StoreError(Exception):
    """A persistence operation failed (connectivity, constraint, timeout...).

    Stores translate their backend's exceptions into this type so callers can
    tell store failures apart from programming errors without depending on a
    particular database library.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")
