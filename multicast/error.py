"""
Provide error handling utilities.
"""


class MulticastError(Exception):
    """
    The base of all errors raised by this package.
    """

    pass  # pragma: no cover


class UserFacingError(MulticastError):
    """
    A user-facing error.

    Fixing this type of error does not require knowledge of this package's internals
    or the stack trace leading to the error. It must therefore have an end-user-friendly
    message.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        """
        The human-readable error message.
        """
        return self._message
