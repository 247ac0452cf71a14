# smeease/utils/errors.py
"""Errors raised on the client side of the API.

Every error carries a human readable ``message`` that screens show as-is.
"""
from typing import Optional


class ClientError(Exception):
    """Base class for everything a screen controller catches."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(ClientError):
    """The request never got a response (DNS, refused connection, timeout)."""


class ApiError(ClientError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status: int, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.reason = reason

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    def __repr__(self):
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class NotFoundError(ApiError):
    pass


class ValidationError(ClientError):
    """Rejected locally, before any request was sent."""


class PartialWriteError(ClientError):
    """A multi-step write stopped after some steps were already applied.

    ``cause`` is the error of the failing step and ``log`` records which
    steps went through, so a retry can pick up where this one stopped.
    """

    def __init__(self, cause: ClientError, log):
        super().__init__(cause.message)
        self.cause = cause
        self.log = log
