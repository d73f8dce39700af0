"""
Exception hierarchy for the unified client.

Two families exist:

* :class:`LogicError` signals caller misuse (empty history, duplicate batch
  custom id, empty embedding input). It is never raised for remote failures.
* :class:`ServiceError` signals anything that went wrong while talking to a
  provider. Subtypes distinguish an HTTP error status (:class:`ApiError`), a
  transport or decoding failure (:class:`CommunicationError`) and a response
  that is valid but cannot be processed further
  (:class:`UnexpectedResponseError`).

Every exception carries a normalized :class:`ErrorCode` and the provider key
where it originated, when known.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode


class AccessError(Exception):
    """Common base carrying a normalized code and provider context."""

    default_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        code: Optional[ErrorCode] = None,
        provider: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.provider = provider


class LogicError(AccessError):
    """Invalid method arguments or library state."""

    default_code = ErrorCode.LOGIC


class ServiceError(AccessError):
    """Error occurred during provider communication."""


class ApiError(ServiceError):
    """Provider returned an HTTP error status.

    Attributes:
        status_code: HTTP status returned by the provider (``None`` when the
            error was raised for a structurally invalid success body).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[ErrorCode] = None,
        provider: Optional[str] = None,
    ) -> None:
        super().__init__(message, code=code, provider=provider)
        self.status_code = status_code


class CommunicationError(ServiceError):
    """Failed to reach the API or to decode its response."""

    default_code = ErrorCode.COMMUNICATION


class UnexpectedResponseError(ServiceError):
    """API response has a structure that blocks further processing."""

    default_code = ErrorCode.UNEXPECTED_RESPONSE


__all__ = [
    "AccessError",
    "LogicError",
    "ServiceError",
    "ApiError",
    "CommunicationError",
    "UnexpectedResponseError",
]
