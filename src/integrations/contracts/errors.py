"""
Error taxonomy for the checkout gateway.

Every failure the service can report is a ``CheckoutError`` subclass carrying
the HTTP status it renders to. Inbound request problems (missing parameters,
undecodable or invalid bodies, missing access token) are raised by the API
layer; ``ProviderError``, ``DecodeError`` and ``TransportError`` are raised
only by gateway clients.
"""

from __future__ import annotations

from typing import List, Sequence


class CheckoutError(Exception):
    status_code: int = 500


class MissingParameterError(CheckoutError):
    status_code = 400


class PreferenceValidationError(CheckoutError):
    """One entry per violated rule, in field declaration order."""

    status_code = 400

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations: List[str] = list(violations)
        super().__init__("\n".join(self.violations))


class BodyDecodeError(CheckoutError):
    status_code = 422


class AuthRequiredError(CheckoutError):
    status_code = 401

    def __init__(self, message: str = "access token is required") -> None:
        super().__init__(message)


class ProviderError(CheckoutError):
    """
    The payment provider answered with a status >= 400.

    ``message`` is the raw response body, never re-parsed.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(CheckoutError):
    """A successful provider response whose body does not have the expected shape."""


class TransportError(CheckoutError):
    """The outbound request never produced a response (connection failure, timeout)."""
