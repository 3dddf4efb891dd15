"""
Custom exception types for the RingCentral API client.

These exceptions allow callers to distinguish between failures of the
OAuth session (which require re-authenticating) and error statuses
returned by API resource endpoints.  Transport failures raised by
``requests`` are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Optional


class RingCentralError(Exception):
    """Base exception for all RingCentral client errors."""


class RingCentralAuthError(RingCentralError):
    """Base class for failures of the OAuth credential lifecycle."""


class MalformedTokenResponse(RingCentralAuthError):
    """Raised when the token endpoint payload is missing or has invalid fields."""


class AuthenticationFailed(RingCentralAuthError):
    """Raised when the token endpoint answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RefreshTokenExpired(RingCentralAuthError):
    """Raised when a refresh is attempted without a live refresh token.

    The session cannot recover on its own; call ``authenticate`` again.
    """


class SessionExpired(RingCentralAuthError):
    """Raised when a request is made while both tokens are expired."""


class RingCentralAPIError(RingCentralError):
    """Raised by :meth:`Response.raise_for_status` for 4xx and 5xx statuses."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
