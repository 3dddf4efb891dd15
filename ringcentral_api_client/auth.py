"""
OAuth token state for a RingCentral session.

:class:`Credential` holds the access and refresh tokens issued by the
token endpoint together with their absolute expiry times.  It answers
validity questions and never performs any I/O; the HTTP side of the
token lifecycle lives in :class:`~ringcentral_api_client.platform.Platform`.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional

from .exceptions import MalformedTokenResponse


def _ttl(payload: Mapping[str, Any], key: str) -> float:
    value = payload.get(key)
    if value is None:
        raise MalformedTokenResponse(f"Token response did not contain {key!r}")
    # bool is an int subclass but never a valid lifetime
    if isinstance(value, bool):
        raise MalformedTokenResponse(f"Token response field {key!r} is not numeric: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedTokenResponse(
            f"Token response field {key!r} is not numeric: {value!r}"
        ) from exc


class Credential:
    """The token set of one authenticated session.

    Attributes
    ----------
    access_token : str or None
        Short-lived bearer token attached to resource calls.
    refresh_token : str or None
        Longer-lived token used to obtain a new access token.
    access_token_expires_at : float or None
        Epoch seconds after which the access token is no longer valid.
    refresh_token_expires_at : float or None
        Epoch seconds after which the refresh token is no longer valid.
    remember_me : bool
        Selects the refresh token lifetime requested on future refreshes.
    """

    def __init__(self) -> None:
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.access_token_expires_at: Optional[float] = None
        self.refresh_token_expires_at: Optional[float] = None
        self.remember_me: bool = False

    def __repr__(self) -> str:
        return (
            f"Credential(access_token={'set' if self.access_token else None}, "
            f"access_token_expires_at={self.access_token_expires_at}, "
            f"refresh_token_expires_at={self.refresh_token_expires_at}, "
            f"remember_me={self.remember_me})"
        )

    def is_access_token_valid(self) -> bool:
        """Return True if an access token is held and has not expired."""
        if not self.access_token or self.access_token_expires_at is None:
            return False
        return time.time() < self.access_token_expires_at

    def is_refresh_token_valid(self) -> bool:
        """Return True if a refresh token is held and has not expired."""
        if not self.refresh_token or self.refresh_token_expires_at is None:
            return False
        return time.time() < self.refresh_token_expires_at

    def apply_token_response(self, payload: Any, remember_me: bool) -> None:
        """Store the tokens from a parsed token endpoint payload.

        The payload must contain ``access_token``, ``refresh_token``,
        ``expires_in`` and ``refresh_token_expires_in``.  Lifetimes are
        converted to absolute expiry times relative to now.  Nothing is
        stored unless the whole payload is valid.

        Raises
        ------
        MalformedTokenResponse
            If a field is missing or a lifetime is not numeric.
        """
        if not isinstance(payload, Mapping):
            raise MalformedTokenResponse(
                f"Token response must be a JSON object, got {type(payload).__name__}"
            )
        access_token = payload.get("access_token")
        if not access_token:
            raise MalformedTokenResponse("Token response did not contain an access_token")
        refresh_token = payload.get("refresh_token")
        if not refresh_token:
            raise MalformedTokenResponse("Token response did not contain a refresh_token")
        expires_in = _ttl(payload, "expires_in")
        refresh_expires_in = _ttl(payload, "refresh_token_expires_in")

        now = time.time()
        self.access_token = str(access_token)
        self.refresh_token = str(refresh_token)
        self.access_token_expires_at = now + expires_in
        self.refresh_token_expires_at = now + refresh_expires_in
        self.remember_me = bool(remember_me)

    def reset(self) -> None:
        """Forget every token and expiry."""
        self.access_token = None
        self.refresh_token = None
        self.access_token_expires_at = None
        self.refresh_token_expires_at = None
        self.remember_me = False
