"""Configuration defaults for the RingCentral API client."""

from __future__ import annotations

from dataclasses import dataclass

SANDBOX_SERVER = "https://platform.devtest.ringcentral.com"
PRODUCTION_SERVER = "https://platform.ringcentral.com"

DEFAULT_SERVERS = {
    "sandbox": SANDBOX_SERVER,
    "production": PRODUCTION_SERVER,
}


@dataclass(frozen=True)
class TokenSettings:
    """Token lifetimes and OAuth endpoint paths.

    The TTLs are requested from the token endpoint on every authenticate
    and refresh call.  ``refresh_token_ttl_remember`` is used instead of
    ``refresh_token_ttl`` when the session was opened with remember-me.
    """

    access_token_ttl: int = 3600  # 60 minutes
    refresh_token_ttl: int = 36000  # 10 hours
    refresh_token_ttl_remember: int = 604800  # 1 week
    token_endpoint: str = "/restapi/oauth/token"
    revoke_endpoint: str = "/restapi/oauth/revoke"

    def __post_init__(self) -> None:
        for name in ("access_token_ttl", "refresh_token_ttl", "refresh_token_ttl_remember"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    def refresh_ttl_for(self, remember_me: bool) -> int:
        """Return the refresh token lifetime to request for ``remember_me``."""
        return self.refresh_token_ttl_remember if remember_me else self.refresh_token_ttl
