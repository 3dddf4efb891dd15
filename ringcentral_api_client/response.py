"""Normalized HTTP response returned by every API call."""

from __future__ import annotations

import json as _json
from dataclasses import dataclass, field
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import RingCentralAPIError


@dataclass(frozen=True)
class Response:
    """Status code, raw body text and headers of a completed exchange.

    The body is never decoded automatically; use :meth:`json` when the
    payload is known to be JSON.
    """

    status_code: int
    body: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    @classmethod
    def from_http(cls, response: requests.Response) -> "Response":
        """Build a :class:`Response` from a ``requests`` response."""
        return cls(
            status_code=response.status_code,
            body=response.text,
            headers=CaseInsensitiveDict(response.headers),
        )

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises
        ------
        ValueError
            If the body is not valid JSON.
        """
        return _json.loads(self.body)

    def raise_for_status(self) -> None:
        """Raise :class:`RingCentralAPIError` for 4xx and 5xx statuses."""
        if self.status_code >= 400:
            raise RingCentralAPIError(
                f"{self.status_code} Error: {self.body}",
                status_code=self.status_code,
                body=self.body,
            )
