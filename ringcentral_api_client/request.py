"""
Per-call request builder.

A :class:`Request` carries everything one API call needs besides the
credential: the endpoint, query parameters and either form fields or a
JSON body.  It is passed explicitly to the verb methods of
:class:`~ringcentral_api_client.platform.Platform`, which read it but
never modify it.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Request:
    """Endpoint, query string and body for a single API call.

    Parameters
    ----------
    endpoint : str
        Path relative to the API base address, or an absolute URL.
    json_body : str, optional
        A pre-serialised JSON document to send as the request body.

    Notes
    -----
    Query parameter values are concatenated as given.  Values that may
    contain reserved characters must be escaped before they are added.
    """

    def __init__(self, endpoint: str, json_body: Optional[str] = None) -> None:
        if not endpoint:
            raise ValueError("endpoint must not be empty")
        self.endpoint = endpoint
        self.query_parameters: List[Tuple[str, str]] = []
        self.form_fields: Dict[str, str] = {}
        self._json_body = json_body

    def __repr__(self) -> str:
        return f"Request({self.endpoint!r}, query={self.query_parameters!r})"

    # ------------------------------------------------------------------
    # Query parameters
    # ------------------------------------------------------------------
    def add_query_parameter(self, key: str, value: str) -> "Request":
        """Append a query parameter.  Duplicate keys are kept."""
        self.query_parameters.append((key, value))
        return self

    def clear_query_parameters(self) -> None:
        self.query_parameters = []

    def querystring(self) -> str:
        """Return ``?k1=v1&k2=v2`` in insertion order, or ``""`` if empty."""
        if not self.query_parameters:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in self.query_parameters)

    @property
    def url(self) -> str:
        """The endpoint with the query string appended."""
        return self.endpoint + self.querystring()

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------
    def add_form_parameter(self, name: str, value: str) -> "Request":
        """Set a form field, replacing any previous value for ``name``."""
        self.form_fields[name] = value
        return self

    def clear_form_parameters(self) -> None:
        self.form_fields = {}

    def set_json_data(self, json_body: str) -> "Request":
        self._json_body = json_body
        return self

    @property
    def json_body(self) -> Optional[str]:
        return self._json_body

    def clear_json_data(self) -> None:
        self._json_body = None

    def content(self) -> Tuple[str, str]:
        """Return the encoded body and its content type.

        A JSON body takes precedence; form fields are ignored while one
        is set.  Otherwise the form fields are URL-encoded.
        """
        if self._json_body is not None:
            return self._json_body, JSON_CONTENT_TYPE
        return urlencode(list(self.form_fields.items())), FORM_CONTENT_TYPE
