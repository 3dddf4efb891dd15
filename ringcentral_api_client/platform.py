"""
Authenticated session for the RingCentral REST API.

This module defines the :class:`Platform` class which opens an OAuth2
session with the password grant, keeps it alive by refreshing the
access token when it expires, revokes it on request, and performs
authenticated HTTP requests against API resource endpoints.

Usage
-----

.. code-block:: python

    from ringcentral_api_client import Platform, Request

    platform = Platform(
        app_key="abc123",
        app_secret="shhsecret",
        environment="sandbox",
    )
    platform.authenticate("+15551234567", "password", extension="101", remember_me=True)

    request = Request("/restapi/v1.0/account/~/extension/~/call-log")
    request.add_query_parameter("perPage", "10")
    response = platform.get(request)
    print(response.status_code, response.json())

Every verb method first passes through :meth:`Platform.ensure_access_valid`,
which refreshes the access token when it has expired but the refresh
token is still alive.  Once both tokens have expired the caller must
call :meth:`Platform.authenticate` again.
"""

from __future__ import annotations

import base64
import logging
import threading
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import requests

from .auth import Credential
from .config import DEFAULT_SERVERS, TokenSettings
from .exceptions import (
    AuthenticationFailed,
    MalformedTokenResponse,
    RefreshTokenExpired,
    SessionExpired,
)
from .request import Request
from .response import Response

logger = logging.getLogger(__name__)

SDK_AGENT = "Ring Central Python SDK"

_OVERRIDE_METHODS = {"GET", "POST", "PUT", "DELETE"}

# Characters left as-is when escaping the password: the reserved set of RFC 3986
_PASSWORD_SAFE = "!#$&'()*+,/:;=?@[]"


class Platform:
    """An authenticated session against the RingCentral REST API.

    Parameters
    ----------
    app_key : str
        The application key (OAuth client id) of your RingCentral app.
    app_secret : str
        The application secret (OAuth client secret).
    api_endpoint : str, optional
        Override the API base address.  When provided, this parameter
        overrides the address derived from the environment.
    environment : str, optional
        Which environment to target.  Use ``"sandbox"`` for the
        developer sandbox and ``"production"`` for the live servers.
        The default is ``"sandbox"``.
    token_settings : TokenSettings, optional
        Token lifetimes and OAuth endpoint paths.  Defaults to
        :class:`TokenSettings` with its standard values.
    timeout : float, optional
        Timeout in seconds passed to every HTTP request.
    client : requests.Session, optional
        HTTP client to use.  A new session is created when omitted.

    Notes
    -----
    A platform instance is not meant to be shared between threads
    except for the token refresh, which runs at most once at a time:
    callers that reach the validity gate together wait for a single
    in-flight refresh instead of each calling the token endpoint.
    """

    def __init__(
        self,
        *,
        app_key: str,
        app_secret: str,
        api_endpoint: Optional[str] = None,
        environment: str = "sandbox",
        token_settings: Optional[TokenSettings] = None,
        timeout: Optional[float] = None,
        client: Optional[requests.Session] = None,
    ) -> None:
        if not app_key:
            raise ValueError("app_key must be provided")
        if not app_secret:
            raise ValueError("app_secret must be provided")

        environment = environment.lower()
        if environment not in DEFAULT_SERVERS:
            raise ValueError(
                "environment must be either 'sandbox' or 'production', got %r" % environment
            )

        self.app_key = app_key
        self.app_secret = app_secret
        self.environment = environment
        self.api_endpoint = api_endpoint or DEFAULT_SERVERS[environment]
        self.token_settings = token_settings or TokenSettings()
        self.timeout = timeout

        self.auth = Credential()
        self._refresh_lock = threading.Lock()
        self._client = client if client is not None else requests.Session()
        self._client.headers["SDK-Agent"] = SDK_AGENT

    # ------------------------------------------------------------------
    # HTTP client configuration
    # ------------------------------------------------------------------
    @property
    def client(self) -> requests.Session:
        return self._client

    def set_client(self, client: requests.Session) -> None:
        """Replace the HTTP client used for every request."""
        client.headers["SDK-Agent"] = SDK_AGENT
        self._client = client

    def set_x_http_override_header(self, method: Optional[str]) -> None:
        """Send ``X-HTTP-Method-Override`` with every request.

        Only GET, POST, PUT and DELETE are accepted; any other value is
        ignored.
        """
        if method and method.upper() in _OVERRIDE_METHODS:
            self._client.headers["X-HTTP-Method-Override"] = method.upper()

    def set_user_agent_header(self, user_agent: str) -> None:
        self._client.headers["User-Agent"] = user_agent

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def _basic_credentials(self) -> str:
        raw = f"{self.app_key}:{self.app_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def auth_post_request(self, endpoint: str, form: Dict[str, str]) -> Response:
        """POST a form to an OAuth endpoint using HTTP Basic authorization.

        Authenticate, refresh and revoke identify the application rather
        than the user, so they authorize with ``base64(app_key:app_secret)``
        instead of the bearer token.
        """
        url = self._prepare_url(endpoint)
        headers = {"Authorization": f"Basic {self._basic_credentials()}"}
        logger.debug("POST %s (basic auth)", url)
        http_response = self._client.request(
            "POST", url, data=form, headers=headers, timeout=self.timeout
        )
        return Response.from_http(http_response)

    def _token_request(self, form: Dict[str, str], remember_me: bool) -> Response:
        response = self.auth_post_request(self.token_settings.token_endpoint, form)
        if not response.ok:
            logger.warning(
                "Token request (%s) failed with status %s", form["grant_type"], response.status_code
            )
            raise AuthenticationFailed(
                f"Authentication failed with status {response.status_code}: {response.body}",
                status_code=response.status_code,
                body=response.body,
            )
        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise MalformedTokenResponse("Token response is not valid JSON") from exc
        self.auth.apply_token_response(payload, remember_me)
        return response

    def authenticate(
        self,
        username: str,
        password: str,
        extension: Optional[str] = None,
        remember_me: bool = False,
    ) -> Response:
        """Open a session with the OAuth password grant.

        Any previous credential is replaced.  With ``remember_me`` the
        refresh token is requested for one week instead of ten hours.

        Raises
        ------
        AuthenticationFailed
            If the token endpoint answers with a non-success status.
        MalformedTokenResponse
            If the token payload cannot be used.
        """
        settings = self.token_settings
        form = {
            "grant_type": "password",
            "username": username,
            "password": quote(password, safe=_PASSWORD_SAFE),
            "access_token_ttl": str(settings.access_token_ttl),
            "refresh_token_ttl": str(settings.refresh_ttl_for(remember_me)),
        }
        if extension:
            form["extension"] = extension
        logger.info("Authenticating against %s", self.api_endpoint)
        return self._token_request(form, remember_me)

    def refresh(self) -> Response:
        """Exchange the refresh token for a new token set.

        Raises
        ------
        RefreshTokenExpired
            If there is no live refresh token.  No request is sent; the
            caller has to authenticate again.
        AuthenticationFailed
            If the token endpoint answers with a non-success status.
        """
        if not self.auth.is_refresh_token_valid():
            raise RefreshTokenExpired("Refresh token has expired")

        remember_me = self.auth.remember_me
        settings = self.token_settings
        form = {
            "grant_type": "refresh_token",
            "refresh_token": self.auth.refresh_token or "",
            "access_token_ttl": str(settings.access_token_ttl),
            "refresh_token_ttl": str(settings.refresh_ttl_for(remember_me)),
        }
        logger.info("Refreshing access token")
        return self._token_request(form, remember_me)

    def revoke(self) -> Response:
        """Revoke the access token and forget the session.

        The credential is cleared before the request is sent, so the
        session counts as revoked even if the request itself fails.
        """
        form = {"token": self.auth.access_token or ""}
        self.auth.reset()
        logger.info("Revoking session")
        return self.auth_post_request(self.token_settings.revoke_endpoint, form)

    def ensure_access_valid(self) -> bool:
        """Make sure a live access token is available.

        Returns True immediately while the access token is valid.  When
        only the refresh token is alive, the token is refreshed first;
        concurrent callers share that single refresh.

        Raises
        ------
        SessionExpired
            If both tokens have expired.
        """
        if self.auth.is_access_token_valid():
            return True
        with self._refresh_lock:
            # another caller may have refreshed while we waited
            if self.auth.is_access_token_valid():
                return True
            if not self.auth.is_refresh_token_valid():
                logger.debug("Access and refresh tokens expired")
                raise SessionExpired("Access has expired; authenticate again")
            logger.debug("Access token expired, refreshing")
            self.refresh()
        return True

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _prepare_url(self, path: str) -> str:
        """Build the full request URL from a relative or absolute path."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.api_endpoint.rstrip('/')}/{path.lstrip('/')}"

    def _request(self, method: str, request: Union[Request, str]) -> Response:
        if isinstance(request, str):
            request = Request(request)
        self.ensure_access_valid()

        headers = {"Authorization": f"Bearer {self.auth.access_token}"}
        data = None
        if method in ("POST", "PUT"):
            body, content_type = request.content()
            data = body.encode("utf-8")
            headers["Content-Type"] = content_type

        url = self._prepare_url(request.url)
        logger.debug("%s %s", method, url)
        http_response = self._client.request(
            method, url, data=data, headers=headers, timeout=self.timeout
        )
        return Response.from_http(http_response)

    # ------------------------------------------------------------------
    # Public convenience methods
    # ------------------------------------------------------------------
    def get(self, request: Union[Request, str]) -> Response:
        """Perform a GET request.

        Error statuses are returned in the :class:`Response`, not raised.
        """
        return self._request("GET", request)

    def post(self, request: Union[Request, str]) -> Response:
        """Perform a POST request with the request's JSON or form body."""
        return self._request("POST", request)

    def put(self, request: Union[Request, str]) -> Response:
        """Perform a PUT request with the request's JSON or form body."""
        return self._request("PUT", request)

    def delete(self, request: Union[Request, str]) -> Response:
        return self._request("DELETE", request)
