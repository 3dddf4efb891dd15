"""
Python client for the RingCentral REST API.

This package provides a `Platform` class that opens an OAuth2 session
with the password grant, refreshes the access token transparently
while the refresh token is alive, and performs authenticated requests
against API endpoints.

Examples
--------

```python
from ringcentral_api_client import Platform, Request

platform = Platform(
    app_key="YOUR_APP_KEY",
    app_secret="YOUR_APP_SECRET",
    environment="sandbox",  # or "production"
)
platform.authenticate("+15551234567", "password", extension="101")

request = Request("/restapi/v1.0/account/~/extension/~/sms")
request.set_json_data('{"text": "hello", "to": [{"phoneNumber": "+15557654321"}]}')
response = platform.post(request)

# response.body holds the raw text; decode it when needed
message = response.json()
```

Every call returns a `Response` carrying the status code, raw body and
headers.  Error statuses from resource endpoints are returned rather
than raised; call `Response.raise_for_status()` to opt in to an
exception.
"""

from .auth import Credential
from .config import TokenSettings
from .exceptions import (
    AuthenticationFailed,
    MalformedTokenResponse,
    RefreshTokenExpired,
    RingCentralAPIError,
    RingCentralAuthError,
    RingCentralError,
    SessionExpired,
)
from .platform import Platform
from .request import Request
from .response import Response

__all__ = [
    "Platform",
    "Request",
    "Response",
    "Credential",
    "TokenSettings",
    "RingCentralError",
    "RingCentralAuthError",
    "RingCentralAPIError",
    "MalformedTokenResponse",
    "AuthenticationFailed",
    "RefreshTokenExpired",
    "SessionExpired",
]
