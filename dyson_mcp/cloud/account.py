"""Dyson cloud account client."""

import logging
from typing import Optional

import requests
from requests.auth import AuthBase

from ..const import (
    API_PATH_AUTHENTICATE,
    DEFAULT_REGION,
    DYSON_API_HEADERS,
    REGION_HOSTS,
)
from ..exceptions import (
    DysonAuthenticationFailed,
    DysonInvalidAuth,
    DysonInvalidCredentials,
    DysonNetworkError,
    DysonParseError,
)

_LOGGER = logging.getLogger(__name__)

HTTP_UNAUTHORIZED = 401


def get_api_host(region: Optional[str]) -> str:
    """Return the API host for a region, falling back to the default region."""
    region = (region or DEFAULT_REGION).upper()
    host = REGION_HOSTS.get(region)
    if host is None:
        _LOGGER.debug("Unknown region %s, using %s", region, DEFAULT_REGION)
        host = REGION_HOSTS[DEFAULT_REGION]
    return f"https://{host}"


class HTTPBearerAuth(AuthBase):
    """Attaches HTTP Bearer Authentication to the given Request object."""

    def __init__(self, token):
        """Initialize the auth."""
        self.token = token

    def __eq__(self, other):
        """Return if equal."""
        return self.token == getattr(other, "token", None)

    def __ne__(self, other):
        """Return if not equal."""
        return not self == other

    def __call__(self, r):
        """Attach the authentication."""
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r


class DysonAccount:
    """Dyson account session.

    Holds the session token in memory only. The token is obtained lazily on
    the first authorized request and refreshed at most once per request when
    the cloud rejects it.
    """

    def __init__(self, email: str, password: str, region: str = DEFAULT_REGION):
        """Create a new Dyson account."""
        self._email = email
        self._password = password
        self._region = (region or DEFAULT_REGION).upper()
        self._host = get_api_host(self._region)
        self._token: Optional[str] = None

    @property
    def region(self) -> str:
        """Return the configured region code."""
        return self._region

    @property
    def host(self) -> str:
        """Return the API base URL."""
        return self._host

    @property
    def token(self) -> Optional[str]:
        """Return the session token."""
        return self._token

    @property
    def is_authenticated(self) -> bool:
        """Return if a session token is held."""
        return self._token is not None

    @property
    def _auth(self) -> Optional[AuthBase]:
        if self._token is None:
            return None
        return HTTPBearerAuth(self._token)

    def request(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
        auth: bool = True,
    ) -> requests.Response:
        """Make API request."""
        _LOGGER.debug("%s %s", method, path)
        try:
            response = requests.request(
                method,
                self._host + path,
                json=data,
                headers=DYSON_API_HEADERS,
                auth=self._auth if auth else None,
                verify=True,
            )
        except requests.RequestException as err:
            raise DysonNetworkError(str(err)) from err
        if auth and response.status_code == HTTP_UNAUTHORIZED:
            raise DysonInvalidAuth
        return response

    def authenticate(self) -> None:
        """Log in with email and password and store the session token."""
        response = self.request(
            "POST",
            API_PATH_AUTHENTICATE,
            data={"Email": self._email, "Password": self._password},
            auth=False,
        )
        if response.status_code == HTTP_UNAUTHORIZED:
            raise DysonInvalidCredentials
        if not response.ok:
            raise DysonAuthenticationFailed(response.status_code)

        try:
            body = response.json()
        except ValueError as err:
            raise DysonParseError("Authentication response is not JSON") from err
        token = body.get("Account") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise DysonParseError("Authentication response is missing Account")
        self._token = token
        _LOGGER.debug("Authenticated with Dyson cloud (%s)", self._region)

    def ensure_authenticated(self) -> None:
        """Authenticate if no session token is held."""
        if self._token is None:
            self.authenticate()

    def invalidate(self) -> None:
        """Forget the session token."""
        self._token = None

    def authorized_request(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
    ) -> requests.Response:
        """Make an authenticated API request.

        A 401 clears the token, re-authenticates once and retries once. A
        second 401 is raised as DysonInvalidAuth.
        """
        self.ensure_authenticated()
        try:
            return self.request(method, path, data)
        except DysonInvalidAuth:
            _LOGGER.debug("Session token rejected, re-authenticating")
            self.invalidate()
            self.authenticate()
        return self.request(method, path, data)
