import logging
import requests
from typing import Any, Dict

logger = logging.getLogger(__name__)

API_USER = "api"


class WistiaError(Exception): ...


class TransportError(WistiaError): ...


class HTTPStatusError(WistiaError):
    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthError(HTTPStatusError): ...


class NotFound(HTTPStatusError): ...


class InvalidJSONError(WistiaError): ...


# Methods whose params travel in a form-encoded body rather than the query string
_BODY_METHODS = ("POST", "PUT")


class WistiaClient:
    def __init__(
        self,
        base_url: str,
        key: str,
        timeout_s: float = 15.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.auth = (API_USER, key)

    def call(
        self, path: str, method: str = "GET", params: Dict[str, Any] | None = None
    ) -> Any:
        """
        Issue one authenticated request against the API root and decode the body.

        GET/DELETE params go on the query string, POST/PUT params are sent
        form-encoded. Raises TransportError, HTTPStatusError (AuthError,
        NotFound) or InvalidJSONError; never retries.
        """
        method = method.upper()
        url = f"{self.base_url}/{path.lstrip('/')}"
        kwargs: Dict[str, Any] = {"timeout": self.timeout_s}
        if params:
            if method in _BODY_METHODS:
                kwargs["data"] = params
            else:
                kwargs["params"] = params

        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.warning("%s %s -> HTTP %s", method, url, resp.status_code)
            body = resp.text[:200]
            if resp.status_code in (401, 403):
                raise AuthError("Unauthorized", resp.status_code, body)
            if resp.status_code == 404:
                raise NotFound(f"Not found: {url}", resp.status_code, body)
            raise HTTPStatusError(
                f"HTTP {resp.status_code}: {body}", resp.status_code, body
            )

        try:
            return resp.json()
        except ValueError as e:
            raise InvalidJSONError(f"Invalid JSON in response from {url}") from e
