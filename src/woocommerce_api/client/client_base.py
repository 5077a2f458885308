from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import requests
import yaml

from . import codec, oauth
from .exceptions import (
    ApiError,
    ConfigurationError,
    SerializationError,
    TransportError,
    TransportTimeout,
    WooCommerceError,
)


logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, Any]]


class APIVersion(IntEnum):
    VERSION1 = 1
    VERSION2 = 2
    VERSION3 = 3
    THIRD_PARTY_PLUGINS = 99


# Checked in order against the lower-cased URL
_VERSION_SUFFIXES = (
    ("wp-json/wc/v1", APIVersion.VERSION1),
    ("wp-json/wc/v2", APIVersion.VERSION2),
    ("wp-json/wc/v3", APIVersion.VERSION3),
)


def detect_version(url: str) -> APIVersion:
    """
    Resolve the API version from the REST base URL.

    Raises:
        ConfigurationError: URL is empty or has no recognized version path
    """
    if not url or not url.strip():
        raise ConfigurationError("Please use a valid WooCommerce REST API url.")

    lowered = url.strip().rstrip("/").lower()
    for suffix, version in _VERSION_SUFFIXES:
        if lowered.endswith(suffix):
            return version
    if "wp-json/wc-" in lowered:
        return APIVersion.THIRD_PARTY_PLUGINS

    raise ConfigurationError(
        f"Unknown WooCommerce REST API version for '{url}'. "
        "Expected a url like https://yourstore/wp-json/wc/v2"
    )


def _parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be true or false, got '{raw}'.")


def _parse_timeout(name: str, raw: Any) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be a number, got '{raw}'.") from e
    if timeout <= 0:
        raise ConfigurationError(f"{name} must be positive, got '{raw}'.")
    return timeout


@dataclass(frozen=True)
class SendResult:
    """Outcome of one request: the response body, or the typed error."""

    body: Optional[str] = None
    error: Optional[WooCommerceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.body if self.body is not None else ""


class RestAPI:
    """
    HTTP transport for the WooCommerce REST API.

    Features:
    - API version detection from the base URL
    - Basic-auth header or query credentials over HTTPS
    - OAuth 1.0a HMAC-SHA256 request signing over plain HTTP
    - Typed results and errors, no automatic retries
    """

    DEFAULT_TIMEOUT = 30  # seconds

    # Whether update_with_null may post a hand-built body of empty strings.
    # Transports that only accept model payloads turn this off.
    supports_null_update = True

    def __init__(
        self,
        url: str,
        key: str,
        secret: str,
        authorized_header: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Args:
            url: REST API url, e.g. https://yourstore/wp-json/wc/v2
            key: Consumer key
            secret: Consumer secret
            authorized_header: Over HTTPS, send credentials in a Basic auth
                header (True) or as query parameters (False)
            timeout: Request timeout in seconds
        """
        self._version = detect_version(url)
        self._base_url = url.strip().rstrip("/") + "/"
        self._key = key
        self._authorized_header = authorized_header
        self.timeout = timeout or self.DEFAULT_TIMEOUT

        # Over plain HTTP the store signs with "secret&" (empty token secret)
        if self.is_secure:
            self._secret = secret
        else:
            self._secret = secret + "&"

        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "woocommerce-api-python/0.1.0",
                "Accept": "application/json",
            }
        )

        logger.info(
            "RestAPI initialized for %s (version=%s, auth=%s)",
            self._base_url,
            self._version.name,
            self.auth_mode,
        )

    # ---------------------------------------------------
    # Configuration
    # ---------------------------------------------------
    @classmethod
    def from_env(cls) -> "RestAPI":
        """
        Build a client from WOOCOMMERCE_URL, WOOCOMMERCE_KEY,
        WOOCOMMERCE_SECRET, WOOCOMMERCE_AUTH_HEADER (default true) and
        WOOCOMMERCE_TIMEOUT_SEC (default 30).
        """
        values = {}
        for name in ("WOOCOMMERCE_URL", "WOOCOMMERCE_KEY", "WOOCOMMERCE_SECRET"):
            value = os.getenv(name)
            if not value or not value.strip():
                raise ConfigurationError(f"{name} environment variable not set.")
            values[name] = value.strip()

        return cls(
            url=values["WOOCOMMERCE_URL"],
            key=values["WOOCOMMERCE_KEY"],
            secret=values["WOOCOMMERCE_SECRET"],
            authorized_header=_parse_bool(
                "WOOCOMMERCE_AUTH_HEADER", os.getenv("WOOCOMMERCE_AUTH_HEADER", "true")
            ),
            timeout=_parse_timeout(
                "WOOCOMMERCE_TIMEOUT_SEC",
                os.getenv("WOOCOMMERCE_TIMEOUT_SEC", str(cls.DEFAULT_TIMEOUT)),
            ),
        )

    @classmethod
    def from_config(cls, config_path: Union[str, Path]) -> "RestAPI":
        """
        Build a client from a YAML file with a top-level `woocommerce:`
        mapping (url, key, secret, authorized_header, timeout).
        """
        path = Path(config_path)
        try:
            with open(path) as f:
                config = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        section = config.get("woocommerce") if isinstance(config, dict) else None
        if not isinstance(section, dict):
            raise ConfigurationError(f"{path} has no 'woocommerce' section.")

        missing = [k for k in ("url", "key", "secret") if not section.get(k)]
        if missing:
            raise ConfigurationError(f"{path} is missing: {', '.join(missing)}")

        return cls(
            url=str(section["url"]),
            key=str(section["key"]),
            secret=str(section["secret"]),
            authorized_header=_parse_bool(
                "authorized_header", section.get("authorized_header", True)
            ),
            timeout=_parse_timeout("timeout", section.get("timeout", cls.DEFAULT_TIMEOUT)),
        )

    @property
    def version(self) -> APIVersion:
        return self._version

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client_key(self) -> str:
        return self._key

    @property
    def client_secret(self) -> str:
        """The secret as used for signing ("secret&" over plain HTTP)."""
        return self._secret

    @property
    def authorized_header(self) -> bool:
        return self._authorized_header

    @property
    def is_secure(self) -> bool:
        return self._base_url.lower().startswith("https")

    @property
    def auth_mode(self) -> str:
        if not self.is_secure:
            return "oauth1"
        return "basic_header" if self._authorized_header else "query"

    # ---------------------------------------------------
    # Request building
    # ---------------------------------------------------
    def _basic_auth_header(self) -> str:
        token = base64.b64encode(f"{self._key}:{self._secret}".encode("iso-8859-1"))
        return "Basic " + token.decode("ascii")

    def build_endpoint(
        self,
        method: str,
        endpoint: str,
        params: Params = None,
        nonce: Optional[str] = None,
        timestamp: Optional[str] = None,
    ) -> str:
        """
        Return `endpoint` with its final query string (credentials or
        OAuth signature included when the auth mode needs them).

        The caller's params are never modified. Params whose value is None
        are left out.

        Raises:
            ValueError: Over plain HTTP, a param uses a reserved oauth_ name
        """
        query: Dict[str, Any] = {k: v for k, v in (params or {}).items() if v is not None}

        if self.is_secure:
            if not self._authorized_header:
                query.setdefault("consumer_key", self._key)
                query.setdefault("consumer_secret", self._secret)
        else:
            query = oauth.oauth_parameters(
                method,
                self._base_url + endpoint,
                self._key,
                self._secret,
                query,
                nonce=nonce,
                timestamp=timestamp,
            )

        if not query:
            return endpoint
        return f"{endpoint}?{oauth.build_query_string(query.items())}"

    def _encode_body(self, body: Any) -> Optional[bytes]:
        if body is None or body == "":
            return None
        if isinstance(body, str):
            return body.encode("utf-8")
        return codec.serialize(body).encode("utf-8")

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def send(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: Params = None,
    ) -> SendResult:
        """
        Send one request and return its body text or typed error.

        Args:
            endpoint: Path relative to the base url (e.g. "products/12")
            method: HEAD, GET, POST, PUT, PATCH or DELETE
            body: Pre-formed JSON string (sent verbatim) or an object for the codec
            params: Query parameters, in the order they should be sent

        Returns:
            SendResult holding the raw body (2xx) or one of ApiError,
            TransportError, SerializationError
        """
        method = method.upper()
        try:
            data = self._encode_body(body)
        except SerializationError as e:
            return SendResult(error=e)

        try:
            url = self._base_url + self.build_endpoint(method, endpoint, params)
        except ValueError as e:
            return SendResult(error=SerializationError(f"Cannot build query for {endpoint}: {e}"))

        headers = {}
        if data is not None:
            headers["Content-Type"] = "application/json; charset=utf-8"
        if self.is_secure and self._authorized_header:
            headers["Authorization"] = self._basic_auth_header()

        logger.debug("%s %s%s", method, self._base_url, endpoint)

        try:
            response = self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            error: TransportError = TransportTimeout(
                f"Request timed out calling {method} {endpoint}"
            )
            error.__cause__ = e
            return SendResult(error=error)
        except requests.RequestException as e:
            error = TransportError(f"Request failed calling {method} {endpoint}: {e}")
            error.__cause__ = e
            return SendResult(error=error)

        if not 200 <= response.status_code < 300:
            logger.debug("%s %s returned HTTP %s", method, endpoint, response.status_code)
            return SendResult(error=ApiError(response.status_code, response.text))

        return SendResult(body=response.text)

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: Params = None,
    ) -> str:
        """Like send(), but raises the typed error instead of returning it."""
        return self.send(endpoint, method, body, params).unwrap()

    def get_restful(self, endpoint: str, params: Params = None) -> str:
        return self.request(endpoint, "GET", None, params)

    def post_restful(self, endpoint: str, body: Any, params: Params = None) -> str:
        return self.request(endpoint, "POST", body, params)

    def put_restful(self, endpoint: str, body: Any, params: Params = None) -> str:
        return self.request(endpoint, "PUT", body, params)

    def delete_restful(self, endpoint: str, params: Params = None) -> str:
        return self.request(endpoint, "DELETE", None, params)

    # ---------------------------------------------------
    # JSON
    # ---------------------------------------------------
    def serialize_json(self, obj: Any) -> str:
        return codec.serialize(obj)

    def deserialize_json(self, text: str, target: Any) -> Any:
        return codec.deserialize(text, target)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RestAPI":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()
