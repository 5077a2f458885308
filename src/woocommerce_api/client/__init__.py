"""
WooCommerce API - Transport Core

Builds authenticated requests against a store's REST API, sends them with
`requests`, and maps every outcome to a body or a typed error.

Authentication depends on the base url:

    https + authorized_header=True   -> Authorization: Basic base64(key:secret)
    https + authorized_header=False  -> consumer_key / consumer_secret query params
    http                             -> OAuth 1.0a HMAC-SHA256 signed query string

Usage:
------
    from woocommerce_api.client import RestAPI

    api = RestAPI("https://store.example/wp-json/wc/v2", "ck_...", "cs_...")
    result = api.send("products", "GET", params={"per_page": 20})
    if result.ok:
        print(result.body)

Configuration:
--------------
`RestAPI.from_env()` reads:

    WOOCOMMERCE_URL          - REST API url (must end with wp-json/wc/vN)
    WOOCOMMERCE_KEY          - Consumer key
    WOOCOMMERCE_SECRET       - Consumer secret
    WOOCOMMERCE_AUTH_HEADER  - Credentials in header over HTTPS (default: true)
    WOOCOMMERCE_TIMEOUT_SEC  - Request timeout (default: 30)

`RestAPI.from_config(path)` reads the same values from a YAML file.
"""

# -----------------------------------------------------------------------------
# Transport
# -----------------------------------------------------------------------------
from .client_base import APIVersion, RestAPI, SendResult, detect_version

# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
from .exceptions import (
    ApiError,
    ConfigurationError,
    ReadOnlyResourceError,
    SerializationError,
    TransportError,
    TransportTimeout,
    WooCommerceError,
)

# -----------------------------------------------------------------------------
# JSON codec (money fields)
# -----------------------------------------------------------------------------
from .codec import Money, OptionalMoney, deserialize, serialize


__all__ = [
    # Transport
    "APIVersion",
    "RestAPI",
    "SendResult",
    "detect_version",
    # Errors
    "ApiError",
    "ConfigurationError",
    "ReadOnlyResourceError",
    "SerializationError",
    "TransportError",
    "TransportTimeout",
    "WooCommerceError",
    # Codec
    "Money",
    "OptionalMoney",
    "deserialize",
    "serialize",
]
