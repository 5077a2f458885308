"""
Request signing for plain-HTTP stores.

WooCommerce only accepts Basic auth or query credentials over HTTPS. Over
plain HTTP every request carries a one-legged OAuth 1.0a signature
(HMAC-SHA256, https://tools.ietf.org/html/rfc5849#section-3.1).
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
import uuid
from typing import Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote


SIGNATURE_METHOD = "HMAC-SHA256"


def to_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def percent_encode(value: object) -> str:
    """RFC 3986 encoding: only A-Z a-z 0-9 - . _ ~ are left as-is."""
    return quote(to_text(value), safe="")


def build_query_string(params: Iterable[Tuple[str, object]]) -> str:
    return "&".join(f"{percent_encode(k)}={percent_encode(v)}" for k, v in params)


def generate_nonce() -> str:
    return uuid.uuid4().hex


def generate_timestamp() -> str:
    return str(int(time.time()))


def signature_base_string(method: str, url: str, params: Mapping[str, object]) -> str:
    """
    METHOD&enc(url)&enc(sorted query)

    The query is sorted by key before encoding; the final request keeps
    insertion order.
    """
    sorted_query = build_query_string(sorted(params.items(), key=lambda kv: kv[0]))
    return f"{method.upper()}&{percent_encode(url)}&{percent_encode(sorted_query)}"


def sign(secret: str, base_string: str) -> str:
    digest = hmac.new(
        secret.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def oauth_parameters(
    method: str,
    url: str,
    consumer_key: str,
    secret: str,
    params: Optional[Mapping[str, object]] = None,
    nonce: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> Dict[str, object]:
    """
    Build the full, signed parameter set for a request.

    Args:
        method: HTTP method
        url: Absolute request URL without query (base URL + endpoint)
        consumer_key: API key
        secret: Signing secret, already in the form the store expects
        params: Caller query parameters
        nonce: Fixed nonce (tests); a fresh uuid4 hex otherwise
        timestamp: Fixed timestamp (tests); current epoch seconds otherwise

    Returns:
        Ordered dict: oauth_* fields, caller params, then oauth_signature

    Raises:
        ValueError: A caller param uses a reserved oauth_ name
    """
    signed: Dict[str, object] = {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce or generate_nonce(),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp or generate_timestamp(),
    }
    if params:
        reserved = sorted(k for k in params if str(k).startswith("oauth_"))
        if reserved:
            raise ValueError(f"Query parameters may not override OAuth fields: {reserved}")
        signed.update(params)

    signed["oauth_signature"] = sign(secret, signature_base_string(method, url, signed))
    return signed
