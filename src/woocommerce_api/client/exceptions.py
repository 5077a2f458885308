from __future__ import annotations


class WooCommerceError(RuntimeError):
    """Base error for all client failures."""


class ConfigurationError(WooCommerceError):
    """Raised when the client configuration is missing or invalid."""


class TransportError(WooCommerceError):
    """Raised when the request never produced an HTTP response (DNS, refused connection...)."""


class TransportTimeout(TransportError):
    """Raised when the request times out."""


class SerializationError(WooCommerceError):
    """Raised when a request or response cannot be encoded or decoded."""


class ApiError(WooCommerceError):
    """Raised for non-success HTTP responses."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class ReadOnlyResourceError(WooCommerceError):
    """Raised when writing to a resource kind the store only lists."""
