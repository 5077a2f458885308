"""
WooCommerce API client.

Layers:
- client: transport, request signing, JSON codec and typed errors
- resources: typed records and per-resource CRUD/batch calls
"""

from .client import (
    ApiError,
    APIVersion,
    ConfigurationError,
    ReadOnlyResourceError,
    RestAPI,
    SerializationError,
    TransportError,
    WooCommerceError,
)
from .resources import WCObject

__version__ = "0.1.0"
__all__ = [
    "APIVersion",
    "ApiError",
    "ConfigurationError",
    "ReadOnlyResourceError",
    "RestAPI",
    "SerializationError",
    "TransportError",
    "WCObject",
    "WooCommerceError",
]
