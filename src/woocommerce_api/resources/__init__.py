"""
WooCommerce API - Resource Façade

Typed records for every resource the store exposes, a static registry of
their endpoints, and one generic CRUD/batch accessor per kind.

Usage:
    from woocommerce_api.client import RestAPI
    from woocommerce_api.resources import WCObject, Product, BatchObject

    wc = WCObject(RestAPI.from_env())

    product = wc.products.get(42)
    wc.products.update(42, Product(sale_price="9.99"))
    wc.products.update_with_null(42, {"sale_price": None, "date_on_sale_to": None})
    wc.products.update_range(BatchObject[Product](update=[Product(id=42, featured=True)]))

    notes = wc.order_notes.get_all(parent_id=1001)
    wc.orders.delete(1001, force=True)
"""

from .items import NestedResource, Resource, null_fields_body
from .registry import RESOURCE_KINDS, ResourceKind, get_kind
from .schema import (
    Address,
    BatchObject,
    Coupon,
    Customer,
    Download,
    LineItem,
    MetaData,
    Order,
    OrderNote,
    OrderRefund,
    Product,
    ProductAttribute,
    ProductAttributeTerm,
    ProductCategory,
    ProductReview,
    ProductTag,
    Report,
    SalesReport,
    ShippingClass,
    TaxClass,
    TaxRate,
    TopSellerReport,
    Variation,
    WCModel,
    Webhook,
    WebhookDelivery,
)
from .wc_object import WCObject

__all__ = [
    "WCObject",
    "Resource",
    "NestedResource",
    "null_fields_body",
    "RESOURCE_KINDS",
    "ResourceKind",
    "get_kind",
    "Address",
    "BatchObject",
    "Coupon",
    "Customer",
    "Download",
    "LineItem",
    "MetaData",
    "Order",
    "OrderNote",
    "OrderRefund",
    "Product",
    "ProductAttribute",
    "ProductAttributeTerm",
    "ProductCategory",
    "ProductReview",
    "ProductTag",
    "Report",
    "SalesReport",
    "ShippingClass",
    "TaxClass",
    "TaxRate",
    "TopSellerReport",
    "Variation",
    "WCModel",
    "Webhook",
    "WebhookDelivery",
]
