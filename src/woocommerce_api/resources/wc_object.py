from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..client.client_base import APIVersion, Params, RestAPI
from ..client.exceptions import ConfigurationError, SerializationError
from . import registry, schema
from .items import NestedResource, Resource
from .registry import RESOURCE_KINDS


CORE_VERSIONS = (APIVersion.VERSION1, APIVersion.VERSION2, APIVersion.VERSION3)


class WCObject:
    """
    Store-level entry point: one resource accessor per registered kind,
    plus the few endpoints that do not follow the CRUD pattern
    (store info, reports, lookups by code/email, order statuses).

    Example:
        api = RestAPI("https://store.example/wp-json/wc/v2", key, secret)
        wc = WCObject(api)
        product = wc.products.get(42)
        notes = wc.order_notes.get_all(parent_id=1001)
    """

    def __init__(self, api: RestAPI) -> None:
        if api.version not in CORE_VERSIONS:
            raise ConfigurationError(
                "WCObject needs a core WooCommerce REST API url, "
                "e.g. https://yourstore/wp-json/wc/v2"
            )
        self.api = api

        self.coupons: Resource[schema.Coupon] = Resource(api, "coupons")
        self.customers: Resource[schema.Customer] = Resource(api, "customers")
        self.customer_downloads: NestedResource[schema.Download] = NestedResource(api, "customer_downloads")
        self.orders: Resource[schema.Order] = Resource(api, "orders")
        self.order_notes: NestedResource[schema.OrderNote] = NestedResource(api, "order_notes")
        self.order_refunds: NestedResource[schema.OrderRefund] = NestedResource(api, "order_refunds")
        self.products: Resource[schema.Product] = Resource(api, "products")
        self.product_variations: NestedResource[schema.Variation] = NestedResource(api, "product_variations")
        self.product_reviews: NestedResource[schema.ProductReview] = NestedResource(api, "product_reviews")
        self.product_categories: Resource[schema.ProductCategory] = Resource(api, "product_categories")
        self.product_attributes: Resource[schema.ProductAttribute] = Resource(api, "product_attributes")
        self.product_attribute_terms: NestedResource[schema.ProductAttributeTerm] = NestedResource(
            api, "product_attribute_terms"
        )
        self.shipping_classes: Resource[schema.ShippingClass] = Resource(api, "shipping_classes")
        self.product_tags: Resource[schema.ProductTag] = Resource(api, "product_tags")
        self.tax_rates: Resource[schema.TaxRate] = Resource(api, "tax_rates")
        self.tax_classes: Resource[schema.TaxClass] = Resource(api, "tax_classes")
        self.webhooks: Resource[schema.Webhook] = Resource(api, "webhooks")
        self.webhook_deliveries: NestedResource[schema.WebhookDelivery] = NestedResource(
            api, "webhook_deliveries"
        )

    def resource(self, name: str):
        """Accessor for a registered kind by name (e.g. "order_notes")."""
        if name not in RESOURCE_KINDS:
            raise ValueError(f"Unknown resource kind: {name}")
        return getattr(self, name)

    # -------------------------------------------------
    # Store
    # -------------------------------------------------
    def get_store_info(self) -> Dict[str, Any]:
        return self.api.deserialize_json(self.api.get_restful(""), Dict[str, Any])

    # -------------------------------------------------
    # Lookups
    # -------------------------------------------------
    def get_coupon_by_code(self, code: str, params: Params = None) -> Optional[schema.Coupon]:
        if self.api.version == APIVersion.VERSION1:
            path = f"{self.coupons.endpoint}/code/{registry.quote_segment(code)}"
            return self.api.deserialize_json(self.api.get_restful(path, params), schema.Coupon)

        query = dict(params or {})
        query["code"] = code
        coupons = self.coupons.get_all(query)
        return coupons[0] if coupons else None

    def get_customer_by_email(self, email: str, params: Params = None) -> Optional[schema.Customer]:
        query = dict(params or {})
        query["email"] = email
        customers = self.customers.get_all(query)
        return customers[0] if customers else None

    def get_order_statuses(self, params: Params = None) -> List[Tuple[str, str]]:
        """
        Order status slugs and labels, e.g. [("pending", "Pending payment"), ...].

        Accepts both {"order_statuses": {...}} and a bare {slug: label} object.
        """
        data = self.api.deserialize_json(
            self.api.get_restful("orders/statuses", params), Dict[str, Any]
        )
        statuses = data.get("order_statuses", data)
        if not isinstance(statuses, dict):
            raise SerializationError(f"Unexpected order statuses payload: {data!r}")
        return [(str(slug), str(label)) for slug, label in statuses.items()]

    # -------------------------------------------------
    # Reports
    # -------------------------------------------------
    def get_reports(self, params: Params = None) -> List[schema.Report]:
        return self.api.deserialize_json(
            self.api.get_restful("reports", params), List[schema.Report]
        )

    def get_sales_report(self, params: Params = None) -> List[schema.SalesReport]:
        return self.api.deserialize_json(
            self.api.get_restful("reports/sales", params), List[schema.SalesReport]
        )

    def get_top_sellers_report(self, params: Params = None) -> List[schema.TopSellerReport]:
        if self.api.version == APIVersion.VERSION1:
            endpoint = "reports/sales/top_sellers"
        else:
            endpoint = "reports/top_sellers"
        return self.api.deserialize_json(
            self.api.get_restful(endpoint, params), List[schema.TopSellerReport]
        )
