"""
Resource endpoint registry.

One static entry per resource kind: its path segment, its model, and its
parent kind for nested collections (e.g. order notes live under
orders/<order_id>/notes). Endpoint paths are built from this table only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Type
from urllib.parse import quote

from . import schema


@dataclass(frozen=True)
class ResourceKind:
    name: str
    path: str
    model: Type[schema.WCModel]
    parent: Optional[str] = None
    # Kinds the store only lists (no create/update/delete/batch)
    read_only: bool = False
    field_names: Tuple[str, ...] = field(init=False)
    # Python attribute name or store name -> store name
    _store_names: Mapping[str, str] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        fields = self.model.model_fields
        names = tuple(f.alias or name for name, f in fields.items())
        lookup = {name: name for name in names}
        lookup.update({name: f.alias or name for name, f in fields.items()})
        object.__setattr__(self, "field_names", names)
        object.__setattr__(self, "_store_names", lookup)

    def store_field_name(self, name: str) -> str:
        """
        Store (wire) name for a field given by attribute or store name.

        Raises:
            ValueError: The model has no such field
        """
        try:
            return self._store_names[name]
        except KeyError:
            raise ValueError(
                f"{self.name} has no field {name!r}. Known fields: {list(self.field_names)}"
            ) from None

    @property
    def is_nested(self) -> bool:
        return self.parent is not None


_KINDS = (
    ResourceKind("coupons", "coupons", schema.Coupon),
    ResourceKind("customers", "customers", schema.Customer),
    ResourceKind("customer_downloads", "downloads", schema.Download, parent="customers", read_only=True),
    ResourceKind("orders", "orders", schema.Order),
    ResourceKind("order_notes", "notes", schema.OrderNote, parent="orders"),
    ResourceKind("order_refunds", "refunds", schema.OrderRefund, parent="orders"),
    ResourceKind("products", "products", schema.Product),
    ResourceKind("product_variations", "variations", schema.Variation, parent="products"),
    ResourceKind("product_reviews", "reviews", schema.ProductReview, parent="products"),
    ResourceKind("product_categories", "products/categories", schema.ProductCategory),
    ResourceKind("product_attributes", "products/attributes", schema.ProductAttribute),
    ResourceKind("product_attribute_terms", "terms", schema.ProductAttributeTerm, parent="product_attributes"),
    ResourceKind("shipping_classes", "products/shipping_classes", schema.ShippingClass),
    ResourceKind("product_tags", "products/tags", schema.ProductTag),
    ResourceKind("tax_rates", "taxes", schema.TaxRate),
    ResourceKind("tax_classes", "taxes/classes", schema.TaxClass),
    ResourceKind("webhooks", "webhooks", schema.Webhook),
    ResourceKind("webhook_deliveries", "deliveries", schema.WebhookDelivery, parent="webhooks", read_only=True),
)

RESOURCE_KINDS: Dict[str, ResourceKind] = {kind.name: kind for kind in _KINDS}


def get_kind(name: str) -> ResourceKind:
    """
    Look up a resource kind by name.

    Raises:
        ValueError: If the name is not registered
    """
    try:
        return RESOURCE_KINDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown resource kind: {name}. "
            f"Available kinds: {list(RESOURCE_KINDS.keys())}"
        ) from None


def quote_segment(value: object) -> str:
    """Percent-encode one id for use as a single path segment."""
    return quote(str(value), safe="")


def collection_path(kind: ResourceKind, parent_id: object = None) -> str:
    """
    Path of a kind's collection, e.g. "products" or "orders/12/notes".

    Raises:
        ValueError: Nested kind without a parent id
    """
    if not kind.is_nested:
        return kind.path
    if parent_id is None or parent_id == "":
        raise ValueError(f"{kind.name} is nested under {kind.parent}; a parent id is required")
    parent = get_kind(kind.parent)
    return f"{collection_path(parent)}/{quote_segment(parent_id)}/{kind.path}"


def item_path(kind: ResourceKind, item_id: object, parent_id: object = None) -> str:
    return f"{collection_path(kind, parent_id)}/{quote_segment(item_id)}"


def batch_path(kind: ResourceKind, parent_id: object = None) -> str:
    return f"{collection_path(kind, parent_id)}/batch"
