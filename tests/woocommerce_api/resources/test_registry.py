import dataclasses

import pytest

from woocommerce_api.resources import registry
from woocommerce_api.resources.schema import OrderRefund, TaxRate


@pytest.mark.unit
def test_every_nested_kind_has_a_registered_parent():
    for kind in registry.RESOURCE_KINDS.values():
        if kind.is_nested:
            assert kind.parent in registry.RESOURCE_KINDS
            assert not registry.get_kind(kind.parent).is_nested


@pytest.mark.unit
def test_unknown_kind_raises():
    with pytest.raises(ValueError) as e:
        registry.get_kind("gift_cards")
    assert "Available kinds" in str(e.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, parent_id, expected",
    [
        ("products", None, "products"),
        ("product_categories", None, "products/categories"),
        ("tax_classes", None, "taxes/classes"),
        ("order_refunds", 12, "orders/12/refunds"),
        ("webhook_deliveries", 4, "webhooks/4/deliveries"),
        ("customer_downloads", 8, "customers/8/downloads"),
    ],
)
def test_collection_paths(name, parent_id, expected):
    assert registry.collection_path(registry.get_kind(name), parent_id) == expected


@pytest.mark.unit
def test_item_and_batch_paths():
    refunds = registry.get_kind("order_refunds")
    assert registry.item_path(refunds, 3, 12) == "orders/12/refunds/3"
    assert registry.batch_path(registry.get_kind("coupons")) == "coupons/batch"
    assert registry.item_path(registry.get_kind("tax_classes"), "reduced-rate") == (
        "taxes/classes/reduced-rate"
    )


@pytest.mark.unit
def test_field_names_are_store_names():
    tax_rates = registry.get_kind("tax_rates")
    assert "class" in tax_rates.field_names
    assert "tax_class" not in tax_rates.field_names
    assert tax_rates.model is TaxRate
    assert registry.get_kind("order_refunds").field_names[:3] == ("id", "date_created", "amount")
    assert registry.get_kind("order_refunds").model is OrderRefund


@pytest.mark.unit
def test_kinds_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        registry.get_kind("products").path = "items"


@pytest.mark.unit
def test_ids_are_escaped_as_single_segments():
    notes = registry.get_kind("order_notes")
    assert registry.item_path(notes, "a/b", "7#x") == "orders/7%23x/notes/a%2Fb"
    assert registry.quote_segment(12) == "12"


@pytest.mark.unit
def test_store_field_name_maps_attribute_names():
    tax_rates = registry.get_kind("tax_rates")
    assert tax_rates.store_field_name("tax_class") == "class"
    assert tax_rates.store_field_name("class") == "class"
    assert tax_rates.store_field_name("rate") == "rate"
    with pytest.raises(ValueError):
        tax_rates.store_field_name("klass")
