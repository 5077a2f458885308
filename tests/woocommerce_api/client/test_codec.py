import json
from decimal import Decimal
from typing import List

import pytest

from woocommerce_api.client.codec import deserialize, format_money, serialize
from woocommerce_api.client.exceptions import SerializationError
from woocommerce_api.resources.schema import (
    BatchObject,
    Order,
    OrderRefund,
    Product,
    TaxRate,
)


@pytest.mark.unit
def test_money_is_written_as_rounded_string():
    payload = json.loads(serialize(Product(regular_price=19.999)))
    assert payload == {"regular_price": "20.00"}


@pytest.mark.unit
def test_money_is_written_with_period_separator():
    assert format_money(Decimal("1234.5")) == "1234.50"
    assert json.loads(serialize({"amount": Decimal("3")})) == {"amount": "3.00"}


@pytest.mark.unit
def test_money_read_from_string():
    product = deserialize('{"regular_price": "20.00"}', Product)
    assert product.regular_price == Decimal("20.00")


@pytest.mark.unit
def test_money_read_from_number_is_rounded():
    product = deserialize('{"regular_price": 19.999, "sale_price": 5}', Product)
    assert product.regular_price == Decimal("20.00")
    assert product.sale_price == Decimal("5.00")


@pytest.mark.unit
def test_money_rounding_uses_half_even():
    product = deserialize('{"regular_price": "10.005", "sale_price": "10.015"}', Product)
    assert product.regular_price == Decimal("10.00")
    assert product.sale_price == Decimal("10.02")


@pytest.mark.unit
@pytest.mark.parametrize("token", ['""', "null"])
def test_empty_money_into_nullable_field_is_none(token):
    product = deserialize('{"sale_price": %s}' % token, Product)
    assert product.sale_price is None


@pytest.mark.unit
@pytest.mark.parametrize("token", ['""', "null"])
def test_empty_money_into_required_field_fails(token):
    with pytest.raises(SerializationError):
        deserialize('{"amount": %s}' % token, OrderRefund)


@pytest.mark.unit
def test_empty_order_total_fails():
    with pytest.raises(SerializationError):
        deserialize('{"id": 1, "total": ""}', Order)


@pytest.mark.unit
@pytest.mark.parametrize("token", ['"abc"', "true", '{"v": 1}', '"1,50"'])
def test_unparseable_money_fails(token):
    with pytest.raises(SerializationError):
        deserialize('{"regular_price": %s}' % token, Product)


@pytest.mark.unit
def test_malformed_json_fails():
    with pytest.raises(SerializationError) as e:
        deserialize('{"id": ', Product)
    assert "Invalid JSON" in str(e.value)


@pytest.mark.unit
def test_unknown_fields_are_ignored():
    product = deserialize('{"id": 7, "_links": {"self": []}, "brand_new": 1}', Product)
    assert product.id == 7
    assert not hasattr(product, "brand_new")


@pytest.mark.unit
def test_unset_and_none_fields_are_omitted():
    payload = json.loads(serialize(Product(name="Mug", sku=None)))
    assert payload == {"name": "Mug"}


@pytest.mark.unit
def test_round_trip_of_read_model_keeps_only_received_fields():
    product = deserialize('{"id": 3, "name": "Mug", "price": "4.5"}', Product)
    assert json.loads(serialize(product)) == {"id": 3, "name": "Mug", "price": "4.50"}


@pytest.mark.unit
def test_deserialize_list():
    products = deserialize('[{"id": 1}, {"id": 2}]', List[Product])
    assert [p.id for p in products] == [1, 2]


@pytest.mark.unit
def test_batch_envelope_request_and_response():
    batch = BatchObject[Product](
        create=[Product(name="New")],
        delete=[5, 6],
    )
    assert json.loads(serialize(batch)) == {"create": [{"name": "New"}], "delete": [5, 6]}

    response = deserialize(
        '{"create": [{"id": 9, "name": "New"}], "delete": [{"id": 5}, {"id": 6}]}',
        BatchObject[Product],
    )
    assert response.create[0].id == 9
    assert [p.id for p in response.delete] == [5, 6]
    assert response.update is None


@pytest.mark.unit
def test_alias_fields_use_store_names():
    rate = TaxRate(tax_class="reduced-rate", rate=7)
    assert json.loads(serialize(rate)) == {"class": "reduced-rate", "rate": "7"}
    assert deserialize('{"class": "zero-rate"}', TaxRate).tax_class == "zero-rate"


@pytest.mark.unit
def test_unserializable_value_raises():
    with pytest.raises(SerializationError):
        serialize({"when": object()})


@pytest.mark.unit
def test_money_too_large_to_round_is_a_serialization_error():
    with pytest.raises(SerializationError):
        deserialize('{"regular_price": "1e30"}', Product)

    with pytest.raises(SerializationError):
        serialize({"regular_price": Decimal("1e30")})
