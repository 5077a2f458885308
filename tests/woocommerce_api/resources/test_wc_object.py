from unittest.mock import patch

import pytest

from woocommerce_api.client.client_base import RestAPI, SendResult
from woocommerce_api.client.exceptions import ConfigurationError, SerializationError
from woocommerce_api.resources import RESOURCE_KINDS, WCObject
from woocommerce_api.resources.items import NestedResource, Resource


def make_wc(url="https://store.example/wp-json/wc/v2", body="{}"):
    api = RestAPI(url, "ck", "cs")
    send = patch.object(api, "send", return_value=SendResult(body=body)).start()
    return WCObject(api), send


@pytest.fixture(autouse=True)
def stop_patches():
    yield
    patch.stopall()


@pytest.mark.unit
def test_third_party_plugin_url_is_rejected():
    api = RestAPI("https://store.example/wp-json/wc-bookings/v1", "ck", "cs")
    with pytest.raises(ConfigurationError):
        WCObject(api)


@pytest.mark.unit
def test_one_accessor_per_registered_kind():
    wc, _ = make_wc()
    for name, kind in RESOURCE_KINDS.items():
        accessor = wc.resource(name)
        expected = NestedResource if kind.is_nested else Resource
        assert isinstance(accessor, expected)
        assert accessor.kind is kind

    with pytest.raises(ValueError):
        wc.resource("api")


@pytest.mark.unit
def test_products_get_all_scenario():
    wc, send = make_wc(body='[{"id": 1}]')
    assert wc.api.version == 2
    assert wc.api.auth_mode == "basic_header"

    products = wc.products.get_all()
    send.assert_called_once_with("products", "GET", None, None)
    assert products[0].id == 1


@pytest.mark.unit
def test_store_info():
    wc, send = make_wc(body='{"store": {"name": "Shop"}}')
    assert wc.get_store_info() == {"store": {"name": "Shop"}}
    assert send.call_args[0][:2] == ("", "GET")


@pytest.mark.unit
def test_coupon_by_code_v1_uses_code_path():
    wc, send = make_wc("https://store.example/wp-json/wc/v1", body='{"id": 3, "code": "SALE"}')
    coupon = wc.get_coupon_by_code("SALE")
    assert send.call_args[0][0] == "coupons/code/SALE"
    assert coupon.code == "SALE"


@pytest.mark.unit
def test_coupon_by_code_v2_filters_listing():
    wc, send = make_wc(body='[{"id": 3, "code": "SALE"}]')
    coupon = wc.get_coupon_by_code("SALE")
    endpoint, _, _, params = send.call_args[0]
    assert endpoint == "coupons"
    assert params == {"code": "SALE"}
    assert coupon.id == 3


@pytest.mark.unit
def test_customer_by_email_returns_none_when_missing():
    wc, send = make_wc(body="[]")
    caller_params = {"role": "all"}
    assert wc.get_customer_by_email("nobody@example.com", caller_params) is None
    assert send.call_args[0][3] == {"role": "all", "email": "nobody@example.com"}
    assert caller_params == {"role": "all"}


@pytest.mark.unit
def test_order_statuses_are_decoded_pairs():
    wc, _ = make_wc(body='{"order_statuses": {"pending": "Pending payment", "wc-completed": "Completed"}}')
    assert wc.get_order_statuses() == [
        ("pending", "Pending payment"),
        ("wc-completed", "Completed"),
    ]


@pytest.mark.unit
def test_order_statuses_unexpected_shape():
    wc, _ = make_wc(body='{"order_statuses": ["pending"]}')
    with pytest.raises(SerializationError):
        wc.get_order_statuses()


@pytest.mark.unit
def test_reports():
    wc, send = make_wc(body='[{"slug": "sales", "description": "List of sales reports."}]')
    reports = wc.get_reports()
    assert reports[0].slug == "sales"

    send.return_value = SendResult(body='[{"total_sales": "100.5", "total_orders": 2}]')
    sales = wc.get_sales_report({"period": "week"})
    assert send.call_args[0][0] == "reports/sales"
    assert str(sales[0].total_sales) == "100.50"


@pytest.mark.unit
@pytest.mark.parametrize(
    "url, endpoint",
    [
        ("https://store.example/wp-json/wc/v1", "reports/sales/top_sellers"),
        ("https://store.example/wp-json/wc/v2", "reports/top_sellers"),
        ("https://store.example/wp-json/wc/v3", "reports/top_sellers"),
    ],
)
def test_top_sellers_endpoint_by_version(url, endpoint):
    wc, send = make_wc(url, body='[{"title": "Mug", "product_id": 4, "quantity": 9}]')
    sellers = wc.get_top_sellers_report()
    assert send.call_args[0][0] == endpoint
    assert sellers[0].quantity == 9


@pytest.mark.unit
def test_coupon_code_is_escaped_in_v1_path():
    wc, send = make_wc("https://store.example/wp-json/wc/v1", body='{"id": 9, "code": "A#1"}')
    coupon = wc.get_coupon_by_code("A#1")
    assert send.call_args[0][0] == "coupons/code/A%231"
    assert coupon.id == 9
