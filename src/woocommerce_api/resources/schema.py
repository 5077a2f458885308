from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..client.codec import Money, OptionalMoney


class WCModel(BaseModel):
    """
    Base for all WooCommerce records.

    Records mirror the store's JSON schema:
    - every field is optional unless the store requires it
    - unknown fields from the store are ignored
    - unset/None fields are never sent back (see codec.to_payload)
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ------------------------------
# Shared building blocks
# ------------------------------


class MetaData(WCModel):
    id: Optional[int] = None
    key: Optional[str] = None
    value: Any = None


class Address(WCModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = Field(None, description="ISO code or name of the state")
    postcode: Optional[str] = None
    country: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 country code")
    email: Optional[str] = Field(None, description="Billing address only")
    phone: Optional[str] = Field(None, description="Billing address only")


class Dimensions(WCModel):
    length: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None


class Image(WCModel):
    id: Optional[int] = None
    date_created: Optional[str] = None
    date_modified: Optional[str] = None
    src: Optional[str] = None
    name: Optional[str] = None
    alt: Optional[str] = None
    position: Optional[int] = None


class TermRef(WCModel):
    """Category/tag reference embedded in a product."""

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class ProductAttributeLine(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    visible: Optional[bool] = None
    variation: Optional[bool] = None
    options: Optional[List[str]] = None


class VariationAttribute(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    option: Optional[str] = None


class DefaultAttribute(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    option: Optional[str] = None


# ------------------------------
# Coupons
# ------------------------------


class Coupon(WCModel):
    id: Optional[int] = None
    code: Optional[str] = None
    amount: OptionalMoney = Field(None, description="Discount amount or percentage")
    date_created: Optional[str] = None
    date_modified: Optional[str] = None
    discount_type: Optional[str] = Field(
        None, description="percent, fixed_cart or fixed_product"
    )
    description: Optional[str] = None
    date_expires: Optional[str] = None
    usage_count: Optional[int] = None
    individual_use: Optional[bool] = None
    product_ids: Optional[List[int]] = None
    excluded_product_ids: Optional[List[int]] = None
    usage_limit: Optional[int] = None
    usage_limit_per_user: Optional[int] = None
    limit_usage_to_x_items: Optional[int] = None
    free_shipping: Optional[bool] = None
    product_categories: Optional[List[int]] = None
    excluded_product_categories: Optional[List[int]] = None
    exclude_sale_items: Optional[bool] = None
    minimum_amount: OptionalMoney = None
    maximum_amount: OptionalMoney = None
    email_restrictions: Optional[List[str]] = None
    used_by: Optional[List[str]] = None
    meta_data: Optional[List[MetaData]] = None

    @field_validator(
        "product_ids",
        "excluded_product_ids",
        "product_categories",
        "excluded_product_categories",
        mode="before",
    )
    @classmethod
    def validate_id_lists(cls, v):
        # The store sends some empty id lists as {}
        if v == {}:
            return []
        return v


# ------------------------------
# Customers
# ------------------------------


class Customer(WCModel):
    id: Optional[int] = None
    date_created: Optional[str] = None
    date_modified: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = Field(None, description="Write-only")
    last_order: Optional[Dict[str, Any]] = None
    orders_count: Optional[int] = None
    total_spent: OptionalMoney = None
    avatar_url: Optional[str] = None
    is_paying_customer: Optional[bool] = None
    billing: Optional[Address] = None
    shipping: Optional[Address] = None
    meta_data: Optional[List[MetaData]] = None

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class Download(WCModel):
    download_id: Optional[str] = None
    download_url: Optional[str] = None
    product_id: Optional[int] = None
    download_name: Optional[str] = None
    order_id: Optional[int] = None
    order_key: Optional[str] = None
    downloads_remaining: Optional[str] = None
    access_expires: Optional[str] = None
    file: Optional[Dict[str, Any]] = None


# ------------------------------
# Orders
# ------------------------------


class LineItem(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    product_id: Optional[int] = None
    variation_id: Optional[int] = None
    quantity: Optional[int] = None
    tax_class: Optional[str] = None
    price: OptionalMoney = None
    subtotal: OptionalMoney = None
    subtotal_tax: OptionalMoney = None
    total: OptionalMoney = None
    total_tax: OptionalMoney = None
    taxes: Optional[List[Dict[str, Any]]] = None
    meta_data: Optional[List[MetaData]] = None


class TaxLine(WCModel):
    id: Optional[int] = None
    rate_code: Optional[str] = None
    rate_id: Optional[int] = None
    label: Optional[str] = None
    compound: Optional[bool] = None
    tax_total: OptionalMoney = None
    shipping_tax_total: OptionalMoney = None
    meta_data: Optional[List[MetaData]] = None


class ShippingLine(WCModel):
    id: Optional[int] = None
    method_title: Optional[str] = None
    method_id: Optional[str] = None
    total: OptionalMoney = None
    total_tax: OptionalMoney = None
    taxes: Optional[List[Dict[str, Any]]] = None
    meta_data: Optional[List[MetaData]] = None


class FeeLine(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    tax_class: Optional[str] = None
    tax_status: Optional[str] = None
    total: OptionalMoney = None
    total_tax: OptionalMoney = None
    taxes: Optional[List[Dict[str, Any]]] = None
    meta_data: Optional[List[MetaData]] = None


class CouponLine(WCModel):
    id: Optional[int] = None
    code: Optional[str] = None
    discount: OptionalMoney = None
    discount_tax: OptionalMoney = None
    meta_data: Optional[List[MetaData]] = None


class RefundLine(WCModel):
    """Refund summary embedded in an order."""

    id: Optional[int] = None
    reason: Optional[str] = None
    total: OptionalMoney = None


class Order(WCModel):
    id: Optional[int] = None
    parent_id: Optional[int] = None
    number: Optional[str] = None
    order_key: Optional[str] = None
    created_via: Optional[str] = None
    version: Optional[str] = None
    status: Optional[str] = None
    currency: Optional[str] = None
    date_created: Optional[str] = None
    date_modified: Optional[str] = None
    discount_total: OptionalMoney = None
    discount_tax: OptionalMoney = None
    shipping_total: OptionalMoney = None
    shipping_tax: OptionalMoney = None
    cart_tax: OptionalMoney = None
    # The store always reports a grand total; an empty one is a broken payload
    total: Money = Decimal("0.00")
    total_tax: OptionalMoney = None
    prices_include_tax: Optional[bool] = None
    customer_id: Optional[int] = None
    customer_ip_address: Optional[str] = None
    customer_user_agent: Optional[str] = None
    customer_note: Optional[str] = None
    billing: Optional[Address] = None
    shipping: Optional[Address] = None
    payment_method: Optional[str] = None
    payment_method_title: Optional[str] = None
    transaction_id: Optional[str] = None
    date_paid: Optional[str] = None
    date_completed: Optional[str] = None
    cart_hash: Optional[str] = None
    set_paid: Optional[bool] = Field(None, description="Write-only")
    meta_data: Optional[List[MetaData]] = None
    line_items: Optional[List[LineItem]] = None
    tax_lines: Optional[List[TaxLine]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    fee_lines: Optional[List[FeeLine]] = None
    coupon_lines: Optional[List[CouponLine]] = None
    refunds: Optional[List[RefundLine]] = None


class OrderNote(WCModel):
    id: Optional[int] = None
    author: Optional[str] = None
    date_created: Optional[str] = None
    note: Optional[str] = None
    customer_note: Optional[bool] = Field(
        None, description="True if the note is shown to the customer"
    )
    added_by_user: Optional[bool] = None


class OrderRefund(WCModel):
    id: Optional[int] = None
    date_created: Optional[str] = None
    amount: Money = Field(..., description="Refund amount (required)")
    reason: Optional[str] = None
    refunded_by: Optional[int] = None
    refunded_payment: Optional[bool] = None
    api_refund: Optional[bool] = Field(None, description="Write-only")
    line_items: Optional[List[LineItem]] = None
    meta_data: Optional[List[MetaData]] = None


# ------------------------------
# Products
# ------------------------------


class Product(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    permalink: Optional[str] = None
    date_created: Optional[str] = None
    date_modified: Optional[str] = None
    type: Optional[str] = Field(None, description="simple, grouped, external or variable")
    status: Optional[str] = None
    featured: Optional[bool] = None
    catalog_visibility: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    price: OptionalMoney = Field(None, description="Current price (read-only)")
    regular_price: OptionalMoney = None
    sale_price: OptionalMoney = None
    date_on_sale_from: Optional[str] = None
    date_on_sale_to: Optional[str] = None
    price_html: Optional[str] = None
    on_sale: Optional[bool] = None
    purchasable: Optional[bool] = None
    total_sales: Optional[int] = None
    virtual: Optional[bool] = None
    downloadable: Optional[bool] = None
    downloads: Optional[List[Dict[str, Any]]] = None
    download_limit: Optional[int] = None
    download_expiry: Optional[int] = None
    external_url: Optional[str] = None
    button_text: Optional[str] = None
    tax_status: Optional[str] = None
    tax_class: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: Optional[int] = None
    in_stock: Optional[bool] = None
    stock_status: Optional[str] = None
    backorders: Optional[str] = None
    backorders_allowed: Optional[bool] = None
    backordered: Optional[bool] = None
    sold_individually: Optional[bool] = None
    weight: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    shipping_required: Optional[bool] = None
    shipping_taxable: Optional[bool] = None
    shipping_class: Optional[str] = None
    shipping_class_id: Optional[int] = None
    reviews_allowed: Optional[bool] = None
    average_rating: Optional[str] = None
    rating_count: Optional[int] = None
    related_ids: Optional[List[int]] = None
    upsell_ids: Optional[List[int]] = None
    cross_sell_ids: Optional[List[int]] = None
    parent_id: Optional[int] = None
    purchase_note: Optional[str] = None
    categories: Optional[List[TermRef]] = None
    tags: Optional[List[TermRef]] = None
    images: Optional[List[Image]] = None
    attributes: Optional[List[ProductAttributeLine]] = None
    default_attributes: Optional[List[DefaultAttribute]] = None
    # ids (v2+) or embedded variation objects (v1)
    variations: Optional[List[Union[int, Dict[str, Any]]]] = None
    grouped_products: Optional[List[int]] = None
    menu_order: Optional[int] = None
    meta_data: Optional[List[MetaData]] = None


class Variation(WCModel):
    id: Optional[int] = None
    date_created: Optional[str] = None
    date_modified: Optional[str] = None
    description: Optional[str] = None
    permalink: Optional[str] = None
    sku: Optional[str] = None
    price: OptionalMoney = None
    regular_price: OptionalMoney = None
    sale_price: OptionalMoney = None
    date_on_sale_from: Optional[str] = None
    date_on_sale_to: Optional[str] = None
    on_sale: Optional[bool] = None
    visible: Optional[bool] = None
    status: Optional[str] = None
    purchasable: Optional[bool] = None
    virtual: Optional[bool] = None
    downloadable: Optional[bool] = None
    tax_status: Optional[str] = None
    tax_class: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: Optional[int] = None
    in_stock: Optional[bool] = None
    stock_status: Optional[str] = None
    backorders: Optional[str] = None
    weight: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    shipping_class: Optional[str] = None
    shipping_class_id: Optional[int] = None
    image: Optional[Union[Image, List[Image]]] = None
    attributes: Optional[List[VariationAttribute]] = None
    menu_order: Optional[int] = None
    meta_data: Optional[List[MetaData]] = None


class ProductReview(WCModel):
    id: Optional[int] = None
    date_created: Optional[str] = None
    review: Optional[str] = None
    rating: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    verified: Optional[bool] = None


class ProductCategory(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    parent: Optional[int] = None
    description: Optional[str] = None
    display: Optional[str] = None
    image: Optional[Image] = None
    menu_order: Optional[int] = None
    count: Optional[int] = None

    @field_validator("image", mode="before")
    @classmethod
    def validate_image(cls, v):
        # Categories without an image come back as [] instead of null
        if v == [] or v == "":
            return None
        return v


class ProductAttribute(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    type: Optional[str] = None
    order_by: Optional[str] = None
    has_archives: Optional[bool] = None


class ProductAttributeTerm(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    menu_order: Optional[int] = None
    count: Optional[int] = None


class ShippingClass(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    count: Optional[int] = None


class ProductTag(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    count: Optional[int] = None


# ------------------------------
# Taxes
# ------------------------------


class TaxRate(WCModel):
    id: Optional[int] = None
    country: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    postcodes: Optional[List[str]] = None
    cities: Optional[List[str]] = None
    # Kept as text: the store uses 4 decimal places for tax rates
    rate: Optional[str] = None
    name: Optional[str] = None
    priority: Optional[int] = None
    compound: Optional[bool] = None
    shipping: Optional[bool] = None
    order: Optional[int] = None
    tax_class: Optional[str] = Field(None, alias="class")

    @field_validator("rate", mode="before")
    @classmethod
    def validate_rate(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class TaxClass(WCModel):
    slug: Optional[str] = None
    name: Optional[str] = None


# ------------------------------
# Reports
# ------------------------------


class Report(WCModel):
    slug: Optional[str] = None
    description: Optional[str] = None


class SalesReport(WCModel):
    total_sales: OptionalMoney = None
    net_sales: OptionalMoney = None
    average_sales: OptionalMoney = None
    total_orders: Optional[int] = None
    total_items: Optional[int] = None
    total_tax: OptionalMoney = None
    total_shipping: OptionalMoney = None
    total_refunds: OptionalMoney = None
    total_discount: OptionalMoney = None
    totals_grouped_by: Optional[str] = None
    totals: Optional[Dict[str, Any]] = None


class TopSellerReport(WCModel):
    title: Optional[str] = None
    product_id: Optional[int] = None
    quantity: Optional[int] = None


# ------------------------------
# Webhooks
# ------------------------------


class Webhook(WCModel):
    id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = Field(None, description="active, paused or disabled")
    topic: Optional[str] = Field(None, description="e.g. order.created")
    resource: Optional[str] = None
    event: Optional[str] = None
    hooks: Optional[List[str]] = None
    delivery_url: Optional[str] = None
    secret: Optional[str] = Field(None, description="Write-only")
    date_created: Optional[str] = None
    date_modified: Optional[str] = None


class WebhookDelivery(WCModel):
    id: Optional[int] = None
    duration: Optional[str] = None
    summary: Optional[str] = None
    request_method: Optional[str] = None
    request_url: Optional[str] = None
    request_headers: Optional[Dict[str, Any]] = None
    request_body: Optional[str] = None
    response_code: Optional[str] = None
    response_message: Optional[str] = None
    response_headers: Optional[Dict[str, Any]] = None
    response_body: Optional[str] = None
    date_created: Optional[str] = None


# ------------------------------
# Batch envelope
# ------------------------------

ModelT = TypeVar("ModelT", bound=WCModel)


class BatchObject(WCModel, Generic[ModelT]):
    """
    create/update/delete bundle for one resource kind.

    Requests carry ids in `delete`; responses echo the deleted records.
    """

    create: Optional[List[ModelT]] = None
    update: Optional[List[ModelT]] = None
    delete: Optional[List[Union[int, ModelT]]] = None
