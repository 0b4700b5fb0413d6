from __future__ import annotations
from typing import Optional

from .model import Model
from .fields import Integer, Decimal, String, Boolean, DateTime, Enum, Nested, List
from .common import MetaData
from ..utils import FakeHelper
from ..constants import ModelMethod, OrderStatus, OrderTaxStatus, Currency


class Billing(Model):
    IDENTIFIER = None

    first_name = String(fake=FakeHelper.first_name)
    last_name = String(fake=FakeHelper.last_name)
    company = String(fake=FakeHelper.company)
    address_1 = String(fake=FakeHelper.address)
    address_2 = String(fake=FakeHelper.address)
    city = String(fake=FakeHelper.city)
    state = String(fake=FakeHelper.state)
    postcode = String(fake=FakeHelper.zip_code)
    country = String(fake=FakeHelper.country_code)
    email = String(fake=FakeHelper.email)
    phone = String(fake=FakeHelper.phone_number)

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name) if part)


class Shipping(Model):
    IDENTIFIER = None

    first_name = String(fake=FakeHelper.first_name)
    last_name = String(fake=FakeHelper.last_name)
    company = String(fake=FakeHelper.company)
    address_1 = String(fake=FakeHelper.address)
    address_2 = String(fake=FakeHelper.address)
    city = String(fake=FakeHelper.city)
    state = String(fake=FakeHelper.state)
    postcode = String(fake=FakeHelper.zip_code)
    country = String(fake=FakeHelper.country_code)

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name) if part)


class LineTax(Model):
    """The tax of one rate applied to a line"""

    id = Integer()
    total = Decimal()
    subtotal = Decimal()


class LineItem(Model):
    id = Integer()
    name = String(fake=FakeHelper.sentence)
    product_id = Integer()
    variation_id = Integer(fake=lambda: FakeHelper.integer(0, 1000))
    quantity = Integer(fake=lambda: FakeHelper.integer(1, 5))
    tax_class = String()
    subtotal = Decimal()
    subtotal_tax = Decimal()
    total = Decimal()
    total_tax = Decimal()
    taxes = List(Nested(LineTax), count=(0, 2))
    meta_data = List(Nested(MetaData), count=(0, 2))
    sku = String(fake=FakeHelper.uuid)
    price = Decimal()


class TaxLine(Model):
    id = Integer()
    rate_code = String(fake=lambda: FakeHelper.word().upper())
    rate_id = Integer()
    label = String()
    compound = Boolean()
    tax_total = Decimal()
    shipping_tax_total = Decimal()
    meta_data = List(Nested(MetaData), count=(0, 2))


class ShippingLine(Model):
    id = Integer()
    method_title = String()
    method_id = String(fake=FakeHelper.slug)
    total = Decimal()
    total_tax = Decimal()
    taxes = List(Nested(LineTax), count=(0, 2))
    meta_data = List(Nested(MetaData), count=(0, 2))


class FeeLine(Model):
    id = Integer()
    name = String()
    tax_class = String()
    tax_status = Enum(OrderTaxStatus)
    total = Decimal()
    total_tax = Decimal()
    taxes = List(Nested(LineTax), count=(0, 2))
    meta_data = List(Nested(MetaData), count=(0, 2))


class CouponLine(Model):
    id = Integer()
    code = String(fake=lambda: FakeHelper.word().upper())
    discount = Decimal()
    discount_tax = Decimal()
    meta_data = List(Nested(MetaData), count=(0, 2))


class OrderRefundLine(Model):
    """The short form of a refund listed on an order"""

    id = Integer()
    reason = String(fake=FakeHelper.sentence)
    total = Decimal()


class Order(Model):

    """Wraps an order from the ``orders`` endpoint

    Set ``set_paid`` when creating an order to mark it paid and move it to processing.
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#orders'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    parent_id = Integer(fake=lambda: FakeHelper.integer(0, 100))
    number = String(fake=lambda: str(FakeHelper.integer(1, 100000)))
    order_key = String(fake=lambda: f'wc_order_{FakeHelper.slug()}')
    created_via = String(fake=lambda: FakeHelper.random_item(['rest-api', 'checkout', 'admin']))
    version = String(fake=lambda: f'{FakeHelper.integer(3, 9)}.{FakeHelper.integer(0, 9)}.0')
    status = Enum(OrderStatus)
    currency = Enum(Currency)
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
    discount_total = Decimal()
    discount_tax = Decimal()
    shipping_total = Decimal()
    shipping_tax = Decimal()
    cart_tax = Decimal()
    total = Decimal()
    total_tax = Decimal()
    prices_include_tax = Boolean()
    customer_id = Integer(fake=lambda: FakeHelper.integer(0, 1000))
    customer_ip_address = String(fake=FakeHelper.ip_address)
    customer_user_agent = String(fake=FakeHelper.user_agent)
    customer_note = String(fake=FakeHelper.sentence)
    billing = Nested(Billing)
    shipping = Nested(Shipping)
    payment_method = String(fake=lambda: FakeHelper.random_item(['bacs', 'cheque', 'cod', 'paypal']))
    payment_method_title = String()
    transaction_id = String(fake=FakeHelper.uuid)
    date_paid = DateTime()
    date_paid_gmt = DateTime()
    date_completed = DateTime()
    date_completed_gmt = DateTime()
    cart_hash = String(fake=FakeHelper.uuid)
    meta_data = List(Nested(MetaData), count=(0, 3))
    line_items = List(Nested(LineItem), count=(1, 5))
    tax_lines = List(Nested(TaxLine), count=(0, 2))
    shipping_lines = List(Nested(ShippingLine), count=(0, 2))
    fee_lines = List(Nested(FeeLine), count=(0, 2))
    coupon_lines = List(Nested(CouponLine), count=(0, 2))
    refunds = List(Nested(OrderRefundLine), count=(0, 2))
    set_paid = Boolean()

    @property
    def item_count(self) -> int:
        """Total quantity over all line items"""
        return sum(item.quantity or 0 for item in self.line_items or [])


class OrderNote(Model):

    """Wraps a note from the ``orders/{order_id}/notes`` endpoint

    Notes with ``customer_note`` set are emailed to the customer.
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#order-notes'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.DELETE]

    id = Integer()
    author = String(fake=FakeHelper.first_name)
    date_created = DateTime()
    date_created_gmt = DateTime()
    note = String(fake=FakeHelper.sentence)
    customer_note = Boolean()
    added_by_user = Boolean()


class OrderRefund(Model):

    """Wraps a refund from the ``orders/{order_id}/refunds`` endpoint

    ``api_refund`` asks the payment gateway to refund the amount, ``api_restock`` restocks the refunded items.
    Both are only sent when creating a refund.
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#order-refunds'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.DELETE]

    id = Integer()
    date_created = DateTime()
    date_created_gmt = DateTime()
    amount = Decimal()
    reason = String(fake=FakeHelper.sentence)
    refunded_by = Integer()
    refunded_payment = Boolean()
    meta_data = List(Nested(MetaData), count=(0, 2))
    line_items = List(Nested(LineItem), count=(0, 3))
    tax_lines = List(Nested(TaxLine), count=(0, 2))
    shipping_lines = List(Nested(ShippingLine), count=(0, 2))
    fee_lines = List(Nested(FeeLine), count=(0, 2))
    api_refund = Boolean()
    api_restock = Boolean()


class Refund(Model):

    """A refund from the store wide ``refunds`` endpoint: an :class:`OrderRefund` plus the id of its order

    The JSON is flat; :attr:`refund` holds every field except ``parent_id``.
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#refunds'

    parent_id = Integer()

    def __init__(self, parent_id: Optional[int] = None, refund: Optional[OrderRefund] = None):
        super().__init__(parent_id=parent_id)
        self.refund = refund

    @classmethod
    def decode(cls, data) -> Refund:
        instance = super().decode(data)
        instance.refund = OrderRefund.decode(data)
        return instance

    def encode(self):
        data = (self.refund or OrderRefund()).encode()
        data['parent_id'] = self.parent_id
        return data

    @classmethod
    def fake(cls) -> Refund:
        return cls(parent_id=FakeHelper.integer(1, 10000), refund=OrderRefund.fake())

    @property
    def uid(self):
        return self.refund.id if self.refund is not None else None
