import unittest
from datetime import datetime

from woocommerce.constants import OrderStatus, Currency, OrderTaxStatus
from woocommerce.models import Order, OrderNote, OrderRefund, LineItem, Billing
from tests.mixins import TestClientMixin

ORDER = {
    'id': 727,
    'parent_id': 0,
    'number': '727',
    'order_key': 'wc_order_58d2d042d1d',
    'created_via': 'rest-api',
    'version': '3.0.0',
    'status': 'processing',
    'currency': 'USD',
    'date_created': '2017-03-22T16:28:02',
    'date_created_gmt': '2017-03-22T19:28:02',
    'discount_total': '0.00',
    'shipping_total': '10.00',
    'total': '29.35',
    'total_tax': '1.35',
    'prices_include_tax': False,
    'customer_id': 0,
    'billing': {
        'first_name': 'John',
        'last_name': 'Doe',
        'address_1': '969 Market',
        'city': 'San Francisco',
        'state': 'CA',
        'postcode': '94103',
        'country': 'US',
        'email': 'john.doe@example.com',
        'phone': '(555) 555-5555',
    },
    'payment_method': 'bacs',
    'payment_method_title': 'Direct Bank Transfer',
    'transaction_id': '',
    'date_paid': '2017-03-22T16:28:08',
    'date_completed': None,
    'meta_data': [],
    'line_items': [
        {
            'id': 315, 'name': 'Woo Single #1', 'product_id': 93, 'variation_id': 0, 'quantity': 2,
            'tax_class': '', 'subtotal': '6.00', 'total': '6.00', 'total_tax': '0.45',
            'taxes': [{'id': 75, 'total': '0.45', 'subtotal': '0.45'}],
            'meta_data': [], 'sku': '', 'price': 3,
        },
        {
            'id': 316, 'name': 'Ship Your Idea &ndash; Color: Black, Size: M Test', 'product_id': 22,
            'variation_id': 23, 'quantity': 1, 'total': '12.00', 'total_tax': '0.90',
            'meta_data': [{'id': 2095, 'key': 'pa_color', 'value': 'black'}], 'price': 12,
        },
    ],
    'tax_lines': [{'id': 318, 'rate_code': 'US-CA-STATE TAX', 'rate_id': 75, 'label': 'State Tax',
                   'compound': False, 'tax_total': '1.35', 'shipping_tax_total': '0.00', 'meta_data': []}],
    'shipping_lines': [{'id': 317, 'method_title': 'Flat Rate', 'method_id': 'flat_rate', 'total': '10.00',
                        'total_tax': '0.00', 'taxes': [], 'meta_data': []}],
    'fee_lines': [{'id': 319, 'name': 'Gift wrap', 'tax_status': 'taxable', 'total': '2.00'}],
    'coupon_lines': [],
    'refunds': [],
    '_links': {'self': [{'href': 'https://example.com/wp-json/wc/v3/orders/727'}]},
}


class TestOrderModel(TestClientMixin, unittest.TestCase):

    def test_decode_order(self):
        order = Order.decode(ORDER)

        self.assertEqual(order.id, 727)
        self.assertEqual(order.status, OrderStatus.PROCESSING)
        self.assertEqual(order.currency, Currency.USD)
        self.assertEqual(order.total, 29.35)
        self.assertEqual(order.date_paid, datetime(2017, 3, 22, 16, 28, 8))
        self.assertIsNone(order.date_completed)
        self.assertIsInstance(order.billing, Billing)
        self.assertEqual(order.billing.email, 'john.doe@example.com')
        self.assertIsNone(order.shipping)
        self.assertEqual(order.coupon_lines, [])

    def test_decode_lines(self):
        order = Order.decode(ORDER)

        self.assertEqual([item.id for item in order.line_items], [315, 316])
        self.assertEqual(order.item_count, 3)
        self.assertEqual(order.line_items[0].taxes[0].total, 0.45)
        self.assertEqual(order.line_items[1].meta_data[0].value, 'black')
        self.assertEqual(order.tax_lines[0].rate_code, 'US-CA-STATE TAX')
        self.assertEqual(order.shipping_lines[0].method_id, 'flat_rate')
        self.assertEqual(order.fee_lines[0].tax_status, OrderTaxStatus.TAXABLE)

    def test_get_order(self):
        transport = self.mock_transport(ORDER)
        order = self.api.orders.by_id(727)

        self.assertEqual(self.sent(transport)['url'], self.api.url_for('orders/727'))
        self.assertEqual(order, Order.decode(ORDER))

    def test_update_order_status(self):
        transport = self.mock_transport({**ORDER, 'status': 'completed'})
        order = self.api.orders.update(Order(id=727, status=OrderStatus.COMPLETED))

        request = self.sent(transport)
        self.assertEqual(request['method'], 'PUT')
        self.assertEqual(request['json'], {'id': 727, 'status': 'completed'})
        self.assertEqual(order.status, OrderStatus.COMPLETED)

    def test_create_order(self):
        transport = self.mock_transport(ORDER)
        self.api.orders.create(Order(
            payment_method='bacs',
            set_paid=True,
            billing=Billing(first_name='John', country='US'),
            line_items=[LineItem(product_id=93, quantity=2), LineItem(product_id=22, variation_id=23, quantity=1)],
        ))

        self.assertEqual(self.sent(transport)['json'], {
            'payment_method': 'bacs',
            'set_paid': True,
            'billing': {'first_name': 'John', 'country': 'US'},
            'line_items': [
                {'product_id': 93, 'quantity': 2},
                {'product_id': 22, 'variation_id': 23, 'quantity': 1},
            ],
        })

    def test_add_note(self):
        transport = self.mock_transport({'id': 281, 'note': 'Order ok!!!', 'customer_note': False})
        note = self.api.order_notes.create(727, OrderNote(note='Order ok!!!'))

        request = self.sent(transport)
        self.assertEqual(request['url'], self.api.url_for('orders/727/notes'))
        self.assertEqual(request['json'], {'note': 'Order ok!!!'})
        self.assertEqual(note.id, 281)

    def test_refund_order(self):
        transport = self.mock_transport({'id': 726, 'amount': '10.00', 'reason': '', 'refunded_payment': False})
        refund = self.api.order_refunds.create(727, OrderRefund(amount=10.0, api_refund=False))

        request = self.sent(transport)
        self.assertEqual(request['url'], self.api.url_for('orders/727/refunds'))
        self.assertEqual(request['json'], {'amount': '10.0', 'api_refund': False})
        self.assertEqual(refund.amount, 10.0)


if __name__ == '__main__':
    unittest.main()
