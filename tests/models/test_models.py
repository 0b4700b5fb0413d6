import inspect
import unittest
from datetime import datetime

from woocommerce import models
from woocommerce.models import (
    Model,
    APIResponse,
    Product,
    ProductWithChildren,
    Category,
    Order,
    LineItem,
    Refund,
    OrderRefund,
    TaxRate,
    Coupon,
    Links,
    SalesReport,
    Cart,
    BatchRequest,
    BatchResponse,
)
from woocommerce.constants import (
    OrderStatus,
    SortOrder,
    ProductStatus,
    WebhookTopic,
    Currency,
    ModelMethod,
)
from woocommerce.exceptions import DecodeError, RequiredFieldError

MODELS = [
    obj for _, obj in inspect.getmembers(models, inspect.isclass)
    if issubclass(obj, Model)
]


class TestModelCodec(unittest.TestCase):

    def test_fake_round_trip(self):
        for model in MODELS:
            with self.subTest(model=model.__name__):
                entity = model.fake()
                self.assertEqual(model.decode(entity.encode()), entity)

    def test_encode_emits_every_key(self):
        encoded = Coupon(code='20off').encode()
        self.assertEqual(set(encoded), {field.key for field in Coupon.fields().values()})
        self.assertIsNone(encoded['amount'])

    def test_payload_leaves_out_unset_fields(self):
        order = Order(customer_id=25, line_items=[LineItem(product_id=93, quantity=2)])
        self.assertEqual(order.payload(), {'customer_id': 25, 'line_items': [{'product_id': 93, 'quantity': 2}]})

    def test_absent_keys_decode_to_none(self):
        product = Product.decode({'id': 794})
        self.assertEqual(product.id, 794)
        self.assertIsNone(product.name)
        self.assertIsNone(product.categories)

    def test_null_list_is_unset(self):
        self.assertIsNone(Product.decode({'id': 1, 'related_ids': None}).related_ids)

    def test_undeclared_keys_are_dropped(self):
        self.assertNotIn('unknown', Product.decode({'id': 1, 'unknown': 'x'}).encode())

    def test_decode_errors(self):
        with self.assertRaises(DecodeError):
            Product.decode(['not', 'an', 'object'])
        with self.assertRaises(DecodeError):
            Product.decode({'related_ids': 'not a list'})
        with self.assertRaises(DecodeError):
            Order.decode({'billing': 'not an object'})
        with self.assertRaises(DecodeError):
            Product.decode_many({'id': 1})

    def test_wire_conversions(self):
        order = Order.decode({
            'id': '727',
            'total': '29.35',
            'prices_include_tax': 'false',
            'date_created': '2017-03-22T16:28:02',
            'date_paid': 'not a date',
            'currency': 'USD',
        })
        self.assertEqual(order.id, 727)
        self.assertEqual(order.total, 29.35)
        self.assertFalse(order.prices_include_tax)
        self.assertEqual(order.date_created, datetime(2017, 3, 22, 16, 28, 2))
        self.assertIsNone(order.date_paid)
        self.assertEqual(order.currency, Currency.USD)
        self.assertEqual(order.encode()['total'], '29.35')

    def test_renamed_keys(self):
        rate = TaxRate.decode({'id': 72, 'class': 'reduced-rate'})
        self.assertEqual(rate.tax_class, 'reduced-rate')
        self.assertEqual(rate.payload(), {'id': 72, 'class': 'reduced-rate'})

        category = Category.decode({'id': 9, '_links': {'self': [{'href': 'https://example.com/9'}]}})
        self.assertIsInstance(category.links, Links)
        self.assertEqual(category.links.self_links[0].href, 'https://example.com/9')

    def test_empty_php_array_as_mapping(self):
        self.assertEqual(SalesReport.decode({'totals': []}).totals, {})

    def test_unknown_fields_rejected(self):
        with self.assertRaises(TypeError):
            Product(not_a_field=1)

    def test_require(self):
        with self.assertRaises(RequiredFieldError):
            Product(name='Shirt').require('id', 'sku')
        Product(id=1).require('id')

    def test_uid_and_repr(self):
        self.assertEqual(Product(id=794).uid, 794)
        self.assertEqual(repr(Product(id=794)), '<WooCommerce Product: 794>')
        self.assertIsNone(Cart().uid)

    def test_allowed_methods(self):
        self.assertEqual(Model.ALLOWED_METHODS, [ModelMethod.GET])
        self.assertIn(ModelMethod.DELETE, Product.ALLOWED_METHODS)
        self.assertNotIn(ModelMethod.CREATE, Refund.ALLOWED_METHODS)


class TestEnumFallback(unittest.TestCase):

    def test_unknown_tokens_never_raise(self):
        self.assertEqual(OrderStatus('checkout-draft'), OrderStatus.PENDING)
        self.assertEqual(SortOrder('sideways'), SortOrder.DESC)
        self.assertEqual(ProductStatus('future'), ProductStatus.PUBLISH)
        self.assertEqual(Order.decode({'status': 'checkout-draft'}).status, OrderStatus.PENDING)

    def test_known_tokens(self):
        self.assertEqual(WebhookTopic('product.updated'), WebhookTopic.PRODUCT_UPDATED)
        self.assertEqual(str(OrderStatus.ON_HOLD), 'on-hold')


class TestComposedModels(unittest.TestCase):

    def test_refund_is_flat_on_the_wire(self):
        data = {'id': 726, 'parent_id': 723, 'amount': '10.00', 'reason': 'Damaged'}
        refund = Refund.decode(data)
        self.assertEqual(refund.parent_id, 723)
        self.assertIsInstance(refund.refund, OrderRefund)
        self.assertEqual(refund.refund.reason, 'Damaged')
        self.assertEqual(refund.encode()['id'], 726)
        self.assertEqual(refund.encode()['parent_id'], 723)

    def test_api_response(self):
        response = APIResponse.decode({'id': 3, 'anything': [1, 2]})
        self.assertEqual(response['anything'], [1, 2])
        self.assertEqual(response.uid, 3)
        self.assertIsNone(response.get('missing'))

    def test_order_item_count(self):
        order = Order(line_items=[LineItem(quantity=2), LineItem(quantity=3), LineItem()])
        self.assertEqual(order.item_count, 5)


class TestProductWithChildren(unittest.TestCase):

    def test_from_products(self):
        product = Product(id=1, related_ids=[2, 3], upsell_ids=[3], cross_sell_ids=[4], parent_id=5,
                          grouped_products=[])
        children = [Product(id=i) for i in (2, 3, 4, 5)]
        result = ProductWithChildren.from_products(product, children)

        self.assertEqual([p.id for p in result.related], [2, 3])
        self.assertEqual([p.id for p in result.upsells], [3])
        self.assertEqual([p.id for p in result.cross_sells], [4])
        self.assertEqual(result.parent.id, 5)
        self.assertIsNone(result.grouped)


class TestBatch(unittest.TestCase):

    def test_unset_parts_are_omitted(self):
        self.assertEqual(BatchRequest().encode(), {})
        self.assertEqual(BatchRequest(delete=[12, 13]).encode(), {'delete': [12, 13]})

    def test_items_are_sent_as_payloads(self):
        request = BatchRequest(create=[Coupon(code='20off', amount=20.0)], update=[Coupon(id=719, amount=5.0)])
        self.assertEqual(request.encode(), {
            'create': [{'code': '20off', 'amount': '20.0'}],
            'update': [{'id': 719, 'amount': '5.0'}],
        })

    def test_response_decode(self):
        response = BatchResponse.decode({'create': [{'id': 720, 'code': '20off'}], 'delete': [{'id': 12}]}, Coupon)
        self.assertEqual(response.create[0].id, 720)
        self.assertIsNone(response.update)
        self.assertEqual(response.delete[0].uid, 12)

    def test_response_decode_errors(self):
        with self.assertRaises(DecodeError):
            BatchResponse.decode([], Coupon)
        with self.assertRaises(DecodeError):
            BatchResponse.decode({'create': {'id': 1}}, Coupon)


if __name__ == '__main__':
    unittest.main()
