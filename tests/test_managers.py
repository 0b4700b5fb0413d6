import unittest

import requests

from woocommerce.constants import (
    Context,
    SortOrder,
    OrderStatus,
    ProductFilterWithType,
    WebhookStatus,
    ReportPeriod,
)
from woocommerce.exceptions import OperationNotAllowedError, RequiredFieldError, DecodeError
from woocommerce.models import (
    Product,
    ProductWithChildren,
    ProductVariation,
    Order,
    OrderNote,
    Refund,
    Customer,
    PasswordChange,
    TaxClass,
    SettingsGroup,
    SettingOption,
    SystemStatusTool,
    ShippingZoneMethod,
    ShippingZoneLocation,
    SalesReport,
    CartItem,
    Coupon,
    APIResponse,
    BatchRequest,
    BatchResponse,
)
from tests.mixins import TestClientMixin, make_response


class TestFakeMode(TestClientMixin, unittest.TestCase):
    """Operations called with ``use_faker=True`` return generated entities and never send a request"""

    def setUp(self):
        super().setUp()
        self.transport = self.forbid_transport()

    def tearDown(self):
        self.transport.assert_not_called()

    def test_product_list_returns_requested_page_size(self):
        products = self.api.products.list(per_page=3, use_faker=True)
        self.assertEqual(len(products), 3)
        for product in products:
            self.assertIsInstance(product, Product)
            self.assertIsNotNone(product.id)
            self.assertIsNotNone(product.name)

    def test_by_id_keeps_requested_identifier(self):
        self.assertEqual(self.api.orders.by_id(727, use_faker=True).id, 727)
        self.assertEqual(self.api.tax_classes.by_slug('zero-rate', use_faker=True).slug, 'zero-rate')
        self.assertEqual(self.api.product_variations.by_id(22, 733, use_faker=True).id, 733)

    def test_create_returns_entity_with_given_fields(self):
        created = self.api.products.create(Product(name='Premium Quality', sku='PQ-1'), use_faker=True)
        self.assertEqual(created.name, 'Premium Quality')
        self.assertEqual(created.sku, 'PQ-1')
        self.assertIsNotNone(created.id)

    def test_update_requires_identifier(self):
        with self.assertRaises(RequiredFieldError):
            self.api.products.update(Product(name='No id'), use_faker=True)

    def test_delete_results(self):
        self.assertIsInstance(self.api.products.delete(794, use_faker=True), Product)
        self.assertTrue(self.api.orders.delete(727, use_faker=True))
        self.assertTrue(self.api.webhooks.delete(5, force=True, use_faker=True))
        self.assertTrue(self.api.tax_classes.delete('zero-rate', use_faker=True))

    def test_client_setting_is_used_when_operation_does_not_choose(self):
        fake_api = type(self.api).from_dict({**self.api.to_dict(), 'use_faker': True})
        fake_api.session.request = self.transport
        self.assertIsInstance(fake_api.coupons.by_id(719), Coupon)
        self.assertEqual(len(fake_api.customers.list(per_page=2)), 2)

    def test_batch_mirrors_request(self):
        request = BatchRequest(
            create=[Product(name='A'), Product(name='B')],
            update=[Product(id=799, regular_price=10.0)],
            delete=[794, 795],
        )
        response = self.api.products.batch(request, use_faker=True)
        self.assertIsInstance(response, BatchResponse)
        self.assertEqual(len(response.create), 2)
        self.assertEqual(response.update[0].id, 799)
        self.assertEqual([product.id for product in response.delete], [794, 795])

    def test_with_children(self):
        product = Product.fake()
        result = self.api.products.with_children(product, use_faker=True)
        self.assertIsInstance(result, ProductWithChildren)
        self.assertIs(result.product, product)

    def test_every_manager_has_fake_results(self):
        self.assertTrue(self.api.order_notes.list(727, use_faker=True) is not None)
        self.assertTrue(self.api.order_refunds.list(727, per_page=2, use_faker=True))
        self.assertIsInstance(self.api.refunds.list(per_page=1, use_faker=True)[0], Refund)
        self.assertIsInstance(self.api.reports.sales(period=ReportPeriod.WEEK, use_faker=True), SalesReport)
        self.assertIsNotNone(self.api.system_status.get(use_faker=True).environment)
        self.assertEqual(self.api.data.country('BR', use_faker=True).code, 'BR')
        self.assertEqual(self.api.settings.option('general', 'woocommerce_currency', use_faker=True).group_id,
                         'general')
        self.assertEqual(self.api.shipping_zones.method(5, 26, use_faker=True).instance_id, 26)
        self.assertIsInstance(self.api.orders.send_details(727, use_faker=True), str)
        self.assertTrue(self.api.notifications.mark_read(use_faker=True))

    def test_cart_update_reflects_items(self):
        items = [CartItem(id=93, quantity=2), CartItem(id=22, quantity=1)]
        cart = self.api.cart.update(items, use_faker=True)
        self.assertEqual(cart.items_count, 3)
        self.assertEqual([item.id for item in cart.items], [93, 22])

    def test_fake_login_leaves_storage_untouched(self):
        response = self.api.auth.login('john.doe@example.com', 'secret', use_faker=True)
        self.assertIsNotNone(response.user_id)
        self.assertIsNone(self.api.storage.get_user_id())

        self.api.auth.register(Customer(email='jane@example.com', password='secret'), use_faker=True)
        self.assertIsNone(self.api.storage.get_user_id())

    def test_fake_login_keeps_real_session(self):
        self.api.storage.set_user_id(42)
        self.api.auth.login('john.doe@example.com', 'secret', use_faker=True)
        self.assertEqual(self.api.auth.current_user_id(), 42)

    def test_fake_change_password_without_login(self):
        self.assertIsNone(self.api.auth.current_user_id())
        result = self.api.auth.change_password('new-secret', use_faker=True)
        self.assertIsInstance(result, PasswordChange)
        self.assertEqual(result.status, 'success')

    def test_all_on_every_manager(self):
        for attr in self.api.MANAGERS:
            if attr == 'cart':
                continue
            with self.subTest(manager=attr):
                self.assertIsInstance(getattr(self.api, attr).all(use_faker=True), list)

        for group in self.api.settings.all(use_faker=True):
            self.assertIsInstance(group, SettingsGroup)
        for tool in self.api.system_status.all(use_faker=True):
            self.assertIsInstance(tool, SystemStatusTool)
        with self.assertRaises(OperationNotAllowedError):
            self.api.cart.all(use_faker=True)

    def test_all_on_nested_managers(self):
        self.assertIsInstance(self.api.order_notes.all(727, use_faker=True), list)
        self.assertEqual(len(self.api.order_refunds.all(727, per_page=4, use_faker=True)), 4)
        variations = self.api.product_variations.all(794, per_page=2, use_faker=True)
        self.assertEqual(len(variations), 2)
        self.assertIsInstance(variations[0], ProductVariation)

    def test_nested_batch_not_allowed(self):
        with self.assertRaises(OperationNotAllowedError):
            self.api.order_notes.batch(BatchRequest(create=[OrderNote(note='Order ok!!!')]), use_faker=True)
        with self.assertRaises(OperationNotAllowedError):
            self.api.order_refunds.batch(BatchRequest(delete=[726]), use_faker=True)
        with self.assertRaises(OperationNotAllowedError):
            self.api.refunds.batch(BatchRequest(delete=[726]), use_faker=True)
        with self.assertRaises(OperationNotAllowedError):
            self.api.cart.batch(BatchRequest(update=[CartItem(id=93, quantity=1)]), use_faker=True)


class TestLiveMode(TestClientMixin, unittest.TestCase):
    """Operations send the expected request and decode the response"""

    def test_order_create_returns_server_id(self):
        transport = self.mock_transport({'id': 727, 'status': 'processing', 'line_items': []}, 201)
        order = self.api.orders.create(Order(customer_id=25, set_paid=True))

        sent = self.sent(transport)
        self.assertEqual(sent['method'], 'POST')
        self.assertEqual(self.path_of(sent['url']), '/orders')
        self.assertEqual(sent['json'], {'customer_id': 25, 'set_paid': True})
        self.assertEqual(order.id, 727)
        self.assertEqual(order.status, OrderStatus.PROCESSING)

    def test_webhook_delete(self):
        transport = self.mock_transport({'id': 5})
        result = self.api.webhooks.delete(5, force=True)

        sent = self.sent(transport)
        self.assertEqual(sent['method'], 'DELETE')
        self.assertEqual(self.path_of(sent['url']), '/webhooks/5')
        self.assertEqual(sent['params'], {'force': 'true'})
        self.assertIs(result, True)

    def test_product_list_sends_defaults(self):
        transport = self.mock_transport([{'id': 794, 'name': 'Premium Quality'}])
        products = self.api.products.list(search='shirt', include=[1, 2])

        params = self.sent(transport)['params']
        self.assertEqual(params['context'], 'view')
        self.assertEqual(params['page'], 1)
        self.assertEqual(params['per_page'], 10)
        self.assertEqual(params['order'], 'desc')
        self.assertEqual(params['orderby'], 'date')
        self.assertEqual(params['status'], 'any')
        self.assertEqual(params['include'], '1,2')
        self.assertNotIn('sku', params)
        self.assertEqual(products, [Product.decode({'id': 794, 'name': 'Premium Quality'})])

    def test_variation_paths(self):
        transport = self.mock_transport({'id': 733})
        self.api.product_variations.update(22, ProductVariation(id=733, regular_price=10.0))
        sent = self.sent(transport)
        self.assertEqual(sent['method'], 'PUT')
        self.assertEqual(self.path_of(sent['url']), '/products/22/variations/733')
        self.assertEqual(sent['json'], {'id': 733, 'regular_price': '10.0'})

    def test_tax_class_slug_is_quoted(self):
        transport = self.mock_transport({'slug': 'reduced rate', 'name': 'Reduced rate'})
        self.assertTrue(self.api.tax_classes.delete(TaxClass(slug='reduced rate')))
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/taxes/classes/reduced%20rate')

    def test_tax_class_delete_requires_slug(self):
        self.forbid_transport()
        with self.assertRaises(RequiredFieldError):
            self.api.tax_classes.delete(TaxClass(name='Reduced rate'))

    def test_tax_rate_class_param(self):
        transport = self.mock_transport([{'id': 72, 'class': 'standard', 'rate': '20.0000'}])
        rates = self.api.tax_rates.list(tax_class='standard')
        self.assertEqual(self.sent(transport)['params']['class'], 'standard')
        self.assertEqual(rates[0].tax_class, 'standard')

    def test_http_error_propagates(self):
        self.mock_transport({'code': 'woocommerce_rest_product_invalid_id', 'message': 'Invalid ID.',
                             'data': {'status': 404}}, 404)
        with self.assertRaises(requests.HTTPError):
            self.api.products.by_id(1)

    def test_list_of_wrong_shape_raises(self):
        self.mock_transport({'id': 1})
        with self.assertRaises(DecodeError):
            self.api.coupons.list()

    def test_with_children_uses_one_request(self):
        product = Product(id=794, related_ids=[10, 11], upsell_ids=[12], cross_sell_ids=[], parent_id=0,
                          grouped_products=[])
        transport = self.mock_transport([{'id': 794}, {'id': 10}, {'id': 11}, {'id': 12}])
        result = self.api.products.with_children(product, [
            ProductFilterWithType.RELATED_IDS,
            ProductFilterWithType.UPSELL_IDS,
            ProductFilterWithType.CROSS_SELL_IDS,
        ])

        self.assertEqual(transport.call_count, 1)
        self.assertEqual(self.sent(transport)['params']['include'], '794,10,11,12')
        self.assertEqual([p.id for p in result.related], [10, 11])
        self.assertEqual([p.id for p in result.upsells], [12])
        self.assertIsNone(result.cross_sells)

    def test_with_children_splits_large_includes(self):
        product = Product(id=794, related_ids=list(range(1000, 1120)))
        transport = self.mock_transport([{'id': 794}])
        self.api.products.with_children(product, [ProductFilterWithType.RELATED_IDS])

        self.assertEqual(transport.call_count, 2)
        first, second = self.sent(transport, 0)['params'], self.sent(transport, 1)['params']
        self.assertEqual(first['per_page'], 100)
        self.assertEqual(len(first['include'].split(',')), 100)
        self.assertEqual(second['per_page'], 21)
        self.assertEqual(second['include'].split(',')[-1], '1119')

    def test_with_children_requires_id(self):
        self.forbid_transport()
        with self.assertRaises(RequiredFieldError):
            self.api.products.with_children(Product(related_ids=[10, 11]))

    def test_all_unpaginated_sends_one_request(self):
        transport = self.mock_transport([{'slug': 'standard', 'name': 'Standard'}])
        classes = self.api.tax_classes.all()
        self.assertEqual(transport.call_count, 1)
        self.assertNotIn('page', self.sent(transport)['params'] or {})
        self.assertEqual(classes[0].slug, 'standard')

    def test_all_nested_pages(self):
        transport = self.mock_transport([{'id': 726, 'amount': '10.00'}])
        refunds = self.api.order_refunds.all(727)
        sent = self.sent(transport)
        self.assertEqual(transport.call_count, 1)
        self.assertEqual(self.path_of(sent['url']), '/orders/727/refunds')
        self.assertEqual((sent['params']['page'], sent['params']['per_page']), (1, 100))
        self.assertEqual(refunds[0].id, 726)

    def test_order_note_batch_is_not_sent(self):
        self.forbid_transport()
        with self.assertRaises(OperationNotAllowedError):
            self.api.order_notes.batch(BatchRequest(create=[OrderNote(note='Order ok!!!')]))

    def test_settings_update_uses_option_path(self):
        transport = self.mock_transport({'id': 'woocommerce_currency', 'value': 'BRL'})
        self.api.settings.update(SettingOption(group_id='general', id='woocommerce_currency', value='BRL'))
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/settings/general/woocommerce_currency')

    def test_order_notes(self):
        transport = self.mock_transport([{'id': 281, 'note': 'Order ok!!!', 'customer_note': False}])
        notes = self.api.order_notes.list(723)
        sent = self.sent(transport)
        self.assertEqual(self.path_of(sent['url']), '/orders/723/notes')
        self.assertEqual(sent['params'], {'context': 'view', 'type': 'any'})
        self.assertEqual(notes[0], OrderNote(id=281, note='Order ok!!!', customer_note=False))

    def test_refunds_are_flat(self):
        self.mock_transport([{'id': 726, 'parent_id': 723, 'amount': '10.00', 'reason': ''}])
        refund = self.api.refunds.list()[0]
        self.assertEqual(refund.parent_id, 723)
        self.assertEqual(refund.uid, 726)
        self.assertEqual(refund.refund.amount, 10.0)

    def test_customer_delete_with_reassign(self):
        transport = self.mock_transport({'id': 26})
        self.assertTrue(self.api.customers.delete(26, reassign=1))
        self.assertEqual(self.sent(transport)['params'], {'force': 'true', 'reassign': 1})

    def test_settings_update_option(self):
        transport = self.mock_transport({'id': 'woocommerce_allowed_countries', 'value': 'all_except'})
        option = self.api.settings.update_option(
            SettingOption(group_id='general', id='woocommerce_allowed_countries', value='all_except')
        )
        sent = self.sent(transport)
        self.assertEqual(sent['method'], 'PUT')
        self.assertEqual(self.path_of(sent['url']), '/settings/general/woocommerce_allowed_countries')
        self.assertEqual(sent['json'], {'value': 'all_except'})
        self.assertEqual(option.value, 'all_except')

    def test_settings_update_option_requires_group(self):
        with self.assertRaises(RequiredFieldError):
            self.api.settings.update_option(SettingOption(id='woocommerce_currency', value='USD'))

    def test_shipping_zone_locations(self):
        transport = self.mock_transport([{'code': 'BR', 'type': 'country'}])
        locations = self.api.shipping_zones.update_locations(5, [ShippingZoneLocation(code='BR')])
        sent = self.sent(transport)
        self.assertEqual(sent['json'], [{'code': 'BR'}])
        self.assertEqual(locations[0].code, 'BR')

    def test_shipping_zone_method_requires_method_id(self):
        with self.assertRaises(RequiredFieldError):
            self.api.shipping_zones.create_method(5, ShippingZoneMethod(title='Flat'))

    def test_sales_report_is_unwrapped(self):
        self.mock_transport([{'total_sales': '14.00', 'total_orders': 1, 'totals': []}])
        report = self.api.reports.sales(period=ReportPeriod.LAST_MONTH)
        self.assertEqual(report.total_sales, 14.0)
        self.assertEqual(report.totals, {})

    def test_system_status_tool_run(self):
        transport = self.mock_transport({'id': 'clear_transients', 'success': True, 'message': 'Cleared'})
        tool = self.api.system_status.run_tool('clear_transients')
        self.assertEqual(self.sent(transport)['json'], {'confirm': True})
        self.assertTrue(tool.success)

    def test_current_currency(self):
        transport = self.mock_transport({'code': 'USD', 'name': 'United States (US) dollar', 'symbol': '$'})
        self.assertEqual(self.api.data.current_currency().code, 'USD')
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/data/currencies/current')

    def test_operation_not_allowed(self):
        self.forbid_transport()
        with self.assertRaises(OperationNotAllowedError):
            self.api.refunds.create(Refund())

    def test_generic_manager(self):
        transport = self.mock_transport([{'id': 1, 'custom': 'value'}])
        manager = self.api.manager('custom/endpoint')
        result = manager.list()
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/custom/endpoint')
        self.assertIsInstance(result[0], APIResponse)
        self.assertEqual(result[0]['custom'], 'value')
        self.assertIs(self.api.manager('/products/'), self.api.products)


class TestAuth(TestClientMixin, unittest.TestCase):

    def test_login_and_change_password(self):
        transport = self.mock_transport({'user_id': 42})
        self.api.auth.login('john.doe@example.com', 'secret')
        self.assertEqual(self.sent(transport)['json'], {'email': 'john.doe@example.com', 'password': 'secret'})
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/login')
        self.assertEqual(self.api.auth.current_user_id(), 42)

        transport.return_value = make_status_response('success')
        result = self.api.auth.change_password('new-secret')
        self.assertEqual(self.sent(transport)['json'], {'user_id': 42, 'password': 'new-secret'})
        self.assertEqual(result.status, 'success')

    def test_register(self):
        transport = self.mock_transport({'user_id': 43})
        self.api.auth.register(Customer(email='jane@example.com', password='secret'))
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/register')
        self.assertEqual(self.api.auth.current_user_id(), 43)

    def test_change_password_without_login(self):
        self.forbid_transport()
        with self.assertRaises(RequiredFieldError):
            self.api.auth.change_password('new-secret')

    def test_forgot_password(self):
        transport = self.mock_transport({'user_id': 42, 'code': '8d2c'})
        reset = self.api.auth.forgot_password('john.doe@example.com')
        self.assertEqual(self.path_of(self.sent(transport)['url']), '/forgot-password')
        self.assertEqual((reset.user_id, reset.code), (42, '8d2c'))

    def test_notifications_use_stored_user(self):
        self.api.storage.set_user_id(42)
        transport = self.mock_transport([{'id': 1, 'title': 'Order shipped', 'is_read': False}])
        notifications = self.api.notifications.list()
        self.assertEqual(self.sent(transport)['params'], {'user_id': 42})
        self.assertFalse(notifications[0].is_read)

        transport.return_value = make_status_response('ok', key='message')
        self.assertFalse(self.api.notifications.mark_read())

    def test_notifications_without_login(self):
        with self.assertRaises(RequiredFieldError):
            self.api.notifications.store_fcm_token('token')


class TestResolvers(unittest.TestCase):
    """List parameters: defaults are applied and unset arguments are left out"""

    def test_tax_rate_params(self):
        from woocommerce.managers import TaxRateManager

        params = TaxRateManager.resolve_params(tax_class='standard')
        self.assertEqual(params['class'], 'standard')
        self.assertNotIn('offset', params)
        self.assertNotIn('tax_class', params)

    def test_order_status_defaults_to_any(self):
        from woocommerce.managers import OrderManager

        self.assertEqual(OrderManager.resolve_params()['status'], 'any')
        params = OrderManager.resolve_params(status=[OrderStatus.PENDING, OrderStatus.ON_HOLD])
        self.assertEqual(params['status'], 'pending,on-hold')

    def test_webhook_status_defaults_to_all(self):
        from woocommerce.managers import WebhookManager

        self.assertEqual(WebhookManager.resolve_params()['status'], 'all')
        self.assertEqual(WebhookManager.resolve_params(status=WebhookStatus.PAUSED)['status'], 'paused')

    def test_tag_params(self):
        from woocommerce.managers import ProductTagManager, ShippingClassManager

        params = ProductTagManager.resolve_params(context=Context.EDIT, order=SortOrder.DESC)
        self.assertEqual(params, {
            'context': 'edit', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'name', 'hide_empty': 'false'
        })
        self.assertEqual(ShippingClassManager.resolve_params(), ProductTagManager.resolve_params())

    def test_review_params(self):
        from woocommerce.managers import ProductReviewManager

        params = ProductReviewManager.resolve_params(product=[22, 23])
        self.assertEqual(params['product'], '22,23')
        self.assertEqual(params['status'], 'approved')
        self.assertEqual(params['orderby'], 'date_gmt')

    def test_refund_params(self):
        from woocommerce.managers import OrderRefundManager

        self.assertEqual(OrderRefundManager.resolve_params()['dp'], 2)

    def test_product_defaults(self):
        from woocommerce.managers import ProductManager, ProductVariationManager

        defaults = {'context': 'view', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'date', 'status': 'any'}
        self.assertEqual(ProductManager.resolve_params(), defaults)
        self.assertEqual(ProductVariationManager.resolve_params(), defaults)

    def test_order_defaults(self):
        from woocommerce.managers import OrderManager, OrderRefundManager, RefundManager

        self.assertEqual(OrderManager.resolve_params(), {
            'context': 'view', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'date', 'status': 'any'
        })
        refund_defaults = {'context': 'view', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'date', 'dp': 2}
        self.assertEqual(OrderRefundManager.resolve_params(), refund_defaults)
        self.assertEqual(RefundManager.resolve_params(), refund_defaults)

    def test_customer_defaults(self):
        from woocommerce.managers import CustomerManager

        self.assertEqual(CustomerManager.resolve_params(), {
            'context': 'view', 'page': 1, 'per_page': 10, 'order': 'asc', 'orderby': 'name', 'role': 'customer'
        })

    def test_coupon_and_category_defaults(self):
        from woocommerce.managers import CouponManager, CategoryManager

        self.assertEqual(CouponManager.resolve_params(), {
            'context': 'view', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'date'
        })
        self.assertEqual(CategoryManager.resolve_params(), {
            'context': 'view', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'name'
        })

    def test_webhook_and_report_defaults(self):
        from woocommerce.managers import WebhookManager, ReportManager

        self.assertEqual(WebhookManager.resolve_params(), {
            'context': 'view', 'page': 1, 'per_page': 10, 'order': 'desc', 'orderby': 'date', 'status': 'all'
        })
        self.assertEqual(ReportManager.resolve_params(), {'context': 'view'})

    def test_no_param_endpoints(self):
        from woocommerce.managers import TaxClassManager, PaymentGatewayManager, ShippingZoneManager

        for manager in (TaxClassManager, PaymentGatewayManager, ShippingZoneManager):
            self.assertEqual(manager.resolve_params(), {})


def make_status_response(value, key='status'):
    return make_response({key: value})


if __name__ == '__main__':
    unittest.main()
