import unittest

from woocommerce.constants import ProductType, StockStatus, ProductStatus, CatalogVisibility
from woocommerce.models import (
    Product,
    ProductVariation,
    ProductAttribute,
    ProductDimensions,
    ProductItemCategory,
    ProductWithChildren,
)
from woocommerce.exceptions import RequiredFieldError
from tests.mixins import TestClientMixin

PRODUCT = {
    'id': 794,
    'name': 'Premium Quality',
    'slug': 'premium-quality-19',
    'permalink': 'https://example.com/product/premium-quality-19/',
    'date_created': '2017-03-23T17:01:14',
    'type': 'simple',
    'status': 'publish',
    'featured': False,
    'catalog_visibility': 'visible',
    'sku': '',
    'price': '21.99',
    'regular_price': '21.99',
    'sale_price': '',
    'date_on_sale_from': None,
    'on_sale': False,
    'purchasable': True,
    'total_sales': 0,
    'downloads': [],
    'download_limit': -1,
    'tax_status': 'taxable',
    'manage_stock': False,
    'stock_quantity': None,
    'stock_status': 'instock',
    'backorders': 'no',
    'weight': '',
    'dimensions': {'length': '', 'width': '', 'height': ''},
    'average_rating': '0.00',
    'rating_count': 0,
    'related_ids': [53, 40, 56, 479, 99],
    'upsell_ids': [],
    'cross_sell_ids': [],
    'parent_id': 0,
    'categories': [{'id': 9, 'name': 'Clothing', 'slug': 'clothing'},
                   {'id': 14, 'name': 'T-shirts', 'slug': 't-shirts'}],
    'tags': [],
    'images': [{'id': 792, 'src': 'https://example.com/wp-content/uploads/2017/03/T_2_front-4.jpg',
                'name': '', 'alt': ''}],
    'attributes': [],
    'default_attributes': [],
    'variations': [],
    'grouped_products': [],
    'menu_order': 0,
    'meta_data': [],
}


class TestProductModel(TestClientMixin, unittest.TestCase):

    def test_decode_product(self):
        product = Product.decode(PRODUCT)

        self.assertEqual(product.id, 794)
        self.assertEqual(product.type, ProductType.SIMPLE)
        self.assertEqual(product.status, ProductStatus.PUBLISH)
        self.assertEqual(product.catalog_visibility, CatalogVisibility.VISIBLE)
        self.assertEqual(product.stock_status, StockStatus.IN_STOCK)
        self.assertEqual(product.price, 21.99)
        self.assertIsNone(product.sale_price)
        self.assertIsNone(product.stock_quantity)
        self.assertIsInstance(product.dimensions, ProductDimensions)
        self.assertEqual([category.slug for category in product.categories], ['clothing', 't-shirts'])
        self.assertEqual(product.images[0].id, 792)
        self.assertEqual(product.related_ids, [53, 40, 56, 479, 99])

    def test_create_product(self):
        transport = self.mock_transport(PRODUCT)
        product = self.api.products.create(Product(
            name='Premium Quality',
            type=ProductType.SIMPLE,
            regular_price=21.99,
            categories=[ProductItemCategory(id=9), ProductItemCategory(id=14)],
        ))

        request = self.sent(transport)
        self.assertEqual(request['method'], 'POST')
        self.assertEqual(request['url'], self.api.url_for('products'))
        self.assertEqual(request['json'], {
            'name': 'Premium Quality',
            'type': 'simple',
            'regular_price': '21.99',
            'categories': [{'id': 9}, {'id': 14}],
        })
        self.assertEqual(product.id, 794)

    def test_update_requires_id(self):
        self.forbid_transport()
        with self.assertRaises(RequiredFieldError):
            self.api.products.update(Product(name='No id'))

    def test_with_children(self):
        product = Product.decode({**PRODUCT, 'related_ids': [53, 40], 'upsell_ids': [40]})
        transport = self.mock_transport([{'id': 53}, {'id': 40}])

        result = self.api.products.with_children(product)

        self.assertIsInstance(result, ProductWithChildren)
        self.assertEqual(self.sent(transport)['params']['include'], '794,53,40')
        self.assertEqual([p.id for p in result.related], [53, 40])
        self.assertEqual([p.id for p in result.upsells], [40])
        self.assertIsNone(result.cross_sells)
        self.assertIsNone(result.parent)


class TestProductVariationModel(TestClientMixin, unittest.TestCase):

    def test_variable_product(self):
        transport = self.mock_transport({
            'id': 733, 'sku': '', 'price': '9.00', 'regular_price': '9.00',
            'attributes': [{'id': 6, 'name': 'Color', 'option': 'Black'}],
        })
        variation = self.api.product_variations.by_id(799, 733)

        self.assertEqual(self.sent(transport)['url'], self.api.url_for('products/799/variations/733'))
        self.assertEqual(variation.id, 733)
        self.assertEqual(variation.price, 9.0)
        self.assertEqual(variation.attributes[0].option, 'Black')

    def test_attribute_options(self):
        attribute = ProductAttribute.decode({'id': 6, 'name': 'Color', 'position': 0, 'visible': False,
                                             'variation': True, 'options': ['Black', 'Green']})
        self.assertTrue(attribute.variation)
        self.assertEqual(attribute.options, ['Black', 'Green'])

    def test_unknown_product_type(self):
        self.assertIsInstance(ProductVariation.decode({'id': 1}), ProductVariation)
        self.assertEqual(Product.decode({'type': 'subscription'}).type, ProductType.SIMPLE)


if __name__ == '__main__':
    unittest.main()
