from __future__ import annotations
from typing import List as ListType, Optional

from .model import Model
from .fields import Integer, Decimal, String, Boolean, DateTime, Enum, Nested, List
from .common import MetaData, Image
from ..utils import FakeHelper
from ..constants import (
    ModelMethod,
    ProductType,
    ProductStatus,
    CatalogVisibility,
    ProductTaxStatus,
    StockStatus,
    Backorder,
    ReviewStatus,
)


class ProductDownload(Model):
    id = String(fake=FakeHelper.uuid)
    name = String()
    file = String(fake=FakeHelper.url)


class ProductDimensions(Model):
    IDENTIFIER = None

    length = String(fake=lambda: str(FakeHelper.integer(1, 100)))
    width = String(fake=lambda: str(FakeHelper.integer(1, 100)))
    height = String(fake=lambda: str(FakeHelper.integer(1, 100)))


class ProductItemCategory(Model):
    """The short form of a category embedded in a product"""

    id = Integer()
    name = String()
    slug = String(fake=FakeHelper.slug)


class ProductItemTag(Model):
    """The short form of a tag embedded in a product"""

    id = Integer()
    name = String()
    slug = String(fake=FakeHelper.slug)


class ProductAttribute(Model):
    id = Integer()
    name = String()
    position = Integer(fake=lambda: FakeHelper.integer(0, 10))
    visible = Boolean()
    variation = Boolean()
    options = List(String())


class ProductDefaultAttribute(Model):
    id = Integer()
    name = String()
    option = String()


class Product(Model):

    """Wraps a product from the ``products`` endpoint

    Prices are strings on the wire and floats on the model::

        >>> product = Product.decode({'id': 794, 'name': 'Premium Quality', 'regular_price': '21.99'})
        >>> product.regular_price
        21.99
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#products'
    IDENTIFIER = 'id'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    name = String(fake=FakeHelper.sentence)
    slug = String(fake=FakeHelper.slug)
    permalink = String(fake=FakeHelper.url)
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
    type = Enum(ProductType)
    status = Enum(ProductStatus)
    featured = Boolean()
    catalog_visibility = Enum(CatalogVisibility)
    description = String(fake=FakeHelper.sentence)
    short_description = String(fake=FakeHelper.sentence)
    sku = String(fake=FakeHelper.uuid)
    price = Decimal()
    regular_price = Decimal()
    sale_price = Decimal()
    date_on_sale_from = DateTime()
    date_on_sale_from_gmt = DateTime()
    date_on_sale_to = DateTime()
    date_on_sale_to_gmt = DateTime()
    price_html = String()
    on_sale = Boolean()
    purchasable = Boolean()
    total_sales = Integer()
    virtual = Boolean()
    downloadable = Boolean()
    downloads = List(Nested(ProductDownload), count=(0, 3))
    download_limit = Integer()
    download_expiry = Integer()
    external_url = String(fake=FakeHelper.url)
    button_text = String()
    tax_status = Enum(ProductTaxStatus)
    tax_class = String()
    manage_stock = Boolean()
    stock_quantity = Integer()
    stock_status = Enum(StockStatus)
    backorders = Enum(Backorder)
    backorders_allowed = Boolean()
    backordered = Boolean()
    sold_individually = Boolean()
    weight = String(fake=lambda: str(FakeHelper.integer(1, 50)))
    dimensions = Nested(ProductDimensions)
    shipping_required = Boolean()
    shipping_taxable = Boolean()
    shipping_class = String()
    shipping_class_id = Integer()
    reviews_allowed = Boolean()
    average_rating = Decimal()
    rating_count = Integer()
    related_ids = List(Integer())
    upsell_ids = List(Integer())
    cross_sell_ids = List(Integer())
    parent_id = Integer()
    purchase_note = String(fake=FakeHelper.sentence)
    categories = List(Nested(ProductItemCategory), count=(0, 3))
    tags = List(Nested(ProductItemTag), count=(0, 5))
    images = List(Nested(Image), count=(1, 4))
    attributes = List(Nested(ProductAttribute), count=(0, 3))
    default_attributes = List(Nested(ProductDefaultAttribute), count=(0, 3))
    variations = List(Integer())
    grouped_products = List(Integer())
    menu_order = Integer()
    meta_data = List(Nested(MetaData), count=(0, 3))

    @property
    def thumbnail(self) -> Optional[str]:
        """The ``src`` of the first product image"""
        if self.images:
            return self.images[0].src
        return None


class ProductWithChildren:

    """A product together with the products its id lists point to

    Built by :meth:`~.ProductManager.with_children` from a single ``include=`` request.
    """

    def __init__(self, product: Product, related: Optional[ListType[Product]] = None,
                 upsells: Optional[ListType[Product]] = None, cross_sells: Optional[ListType[Product]] = None,
                 parent: Optional[Product] = None, grouped: Optional[ListType[Product]] = None):
        self.product = product
        self.related = related
        self.upsells = upsells
        self.cross_sells = cross_sells
        self.parent = parent
        self.grouped = grouped

    @classmethod
    def from_products(cls, product: Product, products: ListType[Product]) -> ProductWithChildren:
        """Sorts ``products`` into the lists of ``product`` that reference their ids

        A product can land in more than one list. Lists that end up empty are ``None``.
        """
        related, upsells, cross_sells, grouped = [], [], [], []
        parent = None

        for item in products:
            if item.id in (product.related_ids or []):
                related.append(item)
            if item.id in (product.upsell_ids or []):
                upsells.append(item)
            if item.id in (product.cross_sell_ids or []):
                cross_sells.append(item)
            if item.id in (product.grouped_products or []):
                grouped.append(item)
            if product.parent_id and item.id == product.parent_id:
                parent = item

        return cls(
            product=product,
            related=related or None,
            upsells=upsells or None,
            cross_sells=cross_sells or None,
            parent=parent,
            grouped=grouped or None
        )

    @classmethod
    def fake(cls, product: Optional[Product] = None) -> ProductWithChildren:
        return cls(
            product=product or Product.fake(),
            related=FakeHelper.list(Product.fake, (0, 3)),
            upsells=FakeHelper.list(Product.fake, (0, 3)),
            cross_sells=FakeHelper.list(Product.fake, (0, 3)),
            parent=Product.fake(),
            grouped=FakeHelper.list(Product.fake, (0, 3)),
        )

    def __repr__(self):
        return f'<WooCommerce ProductWithChildren: {self.product.uid}>'


class ProductTag(Model):
    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#product-tags'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    name = String()
    slug = String(fake=FakeHelper.slug)
    description = String(fake=FakeHelper.sentence)
    count = Integer(fake=lambda: FakeHelper.integer(0, 500))


class ShippingClass(Model):
    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#product-shipping-classes'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    name = String()
    slug = String(fake=FakeHelper.slug)
    description = String(fake=FakeHelper.sentence)
    count = Integer(fake=lambda: FakeHelper.integer(0, 500))


class ProductReview(Model):
    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#product-reviews'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    date_created = DateTime()
    date_created_gmt = DateTime()
    product_id = Integer()
    status = Enum(ReviewStatus)
    reviewer = String(fake=FakeHelper.first_name)
    reviewer_email = String(fake=FakeHelper.email)
    review = String(fake=FakeHelper.sentence)
    rating = Integer(fake=lambda: FakeHelper.integer(0, 5))
    verified = Boolean()
