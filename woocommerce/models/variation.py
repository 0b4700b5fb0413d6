from .model import Model
from .fields import Integer, Decimal, String, Boolean, DateTime, Enum, Nested, List
from .common import MetaData, Image
from .product import ProductDownload, ProductDimensions, ProductDefaultAttribute
from ..utils import FakeHelper
from ..constants import ModelMethod, ProductStatus, ProductTaxStatus, StockStatus, Backorder


class ProductVariation(Model):

    """Wraps a variation from the ``products/{product_id}/variations`` endpoint

    Variation attributes carry the chosen ``option`` of each variable attribute of the parent product.
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#product-variations'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
    description = String(fake=FakeHelper.sentence)
    permalink = String(fake=FakeHelper.url)
    sku = String(fake=FakeHelper.uuid)
    price = Decimal()
    regular_price = Decimal()
    sale_price = Decimal()
    date_on_sale_from = DateTime()
    date_on_sale_from_gmt = DateTime()
    date_on_sale_to = DateTime()
    date_on_sale_to_gmt = DateTime()
    on_sale = Boolean()
    status = Enum(ProductStatus)
    purchasable = Boolean()
    virtual = Boolean()
    downloadable = Boolean()
    downloads = List(Nested(ProductDownload), count=(0, 3))
    download_limit = Integer()
    download_expiry = Integer()
    tax_status = Enum(ProductTaxStatus)
    tax_class = String()
    manage_stock = Boolean()
    stock_quantity = Integer()
    stock_status = Enum(StockStatus)
    backorders = Enum(Backorder)
    backorders_allowed = Boolean()
    backordered = Boolean()
    weight = String(fake=lambda: str(FakeHelper.integer(1, 50)))
    dimensions = Nested(ProductDimensions)
    shipping_class = String()
    shipping_class_id = Integer()
    image = Nested(Image)
    attributes = List(Nested(ProductDefaultAttribute), count=(1, 3))
    menu_order = Integer()
    meta_data = List(Nested(MetaData), count=(0, 3))
