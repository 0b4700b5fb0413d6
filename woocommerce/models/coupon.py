from .model import Model
from .fields import Integer, Decimal, String, Boolean, DateTime, Enum, Nested, List
from .common import MetaData
from ..utils import FakeHelper
from ..constants import ModelMethod, DiscountType


class Coupon(Model):

    """Wraps a coupon from the ``coupons`` endpoint

    ``amount`` is a percentage or a fixed amount, depending on the :class:`~.DiscountType`
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#coupons'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    code = String(fake=lambda: FakeHelper.word().upper())
    amount = Decimal()
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
    discount_type = Enum(DiscountType)
    description = String(fake=FakeHelper.sentence)
    date_expires = DateTime()
    date_expires_gmt = DateTime()
    usage_count = Integer(fake=lambda: FakeHelper.integer(0, 100))
    individual_use = Boolean()
    product_ids = List(Integer())
    excluded_product_ids = List(Integer())
    usage_limit = Integer()
    usage_limit_per_user = Integer()
    limit_usage_to_x_items = Integer()
    free_shipping = Boolean()
    product_categories = List(Integer())
    excluded_product_categories = List(Integer())
    exclude_sale_items = Boolean()
    minimum_amount = Decimal()
    maximum_amount = Decimal()
    email_restrictions = List(String(fake=FakeHelper.email))
    used_by = List(String(fake=FakeHelper.email))
    meta_data = List(Nested(MetaData), count=(0, 3))
