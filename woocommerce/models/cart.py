from .model import Model
from .fields import Integer, Decimal, String, Boolean, Nested, List
from .common import Image
from ..utils import FakeHelper
from ..constants import ModelMethod


class CartItem(Model):
    IDENTIFIER = 'key'

    key = String(fake=FakeHelper.uuid)
    id = Integer()
    quantity = Integer(fake=lambda: FakeHelper.integer(1, 5))
    name = String(fake=FakeHelper.sentence)
    sku = String(fake=FakeHelper.uuid)
    permalink = String(fake=FakeHelper.url)
    images = List(Nested(Image), count=(0, 2))
    price = Decimal()
    line_price = Decimal()
    variations = List(Integer(), key='variation', count=(0, 3))


class Cart(Model):
    """The cart of the logged in user, from the store's ``cart`` endpoint"""

    IDENTIFIER = None
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.UPDATE]

    items_count = Integer(key='item_count', fake=lambda: FakeHelper.integer(0, 10))
    items = List(Nested(CartItem), count=(0, 5))
    needs_shipping = Boolean()
    needs_payment = Boolean()
    total_price = Decimal()
