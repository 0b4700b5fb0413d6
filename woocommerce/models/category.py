from .model import Model
from .fields import Integer, String, Enum, Nested
from .common import Image, Links
from ..utils import FakeHelper
from ..constants import ModelMethod, CategoryDisplay


class Category(Model):

    """Wraps a product category from the ``products/categories`` endpoint"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#product-categories'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    name = String()
    slug = String(fake=FakeHelper.slug)
    parent = Integer(fake=lambda: FakeHelper.integer(0, 100))
    description = String(fake=FakeHelper.sentence)
    display = Enum(CategoryDisplay)
    image = Nested(Image)
    menu_order = Integer(fake=lambda: FakeHelper.integer(0, 20))
    count = Integer(fake=lambda: FakeHelper.integer(0, 500))
    links = Nested(Links, key='_links')

    @property
    def is_root(self) -> bool:
        return not self.parent
