from .model import Model
from .fields import Integer, String, Boolean, List
from ..utils import FakeHelper
from ..constants import ModelMethod


class TaxRate(Model):

    """Wraps a tax rate from the ``taxes`` endpoint

    The rate's tax class is sent as ``class`` and available as :attr:`tax_class`
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#tax-rates'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    country = String(fake=FakeHelper.country_code)
    state = String(fake=FakeHelper.state)
    postcode = String(fake=FakeHelper.zip_code)
    city = String(fake=FakeHelper.city)
    postcodes = List(String(fake=FakeHelper.zip_code), count=(0, 3))
    cities = List(String(fake=FakeHelper.city), count=(0, 3))
    rate = String(fake=lambda: f'{FakeHelper.integer(0, 25)}.0000')
    name = String()
    priority = Integer(fake=lambda: FakeHelper.integer(1, 5))
    compound = Boolean()
    shipping = Boolean()
    order = Integer(fake=lambda: FakeHelper.integer(0, 10))
    tax_class = String(key='class', fake=lambda: FakeHelper.random_item(['standard', 'reduced-rate', 'zero-rate']))


class TaxClass(Model):
    """Wraps a tax class from the ``taxes/classes`` endpoint; tax classes are identified by slug"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#tax-classes'
    IDENTIFIER = 'slug'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.DELETE]

    slug = String(fake=FakeHelper.slug)
    name = String()
