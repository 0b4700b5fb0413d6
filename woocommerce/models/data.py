from .model import Model
from .fields import Integer, String, Nested, List
from ..utils import FakeHelper


class DataEndpoint(Model):
    """An entry of the ``data`` index"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#list-all-data'
    IDENTIFIER = 'slug'

    slug = String(fake=lambda: FakeHelper.random_item(['continents', 'countries', 'currencies']))
    description = String(fake=FakeHelper.sentence)


class State(Model):
    IDENTIFIER = 'code'

    code = String(fake=FakeHelper.state)
    name = String()


class ContinentCountry(Model):
    """A country as listed within a continent, with its locale settings"""

    IDENTIFIER = 'code'

    code = String(fake=FakeHelper.country_code)
    currency_code = String(fake=FakeHelper.currency_code)
    currency_pos = String(fake=lambda: FakeHelper.random_item(['left', 'right', 'left_space', 'right_space']))
    decimal_sep = String(fake=lambda: FakeHelper.random_item(['.', ',']))
    dimension_unit = String(fake=lambda: FakeHelper.random_item(['cm', 'in']))
    name = String(fake=FakeHelper.country)
    num_decimals = Integer(fake=lambda: FakeHelper.integer(0, 3))
    states = List(Nested(State), count=(0, 5))
    thousand_sep = String(fake=lambda: FakeHelper.random_item([',', '.', ' ']))
    weight_unit = String(fake=lambda: FakeHelper.random_item(['kg', 'lbs']))


class Continent(Model):
    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#list-all-continents'
    IDENTIFIER = 'code'

    code = String(fake=lambda: FakeHelper.random_item(['AF', 'AN', 'AS', 'EU', 'NA', 'OC', 'SA']))
    name = String()
    countries = List(Nested(ContinentCountry), count=(1, 5))


class Country(Model):
    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#list-all-countries'
    IDENTIFIER = 'code'

    code = String(fake=FakeHelper.country_code)
    name = String(fake=FakeHelper.country)
    states = List(Nested(State), count=(0, 5))


class CurrencyData(Model):
    """A currency from ``data/currencies``"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#list-all-currencies'
    IDENTIFIER = 'code'

    code = String(fake=FakeHelper.currency_code)
    name = String()
    symbol = String(fake=lambda: FakeHelper.random_item(['$', '€', '£', '¥']))
