from .model import Model
from .fields import Integer, String, Boolean, Enum, Nested, Mapping
from .settings import MethodSetting
from ..utils import FakeHelper
from ..constants import ModelMethod, ZoneLocationType


class ShippingZone(Model):
    """Wraps a shipping zone from the ``shipping/zones`` endpoint"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#shipping-zones'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    name = String(fake=FakeHelper.country)
    order = Integer(fake=lambda: FakeHelper.integer(0, 10))


class ShippingZoneLocation(Model):
    """A location of a shipping zone; ``code`` is a postcode, state, country or continent code"""

    IDENTIFIER = 'code'

    code = String(fake=FakeHelper.country_code)
    type = Enum(ZoneLocationType)


class ShippingZoneMethod(Model):

    """Wraps a method of a shipping zone, from ``shipping/zones/{zone_id}/methods``

    Zone methods are identified by ``instance_id``; ``method_id`` names the kind of method, ex. ``flat_rate``
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#shipping-zone-methods'
    IDENTIFIER = 'instance_id'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    instance_id = Integer()
    title = String()
    order = Integer(fake=lambda: FakeHelper.integer(0, 10))
    enabled = Boolean()
    method_id = String(fake=lambda: FakeHelper.random_item(['flat_rate', 'free_shipping', 'local_pickup']))
    method_title = String()
    method_description = String(fake=FakeHelper.sentence)
    settings = Mapping(Nested(MethodSetting))


class ShippingMethod(Model):
    """A shipping method available to zones, from the ``shipping_methods`` endpoint"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#shipping-methods'

    id = String(fake=lambda: FakeHelper.random_item(['flat_rate', 'free_shipping', 'local_pickup']))
    title = String()
    description = String(fake=FakeHelper.sentence)
