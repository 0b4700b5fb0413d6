from .model import Model
from .fields import Integer, String, Boolean, Nested, List, Mapping
from .settings import MethodSetting
from ..utils import FakeHelper
from ..constants import ModelMethod


class PaymentGateway(Model):
    """Wraps a payment gateway from the ``payment_gateways`` endpoint; gateways are identified by a string id"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#payment-gateways'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.UPDATE]

    id = String(fake=lambda: FakeHelper.random_item(['bacs', 'cheque', 'cod', 'paypal']))
    title = String()
    description = String(fake=FakeHelper.sentence)
    order = Integer(fake=lambda: FakeHelper.integer(0, 10))
    enabled = Boolean()
    method_title = String()
    method_description = String(fake=FakeHelper.sentence)
    method_supports = List(String(), count=(1, 3))
    settings = Mapping(Nested(MethodSetting))
