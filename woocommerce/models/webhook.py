from .model import Model
from .fields import Integer, String, DateTime, Enum, List
from ..utils import FakeHelper
from ..constants import ModelMethod, WebhookStatus, WebhookTopic


class Webhook(Model):

    """Wraps a webhook from the ``webhooks`` endpoint

    ``resource`` and ``event`` are derived by the API from ``topic``
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#webhooks'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    name = String(fake=FakeHelper.sentence)
    status = Enum(WebhookStatus)
    topic = Enum(WebhookTopic)
    resource = String(fake=lambda: FakeHelper.random_item(['coupon', 'customer', 'order', 'product']))
    event = String(fake=lambda: FakeHelper.random_item(['created', 'updated', 'deleted']))
    hooks = List(String(fake=lambda: f'woocommerce_{FakeHelper.slug()}'), count=(1, 3))
    delivery_url = String(fake=FakeHelper.url)
    secret = String(fake=FakeHelper.uuid)
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
