from .model import Model
from .fields import Integer, String, Boolean, DateTime, Enum, Nested, List
from .common import MetaData
from .order import Billing, Shipping
from ..utils import FakeHelper
from ..constants import ModelMethod, CustomerRole


class Customer(Model):

    """Wraps a customer from the ``customers`` endpoint

    ``password`` is write-only; the API never returns it.
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#customers'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.CREATE, ModelMethod.UPDATE, ModelMethod.DELETE]

    id = Integer()
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
    email = String(fake=FakeHelper.email)
    first_name = String(fake=FakeHelper.first_name)
    last_name = String(fake=FakeHelper.last_name)
    role = Enum(CustomerRole)
    username = String(fake=FakeHelper.slug)
    password = String(fake=FakeHelper.uuid)
    billing = Nested(Billing)
    shipping = Nested(Shipping)
    is_paying_customer = Boolean()
    avatar_url = String(fake=FakeHelper.image)
    meta_data = List(Nested(MetaData), count=(0, 3))

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name) if part)


class CustomerDownloadFile(Model):
    IDENTIFIER = 'file'

    name = String()
    file = String(fake=FakeHelper.url)


class CustomerDownload(Model):

    """A downloadable file a customer has access to, from ``customers/{customer_id}/downloads``"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#customer-downloads'
    IDENTIFIER = 'download_id'

    download_id = String(fake=FakeHelper.uuid)
    download_url = String(fake=FakeHelper.url)
    product_id = Integer()
    product_name = String(fake=FakeHelper.sentence)
    download_name = String()
    order_id = Integer()
    order_key = String(fake=lambda: f'wc_order_{FakeHelper.slug()}')
    downloads_remaining = String(fake=lambda: str(FakeHelper.integer(0, 10)))
    access_expires = DateTime()
    access_expires_gmt = DateTime()
    file = Nested(CustomerDownloadFile)


class AuthResponse(Model):
    """The body returned by the store's ``login`` and ``register`` endpoints"""

    IDENTIFIER = 'user_id'

    user_id = Integer()


class PasswordReset(Model):
    """The user id and reset code returned by the store's ``forgot-password`` endpoint"""

    IDENTIFIER = 'user_id'

    user_id = Integer()
    code = String(fake=FakeHelper.uuid)


class PasswordChange(Model):
    IDENTIFIER = 'status'

    status = String(fake=lambda: 'success')
