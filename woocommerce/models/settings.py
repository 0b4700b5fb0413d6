from .model import Model
from .fields import String, Raw, List, Mapping
from ..utils import FakeHelper
from ..constants import ModelMethod


class SettingsGroup(Model):
    """A settings group from the ``settings`` endpoint, ex. ``general`` or ``products``"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#setting-groups'

    id = String(fake=FakeHelper.slug)
    label = String()
    description = String(fake=FakeHelper.sentence)
    parent_id = String(fake=FakeHelper.slug)
    sub_groups = List(String(fake=FakeHelper.slug), count=(0, 3))


class SettingOption(Model):

    """Wraps one option of a settings group, from ``settings/{group_id}``

    ``value`` and ``default`` keep the type the API sends, which depends on the option ``type``
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#setting-options'
    ALLOWED_METHODS = [ModelMethod.GET, ModelMethod.UPDATE]

    id = String(fake=lambda: f'woocommerce_{FakeHelper.slug()}')
    label = String()
    description = String(fake=FakeHelper.sentence)
    value = Raw()
    default = Raw()
    tip = String(fake=FakeHelper.sentence)
    placeholder = String()
    type = String(fake=lambda: FakeHelper.random_item(['text', 'select', 'checkbox', 'number', 'email']))
    options = Mapping(String())
    group_id = String(fake=FakeHelper.slug)


class MethodSetting(Model):
    """A setting of a payment gateway or a shipping zone method"""

    id = String(fake=FakeHelper.slug)
    label = String()
    description = String(fake=FakeHelper.sentence)
    type = String(fake=lambda: FakeHelper.random_item(['text', 'select', 'checkbox', 'price']))
    value = Raw()
    default = Raw()
    tip = String(fake=FakeHelper.sentence)
    placeholder = String()
