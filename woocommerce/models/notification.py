from .model import Model
from .fields import Integer, String, Boolean, DateTime, Enum
from ..utils import FakeHelper
from ..constants import NotificationObjectType


class Notification(Model):
    """A notification of the logged in user, from the store's ``notifications`` endpoint"""

    id = Integer()
    title = String()
    body = String(fake=FakeHelper.sentence)
    object_id = Integer()
    object_type = Enum(NotificationObjectType)
    is_read = Boolean()
    created_at = DateTime()
