from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List

from .manager import Manager
from ..models import Notification
from ..constants import GET_METHOD, POST_METHOD
from ..exceptions import RequiredFieldError
from ..utils import build_query, build_path

if TYPE_CHECKING:
    from ..clients import Client


class NotificationManager(Manager):

    """:class:`NotificationManager` class for the store's ``notifications`` endpoints

    These endpoints are provided by a store plugin. Every operation acts on the user
    stored by :meth:`.AuthManager.login`; fake data doesn't need a logged in user
    """

    PAGINATED = False

    #: Sent as ``device_id`` when storing a push token
    DEVICE_ID = 'mobile'

    def __init__(self, client: Client):
        """Initialize a :class:`NotificationManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='notifications',
            client=client,
            model=Notification
        )

    def user_id(self, use_faker: Optional[bool] = None) -> Optional[int]:
        """The stored user id; ``None`` when fake data is used

        :raises RequiredFieldError: if no user is logged in
        """
        if self.use_fake_data(use_faker):
            return None
        if (user_id := self.client.storage.get_user_id()) is None:
            raise RequiredFieldError(self.client, 'No user is logged in; call login() or register() first')
        return user_id

    def list(self, use_faker: Optional[bool] = None) -> List[Notification]:
        """Retrieve the notifications of the logged in user"""
        user_id = self.user_id(use_faker)
        return self.execute(
            GET_METHOD, self.path(),
            params=build_query({'user_id': user_id}),
            many=True,
            use_faker=use_faker,
            fake=self.fake_list,
        )

    def mark_read(self, use_faker: Optional[bool] = None) -> bool:
        """Mark every notification of the logged in user as read

        :returns: ``True`` if the API reports success
        """
        user_id = self.user_id(use_faker)
        return self.execute(
            POST_METHOD, self.path('read'),
            payload={'user_id': user_id},
            use_faker=use_faker,
            fake=lambda: True,
            parse=lambda data: isinstance(data, dict) and data.get('message') == 'success',
        )

    def store_fcm_token(self, token: str, use_faker: Optional[bool] = None) -> str:
        """Register a Firebase Cloud Messaging token for push notifications to the logged in user

        :returns: the status the API responds with
        """
        user_id = self.user_id(use_faker)
        self.logger.info('Storing push notification token')
        return self.execute(
            POST_METHOD, build_path('fcm'),
            payload={'current_user': user_id, 'gen_token': token, 'device_id': self.DEVICE_ID},
            use_faker=use_faker,
            fake=lambda: 'success',
            parse=lambda data: data.get('status') if isinstance(data, dict) else data,
        )
