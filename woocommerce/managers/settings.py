from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List

from .manager import Manager
from ..models import SettingsGroup, SettingOption, BatchRequest, BatchResponse
from ..constants import ModelMethod, GET_METHOD, POST_METHOD, PUT_METHOD
from ..decorators import validate_method_for_model

if TYPE_CHECKING:
    from ..clients import Client


class SettingsManager(Manager):

    """:class:`SettingsManager` class for the ``settings`` endpoint

    Settings are organised in groups (``general``, ``products``, ...); each group holds options
    identified by a string id, ex. ``woocommerce_currency``
    """

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`SettingsManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='settings',
            client=client,
            model=SettingOption
        )

    def list(self, use_faker: Optional[bool] = None) -> List[SettingsGroup]:
        """Same as :meth:`groups`; options are listed per group with :meth:`options`"""
        return self.groups(use_faker)

    def by_id(self, *args, **kwargs):
        """Options are retrieved per group with :meth:`option`"""
        raise self.not_allowed('BY_ID')

    def groups(self, use_faker: Optional[bool] = None) -> List[SettingsGroup]:
        """Retrieve the settings groups"""
        return self.execute(
            GET_METHOD, self.path(),
            model=SettingsGroup,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=SettingsGroup),
        )

    def options(self, group_id: str, use_faker: Optional[bool] = None) -> List[SettingOption]:
        """Retrieve the options of a settings group"""
        return self.execute(
            GET_METHOD, self.path(group_id),
            many=True,
            use_faker=use_faker,
            fake=lambda: [self._fake_option(group_id) for _ in range(3)],
        )

    def option(self, group_id: str, option_id: str, use_faker: Optional[bool] = None) -> SettingOption:
        """Retrieve one option of a settings group"""
        return self.execute(
            GET_METHOD, self.path(group_id, option_id),
            use_faker=use_faker,
            fake=lambda: self._fake_option(group_id, option_id),
        )

    @validate_method_for_model(ModelMethod.UPDATE)
    def update_option(self, option: SettingOption, use_faker: Optional[bool] = None) -> SettingOption:
        """Set the ``value`` of an option

        :param option: the option to update; ``group_id`` and ``id`` must be set
        :raises RequiredFieldError: if ``group_id`` or ``id`` is not set
        """
        option.require('group_id', 'id')
        self.logger.info(f'Updating setting {option.group_id}/{option.id}')
        return self.execute(
            PUT_METHOD, self.path(option.group_id, option.id),
            payload={'value': option.value},
            use_faker=use_faker,
            fake=lambda: self.fake_saved(option),
        )

    def update(self, option: SettingOption, use_faker: Optional[bool] = None) -> SettingOption:
        return self.update_option(option, use_faker)

    def batch(self, group_id: str, request: BatchRequest,
              use_faker: Optional[bool] = None) -> BatchResponse[SettingOption]:
        """Update several options of a settings group in one request"""
        self.logger.info(f'Sending {request} for settings group {group_id}')
        return self.execute(
            POST_METHOD, self.path(group_id, 'batch'),
            payload=request.encode(),
            use_faker=use_faker,
            fake=lambda: BatchResponse.fake(request, SettingOption),
            parse=lambda data: BatchResponse.decode(data, SettingOption),
        )

    @staticmethod
    def _fake_option(group_id: str, option_id: Optional[str] = None) -> SettingOption:
        option = SettingOption.fake()
        option.group_id = group_id
        if option_id is not None:
            option.id = option_id
        return option
