from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List

from .manager import Manager
from ..models import SystemStatus, SystemStatusTool
from ..constants import ModelMethod, GET_METHOD, PUT_METHOD
from ..decorators import validate_method_for_model

if TYPE_CHECKING:
    from ..clients import Client


class SystemStatusManager(Manager):

    """:class:`SystemStatusManager` class for the ``system_status`` endpoint and its tools"""

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`SystemStatusManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='system_status',
            client=client,
            model=SystemStatusTool
        )

    def list(self, use_faker: Optional[bool] = None) -> List[SystemStatusTool]:
        """Same as :meth:`tools`"""
        return self.tools(use_faker)

    def get(self, use_faker: Optional[bool] = None) -> SystemStatus:
        """Retrieve the system status report"""
        return self.execute(
            GET_METHOD, self.path(),
            model=SystemStatus,
            use_faker=use_faker,
            fake=SystemStatus.fake,
        )

    def tools(self, use_faker: Optional[bool] = None) -> List[SystemStatusTool]:
        """Retrieve the maintenance tools"""
        return self.execute(
            GET_METHOD, self.path('tools'),
            many=True,
            use_faker=use_faker,
            fake=self.fake_list,
        )

    def tool(self, tool_id: str, use_faker: Optional[bool] = None) -> SystemStatusTool:
        return self.execute(
            GET_METHOD, self.path('tools', tool_id),
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(tool_id),
        )

    @validate_method_for_model(ModelMethod.UPDATE)
    def run_tool(self, tool_id: str, confirm: bool = True, use_faker: Optional[bool] = None) -> SystemStatusTool:
        """Run a maintenance tool; the result is in ``success`` and ``message`` of the returned tool"""
        self.logger.info(f'Running system status tool {tool_id}')
        return self.execute(
            PUT_METHOD, self.path('tools', tool_id),
            payload={'confirm': confirm},
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(tool_id),
        )
