from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Optional, List, Dict, Any

from .manager import Manager
from ..models import Webhook
from ..constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, Context, SortOrder, WebhookSort, WebhookStatus
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class WebhookManager(Manager):

    """:class:`WebhookManager` class for the ``webhooks`` endpoint"""

    def __init__(self, client: Client):
        """Initialize a :class:`WebhookManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='webhooks',
            client=client,
            model=Webhook
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, offset: Optional[int] = None,
                       order: SortOrder = SortOrder.DESC, orderby: WebhookSort = WebhookSort.DATE,
                       status: Optional[WebhookStatus] = None) -> Dict[str, Any]:
        """Query parameters of :meth:`list`; webhooks of every status are listed unless ``status`` is given"""
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'after': after,
            'before': before,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'status': status if status is not None else 'all',
        })

    def delete(self, item_id: int, force: bool = False, use_faker: Optional[bool] = None) -> bool:
        return self.remove(self.path(item_id), build_query({'force': force}), use_faker)
