from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Optional, List, Union, Dict, Any

from .manager import Manager
from ..models import Order, OrderNote, OrderRefund, Refund
from ..constants import (
    ModelMethod,
    GET_METHOD,
    POST_METHOD,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    Context,
    SortOrder,
    OrderSort,
    OrderStatus,
    OrderNoteType,
    RefundSort,
)
from ..decorators import validate_method_for_model
from ..utils import FakeHelper, build_query

if TYPE_CHECKING:
    from ..clients import Client


class OrderManager(Manager):

    """:class:`OrderManager` class for the ``orders`` endpoint"""

    def __init__(self, client: Client):
        """Initialize an :class:`OrderManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='orders',
            client=client,
            model=Order
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, modified_after: Optional[datetime] = None,
                       modified_before: Optional[datetime] = None, dates_are_gmt: Optional[bool] = None,
                       exclude: Optional[List[int]] = None, include: Optional[List[int]] = None,
                       offset: Optional[int] = None, order: SortOrder = SortOrder.DESC,
                       orderby: OrderSort = OrderSort.DATE, parent: Optional[List[int]] = None,
                       parent_exclude: Optional[List[int]] = None,
                       status: Optional[Union[OrderStatus, List[OrderStatus]]] = None,
                       customer: Optional[int] = None, product: Optional[int] = None,
                       dp: Optional[int] = None) -> Dict[str, Any]:
        """Query parameters of :meth:`list`; ``status`` accepts one status or a list, and defaults to ``any``"""
        if status is None:
            status = [OrderStatus.ANY]
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'after': after,
            'before': before,
            'modified_after': modified_after,
            'modified_before': modified_before,
            'dates_are_gmt': dates_are_gmt,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'parent': parent,
            'parent_exclude': parent_exclude,
            'status': status,
            'customer': customer,
            'product': product,
            'dp': dp,
        })

    def delete(self, item_id: int, force: bool = False, use_faker: Optional[bool] = None) -> bool:
        """Delete an order; moved to the trash unless ``force`` is ``True``

        :returns: ``True`` when the API accepted the request
        """
        return self.remove(self.path(item_id), build_query({'force': force}), use_faker)

    def send_details(self, order_id: int, use_faker: Optional[bool] = None) -> str:
        """Email the order details to the customer

        :returns: the message the API responds with
        """
        self.logger.info(f'Sending details of order {order_id} to the customer')
        return self.execute(
            POST_METHOD, self.path(order_id, 'actions', 'send_order_details'),
            use_faker=use_faker,
            fake=FakeHelper.sentence,
            parse=lambda data: data.get('message') if isinstance(data, dict) else data,
        )


class OrderNoteManager(Manager):

    """:class:`OrderNoteManager` class for the ``orders/{order_id}/notes`` endpoint"""

    PAGINATED = False

    def __init__(self, client: Client):
        super().__init__(
            endpoint='orders',
            client=client,
            model=OrderNote
        )

    def notes_path(self, order_id: int, *segments: Union[str, int]) -> str:
        return self.path(order_id, 'notes', *segments)

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, type: OrderNoteType = OrderNoteType.ANY) -> Dict[str, Any]:
        return build_query({'context': context, 'type': type})

    def list(self, order_id: int, use_faker: Optional[bool] = None, **params) -> List[OrderNote]:
        """Retrieve the notes of an order"""
        return self.execute(
            GET_METHOD, self.notes_path(order_id),
            params=self.resolve_params(**params),
            many=True,
            use_faker=use_faker,
            fake=self.fake_list,
        )

    def by_id(self, order_id: int, note_id: int, use_faker: Optional[bool] = None) -> OrderNote:
        return self.execute(
            GET_METHOD, self.notes_path(order_id, note_id),
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(note_id),
        )

    @validate_method_for_model(ModelMethod.CREATE)
    def create(self, order_id: int, note: OrderNote, use_faker: Optional[bool] = None) -> OrderNote:
        """Add a note to an order; set ``customer_note`` to email it to the customer"""
        self.logger.info(f'Adding note to order {order_id}')
        return self.execute(
            POST_METHOD, self.notes_path(order_id),
            payload=note.payload(),
            use_faker=use_faker,
            fake=lambda: self.fake_saved(note),
        )

    def delete(self, order_id: int, note_id: int, force: bool = True, use_faker: Optional[bool] = None) -> bool:
        """Delete a note; notes don't support the trash"""
        return self.remove(self.notes_path(order_id, note_id), build_query({'force': force}), use_faker)

    def batch(self, *args, **kwargs):
        """Order notes have no ``batch`` endpoint"""
        raise self.not_allowed('BATCH')


class OrderRefundManager(Manager):

    """:class:`OrderRefundManager` class for the ``orders/{order_id}/refunds`` endpoint"""

    def __init__(self, client: Client):
        super().__init__(
            endpoint='orders',
            client=client,
            model=OrderRefund
        )

    def refunds_path(self, order_id: int, *segments: Union[str, int]) -> str:
        return self.path(order_id, 'refunds', *segments)

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, offset: Optional[int] = None,
                       order: SortOrder = SortOrder.DESC, orderby: RefundSort = RefundSort.DATE,
                       parent: Optional[List[int]] = None, parent_exclude: Optional[List[int]] = None,
                       dp: int = 2) -> Dict[str, Any]:
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
            'parent': parent,
            'parent_exclude': parent_exclude,
            'dp': dp,
        })

    def list(self, order_id: int, use_faker: Optional[bool] = None, **params) -> List[OrderRefund]:
        """Retrieve a page of the refunds of an order"""
        query = self.resolve_params(**params)
        return self.execute(
            GET_METHOD, self.refunds_path(order_id),
            params=query,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(query['per_page']),
        )

    def by_id(self, order_id: int, refund_id: int, dp: Optional[int] = None,
              use_faker: Optional[bool] = None) -> OrderRefund:
        """Retrieve a refund of an order

        :param dp: number of decimal points to round the amounts to
        """
        return self.execute(
            GET_METHOD, self.refunds_path(order_id, refund_id),
            params=build_query({'dp': dp}) or None,
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(refund_id),
        )

    @validate_method_for_model(ModelMethod.CREATE)
    def create(self, order_id: int, refund: OrderRefund, use_faker: Optional[bool] = None) -> OrderRefund:
        """Refund (part of) an order; set ``api_refund`` to also refund the payment through the gateway"""
        self.logger.info(f'Creating refund for order {order_id}')
        return self.execute(
            POST_METHOD, self.refunds_path(order_id),
            payload=refund.payload(),
            use_faker=use_faker,
            fake=lambda: self.fake_saved(refund),
        )

    def delete(self, order_id: int, refund_id: int, force: bool = True, use_faker: Optional[bool] = None) -> bool:
        return self.remove(self.refunds_path(order_id, refund_id), build_query({'force': force}), use_faker)

    def batch(self, *args, **kwargs):
        """Order refunds have no ``batch`` endpoint"""
        raise self.not_allowed('BATCH')


class RefundManager(Manager):

    """:class:`RefundManager` class for the store wide ``refunds`` endpoint

    Each :class:`~.Refund` carries the id of its order in ``parent_id``.
    """

    def __init__(self, client: Client):
        super().__init__(
            endpoint='refunds',
            client=client,
            model=Refund
        )

    resolve_params = staticmethod(OrderRefundManager.resolve_params)
