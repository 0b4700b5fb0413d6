from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Optional, List, Dict, Any

from .manager import Manager
from ..models import Coupon
from ..constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, Context, SortOrder, CouponSort
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class CouponManager(Manager):

    """:class:`CouponManager` class for the ``coupons`` endpoint"""

    def __init__(self, client: Client):
        """Initialize a :class:`CouponManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='coupons',
            client=client,
            model=Coupon
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, modified_after: Optional[datetime] = None,
                       modified_before: Optional[datetime] = None, dates_are_gmt: Optional[bool] = None,
                       exclude: Optional[List[int]] = None, include: Optional[List[int]] = None,
                       offset: Optional[int] = None, order: SortOrder = SortOrder.DESC,
                       orderby: CouponSort = CouponSort.DATE, code: Optional[str] = None) -> Dict[str, Any]:
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
            'code': code,
        })

    def by_code(self, code: str, use_faker: Optional[bool] = None) -> Optional[Coupon]:
        """Retrieve a coupon by its code, or ``None`` if there is no such coupon"""
        if self.use_fake_data(use_faker):
            coupon = Coupon.fake()
            coupon.code = code
            return coupon
        if coupons := self.list(code=code, per_page=1, use_faker=False):
            return coupons[0]
        return None

    def delete(self, item_id: int, force: bool = False, use_faker: Optional[bool] = None) -> bool:
        """Delete a coupon; moved to the trash unless ``force`` is ``True``"""
        return self.remove(self.path(item_id), build_query({'force': force}), use_faker)
