from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Union, Dict, Any

from .manager import Manager
from ..models import TaxRate, TaxClass
from ..constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, Context, SortOrder, TaxRateSort
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class TaxRateManager(Manager):

    """:class:`TaxRateManager` class for the ``taxes`` endpoint"""

    def __init__(self, client: Client):
        """Initialize a :class:`TaxRateManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='taxes',
            client=client,
            model=TaxRate
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       offset: Optional[int] = None, order: SortOrder = SortOrder.DESC,
                       orderby: TaxRateSort = TaxRateSort.ORDER, tax_class: Optional[str] = None) -> Dict[str, Any]:
        """Query parameters of :meth:`list`; ``tax_class`` is sent as ``class``"""
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'class': tax_class,
        })

    def delete(self, item_id: int, force: bool = True, use_faker: Optional[bool] = None) -> bool:
        """Delete a tax rate; tax rates don't support the trash"""
        return self.remove(self.path(item_id), build_query({'force': force}), use_faker)


class TaxClassManager(Manager):

    """:class:`TaxClassManager` class for the ``taxes/classes`` endpoint

    Tax classes are identified by their slug, ex. ``reduced-rate``
    """

    PAGINATED = False

    def __init__(self, client: Client):
        super().__init__(
            endpoint='taxes/classes',
            client=client,
            model=TaxClass
        )

    @staticmethod
    def resolve_params() -> Dict[str, Any]:
        return {}

    def by_slug(self, slug: str, use_faker: Optional[bool] = None) -> Optional[TaxClass]:
        """Retrieve a tax class by slug from :meth:`list`, or ``None`` if there is no such class"""
        if self.use_fake_data(use_faker):
            return self.fake_with_uid(slug)
        return next((tax_class for tax_class in self.list(use_faker=False) if tax_class.slug == slug), None)

    def delete(self, tax_class: Union[TaxClass, str], force: bool = True, use_faker: Optional[bool] = None) -> bool:
        """Delete a tax class

        :param tax_class: the :class:`~.TaxClass` or its slug
        :raises RequiredFieldError: if ``tax_class`` is a :class:`~.TaxClass` without ``slug``
        """
        if isinstance(tax_class, TaxClass):
            tax_class.require('slug')
            tax_class = tax_class.slug
        return self.remove(self.path(tax_class), build_query({'force': force}), use_faker)
