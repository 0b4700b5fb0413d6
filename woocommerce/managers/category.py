from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List, Dict, Any

from .manager import Manager
from ..models import Category
from ..constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, Context, SortOrder, CategorySort
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class CategoryManager(Manager):

    """:class:`CategoryManager` class for the ``products/categories`` endpoint"""

    def __init__(self, client: Client):
        """Initialize a :class:`CategoryManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='products/categories',
            client=client,
            model=Category
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, order: SortOrder = SortOrder.DESC,
                       orderby: CategorySort = CategorySort.NAME, hide_empty: Optional[bool] = None,
                       parent: Optional[int] = None, product: Optional[int] = None,
                       slug: Optional[str] = None) -> Dict[str, Any]:
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'exclude': exclude,
            'include': include,
            'order': order,
            'orderby': orderby,
            'hide_empty': hide_empty,
            'parent': parent,
            'product': product,
            'slug': slug,
        })

    def delete(self, item_id: int, force: bool = False, use_faker: Optional[bool] = None) -> bool:
        """Delete a category

        :returns: ``True`` when the API accepted the request
        """
        return self.remove(self.path(item_id), build_query({'force': force}), use_faker)

    def get_root(self, use_faker: Optional[bool] = None, **params) -> List[Category]:
        """Retrieve the top level categories (every other category is a subcategory of one of these)"""
        return self.list(parent=0, use_faker=use_faker, **params)
