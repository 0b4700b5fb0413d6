from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List

from .manager import Manager
from ..models import Cart, CartItem
from ..constants import ModelMethod, GET_METHOD, POST_METHOD
from ..decorators import validate_method_for_model

if TYPE_CHECKING:
    from ..clients import Client


class CartManager(Manager):

    """:class:`CartManager` class for the store's ``cart`` endpoint, provided by a store plugin"""

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`CartManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='cart',
            client=client,
            model=Cart
        )

    def list(self, *args, **kwargs):
        """There is a single cart; use :meth:`get`"""
        raise self.not_allowed('LIST')

    def by_id(self, *args, **kwargs):
        raise self.not_allowed('BY_ID')

    def batch(self, *args, **kwargs):
        raise self.not_allowed('BATCH')

    def get(self, use_faker: Optional[bool] = None) -> Cart:
        """Retrieve the cart"""
        return self.execute(
            GET_METHOD, self.path(),
            use_faker=use_faker,
            fake=Cart.fake,
        )

    @validate_method_for_model(ModelMethod.UPDATE)
    def update(self, items: List[CartItem], use_faker: Optional[bool] = None) -> Cart:
        """Replace the contents of the cart with ``items``; returns the updated cart"""
        self.logger.info(f'Updating cart with {len(items)} item(s)')
        return self.execute(
            POST_METHOD, self.path(),
            payload={'products': [item.payload() for item in items]},
            use_faker=use_faker,
            fake=lambda: Cart(
                items_count=sum(item.quantity or 0 for item in items),
                items=[self.fake_saved(item) for item in items],
            ),
        )
