from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Any

from .manager import Manager
from ..models import PaymentGateway

if TYPE_CHECKING:
    from ..clients import Client


class PaymentGatewayManager(Manager):

    """:class:`PaymentGatewayManager` class for the ``payment_gateways`` endpoint

    Gateways can't be created or deleted; use :meth:`update` to enable them or change their settings
    """

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`PaymentGatewayManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='payment_gateways',
            client=client,
            model=PaymentGateway
        )

    @staticmethod
    def resolve_params() -> Dict[str, Any]:
        return {}
