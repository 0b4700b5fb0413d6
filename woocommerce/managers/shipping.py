from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List, Dict, Any

from .manager import Manager
from ..models import ShippingZone, ShippingZoneLocation, ShippingZoneMethod, ShippingMethod
from ..constants import GET_METHOD, POST_METHOD, PUT_METHOD
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class ShippingZoneManager(Manager):

    """:class:`ShippingZoneManager` class for the ``shipping/zones`` endpoint

    Also manages the locations and methods of each zone
    """

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`ShippingZoneManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='shipping/zones',
            client=client,
            model=ShippingZone
        )

    @staticmethod
    def resolve_params() -> Dict[str, Any]:
        return {}

    def delete(self, item_id: int, force: bool = True, use_faker: Optional[bool] = None) -> bool:
        """Delete a shipping zone; zones don't support the trash"""
        return self.remove(self.path(item_id), build_query({'force': force}), use_faker)

    def locations(self, zone_id: int, use_faker: Optional[bool] = None) -> List[ShippingZoneLocation]:
        """Retrieve the locations of a zone"""
        return self.execute(
            GET_METHOD, self.path(zone_id, 'locations'),
            model=ShippingZoneLocation,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=ShippingZoneLocation),
        )

    def update_locations(self, zone_id: int, locations: List[ShippingZoneLocation],
                         use_faker: Optional[bool] = None) -> List[ShippingZoneLocation]:
        """Replace the locations of a zone; returns the new locations"""
        self.logger.info(f'Updating locations of shipping zone {zone_id}')
        return self.execute(
            PUT_METHOD, self.path(zone_id, 'locations'),
            payload=[location.payload() for location in locations],
            model=ShippingZoneLocation,
            many=True,
            use_faker=use_faker,
            fake=lambda: [self.fake_saved(location) for location in locations],
        )

    def methods(self, zone_id: int, use_faker: Optional[bool] = None) -> List[ShippingZoneMethod]:
        """Retrieve the shipping methods of a zone"""
        return self.execute(
            GET_METHOD, self.path(zone_id, 'methods'),
            model=ShippingZoneMethod,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=ShippingZoneMethod),
        )

    def method(self, zone_id: int, instance_id: int, use_faker: Optional[bool] = None) -> ShippingZoneMethod:
        return self.execute(
            GET_METHOD, self.path(zone_id, 'methods', instance_id),
            model=ShippingZoneMethod,
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(instance_id, model=ShippingZoneMethod),
        )

    def create_method(self, zone_id: int, method: ShippingZoneMethod,
                      use_faker: Optional[bool] = None) -> ShippingZoneMethod:
        """Add a shipping method to a zone; ``method_id`` names the method, ex. ``flat_rate``

        :raises RequiredFieldError: if ``method_id`` is not set
        """
        method.require('method_id')
        self.logger.info(f'Adding {method.method_id} to shipping zone {zone_id}')
        return self.execute(
            POST_METHOD, self.path(zone_id, 'methods'),
            payload=method.payload(),
            model=ShippingZoneMethod,
            use_faker=use_faker,
            fake=lambda: self.fake_saved(method),
        )

    def update_method(self, zone_id: int, method: ShippingZoneMethod,
                      use_faker: Optional[bool] = None) -> ShippingZoneMethod:
        """Update a method of a zone

        :raises RequiredFieldError: if ``instance_id`` is not set
        """
        method.require('instance_id')
        self.logger.info(f'Updating {method} of shipping zone {zone_id}')
        return self.execute(
            PUT_METHOD, self.path(zone_id, 'methods', method.instance_id),
            payload=method.payload(),
            model=ShippingZoneMethod,
            use_faker=use_faker,
            fake=lambda: self.fake_saved(method),
        )

    def delete_method(self, zone_id: int, instance_id: int, force: bool = True,
                      use_faker: Optional[bool] = None) -> bool:
        return self.remove(self.path(zone_id, 'methods', instance_id), build_query({'force': force}), use_faker)


class ShippingMethodManager(Manager):

    """:class:`ShippingMethodManager` class for the ``shipping_methods`` endpoint; read only"""

    PAGINATED = False

    def __init__(self, client: Client):
        super().__init__(
            endpoint='shipping_methods',
            client=client,
            model=ShippingMethod
        )

    @staticmethod
    def resolve_params() -> Dict[str, Any]:
        return {}
