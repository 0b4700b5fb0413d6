from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List

from .manager import Manager
from ..models import DataEndpoint, Continent, Country, CurrencyData
from ..constants import GET_METHOD

if TYPE_CHECKING:
    from ..clients import Client


class DataManager(Manager):

    """:class:`DataManager` class for the read only ``data`` endpoint

    Continents, countries and currencies are identified by their code, ex. ``EU``, ``BR`` or ``USD``
    """

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`DataManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='data',
            client=client,
            model=DataEndpoint
        )

    def list(self, use_faker: Optional[bool] = None) -> List[DataEndpoint]:
        """Retrieve the index of data resources"""
        return self.execute(
            GET_METHOD, self.path(),
            many=True,
            use_faker=use_faker,
            fake=self.fake_list,
        )

    def continents(self, use_faker: Optional[bool] = None) -> List[Continent]:
        return self.execute(
            GET_METHOD, self.path('continents'),
            model=Continent,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=Continent),
        )

    def continent(self, code: str, use_faker: Optional[bool] = None) -> Continent:
        return self.execute(
            GET_METHOD, self.path('continents', code),
            model=Continent,
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(code, model=Continent),
        )

    def countries(self, use_faker: Optional[bool] = None) -> List[Country]:
        return self.execute(
            GET_METHOD, self.path('countries'),
            model=Country,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=Country),
        )

    def country(self, code: str, use_faker: Optional[bool] = None) -> Country:
        return self.execute(
            GET_METHOD, self.path('countries', code),
            model=Country,
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(code, model=Country),
        )

    def currencies(self, use_faker: Optional[bool] = None) -> List[CurrencyData]:
        return self.execute(
            GET_METHOD, self.path('currencies'),
            model=CurrencyData,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=CurrencyData),
        )

    def currency(self, code: str, use_faker: Optional[bool] = None) -> CurrencyData:
        return self.execute(
            GET_METHOD, self.path('currencies', code),
            model=CurrencyData,
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(code, model=CurrencyData),
        )

    def current_currency(self, use_faker: Optional[bool] = None) -> CurrencyData:
        """Retrieve the currency the store is set to"""
        return self.execute(
            GET_METHOD, self.path('currencies', 'current'),
            model=CurrencyData,
            use_faker=use_faker,
            fake=lambda: self.fake_list(1, model=CurrencyData)[0],
        )
