from __future__ import annotations
from datetime import date
from typing import TYPE_CHECKING, Optional, List, Dict, Any

from .manager import Manager
from ..models import Report, SalesReport, TopSellersReport, TotalsReport
from ..constants import GET_METHOD, Context, ReportPeriod
from ..exceptions import DecodeError
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class ReportManager(Manager):

    """:class:`ReportManager` class for the ``reports`` endpoint

    Reports are read only. Periods are given either as a :class:`~.ReportPeriod` or as a
    ``date_min``/``date_max`` range
    """

    PAGINATED = False

    def __init__(self, client: Client):
        """Initialize a :class:`ReportManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='reports',
            client=client,
            model=Report
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, period: Optional[ReportPeriod] = None,
                       date_min: Optional[date] = None, date_max: Optional[date] = None) -> Dict[str, Any]:
        return build_query({
            'context': context,
            'period': period,
            'date_min': date_min,
            'date_max': date_max,
        })

    def list(self, use_faker: Optional[bool] = None) -> List[Report]:
        """Retrieve the index of available reports"""
        return self.execute(
            GET_METHOD, self.path(),
            many=True,
            use_faker=use_faker,
            fake=self.fake_list,
        )

    def sales(self, use_faker: Optional[bool] = None, **params) -> SalesReport:
        """Retrieve the sales report; accepts the arguments of :meth:`resolve_params`"""
        return self.execute(
            GET_METHOD, self.path('sales'),
            params=self.resolve_params(**params),
            use_faker=use_faker,
            fake=SalesReport.fake,
            parse=self._first_sales_report,
        )

    def top_sellers(self, use_faker: Optional[bool] = None, **params) -> List[TopSellersReport]:
        """Retrieve the best selling products; accepts the arguments of :meth:`resolve_params`"""
        return self.execute(
            GET_METHOD, self.path('top_sellers'),
            params=self.resolve_params(**params),
            model=TopSellersReport,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=TopSellersReport),
        )

    def coupons_totals(self, use_faker: Optional[bool] = None) -> List[TotalsReport]:
        """Number of coupons of each discount type"""
        return self._totals('coupons', use_faker)

    def customers_totals(self, use_faker: Optional[bool] = None) -> List[TotalsReport]:
        """Number of paying and non paying customers"""
        return self._totals('customers', use_faker)

    def orders_totals(self, use_faker: Optional[bool] = None) -> List[TotalsReport]:
        """Number of orders of each status"""
        return self._totals('orders', use_faker)

    def products_totals(self, use_faker: Optional[bool] = None) -> List[TotalsReport]:
        """Number of products of each type"""
        return self._totals('products', use_faker)

    def reviews_totals(self, use_faker: Optional[bool] = None) -> List[TotalsReport]:
        """Number of reviews of each rating"""
        return self._totals('reviews', use_faker)

    def _totals(self, report: str, use_faker: Optional[bool] = None) -> List[TotalsReport]:
        return self.execute(
            GET_METHOD, self.path(report, 'totals'),
            model=TotalsReport,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=TotalsReport),
        )

    @staticmethod
    def _first_sales_report(data) -> SalesReport:
        # The API wraps the single sales report in a list
        if isinstance(data, list):
            if not data:
                raise DecodeError(msg='The sales report response is empty')
            data = data[0]
        return SalesReport.decode(data)
