from .model import Model
from .fields import Integer, Decimal, String, Nested, Mapping
from ..utils import FakeHelper


class Report(Model):
    """An entry of the ``reports`` index"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#list-all-reports'
    IDENTIFIER = 'slug'

    slug = String(fake=FakeHelper.slug)
    description = String(fake=FakeHelper.sentence)


class SalesReportTotals(Model):
    """The sales figures of one period of a :class:`SalesReport`"""

    IDENTIFIER = None

    sales = Decimal()
    orders = Integer(fake=lambda: FakeHelper.integer(0, 100))
    items = Integer(fake=lambda: FakeHelper.integer(0, 500))
    tax = Decimal()
    shipping = Decimal()
    discount = Decimal()
    customers = Integer(fake=lambda: FakeHelper.integer(0, 100))


class SalesReport(Model):

    """Wraps the ``reports/sales`` report

    :attr:`totals` maps each period of :attr:`totals_grouped_by` (ex. a date) to its :class:`SalesReportTotals`
    """

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#retrieve-sales-report'
    IDENTIFIER = None

    total_sales = Decimal()
    net_sales = Decimal()
    average_sales = Decimal()
    total_orders = Integer(fake=lambda: FakeHelper.integer(0, 1000))
    total_items = Integer(fake=lambda: FakeHelper.integer(0, 5000))
    total_tax = Decimal()
    total_shipping = Decimal()
    total_refunds = Decimal()
    total_discount = Decimal()
    totals_grouped_by = String(fake=lambda: FakeHelper.random_item(['day', 'week', 'month', 'year']))
    totals = Mapping(Nested(SalesReportTotals))


class TopSellersReport(Model):
    """One product of the ``reports/top_sellers`` report"""

    DOCUMENTATION = 'https://woocommerce.github.io/woocommerce-rest-api-docs/#retrieve-top-sellers-report'
    IDENTIFIER = 'product_id'

    title = String(fake=FakeHelper.sentence)
    product_id = Integer()
    quantity = Integer(fake=lambda: FakeHelper.integer(1, 500))


class TotalsReport(Model):

    """One line of a ``reports/*/totals`` report, ex. the number of coupons of a discount type

    Used for the coupons, customers, orders, products and reviews totals.
    """

    IDENTIFIER = 'slug'

    slug = String(fake=FakeHelper.slug)
    name = String()
    total = Integer(fake=lambda: FakeHelper.integer(0, 1000))
