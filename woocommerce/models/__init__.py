from .model import Model, APIResponse
from .batch import BatchRequest, BatchResponse
from .common import MetaData, Image, Links, Link
from .product import (
    Product,
    ProductWithChildren,
    ProductDownload,
    ProductDimensions,
    ProductAttribute,
    ProductDefaultAttribute,
    ProductItemCategory,
    ProductItemTag,
    ProductTag,
    ShippingClass,
    ProductReview,
)
from .variation import ProductVariation
from .category import Category
from .order import (
    Order,
    Billing,
    Shipping,
    LineItem,
    LineTax,
    TaxLine,
    ShippingLine,
    FeeLine,
    CouponLine,
    OrderRefundLine,
    OrderNote,
    OrderRefund,
    Refund,
)
from .customer import Customer, CustomerDownload, CustomerDownloadFile, AuthResponse, PasswordReset, PasswordChange
from .coupon import Coupon
from .tax import TaxRate, TaxClass
from .webhook import Webhook
from .settings import SettingsGroup, SettingOption, MethodSetting
from .payment_gateway import PaymentGateway
from .shipping import ShippingZone, ShippingZoneLocation, ShippingZoneMethod, ShippingMethod
from .report import Report, SalesReport, SalesReportTotals, TopSellersReport, TotalsReport
from .system_status import (
    SystemStatus,
    SystemStatusEnvironment,
    SystemStatusDatabase,
    SystemStatusTheme,
    SystemStatusSettings,
    SystemStatusSecurity,
    SystemStatusTool,
)
from .data import DataEndpoint, Continent, ContinentCountry, Country, State, CurrencyData
from .notification import Notification
from .cart import Cart, CartItem
