from .manager import Manager
from .product import (
    ProductManager,
    ProductVariationManager,
    ProductTagManager,
    ShippingClassManager,
    ProductReviewManager,
)
from .category import CategoryManager
from .order import OrderManager, OrderNoteManager, OrderRefundManager, RefundManager
from .customer import CustomerManager, AuthManager
from .coupon import CouponManager
from .tax import TaxRateManager, TaxClassManager
from .webhook import WebhookManager
from .settings import SettingsManager
from .payment_gateway import PaymentGatewayManager
from .shipping import ShippingZoneManager, ShippingMethodManager
from .report import ReportManager
from .system_status import SystemStatusManager
from .data import DataManager
from .notification import NotificationManager
from .cart import CartManager
