from enum import Enum

# Existing constants
CREATE = 'CREATE'
UPDATE = 'UPDATE'
DELETE = 'DELETE'
GET = 'GET'

GET_METHOD = 'GET'
POST_METHOD = 'POST'
PUT_METHOD = 'PUT'
DELETE_METHOD = 'DELETE'

DEFAULT_API_PATH = '/wp-json/wc/v3'
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


# Enums
class ModelMethod(Enum):
    GET = GET
    CREATE = CREATE
    UPDATE = UPDATE
    DELETE = DELETE


class WireEnum(str, Enum):
    """A closed set of string tokens used by the API

    Unknown tokens never raise; they resolve to :meth:`fallback`, which is the first
    member unless a subclass overrides it::

        >> OrderStatus('something-new')
        <OrderStatus.PENDING: 'pending'>
    """

    @classmethod
    def fallback(cls) -> 'WireEnum':
        return next(iter(cls))

    @classmethod
    def _missing_(cls, value):
        return cls.fallback()

    @classmethod
    def fake(cls) -> 'WireEnum':
        from .utils import FakeHelper
        return FakeHelper.random_item(list(cls))

    def __str__(self):
        return self.value


class Context(WireEnum):
    VIEW = 'view'
    EDIT = 'edit'


class SortOrder(WireEnum):
    ASC = 'asc'
    DESC = 'desc'

    @classmethod
    def fallback(cls):
        return cls.DESC


class SortOrderBy(WireEnum):
    DATE = 'date'
    ID = 'id'
    INCLUDE = 'include'
    TITLE = 'title'
    SLUG = 'slug'
    PRICE = 'price'
    POPULARITY = 'popularity'
    RATING = 'rating'
    MODIFIED = 'modified'
    MENU_ORDER = 'menu_order'


class FilterStatus(WireEnum):
    ANY = 'any'
    DRAFT = 'draft'
    PENDING = 'pending'
    PRIVATE = 'private'
    PUBLISH = 'publish'


class ProductStatus(WireEnum):
    PUBLISH = 'publish'
    ANY = 'any'
    DRAFT = 'draft'
    PENDING = 'pending'
    PRIVATE = 'private'


class ProductType(WireEnum):
    SIMPLE = 'simple'
    GROUPED = 'grouped'
    EXTERNAL = 'external'
    VARIABLE = 'variable'


class StockStatus(WireEnum):
    IN_STOCK = 'instock'
    OUT_OF_STOCK = 'outofstock'
    ON_BACKORDER = 'onbackorder'


class Backorder(WireEnum):
    NO = 'no'
    NOTIFY = 'notify'
    YES = 'yes'


class CatalogVisibility(WireEnum):
    VISIBLE = 'visible'
    CATALOG = 'catalog'
    SEARCH = 'search'
    HIDDEN = 'hidden'


class ProductTaxStatus(WireEnum):
    TAXABLE = 'taxable'
    SHIPPING = 'shipping'
    NONE = 'none'


class ProductFilterWithType(WireEnum):
    """Product id lists that :meth:`~.ProductManager.with_children` can fetch"""
    RELATED_IDS = 'related_ids'
    UPSELL_IDS = 'upsell_ids'
    CROSS_SELL_IDS = 'cross_sell_ids'
    PARENT_ID = 'parent_id'
    VARIATIONS = 'variations'
    GROUPED_PRODUCTS = 'grouped_products'


class CategoryDisplay(WireEnum):
    DEFAULT = 'default'
    PRODUCTS = 'products'
    SUBCATEGORIES = 'subcategories'
    BOTH = 'both'


class CategorySort(WireEnum):
    NAME = 'name'
    ID = 'id'
    INCLUDE = 'include'
    SLUG = 'slug'
    TERM_GROUP = 'term_group'
    DESCRIPTION = 'description'
    COUNT = 'count'


class TagSort(WireEnum):
    NAME = 'name'
    ID = 'id'
    INCLUDE = 'include'
    SLUG = 'slug'
    TERM_GROUP = 'term_group'
    DESCRIPTION = 'description'
    COUNT = 'count'


class ReviewStatus(WireEnum):
    APPROVED = 'approved'
    ALL = 'all'
    HOLD = 'hold'
    SPAM = 'spam'
    UNSPAM = 'unspam'
    TRASH = 'trash'
    UNTRASH = 'untrash'


class ReviewSort(WireEnum):
    DATE_GMT = 'date_gmt'
    DATE = 'date'
    ID = 'id'
    SLUG = 'slug'
    INCLUDE = 'include'
    PRODUCT = 'product'


class OrderStatus(WireEnum):
    PENDING = 'pending'
    ANY = 'any'
    PROCESSING = 'processing'
    ON_HOLD = 'on-hold'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    REFUNDED = 'refunded'
    FAILED = 'failed'
    TRASH = 'trash'


class OrderSort(WireEnum):
    DATE = 'date'
    MODIFIED = 'modified'
    ID = 'id'
    INCLUDE = 'include'
    TITLE = 'title'
    SLUG = 'slug'


class OrderTaxStatus(WireEnum):
    NONE = 'none'
    TAXABLE = 'taxable'


class OrderNoteType(WireEnum):
    ANY = 'any'
    CUSTOMER = 'customer'
    INTERNAL = 'internal'


class RefundSort(WireEnum):
    DATE = 'date'
    MODIFIED = 'modified'
    ID = 'id'
    INCLUDE = 'include'
    TITLE = 'title'
    SLUG = 'slug'


class CustomerRole(WireEnum):
    CUSTOMER = 'customer'
    ALL = 'all'
    ADMINISTRATOR = 'administrator'
    EDITOR = 'editor'
    AUTHOR = 'author'
    CONTRIBUTOR = 'contributor'
    SUBSCRIBER = 'subscriber'
    SHOP_MANAGER = 'shop_manager'


class CustomerSort(WireEnum):
    NAME = 'name'
    ID = 'id'
    INCLUDE = 'include'
    REGISTERED_DATE = 'registered_date'


class CouponSort(WireEnum):
    DATE = 'date'
    MODIFIED = 'modified'
    ID = 'id'
    INCLUDE = 'include'
    TITLE = 'title'
    SLUG = 'slug'


class DiscountType(WireEnum):
    FIXED_CART = 'fixed_cart'
    PERCENT = 'percent'
    FIXED_PRODUCT = 'fixed_product'


class TaxRateSort(WireEnum):
    ORDER = 'order'
    ID = 'id'
    PRIORITY = 'priority'


class WebhookStatus(WireEnum):
    ACTIVE = 'active'
    PAUSED = 'paused'
    DISABLED = 'disabled'


class WebhookTopic(WireEnum):
    ORDER_CREATED = 'order.created'
    ORDER_UPDATED = 'order.updated'
    ORDER_DELETED = 'order.deleted'
    COUPON_CREATED = 'coupon.created'
    COUPON_UPDATED = 'coupon.updated'
    COUPON_DELETED = 'coupon.deleted'
    CUSTOMER_CREATED = 'customer.created'
    CUSTOMER_UPDATED = 'customer.updated'
    CUSTOMER_DELETED = 'customer.deleted'
    PRODUCT_CREATED = 'product.created'
    PRODUCT_UPDATED = 'product.updated'
    PRODUCT_DELETED = 'product.deleted'


class WebhookSort(WireEnum):
    DATE = 'date'
    ID = 'id'
    INCLUDE = 'include'
    TITLE = 'title'


class ReportPeriod(WireEnum):
    WEEK = 'week'
    MONTH = 'month'
    LAST_MONTH = 'last_month'
    YEAR = 'year'


class ZoneLocationType(WireEnum):
    POSTCODE = 'postcode'
    STATE = 'state'
    COUNTRY = 'country'
    CONTINENT = 'continent'


class Currency(WireEnum):
    """ISO 4217 codes supported by WooCommerce, plus a few the store plugin adds"""
    AED = 'AED'
    AFN = 'AFN'
    ALL = 'ALL'
    AMD = 'AMD'
    ANG = 'ANG'
    AOA = 'AOA'
    ARS = 'ARS'
    AUD = 'AUD'
    AWG = 'AWG'
    AZN = 'AZN'
    BAM = 'BAM'
    BBD = 'BBD'
    BDT = 'BDT'
    BGN = 'BGN'
    BHD = 'BHD'
    BIF = 'BIF'
    BMD = 'BMD'
    BND = 'BND'
    BOB = 'BOB'
    BRL = 'BRL'
    BSD = 'BSD'
    BTC = 'BTC'
    BTN = 'BTN'
    BWP = 'BWP'
    BYR = 'BYR'
    BZD = 'BZD'
    CAD = 'CAD'
    CDF = 'CDF'
    CHF = 'CHF'
    CLP = 'CLP'
    CNY = 'CNY'
    COP = 'COP'
    CRC = 'CRC'
    CUC = 'CUC'
    CUP = 'CUP'
    CVE = 'CVE'
    CZK = 'CZK'
    DJF = 'DJF'
    DKK = 'DKK'
    DOP = 'DOP'
    DZD = 'DZD'
    EGP = 'EGP'
    ERN = 'ERN'
    ETB = 'ETB'
    EUR = 'EUR'
    FJD = 'FJD'
    FKP = 'FKP'
    GBP = 'GBP'
    GEL = 'GEL'
    GGP = 'GGP'
    GHS = 'GHS'
    GIP = 'GIP'
    GMD = 'GMD'
    GNF = 'GNF'
    GTQ = 'GTQ'
    GYD = 'GYD'
    HKD = 'HKD'
    HNL = 'HNL'
    HRK = 'HRK'
    HTG = 'HTG'
    HUF = 'HUF'
    IDR = 'IDR'
    ILS = 'ILS'
    IMP = 'IMP'
    INR = 'INR'
    IQD = 'IQD'
    IRR = 'IRR'
    IRT = 'IRT'
    ISK = 'ISK'
    JEP = 'JEP'
    JMD = 'JMD'
    JOD = 'JOD'
    JPY = 'JPY'
    KES = 'KES'
    KGS = 'KGS'
    KHR = 'KHR'
    KMF = 'KMF'
    KPW = 'KPW'
    KRW = 'KRW'
    KWD = 'KWD'
    KYD = 'KYD'
    KZT = 'KZT'
    LAK = 'LAK'
    LBP = 'LBP'
    LKR = 'LKR'
    LRD = 'LRD'
    LSL = 'LSL'
    LYD = 'LYD'
    MAD = 'MAD'
    MDL = 'MDL'
    MGA = 'MGA'
    MKD = 'MKD'
    MMK = 'MMK'
    MNT = 'MNT'
    MOP = 'MOP'
    MRO = 'MRO'
    MUR = 'MUR'
    MVR = 'MVR'
    MWK = 'MWK'
    MXN = 'MXN'
    MYR = 'MYR'
    MZN = 'MZN'
    NAD = 'NAD'
    NGN = 'NGN'
    NIO = 'NIO'
    NOK = 'NOK'
    NPR = 'NPR'
    NZD = 'NZD'
    OMR = 'OMR'
    PAB = 'PAB'
    PEN = 'PEN'
    PGK = 'PGK'
    PHP = 'PHP'
    PKR = 'PKR'
    PLN = 'PLN'
    PRB = 'PRB'
    PYG = 'PYG'
    QAR = 'QAR'
    RON = 'RON'
    RSD = 'RSD'
    RUB = 'RUB'
    RWF = 'RWF'
    SAR = 'SAR'
    SBD = 'SBD'
    SCR = 'SCR'
    SDG = 'SDG'
    SEK = 'SEK'
    SGD = 'SGD'
    SHP = 'SHP'
    SLL = 'SLL'
    SOS = 'SOS'
    SRD = 'SRD'
    SSP = 'SSP'
    STD = 'STD'
    SYP = 'SYP'
    SZL = 'SZL'
    THB = 'THB'
    TJS = 'TJS'
    TMT = 'TMT'
    TND = 'TND'
    TOP = 'TOP'
    TRY = 'TRY'
    TTD = 'TTD'
    TWD = 'TWD'
    TZS = 'TZS'
    UAH = 'UAH'
    UGX = 'UGX'
    USD = 'USD'
    UYU = 'UYU'
    UZS = 'UZS'
    VEF = 'VEF'
    VND = 'VND'
    VUV = 'VUV'
    WST = 'WST'
    XAF = 'XAF'
    XCD = 'XCD'
    XOF = 'XOF'
    XPF = 'XPF'
    YER = 'YER'
    ZAR = 'ZAR'
    ZMW = 'ZMW'

    @classmethod
    def fallback(cls):
        return cls.USD


class NotificationObjectType(WireEnum):
    ORDER = 'order'
