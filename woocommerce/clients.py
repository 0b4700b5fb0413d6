from __future__ import annotations
import json
from functools import cached_property
from typing import Optional, Dict, Any, Union

import requests
from requests.auth import HTTPBasicAuth

from .constants import DEFAULT_API_PATH, GET_METHOD, POST_METHOD, PUT_METHOD, DELETE_METHOD
from .exceptions import WooCommerceError
from .storage import UserStorage, MemoryUserStorage
from .utils import WooLogger, get_domain
from . import managers
from .models import APIResponse


class Client:

    """The class that handles all interaction with the WooCommerce REST API

    Every request is authenticated with the consumer key and secret of a REST API key, using HTTP Basic auth.
    Requests are sent to ``{base_url}{api_path}{path}``

    .. admonition:: Example
       :class: example

       ::

        >>> from woocommerce import Client
        >>> api = Client('https://example.com', 'ck_...', 'cs_...')
        >>> api.products.list(per_page=5)
        [<WooCommerce Product: 794>, ...]

    Every operation can return generated data instead of calling the API; pass ``use_faker=True``
    to the client to make that the default, or to a single operation.

    :cvar USER_AGENT: the User-Agent header sent with every request
    """

    USER_AGENT = 'WooCommerceRestApi-Python'

    def __init__(self, base_url: str, consumer_key: str, consumer_secret: str,
                 api_path: str = DEFAULT_API_PATH, debug: bool = True, use_faker: bool = False,
                 storage: Optional[UserStorage] = None, session: Optional[requests.Session] = None,
                 log_level: str = 'INFO', log_file: Optional[str] = None, disable_file_logging: bool = False,
                 timeout: Optional[float] = None):
        """Initialize a Client

        :param base_url: the store URL, ex. ``https://example.com``; ``https://`` is added if there is no scheme
        :param consumer_key: the consumer key of a WooCommerce REST API key
        :param consumer_secret: the consumer secret of the key
        :param api_path: the path of the REST API on the store
        :param debug: log every request and response at DEBUG level
        :param use_faker: return generated data instead of calling the API, unless an operation says otherwise
        :param storage: where the id of the logged in user is kept; in memory if not provided
        :param session: the :class:`requests.Session` to send requests with
        :param log_level: the logging level of logging to stdout
        :param log_file: log file to use for the client's :attr:`logger`
        :param disable_file_logging: when set to ``True``, no log file is written unless ``log_file`` is given
        :param timeout: timeout in seconds passed to every request
        """
        if not isinstance(base_url, str):
            raise TypeError(f'`base_url` must be of type {str}')
        if not isinstance(consumer_key, str) or not isinstance(consumer_secret, str):
            raise TypeError(f'`consumer_key` and `consumer_secret` must be of type {str}')

        if '://' not in base_url:
            base_url = f'https://{base_url}'

        self._base_url = base_url.rstrip('/')
        self._api_path = '/' + api_path.strip('/')
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._debug = debug
        self._use_faker = use_faker
        self._storage = storage if storage is not None else MemoryUserStorage()
        self._log_level = log_level
        self.timeout = timeout

        self.session = session if session is not None else requests.Session()
        self.session.auth = HTTPBasicAuth(consumer_key, consumer_secret)
        self.session.headers.update({
            'User-Agent': self.USER_AGENT,
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        })

        self.logger = self.get_logger(
            stdout_level=log_level,
            log_file=log_file,
            disable_file_logging=disable_file_logging
        )

        if debug:
            self.session.hooks['response'].append(self.log_response)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> Client:
        """Initialize a :class:`~.Client` using a dictionary, ex. the one returned by :meth:`~.to_dict`

        :param d: dictionary with at least the keys ``base_url``, ``consumer_key`` and ``consumer_secret``
        """
        return cls(
            base_url=d['base_url'],
            consumer_key=d['consumer_key'],
            consumer_secret=d['consumer_secret'],
            api_path=d.get('api_path', DEFAULT_API_PATH),
            debug=d.get('debug', True),
            use_faker=d.get('use_faker', False),
            log_level=d.get('log_level', 'INFO'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Returns the settings needed to create an equivalent client with :meth:`~.from_dict`"""
        return {
            'base_url': self.base_url,
            'consumer_key': self._consumer_key,
            'consumer_secret': self._consumer_secret,
            'api_path': self.api_path,
            'debug': self.debug,
            'use_faker': self.use_faker,
            'log_level': self._log_level,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_path(self) -> str:
        return self._api_path

    @property
    def api_url(self) -> str:
        """The URL that request paths are appended to"""
        return self._base_url + self._api_path

    @property
    def consumer_key(self) -> str:
        return self._consumer_key

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def use_faker(self) -> bool:
        return self._use_faker

    @property
    def storage(self) -> UserStorage:
        return self._storage

    @property
    def domain(self) -> str:
        return get_domain(self._base_url)

    @property
    def log_name(self) -> str:
        """The name of the client's logger; unique per store and key"""
        return WooLogger.CLIENT_LOG_NAME.format(
            domain=self.domain.replace('.', '_').replace(':', '_'),
            username=self._consumer_key[:10]
        )

    def url_for(self, path: str) -> str:
        """Returns the full URL for a request path

        :param path: the path relative to the :attr:`api_url`, ex. ``/products/794``
        """
        return f'{self.api_url}/{path.lstrip("/")}'

    def request(self, method: str, url: str, params: Optional[Dict] = None,
                payload: Optional[Union[Dict, list]] = None) -> requests.Response:
        """Sends a request to the API

        Failed responses are logged with the error message the API returned, then returned as is

        :param method: the HTTP method
        :param url: the full request URL, ex. from :meth:`url_for`
        :param params: query string parameters
        :param payload: JSON request body
        """
        response = self.session.request(method, url, params=params, json=payload, timeout=self.timeout)

        if not response.ok:
            self.logger.error(
                f'{method} request to {response.url} failed with status code {response.status_code}'
                f'\n{WooCommerceError.parse(response)}'
            )
        return response

    def get(self, url: str, params: Optional[Dict] = None) -> requests.Response:
        """Sends an authorized ``GET`` request"""
        return self.request(GET_METHOD, url, params=params)

    def post(self, url: str, payload: Optional[Union[Dict, list]] = None, params: Optional[Dict] = None) -> requests.Response:
        """Sends an authorized ``POST`` request"""
        return self.request(POST_METHOD, url, params=params, payload=payload)

    def put(self, url: str, payload: Optional[Union[Dict, list]] = None, params: Optional[Dict] = None) -> requests.Response:
        """Sends an authorized ``PUT`` request"""
        return self.request(PUT_METHOD, url, params=params, payload=payload)

    def delete(self, url: str, params: Optional[Dict] = None) -> requests.Response:
        """Sends an authorized ``DELETE`` request"""
        return self.request(DELETE_METHOD, url, params=params)

    def log_response(self, response: requests.Response, *args, **kwargs) -> None:
        """Response hook that logs the request and response at DEBUG level"""
        request = response.request
        body = request.body
        if isinstance(body, bytes):
            body = body.decode('utf-8', errors='replace')

        self.logger.debug(
            f'{request.method} {request.url}'
            + (f'\nRequest Body: {body}' if body else '')
            + f'\nStatus: {response.status_code}'
            + f'\nResponse: {self._preview(response)}'
        )

    @staticmethod
    def _preview(response: requests.Response, limit: int = 2000) -> str:
        try:
            text = json.dumps(response.json(), indent=2)
        except ValueError:
            text = response.text
        return text if len(text) <= limit else text[:limit] + '...'

    def get_logger(self, log_file: Optional[str] = None, stdout_level: str = 'INFO',
                   disable_file_logging: bool = False) -> WooLogger:
        """Retrieve a :class:`~.WooLogger` for the current store and key

        :param log_file: log file name; a file is written only if given, or if ``WOOCOMMERCE_LOG_DIR`` is set
        :param stdout_level: logging level for stdout logger
        :param disable_file_logging: set to ``True`` to ignore ``WOOCOMMERCE_LOG_DIR``
        """
        return WooLogger(
            name=self.log_name,
            log_file=log_file,
            stdout_level=stdout_level,
            disable_file_logging=disable_file_logging
        )

    def manager(self, endpoint: str) -> managers.Manager:
        """Initializes and returns a :class:`~.Manager` corresponding to the specified ``endpoint``

        Endpoints that don't have a dedicated Manager are wrapped with :class:`~.APIResponse`

        :param endpoint: a valid WooCommerce REST API endpoint, ex. ``products`` or ``orders/notes``
        """
        endpoint = endpoint.strip('/')
        for attr, manager_endpoint in self.MANAGERS.items():
            if endpoint == manager_endpoint:
                return getattr(self, attr)
        return managers.Manager(endpoint=endpoint, client=self, model=APIResponse)

    #: Maps :class:`Client` attributes to the endpoint of their :class:`~.Manager`
    MANAGERS = {
        'products': 'products',
        'product_tags': 'products/tags',
        'shipping_classes': 'products/shipping_classes',
        'product_reviews': 'products/reviews',
        'categories': 'products/categories',
        'orders': 'orders',
        'refunds': 'refunds',
        'customers': 'customers',
        'coupons': 'coupons',
        'tax_rates': 'taxes',
        'tax_classes': 'taxes/classes',
        'webhooks': 'webhooks',
        'settings': 'settings',
        'payment_gateways': 'payment_gateways',
        'shipping_zones': 'shipping/zones',
        'shipping_methods': 'shipping_methods',
        'reports': 'reports',
        'system_status': 'system_status',
        'data': 'data',
        'notifications': 'notifications',
        'cart': 'cart',
    }

    @cached_property
    def products(self) -> managers.ProductManager:
        """Initializes a :class:`~.ProductManager`"""
        return managers.ProductManager(self)

    @cached_property
    def product_variations(self) -> managers.ProductVariationManager:
        """Initializes a :class:`~.ProductVariationManager`"""
        return managers.ProductVariationManager(self)

    @cached_property
    def product_tags(self) -> managers.ProductTagManager:
        """Initializes a :class:`~.ProductTagManager`"""
        return managers.ProductTagManager(self)

    @cached_property
    def shipping_classes(self) -> managers.ShippingClassManager:
        """Initializes a :class:`~.ShippingClassManager`"""
        return managers.ShippingClassManager(self)

    @cached_property
    def product_reviews(self) -> managers.ProductReviewManager:
        """Initializes a :class:`~.ProductReviewManager`"""
        return managers.ProductReviewManager(self)

    @cached_property
    def categories(self) -> managers.CategoryManager:
        """Initializes a :class:`~.CategoryManager`"""
        return managers.CategoryManager(self)

    @cached_property
    def orders(self) -> managers.OrderManager:
        """Initializes an :class:`~.OrderManager`"""
        return managers.OrderManager(self)

    @cached_property
    def order_notes(self) -> managers.OrderNoteManager:
        """Initializes an :class:`~.OrderNoteManager`"""
        return managers.OrderNoteManager(self)

    @cached_property
    def order_refunds(self) -> managers.OrderRefundManager:
        """Initializes an :class:`~.OrderRefundManager`"""
        return managers.OrderRefundManager(self)

    @cached_property
    def refunds(self) -> managers.RefundManager:
        """Initializes a :class:`~.RefundManager`"""
        return managers.RefundManager(self)

    @cached_property
    def customers(self) -> managers.CustomerManager:
        """Initializes a :class:`~.CustomerManager`"""
        return managers.CustomerManager(self)

    @cached_property
    def auth(self) -> managers.AuthManager:
        """Initializes an :class:`~.AuthManager`"""
        return managers.AuthManager(self)

    @cached_property
    def coupons(self) -> managers.CouponManager:
        """Initializes a :class:`~.CouponManager`"""
        return managers.CouponManager(self)

    @cached_property
    def tax_rates(self) -> managers.TaxRateManager:
        """Initializes a :class:`~.TaxRateManager`"""
        return managers.TaxRateManager(self)

    @cached_property
    def tax_classes(self) -> managers.TaxClassManager:
        """Initializes a :class:`~.TaxClassManager`"""
        return managers.TaxClassManager(self)

    @cached_property
    def webhooks(self) -> managers.WebhookManager:
        """Initializes a :class:`~.WebhookManager`"""
        return managers.WebhookManager(self)

    @cached_property
    def settings(self) -> managers.SettingsManager:
        """Initializes a :class:`~.SettingsManager`"""
        return managers.SettingsManager(self)

    @cached_property
    def payment_gateways(self) -> managers.PaymentGatewayManager:
        """Initializes a :class:`~.PaymentGatewayManager`"""
        return managers.PaymentGatewayManager(self)

    @cached_property
    def shipping_zones(self) -> managers.ShippingZoneManager:
        """Initializes a :class:`~.ShippingZoneManager`"""
        return managers.ShippingZoneManager(self)

    @cached_property
    def shipping_methods(self) -> managers.ShippingMethodManager:
        """Initializes a :class:`~.ShippingMethodManager`"""
        return managers.ShippingMethodManager(self)

    @cached_property
    def reports(self) -> managers.ReportManager:
        """Initializes a :class:`~.ReportManager`"""
        return managers.ReportManager(self)

    @cached_property
    def system_status(self) -> managers.SystemStatusManager:
        """Initializes a :class:`~.SystemStatusManager`"""
        return managers.SystemStatusManager(self)

    @cached_property
    def data(self) -> managers.DataManager:
        """Initializes a :class:`~.DataManager`"""
        return managers.DataManager(self)

    @cached_property
    def notifications(self) -> managers.NotificationManager:
        """Initializes a :class:`~.NotificationManager`"""
        return managers.NotificationManager(self)

    @cached_property
    def cart(self) -> managers.CartManager:
        """Initializes a :class:`~.CartManager`"""
        return managers.CartManager(self)

    def __repr__(self):
        return f'<WooCommerce Client: {self.base_url} ({self.api_path})>'
