from . import clients
from . import managers
from . import models
from . import utils
from . import exceptions
import os

__version__ = "1.0.0"

from .constants import DEFAULT_API_PATH
from .storage import UserStorage, MemoryUserStorage, ShelveUserStorage

Client = clients.Client
logger = utils.WooLogger(
    name=utils.WooLogger.PACKAGE_LOG_NAME,
    stdout_level='WARNING'  # Clients will log to console
)

TRUE_VALUES = ('true', '1', 't', 'yes')


def get_api(**kwargs) -> Client:
    """Initialize a :class:`~.Client` using credentials stored in environment variables

    Any valid :class:`~.Client` kwargs can be used in addition to and/or instead of environment variables

    **Usage**::

      import woocommerce

      api = woocommerce.get_api()
      fake_api = woocommerce.get_api(use_faker=True)

    :param kwargs: any valid kwargs for :class:`~.Client`
    :raises ValueError: if the store URL or the API key is missing
    """
    credentials = {
        'base_url': kwargs.pop('base_url', os.getenv('WOOCOMMERCE_URL')),
        'consumer_key': kwargs.pop('consumer_key', os.getenv('WOOCOMMERCE_CONSUMER_KEY')),
        'consumer_secret': kwargs.pop('consumer_secret', os.getenv('WOOCOMMERCE_CONSUMER_SECRET')),
        'api_path': kwargs.pop('api_path', os.getenv('WOOCOMMERCE_API_PATH', DEFAULT_API_PATH)),
        'debug': kwargs.pop('debug', os.getenv('WOOCOMMERCE_DEBUG', 'true').lower() in TRUE_VALUES),
        'use_faker': kwargs.pop('use_faker', os.getenv('WOOCOMMERCE_USE_FAKER', 'false').lower() in TRUE_VALUES),
    }

    if credentials['base_url'] is None:
        raise ValueError("Missing login credentials: 'base_url' is required.")

    if credentials['consumer_key'] is None or credentials['consumer_secret'] is None:
        raise ValueError("Missing login credentials: 'consumer_key' and 'consumer_secret' are required.")

    return Client(**credentials, **kwargs)


logger.debug('Initialized WooCommerceRestApi')
