from __future__ import annotations
import os
import sys
import logging
import requests
from enum import Enum
from datetime import date, datetime
from urllib.parse import quote, urlparse
from typing import Union, Optional, List, Dict, Any, Callable, Iterable, Tuple, TypeVar

from faker import Faker

T = TypeVar('T')


class LoggerUtils:
    """Utility class that simplifies access to logger handler info"""

    @staticmethod
    def get_handler_names(logger: Union[WooLogger, logging.Logger]) -> List[str]:
        """Get all handler names"""
        if isinstance(logger, WooLogger):
            logger = logger.logger
        return [handler.name for handler in logger.handlers]

    @staticmethod
    def get_stream_handlers(logger: Union[WooLogger, logging.Logger]) -> List[logging.Handler]:
        """Get all the StreamHandlers of the current logger (NOTE: FileHandler subclasses StreamHandler)"""
        if isinstance(logger, WooLogger):
            logger = logger.logger
        return [handler for handler in logger.handlers if type(handler) == logging.StreamHandler]

    @staticmethod
    def get_file_handlers(logger: Union[WooLogger, logging.Logger]) -> List[logging.FileHandler]:
        """Get all the FileHandlers of the current logger"""
        if isinstance(logger, WooLogger):
            logger = logger.logger
        return [handler for handler in logger.handlers if isinstance(handler, logging.FileHandler)]

    @staticmethod
    def get_log_files(logger: Union[WooLogger, logging.Logger]) -> List[str]:
        """Get the log file paths from all FileHandlers of a logger"""
        if isinstance(logger, WooLogger):
            logger = logger.logger
        return [handler.baseFilename for handler in LoggerUtils.get_file_handlers(logger)]

    @staticmethod
    def get_handler_by_log_file(logger: Union[WooLogger, logging.Logger], log_file: str) -> Optional[logging.FileHandler]:
        """Returns the FileHandler logging to the specified file, given it exists"""
        if isinstance(logger, WooLogger):
            logger = logger.logger
        for handler in LoggerUtils.get_file_handlers(logger):
            if handler.baseFilename == os.path.abspath(log_file):
                return handler
        return None

    @staticmethod
    def clear_handlers(logger: Union[WooLogger, logging.Logger]) -> bool:
        if isinstance(logger, WooLogger):
            logger = logger.logger
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        return logger.handlers == []


class WooLogger:
    """Logging class used within the package

    :cvar PREFIX:           hardcoded prefix to use in log messages
    :cvar PACKAGE_LOG_NAME: the default name for the package logger
    :cvar CLIENT_LOG_NAME:  the default format for the client logger name
    :cvar LOG_MESSAGE:      the default format for the message component of log messages.
                            (Use :attr:`WooLogger.LOG_MESSAGE.format(message="Your message")`)
    :cvar FORMATTER:        the default logging format
    :cvar HANDLER_NAME:     the default format for the names of handlers created by this package
    :cvar LOG_DIR_ENV:      environment variable naming a directory to write log files to
    """

    PREFIX = "WOO"
    PACKAGE_LOG_NAME = "woocommerce"
    CLIENT_LOG_NAME = "{domain}__{username}"
    HANDLER_NAME = '{}__{}__{}'.format(PREFIX, '{name}', '{stdout_level}')
    LOG_DIR_ENV = 'WOOCOMMERCE_LOG_DIR'

    LOG_MESSAGE = "|[ {pfx} | {name} ]|:  {message}".format(
        pfx=PREFIX, name="{name}", message="{message}"
    )

    FORMATTER = logging.Formatter(
        fmt="%(asctime)s %(levelname)-5s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    def __init__(self, name: str, log_file: Optional[str] = None, stdout_level: Union[int, str] = 'INFO',
                 log_requests: bool = True, disable_file_logging: bool = False):
        """Initialize the logger

        Each :class:`~.Client` object corresponds to a unique consumer key/domain combination, which is used to attach
        it to its associated :class:`WooLogger` and log file, allowing all activity across all endpoints to be tracked.

        A package logger exists as well, which logs all activity from the package.
        All log files have their log level set to DEBUG

        .. note:: Log files are only written when ``log_file`` is given, or when the
           ``WOOCOMMERCE_LOG_DIR`` environment variable names a directory; the file is then {name}.log

        :param name: logger name
        :param log_file: log file name; an explicit value is always honoured
        :param stdout_level: logging level for stdout logger; default is "INFO" (which is also logging.INFO and 10)
        :param log_requests: set to True to add logging from the requests package logger
        :param disable_file_logging: set to True to ignore ``WOOCOMMERCE_LOG_DIR``
        """
        self.name = name
        self.logger = None
        self.handler_name = None
        self.disable_file_logging = disable_file_logging

        if log_file is None and not disable_file_logging:
            if log_dir := os.getenv(self.LOG_DIR_ENV):
                os.makedirs(log_dir, exist_ok=True)
                log_file = os.path.join(log_dir, f'{name}.log')

        self.log_file = log_file
        self.setup_logger(stdout_level, log_requests=log_requests)

    def setup_logger(self, stdout_level: Union[int, str] = 'INFO', log_requests: bool = True) -> bool:
        """Configures a logger and assigns it to the `logger` attribute.

        :param stdout_level: logging level to use for logging to console
        :param log_requests: set to True to add logs from the requests package (ie. API call logging)
        """
        if isinstance(stdout_level, int):
            stdout_level = logging.getLevelName(stdout_level)

        logger = logging.getLogger(self.name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # Remove the handlers this package attached on a previous setup
        pkg_handler = WooLogger.get_package_handler()
        for handler in WooLogger.get_woo_handlers(logger):
            if self.name != WooLogger.PACKAGE_LOG_NAME and handler is pkg_handler:
                continue
            logger.removeHandler(handler)
            handler.close()

        self.handler_name = WooLogger.HANDLER_NAME.format(name=self.name, stdout_level=stdout_level)
        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.setFormatter(WooLogger.FORMATTER)
        stdout_handler.setLevel(stdout_level)
        stdout_handler.name = self.handler_name
        logger.addHandler(stdout_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_path, encoding='utf-8')
            file_handler.setFormatter(WooLogger.FORMATTER)
            file_handler.setLevel(logging.DEBUG)
            file_handler.name = self.handler_name
            logger.addHandler(file_handler)

        if self.name != WooLogger.PACKAGE_LOG_NAME:
            if pkg_handler and pkg_handler not in logger.handlers:
                logger.addHandler(pkg_handler)

        if log_requests:
            self.add_request_logging(logger)

        self.logger = logger
        return True

    def add_request_logging(self, logger: logging.Logger) -> None:
        """Adds the FileHandlers of ``logger`` to the logger of the requests package (urllib3)"""
        requests_logger = requests.urllib3.connectionpool.log
        requests_logger.setLevel(logging.DEBUG)
        requests_log_files = LoggerUtils.get_log_files(requests_logger)

        for handler in LoggerUtils.get_file_handlers(logger):
            if handler.baseFilename not in requests_log_files:
                requests_logger.addHandler(handler)

    def format_msg(self, msg: str) -> str:
        """Formats the :attr:`~.LOG_MESSAGE` using the specified message"""
        return WooLogger.LOG_MESSAGE.format(name=self.name, message=msg)

    def debug(self, msg):
        """Formats the :attr:`~.LOG_MESSAGE` with the specified message, then logs it with Logger.debug()"""
        return self.logger.debug(self.format_msg(msg))

    def info(self, msg):
        """Formats the :attr:`~.LOG_MESSAGE` with the specified message, then logs it with Logger.info()"""
        return self.logger.info(self.format_msg(msg))

    def warning(self, msg):
        """Formats the :attr:`~.LOG_MESSAGE` with the specified message, then logs it with Logger.warning()"""
        return self.logger.warning(self.format_msg(msg))

    def error(self, msg):
        """Formats the :attr:`~.LOG_MESSAGE` with the specified message, then logs it with Logger.error()"""
        return self.logger.error(self.format_msg(msg))

    def critical(self, msg):
        """Formats the :attr:`~.LOG_MESSAGE` with the specified message, then logs it with Logger.critical()"""
        return self.logger.critical(self.format_msg(msg))

    @property
    def handlers(self) -> List[logging.Handler]:
        return self.logger.handlers

    @property
    def handler_names(self) -> List[str]:
        return LoggerUtils.get_handler_names(self.logger)

    @property
    def log_path(self) -> Optional[str]:
        """Absolute path of the log file, or ``None`` when file logging is disabled"""
        return os.path.abspath(self.log_file) if self.log_file else None

    @property
    def log_files(self) -> List[str]:
        return LoggerUtils.get_log_files(self.logger)

    @staticmethod
    def get_woo_handlers(logger: Union[logging.Logger, WooLogger]) -> List[logging.Handler]:
        """Handlers that were created by this package (their names start with :attr:`~.PREFIX`)"""
        if isinstance(logger, WooLogger):
            logger = logger.logger
        return [handler for handler in logger.handlers if (handler.name or '').startswith(WooLogger.PREFIX)]

    @staticmethod
    def get_package_handler() -> Optional[logging.FileHandler]:
        """Returns the FileHandler object that writes to the package log file, if there is one"""
        pkg_logger = logging.getLogger(WooLogger.PACKAGE_LOG_NAME)
        for handler in LoggerUtils.get_file_handlers(pkg_logger):
            if handler.name and handler.name.startswith(
                    WooLogger.HANDLER_NAME.format(name=WooLogger.PACKAGE_LOG_NAME, stdout_level='')):
                return handler
        return None


class FakeHelper:
    """Random values used to synthesize models when a call runs with ``use_faker``

    Only the type and shape of the values are stable; there is no seeding.
    """

    faker = Faker()

    @staticmethod
    def integer(min: int = 0, max: int = 100) -> int:
        return FakeHelper.faker.random_int(min=min, max=max)

    @staticmethod
    def decimal() -> float:
        return float(FakeHelper.faker.pydecimal(left_digits=3, right_digits=2, positive=True))

    @staticmethod
    def boolean() -> bool:
        return FakeHelper.faker.pybool()

    @staticmethod
    def word() -> str:
        return FakeHelper.faker.word()

    @staticmethod
    def sentence() -> str:
        return FakeHelper.faker.sentence()

    @staticmethod
    def url() -> str:
        return FakeHelper.faker.url(schemes=['https'])

    @staticmethod
    def image() -> str:
        return FakeHelper.faker.image_url()

    @staticmethod
    def email() -> str:
        return FakeHelper.faker.free_email()

    @staticmethod
    def datetime() -> datetime:
        value = FakeHelper.faker.date_time_between(start_date='-2y', end_date='+25y')
        return value.replace(microsecond=0)

    @staticmethod
    def random_item(items: Iterable[T]) -> T:
        return FakeHelper.faker.random_element(tuple(items))

    @staticmethod
    def list(factory: Callable[[], T], count: Tuple[int, int] = (0, 10)) -> List[T]:
        return [factory() for _ in range(FakeHelper.faker.random_int(*count))]

    @staticmethod
    def list_of_integers(count: Tuple[int, int] = (0, 20)) -> List[int]:
        return FakeHelper.list(FakeHelper.integer, count)

    @staticmethod
    def first_name() -> str:
        return FakeHelper.faker.first_name()

    @staticmethod
    def last_name() -> str:
        return FakeHelper.faker.last_name()

    @staticmethod
    def company() -> str:
        return FakeHelper.faker.company()

    @staticmethod
    def address() -> str:
        return FakeHelper.faker.street_address()

    @staticmethod
    def city() -> str:
        return FakeHelper.faker.city()

    @staticmethod
    def state() -> str:
        return FakeHelper.faker.state_abbr()

    @staticmethod
    def country() -> str:
        return FakeHelper.faker.country()

    @staticmethod
    def country_code() -> str:
        return FakeHelper.faker.country_code()

    @staticmethod
    def zip_code() -> str:
        return FakeHelper.faker.postcode()

    @staticmethod
    def phone_number() -> str:
        return FakeHelper.faker.phone_number()

    @staticmethod
    def currency_code() -> str:
        return FakeHelper.faker.currency_code()

    @staticmethod
    def ip_address() -> str:
        return FakeHelper.faker.ipv4()

    @staticmethod
    def user_agent() -> str:
        return FakeHelper.faker.user_agent()

    @staticmethod
    def slug() -> str:
        return FakeHelper.faker.slug()

    @staticmethod
    def uuid() -> str:
        return FakeHelper.faker.uuid4()


def serialize_query_value(value: Any) -> Any:
    """Converts a single query argument to its wire representation"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ','.join(str(serialize_query_value(item)) for item in value)
    return value


def build_query(params: Dict[str, Any]) -> Dict[str, Any]:
    """Builds the query string map of a request

    Arguments that are ``None`` are left out entirely; the API filters differently
    when a key is sent empty.

    .. admonition:: Example
       :class: example

       ::

        >> build_query({'page': 1, 'include': [4, 5], 'search': None, 'order': SortOrder.ASC})
        {'page': 1, 'include': '4,5', 'order': 'asc'}

    :param params: mapping of wire keys to argument values
    """
    return {key: serialize_query_value(value) for key, value in params.items() if value is not None}


def build_path(endpoint: str, *segments: Union[str, int]) -> str:
    """Joins an endpoint template and identifiers into a relative API path

    The ``endpoint`` is used as is; every segment is URL-encoded, since slugs and
    option ids come from callers::

        >> build_path('taxes/classes', 'reduced rate')
        '/taxes/classes/reduced%20rate'

    :param endpoint: the resource endpoint, ex. ``products/tags``
    :param segments: identifiers and sub-resources to append
    """
    parts = [endpoint.strip('/')] if endpoint.strip('/') else []
    parts.extend(quote(str(segment), safe='') for segment in segments)
    return '/' + '/'.join(parts)


def get_domain(url: str) -> str:
    """The host part of a store URL; used to name client loggers"""
    parsed = urlparse(url if '://' in url else f'https://{url}')
    return parsed.netloc or parsed.path
