from __future__ import annotations
from typing import Union, Optional, TYPE_CHECKING, Dict
import logging
import requests

if TYPE_CHECKING:
    from . import Client


class WooCommerceError(Exception):

    """Base exception class for errors raised by the package

    :cvar DEFAULT_MSG: default exception message to use if a message isn't provided
    """

    DEFAULT_MSG = 'An error occurred while processing the request.'

    def __init__(self, client: Optional[Client] = None, msg: Optional[str] = None,
                 response: Optional[Union[requests.Response, Dict]] = None):
        """Log and raise a WooCommerceError

        :param client: an initialized :class:`~.Client` object; the package logger is used when omitted
        :param msg: optional exception message; prepended to the error message of the response
        :param response: optional response to :meth:`parse` an error message from
        """
        self.message = msg if msg else self.DEFAULT_MSG
        self.response = response
        self.logger = client.logger if client is not None else logging.getLogger('woocommerce')

        if response is not None:
            if parsed := self.parse(response):
                self.message += '\n' + parsed

        self.logger.error(self.message)
        super().__init__(self.message)

    @staticmethod
    def parse(response: Union[requests.Response, Dict]) -> str:
        """Parses the error message from the ``response``

        WooCommerce errors have the form ``{"code": ..., "message": ..., "data": {"status": ...}}``

        :param response: a bad response returned by the WooCommerce API
        :raises: TypeError if ``response`` is not a :class:`~requests.Response` or :class:`Dict`
        """
        if isinstance(response, requests.Response):
            try:
                response = response.json()
            except ValueError:
                return f'Response: "{response.text}"'
        if not isinstance(response, Dict):
            raise TypeError(f"`response` must be a `dict` or {requests.Response}")

        message = response.get('message', '')
        code = response.get('code')
        data = response.get('data')

        if message:
            message = f'Message: "{message}"'
        if code:
            message += f' (code: {code})'
        if isinstance(data, dict) and data.get('status'):
            message += f' [status {data["status"]}]'

        return message.strip()


class DecodeError(WooCommerceError):

    """Raised when response data does not have the structure of the model it is decoded into"""

    DEFAULT_MSG = 'Failed to decode the response data.'


class RequiredFieldError(WooCommerceError):

    """Raised when an operation is called without a value it needs, ex. updating an entity without ``id``"""

    DEFAULT_MSG = 'A required field is missing.'


class OperationNotAllowedError(WooCommerceError):
    """Exception class for when an operation is not allowed on a model"""

    def __init__(self, client: Optional[Client], method: str, model: str,
                 response: Optional[requests.Response] = None):
        """
        Initialize the exception with the method and model details.

        :param client: an initialized :class:`~.Client` object
        :param method: the method that is not allowed (e.g., 'CREATE', 'UPDATE')
        :param model: the name of the model on which the method is not allowed
        :param response: optional response to parse an error message from
        """
        msg = f'Method "{method}" is not allowed for model "{model}".'
        super().__init__(client, msg, response)
