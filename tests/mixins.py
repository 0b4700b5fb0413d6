import json
import os
from typing import Any, Optional
from unittest import mock

import requests
from dotenv import load_dotenv

import woocommerce

load_dotenv()


def make_response(data: Any = None, status_code: int = 200, url: str = 'https://store.example.com/wp-json/wc/v3/'):
    """A :class:`requests.Response` carrying ``data`` as its JSON body"""
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(data).encode('utf-8')
    response.headers['Content-Type'] = 'application/json'
    response.url = url
    response.encoding = 'utf-8'
    return response


class TestClientMixin:
    """Provides ``cls.api``, a client for a store that is never contacted unless a test mocks the transport

    Credentials are read from the environment (or a ``.env`` file) when present.
    """

    @classmethod
    def setUpClass(cls) -> None:
        cls.api = woocommerce.get_api(
            base_url=os.getenv('WOOCOMMERCE_URL', 'https://store.example.com'),
            consumer_key=os.getenv('WOOCOMMERCE_CONSUMER_KEY', 'ck_0123456789abcdef'),
            consumer_secret=os.getenv('WOOCOMMERCE_CONSUMER_SECRET', 'cs_0123456789abcdef'),
            use_faker=False,
            debug=False,
            disable_file_logging=True,
        )

    def setUp(self) -> None:
        self.api.storage.clear_user_id()

    def mock_transport(self, data: Any = None, status_code: int = 200) -> mock.MagicMock:
        """Patches the session for the current test; every request returns ``data``"""
        patcher = mock.patch.object(
            self.api.session, 'request', return_value=make_response(data, status_code)
        )
        self.addCleanup(patcher.stop)
        return patcher.start()

    def forbid_transport(self) -> mock.MagicMock:
        """Patches the session for the current test so that any request fails the test"""
        patcher = mock.patch.object(
            self.api.session, 'request', side_effect=AssertionError('No request should be sent')
        )
        self.addCleanup(patcher.stop)
        return patcher.start()

    @staticmethod
    def sent(transport: mock.MagicMock, call: int = -1) -> dict:
        """The arguments of a request sent through a mocked transport"""
        args, kwargs = transport.call_args_list[call]
        method, url = args
        return {'method': method, 'url': url, 'params': kwargs.get('params'), 'json': kwargs.get('json')}

    def path_of(self, url: str, prefix: Optional[str] = None) -> str:
        return url[len(prefix or self.api.api_url):]
