from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List, Dict, Any

from .manager import Manager
from ..models import Customer, CustomerDownload, AuthResponse, PasswordReset, PasswordChange
from ..constants import (
    GET_METHOD,
    POST_METHOD,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    Context,
    SortOrder,
    CustomerSort,
    CustomerRole,
)
from ..exceptions import RequiredFieldError
from ..utils import FakeHelper, build_query

if TYPE_CHECKING:
    from ..clients import Client


class CustomerManager(Manager):

    """:class:`CustomerManager` class for the ``customers`` endpoint"""

    def __init__(self, client: Client):
        """Initialize a :class:`CustomerManager`

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='customers',
            client=client,
            model=Customer
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, offset: Optional[int] = None,
                       order: SortOrder = SortOrder.ASC, orderby: CustomerSort = CustomerSort.NAME,
                       email: Optional[str] = None, role: CustomerRole = CustomerRole.CUSTOMER) -> Dict[str, Any]:
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'email': email,
            'role': role,
        })

    def delete(self, item_id: int, reassign: Optional[int] = None, use_faker: Optional[bool] = None) -> bool:
        """Delete a customer permanently

        :param reassign: id of the user to give the customer's posts to
        """
        params = build_query({'force': True, 'reassign': reassign})
        return self.remove(self.path(item_id), params, use_faker)

    def downloads(self, customer_id: int, use_faker: Optional[bool] = None) -> List[CustomerDownload]:
        """Retrieve the downloadable files a customer has access to"""
        return self.execute(
            GET_METHOD, self.path(customer_id, 'downloads'),
            model=CustomerDownload,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(model=CustomerDownload),
        )


class AuthManager(Manager):

    """:class:`AuthManager` class for the store's customer authentication endpoints

    These endpoints are provided by a store plugin, not by WooCommerce itself. The id of the logged
    in user is kept in the :attr:`.Client.storage`
    """

    def __init__(self, client: Client):
        super().__init__(
            endpoint='',
            client=client,
            model=AuthResponse
        )

    def current_user_id(self) -> Optional[int]:
        """The id of the logged in user, or ``None``"""
        return self.client.storage.get_user_id()

    def login(self, email: str, password: str, use_faker: Optional[bool] = None) -> AuthResponse:
        """Log a customer in and store their user id; fake logins leave the storage untouched"""
        self.logger.info(f'Logging in {email}')
        fake = self.use_fake_data(use_faker)
        response = self.execute(
            POST_METHOD, self.path('login'),
            payload={'email': email, 'password': password},
            use_faker=fake,
            fake=AuthResponse.fake,
        )
        if not fake:
            self.client.storage.set_user_id(response.user_id)
        return response

    def register(self, customer: Customer, use_faker: Optional[bool] = None) -> AuthResponse:
        """Create a customer account and store the new user id; fake registrations leave the storage untouched"""
        self.logger.info(f'Registering {customer.email}')
        fake = self.use_fake_data(use_faker)
        response = self.execute(
            POST_METHOD, self.path('register'),
            payload=customer.payload(),
            use_faker=fake,
            fake=AuthResponse.fake,
        )
        if not fake:
            self.client.storage.set_user_id(response.user_id)
        return response

    def change_password(self, password: str, use_faker: Optional[bool] = None) -> PasswordChange:
        """Change the password of the logged in user

        :raises RequiredFieldError: if no user is logged in and fake data is not used
        """
        fake = self.use_fake_data(use_faker)
        user_id = None
        if not fake and (user_id := self.current_user_id()) is None:
            raise RequiredFieldError(self.client, 'No user is logged in; call login() or register() first')
        return self.execute(
            POST_METHOD, self.path('change-password'),
            payload={'user_id': user_id, 'password': password},
            model=PasswordChange,
            use_faker=fake,
            fake=PasswordChange.fake,
        )

    def forgot_password(self, email: str, use_faker: Optional[bool] = None) -> PasswordReset:
        """Request a password reset code for ``email``"""
        return self.execute(
            POST_METHOD, self.path('forgot-password'),
            payload={'email': email},
            model=PasswordReset,
            use_faker=use_faker,
            fake=lambda: PasswordReset(user_id=FakeHelper.integer(1, 10000), code=FakeHelper.uuid()),
        )

    def logout(self) -> None:
        """Forget the stored user id"""
        self.client.storage.clear_user_id()
