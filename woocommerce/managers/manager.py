from __future__ import annotations
from typing import Union, Type, List, Optional, Dict, Any, Callable, TYPE_CHECKING

from ..models import Model, APIResponse, BatchRequest, BatchResponse
from ..exceptions import OperationNotAllowedError
from ..constants import (
    ModelMethod,
    GET_METHOD,
    POST_METHOD,
    PUT_METHOD,
    DELETE_METHOD,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
)
from ..decorators import validate_method_for_model
from ..utils import FakeHelper, build_query, build_path
from .. import clients

if TYPE_CHECKING:
    from ..clients import Client
    from ..utils import WooLogger


class Manager:

    """Performs the requests of one API endpoint. Parent of all endpoint-specific managers

    **Overview**

    * Each operation calls :meth:`execute`, which either returns generated data or sends the request
    * Generated data is returned when the operation's ``use_faker`` is ``True``, or when it is ``None``
      and the :attr:`.Client.use_faker` setting is ``True``
    * Response JSON is decoded into the manager's :attr:`Model`

    The generic operations (:meth:`list`, :meth:`by_id`, :meth:`create`, :meth:`update`, :meth:`delete` and
    :meth:`batch`) work for any endpoint that follows the usual WooCommerce layout; subclasses narrow their
    arguments and defaults.
    """

    #: Whether :meth:`list` takes ``page`` and ``per_page``; unpaginated endpoints return everything at once
    PAGINATED = True

    def __init__(self, endpoint: str, client: Client, model: Type[Model] = APIResponse):
        """Initialize a Manager object

        :param endpoint: the base API endpoint (for example, ``orders``)
        :param client: an initialized :class:`~.Client` object
        :param model: the :class:`~.Model` to parse the response data with; uses :class:`~.APIResponse` if not specified
        """
        if not isinstance(client, clients.Client):
            raise TypeError(f'`client` must be of type {clients.Client}')

        #: The :class:`~.Client` to send requests with
        self.client = client
        #: The endpoint of the manager's resource
        self.endpoint = endpoint.strip('/')
        #: :doc:`models` class to wrap the response with
        self.Model = model

    @property
    def logger(self) -> WooLogger:
        return self.client.logger

    def use_fake_data(self, use_faker: Optional[bool] = None) -> bool:
        """Resolves the ``use_faker`` argument of an operation against the :attr:`.Client.use_faker` setting"""
        return self.client.use_faker if use_faker is None else use_faker

    def path(self, *segments: Union[str, int]) -> str:
        """The request path of the endpoint, followed by ``segments``, ex. ``/products/794/duplicate``"""
        return build_path(self.endpoint, *segments)

    def validate_model_method(self, method: ModelMethod) -> None:
        """
        Validates whether the specified method is allowed for the manager's model.

        :param method: The ModelMethod to validate (e.g., ModelMethod.CREATE, ModelMethod.UPDATE)
        :raises OperationNotAllowedError: if the method is not allowed for the model.
        """
        if method not in self.Model.ALLOWED_METHODS:
            raise OperationNotAllowedError(self.client, method.name, self.Model.__name__)

    def not_allowed(self, operation: str) -> OperationNotAllowedError:
        """The error raised by operations the endpoint does not support, ex. ``batch`` on order notes"""
        return OperationNotAllowedError(self.client, operation, self.Model.__name__)

    def execute(self, method: str, path: str, *, fake: Callable[[], Any], use_faker: Optional[bool] = None,
                params: Optional[Dict] = None, payload: Optional[Union[Dict, list]] = None,
                model: Optional[Type[Model]] = None, many: bool = False,
                parse: Optional[Callable[[Any], Any]] = None) -> Any:
        """Performs one operation

        When fake data is used, ``fake`` is called and its result returned without sending a request.
        Otherwise the request is sent, a failed response raises :class:`requests.HTTPError`, and the
        response JSON is decoded with ``parse`` if given, or with ``model`` (the manager's :attr:`Model`
        if not given).

        :param method: the HTTP method
        :param path: the request path, ex. from :meth:`path`
        :param fake: returns the result of the operation in fake mode
        :param use_faker: the ``use_faker`` argument of the operation
        :param params: query string parameters, ex. from :func:`~.build_query`
        :param payload: JSON request body
        :param model: the model to decode the response with
        :param many: decode the response as a list of ``model``
        :param parse: callable to convert the response JSON with, instead of decoding a model
        """
        if self.use_fake_data(use_faker):
            self.logger.debug(f'Generating fake response for {method} {path}')
            return fake()

        response = self.client.request(method, self.client.url_for(path), params=params, payload=payload)
        response.raise_for_status()
        data = response.json()

        if parse is not None:
            return parse(data)

        model = model or self.Model
        if many:
            return model.decode_many(data)
        return model.decode(data)

    def fake_list(self, per_page: Optional[int] = None, model: Optional[Type[Model]] = None) -> List[Model]:
        """A list of fake entities; exactly ``per_page`` long when a page size is given"""
        model = model or self.Model
        if per_page is not None:
            return [model.fake() for _ in range(per_page)]
        return FakeHelper.list(model.fake)

    def fake_saved(self, entity: Model) -> Model:
        """A fake entity carrying the fields set on ``entity``, as if the API had stored it"""
        saved = type(entity).fake()
        for name in entity.fields():
            if (value := getattr(entity, name)) is not None:
                setattr(saved, name, value)
        return saved

    def fake_with_uid(self, uid: Union[int, str], model: Optional[Type[Model]] = None) -> Model:
        entity = (model or self.Model).fake()
        if entity.IDENTIFIER:
            setattr(entity, entity.IDENTIFIER, uid)
        return entity

    @staticmethod
    def resolve_params(context=None, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       **params) -> Dict[str, Any]:
        """Query parameters of :meth:`list`; arguments that are ``None`` are left out"""
        return build_query({'context': context, 'page': page, 'per_page': per_page, **params})

    def list(self, use_faker: Optional[bool] = None, **params) -> List[Model]:
        """Retrieve a page of the endpoint's entities

        :param use_faker: return fake entities instead of calling the API
        :param params: query arguments of the endpoint, ex. ``page`` or ``search``
        """
        query = self.resolve_params(**params)
        return self.execute(
            GET_METHOD, self.path(),
            params=query,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(query.get('per_page')),
        )

    def all(self, *args, use_faker: Optional[bool] = None, **params) -> List[Model]:
        """Retrieve every page of the endpoint's entities by calling :meth:`list` until a page comes back short

        Positional arguments are passed on to :meth:`list`, ex. the order id of :class:`~.OrderRefundManager`.
        Endpoints that are not :attr:`PAGINATED` are listed with a single call.
        """
        if not self.PAGINATED:
            return self.list(*args, use_faker=use_faker, **params)

        per_page = params.pop('per_page', MAX_PER_PAGE)
        page = params.pop('page', DEFAULT_PAGE)
        result = []

        while True:
            self.logger.info(f'Fetching page {page} of endpoint {self.endpoint}')
            items = self.list(*args, use_faker=use_faker, page=page, per_page=per_page, **params)
            result.extend(items)
            if len(items) < per_page or self.use_fake_data(use_faker):
                return result
            page += 1

    def by_id(self, item_id: Union[int, str], use_faker: Optional[bool] = None, **params) -> Model:
        """Retrieve one entity by its identifier

        :param item_id: the :attr:`~.Model.uid` of the entity
        :param use_faker: return a fake entity instead of calling the API
        """
        return self.execute(
            GET_METHOD, self.path(item_id),
            params=build_query(params) or None,
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(item_id),
        )

    @validate_method_for_model(ModelMethod.CREATE)
    def create(self, entity: Model, use_faker: Optional[bool] = None) -> Model:
        """Create an entity; returns it as stored by the API, with its new identifier

        :param entity: the entity to create; unset fields are not sent
        :param use_faker: return a fake entity instead of calling the API
        """
        self.logger.info(f'Creating {entity.__class__.__name__} on endpoint {self.endpoint}')
        return self.execute(
            POST_METHOD, self.path(),
            payload=entity.payload(),
            use_faker=use_faker,
            fake=lambda: self.fake_saved(entity),
        )

    @validate_method_for_model(ModelMethod.UPDATE)
    def update(self, entity: Model, use_faker: Optional[bool] = None) -> Model:
        """Update an entity; only the fields set on ``entity`` are sent

        :param entity: the entity to update; its :attr:`~.Model.uid` must be set
        :param use_faker: return a fake entity instead of calling the API
        :raises RequiredFieldError: if the identifier of ``entity`` is not set
        """
        entity.require(entity.IDENTIFIER)
        self.logger.info(f'Updating {entity}')
        return self.execute(
            PUT_METHOD, self.path(entity.uid),
            payload=entity.payload(),
            use_faker=use_faker,
            fake=lambda: self.fake_saved(entity),
        )

    @validate_method_for_model(ModelMethod.DELETE)
    def delete(self, item_id: Union[int, str], force: bool = False, use_faker: Optional[bool] = None) -> Model:
        """Delete an entity; returns the entity as it was before deletion

        :param item_id: the :attr:`~.Model.uid` of the entity
        :param force: delete permanently instead of moving the entity to the trash
        :param use_faker: return a fake entity instead of calling the API
        """
        self.logger.info(f'Deleting {self.Model.__name__} {item_id} from endpoint {self.endpoint}')
        return self.execute(
            DELETE_METHOD, self.path(item_id),
            params=build_query({'force': force}),
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(item_id),
        )

    def remove(self, path: str, params: Optional[Dict] = None, use_faker: Optional[bool] = None) -> bool:
        """Sends a ``DELETE`` request for operations that only report success; returns ``True`` on any 2xx"""
        self.validate_model_method(ModelMethod.DELETE)
        self.logger.info(f'Deleting {path}')
        return self.execute(
            DELETE_METHOD, path,
            params=params,
            use_faker=use_faker,
            fake=lambda: True,
            parse=lambda data: True,
        )

    def batch(self, request: BatchRequest, use_faker: Optional[bool] = None) -> BatchResponse:
        """Create, update and delete entities of the endpoint in one request

        :param request: the entities to create and update, and the identifiers to delete
        :param use_faker: return a fake response, with one entity per item of ``request``
        :raises OperationNotAllowedError: if a part of ``request`` is not allowed for the manager's model
        """
        for part, method in (('create', ModelMethod.CREATE), ('update', ModelMethod.UPDATE),
                             ('delete', ModelMethod.DELETE)):
            if getattr(request, part):
                self.validate_model_method(method)
        self.logger.info(f'Sending {request} to endpoint {self.endpoint}')
        return self.execute(
            POST_METHOD, self.path('batch'),
            payload=request.encode(),
            use_faker=use_faker,
            fake=lambda: BatchResponse.fake(request, self.Model),
            parse=lambda data: BatchResponse.decode(data, self.Model),
        )

    def __repr__(self):
        return f'<WooCommerce {self.__class__.__name__}: {self.endpoint}>'
