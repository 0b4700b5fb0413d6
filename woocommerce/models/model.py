from __future__ import annotations
from typing import Union, Optional, List, Dict, Any, Type, TypeVar

from ..constants import ModelMethod
from ..exceptions import DecodeError, RequiredFieldError
from ..utils import FakeHelper
from .fields import Field

M = TypeVar('M', bound='Model')


def compact(data: Any) -> Any:
    """Recursively drops ``None`` values from JSON objects; used to build request payloads"""
    if isinstance(data, dict):
        return {key: compact(value) for key, value in data.items() if value is not None}
    if isinstance(data, list):
        return [compact(item) for item in data]
    return data


class Model:

    """The base class of all API entity classes

    **Overview**

    * A :class:`Model` declares its attributes as :class:`~.Field` objects, in wire order
    * :meth:`decode` builds an instance from API response JSON; keys that aren't declared are dropped
    * :meth:`encode` returns the JSON object of an instance, with every declared key present
    * :meth:`fake` builds an instance populated with random values
    * The endpoint's corresponding :class:`~.Manager` performs the requests

    Every field is optional and defaults to ``None``. Two models are equal when their encoded forms are equal.

    .. admonition:: Example
       :class: example

       ::

        >>> tag = ProductTag.decode({'id': 34, 'name': 'Leather Shoes', 'slug': 'leather-shoes'})
        >>> tag.name
        'Leather Shoes'
        >>> ProductTag.decode(tag.encode()) == tag
        True
    """

    DOCUMENTATION: str = None  #: Link to the official WooCommerce REST API documentation for the Model
    IDENTIFIER: str = 'id'  #: The field that the Model's :attr:`~.uid` comes from
    ALLOWED_METHODS = [ModelMethod.GET]  # get is the default method. Models that can be written add their methods

    _fields: Dict[str, Field] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Field):
                    fields[name] = attr
        cls._fields = fields

    def __init__(self, **kwargs):
        unknown = set(kwargs) - set(self._fields)
        if unknown:
            raise TypeError(f'{self.__class__.__name__} has no field(s): {", ".join(sorted(unknown))}')

        for name in self._fields:
            setattr(self, name, kwargs.get(name))

    @classmethod
    def fields(cls) -> Dict[str, Field]:
        """The declared fields of the Model, keyed by attribute name"""
        return dict(cls._fields)

    @classmethod
    def decode(cls: Type[M], data: Dict) -> M:
        """Builds an instance from the JSON of an API response

        :param data: the JSON object to decode
        :raises DecodeError: if ``data`` is not an object, or a nested value doesn't have the declared structure
        """
        if not isinstance(data, dict):
            raise DecodeError(msg=f'Expected an object to decode {cls.__name__}, got {type(data).__name__}')

        instance = cls()
        for name, field in cls._fields.items():
            setattr(instance, name, field.decode(data.get(field.key)))
        return instance

    @classmethod
    def decode_many(cls: Type[M], data: List[Dict]) -> List[M]:
        """Decodes a JSON array of objects

        :raises DecodeError: if ``data`` is not a list
        """
        if not isinstance(data, list):
            raise DecodeError(msg=f'Expected a list of {cls.__name__}, got {type(data).__name__}')
        return [cls.decode(item) for item in data]

    def encode(self) -> Dict[str, Any]:
        """The JSON object of the instance; unset fields are ``None``"""
        return {field.key: field.encode(getattr(self, name)) for name, field in self._fields.items()}

    def payload(self) -> Dict[str, Any]:
        """The request body used to create or update the instance; unset fields are left out"""
        return compact(self.encode())

    @classmethod
    def fake(cls: Type[M]) -> M:
        """An instance with every field set to a random value"""
        return cls(**{name: field.fake() for name, field in cls._fields.items()})

    @property
    def uid(self) -> Optional[Union[str, int]]:
        """Unique item identifier; used in the path of requests for the item"""
        return getattr(self, self.IDENTIFIER, None) if self.IDENTIFIER else None

    def require(self, *fields: str) -> None:
        """Checks that the named fields are set

        :raises RequiredFieldError: naming the fields that are ``None``
        """
        if missing := [name for name in fields if getattr(self, name, None) is None]:
            raise RequiredFieldError(
                msg=f'{self.__class__.__name__} is missing required field(s): {", ".join(missing)}'
            )

    def __eq__(self, other):
        if not isinstance(other, Model):
            return NotImplemented
        return type(self) is type(other) and self.encode() == other.encode()

    def __repr__(self):
        return f'<WooCommerce {self.__class__.__name__}: {self.uid}>'


class APIResponse(Model):

    """Wraps a JSON object from an endpoint that has no dedicated :class:`Model`"""

    IDENTIFIER = 'id'

    def __init__(self, data: Optional[Dict] = None):
        super().__init__()
        self.data = data if data is not None else {}

    @classmethod
    def decode(cls, data: Dict) -> APIResponse:
        if not isinstance(data, dict):
            raise DecodeError(msg=f'Expected an object to decode {cls.__name__}, got {type(data).__name__}')
        return cls(data)

    def encode(self) -> Dict[str, Any]:
        return dict(self.data)

    @classmethod
    def fake(cls) -> APIResponse:
        return cls({'id': FakeHelper.integer(1, 10000), 'name': FakeHelper.word()})

    @property
    def uid(self) -> Optional[Union[str, int]]:
        return self.data.get(self.IDENTIFIER)

    def __getitem__(self, key):
        return self.data[key]

    def get(self, key, default=None):
        return self.data.get(key, default)
