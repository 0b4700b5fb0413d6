from __future__ import annotations
from datetime import datetime, date
from typing import TYPE_CHECKING, Any, Callable, Optional, Type, Tuple, Dict
import enum

from ..utils import FakeHelper
from ..exceptions import DecodeError

if TYPE_CHECKING:
    from .model import Model


class Field:

    """Declares one attribute of a :class:`~.Model` and how it maps to the API's JSON

    **Overview**

    * ``key`` is the JSON key on the wire; it defaults to the attribute name
    * :meth:`decode` converts a wire value to its Python value; ``None`` stays ``None``
    * :meth:`encode` converts a Python value back to its wire value
    * :meth:`fake` returns a random value of the right type, used when a call runs with ``use_faker``

    Fields are descriptors: reading an unset field on an instance returns ``None``.
    """

    def __init__(self, key: Optional[str] = None, fake: Optional[Callable[[], Any]] = None):
        """
        :param key: the JSON key of the field, if it differs from the attribute name
        :param fake: callable returning a fake value; overrides :meth:`default_fake`
        """
        self.key = key
        self.name = None
        self.faker = fake

    def __set_name__(self, owner, name):
        self.name = name
        if self.key is None:
            self.key = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self.name)

    def __set__(self, instance, value):
        instance.__dict__[self.name] = value

    def decode(self, value: Any) -> Any:
        if value is None:
            return None
        return self.to_python(value)

    def encode(self, value: Any) -> Any:
        if value is None:
            return None
        return self.to_wire(value)

    def fake(self) -> Any:
        if self.faker is not None:
            return self.faker()
        return self.default_fake()

    def to_python(self, value: Any) -> Any:
        return value

    def to_wire(self, value: Any) -> Any:
        return value

    def default_fake(self) -> Any:
        return FakeHelper.word()

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.key}>'


class Raw(Field):
    """Any JSON value, kept as is"""


class String(Field):

    def to_python(self, value):
        return value if isinstance(value, str) else str(value)


class Integer(Field):

    def to_python(self, value):
        try:
            return int(value)
        except (TypeError, ValueError):
            # ex. an empty string for an unset quantity
            return None

    def default_fake(self):
        return FakeHelper.integer(1, 10000)


class Float(Field):

    def to_python(self, value):
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    def default_fake(self):
        return FakeHelper.decimal()


class Decimal(Float):
    """Monetary amounts and other numbers the API sends as strings, ex. ``"19.99"``"""

    def to_wire(self, value):
        return str(value)


class Boolean(Field):

    TRUE_VALUES = ('true', 'yes', '1')

    def to_python(self, value):
        if isinstance(value, str):
            return value.lower() in self.TRUE_VALUES
        return bool(value)

    def default_fake(self):
        return FakeHelper.boolean()


class DateTime(Field):
    """ISO-8601 timestamps; a value that does not parse decodes to ``None``"""

    def to_python(self, value):
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not value:
            return None
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None

    def to_wire(self, value):
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return value

    def default_fake(self):
        return FakeHelper.datetime()


class Enum(Field):

    def __init__(self, enum_cls: Type[enum.Enum], key: Optional[str] = None, fake: Optional[Callable] = None):
        super().__init__(key, fake)
        self.enum_cls = enum_cls

    def to_python(self, value):
        return self.enum_cls(value)

    def to_wire(self, value):
        return value.value if isinstance(value, enum.Enum) else value

    def default_fake(self):
        return FakeHelper.random_item(list(self.enum_cls))


class Nested(Field):
    """A JSON object decoded into another :class:`~.Model`"""

    def __init__(self, model: Type[Model], key: Optional[str] = None, fake: Optional[Callable] = None):
        super().__init__(key, fake)
        self.model = model

    def to_python(self, value):
        if not isinstance(value, dict):
            raise DecodeError(msg=f'Field "{self.key}" expects an object for {self.model.__name__}, '
                                  f'got {type(value).__name__}')
        return self.model.decode(value)

    def to_wire(self, value):
        return value.encode()

    def default_fake(self):
        return self.model.fake()


class List(Field):
    """A JSON array whose items are all of one field kind"""

    def __init__(self, field: Field, key: Optional[str] = None, fake: Optional[Callable] = None,
                 count: Tuple[int, int] = (0, 10)):
        super().__init__(key, fake)
        self.field = field
        self.count = count

    def __set_name__(self, owner, name):
        super().__set_name__(owner, name)
        if self.field.key is None:
            self.field.key = self.key

    def to_python(self, value):
        if not isinstance(value, list):
            raise DecodeError(msg=f'Field "{self.key}" expects a list, got {type(value).__name__}')
        return [self.field.decode(item) for item in value]

    def to_wire(self, value):
        return [self.field.encode(item) for item in value]

    def default_fake(self):
        return FakeHelper.list(self.field.fake, self.count)


class Mapping(Field):
    """A JSON object with arbitrary string keys, all values of one field kind"""

    def __init__(self, field: Field, key: Optional[str] = None, fake: Optional[Callable] = None,
                 count: Tuple[int, int] = (0, 5)):
        super().__init__(key, fake)
        self.field = field
        self.count = count

    def __set_name__(self, owner, name):
        super().__set_name__(owner, name)
        if self.field.key is None:
            self.field.key = self.key

    def to_python(self, value):
        if value == []:
            # PHP serializes an empty associative array as []
            return {}
        if not isinstance(value, dict):
            raise DecodeError(msg=f'Field "{self.key}" expects an object, got {type(value).__name__}')
        return {str(k): self.field.decode(v) for k, v in value.items()}

    def to_wire(self, value):
        return {k: self.field.encode(v) for k, v in value.items()}

    def default_fake(self) -> Dict[str, Any]:
        return {FakeHelper.slug(): self.field.fake() for _ in range(FakeHelper.integer(*self.count))}
