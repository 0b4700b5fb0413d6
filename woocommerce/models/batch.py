from __future__ import annotations
from typing import Generic, TypeVar, Optional, List, Dict, Any, Type, Union

from ..exceptions import DecodeError
from .model import Model

M = TypeVar('M', bound=Model)


class BatchRequest(Generic[M]):

    """The body of a ``/batch`` request: entities to create and update, and ids to delete

    Parts left as ``None`` are not sent.

    .. admonition:: Example
       :class: example

       ::

        >>> request = BatchRequest(create=[Coupon(code='20off', amount=20.0)], delete=[12])
        >>> request.encode()
        {'create': [{'code': '20off', 'amount': '20.0'}], 'delete': [12]}
    """

    def __init__(self, create: Optional[List[M]] = None, update: Optional[List[M]] = None,
                 delete: Optional[List[Union[int, str]]] = None):
        self.create = create
        self.update = update
        self.delete = delete

    def encode(self) -> Dict[str, Any]:
        body = {}
        if self.create is not None:
            body['create'] = [item.payload() for item in self.create]
        if self.update is not None:
            body['update'] = [item.payload() for item in self.update]
        if self.delete is not None:
            body['delete'] = list(self.delete)
        return body

    def __repr__(self):
        sizes = {part: len(items) for part, items in self.encode().items()}
        return f'<WooCommerce BatchRequest: {sizes}>'


class BatchResponse(Generic[M]):

    """The result of a ``/batch`` request; deleted entities are returned as they were before deletion"""

    def __init__(self, create: Optional[List[M]] = None, update: Optional[List[M]] = None,
                 delete: Optional[List[M]] = None):
        self.create = create
        self.update = update
        self.delete = delete

    @classmethod
    def decode(cls, data: Dict, model: Type[M]) -> BatchResponse[M]:
        if not isinstance(data, dict):
            raise DecodeError(msg=f'Expected an object to decode a batch of {model.__name__}, '
                                  f'got {type(data).__name__}')
        parts = {}
        for part in ('create', 'update', 'delete'):
            value = data.get(part)
            parts[part] = model.decode_many(value) if value is not None else None
        return cls(**parts)

    @classmethod
    def fake(cls, request: BatchRequest, model: Type[M]) -> BatchResponse[M]:
        """A response with one fake entity per item of ``request``"""
        create = update = delete = None

        if request.create is not None:
            create = [model.fake() for _ in request.create]
        if request.update is not None:
            update = []
            for item in request.update:
                entity = model.fake()
                setattr(entity, model.IDENTIFIER, item.uid)
                update.append(entity)
        if request.delete is not None:
            delete = []
            for uid in request.delete:
                entity = model.fake()
                setattr(entity, model.IDENTIFIER, uid)
                delete.append(entity)

        return cls(create, update, delete)

    def encode(self) -> Dict[str, Any]:
        body = {}
        for part in ('create', 'update', 'delete'):
            if (items := getattr(self, part)) is not None:
                body[part] = [item.encode() for item in items]
        return body

    def __eq__(self, other):
        if not isinstance(other, BatchResponse):
            return NotImplemented
        return self.encode() == other.encode()

    def __repr__(self):
        sizes = {part: len(items) for part, items in self.encode().items()}
        return f'<WooCommerce BatchResponse: {sizes}>'
