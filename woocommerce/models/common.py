from __future__ import annotations
from .model import Model
from .fields import Integer, String, Raw, List, Nested, DateTime
from ..utils import FakeHelper


class MetaData(Model):
    """Custom key/value data attached to most entities"""

    id = Integer()
    key = String()
    value = Raw(fake=FakeHelper.sentence)


class Link(Model):
    IDENTIFIER = 'href'

    href = String(fake=FakeHelper.url)


class Links(Model):
    """The ``_links`` object the API adds to entities"""

    IDENTIFIER = 'self_links'

    self_links = List(Nested(Link), key='self', count=(1, 1))
    collection = List(Nested(Link), count=(1, 1))


class Image(Model):
    id = Integer()
    date_created = DateTime()
    date_created_gmt = DateTime()
    date_modified = DateTime()
    date_modified_gmt = DateTime()
    src = String(fake=FakeHelper.image)
    name = String()
    alt = String(fake=FakeHelper.sentence)
