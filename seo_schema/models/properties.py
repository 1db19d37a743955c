"""
Declarative property descriptors for schema.org types.

A descriptor tells the admin UI how to render a field and tells the
validator which properties a document must carry.
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator


class PropertyKind(str, Enum):
    """Field kind used to render and validate a property."""
    TEXT = "text"
    TEXTAREA = "textarea"
    IMAGE = "image"
    NUMBER = "number"
    URL = "url"
    DATE = "date"
    SELECT = "select"
    OBJECT = "object"


class PropertyDescriptor(BaseModel):
    """
    Description of one schema property.

    `options` is present exactly when kind is select, `properties`
    exactly when kind is object. `multiple` marks list-valued properties.
    """
    label: str
    description: str = ""
    kind: PropertyKind = PropertyKind.TEXT
    required: bool = False
    multiple: bool = False
    options: Optional[Dict[str, str]] = None
    properties: Optional[Dict[str, "PropertyDescriptor"]] = None

    @model_validator(mode="after")
    def _check_kind_payload(self) -> "PropertyDescriptor":
        if (self.kind == PropertyKind.SELECT) != (self.options is not None):
            raise ValueError("options must be given if and only if kind is 'select'")
        if (self.kind == PropertyKind.OBJECT) != (self.properties is not None):
            raise ValueError("properties must be given if and only if kind is 'object'")
        return self

    @property
    def is_object(self) -> bool:
        return self.kind == PropertyKind.OBJECT

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the REST layer, leaving out absent payloads."""
        return self.model_dump(mode="json", exclude_none=True)


PropertyDescriptor.model_rebuild()

PropertyMap = Dict[str, PropertyDescriptor]


def text(label: str, description: str = "", required: bool = False, multiple: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.TEXT,
                              required=required, multiple=multiple)


def textarea(label: str, description: str = "", required: bool = False, multiple: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.TEXTAREA,
                              required=required, multiple=multiple)


def image(label: str, description: str = "", required: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.IMAGE, required=required)


def number(label: str, description: str = "", required: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.NUMBER, required=required)


def url(label: str, description: str = "", required: bool = False, multiple: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.URL,
                              required=required, multiple=multiple)


def date(label: str, description: str = "", required: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.DATE, required=required)


def select(
    label: str,
    options: Dict[str, str],
    description: str = "",
    required: bool = False,
) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.SELECT,
                              required=required, options=dict(options))


def obj(
    label: str,
    properties: PropertyMap,
    description: str = "",
    required: bool = False,
    multiple: bool = False,
) -> PropertyDescriptor:
    return PropertyDescriptor(label=label, description=description, kind=PropertyKind.OBJECT,
                              required=required, multiple=multiple, properties=dict(properties))
