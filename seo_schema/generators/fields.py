"""
Shared building blocks for the schema generators.

Every generator is data: a property table plus an ordered list of field
mappings. The helpers here turn an entity snapshot into a document under
the omit-if-empty rule and check documents against a property table.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union

from seo_schema.models.content import EntitySnapshot
from seo_schema.models.properties import PropertyMap
from seo_schema.models.results import SchemaViolation, ValidationResult
from seo_schema.utils.text import strip_tags

SCHEMA_CONTEXT = "https://schema.org"
SCHEMA_URI_PREFIX = "https://schema.org/"

Document = Dict[str, Any]


def is_empty(value: Any) -> bool:
    """
    Return True for values that mean "unknown".

    None, blank strings and empty collections are empty. Numbers
    (including 0) and booleans are real values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def put(document: Document, key: str, value: Any) -> bool:
    """Write value under key unless it is empty. Returns whether it was written."""
    if is_empty(value):
        return False
    document[key] = value
    return True


def schema_uri(code: Any) -> str:
    """Expand a bare code such as "InStock" to https://schema.org/InStock."""
    code = str(code).strip()
    if code.startswith(("http://", "https://")):
        return code
    return SCHEMA_URI_PREFIX + code


def seed_document(type_name: str, entity: EntitySnapshot) -> Document:
    """Start a document with the properties every type carries."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": type_name,
        "name": entity.title,
        "description": strip_tags(entity.excerpt) or strip_tags(entity.raw_content),
        "url": entity.permalink,
    }


@dataclass(frozen=True)
class FieldMapping:
    """
    How one schema property is read from an entity.

    Resolution order: metadata key, then fallback(entity), then default.
    The transform only ever sees a non-empty value.
    """
    key: str
    meta_key: Optional[str] = None
    transform: Optional[Callable[[Any], Any]] = None
    default: Any = None
    fallback: Optional[Callable[[EntitySnapshot], Any]] = None

    def resolve(self, entity: EntitySnapshot) -> Any:
        value = entity.meta(self.meta_key)
        if is_empty(value) and self.fallback is not None:
            value = self.fallback(entity)
        if is_empty(value):
            value = self.default
        if is_empty(value):
            return None
        if self.transform is not None:
            value = self.transform(value)
        return None if is_empty(value) else value


@dataclass(frozen=True)
class NestedMapping:
    """
    A nested object that exists only when its anchor field resolves.

    Sibling fields follow the same omit-if-empty rule and may themselves
    be nested mappings.
    """
    key: str
    schema_type: Optional[str]
    anchor: FieldMapping
    fields: Tuple["FieldSource", ...] = field(default_factory=tuple)

    def resolve(self, entity: EntitySnapshot) -> Optional[Document]:
        anchor_value = self.anchor.resolve(entity)
        if anchor_value is None:
            return None

        nested: Document = {}
        if self.schema_type:
            nested["@type"] = self.schema_type
        nested[self.anchor.key] = anchor_value
        for source in self.fields:
            put(nested, source.key, source.resolve(entity))
        return nested


FieldSource = Union[FieldMapping, NestedMapping]


def apply_mappings(document: Document, mappings: Tuple[FieldSource, ...], entity: EntitySnapshot) -> Document:
    for source in mappings:
        put(document, source.key, source.resolve(entity))
    return document


def validate_properties(
    properties: PropertyMap,
    document: Any,
    type_name: Optional[str] = None,
    prefix: str = "",
) -> ValidationResult:
    """
    Check a document against a property table, stopping at the first
    violation.

    All required properties at this level are checked before descending
    into object-valued properties. Lists of objects are checked item by
    item; values that are not objects are not inspected further.
    """
    if not isinstance(document, Mapping):
        document = {}

    for name, descriptor in properties.items():
        if descriptor.required and is_empty(document.get(name)):
            return ValidationResult.fail(SchemaViolation.missing(prefix + name, type_name))

    for name, descriptor in properties.items():
        if not descriptor.is_object:
            continue
        value = document.get(name)
        if isinstance(value, Mapping):
            result = validate_properties(descriptor.properties, value, type_name, f"{prefix}{name}.")
            if not result:
                return result
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if not isinstance(item, Mapping):
                    continue
                result = validate_properties(descriptor.properties, item, type_name, f"{prefix}{name}[{index}].")
                if not result:
                    return result

    return ValidationResult.ok()
