"""
Generator contract for the schema.org JSON-LD types.

A generator describes its properties, builds a document from an entity
snapshot, and validates arbitrary documents against its required-field
rules. `MappedSchemaGenerator` implements the contract for any
`SchemaTypeDefinition`.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Tuple, runtime_checkable

from seo_schema.generators.fields import (
    Document,
    FieldSource,
    apply_mappings,
    put,
    seed_document,
    validate_properties,
)
from seo_schema.models.content import EntitySnapshot
from seo_schema.models.properties import PropertyMap
from seo_schema.models.results import ValidationResult


@runtime_checkable
class SchemaGenerator(Protocol):
    """Capabilities every schema type exposes."""

    def get_type_name(self) -> str: ...

    def get_properties(self) -> PropertyMap: ...

    def generate(self, entity: EntitySnapshot) -> Document: ...

    def validate(self, document: Mapping[str, Any]) -> ValidationResult: ...


@dataclass(frozen=True)
class SchemaTypeDefinition:
    """
    A schema type as data: its @type, property table and field mappings.

    Mappings are applied in order after the seed properties and the
    featured image, which is written under `image_key`.
    """
    type_name: str
    properties: PropertyMap
    mappings: Tuple[FieldSource, ...] = field(default_factory=tuple)
    image_key: str = "image"


class MappedSchemaGenerator:
    """
    Schema generator driven by a SchemaTypeDefinition.

    Principles:
    - Never raises on incomplete entities
    - Unknown values are omitted, never written as null or ""
    - Same entity in, same document out
    """

    def __init__(self, definition: SchemaTypeDefinition):
        self._definition = definition

    def get_type_name(self) -> str:
        return self._definition.type_name

    def get_properties(self) -> PropertyMap:
        """Return a fresh copy of the property table."""
        return {
            name: descriptor.model_copy(deep=True)
            for name, descriptor in self._definition.properties.items()
        }

    def generate(self, entity: EntitySnapshot) -> Document:
        """
        Generate the JSON-LD document for an entity.

        Args:
            entity: Read-only entity snapshot

        Returns:
            Document with @context, @type, name, description and url,
            plus whatever optional properties the entity provides
        """
        document = seed_document(self._definition.type_name, entity)
        put(document, self._definition.image_key, entity.thumbnail_url)
        return apply_mappings(document, self._definition.mappings, entity)

    def validate(self, document: Mapping[str, Any]) -> ValidationResult:
        """Check a document (generated or not) against the required properties."""
        return validate_properties(
            self._definition.properties,
            document,
            type_name=self._definition.type_name,
        )

    def is_property_required(self, name: str) -> bool:
        descriptor = self._definition.properties.get(name)
        return bool(descriptor and descriptor.required)

    def get_property_kind(self, name: str) -> str:
        descriptor = self._definition.properties.get(name)
        return descriptor.kind.value if descriptor else "text"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._definition.type_name}>"
