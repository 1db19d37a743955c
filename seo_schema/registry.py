"""
Schema type registry.

Maps a type name to the factory that builds its generator. A registry is
an explicit value: build one at process start and hand it to whoever
needs it. Nothing is persisted; every new registry starts from the
built-in types.
"""
from typing import Any, Callable, Dict, List, Mapping, Optional

from seo_schema.generators import BUILTIN_SCHEMA_TYPES, Document, GeneratorFactory, SchemaGenerator
from seo_schema.models.content import EntitySnapshot
from seo_schema.models.properties import PropertyMap
from seo_schema.models.results import ValidationResult
from seo_schema.serializer import to_script_tag

# Post-generation transform: receives the finished document and the
# entity it was built from, returns the document to use.
DocumentTransform = Callable[[Document, EntitySnapshot], Document]


class TransformingGenerator:
    """Generator wrapper that runs registered transforms after generate()."""

    def __init__(self, inner: SchemaGenerator, transforms: List[DocumentTransform]):
        self.inner = inner
        self.transforms = tuple(transforms)

    def get_type_name(self) -> str:
        return self.inner.get_type_name()

    def get_properties(self) -> PropertyMap:
        return self.inner.get_properties()

    def generate(self, entity: EntitySnapshot) -> Document:
        document = self.inner.generate(entity)
        for transform in self.transforms:
            document = transform(document, entity)
        return document

    def validate(self, document: Mapping[str, Any]) -> ValidationResult:
        return self.inner.validate(document)


class SchemaRegistry:
    """
    Registry of schema types.

    Lookups of unknown types are not errors: create() returns None and the
    document helpers return an empty result.
    """

    def __init__(self, include_builtins: bool = True):
        self._factories: Dict[str, GeneratorFactory] = {}
        self._transforms: Dict[str, List[DocumentTransform]] = {}
        if include_builtins:
            for type_name, factory in BUILTIN_SCHEMA_TYPES.items():
                self.register(type_name, factory)

    def register(self, type_name: str, factory: GeneratorFactory) -> None:
        """Register a type, replacing any existing factory for it."""
        self._factories[type_name] = factory

    def unregister(self, type_name: str) -> None:
        self._factories.pop(type_name, None)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._factories

    def list_type_names(self) -> List[str]:
        return list(self._factories)

    def type_choices(self) -> Dict[str, str]:
        """Type names as {code: code} pairs for selection UIs."""
        return {type_name: type_name for type_name in self._factories}

    def add_transform(self, type_name: str, transform: DocumentTransform) -> None:
        """
        Append a transform run on every document generated for type_name.

        Transforms run in the order they were added and are kept when the
        type is re-registered.
        """
        self._transforms.setdefault(type_name, []).append(transform)

    def clear_transforms(self, type_name: str) -> None:
        self._transforms.pop(type_name, None)

    def create(self, type_name: str) -> Optional[SchemaGenerator]:
        """Build the generator for type_name, or None if it is not registered."""
        factory = self._factories.get(type_name)
        if factory is None:
            return None

        generator = factory()
        transforms = self._transforms.get(type_name)
        if transforms:
            return TransformingGenerator(generator, transforms)
        return generator

    def create_document_for_entity(self, type_name: str, entity: EntitySnapshot) -> Document:
        """Generate the document for an entity, or {} if the type is unknown."""
        generator = self.create(type_name)
        if generator is None:
            return {}
        return generator.generate(entity)

    def create_script_for_entity(self, type_name: str, entity: EntitySnapshot, pretty: bool = False) -> str:
        """Generate the embeddable script tag, or "" if the type is unknown."""
        generator = self.create(type_name)
        if generator is None:
            return ""
        return to_script_tag(generator.generate(entity), pretty=pretty)
