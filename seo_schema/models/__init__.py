"""Models package initialization."""
from seo_schema.models.content import EntitySnapshot
from seo_schema.models.properties import PropertyDescriptor, PropertyKind, PropertyMap
from seo_schema.models.results import SchemaViolation, ValidationResult

__all__ = [
    "EntitySnapshot",
    "PropertyDescriptor",
    "PropertyKind",
    "PropertyMap",
    "SchemaViolation",
    "ValidationResult",
]
