"""Generators package initialization."""
from typing import Callable, Dict

from seo_schema.generators.article import article_schema
from seo_schema.generators.base import MappedSchemaGenerator, SchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.event import event_schema
from seo_schema.generators.faq import faq_schema
from seo_schema.generators.fields import Document, FieldMapping, NestedMapping
from seo_schema.generators.local_business import local_business_schema
from seo_schema.generators.organization import organization_schema
from seo_schema.generators.person import person_schema
from seo_schema.generators.product import product_schema
from seo_schema.generators.recipe import recipe_schema
from seo_schema.generators.service import service_schema

GeneratorFactory = Callable[[], SchemaGenerator]

# Registered into every new SchemaRegistry, in this order.
BUILTIN_SCHEMA_TYPES: Dict[str, GeneratorFactory] = {
    "Service": service_schema,
    "Product": product_schema,
    "Organization": organization_schema,
    "LocalBusiness": local_business_schema,
    "Person": person_schema,
    "Event": event_schema,
    "Article": article_schema,
    "Recipe": recipe_schema,
    "FAQPage": faq_schema,
}

__all__ = [
    "BUILTIN_SCHEMA_TYPES",
    "Document",
    "FieldMapping",
    "GeneratorFactory",
    "MappedSchemaGenerator",
    "NestedMapping",
    "SchemaGenerator",
    "SchemaTypeDefinition",
]
