"""Adapters package initialization."""
from seo_schema.adapters.base import EntityRepository, EntitySourceError
from seo_schema.adapters.memory import InMemoryEntityRepository
from seo_schema.adapters.wordpress import WordPressEntityRepository

__all__ = [
    "EntityRepository",
    "EntitySourceError",
    "InMemoryEntityRepository",
    "WordPressEntityRepository",
]
