"""
Entity accessor contract shared by the content adapters.
"""
from typing import Optional, Protocol, Union

from seo_schema.models.content import EntitySnapshot

EntityId = Union[int, str]


class EntitySourceError(Exception):
    """The content source could not be reached or answered unexpectedly."""


class EntityRepository(Protocol):
    """Read-only access to entity snapshots by identifier."""

    async def get(self, entity_id: EntityId) -> Optional[EntitySnapshot]:
        """Return the snapshot, or None if no such entity exists."""
        ...
