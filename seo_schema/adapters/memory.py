"""
In-memory entity repository, optionally seeded from a JSON fixtures file.
"""
import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from seo_schema.adapters.base import EntityId, EntitySourceError
from seo_schema.models.content import EntitySnapshot
from seo_schema.utils.logger import LayerLogger


class InMemoryEntityRepository:
    """
    Dict-backed entity repository.

    Identifiers are compared as strings, so 7 and "7" find the same entity.
    """

    def __init__(self, entities: Iterable[EntitySnapshot] = ()):
        self.logger = LayerLogger("memory_repository")
        self._entities: Dict[str, EntitySnapshot] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: EntitySnapshot) -> None:
        if entity.id is None:
            raise ValueError("entity snapshots stored in a repository need an id")
        self._entities[str(entity.id)] = entity

    async def get(self, entity_id: EntityId) -> Optional[EntitySnapshot]:
        entity = self._entities.get(str(entity_id))
        if entity is None:
            self.logger.log_decision(
                decision="entity_not_found",
                reason="no entity stored under this id",
                entity_id=str(entity_id),
            )
        return entity

    def __len__(self) -> int:
        return len(self._entities)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryEntityRepository":
        """
        Load entities from a JSON file holding a list of snapshot objects.

        Raises:
            EntitySourceError: file missing, unreadable or malformed
        """
        repository = cls()
        try:
            records = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            repository.logger.log_error(
                f"Could not load entity fixtures: {e}",
                error_type="fixtures_unreadable",
                path=str(path),
            )
            raise EntitySourceError(f"Could not load entity fixtures from {path}: {e}") from e

        if not isinstance(records, list):
            raise EntitySourceError(f"Entity fixtures in {path} must be a JSON list")

        for record in records:
            repository.add(EntitySnapshot.model_validate(record))

        repository.logger.log_action(
            "load_entity_fixtures",
            "completed",
            path=str(path),
            entities=len(repository),
        )
        return repository
