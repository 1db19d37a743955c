"""
Entity snapshot model for the SEO schema service.
This is the read-only view of one content entity (post, page, custom
post type) that every schema generator consumes, regardless of which
content source produced it.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EntitySnapshot(BaseModel):
    """
    Read-only snapshot of a content entity.

    This is the contract between the entity adapters and the schema
    generators. Generators never mutate it.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = None

    # Core content fields
    title: str = ""
    excerpt: str = ""
    raw_content: str = ""
    permalink: str = ""
    thumbnail_url: Optional[str] = None

    # Flat key -> value metadata (custom fields)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    # Taxonomy name -> ordered term names
    terms: Dict[str, List[str]] = Field(default_factory=dict)

    # Content type and the schema type bound to it (if any)
    content_type: str = "post"
    schema_type: Optional[str] = None

    # Additional metadata
    author_name: Optional[str] = None
    published_date: Optional[str] = None
    modified_date: Optional[str] = None

    # Site-level info, used for publisher/provider defaults
    site_name: Optional[str] = None
    site_url: Optional[str] = None

    def meta(self, key: Optional[str]) -> Any:
        """Return a metadata value, or None when the key is unset."""
        if not key:
            return None
        return self.metadata.get(key)

    def first_term(self, taxonomy: str) -> Optional[str]:
        """Return the first term name of a taxonomy, if any."""
        names = self.terms.get(taxonomy) or []
        return names[0] if names else None
