"""
WordPress adapter for the SEO schema service.
Reads entity snapshots from the WordPress REST API (wp/v2).
"""
from typing import Any, Dict, Iterable, List, Optional

import httpx

from seo_schema.adapters.base import EntityId, EntitySourceError
from seo_schema.models.content import EntitySnapshot
from seo_schema.utils.logger import LayerLogger
from seo_schema.utils.text import strip_tags

DEFAULT_ROUTES = ("posts", "pages")


class WordPressEntityRepository:
    """
    WordPress REST API entity repository.

    Looks an id up under each REST route in turn (posts, pages, then one
    route per mapped custom post type) and converts the first hit into an
    EntitySnapshot. Site name and URL are read once from the API index.
    """

    def __init__(
        self,
        site_url: str,
        schema_type_map: Optional[Dict[str, str]] = None,
        routes: Optional[Iterable[str]] = None,
        access_token: Optional[str] = None,
        timeout: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.site_url = site_url.rstrip("/")
        self.schema_type_map = dict(schema_type_map or {})
        self.routes = list(routes) if routes is not None else self._default_routes()
        self.access_token = access_token
        self.timeout = timeout
        self.transport = transport
        self.logger = LayerLogger("wordpress_repository")
        self._site_info: Optional[Dict[str, Any]] = None

    def _default_routes(self) -> List[str]:
        routes = list(DEFAULT_ROUTES)
        for post_type in self.schema_type_map:
            if post_type not in ("post", "page") and post_type not in routes:
                routes.append(post_type)
        return routes

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers, including auth if configured."""
        headers = {
            "Accept": "application/json",
            "User-Agent": "SEOSchemaService/1.0",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def get(self, entity_id: EntityId) -> Optional[EntitySnapshot]:
        """
        Fetch one entity by id.

        Returns:
            EntitySnapshot, or None when no route knows the id

        Raises:
            EntitySourceError: network failure or unexpected status
        """
        self.logger.log_action("fetch_entity", "started", entity_id=str(entity_id), site_url=self.site_url)

        async with self._client() as client:
            for route in self.routes:
                url = f"{self.site_url}/wp-json/wp/v2/{route}/{entity_id}"
                try:
                    response = await client.get(url, params={"_embed": "1"}, headers=self._get_headers())
                except httpx.HTTPError as e:
                    self.logger.log_error(
                        f"Error fetching WordPress entity: {e}",
                        error_type="api_error",
                        url=url,
                    )
                    raise EntitySourceError(f"WordPress request failed: {e}") from e

                if response.status_code == 404:
                    continue
                if response.status_code != 200:
                    self.logger.log_error(
                        "Unexpected WordPress response",
                        error_type="api_status",
                        url=url,
                        status_code=response.status_code,
                    )
                    raise EntitySourceError(
                        f"WordPress answered {response.status_code} for {url}"
                    )

                site_info = await self._fetch_site_info(client)
                entity = self._to_snapshot(response.json(), site_info)
                self.logger.log_action(
                    "fetch_entity",
                    "completed",
                    entity_id=str(entity_id),
                    route=route,
                    content_type=entity.content_type,
                    schema_type=entity.schema_type,
                )
                return entity

        self.logger.log_decision(
            decision="entity_not_found",
            reason="no REST route returned the id",
            entity_id=str(entity_id),
            routes=self.routes,
        )
        return None

    async def _fetch_site_info(self, client: httpx.AsyncClient) -> Dict[str, Any]:
        """Read site name and URL from the REST index, once."""
        if self._site_info is not None:
            return self._site_info

        try:
            response = await client.get(f"{self.site_url}/wp-json", headers=self._get_headers())
            data = response.json() if response.status_code == 200 else {}
        except (httpx.HTTPError, ValueError) as e:
            self.logger.log_fallback(
                from_source="wp_json_index",
                to_source="configured_site_url",
                reason=f"Site index unavailable: {e}",
            )
            data = {}

        self._site_info = {
            "name": data.get("name") if isinstance(data, dict) else None,
            "url": (data.get("home") or data.get("url")) if isinstance(data, dict) else None,
        }
        return self._site_info

    def _to_snapshot(self, data: Dict[str, Any], site_info: Dict[str, Any]) -> EntitySnapshot:
        """Normalize a wp/v2 object into an EntitySnapshot."""
        embedded = data.get("_embedded") or {}
        content_type = data.get("type") or "post"

        return EntitySnapshot(
            id=data.get("id"),
            title=strip_tags(self._rendered(data.get("title"))),
            excerpt=self._rendered(data.get("excerpt")),
            raw_content=self._rendered(data.get("content")),
            permalink=data.get("link") or "",
            thumbnail_url=self._extract_featured_image(embedded),
            metadata=self._flatten_meta(data.get("meta")),
            terms=self._extract_terms(embedded),
            content_type=content_type,
            schema_type=self.schema_type_map.get(content_type),
            author_name=self._extract_author_name(embedded),
            published_date=data.get("date"),
            modified_date=data.get("modified"),
            site_name=site_info.get("name"),
            site_url=site_info.get("url") or self.site_url,
        )

    @staticmethod
    def _rendered(field: Any) -> str:
        """Extract the rendered value of a {rendered: ...} field."""
        if isinstance(field, dict):
            return field.get("rendered") or field.get("raw") or ""
        return str(field) if field else ""

    @staticmethod
    def _flatten_meta(meta: Any) -> Dict[str, Any]:
        """Single-value meta arrays become their only value."""
        if not isinstance(meta, dict):
            return {}
        flat = {}
        for key, value in meta.items():
            if isinstance(value, list) and len(value) == 1:
                value = value[0]
            flat[key] = value
        return flat

    @staticmethod
    def _extract_featured_image(embedded: Dict[str, Any]) -> Optional[str]:
        media = embedded.get("wp:featuredmedia") or []
        if media and isinstance(media[0], dict):
            return media[0].get("source_url")
        return None

    @staticmethod
    def _extract_author_name(embedded: Dict[str, Any]) -> Optional[str]:
        """Extract author name from embedded data."""
        author_list = embedded.get("author") or []
        if author_list and isinstance(author_list[0], dict):
            return author_list[0].get("name")
        return None

    @staticmethod
    def _extract_terms(embedded: Dict[str, Any]) -> Dict[str, List[str]]:
        """Group embedded terms by taxonomy, keeping their order."""
        terms: Dict[str, List[str]] = {}
        for group in embedded.get("wp:term") or []:
            for term in group or []:
                if not isinstance(term, dict) or not term.get("name"):
                    continue
                taxonomy = term.get("taxonomy") or "category"
                terms.setdefault(taxonomy, []).append(strip_tags(term["name"]))
        return terms
