"""
SEO Schema Service - FastAPI Application
REST endpoints over the schema registry: type listing, property
descriptors, per-entity JSON-LD documents and document validation.
"""
from typing import Any, Dict, Optional, Tuple

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from seo_schema import __version__
from seo_schema.adapters import (
    EntityRepository,
    EntitySourceError,
    InMemoryEntityRepository,
    WordPressEntityRepository,
)
from seo_schema.config import config
from seo_schema.models.content import EntitySnapshot
from seo_schema.registry import SchemaRegistry
from seo_schema.utils.logger import get_logger, set_trace_id

logger = get_logger("main")


# Request/Response models
class ValidateRequest(BaseModel):
    """Request model for document validation."""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    document: Dict[str, Any] = Field(alias="schema")


class ValidateResponse(BaseModel):
    """Response model for a valid document."""
    valid: bool
    message: str


def build_repository() -> EntityRepository:
    """Build the entity repository selected by configuration."""
    if config.ENTITY_SOURCE == "wordpress":
        if not config.is_wordpress_configured():
            raise RuntimeError("ENTITY_SOURCE=wordpress requires WP_SITE_URL to be set.")
        return WordPressEntityRepository(
            site_url=config.WP_SITE_URL,
            schema_type_map=config.schema_type_map(),
            access_token=config.WP_ACCESS_TOKEN,
            timeout=config.REQUEST_TIMEOUT,
        )

    if config.ENTITY_FIXTURES_PATH:
        return InMemoryEntityRepository.from_json_file(config.ENTITY_FIXTURES_PATH)
    return InMemoryEntityRepository()


def get_registry(request: Request) -> SchemaRegistry:
    return request.app.state.registry


def get_repository(request: Request) -> EntityRepository:
    return request.app.state.repository


def _not_found(code: str, message: str) -> HTTPException:
    return HTTPException(status_code=404, detail={"code": code, "message": message})


async def _resolve_entity(
    entity_id: str,
    type_name: Optional[str],
    registry: SchemaRegistry,
    repository: EntityRepository,
) -> Tuple[EntitySnapshot, str]:
    """
    Load the entity and decide which schema type applies to it.

    The entity is looked up first so a missing entity is never reported
    as a missing type.
    """
    try:
        entity = await repository.get(entity_id)
    except EntitySourceError as e:
        logger.error("entity_source_error", error=str(e), entity_id=entity_id)
        raise HTTPException(status_code=502, detail={"code": "entity_source_error", "message": str(e)})

    if entity is None:
        logger.info("entity_not_found", entity_id=entity_id)
        raise _not_found("entity_not_found", "Entity not found.")

    resolved_type = type_name or entity.schema_type
    if not resolved_type:
        logger.info("no_schema_type", entity_id=entity_id, content_type=entity.content_type)
        raise _not_found("no_schema_type", "This content type has no associated schema.")

    if not registry.is_registered(resolved_type):
        logger.info("schema_type_not_found", entity_id=entity_id, schema_type=resolved_type)
        raise _not_found("schema_type_not_found", "Schema type not found.")

    return entity, resolved_type


def create_app(
    registry: Optional[SchemaRegistry] = None,
    repository: Optional[EntityRepository] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        registry: Schema registry to serve (fresh built-in registry if omitted)
        repository: Entity repository (chosen from configuration if omitted)
    """
    app = FastAPI(
        title="SEO Schema Service",
        description="Generates and validates schema.org JSON-LD for content entities",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.registry = registry if registry is not None else SchemaRegistry()
    app.state.repository = repository if repository is not None else build_repository()

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/api/schema/types")
    async def list_schema_types(registry: SchemaRegistry = Depends(get_registry)):
        """List registered schema types as {code: code} pairs."""
        return registry.type_choices()

    @app.get("/api/schema/types/{type_name}/properties")
    async def get_schema_properties(type_name: str, registry: SchemaRegistry = Depends(get_registry)):
        """Return the property descriptors of a schema type."""
        generator = registry.create(type_name)
        if generator is None:
            logger.info("schema_type_not_found", schema_type=type_name)
            raise _not_found("schema_type_not_found", "Schema type not found.")

        return {name: descriptor.to_dict() for name, descriptor in generator.get_properties().items()}

    @app.get("/api/schema/posts/{entity_id}")
    async def get_entity_schema(
        entity_id: str,
        type: Optional[str] = Query(None, description="Schema type; defaults to the entity's own"),
        registry: SchemaRegistry = Depends(get_registry),
        repository: EntityRepository = Depends(get_repository),
    ):
        """Generate the JSON-LD document for one entity."""
        trace_id = set_trace_id()
        logger.info("entity_schema_request", entity_id=entity_id, schema_type=type, trace_id=trace_id)

        entity, type_name = await _resolve_entity(entity_id, type, registry, repository)
        document = registry.create_document_for_entity(type_name, entity)

        logger.info(
            "entity_schema_generated",
            entity_id=entity_id,
            schema_type=type_name,
            properties=[key for key in document if not key.startswith("@")],
        )
        return document

    @app.get("/api/schema/posts/{entity_id}/script", response_class=HTMLResponse)
    async def get_entity_script(
        entity_id: str,
        type: Optional[str] = Query(None, description="Schema type; defaults to the entity's own"),
        pretty: bool = Query(config.PRETTY_JSON),
        registry: SchemaRegistry = Depends(get_registry),
        repository: EntityRepository = Depends(get_repository),
    ):
        """Return the embeddable <script type="application/ld+json"> tag."""
        set_trace_id()
        entity, type_name = await _resolve_entity(entity_id, type, registry, repository)
        return HTMLResponse(content=registry.create_script_for_entity(type_name, entity, pretty=pretty))

    @app.post("/api/schema/validate", response_model=ValidateResponse)
    async def validate_schema(request: ValidateRequest, registry: SchemaRegistry = Depends(get_registry)):
        """Validate an arbitrary document against a type's required properties."""
        trace_id = set_trace_id()
        generator = registry.create(request.type)
        if generator is None:
            logger.info("schema_type_not_found", schema_type=request.type)
            raise _not_found("schema_type_not_found", "Schema type not found.")

        result = generator.validate(request.document)
        if not result:
            logger.info(
                "schema_validation_failed",
                schema_type=request.type,
                path=result.error.path,
                trace_id=trace_id,
            )
            raise HTTPException(status_code=400, detail=result.error.to_dict())

        return ValidateResponse(valid=True, message="Schema is valid.")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
