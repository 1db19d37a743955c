"""
Service schema.

The provider defaults to the site the entity belongs to when no
explicit provider is set on the entity.
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping, schema_uri
from seo_schema.models import properties as p

DEFAULT_CURRENCY = "EUR"

AVAILABILITY_OPTIONS = {
    "InStock": "Available",
    "OutOfStock": "Not available",
    "PreOrder": "Pre-order",
}

SERVICE_PROPERTIES = {
    "name": p.text("Name", "Service name", required=True),
    "description": p.textarea("Description", "Service description"),
    "image": p.image("Image", "Representative service image"),
    "serviceType": p.text("Service type", "Category or type of service"),
    "provider": p.obj("Provider", {
        "name": p.text("Name", required=True),
        "url": p.url("URL"),
    }, description="Organization or person providing the service"),
    "areaServed": p.text("Area served", "Geographic area where the service is offered"),
    "offers": p.obj("Offer", {
        "price": p.number("Price", required=True),
        "priceCurrency": p.text("Currency", required=True),
        "availability": p.select("Availability", AVAILABILITY_OPTIONS),
    }, description="Service offer or price"),
    "url": p.url("URL", "Service URL"),
}

SERVICE = SchemaTypeDefinition(
    type_name="Service",
    properties=SERVICE_PROPERTIES,
    mappings=(
        NestedMapping("provider", "Organization",
                      FieldMapping("name", "_service_provider_name",
                                   fallback=lambda entity: entity.site_name), (
            FieldMapping("url", "_service_provider_url", fallback=lambda entity: entity.site_url),
        )),
        FieldMapping("serviceType", "_service_type"),
        FieldMapping("areaServed", "_area_served"),
        NestedMapping("offers", "Offer", FieldMapping("price", "_service_price"), (
            FieldMapping("priceCurrency", "_price_currency", default=DEFAULT_CURRENCY),
            FieldMapping("availability", "_service_availability", transform=schema_uri),
        )),
    ),
)


def service_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(SERVICE)
