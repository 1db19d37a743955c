"""
LocalBusiness schema.
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping
from seo_schema.generators.organization import address_mapping, address_properties
from seo_schema.models import properties as p
from seo_schema.utils.text import split_lines

LOCAL_BUSINESS_PROPERTIES = {
    "name": p.text("Name", "Business name", required=True),
    "description": p.textarea("Description", "Business description"),
    "image": p.image("Image", "Photo of the business"),
    "telephone": p.text("Telephone"),
    "email": p.text("Email"),
    "priceRange": p.text("Price range", "Relative price range, e.g. $$"),
    "openingHours": p.text("Opening hours", "One entry per line, e.g. Mo-Fr 09:00-18:00", multiple=True),
    "address": p.obj("Address", address_properties(locality_required=True),
                     description="Postal address", required=True),
    "geo": p.obj("Coordinates", {
        "latitude": p.number("Latitude", required=True),
        "longitude": p.number("Longitude", required=True),
    }, description="Geographic coordinates"),
    "url": p.url("URL", "Business website"),
}

LOCAL_BUSINESS = SchemaTypeDefinition(
    type_name="LocalBusiness",
    properties=LOCAL_BUSINESS_PROPERTIES,
    mappings=(
        FieldMapping("telephone", "_business_telephone"),
        FieldMapping("email", "_business_email"),
        FieldMapping("priceRange", "_business_price_range"),
        FieldMapping("openingHours", "_business_opening_hours", transform=split_lines),
        address_mapping("_business"),
        NestedMapping("geo", "GeoCoordinates", FieldMapping("latitude", "_business_latitude"), (
            FieldMapping("longitude", "_business_longitude"),
        )),
    ),
)


def local_business_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(LOCAL_BUSINESS)
