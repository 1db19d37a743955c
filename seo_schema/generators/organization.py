"""
Organization schema.

The featured image is emitted as the organization logo.
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping
from seo_schema.models import properties as p
from seo_schema.utils.text import split_lines

CONTACT_TYPE_OPTIONS = {
    "customer service": "Customer service",
    "technical support": "Technical support",
    "billing support": "Billing support",
    "sales": "Sales",
}


def address_properties(locality_required: bool = False) -> p.PropertyMap:
    return {
        "streetAddress": p.text("Street address", required=True),
        "addressLocality": p.text("City", required=locality_required),
        "postalCode": p.text("Postal code"),
        "addressRegion": p.text("Region"),
        "addressCountry": p.text("Country"),
    }


def address_mapping(prefix: str) -> NestedMapping:
    """PostalAddress built from <prefix>_street_address and siblings."""
    return NestedMapping("address", "PostalAddress", FieldMapping("streetAddress", f"{prefix}_street_address"), (
        FieldMapping("addressLocality", f"{prefix}_locality"),
        FieldMapping("postalCode", f"{prefix}_postal_code"),
        FieldMapping("addressRegion", f"{prefix}_region"),
        FieldMapping("addressCountry", f"{prefix}_country"),
    ))


ORGANIZATION_PROPERTIES = {
    "name": p.text("Name", "Organization name", required=True),
    "description": p.textarea("Description", "Organization description"),
    "logo": p.image("Logo", "Organization logo"),
    "url": p.url("URL", "Organization website"),
    "email": p.text("Email", "Contact email"),
    "telephone": p.text("Telephone", "Contact telephone"),
    "foundingDate": p.date("Founding date"),
    "sameAs": p.url("Profiles", "Social or reference profile URLs, one per line", multiple=True),
    "address": p.obj("Address", address_properties(), description="Postal address"),
    "contactPoint": p.obj("Contact point", {
        "telephone": p.text("Telephone", required=True),
        "contactType": p.select("Contact type", CONTACT_TYPE_OPTIONS),
    }, description="Main contact point"),
}

ORGANIZATION = SchemaTypeDefinition(
    type_name="Organization",
    properties=ORGANIZATION_PROPERTIES,
    image_key="logo",
    mappings=(
        FieldMapping("email", "_organization_email"),
        FieldMapping("telephone", "_organization_telephone"),
        FieldMapping("foundingDate", "_organization_founding_date"),
        FieldMapping("sameAs", "_organization_same_as", transform=split_lines),
        address_mapping("_organization"),
        NestedMapping("contactPoint", "ContactPoint", FieldMapping("telephone", "_contact_telephone"), (
            FieldMapping("contactType", "_contact_type", default="customer service"),
        )),
    ),
)


def organization_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(ORGANIZATION)
