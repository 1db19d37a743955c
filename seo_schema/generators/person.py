"""
Person schema.
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping
from seo_schema.models import properties as p
from seo_schema.utils.text import split_lines

PERSON_PROPERTIES = {
    "name": p.text("Name", "Full name", required=True),
    "description": p.textarea("Description", "Short biography"),
    "givenName": p.text("Given name"),
    "familyName": p.text("Family name"),
    "jobTitle": p.text("Job title"),
    "email": p.text("Email"),
    "telephone": p.text("Telephone"),
    "birthDate": p.date("Birth date"),
    "image": p.image("Image", "Portrait"),
    "worksFor": p.obj("Works for", {
        "name": p.text("Name", required=True),
        "url": p.url("URL"),
    }, description="Employer organization"),
    "sameAs": p.url("Profiles", "Social or reference profile URLs, one per line", multiple=True),
    "url": p.url("URL", "Profile URL"),
}

PERSON = SchemaTypeDefinition(
    type_name="Person",
    properties=PERSON_PROPERTIES,
    mappings=(
        FieldMapping("givenName", "_person_given_name"),
        FieldMapping("familyName", "_person_family_name"),
        FieldMapping("jobTitle", "_person_job_title"),
        FieldMapping("email", "_person_email"),
        FieldMapping("telephone", "_person_telephone"),
        FieldMapping("birthDate", "_person_birth_date"),
        NestedMapping("worksFor", "Organization", FieldMapping("name", "_person_works_for"), (
            FieldMapping("url", "_person_works_for_url"),
        )),
        FieldMapping("sameAs", "_person_same_as", transform=split_lines),
    ),
)


def person_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(PERSON)
