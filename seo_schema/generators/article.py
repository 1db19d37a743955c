"""
Article schema.

Headline, author, publisher and dates fall back to the entity's own
fields when no explicit metadata is set.
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping
from seo_schema.models import properties as p
from seo_schema.utils.text import normalize_date, truncate

# Google Rich Results headline limit
HEADLINE_MAX_LENGTH = 110

ARTICLE_PROPERTIES = {
    "name": p.text("Name", "Article title", required=True),
    "headline": p.text("Headline", f"Headline, at most {HEADLINE_MAX_LENGTH} characters", required=True),
    "description": p.textarea("Description", "Article summary"),
    "image": p.image("Image", "Main article image"),
    "author": p.obj("Author", {
        "name": p.text("Name", required=True),
    }),
    "publisher": p.obj("Publisher", {
        "name": p.text("Name", required=True),
        "logo": p.obj("Logo", {
            "url": p.url("URL", required=True),
        }),
    }),
    "datePublished": p.date("Published", required=True),
    "dateModified": p.date("Modified"),
    "articleSection": p.text("Section", "Article section or category"),
    "url": p.url("URL", "Article URL"),
}

ARTICLE = SchemaTypeDefinition(
    type_name="Article",
    properties=ARTICLE_PROPERTIES,
    mappings=(
        FieldMapping("headline", "_article_headline",
                     fallback=lambda entity: entity.title,
                     transform=lambda value: truncate(str(value), HEADLINE_MAX_LENGTH)),
        NestedMapping("author", "Person",
                      FieldMapping("name", "_article_author", fallback=lambda entity: entity.author_name)),
        NestedMapping("publisher", "Organization",
                      FieldMapping("name", "_article_publisher", fallback=lambda entity: entity.site_name), (
            NestedMapping("logo", "ImageObject", FieldMapping("url", "_article_publisher_logo")),
        )),
        FieldMapping("datePublished", "_article_date_published",
                     fallback=lambda entity: entity.published_date, transform=normalize_date),
        FieldMapping("dateModified", "_article_date_modified",
                     fallback=lambda entity: entity.modified_date, transform=normalize_date),
        FieldMapping("articleSection", "_article_section",
                     fallback=lambda entity: entity.first_term("category")),
    ),
)


def article_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(ARTICLE)
