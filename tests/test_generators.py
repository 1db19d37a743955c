"""Tests for document generation across the built-in schema types."""

import json

import pytest

from seo_schema.generators import BUILTIN_SCHEMA_TYPES
from seo_schema.models.content import EntitySnapshot

SEED_KEYS = {"@context", "@type", "name", "description", "url"}


def seed_keys(type_name):
    """Article always derives its headline from the title."""
    return SEED_KEYS | {"headline"} if type_name == "Article" else SEED_KEYS


def test_product_with_price_only(registry):
    """Price without currency yields an EUR offer and nothing else optional."""
    entity = EntitySnapshot(
        title="Widget",
        excerpt="",
        raw_content="A widget.",
        permalink="https://x/w",
        metadata={"_product_price": "19.99"},
    )

    assert registry.create("Product").generate(entity) == {
        "@context": "https://schema.org",
        "@type": "Product",
        "name": "Widget",
        "description": "A widget.",
        "url": "https://x/w",
        "offers": {"@type": "Offer", "price": "19.99", "priceCurrency": "EUR"},
    }


def test_full_product(registry, product_entity):
    """Every product field is mapped when the entity provides it."""
    document = registry.create("Product").generate(product_entity)

    assert document["description"] == "Makes great coffee."
    assert document["image"] == "https://shop.example/img/espresso.jpg"
    assert document["brand"] == {"@type": "Brand", "name": "Brewmaster"}
    assert document["sku"] == "BM-100"
    assert document["gtin13"] == "4006381333931"
    assert document["mpn"] == "BM100X"
    assert document["category"] == "Kitchen"
    assert document["color"] == "Silver"
    assert document["material"] == "Steel"
    assert document["offers"] == {
        "@type": "Offer",
        "price": "249.00",
        "priceCurrency": "USD",
        "availability": "https://schema.org/InStock",
        "priceValidUntil": "2026-12-31",
    }
    assert document["weight"] == {"@type": "QuantitativeValue", "value": "4.2", "unitCode": "KGM"}


def test_explicit_category_wins_over_taxonomy(registry, product_entity):
    """The category field takes precedence over the first taxonomy term."""
    entity = product_entity.model_copy(update={
        "metadata": {**product_entity.metadata, "_product_category": "Appliances"},
    })
    assert registry.create("Product").generate(entity)["category"] == "Appliances"


def test_offer_fields_need_a_price(registry, minimal_entity):
    """Currency and availability alone do not create an offer."""
    entity = minimal_entity.model_copy(update={
        "metadata": {"_price_currency": "USD", "_product_availability": "InStock"},
    })
    assert "offers" not in registry.create("Product").generate(entity)


def test_absolute_availability_not_prefixed_twice(registry, minimal_entity):
    """Availability already given as a URI is kept."""
    entity = minimal_entity.model_copy(update={
        "metadata": {"_product_price": "5", "_product_availability": "https://schema.org/SoldOut"},
    })
    offers = registry.create("Product").generate(entity)["offers"]
    assert offers["availability"] == "https://schema.org/SoldOut"


def test_description_prefers_excerpt(registry, minimal_entity):
    """The excerpt is used when present, with markup stripped."""
    entity = minimal_entity.model_copy(update={"excerpt": "<p>Short &amp; sweet.</p>"})
    assert registry.create("Product").generate(entity)["description"] == "Short & sweet."


def test_description_falls_back_to_stripped_content(registry, minimal_entity):
    """Without an excerpt the raw content is stripped of markup."""
    entity = minimal_entity.model_copy(update={
        "raw_content": "<div><script>alert(1)</script><p>Hello world</p></div>",
    })
    assert registry.create("Service").generate(entity)["description"] == "Hello world"


@pytest.mark.parametrize("type_name", list(BUILTIN_SCHEMA_TYPES))
def test_minimal_entity_yields_seed_only(registry, minimal_entity, type_name):
    """With no metadata, only the seed properties are present."""
    document = registry.create(type_name).generate(minimal_entity)
    assert set(document) == seed_keys(type_name)
    assert document["@type"] == registry.create(type_name).get_type_name()


@pytest.mark.parametrize("type_name", list(BUILTIN_SCHEMA_TYPES))
def test_empty_metadata_values_are_omitted(registry, minimal_entity, type_name):
    """Blank metadata values never show up as null or empty properties."""
    generator = registry.create(type_name)
    blank = {}
    for source in generator._definition.mappings:
        for meta_key in _meta_keys(source):
            blank[meta_key] = "  "
    entity = minimal_entity.model_copy(update={"metadata": blank})

    assert set(generator.generate(entity)) == seed_keys(type_name)


@pytest.mark.parametrize("type_name", list(BUILTIN_SCHEMA_TYPES))
def test_generation_is_idempotent(registry, product_entity, type_name):
    """Generating twice from the same snapshot gives equal documents."""
    generator = registry.create(type_name)
    assert generator.generate(product_entity) == generator.generate(product_entity)


@pytest.mark.parametrize("type_name", list(BUILTIN_SCHEMA_TYPES))
def test_properties_are_stable(registry, type_name):
    """Mutating a returned property table does not affect later calls."""
    generator = registry.create(type_name)
    first = generator.get_properties()
    snapshot = {name: descriptor.to_dict() for name, descriptor in first.items()}

    first["name"].required = False
    first.pop("url", None)

    second = generator.get_properties()
    assert {name: descriptor.to_dict() for name, descriptor in second.items()} == snapshot


@pytest.mark.parametrize("type_name", list(BUILTIN_SCHEMA_TYPES))
def test_name_is_required_for_every_type(registry, type_name):
    """All types require a name."""
    generator = registry.create(type_name)
    assert generator.is_property_required("name")
    assert generator.get_property_kind("name") == "text"
    assert generator.get_property_kind("doesNotExist") == "text"


def test_generation_does_not_mutate_entity(registry, product_entity):
    """The entity snapshot is left unchanged."""
    before = product_entity.model_dump()
    registry.create("Product").generate(product_entity)
    assert product_entity.model_dump() == before


def test_service_provider_defaults_to_site(registry, minimal_entity):
    """The provider falls back to the entity's site."""
    entity = minimal_entity.model_copy(update={
        "site_name": "Acme", "site_url": "https://acme.example",
        "metadata": {"_service_type": "Plumbing", "_area_served": "Madrid"},
    })
    document = registry.create("Service").generate(entity)

    assert document["provider"] == {"@type": "Organization", "name": "Acme", "url": "https://acme.example"}
    assert document["serviceType"] == "Plumbing"
    assert document["areaServed"] == "Madrid"


def test_service_offer(registry, minimal_entity):
    """Service offers default the currency and prefix availability."""
    entity = minimal_entity.model_copy(update={
        "metadata": {"_service_price": "80", "_service_availability": "PreOrder"},
    })
    assert registry.create("Service").generate(entity)["offers"] == {
        "@type": "Offer",
        "price": "80",
        "priceCurrency": "EUR",
        "availability": "https://schema.org/PreOrder",
    }


def test_organization_uses_logo(registry, minimal_entity):
    """Organizations emit the featured image as logo."""
    entity = minimal_entity.model_copy(update={
        "thumbnail_url": "https://acme.example/logo.png",
        "metadata": {
            "_organization_same_as": "https://twitter.com/acme\n\nhttps://github.com/acme\n",
            "_organization_street_address": "1 Main St",
            "_organization_locality": "Springfield",
            "_contact_telephone": "+1-555-0100",
        },
    })
    document = registry.create("Organization").generate(entity)

    assert document["logo"] == "https://acme.example/logo.png"
    assert "image" not in document
    assert document["sameAs"] == ["https://twitter.com/acme", "https://github.com/acme"]
    assert document["address"] == {
        "@type": "PostalAddress", "streetAddress": "1 Main St", "addressLocality": "Springfield",
    }
    assert document["contactPoint"] == {
        "@type": "ContactPoint", "telephone": "+1-555-0100", "contactType": "customer service",
    }


def test_local_business(registry, minimal_entity):
    """LocalBusiness maps hours, address and coordinates."""
    entity = minimal_entity.model_copy(update={
        "metadata": {
            "_business_opening_hours": "Mo-Fr 09:00-18:00\nSa 10:00-14:00",
            "_business_street_address": "Calle Mayor 1",
            "_business_locality": "Madrid",
            "_business_latitude": 40.4168,
            "_business_longitude": -3.7038,
            "_business_price_range": "$$",
        },
    })
    document = registry.create("LocalBusiness").generate(entity)

    assert document["openingHours"] == ["Mo-Fr 09:00-18:00", "Sa 10:00-14:00"]
    assert document["address"]["addressLocality"] == "Madrid"
    assert document["geo"] == {"@type": "GeoCoordinates", "latitude": 40.4168, "longitude": -3.7038}
    assert document["priceRange"] == "$$"


def test_person(registry, minimal_entity):
    """Person maps its employer as a nested organization."""
    entity = minimal_entity.model_copy(update={
        "metadata": {"_person_job_title": "Chef", "_person_works_for": "Bistro"},
    })
    document = registry.create("Person").generate(entity)

    assert document["jobTitle"] == "Chef"
    assert document["worksFor"] == {"@type": "Organization", "name": "Bistro"}


def test_event(registry, minimal_entity):
    """Event codes become schema.org URIs and the venue becomes a Place."""
    entity = minimal_entity.model_copy(update={
        "metadata": {
            "_event_start_date": "2026-06-01T19:00:00+02:00",
            "_event_status": "EventScheduled",
            "_event_attendance_mode": "OfflineEventAttendanceMode",
            "_event_location_name": "Town Hall",
            "_event_location_address": "Plaza 1, Madrid",
            "_event_price": 0,
        },
    })
    document = registry.create("Event").generate(entity)

    assert document["startDate"] == "2026-06-01T19:00:00+02:00"
    assert document["eventStatus"] == "https://schema.org/EventScheduled"
    assert document["eventAttendanceMode"] == "https://schema.org/OfflineEventAttendanceMode"
    assert document["location"] == {"@type": "Place", "name": "Town Hall", "address": "Plaza 1, Madrid"}
    assert document["offers"] == {"@type": "Offer", "price": 0, "priceCurrency": "EUR"}


def test_article_falls_back_to_entity_fields(registry, minimal_entity):
    """Article headline, author, publisher and dates come from the entity."""
    entity = minimal_entity.model_copy(update={
        "title": "x" * 120,
        "author_name": "Ada",
        "site_name": "The Daily",
        "published_date": "2024-05-01",
        "modified_date": "2024-05-02T10:00:00",
        "terms": {"category": ["News", "Tech"]},
    })
    document = registry.create("Article").generate(entity)

    assert len(document["headline"]) == 110
    assert document["headline"].endswith("...")
    assert document["author"] == {"@type": "Person", "name": "Ada"}
    assert document["publisher"] == {"@type": "Organization", "name": "The Daily"}
    assert document["datePublished"] == "2024-05-01T00:00:00Z"
    assert document["dateModified"] == "2024-05-02T10:00:00Z"
    assert document["articleSection"] == "News"


def test_article_publisher_logo(registry, minimal_entity):
    """The publisher logo is nested as an ImageObject."""
    entity = minimal_entity.model_copy(update={
        "metadata": {"_article_publisher": "The Daily", "_article_publisher_logo": "https://daily.example/logo.png"},
    })
    assert registry.create("Article").generate(entity)["publisher"] == {
        "@type": "Organization",
        "name": "The Daily",
        "logo": {"@type": "ImageObject", "url": "https://daily.example/logo.png"},
    }


def test_recipe(registry, minimal_entity):
    """Recipe ingredients are listed and instructions become steps."""
    entity = minimal_entity.model_copy(update={
        "metadata": {
            "_recipe_ingredients": "2 eggs\n100 g flour\n",
            "_recipe_instructions": "Mix.\nBake for 20 minutes.",
            "_recipe_calories": "240 calories",
            "_recipe_prep_time": "PT10M",
        },
    })
    document = registry.create("Recipe").generate(entity)

    assert document["recipeIngredient"] == ["2 eggs", "100 g flour"]
    assert document["recipeInstructions"] == [
        {"@type": "HowToStep", "text": "Mix."},
        {"@type": "HowToStep", "text": "Bake for 20 minutes."},
    ]
    assert document["nutrition"] == {"@type": "NutritionInformation", "calories": "240 calories"}
    assert document["prepTime"] == "PT10M"


def test_faq_from_list(registry, minimal_entity):
    """FAQ items without both question and answer are skipped."""
    entity = minimal_entity.model_copy(update={
        "metadata": {"_faq_items": [
            {"question": "Do you ship?", "answer": "Yes, worldwide."},
            {"question": "", "answer": "Orphan answer"},
            {"question": "Unanswered?"},
            "not an object",
        ]},
    })
    document = registry.create("FAQPage").generate(entity)

    assert document["@type"] == "FAQPage"
    assert document["mainEntity"] == [{
        "@type": "Question",
        "name": "Do you ship?",
        "acceptedAnswer": {"@type": "Answer", "text": "Yes, worldwide."},
    }]


def test_faq_from_json_string(registry, minimal_entity):
    """FAQ items may be stored as a JSON string."""
    items = json.dumps([{"question": "Q?", "answer": "A."}])
    entity = minimal_entity.model_copy(update={"metadata": {"_faq_items": items}})
    assert len(registry.create("FAQPage").generate(entity)["mainEntity"]) == 1


def test_faq_malformed_json_is_omitted(registry, minimal_entity):
    """Malformed FAQ data yields no mainEntity instead of an error."""
    entity = minimal_entity.model_copy(update={"metadata": {"_faq_items": "[{not json"}})
    assert "mainEntity" not in registry.create("FAQPage").generate(entity)


def _meta_keys(source):
    keys = [source.meta_key] if hasattr(source, "meta_key") else [source.anchor.meta_key]
    for child in getattr(source, "fields", ()):
        keys.extend(_meta_keys(child))
    return [key for key in keys if key]
