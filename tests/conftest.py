"""Shared test fixtures."""

import pytest

from seo_schema.adapters import InMemoryEntityRepository
from seo_schema.models.content import EntitySnapshot
from seo_schema.registry import SchemaRegistry


@pytest.fixture
def registry():
    """Fresh registry with the built-in types."""
    return SchemaRegistry()


@pytest.fixture
def minimal_entity():
    """Entity with nothing but the core content fields."""
    return EntitySnapshot(
        id=10,
        title="Widget",
        excerpt="",
        raw_content="A widget.",
        permalink="https://x/w",
    )


@pytest.fixture
def product_entity():
    """Product entity with every optional product field set."""
    return EntitySnapshot(
        id=1,
        title="Espresso Machine",
        excerpt="<p>Makes <strong>great</strong> coffee.</p>",
        raw_content="<p>Long description.</p>",
        permalink="https://shop.example/espresso",
        thumbnail_url="https://shop.example/img/espresso.jpg",
        metadata={
            "_product_brand": "Brewmaster",
            "_product_sku": "BM-100",
            "_product_gtin": "4006381333931",
            "_product_mpn": "BM100X",
            "_product_color": "Silver",
            "_product_material": "Steel",
            "_product_price": "249.00",
            "_price_currency": "USD",
            "_product_availability": "InStock",
            "_price_valid_until": "2026-12-31",
            "_product_weight": "4.2",
        },
        terms={"product_cat": ["Kitchen", "Coffee"]},
        content_type="product",
        schema_type="Product",
        site_name="Brew Shop",
        site_url="https://shop.example",
    )


@pytest.fixture
def repository(product_entity):
    """In-memory repository covering the API lookup cases."""
    return InMemoryEntityRepository([
        product_entity,
        EntitySnapshot(id=2, title="About us", raw_content="We make things.",
                       permalink="https://shop.example/about", content_type="page"),
        EntitySnapshot(id=3, title="Mystery", permalink="https://shop.example/mystery",
                       content_type="mystery", schema_type="Unknown"),
    ])
