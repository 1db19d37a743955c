"""
Product schema.

Metadata keys:
- _product_brand, _product_sku, _product_gtin, _product_mpn
- _product_category (falls back to the first product_cat term)
- _product_color, _product_material
- _product_price, _price_currency, _product_availability, _price_valid_until
- _product_weight, _product_weight_unit
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping, schema_uri
from seo_schema.models import properties as p

DEFAULT_CURRENCY = "EUR"
DEFAULT_WEIGHT_UNIT = "KGM"

AVAILABILITY_OPTIONS = {
    "InStock": "In stock",
    "OutOfStock": "Out of stock",
    "PreOrder": "Pre-order",
    "BackOrder": "Back order",
    "LimitedAvailability": "Limited availability",
    "SoldOut": "Sold out",
    "Discontinued": "Discontinued",
}

WEIGHT_UNIT_OPTIONS = {
    "KGM": "Kilograms",
    "GRM": "Grams",
    "LBR": "Pounds",
}

PRODUCT_PROPERTIES = {
    "name": p.text("Name", "Product name", required=True),
    "description": p.textarea("Description", "Product description"),
    "image": p.image("Image", "Representative product image"),
    "brand": p.obj("Brand", {
        "name": p.text("Name", required=True),
    }, description="Product brand"),
    "sku": p.text("SKU", "Product SKU code"),
    "gtin13": p.text("GTIN / EAN", "Product GTIN-13 / EAN code"),
    "mpn": p.text("MPN", "Manufacturer part number"),
    "offers": p.obj("Offer", {
        "price": p.number("Price", required=True),
        "priceCurrency": p.text("Currency", required=True),
        "availability": p.select("Availability", AVAILABILITY_OPTIONS),
        "priceValidUntil": p.date("Price valid until"),
        "url": p.url("URL"),
    }, description="Product offer or price", required=True),
    "category": p.text("Category", "Product category"),
    "color": p.text("Color", "Product color"),
    "material": p.text("Material", "Product material"),
    "weight": p.obj("Weight", {
        "value": p.number("Value", required=True),
        "unitCode": p.select("Unit", WEIGHT_UNIT_OPTIONS, required=True),
    }, description="Product weight"),
    "url": p.url("URL", "Product URL"),
}

PRODUCT = SchemaTypeDefinition(
    type_name="Product",
    properties=PRODUCT_PROPERTIES,
    mappings=(
        NestedMapping("brand", "Brand", FieldMapping("name", "_product_brand")),
        FieldMapping("sku", "_product_sku"),
        FieldMapping("gtin13", "_product_gtin"),
        FieldMapping("mpn", "_product_mpn"),
        FieldMapping("category", "_product_category",
                     fallback=lambda entity: entity.first_term("product_cat")),
        FieldMapping("color", "_product_color"),
        FieldMapping("material", "_product_material"),
        NestedMapping("offers", "Offer", FieldMapping("price", "_product_price"), (
            FieldMapping("priceCurrency", "_price_currency", default=DEFAULT_CURRENCY),
            FieldMapping("availability", "_product_availability", transform=schema_uri),
            FieldMapping("priceValidUntil", "_price_valid_until"),
        )),
        NestedMapping("weight", "QuantitativeValue", FieldMapping("value", "_product_weight"), (
            FieldMapping("unitCode", "_product_weight_unit", default=DEFAULT_WEIGHT_UNIT),
        )),
    ),
)


def product_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(PRODUCT)
