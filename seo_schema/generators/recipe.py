"""
Recipe schema.

Ingredients and instructions are stored one per line; instructions are
emitted as HowToStep objects.
"""
from typing import Any, Dict, List

from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping
from seo_schema.models import properties as p
from seo_schema.utils.text import split_lines


def how_to_steps(value: Any) -> List[Dict[str, str]]:
    return [{"@type": "HowToStep", "text": line} for line in split_lines(value)]


RECIPE_PROPERTIES = {
    "name": p.text("Name", "Recipe name", required=True),
    "description": p.textarea("Description", "Recipe summary"),
    "image": p.image("Image", "Photo of the finished dish"),
    "recipeIngredient": p.textarea("Ingredients", "One ingredient per line", required=True, multiple=True),
    "recipeInstructions": p.obj("Instructions", {
        "text": p.textarea("Step", required=True),
    }, description="One step per line", multiple=True),
    "recipeYield": p.text("Yield", "e.g. 4 servings"),
    "prepTime": p.text("Preparation time", "ISO 8601 duration, e.g. PT15M"),
    "cookTime": p.text("Cooking time", "ISO 8601 duration, e.g. PT1H"),
    "totalTime": p.text("Total time", "ISO 8601 duration"),
    "recipeCategory": p.text("Category", "e.g. Dessert"),
    "recipeCuisine": p.text("Cuisine", "e.g. Italian"),
    "author": p.obj("Author", {
        "name": p.text("Name", required=True),
    }),
    "nutrition": p.obj("Nutrition", {
        "calories": p.text("Calories", "e.g. 240 calories", required=True),
    }),
    "url": p.url("URL", "Recipe URL"),
}

RECIPE = SchemaTypeDefinition(
    type_name="Recipe",
    properties=RECIPE_PROPERTIES,
    mappings=(
        FieldMapping("recipeIngredient", "_recipe_ingredients", transform=split_lines),
        FieldMapping("recipeInstructions", "_recipe_instructions", transform=how_to_steps),
        FieldMapping("recipeYield", "_recipe_yield"),
        FieldMapping("prepTime", "_recipe_prep_time"),
        FieldMapping("cookTime", "_recipe_cook_time"),
        FieldMapping("totalTime", "_recipe_total_time"),
        FieldMapping("recipeCategory", "_recipe_category",
                     fallback=lambda entity: entity.first_term("recipe_category")),
        FieldMapping("recipeCuisine", "_recipe_cuisine"),
        NestedMapping("author", "Person",
                      FieldMapping("name", "_recipe_author", fallback=lambda entity: entity.author_name)),
        NestedMapping("nutrition", "NutritionInformation", FieldMapping("calories", "_recipe_calories")),
    ),
)


def recipe_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(RECIPE)
