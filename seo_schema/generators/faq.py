"""
FAQPage schema.

Questions come from the `_faq_items` field: a list of
{"question": ..., "answer": ...} objects, or that list as a JSON string.
"""
import json
from collections.abc import Mapping
from typing import Any, Dict, List

from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, is_empty
from seo_schema.models import properties as p


def faq_questions(value: Any) -> List[Dict[str, Any]]:
    """Build Question objects, skipping items without both halves."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return []
    if not isinstance(value, list):
        return []

    questions = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        question, answer = item.get("question"), item.get("answer")
        if is_empty(question) or is_empty(answer):
            continue
        questions.append({
            "@type": "Question",
            "name": str(question).strip(),
            "acceptedAnswer": {"@type": "Answer", "text": str(answer).strip()},
        })
    return questions


FAQ_PROPERTIES = {
    "name": p.text("Name", "Page title", required=True),
    "description": p.textarea("Description", "Page summary"),
    "mainEntity": p.obj("Questions", {
        "name": p.text("Question", required=True),
        "acceptedAnswer": p.obj("Answer", {
            "text": p.textarea("Text", required=True),
        }, required=True),
    }, description="Question and answer pairs", required=True, multiple=True),
    "url": p.url("URL", "Page URL"),
}

FAQ_PAGE = SchemaTypeDefinition(
    type_name="FAQPage",
    properties=FAQ_PROPERTIES,
    mappings=(
        FieldMapping("mainEntity", "_faq_items", transform=faq_questions),
    ),
)


def faq_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(FAQ_PAGE)
