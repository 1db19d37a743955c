"""
JSON and <script> serialization for generated documents.
"""
import json
from typing import Any, Dict, List, Union

JsonLd = Union[Dict[str, Any], List[Dict[str, Any]]]


def to_json(document: JsonLd, pretty: bool = False) -> str:
    """
    Encode a document (or a list of documents) as JSON.

    Compact output has no insignificant whitespace; pretty output uses a
    two-space indent. Key order is preserved and non-ASCII text is kept
    as-is.
    """
    if pretty:
        return json.dumps(document, ensure_ascii=False, indent=2)
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def to_script_tag(document: JsonLd, pretty: bool = False) -> str:
    """Generate HTML script tag with JSON-LD."""
    return f'<script type="application/ld+json">{to_json(document, pretty=pretty)}</script>'


def parse_json(text: str) -> JsonLd:
    """Decode JSON produced by to_json."""
    return json.loads(text)
