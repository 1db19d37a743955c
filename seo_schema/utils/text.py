"""
Text helpers shared by the schema generators.
"""
import re
from datetime import datetime, timezone
from typing import Any, List, Optional

from bs4 import BeautifulSoup


def strip_tags(html: Optional[str]) -> str:
    """
    Remove all markup from an HTML fragment.

    Contents of <script> and <style> are dropped entirely and entities
    are decoded. Surrounding whitespace is trimmed, inner whitespace is
    kept as written.
    """
    if not html:
        return ""
    if "<" not in html and "&" not in html:
        return html.strip()

    soup = BeautifulSoup(html, "lxml")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text().strip()


def truncate(text: str, max_length: int) -> str:
    """Truncate text to max length with ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def split_lines(value: Any) -> List[str]:
    """
    Turn a newline-separated string (or an existing list) into a list of
    non-blank, trimmed entries.
    """
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = str(value).splitlines()
    return [str(item).strip() for item in items if str(item).strip()]


def normalize_date(date_str: Optional[str]) -> Optional[str]:
    """
    Normalize date to ISO-8601 format.

    Cases:
    - Full ISO with TZ: Keep unchanged
    - ISO without TZ: Append Z
    - Date only (YYYY-MM-DD): Append T00:00:00Z
    - Unix timestamp: Convert to UTC datetime
    - Invalid/None: Return None

    Never infers a timezone from the system clock.
    """
    if not date_str:
        return None

    date_str = str(date_str).strip()

    if not date_str:
        return None

    # Unix timestamp (seconds or milliseconds)
    if date_str.isdigit():
        try:
            ts = int(date_str)
            # Milliseconds → seconds
            if ts > 10000000000:
                ts = ts // 1000
            dt = datetime.fromtimestamp(ts, tz=timezone.utc)
            return dt.strftime("%Y-%m-%dT%H:%M:%SZ")
        except (OverflowError, OSError, ValueError):
            return None

    if 'T' in date_str:
        if date_str.endswith('Z'):
            return date_str

        # Timezone offset with or without colon
        if re.search(r'T\d{2}:\d{2}:\d{2}[+-]\d{2}:?\d{2}$', date_str):
            return date_str

        # ISO without timezone → append Z
        if re.match(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$', date_str):
            return date_str + 'Z'

        # Fractional seconds, e.g. T00:00:00.000
        if re.match(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d+$', date_str):
            return re.sub(r'\.\d+$', '', date_str) + 'Z'

        return date_str

    # Date only (YYYY-MM-DD)
    if re.match(r'^\d{4}-\d{2}-\d{2}$', date_str):
        return date_str + 'T00:00:00Z'

    try:
        dt = datetime.fromisoformat(date_str.replace('Z', '+00:00'))
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")
    except ValueError:
        pass

    if re.match(r'^\d{4}-\d{2}-\d{2}', date_str):
        return date_str

    return None
