"""The ``Name=value`` convention used to carry structured data in completions.

A field is the literal ``Name=`` followed by everything up to the next line
break (``\\n`` or ``\\r``) or the end of the text. Matching is case sensitive
and the first occurrence wins. The value is taken verbatim: embedded ``=`` and
commas are kept, and no escaping exists. Surrounding prose is ignored, so a
field may sit in the middle of a longer line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

CHATBOT_MESSAGE = "ChatbotMessage"
PRODUCT_REQUESTED = "ProductRequested"
PRODUCT_QUERY = "ProductQuery"
KEYWORDS = "Keywords"
CATEGORIES = "Categories"
BRANDS = "Brands"
PRICE_RANGES = "PriceRanges"
STORES = "Stores"

KNOWN_FIELDS = (
    CHATBOT_MESSAGE,
    PRODUCT_REQUESTED,
    PRODUCT_QUERY,
    KEYWORDS,
    CATEGORIES,
    BRANDS,
    PRICE_RANGES,
    STORES,
)

_PATTERNS = {
    name: re.compile(rf"{re.escape(name)}=([^\r\n]*)") for name in KNOWN_FIELDS
}


@dataclass(frozen=True)
class TaggedField:
    name: str
    raw_value: str


def _pattern(name: str) -> re.Pattern:
    pattern = _PATTERNS.get(name)
    if pattern is None:
        pattern = re.compile(rf"{re.escape(name)}=([^\r\n]*)")
    return pattern


def find_field(text: Optional[str], name: str) -> Optional[TaggedField]:
    if not text:
        return None
    match = _pattern(name).search(text)
    return TaggedField(name=name, raw_value=match.group(1)) if match else None


def extract_field(text: Optional[str], name: str) -> Optional[str]:
    """Return the raw value of the first ``name=`` field, or None when absent."""
    found = find_field(text, name)
    return found.raw_value if found else None


def extract_fields(text: Optional[str], names: Iterable[str]) -> dict[str, str]:
    """Map each name present in ``text`` to its raw value; absent names are omitted."""
    fields: dict[str, str] = {}
    for name in names:
        value = extract_field(text, name)
        if value is not None:
            fields[name] = value
    return fields


def format_fields(fields: Mapping[str, str]) -> str:
    return "\n".join(f"{name}={value}" for name, value in fields.items())
