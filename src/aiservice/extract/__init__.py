"""Decoders for structured data carried in free-text completions.

Recommended entry points:
- decode_chat_reply
- decode_keywords
- summarize_clicks / decode_facets
"""

from .chat import FALLBACK_REPLY, ChatbotReply, decode_chat_reply
from .clicks import (
    ClickRecord,
    FacetExtraction,
    decode_facets,
    summarize_clicks,
    to_click_records,
)
from .fields import TaggedField, extract_field, extract_fields, format_fields
from .keywords import decode_keywords, join_messages

__all__ = [
    "ChatbotReply",
    "ClickRecord",
    "FALLBACK_REPLY",
    "FacetExtraction",
    "TaggedField",
    "decode_chat_reply",
    "decode_facets",
    "decode_keywords",
    "extract_field",
    "extract_fields",
    "format_fields",
    "join_messages",
    "summarize_clicks",
    "to_click_records",
]
