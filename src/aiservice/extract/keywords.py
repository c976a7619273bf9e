from __future__ import annotations

from typing import Iterable, Optional

from . import normalize
from .fields import KEYWORDS, extract_field


def join_messages(messages: Iterable[str]) -> str:
    """Combine chat history into the single user turn sent for keyword extraction."""
    return " ".join(messages)


def decode_keywords(completion: Optional[str]) -> list[str]:
    """Return the distinct lowercase keywords from the ``Keywords`` field.

    Order follows first appearance but carries no meaning. A missing field
    yields an empty list.
    """
    return normalize.to_unique_list(extract_field(completion, KEYWORDS))
