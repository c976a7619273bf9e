from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from aiservice import logger as logger_mod

from . import normalize
from .fields import (
    CHATBOT_MESSAGE,
    PRODUCT_QUERY,
    PRODUCT_REQUESTED,
    extract_fields,
    format_fields,
)

log = logger_mod.get_logger()

REQUIRED_FIELDS = (CHATBOT_MESSAGE, PRODUCT_REQUESTED, PRODUCT_QUERY)


@dataclass(frozen=True)
class ChatbotReply:
    message: str
    product_requested: bool
    product_query: str

    def to_text(self) -> str:
        return format_fields(
            {
                CHATBOT_MESSAGE: self.message,
                PRODUCT_REQUESTED: "true" if self.product_requested else "false",
                PRODUCT_QUERY: self.product_query,
            }
        )


FALLBACK_REPLY = ChatbotReply(
    message="No message", product_requested=False, product_query=""
)


def decode_chat_reply(completion: Optional[str]) -> ChatbotReply:
    """Decode a chatbot completion into a ChatbotReply.

    All three fields must be present. If any is missing the whole reply is
    replaced by FALLBACK_REPLY; a partially decoded reply is never returned.
    """
    fields = extract_fields(completion, REQUIRED_FIELDS)
    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        log.warning(f"Chat completion missing fields {missing}; using fallback reply")
        return FALLBACK_REPLY

    return ChatbotReply(
        message=normalize.identity(fields[CHATBOT_MESSAGE]),
        product_requested=normalize.to_bool(fields[PRODUCT_REQUESTED]),
        product_query=normalize.identity(fields[PRODUCT_QUERY]),
    )
