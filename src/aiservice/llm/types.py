from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str


@dataclass(frozen=True)
class CompletionOptions:
    """Sampling parameters for a single chat-completion call.

    `model` overrides the client's configured model when set.
    """

    temperature: float
    top_p: float
    max_tokens: int
    model: Optional[str] = None
