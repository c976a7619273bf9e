from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .types import CompletionOptions, LLMMessage


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    model: str
    api_key_env: str
    base_url: Optional[str] = None
    timeout_s: float = 60.0


class LLMClient(Protocol):
    """Completion gateway: role-tagged messages in, one free-text completion out."""

    def complete(
        self,
        *,
        messages: list[LLMMessage],
        options: CompletionOptions,
    ) -> str:
        raise NotImplementedError
