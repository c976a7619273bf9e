from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from aiservice import config
from aiservice import logger as logger_mod
from aiservice import prompts
from aiservice.extract import (
    ChatbotReply,
    ClickRecord,
    FacetExtraction,
    decode_chat_reply,
    decode_facets,
    decode_keywords,
    join_messages,
    summarize_clicks,
    to_click_records,
)
from aiservice.llm import CompletionOptions, LLMClient, LLMMessage, build_llm

log = logger_mod.get_logger()

CHAT_OPTIONS = CompletionOptions(
    temperature=config.TEMPERATURE,
    top_p=config.TOP_P,
    max_tokens=config.CHAT_MAX_TOKENS,
)
EXTRACTION_OPTIONS = CompletionOptions(
    temperature=config.TEMPERATURE,
    top_p=config.TOP_P,
    max_tokens=config.EXTRACTION_MAX_TOKENS,
)


class AIService:
    """Public entry points: one completion call per request, then decoding.

    Both clients are injected and only read from, so a single instance can
    serve concurrent callers. Provider failures propagate unchanged.
    """

    def __init__(
        self,
        *,
        github_llm: LLMClient,
        huggingface_llm: Optional[LLMClient] = None,
    ) -> None:
        self._github = github_llm
        self._huggingface = huggingface_llm

    @classmethod
    def from_env(cls, *, enable_huggingface: bool = True) -> "AIService":
        """Build both provider clients once from environment credentials."""
        return cls(
            github_llm=build_llm(provider="github"),
            huggingface_llm=(
                build_llm(provider="huggingface") if enable_huggingface else None
            ),
        )

    def _complete(
        self,
        llm: LLMClient,
        instruction: str,
        user_text: str,
        options: CompletionOptions,
    ) -> str:
        return llm.complete(
            messages=[
                LLMMessage(role="system", content=instruction),
                LLMMessage(role="user", content=user_text),
            ],
            options=options,
        )

    def chat_reply(self, message: str) -> ChatbotReply:
        text = self._complete(
            self._github, prompts.CHAT_INSTRUCTION, message, CHAT_OPTIONS
        )
        log.debug(f"Chat completion: {text!r}")
        return decode_chat_reply(text)

    def chat_completion_huggingface(self, message: str) -> str:
        """Ask the Hugging Face model for a chat reply and return it undecoded.

        The instruction and the user message travel together in one user turn.
        """
        if self._huggingface is None:
            raise RuntimeError("Hugging Face client is not configured")
        return self._huggingface.complete(
            messages=[
                LLMMessage(
                    role="user",
                    content=f"{prompts.CHAT_INSTRUCTION}\n\nUser message: {message}",
                )
            ],
            options=CHAT_OPTIONS,
        )

    def extract_keywords(self, messages: Iterable[str]) -> list[str]:
        text = self._complete(
            self._github,
            prompts.KEYWORD_INSTRUCTION,
            join_messages(messages),
            EXTRACTION_OPTIONS,
        )
        keywords = decode_keywords(text)
        log.debug(f"Extracted {len(keywords)} keywords")
        return keywords

    def extract_facets_from_clicks(
        self, records: Iterable[Union[ClickRecord, Mapping[str, Any]]]
    ) -> FacetExtraction:
        records = to_click_records(records)
        if not records:
            return FacetExtraction()

        text = self._complete(
            self._github,
            prompts.CLICK_FACET_INSTRUCTION,
            summarize_clicks(records),
            EXTRACTION_OPTIONS,
        )
        return decode_facets(text)
