from __future__ import annotations

import os
from typing import Any

from openai import OpenAI

from aiservice import logger as logger_mod

from .base import LLMClient, LLMConfig
from .errors import LLMError
from .types import CompletionOptions, LLMMessage

log = logger_mod.get_logger()


class OpenAICompatibleLLM(LLMClient):
    """Chat-completions client for any OpenAI-compatible endpoint.

    GitHub Models and the Hugging Face router both speak this protocol, so a
    single wrapper serves both; only `base_url`, credential and model differ.
    Provider errors are logged and re-raised unchanged.
    """

    def __init__(self, config: LLMConfig):
        self._cfg = config
        api_key = os.getenv(config.api_key_env)
        if not api_key:
            raise LLMError(
                f"Missing env var {config.api_key_env} for {config.provider} API key"
            )

        self._client = OpenAI(
            api_key=api_key, base_url=config.base_url, timeout=config.timeout_s
        )

    @property
    def config(self) -> LLMConfig:
        return self._cfg

    def _extract_output_text(self, resp: Any) -> str:
        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise LLMError(f"{self._cfg.provider} returned no completion choices")
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None) or ""

    def complete(
        self,
        *,
        messages: list[LLMMessage],
        options: CompletionOptions,
    ) -> str:
        model = options.model or self._cfg.model
        log.debug(
            f"Requesting completion from {self._cfg.provider} model={model} "
            f"max_tokens={options.max_tokens} messages={len(messages)}"
        )
        try:
            resp = self._client.chat.completions.create(
                model=model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                temperature=options.temperature,
                top_p=options.top_p,
                max_tokens=options.max_tokens,
            )
        except Exception as e:
            log.error(f"❌ {self._cfg.provider} completion failed (model={model}): {e}")
            raise

        return self._extract_output_text(resp)
