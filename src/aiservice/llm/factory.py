from __future__ import annotations

from aiservice import config

from .base import LLMClient, LLMConfig
from .errors import LLMError
from .openai_client import OpenAICompatibleLLM


def build_llm(*, provider: str, model: str | None = None) -> LLMClient:
    """Factory for provider clients.

    Providers:
    - github: GitHub Models inference endpoint (GITHUB_TOKEN)
    - huggingface: Hugging Face router (HUGGINGFACE_TOKEN); the inference
      provider is selected with a ``model:provider`` suffix
    """

    p = provider.lower().strip()
    if p == "github":
        return OpenAICompatibleLLM(
            LLMConfig(
                provider="github",
                model=model or config.GITHUB_MODEL_NAME,
                api_key_env=config.GITHUB_TOKEN_ENV,
                base_url=config.GITHUB_MODELS_ENDPOINT,
                timeout_s=config.REQUEST_TIMEOUT_S,
            )
        )

    if p == "huggingface":
        routed_model = model or (
            f"{config.HUGGINGFACE_MODEL_NAME}:{config.HUGGINGFACE_PROVIDER}"
        )
        return OpenAICompatibleLLM(
            LLMConfig(
                provider="huggingface",
                model=routed_model,
                api_key_env=config.HUGGINGFACE_TOKEN_ENV,
                base_url=config.HUGGINGFACE_ENDPOINT,
                timeout_s=config.REQUEST_TIMEOUT_S,
            )
        )

    raise LLMError(f"Unknown LLM provider: {provider}")
