"""LLM provider abstractions (GitHub Models / Hugging Face).

Design goals:
- Keep provider-specific SDK calls isolated behind ``LLMClient.complete``.
- Return the raw completion text; decoding lives in ``aiservice.extract``.
"""

from .base import LLMClient, LLMConfig
from .errors import LLMError, LLMValidationError
from .factory import build_llm
from .types import CompletionOptions, LLMMessage

__all__ = [
    "CompletionOptions",
    "LLMClient",
    "LLMConfig",
    "LLMError",
    "LLMMessage",
    "LLMValidationError",
    "build_llm",
]
