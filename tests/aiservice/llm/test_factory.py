import pytest

from aiservice import config
from aiservice.llm import LLMError, build_llm
from aiservice.llm import openai_client


@pytest.fixture
def no_sdk(monkeypatch):
    monkeypatch.setattr(openai_client, "OpenAI", lambda **kwargs: kwargs)


def test_build_github(monkeypatch, no_sdk):
    monkeypatch.setenv("GITHUB_TOKEN", "tok")
    llm = build_llm(provider=" GitHub ")
    assert llm.config.provider == "github"
    assert llm.config.model == config.GITHUB_MODEL_NAME
    assert llm.config.base_url == config.GITHUB_MODELS_ENDPOINT
    assert llm.config.api_key_env == "GITHUB_TOKEN"


def test_build_huggingface_routes_to_inference_provider(monkeypatch, no_sdk):
    monkeypatch.setenv("HUGGINGFACE_TOKEN", "hf")
    llm = build_llm(provider="huggingface")
    assert llm.config.model == (
        f"{config.HUGGINGFACE_MODEL_NAME}:{config.HUGGINGFACE_PROVIDER}"
    )
    assert llm.config.base_url == config.HUGGINGFACE_ENDPOINT


def test_build_with_explicit_model(monkeypatch, no_sdk):
    monkeypatch.setenv("GITHUB_TOKEN", "tok")
    assert build_llm(provider="github", model="m").config.model == "m"


def test_unknown_provider():
    with pytest.raises(LLMError):
        build_llm(provider="nope")


def test_missing_credential(monkeypatch, no_sdk):
    monkeypatch.delenv("HUGGINGFACE_TOKEN", raising=False)
    with pytest.raises(LLMError):
        build_llm(provider="huggingface")
