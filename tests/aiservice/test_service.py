import pytest

from aiservice import config, prompts
from aiservice.extract import FALLBACK_REPLY, ChatbotReply, FacetExtraction
from aiservice.service import AIService


def test_chat_reply_decodes_completion(fake_llm):
    llm = fake_llm("ChatbotMessage=Sure\nProductRequested=true\nProductQuery=red shoes")
    svc = AIService(github_llm=llm)

    reply = svc.chat_reply("find me red shoes")

    assert reply == ChatbotReply("Sure", True, "red shoes")
    call = llm.calls[0]
    assert [m.role for m in call["messages"]] == ["system", "user"]
    assert call["messages"][0].content == prompts.CHAT_INSTRUCTION
    assert call["messages"][1].content == "find me red shoes"
    assert call["options"].temperature == config.TEMPERATURE
    assert call["options"].top_p == config.TOP_P
    assert call["options"].max_tokens == 1000


def test_chat_reply_falls_back_on_partial_completion(fake_llm):
    svc = AIService(github_llm=fake_llm("ChatbotMessage=Sure"))
    assert svc.chat_reply("hi") == FALLBACK_REPLY


def test_gateway_failure_propagates(fake_llm):
    boom = ConnectionError("down")
    svc = AIService(github_llm=fake_llm(boom))
    with pytest.raises(ConnectionError):
        svc.chat_reply("hi")


def test_extract_keywords_joins_messages(fake_llm):
    llm = fake_llm("Keywords=Shoes, RUNNING , shoes")
    svc = AIService(github_llm=llm)

    out = svc.extract_keywords(["I want shoes", "for running"])

    assert set(out) == {"shoes", "running"}
    call = llm.calls[0]
    assert call["messages"][1].content == "I want shoes for running"
    assert call["options"].max_tokens == 200


def test_extract_keywords_missing_field(fake_llm):
    svc = AIService(github_llm=fake_llm("No keywords found."))
    assert svc.extract_keywords(["hello"]) == []


def test_extract_facets_empty_input_skips_gateway(fake_llm):
    llm = fake_llm("Categories=should not be used")
    svc = AIService(github_llm=llm)

    out = svc.extract_facets_from_clicks([])

    assert out == FacetExtraction(categories=[], brands=[], price_ranges=[], stores=[])
    assert llm.calls == []


def test_extract_facets_from_log_entries(fake_llm):
    llm = fake_llm("Categories=Shoes,Bags\nBrands=Nike")
    svc = AIService(github_llm=llm)

    out = svc.extract_facets_from_clicks(
        [
            {"params": {"title": "", "source": ""}},
            {"params": {"title": "Shoe", "source": "StoreA", "price": 40}},
        ]
    )

    assert out == FacetExtraction(categories=["shoes", "bags"], brands=["nike"])
    call = llm.calls[0]
    assert call["messages"][0].content == prompts.CLICK_FACET_INSTRUCTION
    assert call["messages"][1].content == "Title: Shoe, Store: StoreA, Price: $40"
    assert call["options"].max_tokens == 200


def test_huggingface_returns_raw_text(fake_llm):
    hf = fake_llm("ChatbotMessage=raw")
    svc = AIService(github_llm=fake_llm(), huggingface_llm=hf)

    assert svc.chat_completion_huggingface("hello") == "ChatbotMessage=raw"
    messages = hf.calls[0]["messages"]
    assert len(messages) == 1
    assert messages[0].role == "user"
    assert prompts.CHAT_INSTRUCTION in messages[0].content
    assert "hello" in messages[0].content


def test_huggingface_not_configured(fake_llm):
    svc = AIService(github_llm=fake_llm())
    with pytest.raises(RuntimeError):
        svc.chat_completion_huggingface("hello")


def test_from_env_builds_both_clients(monkeypatch):
    from aiservice import service

    built = []
    monkeypatch.setattr(
        service, "build_llm", lambda *, provider: built.append(provider) or provider
    )

    svc = AIService.from_env()
    assert built == ["github", "huggingface"]
    assert svc._github == "github"

    built.clear()
    AIService.from_env(enable_huggingface=False)
    assert built == ["github"]
