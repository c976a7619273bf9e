import sys
from pathlib import Path

import pytest

# This repo uses a src/ layout; make it importable without an editable install.
_src_path = str(Path(__file__).resolve().parents[2] / "src")
if _src_path not in sys.path:
    sys.path.insert(0, _src_path)


class FakeLLM:
    """Completion gateway stub returning canned text and recording calls."""

    def __init__(self, reply: str = ""):
        self.reply = reply
        self.calls: list[dict] = []

    def complete(self, *, messages, options):
        self.calls.append({"messages": list(messages), "options": options})
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def fake_llm():
    """Fixture: factory for FakeLLM instances."""

    def _factory(reply=""):
        return FakeLLM(reply)

    return _factory
