"""Tests for app/services/chat_service.py: keyword and OpenAI responders."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import openai
import pytest

from app.services.chat_service import (
    DEFAULT_REPLY, GREETING, LEGAL_KNOWLEDGE, SYSTEM_PROMPT,
    ChatServiceError, KeywordChatResponder, OpenAIChatResponder, last_user_message
)


def _history(*contents):
    roles = ["user", "assistant"]
    return [{"role": roles[i % 2], "content": c} for i, c in enumerate(contents)]


# ── Keyword responder ─────────────────────────────────────────────────────


class TestKeywordResponder:
    def test_knowledge_match(self):
        reply = KeywordChatResponder().process_message("What is IPC Section 302?")
        assert reply == LEGAL_KNOWLEDGE["ipc section 302"]

    def test_topic_fallback(self):
        reply = KeywordChatResponder().process_message("Can you recommend an attorney?")
        assert "Find a Lawyer" in reply

    def test_default_reply(self):
        assert KeywordChatResponder().process_message("Hello there") == DEFAULT_REPLY

    def test_answers_latest_user_message(self):
        responder = KeywordChatResponder()
        history = _history("What is IPC Section 302?", "...", "How long is the divorce process?")
        assert responder(history) == LEGAL_KNOWLEDGE["divorce process"]

    def test_greets_without_user_message(self):
        assert KeywordChatResponder()([]) == GREETING

    def test_custom_knowledge(self):
        responder = KeywordChatResponder(knowledge={"rti": "File an RTI application."})
        assert responder.process_message("How do I file an RTI?") == "File an RTI application."


def test_last_user_message():
    assert last_user_message(_history("first", "reply", "second")) == "second"
    assert last_user_message([{"role": "assistant", "content": "hi"}]) is None


# ── OpenAI responder ──────────────────────────────────────────────────────


def _openai_client(content="An FIR is a First Information Report."):
    client = MagicMock()
    choice = MagicMock()
    choice.message.content = content
    client.chat.completions.create.return_value = MagicMock(choices=[choice])
    return client


class TestOpenAIResponder:
    def test_sends_system_prompt_and_history(self):
        client = _openai_client()
        responder = OpenAIChatResponder(api_key="sk-test", model="gpt-test", client=client)

        reply = responder(_history("What is an FIR?"))

        assert reply == "An FIR is a First Information Report."
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert kwargs["messages"][1] == {"role": "user", "content": "What is an FIR?"}

    def test_history_is_trimmed(self):
        client = _openai_client()
        responder = OpenAIChatResponder(api_key="sk-test", client=client, max_history=4)
        responder(_history(*[f"message {i}" for i in range(9)]))

        messages = client.chat.completions.create.call_args.kwargs["messages"]
        assert len(messages) == 5
        assert messages[-1]["content"] == "message 8"

    def test_empty_reply_falls_back(self):
        responder = OpenAIChatResponder(api_key="sk-test", client=_openai_client(content=None))
        assert responder(_history("hi")) == DEFAULT_REPLY

    def test_greets_without_calling_api(self):
        client = _openai_client()
        responder = OpenAIChatResponder(api_key="sk-test", client=client)
        assert responder([]) == GREETING
        client.chat.completions.create.assert_not_called()

    def test_api_error_wrapped(self):
        client = MagicMock()
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client.chat.completions.create.side_effect = openai.APIError("rate limited", request, body=None)
        responder = OpenAIChatResponder(api_key="sk-test", client=client)

        with pytest.raises(ChatServiceError):
            responder(_history("hi"))
