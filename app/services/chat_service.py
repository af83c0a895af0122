"""Legal assistant responders.

A responder is any callable that takes the conversation history (a list of
``{"role": "user" | "assistant", "content": str}`` dicts, oldest first) and
returns the assistant's reply text.
"""
import logging
from functools import lru_cache
from typing import Callable, Dict, List, Optional

import openai
from openai import OpenAI

from app.config import CHAT_BACKEND, OPENAI_API_KEY, OPENAI_MODEL

logger = logging.getLogger(__name__)

ChatHistory = List[Dict[str, str]]
ChatResponder = Callable[[ChatHistory], str]

GREETING = "Hello! I'm your AI legal assistant. How can I help you today?"

DEFAULT_REPLY = (
    "I understand you have a legal question. For the most accurate information, "
    "could you please be more specific about what legal topic or section you'd like to know about?"
)

LEGAL_KNOWLEDGE = {
    "ipc section 302": "IPC Section 302 deals with punishment for murder. It states that whoever commits murder shall be punished with death, or imprisonment for life, and shall also be liable to fine.",
    "ipc section 304": "IPC Section 304 deals with punishment for culpable homicide not amounting to murder. The punishment is imprisonment for life, or imprisonment for a term which may extend to 10 years, and fine.",
    "criminal trial": "The main stages of a criminal trial are: (1) Filing of charge sheet, (2) Framing of charges, (3) Evidence by prosecution, (4) Statement of accused, (5) Defense evidence, (6) Final arguments, (7) Judgment.",
    "bail application": "For a bail application, you typically need: (1) Bail application form, (2) Copy of FIR/complaint, (3) Copy of arrest memo, (4) Medical reports (if applicable), (5) Any previous court orders related to the case.",
    "divorce process": "The divorce process typically takes 6-18 months depending on whether it's contested or mutual consent. For mutual consent divorce, there's a 6-month mandatory cooling period after filing the petition before the final decree.",
    "legal aid": "Legal aid is free legal assistance provided to those who cannot afford legal representation. To avail it, you can approach the Legal Services Authority at district, state, or national level.",
    "writ petition": "A writ petition is a written document filed in court for a quick remedy against violation of fundamental rights or legal rights. Types include Habeas Corpus, Mandamus, Prohibition, Certiorari, and Quo Warranto.",
}

# (trigger words, reply) checked in order after the knowledge base
TOPIC_REPLIES = [
    (("ipc", "section"),
     "I can provide information about specific IPC sections. Please specify the section number, for example 'What is IPC Section 302?'"),
    (("lawyer", "attorney", "counsel"),
     "You can find and connect with qualified lawyers through our 'Find a Lawyer' service. Would you like me to guide you there?"),
    (("case", "hearing", "court date"),
     "To track your case and get updates on hearing dates, please use our Case Tracking feature. You'll need your case number to access this information."),
]

SYSTEM_PROMPT = """You are the LegalConnect assistant, helping members of the public with Indian legal questions.
Explain procedures and IPC sections in plain language, point users to the Find a Lawyer, Case Tracking
and Legal Aid features where relevant, and always note that this is general legal information,
not formal legal advice."""


class ChatServiceError(Exception):
    """The chat backend could not produce a reply."""


def last_user_message(history: ChatHistory) -> Optional[str]:
    for message in reversed(history):
        if message.get("role") == "user":
            return message.get("content", "")
    return None


class KeywordChatResponder:
    """Answers from a fixed table of legal phrases."""

    def __init__(self, knowledge: Optional[Dict[str, str]] = None):
        self.knowledge = LEGAL_KNOWLEDGE if knowledge is None else knowledge

    def process_message(self, message: str) -> str:
        query = message.lower()

        for key, answer in self.knowledge.items():
            if key in query:
                return answer

        for triggers, reply in TOPIC_REPLIES:
            if any(trigger in query for trigger in triggers):
                return reply

        return DEFAULT_REPLY

    def __call__(self, history: ChatHistory) -> str:
        message = last_user_message(history)
        if message is None:
            return GREETING
        return self.process_message(message)


class OpenAIChatResponder:
    """Answers with an OpenAI chat model."""

    def __init__(self, api_key: str, model: str = OPENAI_MODEL, client=None, max_history: int = 10):
        self.client = client or OpenAI(api_key=api_key)
        self.model = model
        self.max_history = max_history

    def __call__(self, history: ChatHistory) -> str:
        if last_user_message(history) is None:
            return GREETING

        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        messages.extend(
            {"role": m["role"], "content": m["content"]}
            for m in history[-self.max_history:]
        )

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=800,
                temperature=0.3  # Lower temperature for more accurate legal information
            )
        except openai.APIError as e:
            logger.error(f"OpenAI API error: {str(e)}")
            raise ChatServiceError(f"AI service error: {str(e)}") from e

        reply = response.choices[0].message.content or DEFAULT_REPLY
        logger.info(f"Assistant reply generated - history length: {len(history)}")
        return reply


@lru_cache()
def get_chat_responder() -> ChatResponder:
    if CHAT_BACKEND == "openai":
        if not OPENAI_API_KEY:
            logger.warning("CHAT_BACKEND=openai but OPENAI_API_KEY is empty, using keyword responder")
            return KeywordChatResponder()
        return OpenAIChatResponder(api_key=OPENAI_API_KEY)
    return KeywordChatResponder()
