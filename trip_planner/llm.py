"""Text-generation providers used to draft itineraries.

Three interchangeable providers expose the same ``generate(prompt) -> str``
capability. ``select_text_generator`` picks one by a fixed priority: OpenAI chat
completions, then Gemini, then Claude messages. The first configured key wins.
"""

from typing import Optional, Protocol

from google import genai
from google.genai import types as genai_types
from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage
from openai import OpenAI

from .config import Settings, get_settings


SYSTEM_PROMPT = "You are a professional travel planner. Always respond with valid JSON only."
JSON_ONLY_SUFFIX = "\n\nRespond with valid JSON only."


class TextGenerator(Protocol):
    name: str

    def generate(self, prompt: str) -> str:
        ...


class OpenAIChatGenerator:
    """Chat-completions provider."""

    name = "openai"

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client = OpenAI(api_key=settings.openai_api_key)

    def generate(self, prompt: str) -> str:
        response = self._client.chat.completions.create(
            model=self._settings.openai_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self._settings.temperature,
            max_tokens=self._settings.max_output_tokens,
        )
        return (response.choices[0].message.content or "").strip()


class GeminiGenerator:
    """Prompt-based provider backed by the Gemini API."""

    name = "gemini"

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client = genai.Client(api_key=settings.gemini_api_key)

    def generate(self, prompt: str) -> str:
        response = self._client.models.generate_content(
            model=self._settings.gemini_model,
            contents=prompt + JSON_ONLY_SUFFIX,
            config=genai_types.GenerateContentConfig(
                temperature=self._settings.temperature,
                max_output_tokens=self._settings.max_output_tokens,
            ),
        )
        return (response.text or "").strip()


class ClaudeGenerator:
    """Messages-style provider backed by Anthropic."""

    name = "claude"

    def __init__(self, settings: Settings):
        self._llm = ChatAnthropic(
            model=settings.anthropic_model,
            api_key=settings.claude_api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_output_tokens,
        )

    def generate(self, prompt: str) -> str:
        message = self._llm.invoke([HumanMessage(content=prompt + JSON_ONLY_SUFFIX)])
        content = message.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part) for part in content
            )
        return str(content).strip()


def select_text_generator(settings: Optional[Settings] = None) -> Optional[TextGenerator]:
    """Return the highest-priority configured provider, or ``None`` if none is set."""

    settings = settings or get_settings()
    if settings.openai_api_key:
        return OpenAIChatGenerator(settings)
    if settings.gemini_api_key:
        return GeminiGenerator(settings)
    if settings.claude_api_key:
        return ClaudeGenerator(settings)
    return None
