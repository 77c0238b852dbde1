"""Application configuration helpers."""

from dataclasses import dataclass
import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment.

    None of the text-generation keys is required: without them the planner
    serves template itineraries.
    """

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4.1-mini"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    claude_api_key: Optional[str] = None
    anthropic_model: str = "claude-3-5-sonnet-latest"
    max_output_tokens: int = 2000
    temperature: float = 0.7
    http_timeout: float = 10.0
    port: int = 3001
    simple_port: int = 3002
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4.1-mini"),
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        claude_api_key=os.getenv("CLAUDE_API_KEY") or os.getenv("ANTHROPIC_API_KEY") or None,
        anthropic_model=os.getenv("ANTHROPIC_MODEL", "claude-3-5-sonnet-latest"),
        max_output_tokens=_int_env("LLM_MAX_OUTPUT_TOKENS", 2000),
        temperature=_float_env("LLM_TEMPERATURE", 0.7),
        http_timeout=_float_env("HTTP_TIMEOUT_SECONDS", 10.0),
        port=_int_env("PORT", 3001),
        simple_port=_int_env("SIMPLE_PORT", 3002),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Apply a basic console logging setup for CLI and server entry points."""

    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
