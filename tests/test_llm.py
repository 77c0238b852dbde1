"""Provider selection order."""

from unittest.mock import patch

from trip_planner.config import Settings, get_settings
from trip_planner.llm import select_text_generator


def test_no_keys_means_no_provider(settings):
    assert select_text_generator(settings) is None


@patch("trip_planner.llm.ClaudeGenerator")
@patch("trip_planner.llm.GeminiGenerator")
@patch("trip_planner.llm.OpenAIChatGenerator")
def test_openai_wins_over_other_keys(openai_cls, gemini_cls, claude_cls):
    settings = Settings(openai_api_key="sk-test", gemini_api_key="g-test", claude_api_key="c-test")
    generator = select_text_generator(settings)

    assert generator is openai_cls.return_value
    gemini_cls.assert_not_called()
    claude_cls.assert_not_called()


@patch("trip_planner.llm.ClaudeGenerator")
@patch("trip_planner.llm.GeminiGenerator")
def test_gemini_before_claude(gemini_cls, claude_cls):
    generator = select_text_generator(Settings(gemini_api_key="g-test", claude_api_key="c-test"))

    assert generator is gemini_cls.return_value
    claude_cls.assert_not_called()


@patch("trip_planner.llm.ClaudeGenerator")
def test_anthropic_key_is_accepted_for_claude(claude_cls, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "c-test")
    get_settings.cache_clear()

    assert select_text_generator() is claude_cls.return_value
    assert claude_cls.call_args.args[0].claude_api_key == "c-test"
