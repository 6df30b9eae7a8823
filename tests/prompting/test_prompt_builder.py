"""
tests/prompting/test_prompt_builder.py

Unit tests for the PromptBuilder layer.

Verifies:
✔ SYSTEM_PROMPT demands the {"subject", "body"} JSON contract
✔ Product name is bound into the system instruction
✔ Placeholders stay literal for post-generation substitution
✔ build_prompt returns a frozen GenerationPrompt
✔ User prompt is stripped and capped at _MAX_PROMPT_CHARS
"""

import dataclasses

import pytest

from composer.prompting.prompt_builder import (
    SYSTEM_PROMPT,
    _MAX_PROMPT_CHARS,
    build_prompt,
    build_system_instruction,
)
from inference import GenerationPrompt


class TestSystemPrompt:
    """Tests for the SYSTEM_PROMPT behavioral contract."""

    def test_system_prompt_is_nonempty_string(self):
        assert isinstance(SYSTEM_PROMPT, str)
        assert len(SYSTEM_PROMPT) > 0

    def test_system_prompt_defines_json_contract(self):
        assert '"subject"' in SYSTEM_PROMPT
        assert '"body"' in SYSTEM_PROMPT

    def test_app_name_bound(self):
        instruction = build_system_instruction("StreakBot")
        assert "StreakBot" in instruction
        assert "$app_name" not in instruction

    def test_placeholders_left_literal(self):
        instruction = build_system_instruction("StreakBot")
        assert "{ctaLink}" in instruction
        assert "{user}" in instruction
        assert "{appName}" in instruction


class TestBuildPrompt:
    """Tests for the build_prompt() assembler."""

    def test_returns_generation_prompt(self):
        prompt = build_prompt("announce new feature", app_name="CommitHabit", trace_id="t-1")
        assert isinstance(prompt, GenerationPrompt)
        assert prompt.user_prompt == "announce new feature"
        assert prompt.trace_id == "t-1"
        assert "CommitHabit" in prompt.system_instruction

    def test_prompt_is_immutable(self):
        prompt = build_prompt("announce new feature", app_name="CommitHabit")
        with pytest.raises(dataclasses.FrozenInstanceError):
            prompt.user_prompt = "something else"

    def test_user_prompt_stripped(self):
        prompt = build_prompt("   hello world  \n", app_name="CommitHabit")
        assert prompt.user_prompt == "hello world"

    def test_user_prompt_truncated(self):
        prompt = build_prompt("x" * (_MAX_PROMPT_CHARS + 500), app_name="CommitHabit")
        assert len(prompt.user_prompt) == _MAX_PROMPT_CHARS

    def test_same_instruction_for_every_call(self):
        a = build_prompt("first request", app_name="CommitHabit")
        b = build_prompt("second request", app_name="CommitHabit")
        assert a.system_instruction == b.system_instruction
