"""
Name: Tweet Prompt Builder Unit Tests

Responsibilities:
  - Verify section order and joining of tweet prompts
  - Verify locks are listed one per line
  - Verify target operation scoping instructions
"""

import pytest

from studio.application.tweet_prompts import (
    OP_INSTRUCTIONS,
    TWEET_RULES,
    build_edit_with_locks,
    build_initial_tweet,
    build_target_operation,
    build_thread_prompt,
    with_locks,
    with_topic,
)
from studio.domain.tweets import TargetOperation

pytestmark = pytest.mark.unit


class TestSections:
    def test_with_topic_skips_blank(self):
        assert with_topic(None) is None
        assert with_topic("   ") is None
        assert with_topic("AI") == "Topic: AI"

    def test_with_locks_empty(self):
        assert with_locks([]) is None
        assert with_locks(None) is None

    def test_with_locks_lists_each_lock(self):
        section = with_locks(["alpha", "beta gamma"])
        lines = section.split("\n")
        assert lines[0].startswith("Preserve the following substrings exactly as written.")
        assert lines[1:] == ["- alpha", "- beta gamma"]


class TestBuilders:
    def test_initial_tweet(self):
        assert build_initial_tweet("coffee") == TWEET_RULES + "\n\nTopic: coffee"

    def test_initial_tweet_without_idea_is_rules_only(self):
        assert build_initial_tweet("  ") == TWEET_RULES

    def test_edit_with_locks_contains_each_lock_line(self):
        prompt = build_edit_with_locks("Draft text here", ["Draft", "here"], idea="x")
        lines = prompt.split("\n")
        assert "- Draft" in lines
        assert "- here" in lines
        assert "Start from this current draft:\nDraft text here" in prompt
        assert prompt.endswith("Return a single tweet under 280 characters.")

    def test_edit_with_locks_section_order(self):
        prompt = build_edit_with_locks("D", ["L"], idea="I")
        sections = prompt.split("\n\n")
        assert sections[0] == TWEET_RULES
        assert sections[1] == "Topic: I"
        assert sections[2] == "Start from this current draft:\nD"
        assert sections[3].endswith("- L")
        assert sections[4] == "Return a single tweet under 280 characters."

    def test_edit_without_locks_has_no_lock_section(self):
        prompt = build_edit_with_locks("D", [])
        assert "Preserve the following" not in prompt

    @pytest.mark.parametrize("operation", list(TargetOperation))
    def test_target_operation(self, operation):
        prompt = build_target_operation("Full draft", "draft", operation)
        assert OP_INSTRUCTIONS[operation] in prompt
        assert "TARGET:\ndraft" in prompt
        assert "Preserve the following" not in prompt
        assert prompt.endswith("Keep under 280 characters.")

    def test_target_operation_accepts_plain_string(self):
        prompt = build_target_operation("Full draft", "draft", "condense", locked=["Full"])
        assert OP_INSTRUCTIONS[TargetOperation.CONDENSE] in prompt
        assert "- Full" in prompt.split("\n")

    def test_thread_prompt(self):
        prompt = build_thread_prompt("space travel", 4, style="witty")
        lines = prompt.split("\n")
        assert "- Create exactly 4 tweets that flow logically as a thread." in lines
        assert lines[-2:] == ["Style: witty", "Topic: space travel"]

    def test_thread_prompt_without_style(self):
        prompt = build_thread_prompt("space travel", 5, style=" ")
        assert "Style:" not in prompt
