"""Tests for the compiled pattern cache."""

import logging
import re

import pytest

from mobile_detect.matcher import InvalidRuleError, Matcher


class TestMatcher:
    """Matching and caching behaviour."""

    @pytest.fixture
    def matcher(self):
        return Matcher()

    def test_match_is_case_insensitive(self, matcher):
        assert matcher.match("iphone", "Mozilla/5.0 (iPhone; CPU iPhone OS 6_0_1)")

    def test_match_is_unanchored(self, matcher):
        assert matcher.match("Android", "Mozilla/5.0 (Linux; Android 4.0.4)")

    def test_dot_matches_newline(self, matcher):
        assert matcher.match("Android.*Mobile", "Android 4.0\nMobile Safari")

    def test_no_match(self, matcher):
        assert not matcher.match("BlackBerry", "Mozilla/5.0 (Windows NT 6.1)")

    def test_search_returns_groups(self, matcher):
        found = matcher.search(r"Android ([\w._\+]+)", "Linux; Android 4.0.4; ARCHOS")
        assert found is not None
        assert found.group(1) == "4.0.4"

    def test_word_classes_are_ascii_only(self, matcher):
        found = matcher.search(r"Android ([\w._\+]+)", "Linux; Android 4.0é; X")
        assert found.group(1) == "4.0"

        assert not matcher.match(r"Android \w", "Android ٤.٠")
        assert matcher.match(r"\bTab\b", "éTab")

    def test_compiled_once_per_pattern(self, matcher):
        first = matcher.compile("Kindle")
        second = matcher.compile("Kindle")

        assert first is second
        assert len(matcher) == 1
        assert "Kindle" in matcher

    def test_precompile_skips_empty_patterns(self, matcher):
        count = matcher.precompile(["iPhone", "", "iPad", "iPhone"])

        assert count == 2
        assert "" not in matcher


class TestInvalidPatterns:
    """Malformed patterns are configuration errors, never swallowed."""

    def test_invalid_pattern_raises(self):
        matcher = Matcher()

        with pytest.raises(InvalidRuleError) as exc_info:
            matcher.match("(unclosed", "anything")

        assert exc_info.value.pattern == "(unclosed"
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_invalid_rule_error_is_value_error(self):
        assert issubclass(InvalidRuleError, ValueError)

    def test_invalid_pattern_is_logged(self, caplog):
        matcher = Matcher()

        with caplog.at_level(logging.ERROR, logger="mobile_detect.matcher"):
            with pytest.raises(InvalidRuleError):
                matcher.compile("[broken")

        assert "[broken" in caplog.text

    def test_invalid_pattern_not_cached(self):
        matcher = Matcher()

        with pytest.raises(InvalidRuleError):
            matcher.compile("(oops")

        assert len(matcher) == 0
