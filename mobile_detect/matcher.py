# mobile_detect/matcher.py

import logging
import re
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

# ASCII-only \w and \b, case-insensitive, dot matches newline
PATTERN_FLAGS = "(?ais)"


class InvalidRuleError(ValueError):
    """A detection rule or property template is not a valid regular expression"""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid rule pattern {pattern!r}: {reason}")


class Matcher:
    """
    Compiled pattern cache owned by one detector.

    Keys are the flag-wrapped pattern strings. Entries are never evicted.
    Not safe to share between threads.
    """

    def __init__(self):
        self._compiled: Dict[str, re.Pattern] = {}

    def __len__(self) -> int:
        return len(self._compiled)

    def __contains__(self, pattern: str) -> bool:
        return PATTERN_FLAGS + pattern in self._compiled

    def compile(self, pattern: str) -> re.Pattern:
        wrapped = PATTERN_FLAGS + pattern
        compiled = self._compiled.get(wrapped)
        if compiled is not None:
            return compiled

        try:
            compiled = re.compile(wrapped)
        except re.error as e:
            logger.error(f"Failed to compile rule pattern {pattern!r}: {e}")
            raise InvalidRuleError(pattern, str(e)) from e

        logger.debug(f"Compiled rule pattern {pattern!r}")
        self._compiled[wrapped] = compiled
        return compiled

    def match(self, pattern: str, subject: str) -> bool:
        """Unanchored search of pattern anywhere in subject"""
        return self.compile(pattern).search(subject) is not None

    def search(self, pattern: str, subject: str) -> Optional[re.Match]:
        return self.compile(pattern).search(subject)

    def precompile(self, patterns: Iterable[str]) -> int:
        """Compile every non-empty pattern up front; returns the cache size"""
        for pattern in patterns:
            if pattern:
                self.compile(pattern)
        return len(self._compiled)
