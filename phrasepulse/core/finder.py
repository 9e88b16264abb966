"""Literal and regular-expression match discovery."""

import logging

import regex

from phrasepulse.models.search import (
    FindResult,
    MatchError,
    MatchErrorKind,
    MatchRange,
    RegexFlag,
    SearchPolicy,
)

logger = logging.getLogger(__name__)

REGEX_FLAG_MAP: dict[RegexFlag, int] = {
    RegexFlag.MULTILINE: regex.MULTILINE,
    RegexFlag.DOTALL: regex.DOTALL,
    RegexFlag.VERBOSE: regex.VERBOSE,
    RegexFlag.ASCII: regex.ASCII,
}


class MatchFinder:
    """Find pattern occurrences in text under a fixed search policy."""

    def __init__(self, policy: SearchPolicy | None = None) -> None:
        """Initialize finder with the policy used for every search."""
        self.policy = policy or SearchPolicy()

    def find(self, text: str, pattern: str) -> FindResult:
        """Find every occurrence of ``pattern`` in ``text``.

        Args:
            text: Already decoded text to search
            pattern: Literal string or regex, depending on the policy

        Returns:
            FindResult holding the ranges in discovery order, or the error
            that stopped the search
        """
        if not pattern:
            return self._error(MatchErrorKind.INVALID_PATTERN, "Search pattern cannot be empty", pattern)

        if self.policy.use_regex:
            return self._scan(text, pattern, self.regex_flags())

        # A literal longer than the text can never match
        if len(pattern) > len(text):
            return FindResult()

        if self.policy.allow_overlapping:
            return FindResult(ranges=self._find_overlapping(text, pattern))

        flags = regex.IGNORECASE if self.policy.case_insensitive else 0
        return self._scan(text, regex.escape(pattern), flags, source=pattern)

    def regex_flags(self) -> int:
        """Combine the policy's dialect flags into ``regex`` module flags."""
        flags = 0
        for flag in self.policy.regex_flags:
            flags |= REGEX_FLAG_MAP[flag]
        if self.policy.case_insensitive:
            flags |= regex.IGNORECASE
        return flags

    def _scan(self, text: str, expression: str, flags: int, source: str | None = None) -> FindResult:
        """Run a left-to-right regex scan with the policy's timeout."""
        source = source if source is not None else expression
        timeout = self.policy.match_timeout_seconds

        try:
            compiled = regex.compile(expression, flags)
        except regex.error as e:
            return self._error(MatchErrorKind.INVALID_PATTERN, str(e), source)

        logger.debug(f"Scanning {len(text)} chars for {expression!r} (flags={flags}, timeout={timeout}s)")

        ranges = []
        try:
            for match in compiled.finditer(text, timeout=timeout):
                # Empty matches cannot be delimited
                if match.end() > match.start():
                    ranges.append(MatchRange(start=match.start(), end=match.end()))
        except TimeoutError:
            return self._error(
                MatchErrorKind.REGEX_TIMEOUT,
                f"Regex matching timed out after {timeout} seconds",
                source,
                timeout_seconds=timeout,
            )

        return FindResult(ranges=ranges)

    def _find_overlapping(self, text: str, pattern: str) -> list[MatchRange]:
        """Slide a pattern-sized window over every position of the text."""
        width = len(pattern)
        ranges = []

        if self.policy.case_insensitive:
            needle = pattern.casefold()
            for i in range(len(text) - width + 1):
                if text[i : i + width].casefold() == needle:
                    ranges.append(MatchRange(start=i, end=i + width))
        else:
            for i in range(len(text) - width + 1):
                if text.startswith(pattern, i):
                    ranges.append(MatchRange(start=i, end=i + width))

        return ranges

    @staticmethod
    def _error(
        kind: MatchErrorKind,
        message: str,
        pattern: str,
        timeout_seconds: int | None = None,
    ) -> FindResult:
        return FindResult(
            error=MatchError(kind=kind, message=message, pattern=pattern, timeout_seconds=timeout_seconds)
        )


def find(text: str, pattern: str, policy: SearchPolicy | None = None) -> FindResult:
    """Find every occurrence of ``pattern`` in ``text`` under ``policy``."""
    return MatchFinder(policy).find(text, pattern)
