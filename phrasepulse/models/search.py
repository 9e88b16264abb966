"""Search policy, match range and result models."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from phrasepulse.exceptions import InvalidPatternError, InvalidRangeError, PulseError, RegexTimeoutError

DEFAULT_MATCH_TIMEOUT_SECONDS = 3


class RegexFlag(StrEnum):
    """Regex dialect flags accepted on top of case-insensitivity."""

    MULTILINE = "multiline"
    DOTALL = "dotall"
    VERBOSE = "verbose"
    ASCII = "ascii"


class MatchRange(BaseModel):
    """Half-open [start, end) interval into the searched text."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int

    @model_validator(mode="after")
    def check_order(self) -> Self:
        """Ensure the range is non-empty."""
        if self.end <= self.start:
            raise ValueError(f"end ({self.end}) must be greater than start ({self.start})")
        return self

    @classmethod
    def checked(cls, start: int, end: int, length: int) -> "MatchRange":
        """Build a range, raising InvalidRangeError unless 0 <= start < end <= length."""
        if start < 0 or end <= start or end > length:
            raise InvalidRangeError(start, end, length)
        return cls(start=start, end=end)

    def within(self, length: int) -> bool:
        """Check whether the range fits in a text of the given length."""
        return self.end <= length

    def as_tuple(self) -> tuple[int, int]:
        return self.start, self.end


class SearchPolicy(BaseModel):
    """Options for a single search, fixed once constructed."""

    model_config = ConfigDict(frozen=True)

    case_insensitive: bool = False
    use_regex: bool = False
    allow_overlapping: bool = False
    match_timeout_seconds: int = Field(default=DEFAULT_MATCH_TIMEOUT_SECONDS, gt=0)
    regex_flags: frozenset[RegexFlag] = Field(default_factory=frozenset)

    def describe(self) -> str:
        """Render the enabled options, e.g. 'CaseInsensitive | UseRegex'."""
        options = []
        if self.case_insensitive:
            options.append("CaseInsensitive")
        if self.use_regex:
            options.append("UseRegex")
        if self.allow_overlapping:
            options.append("AllowOverlapping")
        options.extend(flag.name.capitalize() for flag in sorted(self.regex_flags))
        return " | ".join(options) if options else "Default"


class MatchErrorKind(StrEnum):
    """Reasons a search can fail."""

    INVALID_PATTERN = "invalid_pattern"
    REGEX_TIMEOUT = "regex_timeout"


class MatchError(BaseModel):
    """Failure reported by the match finder."""

    model_config = ConfigDict(frozen=True)

    kind: MatchErrorKind
    message: str
    pattern: str
    timeout_seconds: int | None = None

    def to_exception(self) -> PulseError:
        """Convert to the matching PhrasePulse exception."""
        if self.kind == MatchErrorKind.INVALID_PATTERN:
            return InvalidPatternError(self.pattern, self.message)
        return RegexTimeoutError(self.pattern, self.timeout_seconds or 0)


class FindResult(BaseModel):
    """Outcome of a search: the ranges found, or the error that stopped it."""

    ranges: list[MatchRange] = Field(default_factory=list)
    error: MatchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        """True when the search succeeded with at least one match."""
        return self.ok and len(self.ranges) > 0

    def raise_for_error(self) -> list[MatchRange]:
        """Return the ranges, or raise the exception describing the failure."""
        if self.error is not None:
            raise self.error.to_exception()
        return self.ranges
