import pytest

from phrasepulse.core import finder as finder_module
from phrasepulse.core.finder import MatchFinder, find
from phrasepulse.exceptions import InvalidPatternError, RegexTimeoutError
from phrasepulse.models.search import MatchErrorKind, RegexFlag, SearchPolicy


def spans(result) -> list[tuple[int, int]]:
    assert result.ok, result.error
    return [r.as_tuple() for r in result.ranges]


def test_literal_non_overlapping():
    assert spans(find("abababa", "aba")) == [(0, 3), (4, 7)]


def test_literal_overlapping():
    policy = SearchPolicy(allow_overlapping=True)
    assert spans(find("aaaa", "aa", policy)) == [(0, 2), (1, 3), (2, 4)]


def test_literal_overlapping_three_chars():
    policy = SearchPolicy(allow_overlapping=True)
    assert spans(find("aaa", "aa", policy)) == [(0, 2), (1, 3)]


def test_case_insensitive_literal():
    policy = SearchPolicy(case_insensitive=True)
    assert spans(find("a cat sat", "CAT", policy)) == [(2, 5)]


def test_case_insensitive_overlapping():
    policy = SearchPolicy(case_insensitive=True, allow_overlapping=True)
    assert spans(find("AaAa", "aa", policy)) == [(0, 2), (1, 3), (2, 4)]


def test_case_sensitive_literal_misses_other_case():
    assert spans(find("a cat sat", "CAT")) == []


def test_literal_escapes_regex_metacharacters():
    assert spans(find("axb a.b", "a.b")) == [(4, 7)]


def test_greedy_regex_spans_outer_parentheses():
    text = "Un dia vi una vaca (sin cola (vestida) de (uniforme))"
    policy = SearchPolicy(use_regex=True, case_insensitive=True)

    result = find(text, r"\(.*\).+\(.*\)", policy)

    assert spans(result) == [(text.index("("), len(text))]


def test_regex_ignores_overlap_option():
    policy = SearchPolicy(use_regex=True, allow_overlapping=True)
    assert spans(find("aaaa", "aa", policy)) == [(0, 2), (2, 4)]


def test_regex_skips_empty_matches():
    policy = SearchPolicy(use_regex=True)
    assert spans(find("abc", "x*", policy)) == []


def test_regex_dialect_flags():
    plain = SearchPolicy(use_regex=True)
    multiline = SearchPolicy(use_regex=True, regex_flags=frozenset({RegexFlag.MULTILINE}))

    assert spans(find("a\nb", "^b", plain)) == []
    assert spans(find("a\nb", "^b", multiline)) == [(2, 3)]


@pytest.mark.parametrize("policy", [SearchPolicy(), SearchPolicy(allow_overlapping=True)])
def test_pattern_longer_than_text_is_empty(policy):
    result = find("ab", "abc", policy)
    assert result.ok
    assert result.ranges == []
    assert not result.found


@pytest.mark.parametrize("use_regex", [False, True])
@pytest.mark.parametrize("allow_overlapping", [False, True])
def test_empty_pattern_is_invalid(use_regex, allow_overlapping):
    policy = SearchPolicy(use_regex=use_regex, allow_overlapping=allow_overlapping)

    result = find("some text", "", policy)

    assert result.error is not None
    assert result.error.kind == MatchErrorKind.INVALID_PATTERN
    with pytest.raises(InvalidPatternError):
        result.raise_for_error()


def test_invalid_regex():
    result = find("text", "(unclosed", SearchPolicy(use_regex=True))

    assert result.error is not None
    assert result.error.kind == MatchErrorKind.INVALID_PATTERN
    assert result.error.pattern == "(unclosed"


def test_regex_timeout():
    policy = SearchPolicy(use_regex=True, match_timeout_seconds=1)

    result = find("x" * 5000, r"(x+x+)+y", policy)

    assert result.error is not None
    assert result.error.kind == MatchErrorKind.REGEX_TIMEOUT
    with pytest.raises(RegexTimeoutError) as excinfo:
        result.raise_for_error()
    assert excinfo.value.timeout_seconds == 1


def test_empty_literal_message_does_not_mention_regex():
    with pytest.raises(InvalidPatternError) as excinfo:
        find("some text", "").raise_for_error()

    assert str(excinfo.value) == "Invalid pattern: Search pattern cannot be empty"


@pytest.mark.parametrize(
    ("text", "pattern"),
    [
        ("aaaaaaa", "aa"),
        ("the cat and the hat", "the"),
        ("abcabcabc", "bca"),
        ("mississippi", "issi"),
    ],
)
def test_non_overlapping_results_are_disjoint_and_ordered(text, pattern):
    ranges = MatchFinder(SearchPolicy()).find(text, pattern).ranges

    for previous, current in zip(ranges, ranges[1:]):
        assert previous.end <= current.start


def test_repeated_search_is_deterministic():
    finder = MatchFinder(SearchPolicy(allow_overlapping=True, case_insensitive=True))
    assert finder.find("Banana bAnAna", "ana") == finder.find("Banana bAnAna", "ana")


def test_regex_flags_include_ignore_case():
    finder = MatchFinder(SearchPolicy(use_regex=True, case_insensitive=True))
    assert finder.regex_flags() & finder_module.regex.IGNORECASE
