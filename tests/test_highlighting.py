import time

import pytest

from phrasepulse.core.constants import AnsiCodes
from phrasepulse.core.finder import find
from phrasepulse.core.highlighting import Palette, render, strip_markers
from phrasepulse.exceptions import InvalidRangeError
from phrasepulse.models.search import MatchRange, SearchPolicy


def ranges(*pairs: tuple[int, int]) -> list[MatchRange]:
    return [MatchRange(start=start, end=end) for start, end in pairs]


@pytest.fixture
def codes(theme):
    return theme.text.ansi(), theme.found.ansi(), theme.border.ansi()


def test_no_ranges_only_wraps_text(theme, codes):
    text_code, _, _ = codes

    result = render("hello world", [], theme)

    assert result.highlighted == f"{text_code}hello world{AnsiCodes.RESET}"
    assert "No coincidences found." in result.summary


def test_no_ranges_without_color(theme):
    result = render("hello world", [], theme, no_color=True)

    assert result.highlighted == "hello world"
    assert result.summary == "No coincidences found."


def test_disjoint_ranges_without_color(theme):
    result = render("hello world", ranges((0, 5), (6, 11)), theme, no_color=True)

    assert result.highlighted == "«hello» «world»"


def test_disjoint_ranges_insert_four_markers(theme, codes):
    text_code, found_code, border_code = codes
    palette = Palette(theme)

    result = render("hello big world", ranges((0, 5), (10, 15)), theme)

    assert result.highlighted == (
        f"{text_code}"
        f"{border_code}«{found_code}hello{border_code}»{text_code}"
        " big "
        f"{border_code}«{found_code}world{border_code}»{text_code}"
        f"{AnsiCodes.RESET}"
    )
    assert result.highlighted.count(palette.opening()) == 2
    assert result.highlighted.count(palette.closing(inside=False)) == 2
    assert strip_markers(result.highlighted) == "hello big world"


def test_overlapping_ranges_revert_to_found_color(theme, codes):
    text_code, found_code, border_code = codes

    result = render("abcdef", ranges((0, 4), (2, 6)), theme)

    assert result.highlighted == (
        f"{text_code}"
        f"{border_code}«{found_code}ab"
        f"{border_code}«{found_code}cd"
        f"{border_code}»{found_code}ef"
        f"{border_code}»{text_code}"
        f"{AnsiCodes.RESET}"
    )


def test_nested_range_closes_inside_outer(theme, codes):
    text_code, found_code, border_code = codes

    result = render("abcdef", ranges((0, 6), (2, 4)), theme)

    assert result.highlighted == (
        f"{text_code}"
        f"{border_code}«{found_code}ab"
        f"{border_code}«{found_code}cd"
        f"{border_code}»{text_code}ef"
        f"{border_code}»{found_code}"
        f"{AnsiCodes.RESET}"
    )


def test_overlapping_glyphs_without_color(theme):
    result = render("abcdef", ranges((0, 4), (2, 6)), theme, no_color=True)

    assert result.highlighted == "«ab«cd»ef»"


def test_adjacent_ranges(theme):
    result = render("abcd", ranges((0, 2), (2, 4)), theme, no_color=True)

    assert result.highlighted == "«ab»«cd»"


def test_unsorted_ranges_render_like_sorted(theme):
    forward = render("hello world", ranges((0, 5), (6, 11)), theme)
    backward = render("hello world", ranges((6, 11), (0, 5)), theme)

    assert forward.highlighted == backward.highlighted


def test_summary_lists_matches_in_discovery_order(theme):
    result = render("hello world", ranges((6, 11), (0, 5)), theme, no_color=True)

    assert result.summary == "\nCoincidences:\n[1] from 6 to 11\n[2] from 0 to 5"


def test_colored_summary_strips_to_plain_summary(theme):
    colored = render("hello world", ranges((0, 5)), theme)
    plain = render("hello world", ranges((0, 5)), theme, no_color=True)

    assert strip_markers(colored.summary) == plain.summary


@pytest.mark.parametrize(
    ("text", "pattern", "policy"),
    [
        ("aaaaaa", "aa", SearchPolicy(allow_overlapping=True)),
        ("aaaaaa", "aaa", SearchPolicy(allow_overlapping=True)),
        ("Banana bAnAna", "ana", SearchPolicy(allow_overlapping=True, case_insensitive=True)),
        ("Un dia vi una vaca (sin cola (vestida) de (uniforme))", r"\(.*?\)", SearchPolicy(use_regex=True)),
    ],
)
def test_stripping_markers_restores_text(theme, text, pattern, policy):
    found = find(text, pattern, policy).raise_for_error()

    result = render(text, found, theme)

    assert strip_markers(result.highlighted) == text


def test_out_of_bounds_range_is_rejected(theme):
    with pytest.raises(InvalidRangeError):
        render("abc", ranges((1, 10)), theme)


def test_as_rich_drops_escape_sequences(theme):
    result = render("hello world", ranges((0, 5)), theme)

    highlighted, summary = result.as_rich()

    assert highlighted.plain == "«hello» world"
    assert "[1] from 0 to 5" in summary.plain


def test_range_ending_at_text_end_is_accepted(theme):
    result = render("abc", ranges((1, 3)), theme, no_color=True)

    assert result.highlighted == "a«bc»"


def test_dense_overlap_renders_quickly(theme):
    length = 24000
    text = "a" * length
    window = length // 2
    dense = [MatchRange(start=i, end=i + window) for i in range(length - window + 1)]

    started = time.perf_counter()
    result = render(text, dense, theme)
    elapsed = time.perf_counter() - started

    assert strip_markers(result.highlighted) == text
    assert result.highlighted.count("«") == len(dense)
    assert result.highlighted.count("»") == len(dense)
    assert elapsed < 2.0
