"""pytest suite for the line, paragraph and essay wrappers."""

import pytest

from lines.utils import wrap_essay, wrap_line, wrap_paragraph

SAMPLE = (
    "The lines tool takes text and breaks it into multiple lines of a "
    "desired length. Additionally, one can also frame each line between an "
    "optional prefix and suffix."
)


def test_wrap_line_splits_at_word_boundaries():
    assert wrap_line("the quick brown fox", 10) == ["the quick", "brown fox"]


def test_wrap_line_empty_input():
    assert wrap_line("", 10) == []


def test_wrap_line_whitespace_only_input():
    assert wrap_line(" \t  ", 10) == []


def test_wrap_line_drops_word_longer_than_width():
    assert wrap_line("supercalifragilisticexpialidocious", 10) == []


def test_wrap_line_keeps_words_around_dropped_word():
    assert wrap_line("a supercalifragilisticexpialidocious b", 10) == ["a b"]


def test_wrap_line_collapses_whitespace_runs():
    assert wrap_line("  one \t two   three  ", 80) == ["one two three"]


def test_wrap_line_fills_exactly_to_width():
    assert wrap_line("abcd efghi jk", 10) == ["abcd efghi", "jk"]


def test_wrap_line_word_equal_to_width_is_kept():
    assert wrap_line("abcdefghij", 10) == ["abcdefghij"]


@pytest.mark.parametrize("width", [0, -5])
def test_wrap_line_non_positive_width_drops_everything(width):
    assert wrap_line("a bb ccc", width) == []


@pytest.mark.parametrize("width", [1, 5, 12, 30, 72])
def test_wrap_line_respects_width_and_word_order(width):
    lines = wrap_line(SAMPLE, width)
    assert all(len(line) <= width for line in lines)

    kept = [word for word in SAMPLE.split() if len(word) <= width]
    assert " ".join(lines).split() == kept
    # every line is made of whole words
    for line in lines:
        assert all(word in kept for word in line.split())


def test_wrap_line_rewrap_is_stable():
    lines = wrap_line(SAMPLE, 24)
    assert wrap_line(" ".join(lines), 24) == lines


def test_wrap_line_break_policy_splits_long_word():
    assert wrap_line("ab supercalifragilistic cd", 10, overflow="break") == [
        "ab",
        "supercalif",
        "ragilistic",
        "cd",
    ]


def test_wrap_line_break_policy_continues_after_tail():
    assert wrap_line("abcdefghijkl mn", 5, overflow="break") == ["abcde", "fghij", "kl mn"]


def test_wrap_line_break_policy_keeps_every_character():
    text = "x" * 23 + " short " + "y" * 7
    lines = wrap_line(text, 5, overflow="break")
    assert all(len(line) <= 5 for line in lines)
    assert "".join(lines).replace(" ", "") == text.replace(" ", "")


def test_wrap_line_break_policy_with_no_room_drops_words():
    assert wrap_line("abc", 0, overflow="break") == []


def test_wrap_line_overflow_policy_keeps_long_word_whole():
    assert wrap_line("ab supercalifragilistic cd", 10, overflow="overflow") == [
        "ab",
        "supercalifragilistic",
        "cd",
    ]


def test_wrap_line_rejects_unknown_policy():
    with pytest.raises(ValueError):
        wrap_line("text", 10, overflow="squeeze")


def test_wrap_paragraph_wraps_each_line_separately():
    assert wrap_paragraph("line one\nline two", 20) == ["line one", "line two"]


def test_wrap_paragraph_skips_empty_lines_and_outer_newlines():
    assert wrap_paragraph("\nfirst line\n\nsecond\n", 80) == ["first line", "second"]


def test_wrap_paragraph_wraps_long_lines():
    assert wrap_paragraph("the quick brown fox\njumps", 10) == [
        "the quick",
        "brown fox",
        "jumps",
    ]


def test_wrap_essay_separates_paragraphs():
    assert wrap_essay("Para one text.\n\nPara two text.", 80) == [
        "Para one text.",
        "",
        "Para two text.",
    ]


def test_wrap_essay_empty_input():
    assert wrap_essay("", 80) == []


def test_wrap_essay_whitespace_input():
    assert wrap_essay("\n\n  \n\n", 80) == []


def test_wrap_essay_collapses_long_blank_runs():
    result = wrap_essay("\n\nfirst\n\n\n\n\nsecond\n\n", 80)
    assert result == ["first", "", "second"]


def test_wrap_essay_two_paragraphs_have_one_separator():
    result = wrap_essay(SAMPLE + "\n\n" + SAMPLE, 20)
    assert result.count("") == 1
    assert result[0] != "" and result[-1] != ""
    separator = result.index("")
    assert result[:separator] == result[separator + 1:] == wrap_line(SAMPLE, 20)


def test_wrap_essay_skips_paragraph_that_wraps_to_nothing():
    result = wrap_essay("first\n\nsupercalifragilistic\n\nlast", 10)
    assert result == ["first", "", "last"]


def test_wrap_essay_passes_overflow_policy_down():
    result = wrap_essay("ab abcdefgh\n\ncd", 4, overflow="break")
    assert result == ["ab", "abcd", "efgh", "", "cd"]


def test_package_reexports_wrappers():
    import lines

    assert lines.wrap_essay is wrap_essay
    assert lines.wrap_line is wrap_line


def test_wrap_paragraph_skips_whitespace_only_lines():
    assert wrap_paragraph("a\n  \nb", 10) == ["a", "b"]
