import pytest

from codeembed.errors import LineRangeError
from codeembed.lines.ranges import MAX_LINE_NUMBER, format_line_ranges, parse_line_ranges


def test_single_lines_and_ranges_are_expanded_and_sorted():
    assert parse_line_ranges("3,7-9,12") == [3, 7, 8, 9, 12]


def test_order_and_duplicates_do_not_matter():
    assert parse_line_ranges("5,3-4,4") == [3, 4, 5]
    assert parse_line_ranges("3,4,5") == [3, 4, 5]


def test_whitespace_around_tokens_and_hyphen_is_ignored():
    assert parse_line_ranges("  2 , 4 -  6 ,1 ") == [1, 2, 4, 5, 6]


@pytest.mark.parametrize("spec", [None, "", "   ", "\t\n"])
def test_blank_spec_selects_everything(spec):
    assert parse_line_ranges(spec) == []


def test_single_line_range():
    assert parse_line_ranges("4-4") == [4]


@pytest.mark.parametrize(
    "spec",
    ["0", "0-3", "5-2", "2-", "-3", "a", "1,,2", "1,", "1-2-3", "1.5", "+2", "3 4"],
)
def test_invalid_specs_are_rejected(spec):
    with pytest.raises(LineRangeError):
        parse_line_ranges(spec)


def test_inverted_range_reports_the_token():
    with pytest.raises(LineRangeError) as excinfo:
        parse_line_ranges("1, 5-2")

    assert excinfo.value.token == "5-2"
    assert "before its start" in excinfo.value.reason


def test_format_collapses_consecutive_runs():
    assert format_line_ranges([7, 3, 4, 5, 5]) == "3-5,7"
    assert format_line_ranges([]) == ""
    assert format_line_ranges([1]) == "1"


@pytest.mark.parametrize("spec", ["3,7-9,12", "5,3-4,4", "10-12, 1, 2", "1"])
def test_parse_is_stable_through_canonical_form(spec):
    lines = parse_line_ranges(spec)

    assert parse_line_ranges(format_line_ranges(lines)) == lines


@pytest.mark.parametrize("spec", ["1-2000000000", "2000000000", "5, 999999-1000001"])
def test_line_numbers_above_the_limit_are_rejected(spec):
    with pytest.raises(LineRangeError) as excinfo:
        parse_line_ranges(spec)

    assert "stop at" in excinfo.value.reason


def test_limit_itself_is_accepted():
    assert parse_line_ranges(f"{MAX_LINE_NUMBER}") == [MAX_LINE_NUMBER]
