import pytest

from core.parsing import parse_guess


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("25", 25),
        ("  7", 7),
        ("7  ", 7),
        ("+12", 12),
        ("-4", -4),
        ("3.7", 3),
        ("-3.7", -3),
        ("12abc", 12),
        ("007", 7),
        ("0x1A", 26),
        (42, 42),
        (3.9, 3),
        (-0.5, 0),
    ],
)
def test_leading_integer_parse(raw, expected):
    assert parse_guess(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "abc", ".5", "-", "+", "0x", "0xg", "٣", "３", "-３", True, None, float("nan"), float("inf"), [3]],
)
def test_unparseable(raw):
    assert parse_guess(raw) is None


def test_truncates_instead_of_rounding():
    assert parse_guess("9.99") == 9
    assert parse_guess(9.99) == 9


def test_non_ascii_digits_are_not_digits():
    assert parse_guess("1٣") == 1
    assert parse_guess("0x１") is None
