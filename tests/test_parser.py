import pytest

from pushswap.parser import (
    ParseError,
    is_blank,
    is_number,
    parse_arguments,
    parse_int,
)


@pytest.mark.parametrize("text", ["0", "42", "-7", "+7", "0001", "99999999999999"])
def test_is_number_accepts_signed_digits(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", "1a", "--1", "+-1", "1-", " 1", "1.5", "١"])
def test_is_number_rejects_other_text(text):
    assert is_number(text) is False


@pytest.mark.parametrize("text", [None, "", " ", "\t", " \t  \t"])
def test_is_blank_true(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", ["1", " 1 ", "\t-\t", "x"])
def test_is_blank_false(text):
    assert is_blank(text) is False


@pytest.mark.parametrize(
    "text, expected",
    [("0", 0), ("-0", 0), ("+15", 15), ("-15", -15), ("007", 7)],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


def test_parse_int_limits():
    assert parse_int("2147483647") == 2**31 - 1
    assert parse_int("-2147483648") == -(2**31)


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483649", "99999999999999999999", "", "+", "1x", "1\t2"]
)
def test_parse_int_errors(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("abc")


def test_parse_arguments_separate_args():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_parse_arguments_split_on_spaces():
    assert parse_arguments(["3 1", "  2  ", "-5"]) == [3, 1, 2, -5]


def test_parse_arguments_single_string_matches_separate():
    assert parse_arguments(["4 -2 9 0"]) == parse_arguments(["4", "-2", "9", "0"])


def test_parse_arguments_empty_list():
    assert parse_arguments([]) == []


@pytest.mark.parametrize("args", [[""], ["1", ""], ["1", "   "], ["\t"]])
def test_parse_arguments_blank_argument(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_arguments_tab_is_not_separator():
    with pytest.raises(ParseError):
        parse_arguments(["1\t2"])


@pytest.mark.parametrize("args", [["1", "1"], ["1 2 1"], ["0", "-0"], ["+3", "3"]])
def test_parse_arguments_duplicates(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


@pytest.mark.parametrize("args", [["1", "two"], ["2147483648"], ["1 - 2"]])
def test_parse_arguments_bad_token(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_arguments_round_trip():
    values = [10, -3, 2147483647, -2147483648, 0, 5]
    args = [str(v) for v in values]
    assert parse_arguments(args) == values
    assert parse_arguments([" ".join(args)]) == values