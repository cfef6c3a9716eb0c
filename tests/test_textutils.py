import pytest

from minish.textutils import (
    atoi,
    format_printf,
    printf,
    split,
    strnstr,
    strtrim,
)


def test_atoi_skips_whitespace_and_trailing_garbage():
    assert atoi("\n524dgd") == 524


@pytest.mark.parametrize("n", [0, 1, -1, 42, -999, 2147483647, -2147483648])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_atoi_plus_sign_and_whitespace():
    assert atoi(" \t\v\f\r+17") == 17


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("") == 0


def test_atoi_double_sign_stops():
    assert atoi("+-5") == 0


def test_atoi_wraps_32_bit():
    assert atoi("2147483648") == -2147483648


def test_split_source_example():
    assert split("-aab---cdgewa---d-", "-") == ["aab", "cdgewa", "d"]


def test_split_only_separators():
    assert split("----", "-") == []
    assert split("", "-") == []


def test_split_join_invariant():
    text = "a b  c   d"
    words = split(text, " ")
    assert " ".join(words) == "a b c d".replace("  ", " ")
    assert all(words)


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "")
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_strtrim_source_example():
    assert strtrim("Hallo, World!", "lHmdmm,ao") == " World!"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  x  ", "") == "  x  "


def test_strtrim_none_raises():
    with pytest.raises(TypeError):
        strtrim(None, "a")


def test_strnstr_source_example():
    text = "Hello, World! Nice to meet you!"
    assert strnstr(text, "World", 20) == "World! Nice to meet you!"


def test_strnstr_empty_needle_returns_haystack():
    text = "Hello, World! Nice to meet you!"
    assert strnstr(text, "", 20) == text
    assert strnstr(text, "", 0) == text


def test_strnstr_match_must_fit_in_length():
    text = "Hello, World!"
    assert strnstr(text, "World", 11) is None
    assert strnstr(text, "World", 12) == "World!"


def test_strnstr_not_found_and_zero_length():
    assert strnstr("abc", "x", 3) is None
    assert strnstr("abc", "a", 0) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_format_plain_text():
    assert format_printf("plain text") == "plain text"


def test_format_char_and_string():
    assert format_printf("%c%s", "x", "yz") == "xyz"
    assert format_printf("%c", ord("Q")) == "Q"


def test_format_null_string():
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_format_decimal(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_format_decimal_wraps():
    assert format_printf("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("n", [0, 15, 255, 4096, 2**32 - 1])
def test_format_hex(n):
    assert format_printf("%x", n) == format(n, "x")
    assert format_printf("%X", n) == format(n, "X")


def test_format_hex_negative_is_unsigned():
    assert format_printf("%x", -1) == format(2**32 - 1, "x")


def test_format_pointer():
    assert format_printf("%p", 255) == "0x" + format(255, "x")
    assert format_printf("%p", 0) == "0x" + "0"


def test_format_unsigned_single_digit():
    assert format_printf("%u", 7) == str(7)


def test_format_percent_and_trailing_percent():
    assert format_printf("100%%") == "100%"
    assert format_printf("50%") == "50%"


def test_format_unknown_conversion_is_dropped():
    assert format_printf("a%qb") == "ab"


def test_format_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_format_none_format():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "x", -3)
    captured = capsys.readouterr()
    assert captured.out == "x=-3\n"
    assert count == len(captured.out)