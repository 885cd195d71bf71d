import io
import string

import pytest

from miniprintf.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    put_char,
    put_endl,
    put_nbr,
    put_str,
    to_lower,
    to_upper,
)


ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_range(ch):
    assert is_print(ch) == (32 <= ord(ch) <= 126)


def test_non_ascii_is_not_classified():
    for ch in ["é", "٣", "Ω"]:
        assert not is_alpha(ch)
        assert not is_digit(ch)
        assert not is_alnum(ch)
        assert not is_ascii(ch)
        assert not is_print(ch)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_accepts_integer_codes():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_print(ord("\n"))


@pytest.mark.parametrize("ch", ASCII)
def test_case_mapping_matches_str_methods_for_ascii(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()


def test_case_mapping_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(ord("5")) == ord("5")


def test_case_mapping_leaves_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("value", [0, 7, -7, 2147483647, -2147483648, 123456])
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r  -42abc") == -42
    assert atoi("+15 16") == 15


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_put_char_and_str():
    out = io.StringIO()
    put_char("x", out)
    put_str("hello u", out)
    assert out.getvalue() == "xhello u"


def test_put_char_rejects_strings():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("(null)", out)
    assert out.getvalue() == "(null)\n"


@pytest.mark.parametrize("value", [0, 9, -1, 2147483647, -2147483648])
def test_put_nbr_round_trip(value):
    out = io.StringIO()
    put_nbr(value, out)
    assert atoi(out.getvalue()) == value


def test_put_nbr_min_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("hello u")
    put_nbr(-2147483648)
    assert capsys.readouterr().out == "hello u-2147483648"