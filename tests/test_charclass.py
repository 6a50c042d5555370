import pytest

from pushswap.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

CODES = range(-5, 300)


def _ascii(code):
    return 0 <= code <= 127


@pytest.mark.parametrize("code", CODES)
def test_isdigit_matches_ascii_digits(code):
    expected = _ascii(code) and chr(code).isdigit()
    assert isdigit(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_isalpha_matches_ascii_letters(code):
    expected = _ascii(code) and chr(code).isalpha()
    assert isalpha(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_isalnum_is_union_of_alpha_and_digit(code):
    assert isalnum(code) is (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", CODES)
def test_isascii_range(code):
    assert isascii(code) is _ascii(code)


@pytest.mark.parametrize("code", CODES)
def test_isprint_matches_printable_ascii(code):
    expected = _ascii(code) and chr(code).isprintable()
    assert isprint(code) is expected


def test_string_arguments():
    assert isdigit("7") is True
    assert isalpha("7") is False
    assert isalnum("q") is True
    assert isprint("\n") is False
    assert isascii("\u00e9") is False


def test_case_conversion_on_strings():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("5") == "5"
    assert tolower("!") == "!"


@pytest.mark.parametrize("code", CODES)
def test_case_conversion_on_ints_matches_ascii(code):
    if ord("a") <= code <= ord("z"):
        assert toupper(code) == ord(chr(code).upper())
        assert tolower(code) == code
    elif ord("A") <= code <= ord("Z"):
        assert tolower(code) == ord(chr(code).lower())
        assert toupper(code) == code
    else:
        assert tolower(code) == code
        assert toupper(code) == code


@pytest.mark.parametrize("letter", "abcdefghijklmnopqrstuvwxyz")
def test_case_round_trip(letter):
    assert tolower(toupper(letter)) == letter


def test_non_ascii_letters_untouched():
    assert toupper("\u00e9") == "\u00e9"
    assert tolower("\u00c9") == "\u00c9"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")