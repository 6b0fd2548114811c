import pytest

from solong.printf import format_text, printf


def test_plain_text_passes_through():
    assert format_text("Starting game...\n") == "Starting game...\n"


def test_signed_decimal():
    assert format_text("found %d", 3) == "found 3"
    assert format_text("%i", -42) == "-42"


def test_signed_decimal_wraps_to_32_bits():
    assert format_text("%d", 2**31) == str(-(2**31))


def test_unsigned_of_negative():
    assert int(format_text("%u", -1)) == 2**32 - 1


def test_hex_round_trip_and_case():
    lower = format_text("%x", 255)
    upper = format_text("%X", 255)
    assert int(lower, 16) == 255
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_string_and_null():
    assert format_text("Error: %s\n", "bad map") == "Error: bad map\n"
    assert format_text("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_text("'%c'", ord("Z")) == "'Z'"
    assert format_text("%c", "q") == "q"


def test_pointer():
    assert format_text("%p", 0) == "(nil)"
    assert format_text("%p", None) == "(nil)"
    text = format_text("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_percent_literal():
    assert format_text("100%%") == "100%"


def test_unknown_conversion_is_dropped():
    assert format_text("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert format_text("x%") == "x"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_text("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_text("%d", "seven")


def test_printf_writes_and_returns_length(capsys):
    message = "Map stats: %d collectibles, %d exits, %d players\n"
    count = printf(message, 2, 1, 1)
    out = capsys.readouterr().out
    assert out == format_text(message, 2, 1, 1)
    assert count == len(out)