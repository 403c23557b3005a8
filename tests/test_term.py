from busybin.term import (
    CLEAN_SCREEN,
    CURSOR_HOME,
    ESCAPE,
    Attribute,
    sgr,
    strip_escape_codes,
)


def test_strip_leaves_screen_codes_untouched():
    text = CLEAN_SCREEN + CURSOR_HOME
    assert strip_escape_codes(text) == "\x1b[2J\x1b[H"


def test_sgr_single_attribute():
    assert sgr(Attribute.CYAN_FOREGROUND) == "\x1b[36m"


def test_sgr_reset():
    assert sgr(Attribute.RESET) == "\x1b[0m"


def test_sgr_joins_attributes_with_semicolons():
    result = sgr(Attribute.BOLD, Attribute.RED_FOREGROUND, Attribute.BRIGHT_WHITE_BACKGROUND)
    assert result == ESCAPE + "[" + "1;31;107" + "m"


def test_sgr_accepts_plain_strings():
    assert sgr("1", Attribute.UNDERLINE) == sgr(Attribute.BOLD, Attribute.UNDERLINE)


def test_sgr_with_no_attributes():
    assert sgr() == ESCAPE + "[m"


def test_strip_round_trip():
    text = sgr(Attribute.CYAN_FOREGROUND) + "/home> " + sgr(Attribute.RESET) + "test"
    assert strip_escape_codes(text) == "/home> test"


def test_strip_leaves_plain_text():
    assert strip_escape_codes("plain text; 1;2m") == "plain text; 1;2m"


def test_strip_removes_every_attribute_code():
    for attribute in Attribute:
        assert strip_escape_codes("a" + sgr(attribute) + "b") == "ab"