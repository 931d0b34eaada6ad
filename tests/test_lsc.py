import pytest

from exatheme.lsc import LSColors, Pair
from exatheme.style import RGB, Colour, Fixed, Style

Red = Colour.RED
Green = Colour.GREEN
Yellow = Colour.YELLOW
Blue = Colour.BLUE
Purple = Colour.PURPLE
Cyan = Colour.CYAN


@pytest.mark.parametrize(
    "value, expected",
    [
        # Styles
        ("1", Style().bold()),
        ("01", Style().bold()),
        ("4", Style().underline()),
        ("04", Style().underline()),
        ("1;4", Style().bold().underline()),
        ("01;04", Style().bold().underline()),
        ("31", Red.normal()),
        ("43", Style().on(Yellow)),
        ("31;43", Red.on(Yellow)),
        ("0031;0043", Red.on(Yellow)),
        ("43;31;1;4", Red.on(Yellow).bold().underline()),
        ("1;1;1;1;1", Style().bold()),
        # Failure cases
        ("", Style()),
        (";;;;;;", Style()),
        ("99999999", Style()),
        ("GREEN", Style()),
        # Higher colours
        ("38;5;149", Fixed(149).normal()),
        ("48;5;1", Style().on(Fixed(1))),
        ("48;5;1;1", Style().on(Fixed(1)).bold()),
        ("4;48;5;1", Style().on(Fixed(1)).underline()),
        ("38;2;255;100;0", Style().fg(RGB(255, 100, 0))),
        ("38;2;255;100;0;3", Style().fg(RGB(255, 100, 0)).italic()),
        ("48;2;255;100;0", Style().on(RGB(255, 100, 0))),
        ("48;2;255;100;0;3", Style().on(RGB(255, 100, 0)).italic()),
        ("38;5;121;48;5;212", Fixed(121).on(Fixed(212))),
        ("48;5;121;38;5;212", Fixed(212).on(Fixed(121))),
        ("48;5;999", Style()),
    ],
    ids=[
        "bold", "bold2", "under", "unde2", "both", "both2", "fg", "bg", "bfg",
        "bfg2", "all", "again", "empty", "semis", "nines", "word", "hifg",
        "hibg", "hibo", "hiund", "rgb", "rgbi", "rgbbg", "rgbbi", "fgbg",
        "bgfg", "toohi",
    ],
)
def test_pair_to_style(value, expected):
    assert Pair(key="", value=value).to_style() == expected


def _collect(text):
    return [(pair.key, pair.to_style()) for pair in LSColors(text).pairs()]


@pytest.mark.parametrize(
    "text, expected",
    [
        # Bad parses
        ("", []),
        ("blah", []),
        ("=", []),
        ("=di", []),
        ("id=", []),
        # Foreground colours
        ("cb=32", [("cb", Green.normal())]),
        ("di=31", [("di", Red.normal())]),
        ("la=34", [("la", Blue.normal())]),
        # Background colours
        ("do=43", [("do", Style().on(Yellow))]),
        ("re=45", [("re", Style().on(Purple))]),
        ("mi=46", [("mi", Style().on(Cyan))]),
        # Bold and underline
        ("fa=1", [("fa", Style().bold())]),
        ("so=4", [("so", Style().underline())]),
        ("la=1;4", [("la", Style().bold().underline())]),
        # More and many
        (
            "me=43;21;55;34:yu=1;4;1",
            [("me", Blue.on(Yellow)), ("yu", Style().bold().underline())],
        ),
        (
            "red=31:green=32:blue=34",
            [("red", Red.normal()), ("green", Green.normal()), ("blue", Blue.normal())],
        ),
    ],
    ids=[
        "empty", "jibber", "equals", "starts", "ends", "green", "red", "blue",
        "yellow", "purple", "cyan", "bold", "under", "both", "more", "many",
    ],
)
def test_ls_colors_pairs(text, expected):
    assert _collect(text) == expected


def test_entry_with_two_equals_is_skipped():
    assert _collect("a=1=2:b=4") == [("b", Style().underline())]


def test_pairs_keep_raw_key_and_value():
    assert list(LSColors("*.txt=01;31").pairs()) == [Pair(key="*.txt", value="01;31")]


def test_pairs_can_be_iterated_again():
    colours = LSColors("di=31:ln=36")
    assert list(colours.pairs()) == list(colours.pairs())
    assert [pair.key for pair in colours.pairs()] == ["di", "ln"]


def test_truncated_high_colour_is_ignored():
    assert Pair(key="", value="38;5").to_style() == Style()
    assert Pair(key="", value="38;2;1;2").to_style() == Style()
    assert Pair(key="", value="38").to_style() == Style()


def test_unknown_high_colour_mode_leaves_following_codes():
    assert Pair(key="", value="38;1").to_style() == Style().bold()