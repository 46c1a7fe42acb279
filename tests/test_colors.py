import pytest

from isofdf.colors import COLOR_NAMES, color_by_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("gray100", 0xFFFFFF),
        ("darkgray", 0xA9A9A9),
        ("thistle4", 0x8B7B8B),
    ],
)
def test_known_values(name, expected):
    assert color_by_name(name) == expected


def test_none_is_transparent_marker():
    assert color_by_name("none") == -1


def test_lookup_ignores_case():
    assert color_by_name("RED") == color_by_name("red")
    assert color_by_name("Ghost White") == 0xF8F8FF


def test_first_duplicate_wins():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("not a colour")


def test_gray_and_grey_agree():
    for level in range(101):
        assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_levels_are_neutral_and_increasing():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_every_table_name_resolves_in_upper_case():
    for name, value in COLOR_NAMES.items():
        assert color_by_name(name.upper()) == value


def test_values_fit_in_rgb_or_are_none():
    for name, value in COLOR_NAMES.items():
        assert value == -1 or 0 <= value <= 0xFFFFFF, name
    assert [n for n, v in COLOR_NAMES.items() if v == -1] == ["none"]


def test_table_keys_are_lower_case_and_resolve():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert color_by_name(name) == value
        assert color_by_name(name.title()) == value