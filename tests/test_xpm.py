import pytest

from isofdf.xpm import (
    TRANSPARENT,
    XpmError,
    color_key,
    parse_xpm,
    quoted_lines,
    strip_comments,
    text_rgb,
    xpm_file_to_image,
    xpm_to_image,
)


def test_strip_block_comment_keeps_length():
    text = "a /* x */ b"
    out = strip_comments(text)
    assert len(out) == len(text)
    assert out.split() == ["a", "b"]


def test_strip_line_comment_removes_newline():
    out = strip_comments("// line\nnext")
    assert "line" not in out
    assert out.strip() == "next"


def test_strip_comments_ignores_quoted():
    text = '"/* keep */"'
    assert strip_comments(text) == text


def test_strip_unterminated_block_blanks_to_end():
    out = strip_comments("ab /* open")
    assert out.rstrip() == "ab"
    assert len(out) == len("ab /* open")


def test_color_key_packs_characters():
    assert color_key("a") == ord("a")
    assert color_key("ab") == color_key("a") * 256 + color_key("b")
    assert color_key("") == 0


def test_text_rgb_hex():
    assert text_rgb("#FF0000") == 0xFF0000
    assert text_rgb("#zz") == 0


def test_text_rgb_names():
    assert text_rgb("red") == 0xFF0000
    assert text_rgb("RED") == 0xFF0000
    assert text_rgb("light", "blue") == 0xADD8E6
    assert text_rgb("None") == -1
    assert text_rgb("nosuchcolour") == 0


def test_quoted_lines():
    assert list(quoted_lines('x "ab" y "cd" "e')) == ["ab", "cd"]
    assert list(quoted_lines("no quotes")) == []


XPM = ["2 2 2 1", ". c red", "# c blue", ".#", "#."]


def test_parse_xpm_rows():
    assert parse_xpm(XPM) == [[0xFF0000, 0xFF], [0xFF, 0xFF0000]]


def test_parse_none_is_transparent():
    rows = parse_xpm(["1 1 1 1", "o c None", "o"])
    assert rows == [[TRANSPARENT]]
    assert TRANSPARENT == 0xFF000000


def test_single_char_keys_last_definition_wins():
    rows = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert rows == [[0xFF]]


def test_wide_keys_first_definition_wins():
    rows = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert rows == [[0xFF0000]]


def test_unknown_pixel_key_is_zero():
    assert parse_xpm(["1 1 1 1", "a c red", "z"]) == [[0]]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 2 1", ". c red", "# c blue", ".#", "#."],
        ["2 2"],
        ["1 1 1 1", "a x red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 2 1 1", "a c red", "aa"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_to_image():
    image = xpm_to_image(XPM)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF
    assert image.get_pixel(0, 1) == 0xFF


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "pic.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *pic[] = {\n"
        '"2 1 2 1",\n'
        '". c #00FF00", // green\n'
        '"o c None",\n'
        '".o"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == TRANSPARENT


def test_xpm_file_missing(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")