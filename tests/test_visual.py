import pytest

from isofdf.visual import Visual, mask_shifts

RGB565 = dict(red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)


def test_mask_shifts_for_24_bit_layout():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_for_565_layout():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_mask_shifts_rejects_zero_mask():
    with pytest.raises(ValueError):
        mask_shifts(0, 0x00FF00, 0x0000FF)


def test_visual_stores_shifts():
    visual = Visual(depth=16, **RGB565)
    assert visual.shifts == mask_shifts(0xF800, 0x07E0, 0x001F)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF99FF])
def test_deep_visual_keeps_colour(color):
    assert Visual(depth=24).good_color(color) == color
    assert Visual(depth=32).good_color(color) == color


def test_shallow_visual_full_channels_fill_masks():
    visual = Visual(depth=16, **RGB565)
    assert visual.good_color(0xFF0000) == RGB565["red_mask"]
    assert visual.good_color(0x00FF00) == RGB565["green_mask"]
    assert visual.good_color(0x0000FF) == RGB565["blue_mask"]
    assert visual.good_color(0xFFFFFF) == 0xFFFF


def test_shallow_visual_black_is_zero():
    assert Visual(depth=16, **RGB565).good_color(0) == 0


def test_shallow_visual_result_within_masks():
    visual = Visual(depth=16, **RGB565)
    all_bits = RGB565["red_mask"] | RGB565["green_mask"] | RGB565["blue_mask"]
    for color in (0x123456, 0xABCDEF, 0x808080, 0x010203):
        assert visual.good_color(color) & ~all_bits == 0


def test_visual_rejects_bad_depth():
    with pytest.raises(ValueError):
        Visual(depth=0)