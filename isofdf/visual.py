"""Pixel format of a TrueColor visual and conversion of RGB colours to it."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Visual", "mask_shifts"]


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def mask_shifts(
    red_mask: int, green_mask: int, blue_mask: int
) -> tuple[int, int, int, int, int, int]:
    """Return (shift, width) of the red, green and blue masks, flattened.

    The shift is the number of zero bits below the channel and the width
    the number of consecutive one bits of the channel.
    """
    red = _shift_and_width(red_mask)
    green = _shift_and_width(green_mask)
    blue = _shift_and_width(blue_mask)
    return (*red, *green, *blue)


@dataclass(frozen=True)
class Visual:
    """A TrueColor visual described by its depth and channel masks."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF
    shifts: tuple[int, int, int, int, int, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.depth <= 0:
            raise ValueError(f"depth must be positive, got {self.depth}")
        object.__setattr__(
            self, "shifts", mask_shifts(self.red_mask, self.green_mask, self.blue_mask)
        )

    def good_color(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value of this visual.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        r_shift, r_bits, g_shift, g_bits, b_shift, b_bits = self.shifts
        return (
            ((red >> (16 - r_bits)) << r_shift)
            + ((green >> (16 - g_bits)) << g_shift)
            + ((blue >> (16 - b_bits)) << b_shift)
        )