"""An in-memory image whose pixel rows live in a byte buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Image"]

_PAD_BITS = 32


@dataclass
class Image:
    """A width x height image with packed pixels.

    ``byte_order`` is 0 for little-endian pixels and 1 for big-endian.
    The buffer is zero-filled and slightly larger than the rows need.
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    byte_order: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel not in (8, 16, 24, 32):
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {self.byte_order}")
        self.data = bytearray((self.width + 32) * self.height * 4)

    @property
    def size_line(self) -> int:
        """Bytes from the start of one row to the start of the next."""
        bits = self.width * self.bits_per_pixel
        return (bits + _PAD_BITS - 1) // _PAD_BITS * (_PAD_BITS // 8)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping only the bytes a pixel holds."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start : start + opp] = value.to_bytes(opp, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start : start + opp], self._order)