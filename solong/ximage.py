"""In-memory pixel images and colour conversion for the display visual."""

from __future__ import annotations

from dataclasses import dataclass, field

_BITMAP_PAD = 32


def _count_bits(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    width = 0
    while run & 1:
        run >>= 1
        width += 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    Each mask is described by the position of its lowest set bit and the
    number of consecutive set bits from there. Raises ValueError for an
    empty mask.
    """
    red = _count_bits(red_mask)
    green = _count_bits(green_mask)
    blue = _count_bits(blue_mask)
    return (*red, *green, *blue)


def color_value(color: int, depth: int, shifts: tuple[int, int, int, int, int, int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of the given depth.

    Visuals of depth 24 or more take the colour unchanged; shallower ones
    get each channel scaled into the bits described by shifts.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


@dataclass
class Image:
    """A Z-format pixel image: rows of size_line bytes, bpp bits per pixel.

    endian 0 stores each pixel least significant byte first, 1 most
    significant byte first.
    """

    width: int
    height: int
    bpp: int = 32
    endian: int = 0
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.bpp <= 0 or self.bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {self.bpp}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian}")
        bits = self.width * self.bpp
        self.size_line = (bits + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
        self.data = bytearray(self.size_line * self.height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x},{y}) outside a {self.width}x{self.height} image")
        return y * self.size_line + x * (self.bpp // 8)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store color at (x, y), keeping only as many low bytes as a pixel holds."""
        opp = self.bpp // 8
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        opp = self.bpp // 8
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._byteorder)