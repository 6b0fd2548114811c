import pytest

from solong.ximage import Image, color_value, mask_shifts

TRUECOLOR = (16, 8, 8, 8, 0, 8)


def color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_mask_shifts_truecolor():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == TRUECOLOR


def test_mask_shifts_rgb565():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_mask_shifts_empty_mask():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x123456])
def test_color_value_deep_visual_unchanged(color):
    assert color_value(color, 24, TRUECOLOR) == color
    assert color_value(color, 32, (0, 1, 0, 1, 0, 1)) == color


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x123456, 0])
def test_color_value_shallow_with_truecolor_masks(color):
    assert color_value(color, 16, TRUECOLOR) == color


def test_color_value_rgb565_extremes():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert color_value(0xFFFFFF, 16, shifts) == 0xFFFF
    assert color_value(0x000000, 16, shifts) == 0


def test_new_image_layout():
    image = Image(42, 42)
    assert image.bpp == 32
    assert image.size_line == 42 * 4
    assert image.size_line % 4 == 0
    assert len(image.data) == image.size_line * 42
    assert all(byte == 0 for byte in image.data)


@pytest.mark.parametrize("kind", [1, 2])
def test_fill_and_read_back(kind):
    w = h = 42
    image = Image(w, h)
    for y in range(h):
        for x in range(w):
            image.set_pixel(x, y, color_value(color_map(x, y, w, h, kind), 24, TRUECOLOR))
    for y in range(h):
        for x in range(w):
            assert image.get_pixel(x, y) == color_map(x, y, w, h, kind)


def test_little_endian_bytes():
    image = Image(2, 1, endian=0)
    image.set_pixel(1, 0, 0x11223344)
    assert bytes(image.data[4:8]) == b"\x44\x33\x22\x11"
    assert bytes(image.data[0:4]) == b"\x00\x00\x00\x00"


def test_big_endian_bytes():
    image = Image(2, 1, endian=1)
    image.set_pixel(0, 0, 0x11223344)
    assert bytes(image.data[0:4]) == b"\x11\x22\x33\x44"
    assert image.get_pixel(0, 0) == 0x11223344


def test_set_pixel_keeps_low_bytes():
    image = Image(1, 1)
    image.set_pixel(0, 0, 0x1FF000000)
    assert image.get_pixel(0, 0) == 0xFF000000


def test_pixel_out_of_range():
    image = Image(3, 3)
    with pytest.raises(IndexError):
        image.set_pixel(3, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Image(*size)