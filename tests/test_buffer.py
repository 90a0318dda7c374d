import pytest

from netpbmkit import (
    CorruptBufferError,
    InvalidDimensionError,
    InvalidMaxValueError,
    InvalidVariantError,
    PixelBuffer,
    Rgb,
)


def test_blank_buffers():
    bits = PixelBuffer.blank("P4", 3, 2, max_value=200)
    assert bits.kind == "bitmap"
    assert bits.max_value == 1
    assert bits.rows == [[False] * 3] * 2

    gray = PixelBuffer.blank("P5", 2, 2, max_value=15, fill=7)
    assert gray.size() == (2, 2)
    assert gray.rows == [[7, 7], [7, 7]]

    color = PixelBuffer.blank("P6", 1, 1)
    assert color.rows == [[Rgb(0, 0, 0)]]
    assert color.max_value == 255


def test_blank_rows_are_independent():
    buf = PixelBuffer.blank("P2", 2, 2)
    buf.set(0, 0, 9)
    assert buf.rows[1][0] == 0


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-1, 4), (2.5, 2)])
def test_blank_rejects_bad_dimensions(width, height):
    with pytest.raises(InvalidDimensionError):
        PixelBuffer.blank("P2", width, height)


def test_blank_rejects_bad_arguments():
    with pytest.raises(InvalidVariantError):
        PixelBuffer.blank("P8", 1, 1)
    with pytest.raises(InvalidMaxValueError):
        PixelBuffer.blank("P2", 1, 1, max_value=0)
    with pytest.raises(InvalidMaxValueError):
        PixelBuffer.blank("P3", 1, 1, max_value=65535)
    with pytest.raises(CorruptBufferError):
        PixelBuffer.blank("P2", 1, 1, max_value=10, fill=11)


def test_at_and_set(pixmap):
    assert pixmap.at(1, 0) == Rgb(0, 255, 0)
    pixmap.set(1, 0, Rgb(1, 1, 1))
    assert pixmap.rows[0][1] == Rgb(1, 1, 1)
    with pytest.raises(IndexError):
        pixmap.at(2, 0)
    with pytest.raises(IndexError):
        pixmap.set(0, -1, Rgb(0, 0, 0))


@pytest.mark.parametrize(
    "fixture, value",
    [("bitmap", 1), ("graymap", True), ("graymap", 256), ("graymap", -1), ("pixmap", (1, 2, 3)), ("pixmap", Rgb(0, 0, 300))],
)
def test_set_rejects_wrong_pixel_kind(request, fixture, value):
    buf = request.getfixturevalue(fixture)
    with pytest.raises(CorruptBufferError):
        buf.set(0, 0, value)


def test_rgb_is_a_value_type():
    assert Rgb(1, 2, 3) == Rgb(1, 2, 3)
    assert len({Rgb(1, 2, 3), Rgb(1, 2, 3)}) == 1
    assert list(Rgb(4, 5, 6)) == [4, 5, 6]


def test_copy_is_deep(graymap):
    clone = graymap.copy()
    clone.set(0, 0, 99)
    assert graymap.at(0, 0) == 0
    assert clone != graymap


def test_validate_detects_corruption(graymap):
    graymap.validate()
    graymap.rows.append([1, 2, 3])
    with pytest.raises(CorruptBufferError):
        graymap.validate()
    graymap.rows.pop()
    graymap.rows[0].append(4)
    with pytest.raises(CorruptBufferError):
        graymap.validate()
    graymap.rows[0].pop()
    graymap.rows[1][2] = "x"
    with pytest.raises(CorruptBufferError):
        graymap.validate()


def test_validate_bitmap_max_value(bitmap):
    bitmap.max_value = 2
    with pytest.raises(CorruptBufferError):
        bitmap.validate()
