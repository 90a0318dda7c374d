from PIL import Image

from netpbmkit import PixelBuffer, Rgb
from netpbmkit.rendering.pillow import from_image, load_image, save_image, to_image


def test_bitmap_set_pixels_render_black(bitmap):
    img = to_image(bitmap)
    assert img.mode == "1"
    assert img.size == (5, 3)
    assert img.getpixel((0, 0)) == 0
    assert img.getpixel((1, 0)) == 255


def test_graymap_is_scaled_to_display_range():
    buf = PixelBuffer.blank("P2", 2, 1, max_value=10)
    buf.rows = [[5, 10]]
    img = to_image(buf)
    assert img.mode == "L"
    assert list(img.getdata()) == [128, 255]


def test_pixmap_to_rgb(pixmap):
    img = to_image(pixmap)
    assert img.mode == "RGB"
    assert img.getpixel((1, 1)) == (30, 60, 90)


def test_from_image_modes():
    gray = from_image(Image.new("L", (3, 2), 40))
    assert gray.kind == "graymap"
    assert gray.variant == "P5"
    assert gray.rows == [[40] * 3, [40] * 3]

    text_gray = from_image(Image.new("L", (1, 1), 0), binary=False)
    assert text_gray.variant == "P2"

    bits = from_image(Image.new("1", (2, 2), 0))
    assert bits.variant == "P4"
    assert bits.rows == [[True, True], [True, True]]

    color = from_image(Image.new("RGBA", (2, 1), (1, 2, 3, 4)))
    assert color.variant == "P6"
    assert color.rows == [[Rgb(1, 2, 3), Rgb(1, 2, 3)]]


def test_image_round_trip(bitmap, pixmap):
    for buf, magic in ((bitmap, "P4"), (pixmap, "P6")):
        buf.variant = magic
        assert from_image(to_image(buf)) == buf


def test_png_files(tmp_path, pixmap):
    path = tmp_path / "preview.png"
    save_image(pixmap, path)
    loaded = load_image(path)
    pixmap.variant = "P6"
    assert loaded == pixmap
