from netpbmkit import PixelBuffer, Rgb, decode_bytes, read_file, write_file
from netpbmkit.app.cli import main


def write_pixmap(path):
    buf = PixelBuffer.blank("P3", 4, 2, max_value=255, fill=Rgb(200, 200, 200))
    buf.rows[0][0] = Rgb(0, 0, 0)
    write_file(buf, path)
    return buf


def test_converts_to_binary_graymap(tmp_path):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.pgm"
    write_pixmap(src)
    assert main([str(src), str(dst), "--to-graymap", "--format", "P5"]) == 0
    out = decode_bytes(dst.read_bytes())
    assert out.variant == "P5"
    assert out.rows[0] == [0, 200, 200, 200]


def test_rotate_invert_and_max(tmp_path):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.ppm"
    write_pixmap(src)
    assert main([str(src), str(dst), "--rotate", "1", "--invert", "--max", "100"]) == 0
    out = read_file(dst)
    assert out.size() == (2, 4)
    assert out.max_value == 100
    assert out.rows[0][1] == Rgb(100, 100, 100)
    assert out.rows[0][0] == Rgb(22, 22, 22)


def test_bitmap_and_png_preview(tmp_path):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.png"
    write_pixmap(src)
    assert main([str(src), str(dst), "--to-bitmap", "--resize", "2x1"]) == 0
    assert dst.read_bytes().startswith(b"\x89PNG")


def test_errors_return_exit_code_two(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ppm"), str(tmp_path / "out.ppm")]) == 2
    assert "File not found" in capsys.readouterr().err

    src = tmp_path / "in.ppm"
    write_pixmap(src)
    assert main([str(src), str(tmp_path / "out.txt")]) == 2
    assert main([str(src), str(tmp_path / "out.pbm"), "--format", "P4"]) == 2

    bad = tmp_path / "bad.pgm"
    bad.write_bytes(b"P5\n4 4\n255\n\x00")
    assert main([str(bad), str(tmp_path / "out.pgm")]) == 2
    assert "expected 4 bytes" in capsys.readouterr().err
