import pytest

from netpbmkit import PixelBuffer, Rgb


@pytest.fixture
def bitmap():
    buf = PixelBuffer.blank("P1", 5, 3)
    buf.rows = [
        [True, False, False, True, True],
        [False, True, False, False, True],
        [True, True, True, False, False],
    ]
    return buf


@pytest.fixture
def graymap():
    buf = PixelBuffer.blank("P2", 3, 2, max_value=255)
    buf.rows = [[0, 128, 255], [10, 20, 30]]
    return buf


@pytest.fixture
def pixmap():
    buf = PixelBuffer.blank("P3", 2, 2, max_value=255)
    buf.rows = [
        [Rgb(255, 0, 0), Rgb(0, 255, 0)],
        [Rgb(0, 0, 255), Rgb(30, 60, 90)],
    ]
    return buf
