"""Tests for PPM and Pillow image output."""

import io

import numpy as np
import pytest
from PIL import Image

from renderer.image_io import save_image, write_ppm


@pytest.fixture
def image():
    img = np.zeros((2, 3, 3), dtype=np.uint8)
    img[0, 0] = (255, 0, 0)
    img[1, 2] = (1, 2, 3)
    return img


class TestWritePpm:
    def test_header_and_pixel_lines(self, image):
        buf = io.StringIO()
        write_ppm(image, buf)
        lines = buf.getvalue().splitlines()
        assert lines[:3] == ["P3", "3 2", "255"]
        assert len(lines) == 3 + 2 * 3
        assert lines[3] == "255 0 0"
        assert lines[-1] == "1 2 3"
        for line in lines[3:]:
            values = [int(v) for v in line.split()]
            assert len(values) == 3
            assert all(0 <= v <= 255 for v in values)


class TestSaveImage:
    def test_ppm_file(self, image, tmp_path):
        path = save_image(image, tmp_path / "out.ppm")
        text = path.read_text()
        assert text.startswith("P3\n3 2\n255\n")

    def test_png_round_trip(self, image, tmp_path):
        path = save_image(image, tmp_path / "out.png")
        with Image.open(path) as img:
            np.testing.assert_array_equal(np.asarray(img.convert("RGB")), image)

    def test_missing_directory_raises(self, image, tmp_path):
        with pytest.raises(OSError):
            save_image(image, tmp_path / "missing" / "out.ppm")
