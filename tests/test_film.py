"""Unit tests for the film buffer and image export.

Tests cover:
- Pixel accumulation and orientation
- Gamma encoding with round-half-up
- The 24-bit BMP layout written through Pillow
"""

import math

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.film import Film
from pathtracer.core.ray import vec3
from pathtracer.preview.export import DEFAULT_GAMMA, gamma_encode, save_bmp


class TestFilm:
    """Tests for the accumulation buffer."""

    def test_starts_black(self):
        film = Film(4, 3)
        assert film.resolution == (4, 3)
        assert film.pixel(2, 1) == vec3(0.0, 0.0, 0.0)
        assert film.to_numpy().shape == (3, 4, 3)

    def test_add_color_accumulates(self):
        film = Film(4, 3)
        film.add_color(1, 2, vec3(0.25, 0.5, 0.125))
        film.add_color(1, 2, vec3(0.25, 0.0, 0.125))
        assert film.pixel(1, 2) == vec3(0.5, 0.5, 0.25)

    def test_clear(self):
        film = Film(2, 2)
        film.add_color(0, 0, vec3(1.0, 1.0, 1.0))
        film.clear()
        assert film.pixel(0, 0) == vec3(0.0, 0.0, 0.0)

    def test_row_zero_is_bottom_of_image(self):
        film = Film(3, 2)
        film.add_color(0, 0, vec3(1.0, 0.0, 0.0))
        image = film.to_numpy()
        assert image[1, 0].tolist() == [1.0, 0.0, 0.0]
        assert image[0, 0].tolist() == [0.0, 0.0, 0.0]

    def test_to_numpy_clamps(self):
        film = Film(1, 1)
        film.add_color(0, 0, vec3(2.0, -1.0, 0.5))
        assert film.to_numpy()[0, 0].tolist() == [1.0, 0.0, 0.5]

    @pytest.mark.parametrize("size", [(0, 1), (1, 0), (-2, 3)])
    def test_rejects_bad_size(self, size):
        with pytest.raises(ValueError):
            Film(*size)


class TestGammaEncode:
    """Tests for 8-bit gamma encoding."""

    def test_matches_scalar_formula(self):
        values = np.linspace(0.0, 1.0, 101)
        image = np.stack([values, values, values], axis=-1).reshape(1, -1, 3)
        encoded = gamma_encode(image)
        expected = [int(math.pow(v, 1.0 / DEFAULT_GAMMA) * 255.0 + 0.5) for v in values]
        assert encoded.dtype == np.uint8
        assert encoded[0, :, 0].tolist() == expected

    def test_extremes_and_clamping(self):
        image = np.array([[[0.0, 1.0, 2.0], [-0.5, 0.5, 1e-9]]])
        encoded = gamma_encode(image)
        assert encoded[0, 0].tolist() == [0, 255, 255]
        assert encoded[0, 1, 0] == 0
        assert encoded[0, 1, 1] == int(0.5 ** (1 / 2.2) * 255 + 0.5)


class TestSaveBmp:
    """Tests for the written bitmap."""

    def test_bmp_layout(self, tmp_path):
        """24-bit BMP: bottom row first, BGR order, rows padded to 4 bytes."""
        image = np.zeros((2, 3, 3))
        image[1, 0] = (1.0, 0.0, 0.0)  # bottom-left red
        image[0, 2] = (0.0, 0.0, 1.0)  # top-right blue

        path = save_bmp(image, tmp_path / "out.bmp")
        data = path.read_bytes()

        assert data[:2] == b"BM"
        assert int.from_bytes(data[18:22], "little") == 3
        assert int.from_bytes(data[22:26], "little", signed=True) == 2
        assert int.from_bytes(data[28:30], "little") == 24

        offset = int.from_bytes(data[10:14], "little")
        row_stride = 12  # 3 pixels * 3 bytes, padded to a multiple of 4
        bottom_row = data[offset : offset + row_stride]
        top_row = data[offset + row_stride : offset + 2 * row_stride]
        assert bottom_row[0:3] == bytes([0, 0, 255])
        assert top_row[6:9] == bytes([255, 0, 0])
        assert len(data) == offset + 2 * row_stride

    def test_store_image_round_trip(self, tmp_path):
        film = Film(5, 4)
        film.add_color(4, 3, vec3(1.0, 1.0, 1.0))
        path = film.store_image(tmp_path / "film.bmp")
        with Image.open(path) as img:
            assert img.format == "BMP"
            assert img.size == (5, 4)
            assert img.mode == "RGB"
            # Pixel (4, 3) of the film is the top-right of the picture
            assert img.getpixel((4, 0)) == (255, 255, 255)
            assert img.getpixel((0, 3)) == (0, 0, 0)

    def test_returns_path(self, tmp_path):
        path = save_bmp(np.zeros((1, 1, 3)), str(tmp_path / "one.bmp"))
        assert path.exists()
        assert path.suffix == ".bmp"
