import numpy as np
import pytest
from PIL import Image

from hpclab.pngio import PNG_SIGNATURE, read_image, write_image


def test_round_trip(tmp_path):
    rng = np.random.default_rng(5)
    img = rng.integers(0, 256, size=(7, 11), dtype=np.uint8)
    path = tmp_path / "img.png"
    write_image(path, img)
    back = read_image(path)
    assert back.shape == (7, 11)
    assert np.array_equal(back, img)


def test_written_file_has_png_signature(tmp_path):
    path = tmp_path / "img.png"
    write_image(path, np.zeros((2, 2), dtype=np.uint8))
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert PNG_SIGNATURE == b"\x89PNG\r\n\x1a\n"


def test_values_are_clamped(tmp_path):
    path = tmp_path / "img.png"
    write_image(path, np.array([[-5, 300], [0, 255]]))
    assert read_image(path).tolist() == [[0, 255], [0, 255]]


def test_not_a_png(tmp_path):
    path = tmp_path / "fake.png"
    path.write_bytes(b"not a png at all")
    with pytest.raises(ValueError, match="not a proper PNG"):
        read_image(path)


def test_colour_png_rejected(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (4, 3), (10, 20, 30)).save(path)
    with pytest.raises(ValueError, match="grayscale"):
        read_image(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_image(tmp_path / "missing.png")


def test_write_rejects_non_2d(tmp_path):
    with pytest.raises(ValueError):
        write_image(tmp_path / "x.png", np.zeros((2, 2, 3)))