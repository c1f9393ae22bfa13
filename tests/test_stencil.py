import numpy as np
import pytest

from hpclab.stencil import apply_stencil


def test_uniform_image_gives_zero_edges():
    img = np.full((6, 7), 123, dtype=np.uint8)
    out = apply_stencil(img)
    assert out.shape == (6, 7)
    assert out.dtype == np.uint8
    assert np.all(out == 0)


def test_bright_centre_saturates():
    img = np.zeros((3, 3), dtype=np.uint8)
    img[1, 1] = 255
    out = apply_stencil(img)
    assert out[1, 1] == 255


def test_dark_centre_clamps_to_zero():
    img = np.full((3, 3), 200, dtype=np.uint8)
    img[1, 1] = 0
    assert apply_stencil(img)[1, 1] == 0


def test_single_point_response():
    img = np.zeros((5, 5), dtype=np.uint8)
    img[2, 2] = 10
    out = apply_stencil(img)
    assert out[2, 2] == 80
    neighbours = out[1:4, 1:4].copy()
    neighbours[1, 1] = 0
    assert np.all(neighbours == 0)


def test_borders_are_zero():
    rng = np.random.default_rng(3)
    img = rng.integers(0, 256, size=(8, 9), dtype=np.uint8)
    out = apply_stencil(img)
    assert out.shape == (8, 9)
    assert out[0, :].tolist() == [0] * 9
    assert out[-1, :].tolist() == [0] * 9
    assert out[:, 0].tolist() == [0] * 8
    assert out[:, -1].tolist() == [0] * 8


def test_input_is_not_modified():
    img = np.arange(25, dtype=np.uint8).reshape(5, 5)
    before = img.copy()
    apply_stencil(img)
    assert np.array_equal(img, before)


def test_tiny_image_has_no_interior():
    out = apply_stencil(np.full((2, 5), 50, dtype=np.uint8))
    assert np.all(out == 0)


def test_rejects_non_2d():
    with pytest.raises(ValueError):
        apply_stencil(np.zeros(9, dtype=np.uint8))