"""3x3 edge-detection stencil on 8-bit grayscale images."""

from __future__ import annotations

import numpy as np


def apply_stencil(image) -> np.ndarray:
    """Apply the edge-detection stencil and return a new uint8 image.

    Each interior pixel becomes eight times itself minus its eight
    neighbours, clamped to 0..255. Border pixels of the result are zero.
    """
    img = np.asarray(image)
    if img.ndim != 2:
        raise ValueError(f"expected a 2-D image, got {img.ndim} dimensions")
    src = img.astype(np.int32)
    out = np.zeros(img.shape, dtype=np.uint8)
    height, width = src.shape
    if height < 3 or width < 3:
        return out

    centre = src[1:-1, 1:-1]
    neighbours = (
        src[:-2, :-2] + src[:-2, 1:-1] + src[:-2, 2:]
        + src[1:-1, :-2] + src[1:-1, 2:]
        + src[2:, :-2] + src[2:, 1:-1] + src[2:, 2:]
    )
    out[1:-1, 1:-1] = np.clip(8 * centre - neighbours, 0, 255)
    return out