"""Reading and writing 8-bit grayscale PNG images."""

from __future__ import annotations

from os import PathLike

import numpy as np
from PIL import Image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_ONE_BYTE_MODES = ("L", "P")


def read_image(path: str | PathLike) -> np.ndarray:
    """Read an 8-bit grayscale PNG as a ``(height, width)`` uint8 array."""
    with open(path, "rb") as fh:
        if fh.read(len(PNG_SIGNATURE)) != PNG_SIGNATURE:
            raise ValueError(f"File {path} is not a proper PNG file")
        fh.seek(0)
        with Image.open(fh, formats=["PNG"]) as img:
            img.load()
            if img.mode not in _ONE_BYTE_MODES:
                raise ValueError("the image is not in grayscale")
            return np.array(img, dtype=np.uint8)


def write_image(path: str | PathLike, pixels) -> None:
    """Write a 2-D array as an 8-bit grayscale PNG, clamping to 0..255."""
    data = np.asarray(pixels)
    if data.ndim != 2:
        raise ValueError(f"expected a 2-D image, got {data.ndim} dimensions")
    data = np.clip(data, 0, 255).astype(np.uint8)
    Image.fromarray(data).save(path, format="PNG")