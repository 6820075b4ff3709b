"""Raster surfaces: RGBA pixel arrays backed by numpy, drawn with Pillow.

A raster is a ``(height, width, 4)`` uint8 array in R, G, B, A order,
row-major with the origin at the top-left corner.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike, NDArray
from PIL import Image

Raster = NDArray[np.uint8]

# EXIF orientation tag
ORIENTATION_TAG = 274

# EXIF orientation value -> transpose that makes the image upright
_ORIENTATION_TRANSPOSE = {
    2: Image.Transpose.FLIP_LEFT_RIGHT,
    3: Image.Transpose.ROTATE_180,
    4: Image.Transpose.FLIP_TOP_BOTTOM,
    5: Image.Transpose.TRANSPOSE,
    6: Image.Transpose.ROTATE_270,
    7: Image.Transpose.TRANSVERSE,
    8: Image.Transpose.ROTATE_90,
}


def new_raster(width: int, height: int) -> Raster:
    """Allocate a zeroed raster."""
    return np.zeros((height, width, 4), dtype=np.uint8)


def raster_from_image(image: Image.Image) -> Raster:
    """Draw a decoded image into a new raster.

    Args:
        image: PIL Image in any mode.

    Returns:
        RGBA raster of the same size.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.array(image, dtype=np.uint8)


def raster_from_buffer(
    buffer: bytes | bytearray | ArrayLike, width: int, height: int
) -> Raster:
    """Wrap a flat RGBA pixel buffer as a raster.

    Raises:
        ValueError: If the buffer does not hold exactly width*height*4 values.
    """
    if isinstance(buffer, (bytes, bytearray)):
        data = np.frombuffer(buffer, dtype=np.uint8)
    else:
        data = np.asarray(buffer, dtype=np.uint8).ravel()

    expected = width * height * 4
    if data.size != expected:
        raise ValueError(
            f"Buffer holds {data.size} values, expected {expected} for {width}x{height} RGBA"
        )
    return data.reshape(height, width, 4).copy()


def check_raster(raster: Raster) -> None:
    """Ensure an array is a (height, width, 4) uint8 raster.

    Raises:
        ValueError: On any other shape or dtype.
    """
    if raster.ndim != 3 or raster.shape[2] != 4:
        raise ValueError(f"Expected a (height, width, 4) raster, got shape {raster.shape}")
    if raster.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 raster, got dtype {raster.dtype}")


def resample_raster(raster: Raster, width: int, height: int) -> Raster:
    """Draw a raster into a new raster of another size.

    Uses bilinear filtering, which is deterministic for a given input.
    """
    image = Image.fromarray(np.ascontiguousarray(raster))
    resized = image.resize((width, height), Image.Resampling.BILINEAR)
    return np.array(resized, dtype=np.uint8)


def to_channel(values: ArrayLike) -> Raster:
    """Store measured values the way an 8-bit channel holds them.

    Values are rounded half-to-even and clamped to [0, 255].
    """
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def auto_orient(img: Image.Image) -> Image.Image:
    """Rotate/flip an image upright according to its EXIF orientation tag.

    Importance is position dependent, so sideways pixels would be
    weighted against the wrong edges.

    Returns the original image when there is no usable tag.
    """
    try:
        orientation = img.getexif().get(ORIENTATION_TAG)
    except (AttributeError, KeyError, IndexError):
        return img

    method = _ORIENTATION_TRANSPOSE.get(orientation)
    if method is None:
        return img  # 1 (upright), missing or unknown
    return img.transpose(method)


def load_image(path: Path | str) -> Image.Image:
    """Decode an image file.

    Pixel data is read eagerly so the file is closed on return.

    Raises:
        FileNotFoundError: If path does not exist.
        PIL.UnidentifiedImageError: If the file is not a readable image.
    """
    with Image.open(path) as img:
        img.load()
        oriented = auto_orient(img)
        if oriented is img:
            oriented = img.copy()
    return oriented
