"""Sobel edge detection."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from pixfilter.grid import (
    MAX_CHANNEL,
    Grid,
    neighbourhood,
    round_half_up,
    snapshot,
    validate_grid,
)

SOBEL_X = np.array(
    [[-1, 0, 1],
     [-2, 0, 2],
     [-1, 0, 1]],
    dtype=np.int32,
)

SOBEL_Y = np.array(
    [[-1, -2, -1],
     [0, 0, 0],
     [1, 2, 1]],
    dtype=np.int32,
)


def sobel_gradients(original: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(gx, gy)`` for every pixel and channel of ``original``.

    Pixels outside the grid count as black.  ``original`` must be a signed
    integer array (see :func:`pixfilter.grid.snapshot`).
    """
    gx = np.zeros_like(original)
    gy = np.zeros_like(original)

    for dy, dx, window in neighbourhood(original):
        gx += SOBEL_X[dy + 1, dx + 1] * window
        gy += SOBEL_Y[dy + 1, dx + 1] * window

    return gx, gy


def edges(height: int, width: int, image: Grid) -> None:
    validate_grid(height, width, image)
    if image.size == 0:
        return

    original = snapshot(image)
    gx, gy = sobel_gradients(original)

    # Gradients reach +-1020, square in float64
    gx = gx.astype(np.float64)
    gy = gy.astype(np.float64)
    magnitude = round_half_up(np.sqrt(gx * gx + gy * gy))

    image[...] = np.minimum(magnitude, MAX_CHANNEL).astype(np.uint8)
