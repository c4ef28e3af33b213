"""Shared helpers for operating on RGB pixel grids.

A grid is a ``(height, width, 3)`` uint8 array in row-major order with
channels stored as R, G, B.  The filters in this package mutate the grid in
place; the ones that look at neighbours read from a snapshot taken with
:func:`snapshot` so that already-written pixels never feed back into later
ones.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

Grid = np.ndarray  # (height, width, 3) uint8

CHANNELS = 3
MAX_CHANNEL = 255

# (dy, dx) for the 3x3 neighbourhood, row by row
OFFSETS = tuple((dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1))


def validate_grid(height: int, width: int, image: Grid) -> None:
    if not isinstance(image, np.ndarray):
        raise TypeError("Image must be a NumPy array")

    if height < 0 or width < 0:
        raise ValueError(f"Image dimensions must be non-negative, got {height}x{width}")

    if image.dtype != np.uint8:
        raise ValueError("Image must have dtype uint8")

    if image.shape != (height, width, CHANNELS):
        raise ValueError(
            f"Image shape {image.shape} does not match declared dimensions "
            f"({height}, {width}, {CHANNELS})"
        )

    if not image.flags.writeable:
        raise ValueError("Image must be writeable")


def snapshot(image: Grid) -> np.ndarray:
    """Return a widened, independent copy of ``image`` to read neighbours from.

    The copy is int32 so that sums and weighted sums over a neighbourhood
    cannot overflow.  It never shares memory with ``image``.
    """
    return image.astype(np.int32, copy=True)


def neighbourhood(values: np.ndarray) -> Iterator[Tuple[int, int, np.ndarray]]:
    """Yield ``(dy, dx, window)`` for each offset of the 3x3 neighbourhood.

    ``window[i, j]`` is ``values[i + dy, j + dx]`` when that position lies
    inside the grid and 0 otherwise.  Works for (h, w) and (h, w, c) arrays.
    """
    h, w = values.shape[:2]
    pad_width = ((1, 1), (1, 1)) + ((0, 0),) * (values.ndim - 2)
    padded = np.pad(values, pad_width, mode="constant", constant_values=0)

    for dy, dx in OFFSETS:
        yield dy, dx, padded[1 + dy: 1 + dy + h, 1 + dx: 1 + dx + w]


def round_half_up_div(numerator: np.ndarray, denominator) -> np.ndarray:
    """Integer ``numerator / denominator`` rounded half up.

    Both operands must be non-negative integers (denominator > 0).  Exact,
    unlike dividing in floating point and calling ``np.round``, which rounds
    halves to even.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def round_half_up(values: np.ndarray) -> np.ndarray:
    # non-negative input only
    return np.floor(values + 0.5)
