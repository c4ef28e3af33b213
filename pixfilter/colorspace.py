import numpy as np

from pixfilter.grid import Grid, round_half_up_div, validate_grid


def grayscale(height: int, width: int, image: Grid) -> None:
    validate_grid(height, width, image)

    # Sum channels in a wider type so 3 * 255 fits
    total = image.astype(np.int32).sum(axis=2, keepdims=True)

    # Mean intensity, rounded half up
    gray = round_half_up_div(total, 3).astype(np.uint8)

    # Same value on all three channels
    image[...] = gray
