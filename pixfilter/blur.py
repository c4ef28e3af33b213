import numpy as np

from pixfilter.grid import Grid, neighbourhood, round_half_up_div, snapshot, validate_grid


def blur(height: int, width: int, image: Grid) -> None:
    """Box blur over the 3x3 neighbourhood of every pixel.

    Neighbours outside the grid are left out of both the sum and the count,
    so corners average 4 pixels, edges 6 and the interior 9.
    """
    validate_grid(height, width, image)
    if image.size == 0:
        return

    original = snapshot(image)

    totals = np.zeros_like(original)
    for _, _, window in neighbourhood(original):
        totals += window

    # How many neighbours of each pixel are inside the grid
    counts = np.zeros((height, width, 1), dtype=np.int32)
    for _, _, window in neighbourhood(np.ones((height, width, 1), dtype=np.int32)):
        counts += window

    blurred = round_half_up_div(totals, counts)

    image[...] = blurred.astype(np.uint8)
