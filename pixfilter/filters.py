import numpy as np

from pixfilter.blur import blur
from pixfilter.colorspace import grayscale
from pixfilter.edges import edges
from pixfilter.reflect import reflect

FILTERS = {
    "grayscale": grayscale,
    "reflect": reflect,
    "blur": blur,
    "edges": edges,
}

# Command-line selector letter -> filter name
FILTER_FLAGS = {
    "g": "grayscale",
    "r": "reflect",
    "b": "blur",
    "e": "edges",
}


def apply_filter(name: str, image: np.ndarray) -> np.ndarray:
    """Run the named filter in place on ``image`` and return it."""
    if name not in FILTERS:
        raise ValueError(f"Invalid filter: {name}")

    if not isinstance(image, np.ndarray):
        raise TypeError("Image must be a NumPy array")

    if image.ndim != 3:
        raise ValueError("Input must be an RGB image with 3 channels")

    height, width = image.shape[:2]
    FILTERS[name](height, width, image)
    return image
