from pixfilter.grid import Grid, validate_grid


def reflect(height: int, width: int, image: Grid) -> None:
    validate_grid(height, width, image)

    half = width // 2
    if half == 0:
        return

    # Swap column j with column width - 1 - j; middle column stays put
    left = image[:, :half].copy()
    image[:, :half] = image[:, width - half:][:, ::-1]
    image[:, width - half:] = left[:, ::-1]
