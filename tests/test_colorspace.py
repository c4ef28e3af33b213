import numpy as np

from pixfilter.colorspace import grayscale


def test_channels_become_rounded_mean(random_grid):
    expected = np.floor(random_grid.astype(np.float64).sum(axis=2) / 3.0 + 0.5)
    h, w = random_grid.shape[:2]

    grayscale(h, w, random_grid)

    for c in range(3):
        np.testing.assert_array_equal(random_grid[:, :, c], expected)


def test_centre_red_pixel():
    grid = np.zeros((3, 3, 3), dtype=np.uint8)
    grid[1, 1] = (255, 0, 0)

    grayscale(3, 3, grid)

    assert grid[1, 1].tolist() == [85, 85, 85]
    grid[1, 1] = 0
    assert not grid.any()


def test_rounds_up_at_two_thirds_and_down_at_one_third():
    grid = np.array([[[1, 0, 0], [1, 1, 0], [27, 28, 28]]], dtype=np.uint8)

    grayscale(1, 3, grid)

    # 1/3 -> 0, 2/3 -> 1, 83/3 = 27.67 -> 28
    assert grid[0, :, 0].tolist() == [0, 1, 28]


def test_idempotent(random_grid):
    h, w = random_grid.shape[:2]
    grayscale(h, w, random_grid)
    once = random_grid.copy()

    grayscale(h, w, random_grid)

    np.testing.assert_array_equal(random_grid, once)


def test_extremes_stay_in_range():
    grid = np.array([[[255, 255, 255], [0, 0, 0], [255, 255, 254]]], dtype=np.uint8)

    grayscale(1, 3, grid)

    assert grid[0, :, 0].tolist() == [255, 0, 255]


def test_single_pixel():
    grid = np.array([[[10, 20, 31]]], dtype=np.uint8)

    grayscale(1, 1, grid)

    # 61 / 3 = 20.33
    assert grid[0, 0].tolist() == [20, 20, 20]


def test_empty_grids_are_noops(empty_grids):
    for grid in empty_grids:
        grayscale(grid.shape[0], grid.shape[1], grid)
        assert grid.shape[2] == 3 and grid.size == 0
