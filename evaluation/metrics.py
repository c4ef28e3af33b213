# evaluation/metrics.py

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

SSIM_MAX_WINDOW = 7
SSIM_MIN_WINDOW = 3


def _check_pair(reference: np.ndarray, test: np.ndarray) -> None:
    if reference.shape != test.shape:
        raise ValueError("Images must have the same shape")

    if reference.dtype != np.uint8 or test.dtype != np.uint8:
        raise ValueError("Images must have dtype uint8")


def compute_psnr(
    reference: np.ndarray,
    test: np.ndarray
) -> float:
    _check_pair(reference, test)

    # skimage divides by the MSE
    if np.array_equal(reference, test):
        return float("inf")

    return float(peak_signal_noise_ratio(
        reference,
        test,
        data_range=255
    ))


def compute_ssim(
    reference: np.ndarray,
    test: np.ndarray
) -> float:
    """SSIM over RGB grids, shrinking the window for small images."""
    _check_pair(reference, test)

    side = min(reference.shape[:2])
    if side < SSIM_MIN_WINDOW:
        raise ValueError(f"Images must be at least {SSIM_MIN_WINDOW}x{SSIM_MIN_WINDOW} for SSIM")

    # Largest odd window that fits
    win_size = min(SSIM_MAX_WINDOW, side if side % 2 else side - 1)

    return float(structural_similarity(
        reference,
        test,
        win_size=win_size,
        channel_axis=2,
        data_range=255
    ))
