# pixfilter/main.py

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

import cv2 as cv
import numpy as np

from pixfilter.filters import FILTER_FLAGS, apply_filter
from evaluation.metrics import compute_psnr, compute_ssim


def log(message: str) -> None:
    print(f"[INFO] {message}")


def warn(message: str) -> None:
    print(f"[WARN] {message}")


def error(message: str) -> None:
    print(f"[ERROR] {message}", file=sys.stderr)


def load_rgb_image(path: str) -> np.ndarray:
    img = cv.imread(path, cv.IMREAD_COLOR)
    if img is None:
        raise FileNotFoundError(f"Could not open {path}.")
    return cv.cvtColor(img, cv.COLOR_BGR2RGB)


def save_rgb_image(path: str, img: np.ndarray) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    try:
        written = cv.imwrite(path, cv.cvtColor(img, cv.COLOR_RGB2BGR))
    except cv.error as exc:
        # No encoder for the extension
        raise OSError(f"Could not create {path}.") from exc
    if not written:
        raise OSError(f"Could not create {path}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixfilter",
        description="Apply a grayscale, reflect, blur or edges filter to an RGB image.",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    for flag, name in FILTER_FLAGS.items():
        group.add_argument(
            f"-{flag}",
            f"--{name}",
            dest="filter",
            action="store_const",
            const=name,
            help=f"Apply the {name} filter",
        )
    parser.add_argument("infile", help="Input image (e.g. a 24-bit BMP)")
    parser.add_argument("outfile", help="Output image; format follows the extension")
    parser.add_argument(
        "--reference",
        default=None,
        help="Optional reference image to score the output against (PSNR/SSIM)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # -----------------------------
    # Load input image
    # -----------------------------
    try:
        image = load_rgb_image(args.infile)
    except FileNotFoundError as exc:
        error(str(exc))
        return 1
    log(f"Loaded {args.infile} ({image.shape[0]}x{image.shape[1]})")

    # -----------------------------
    # Filter
    # -----------------------------
    log(f"Applying {args.filter} filter...")
    try:
        apply_filter(args.filter, image)
    except MemoryError:
        error("Not enough memory to store image.")
        return 1

    # -----------------------------
    # Save result
    # -----------------------------
    try:
        save_rgb_image(args.outfile, image)
    except OSError as exc:
        error(str(exc))
        return 1
    log(f"Output saved to: {args.outfile}")

    # -----------------------------
    # Evaluation (optional)
    # -----------------------------
    if args.reference is not None:
        try:
            reference = load_rgb_image(args.reference)
        except FileNotFoundError as exc:
            error(str(exc))
            return 1

        if reference.shape != image.shape:
            warn(
                f"Shape mismatch: reference={reference.shape}, output={image.shape}. "
                "Skipping metrics."
            )
        else:
            log("Computing evaluation metrics...")
            print(f"PSNR: {compute_psnr(reference, image):.2f} dB")
            try:
                print(f"SSIM: {compute_ssim(reference, image):.4f}")
            except ValueError as exc:
                warn(f"{exc}. Skipping SSIM.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
