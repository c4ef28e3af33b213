"""
Pixel grid filters for 8-bit RGB images.

This package contains the core image processing modules:
- grid: grid validation, snapshots, neighbourhood iteration and rounding
- colorspace: grayscale conversion
- reflect: horizontal mirroring
- blur: 3x3 box blur
- edges: Sobel edge detection
- filters: name/flag registry used by the command line
"""
