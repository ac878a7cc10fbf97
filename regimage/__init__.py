"""Physical-space images, index grids, Gaussian smoothing, downsampling and pyramids."""

__version__ = "0.1.0"