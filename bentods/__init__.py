"""Fixed-point 2D math, collision tests, scene switching and image loading for small games."""

__version__ = "0.1.0"