"""A tile-matching puzzle game where identical pairs are joined by paths with few turns."""

__version__ = "0.1.0"
__all__ = ["__version__"]