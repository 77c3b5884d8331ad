"""A turn-based deck-building card battle game: combat rules, battle turns and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]