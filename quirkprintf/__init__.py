"""A printf-style formatter with its own rules for flags, width and precision."""

__version__ = "0.1.0"
__all__ = ["__version__"]