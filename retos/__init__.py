"""Solutions to fourteen programming-contest exercises, one module each."""

__version__ = "0.1.0"