"""Classic online-judge and contest exercises as plain Python functions."""

__version__ = "0.1.0"