"""Fuzzy multilingual search over Indian railway stations."""

__version__ = "0.1.0"
