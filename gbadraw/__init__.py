"""Digit drawing pad model, image preprocessing and GBA ROM header fixing."""

__version__ = "0.1.0"
__all__ = ["canvas", "digits", "gbafix", "img_ops"]