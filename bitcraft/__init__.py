"""Bit-level tools for two's complement integers, IEEE 754 floats and BMP images."""

__version__ = "0.1.0"
__all__ = ["__version__"]