"""32-bit wrapping sequence numbers and conversion to absolute 64-bit indices."""

__version__ = "0.1.0"
__all__ = ["wrapping"]