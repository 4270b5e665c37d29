"""Built-in cipher strategies."""

from .shift import ShiftCipher
from .unicode import UnicodeCipher

__all__ = [
    "ShiftCipher",
    "UnicodeCipher",
]
