"""Caesar-style shift cipher."""

from __future__ import annotations

from typing import ClassVar, Optional

from encrypt_decrypt.models import Algorithm

from ..core import CipherStrategy

ALPHABET_SIZE = 26


def _alphabet_base(char: str) -> Optional[int]:
    """Return the code point of 'a' or 'A' for ASCII letters, None otherwise."""
    if "a" <= char <= "z":
        return ord("a")
    if "A" <= char <= "Z":
        return ord("A")
    return None


class ShiftCipher(CipherStrategy):
    """Shift ASCII letters within their case's alphabet.

    Anything that is not an ASCII letter (digits, punctuation, whitespace,
    accented letters) is left untouched. Keys of any sign are reduced with
    floor modulo so that ``decrypt(encrypt(text, key), key) == text``.
    """

    algorithm: ClassVar[Optional[Algorithm]] = Algorithm.SHIFT
    description: ClassVar[str] = "Shift letters within a-z and A-Z, other characters unchanged"

    def encrypt(self, text: str, key: int) -> str:
        result = []
        for char in text:
            base = _alphabet_base(char)
            if base is not None:
                char = chr((ord(char) - base + key) % ALPHABET_SIZE + base)
            result.append(char)
        return "".join(result)

    def decrypt(self, text: str, key: int) -> str:
        key %= ALPHABET_SIZE
        result = []
        for char in text:
            base = _alphabet_base(char)
            if base is not None:
                char = chr((ord(char) - base - key + ALPHABET_SIZE) % ALPHABET_SIZE + base)
            result.append(char)
        return "".join(result)
