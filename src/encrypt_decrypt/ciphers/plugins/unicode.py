"""Code-point shift cipher."""

from __future__ import annotations

import sys
from typing import ClassVar, Optional

from encrypt_decrypt.models import Algorithm

from ..core import CipherStrategy

# Number of code points representable by ``chr``
CODE_POINT_RANGE = sys.maxunicode + 1


class UnicodeCipher(CipherStrategy):
    """Shift the code point of every character by the key.

    There is no range restriction: letters, punctuation and whitespace are
    all shifted. Code points leaving the representable range wrap around,
    so large keys produce unreadable text but still decrypt correctly.
    """

    algorithm: ClassVar[Optional[Algorithm]] = Algorithm.UNICODE
    description: ClassVar[str] = "Shift the code point of every character"

    def encrypt(self, text: str, key: int) -> str:
        return "".join(chr((ord(char) + key) % CODE_POINT_RANGE) for char in text)

    def decrypt(self, text: str, key: int) -> str:
        return self.encrypt(text, -key)
