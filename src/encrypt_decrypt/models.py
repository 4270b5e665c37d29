"""
Configuration models for a single encrypt/decrypt invocation.

The command line resolves every option into one frozen :class:`Configuration`
which is then handed to the cipher core.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from encrypt_decrypt.exceptions import InvalidModeError, UnknownAlgorithmError

if TYPE_CHECKING:
    from encrypt_decrypt.ciphers.core import CipherStrategy


class Mode(str, Enum):
    """Direction of the transformation."""

    ENCRYPT = "enc"
    DECRYPT = "dec"

    @classmethod
    def parse(cls, value: Any) -> "Mode":
        """Parse a mode, accepting ``enc``/``encrypt`` and ``dec``/``decrypt``.

        :param value: A :class:`Mode` or its string form, in any case.

        :raises InvalidModeError: If the value names neither direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            mode = _MODE_ALIASES.get(value.strip().lower())
            if mode is not None:
                return mode
        raise InvalidModeError(value)


_MODE_ALIASES = {
    "enc": Mode.ENCRYPT,
    "encrypt": Mode.ENCRYPT,
    "dec": Mode.DECRYPT,
    "decrypt": Mode.DECRYPT,
}


class Algorithm(str, Enum):
    """Closed set of cipher algorithms."""

    SHIFT = "shift"
    UNICODE = "unicode"

    @classmethod
    def parse(cls, value: Any) -> "Algorithm":
        """Parse an algorithm name case-insensitively.

        :raises UnknownAlgorithmError: If the value is not a known algorithm.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            algorithm = _ALGORITHM_ALIASES.get(value.strip().lower())
            if algorithm is not None:
                return algorithm
        raise UnknownAlgorithmError(value, [a.value for a in cls])


_ALGORITHM_ALIASES = {
    "shift": Algorithm.SHIFT,
    "unicode": Algorithm.UNICODE,
    "codepoint": Algorithm.UNICODE,
    "code-point": Algorithm.UNICODE,
}


class Configuration(BaseModel):
    """Resolved, immutable configuration of one invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Mode = Field(default=Mode.ENCRYPT, description="Encrypt or decrypt")
    key: int = Field(default=0, description="Shift applied by the cipher")
    algorithm: Algorithm = Field(
        default=Algorithm.SHIFT, description="Cipher used for the transformation"
    )
    text: str = Field(default="", description="Message to transform")

    # InvalidModeError and UnknownAlgorithmError are not ValueErrors,
    # so pydantic lets them through unwrapped.
    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value):
        return Mode.parse(value)

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, value):
        return Algorithm.parse(value)

    def to_runtime(self) -> "CipherStrategy":
        """Instantiate the cipher strategy selected by this configuration."""
        # Import here to avoid circular imports
        from encrypt_decrypt.ciphers.registry import select_cipher

        return select_cipher(self.algorithm)

    def run(self) -> str:
        """Transform :attr:`text` with the selected cipher."""
        return self.to_runtime().apply(self.text, self.key, self.mode)
