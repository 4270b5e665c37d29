"""Core cipher framework.

This module provides the base class every cipher strategy derives from.
A strategy is stateless: it only carries class-level discovery metadata and
the ``encrypt``/``decrypt`` transformations.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict

from encrypt_decrypt.models import Algorithm, Mode

logger = logging.getLogger(__name__)


class CipherStrategy(BaseModel):
    """Base class for all cipher strategies.

    Subclasses declare which :class:`Algorithm` they implement and provide
    :meth:`encrypt` and :meth:`decrypt`. :meth:`apply` dispatches on the mode.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "title": "Cipher Strategy",
            "description": "Base model for text ciphers",
        },
    )

    # Class-level metadata for plugin discovery
    algorithm: ClassVar[Optional[Algorithm]] = None
    version: ClassVar[str] = "1.0.0"
    description: ClassVar[str] = "Base cipher strategy"

    @classmethod
    def name(cls) -> str:
        """Auto-derive the cipher identifier from the class name."""
        return cls.__name__

    @abstractmethod
    def encrypt(self, text: str, key: int) -> str:
        """Encrypt ``text`` with ``key``.

        :param str text: Message to encrypt.
        :param int key: Shift to apply, of any sign.

        :return str: The encrypted message.
        """

    @abstractmethod
    def decrypt(self, text: str, key: int) -> str:
        """Decrypt ``text`` with ``key``.

        :param str text: Message to decrypt.
        :param int key: Shift used to encrypt the message.

        :return str: The decrypted message.
        """

    def apply(self, text: str, key: int, mode: Mode | str) -> str:
        """Encrypt or decrypt ``text`` depending on ``mode``.

        :param str text: Message to transform.
        :param int key: Shift to apply.
        :param Mode | str mode: Direction, as a :class:`Mode` or its string form.

        :raises InvalidModeError: If ``mode`` is neither encrypt nor decrypt.
        """
        mode = Mode.parse(mode)
        logger.debug(f"Applying {self.name()} ({mode.name.lower()}) with key {key}")
        if mode is Mode.ENCRYPT:
            return self.encrypt(text, key)
        return self.decrypt(text, key)

    @classmethod
    def get_schema_info(cls) -> Dict[str, Any]:
        """Get descriptive information about this cipher."""
        return {
            "name": cls.name(),
            "algorithm": cls.algorithm.value if cls.algorithm else None,
            "version": cls.version,
            "description": cls.description,
        }
