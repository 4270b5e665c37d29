"""Cipher strategies and the registry selecting between them.

Importing this package registers the built-in ciphers found in
:mod:`encrypt_decrypt.ciphers.plugins`.
"""

from .core import CipherStrategy
from .registry import (
    CipherRegistry,
    discover_plugins,
    get_registry,
    select_cipher,
)

# Auto-discover plugins on import
discover_plugins()

__all__ = [
    "CipherStrategy",
    "CipherRegistry",
    "discover_plugins",
    "get_registry",
    "select_cipher",
]
