from importlib.metadata import PackageNotFoundError, version

from encrypt_decrypt.exceptions import (
    EncryptDecryptError,
    InvalidModeError,
    UnknownAlgorithmError,
)
from encrypt_decrypt.models import Algorithm, Configuration, Mode

try:
    __version__ = version("encrypt-decrypt")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"

__all__ = [
    "Algorithm",
    "Configuration",
    "EncryptDecryptError",
    "InvalidModeError",
    "Mode",
    "UnknownAlgorithmError",
]
