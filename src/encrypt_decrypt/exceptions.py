"""Exceptions raised by the encrypt-decrypt library.

Library code raises these and never exits the process; the command line
interface decides how they are reported and which exit code is used.
"""


class EncryptDecryptError(Exception):
    """Base class for all encrypt-decrypt errors."""


class InvalidModeError(EncryptDecryptError):
    """The requested mode is neither encrypt nor decrypt."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Invalid mode: {mode!r}. Use 'enc' | 'dec'")


class UnknownAlgorithmError(EncryptDecryptError):
    """The requested algorithm is outside the set of known ciphers."""

    def __init__(self, algorithm, available=None):
        self.algorithm = algorithm
        self.available = list(available or [])
        message = f"Unknown algorithm: {algorithm!r}."
        if self.available:
            message += f" Available: {self.available}"
        super().__init__(message)


class InputSourceError(EncryptDecryptError):
    """The message or the configuration could not be read."""


class OutputSinkError(EncryptDecryptError):
    """The transformed message could not be written."""
