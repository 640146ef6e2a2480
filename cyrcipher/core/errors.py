"""
CyrCipher Errors
=================

Single error family raised by the alphabet ciphers. Every failure is a
:class:`CipherError` carrying a human-readable ``reason`` and a stable
``kind`` tag, so callers can either catch the whole family or a specific
branch of it::

    CipherError
    ├── InvalidKeyError
    │   ├── EmptyKeyError
    │   ├── InvalidKeyCharacterError
    │   ├── DegenerateKeyError
    │   └── InvalidColumnCountError
    ├── EmptyTextError
    │   └── InvalidTextCharacterError
    └── InvalidCipherTextError
        ├── InvalidCipherTextCharacterError
        └── InvalidCipherLengthError
"""

from __future__ import annotations

from typing import ClassVar


class CipherError(ValueError):
    """Base class for every validation failure in the cipher core.

    Attributes:
        reason: Human-readable explanation shown to the user.
        kind:   Stable machine-readable tag for the failure.
    """

    kind: ClassVar[str] = "cipher_error"
    default_reason: ClassVar[str] = "Cipher error"

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


# -- Key / construction failures ---------------------------------------------


class InvalidKeyError(CipherError):
    kind = "invalid_key"
    default_reason = "Invalid key"


class EmptyKeyError(InvalidKeyError):
    kind = "empty_key"
    default_reason = "Empty key"


class InvalidKeyCharacterError(InvalidKeyError):
    kind = "invalid_key_character"
    default_reason = "Key contains a symbol outside the alphabet"


class DegenerateKeyError(InvalidKeyError):
    kind = "degenerate_key"
    default_reason = "Degenerate key"


class InvalidColumnCountError(InvalidKeyError):
    kind = "invalid_column_count"
    default_reason = "Column count must be an integer greater than 1"


# -- Open text failures -------------------------------------------------------


class EmptyTextError(CipherError):
    kind = "empty_text"
    default_reason = "Empty text"


class InvalidTextCharacterError(EmptyTextError):
    """Open text with no alphabet letters left after normalization."""

    kind = "invalid_text_character"
    default_reason = "Open text contains no alphabet letters"


# -- Cipher text failures -----------------------------------------------------


class InvalidCipherTextError(CipherError):
    kind = "invalid_cipher_text"
    default_reason = "Invalid cipher text"


class InvalidCipherTextCharacterError(InvalidCipherTextError):
    kind = "invalid_cipher_text_character"
    default_reason = "Cipher text must contain only uppercase alphabet letters"


class InvalidCipherLengthError(InvalidCipherTextError):
    kind = "invalid_cipher_length"
    default_reason = "Text length does not fit the column count"


__all__ = [
    "CipherError",
    "InvalidKeyError",
    "EmptyKeyError",
    "InvalidKeyCharacterError",
    "DegenerateKeyError",
    "InvalidColumnCountError",
    "EmptyTextError",
    "InvalidTextCharacterError",
    "InvalidCipherTextError",
    "InvalidCipherTextCharacterError",
    "InvalidCipherLengthError",
]
