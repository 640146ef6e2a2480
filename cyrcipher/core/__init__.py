"""
CyrCipher Core Module
======================

Alphabet tables, input normalization, the error taxonomy and the
result models. The engine facade lives in :mod:`cyrcipher.core.engine`
and is imported from there directly.
"""

from cyrcipher.core.alphabet import ALPHABET, ALPHABET_SIZE, LOWERCASE
from cyrcipher.core.errors import (
    CipherError,
    DegenerateKeyError,
    EmptyKeyError,
    EmptyTextError,
    InvalidCipherLengthError,
    InvalidCipherTextCharacterError,
    InvalidCipherTextError,
    InvalidColumnCountError,
    InvalidKeyCharacterError,
    InvalidKeyError,
    InvalidTextCharacterError,
)

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "LOWERCASE",
    "CipherError",
    "DegenerateKeyError",
    "EmptyKeyError",
    "EmptyTextError",
    "InvalidCipherLengthError",
    "InvalidCipherTextCharacterError",
    "InvalidCipherTextError",
    "InvalidColumnCountError",
    "InvalidKeyCharacterError",
    "InvalidKeyError",
    "InvalidTextCharacterError",
]
