"""
CyrCipher Engines
==================

The two alphabet ciphers. Each engine is immutable once constructed:
the key is validated in the constructor and every ``encrypt`` /
``decrypt`` call is a pure function of its input.
"""

from cyrcipher.ciphers.shift import ShiftCipher
from cyrcipher.ciphers.transposition import TranspositionCipher

__all__ = [
    "ShiftCipher",
    "TranspositionCipher",
]
