"""
Cyrillic Alphabet
==================

The fixed 33-letter Russian alphabet shared by every CyrCipher engine,
together with the symbol/index lookups the ciphers compute with.

The ordering places "Ё" directly after "Е", so shifting "Е" by one
yields "Ё" and shifting "Ё" by one yields "Ж".
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

ALPHABET: str = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
LOWERCASE: str = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
ALPHABET_SIZE: int = len(ALPHABET)

if ALPHABET_SIZE != 33 or len(LOWERCASE) != ALPHABET_SIZE:
    raise RuntimeError("Cyrillic alphabet tables are inconsistent")

# Read-only symbol -> position table
ALPHA_INDEX: Mapping[str, int] = MappingProxyType(
    {symbol: pos for pos, symbol in enumerate(ALPHABET)}
)

_FOLD_TABLE = str.maketrans(LOWERCASE, ALPHABET)


def is_letter(symbol: str) -> bool:
    """Return ``True`` if *symbol* is an uppercase alphabet letter."""
    return symbol in ALPHA_INDEX


def fold_case(text: str) -> str:
    """Map lowercase Cyrillic letters to uppercase, leaving the rest as is."""
    return text.translate(_FOLD_TABLE)


def index_of(symbol: str) -> int:
    """Position of an uppercase letter in :data:`ALPHABET`.

    Raises:
        KeyError: If *symbol* is not an uppercase alphabet letter.
    """
    return ALPHA_INDEX[symbol]


def symbol_at(index: int) -> str:
    """Letter at *index*, wrapping modulo the alphabet size."""
    return ALPHABET[index % ALPHABET_SIZE]


def to_indices(text: str) -> tuple[int, ...]:
    """Convert validated uppercase text to a sequence of positions."""
    return tuple(ALPHA_INDEX[symbol] for symbol in text)


def from_indices(indices: Iterable[int]) -> str:
    """Convert a sequence of positions back to text."""
    return "".join(symbol_at(i) for i in indices)
