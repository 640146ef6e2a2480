"""
Shift Cipher
=============

Gronsfeld-style polyalphabetic substitution over the 33-letter Cyrillic
alphabet. Each letter key symbol becomes a shift equal to its alphabet
position ("А" = 0, "Б" = 1, ..., "Я" = 32) and the key is reused
cyclically along the text:

    encrypt:  c[p] = (t[p] + k[p mod len(k)]) mod 33
    decrypt:  t[p] = (c[p] + 33 - k[p mod len(k)]) mod 33

Keys dominated by the zero-shift letter "А" leave most of the text
unchanged and are refused as degenerate.

References:
    - Kahn, D. (1996). The Codebreakers. Scribner. (Gronsfeld cipher)
"""

from __future__ import annotations

from cyrcipher.core.alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    from_indices,
    to_indices,
)
from cyrcipher.core.errors import DegenerateKeyError
from cyrcipher.core.normalizer import (
    normalize_cipher_text,
    normalize_key,
    normalize_open_text,
)


class ShiftCipher:
    """Modular-addition cipher keyed by a sequence of Cyrillic letters.

    Usage::

        cipher = ShiftCipher("Б")
        cipher.encrypt("всем привет")   # 'ГТЁНРСЙГЁУ'
        cipher.decrypt("ГТЁНРСЙГЁУ")    # 'ВСЕМПРИВЕТ'

    Args:
        key: Key letters. Lowercase is folded to uppercase; whitespace and
            any other non-letter symbol are rejected.

    Raises:
        EmptyKeyError: The key is empty.
        InvalidKeyCharacterError: The key holds a non-letter symbol.
        DegenerateKeyError: More than half of the key is the letter "А".
    """

    ZERO_SHIFT_SYMBOL: str = ALPHABET[0]

    __slots__ = ("_key", "_key_sequence")

    def __init__(self, key: str) -> None:
        normalized = normalize_key(key)
        self._check_degenerate(normalized)
        self._key = normalized
        self._key_sequence = to_indices(normalized)

    @property
    def key(self) -> str:
        """Normalized (uppercase) key."""
        return self._key

    @property
    def key_sequence(self) -> tuple[int, ...]:
        """Per-position shifts derived from the key."""
        return self._key_sequence

    def encrypt(self, plain_text: str) -> str:
        """Encrypt open text.

        The text is case-folded and stripped of every non-letter first,
        so ``"Привет, друг"`` encrypts the same as ``"ПРИВЕТДРУГ"``.

        Raises:
            EmptyTextError: The text is empty or holds no letters.
        """
        indices = to_indices(normalize_open_text(plain_text))
        return from_indices(
            (value + self._shift(pos)) % ALPHABET_SIZE
            for pos, value in enumerate(indices)
        )

    def decrypt(self, cipher_text: str) -> str:
        """Decrypt canonical cipher text.

        Raises:
            EmptyTextError: The text is empty.
            InvalidCipherTextCharacterError: The text holds anything other
                than uppercase letters.
        """
        indices = to_indices(normalize_cipher_text(cipher_text))
        return from_indices(
            (value + ALPHABET_SIZE - self._shift(pos)) % ALPHABET_SIZE
            for pos, value in enumerate(indices)
        )

    def _shift(self, pos: int) -> int:
        return self._key_sequence[pos % len(self._key_sequence)]

    @classmethod
    def _check_degenerate(cls, key: str) -> None:
        zero_count = key.count(cls.ZERO_SHIFT_SYMBOL)
        if 2 * zero_count > len(key):
            raise DegenerateKeyError(
                f"Degenerate key: {zero_count} of {len(key)} positions "
                f"are the zero shift {cls.ZERO_SHIFT_SYMBOL!r}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShiftCipher):
            return NotImplemented
        return self._key_sequence == other._key_sequence

    def __hash__(self) -> int:
        return hash(("shift", self._key_sequence))

    def __repr__(self) -> str:
        return f"ShiftCipher(key={self._key!r})"
