"""
Transposition Cipher
=====================

Columnar route cipher. Letters are written into a grid row by row,
left to right, and read out column by column starting from the *last*
column, top to bottom within each column.

Only ``n mod cols`` columns are complete when the text length is not a
multiple of the column count. The trailing cells of the last row stay
empty (no filler letter), so decryption rebuilds the column heights
from the text length alone::

    rows = ceil(n / cols)
    full = n mod cols or cols
    height(c) = rows if c < full else rows - 1

The grid is never materialized: column ``c`` is the stride slice
``text[c::cols]``, and columns past the text length are empty, so the
cost depends on the text length only, however large ``cols`` is.

Example with ``cols = 3`` and ``"ВСЕМПРИВЕТ"``::

    В С Е
    М П Р      columns 2, 1, 0  ->  ЕРЕ СПВ ВМИТ
    И В Е
    Т
"""

from __future__ import annotations

from cyrcipher.core.errors import (
    InvalidCipherLengthError,
    InvalidColumnCountError,
)
from cyrcipher.core.normalizer import normalize_cipher_text, normalize_open_text


class TranspositionCipher:
    """Route cipher keyed by a column count.

    Usage::

        cipher = TranspositionCipher(3)
        cipher.encrypt("Всем привет")   # 'ЕРЕСПВВМИТ'
        cipher.decrypt("ЕРЕСПВВМИТ")    # 'ВСЕМПРИВЕТ'

    Args:
        cols: Number of grid columns, an integer greater than 1.
        strict_length: Only accept texts that fill the grid exactly,
            i.e. whose normalized length is a multiple of *cols*.

    Raises:
        InvalidColumnCountError: *cols* is not an integer greater than 1.
    """

    __slots__ = ("_cols", "_strict_length")

    def __init__(self, cols: int, *, strict_length: bool = False) -> None:
        if isinstance(cols, bool) or not isinstance(cols, int):
            raise InvalidColumnCountError(
                f"Invalid key: column count must be an integer, got {cols!r}"
            )
        if cols <= 1:
            raise InvalidColumnCountError(
                f"Invalid key: column count must be greater than 1, got {cols}"
            )
        self._cols = cols
        self._strict_length = strict_length

    @property
    def cols(self) -> int:
        """Number of grid columns."""
        return self._cols

    @property
    def strict_length(self) -> bool:
        return self._strict_length

    # ------------------------------------------------------------------ #
    #  Public API
    # ------------------------------------------------------------------ #

    def encrypt(self, plain_text: str) -> str:
        """Encrypt open text (case-folded, non-letters dropped).

        Raises:
            EmptyTextError: The text is empty or holds no letters.
            InvalidCipherLengthError: ``strict_length`` is set and the
                letter count is not a multiple of the column count.
        """
        text = normalize_open_text(plain_text)
        self._check_length(text)

        # Column c holds positions c, c + cols, c + 2*cols, ...
        return "".join(
            text[col::self._cols]
            for col in range(self._used_cols(len(text)) - 1, -1, -1)
        )

    def decrypt(self, cipher_text: str) -> str:
        """Decrypt canonical cipher text.

        Raises:
            EmptyTextError: The text is empty.
            InvalidCipherTextCharacterError: The text holds anything other
                than uppercase letters.
            InvalidCipherLengthError: ``strict_length`` is set and the
                length is not a multiple of the column count.
        """
        text = normalize_cipher_text(cipher_text)
        self._check_length(text)

        length = len(text)
        rows = -(-length // self._cols)
        full_cols = length % self._cols or self._cols

        out = [""] * length
        pos = 0
        for col in range(self._used_cols(length) - 1, -1, -1):
            height = rows if col < full_cols else rows - 1
            out[col::self._cols] = text[pos:pos + height]
            pos += height
        return "".join(out)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _used_cols(self, length: int) -> int:
        """Columns that hold at least one letter."""
        return min(self._cols, length)

    def _check_length(self, text: str) -> None:
        if self._strict_length and len(text) % self._cols:
            raise InvalidCipherLengthError(
                f"Invalid text length: {len(text)} is not a multiple "
                f"of {self._cols} columns"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranspositionCipher):
            return NotImplemented
        return (self._cols, self._strict_length) == (
            other._cols,
            other._strict_length,
        )

    def __hash__(self) -> int:
        return hash(("table", self._cols, self._strict_length))

    def __repr__(self) -> str:
        return (
            f"TranspositionCipher(cols={self._cols}, "
            f"strict_length={self._strict_length})"
        )
