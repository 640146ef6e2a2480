"""
Text Normalizer
================

Input validation shared by both ciphers. There are three modes, each
with its own policy:

- **key**: case-folded, every symbol must be a letter. Whitespace is
  rejected, never stripped.
- **open text**: case-folded, every non-letter is dropped silently.
  Anything a person types is acceptable as long as one letter survives.
- **cipher text**: strict. The text must already be canonical, i.e.
  uppercase letters only.

All three modes compose the input to Unicode NFC first, so a decomposed
"Е" + U+0308 is read as the single letter "Ё".
"""

from __future__ import annotations

import unicodedata

from cyrcipher.core.alphabet import fold_case, is_letter
from cyrcipher.core.errors import (
    EmptyKeyError,
    EmptyTextError,
    InvalidCipherTextCharacterError,
    InvalidKeyCharacterError,
    InvalidTextCharacterError,
)


def _compose(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def normalize_key(key: str) -> str:
    """Validate and upper-case a letter key.

    Raises:
        EmptyKeyError: *key* is empty.
        InvalidKeyCharacterError: *key* holds whitespace, digits,
            punctuation or non-Cyrillic letters.
    """
    if not key:
        raise EmptyKeyError()

    key = _compose(key)
    folded = fold_case(key)
    for pos, symbol in enumerate(folded):
        if not is_letter(symbol):
            raise InvalidKeyCharacterError(
                f"Invalid key: symbol {key[pos]!r} at position {pos} "
                f"is not a letter of the alphabet"
            )
    return folded


def normalize_open_text(text: str) -> str:
    """Upper-case *text* and drop everything that is not a letter.

    Raises:
        EmptyTextError: *text* is empty.
        InvalidTextCharacterError: no letters remain after filtering.
    """
    if not text:
        raise EmptyTextError("Empty open text")

    normalized = "".join(s for s in fold_case(_compose(text)) if is_letter(s))
    if not normalized:
        raise InvalidTextCharacterError()
    return normalized


def normalize_cipher_text(text: str) -> str:
    """Check that *text* is made of uppercase letters only.

    Raises:
        EmptyTextError: *text* is empty.
        InvalidCipherTextCharacterError: any other symbol is present.
    """
    if not text:
        raise EmptyTextError("Empty cipher text")

    text = _compose(text)
    for pos, symbol in enumerate(text):
        if not is_letter(symbol):
            raise InvalidCipherTextCharacterError(
                f"Invalid cipher text: symbol {symbol!r} at position {pos}"
            )
    return text
