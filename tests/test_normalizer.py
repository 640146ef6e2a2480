from __future__ import annotations

import pytest

from cyrcipher.core.errors import (
    EmptyKeyError,
    EmptyTextError,
    InvalidCipherTextCharacterError,
    InvalidKeyCharacterError,
    InvalidTextCharacterError,
)
from cyrcipher.core.normalizer import (
    normalize_cipher_text,
    normalize_key,
    normalize_open_text,
)


class TestKey:
    def test_folds_case(self):
        assert normalize_key("бВг") == "БВГ"

    def test_empty(self):
        with pytest.raises(EmptyKeyError):
            normalize_key("")

    @pytest.mark.parametrize("key", ["Б1", "Б,В", "Б В", " Б", "Б\t", "BEE"])
    def test_rejects_non_letters(self, key):
        with pytest.raises(InvalidKeyCharacterError):
            normalize_key(key)

    def test_reason_points_at_symbol(self):
        with pytest.raises(InvalidKeyCharacterError) as info:
            normalize_key("АБ7")
        assert "'7'" in info.value.reason
        assert "position 2" in info.value.reason

    def test_composes_decomposed_yo(self):
        assert normalize_key("е\u0308") == "Ё"


class TestOpenText:
    def test_strips_everything_but_letters(self):
        assert normalize_open_text("С Новым 2025 Годом!") == "СНОВЫМГОДОМ"

    def test_keeps_yo(self):
        assert normalize_open_text("ёлка") == "ЁЛКА"

    def test_composes_decomposed_letters(self):
        assert normalize_open_text("Е\u0308лка") == "ЁЛКА"
        assert normalize_open_text("и\u0306од") == "ЙОД"

    def test_empty(self):
        with pytest.raises(EmptyTextError) as info:
            normalize_open_text("")
        assert not isinstance(info.value, InvalidTextCharacterError)

    def test_no_letters(self):
        with pytest.raises(InvalidTextCharacterError):
            normalize_open_text("1234+5678=6912")

    def test_no_letters_is_also_empty_text(self):
        with pytest.raises(EmptyTextError):
            normalize_open_text("hello, world")


class TestCipherText:
    def test_accepts_canonical_text(self):
        assert normalize_cipher_text("ГТЁНРСЙГЁУ") == "ГТЁНРСЙГЁУ"

    def test_composes_decomposed_yo(self):
        assert normalize_cipher_text("ГТЕ\u0308") == "ГТЁ"

    def test_empty(self):
        with pytest.raises(EmptyTextError):
            normalize_cipher_text("")

    @pytest.mark.parametrize(
        "text",
        ["гтёнрсйГЁУ", "ГТЁ НРС", "ГТЁ2025", "ГТЁ,НРС", "ГТЁ\n", "ГТЁX"],
    )
    def test_rejects_anything_else(self, text):
        with pytest.raises(InvalidCipherTextCharacterError):
            normalize_cipher_text(text)
