from __future__ import annotations

import pytest

from cyrcipher.core import errors


@pytest.mark.parametrize(
    "cls, parent",
    [
        (errors.EmptyKeyError, errors.InvalidKeyError),
        (errors.InvalidKeyCharacterError, errors.InvalidKeyError),
        (errors.DegenerateKeyError, errors.InvalidKeyError),
        (errors.InvalidColumnCountError, errors.InvalidKeyError),
        (errors.InvalidTextCharacterError, errors.EmptyTextError),
        (errors.InvalidCipherTextCharacterError, errors.InvalidCipherTextError),
        (errors.InvalidCipherLengthError, errors.InvalidCipherTextError),
    ],
)
def test_hierarchy(cls, parent):
    assert issubclass(cls, parent)
    assert issubclass(cls, errors.CipherError)
    assert issubclass(cls, ValueError)


def test_kinds_are_unique():
    kinds = [getattr(errors, name).kind for name in errors.__all__]
    assert len(kinds) == len(set(kinds))


def test_reason_defaults_and_overrides():
    assert errors.EmptyKeyError().reason == "Empty key"
    exc = errors.DegenerateKeyError("too many zeros")
    assert exc.reason == "too many zeros"
    assert str(exc) == "too many zeros"
