"""
CyrCipher Data Models
======================

Pydantic models describing what the engine hands back to the CLI:
the outcome of a single encrypt/decrypt call and the outcome of
round-trip self-checks. All models serialise to JSON for
``--output json``.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, computed_field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherKind(str, enum.Enum):
    """Which cipher engine to use."""

    SHIFT = "shift"   # Gronsfeld-style letter key
    TABLE = "table"   # columnar transposition, integer key


class Operation(str, enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ===================================================================== #
#  Operation Models
# ===================================================================== #


class OperationResult(BaseModel):
    """Outcome of one successful encrypt or decrypt call.

    Attributes:
        cipher: Cipher engine used.
        operation: Encrypt or decrypt.
        key: Key as the engine understood it (normalized letters or the
            column count).
        input_text: Text as supplied by the caller.
        output_text: Resulting text.
        input_length: Character length of ``input_text``.
        output_length: Character length of ``output_text``.
        timestamp: UTC time the operation finished.
    """

    cipher: CipherKind
    operation: Operation
    key: str
    input_text: str
    output_text: str
    input_length: int = 0
    output_length: int = 0
    timestamp: datetime = Field(default_factory=_utcnow)


# ===================================================================== #
#  Round-trip Check Models
# ===================================================================== #


class CheckResult(BaseModel):
    """Outcome of an encrypt -> decrypt round trip.

    Attributes:
        cipher: Cipher engine used.
        key: Key string as supplied.
        text: Original open text.
        normalized: Open text after normalization (what decryption
            should reproduce), empty if normalization failed.
        cipher_text: Ciphertext fed to decryption (after corruption, if any).
        decrypted: Decryption output.
        corrupted: Whether the ciphertext was deliberately damaged.
        passed: For a plain check, ``decrypted == normalized`` with no
            error. For a corrupted check, decryption refused the
            damaged ciphertext.
        error: Reason of the first cipher error, if any.
        error_kind: Kind tag of that error.
    """

    cipher: CipherKind
    key: str
    text: str
    normalized: str = ""
    cipher_text: str = ""
    decrypted: str = ""
    corrupted: bool = False
    passed: bool = False
    error: Optional[str] = None
    error_kind: Optional[str] = None


class CheckReport(BaseModel):
    """A batch of round-trip checks."""

    results: list[CheckResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return self.total - self.passed
