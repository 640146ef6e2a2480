"""
CyrCipher Engine
=================

Facade between the command-line front end and the cipher engines.
:class:`CipherEngine` turns a cipher name and a key string into a cipher
instance, runs encrypt/decrypt calls, and performs round-trip self
checks, logging every failure with its error kind.

Cipher errors raised by :meth:`CipherEngine.encrypt` and
:meth:`CipherEngine.decrypt` propagate to the caller unchanged; only
:meth:`CipherEngine.check` converts them into a failed
:class:`~cyrcipher.core.models.CheckResult`.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from shared.config import CyrConfig
from shared.logger import CyrLogger

from cyrcipher.ciphers.shift import ShiftCipher
from cyrcipher.ciphers.transposition import TranspositionCipher
from cyrcipher.core.alphabet import LOWERCASE, index_of
from cyrcipher.core.errors import (
    CipherError,
    InvalidCipherTextCharacterError,
    InvalidColumnCountError,
)
from cyrcipher.core.models import (
    CheckReport,
    CheckResult,
    CipherKind,
    Operation,
    OperationResult,
)
from cyrcipher.core.normalizer import normalize_open_text

Cipher = Union[ShiftCipher, TranspositionCipher]


class CipherEngine:
    """Builds ciphers from CLI-style arguments and runs operations on them.

    Usage::

        engine = CipherEngine()
        result = engine.encrypt("shift", "Б", "всем привет")
        result.output_text                       # 'ГТЁНРСЙГЁУ'
        report = engine.run_checks("table", "3", ["ПРИВЕТ", "Мир"])
        report.failed                            # 0

    Attributes:
        config: CyrCipher configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[CyrConfig] = None) -> None:
        self.config = config or CyrConfig()
        settings = self.config.global_settings
        self.logger = CyrLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    def build(self, kind: CipherKind | str, key: str) -> Cipher:
        """Create a cipher from a key string.

        The shift cipher takes the key letters as-is; the table cipher
        parses the key as a column count.

        Raises:
            ValueError: *kind* is not a known cipher.
            CipherError: The key is rejected by the cipher.
        """
        kind = CipherKind(kind)
        with self.logger.operation(f"{kind.value}.build"):
            try:
                if kind is CipherKind.SHIFT:
                    cipher: Cipher = ShiftCipher(key)
                else:
                    cipher = TranspositionCipher(
                        self._parse_cols(key),
                        strict_length=self.config.table.strict_length,
                    )
            except CipherError as exc:
                self.logger.info(
                    "Key rejected: %s", exc.reason, kind=exc.kind
                )
                raise
            self.logger.debug("Cipher ready", cipher=kind.value)
            return cipher

    @staticmethod
    def _parse_cols(key: str) -> int:
        try:
            return int(key.strip())
        except ValueError:
            raise InvalidColumnCountError(
                f"Invalid key: column count must be an integer, got {key!r}"
            ) from None

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    def encrypt(
        self, kind: CipherKind | str, key: str, text: str
    ) -> OperationResult:
        """Encrypt *text*; cipher errors propagate."""
        return self._run(Operation.ENCRYPT, self.build(kind, key), text)

    def decrypt(
        self, kind: CipherKind | str, key: str, text: str
    ) -> OperationResult:
        """Decrypt *text*; cipher errors propagate."""
        return self._run(Operation.DECRYPT, self.build(kind, key), text)

    def apply(
        self, cipher: Cipher, operation: Operation | str, text: str
    ) -> OperationResult:
        """Run *operation* on an already-built cipher.

        Used by the interactive shell, which builds its cipher once and
        reuses it for every command.
        """
        return self._run(Operation(operation), cipher, text)

    def _run(
        self, operation: Operation, cipher: Cipher, text: str
    ) -> OperationResult:
        kind = self.kind_of(cipher)
        with self.logger.operation(f"{kind.value}.{operation.value}"):
            func = (
                cipher.encrypt if operation is Operation.ENCRYPT
                else cipher.decrypt
            )
            try:
                output = func(text)
            except CipherError as exc:
                self.logger.info(
                    "%s failed: %s",
                    operation.value.capitalize(),
                    exc.reason,
                    kind=exc.kind,
                    length=len(text),
                )
                raise

            self.logger.debug(
                "%s done", operation.value.capitalize(),
                input_length=len(text), output_length=len(output),
            )
            return OperationResult(
                cipher=kind,
                operation=operation,
                key=self.describe_key(cipher),
                input_text=text,
                output_text=output,
                input_length=len(text),
                output_length=len(output),
            )

    # ------------------------------------------------------------------ #
    #  Round-trip checks
    # ------------------------------------------------------------------ #

    def check(
        self,
        kind: CipherKind | str,
        key: str,
        text: str,
        *,
        corrupt: bool = False,
    ) -> CheckResult:
        """Encrypt then decrypt *text* and compare with its normalized form.

        With *corrupt* set, the first ciphertext letter is lower-cased
        before decryption, and the check passes only if decryption
        refuses it with :class:`InvalidCipherTextCharacterError`.

        Never raises :class:`CipherError`; failures are reported in the
        returned result.
        """
        kind = CipherKind(kind)
        result = CheckResult(cipher=kind, key=key, text=text, corrupted=corrupt)

        try:
            cipher = self.build(kind, key)
            result.normalized = normalize_open_text(text)
            cipher_text = cipher.encrypt(text)
            if corrupt:
                cipher_text = self._corrupt(cipher_text)
            result.cipher_text = cipher_text
            result.decrypted = cipher.decrypt(cipher_text)
        except CipherError as exc:
            result.error = exc.reason
            result.error_kind = exc.kind
            # A damaged ciphertext is supposed to be refused
            result.passed = (
                corrupt
                and bool(result.cipher_text)
                and isinstance(exc, InvalidCipherTextCharacterError)
            )
            return result

        result.passed = not corrupt and result.decrypted == result.normalized
        if result.decrypted != result.normalized:
            self.logger.error(
                "Round trip mismatch", cipher=kind.value, key=key
            )
        return result

    def run_checks(
        self,
        kind: CipherKind | str,
        key: str,
        texts: Iterable[str],
        *,
        corrupt: bool = False,
    ) -> CheckReport:
        """Run :meth:`check` for every text and collect the results."""
        return CheckReport(
            results=[self.check(kind, key, t, corrupt=corrupt) for t in texts]
        )

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def kind_of(cipher: Cipher) -> CipherKind:
        if isinstance(cipher, ShiftCipher):
            return CipherKind.SHIFT
        return CipherKind.TABLE

    @staticmethod
    def describe_key(cipher: Cipher) -> str:
        if isinstance(cipher, ShiftCipher):
            return cipher.key
        return str(cipher.cols)

    @staticmethod
    def _corrupt(cipher_text: str) -> str:
        """Lower-case the first letter of a ciphertext."""
        first = LOWERCASE[index_of(cipher_text[0])]
        return first + cipher_text[1:]
