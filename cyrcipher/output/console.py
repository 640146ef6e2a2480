"""
CyrCipher Console Output
=========================

Rich-based rendering of engine results: single encrypt/decrypt
outcomes, cipher errors, and round-trip check reports.
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import CyrConsole
from cyrcipher.core.errors import CipherError
from cyrcipher.core.models import CheckReport, Operation, OperationResult

_OPERATION_LABELS: dict[str, str] = {
    "encrypt": "Encrypted",
    "decrypt": "Decrypted",
}

_CIPHER_LABELS: dict[str, str] = {
    "shift": "Shift (Gronsfeld)",
    "table": "Columnar transposition",
}


class CipherConsoleOutput:
    """Console output formatters for CyrCipher results.

    Usage::

        output = CipherConsoleOutput(CyrConsole())
        output.display_result(engine.encrypt("shift", "Б", "привет"))
        output.display_report(engine.run_checks("table", "3", samples))
    """

    def __init__(self, console: Optional[CyrConsole] = None) -> None:
        self.console = console or CyrConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Single operations
    # ------------------------------------------------------------------ #

    def display_result(self, result: OperationResult, *, verbose: bool = True) -> None:
        """Show one encrypt/decrypt outcome.

        With *verbose* off only the ``Encrypted: ...`` line is printed,
        which is what the interactive shell uses.
        """
        label = _OPERATION_LABELS[result.operation.value]
        line = Text()
        line.append(f"{label}: ", style="bold green")
        line.append(result.output_text, style="bold bright_white")

        if not verbose:
            self._rich.print(line, soft_wrap=True)
            return

        details = Text()
        details.append("Cipher: ", style="bold")
        details.append(f"{_CIPHER_LABELS[result.cipher.value]}\n")
        details.append("Key: ", style="bold")
        details.append(f"{result.key}\n")
        details.append("Input length: ", style="bold")
        details.append(f"{result.input_length}\n")
        details.append("Output length: ", style="bold")
        details.append(f"{result.output_length}")

        title = "Encryption" if result.operation is Operation.ENCRYPT else "Decryption"
        self._rich.print(Panel(details, title=title, border_style="cyan"))
        self._rich.print(line, soft_wrap=True)

    def display_error(self, error: CipherError) -> None:
        self.console.error(error.reason)

    # ------------------------------------------------------------------ #
    #  Round-trip checks
    # ------------------------------------------------------------------ #

    def display_report(self, report: CheckReport) -> None:
        """Render a table of round-trip checks followed by a summary."""
        self.console.section("Round-trip Checks")

        rows = []
        for idx, res in enumerate(report.results, start=1):
            status = "Ok" if res.passed else "Err"
            outcome = res.error or res.decrypted
            rows.append((idx, res.key, res.text, res.cipher_text, outcome, status))

        self.console.table(
            "Results",
            ["#", "Key", "Text", "Cipher text", "Decrypted / error", "Status"],
            rows,
            styles=["dim", "", "", "cyan", "", "bold"],
        )

        summary = f"{report.passed}/{report.total} checks passed"
        if report.failed:
            self.console.warning(summary)
        else:
            self.console.success(summary)
