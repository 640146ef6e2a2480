"""
CyrCipher Console Interface
============================

Rich-powered console abstraction used by the CLI: banner, section
headers, coloured status messages and tables with one consistent
palette.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_CYR_THEME = Theme(
    {
        "cyr.banner": "bold bright_cyan",
        "cyr.section": "bold bright_magenta",
        "cyr.success": "bold green",
        "cyr.warning": "bold yellow",
        "cyr.error": "bold red",
        "cyr.info": "bold bright_blue",
        "cyr.dim": "dim white",
        "cyr.highlight": "bold bright_white",
    }
)

_BANNER_TITLE = "CyrCipher"
_TAGLINE = "Classical ciphers over the Cyrillic alphabet"
_ALPHABET_LINE = "А Б В Г Д Е Ё Ж З И Й К Л М Н О П Р С Т У Ф Х Ц Ч Ш Щ Ъ Ы Ь Э Ю Я"


class CyrConsole:
    """Unified console interface for CyrCipher commands.

    Wraps :class:`rich.console.Console`.

    Usage::

        con = CyrConsole()
        con.banner()
        con.section("Encryption")
        con.success("Round trip OK")
    """

    def __init__(self) -> None:
        self._console = Console(theme=_CYR_THEME, highlight=False)

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the CyrCipher banner panel."""
        body = Text()
        body.append(f"{_BANNER_TITLE}\n", style="cyr.banner")
        body.append(f"{_TAGLINE}\n", style="cyr.highlight")
        body.append(f"{_ALPHABET_LINE}\n", style="cyr.dim")
        body.append(f"Version: {version}", style="cyr.dim")
        self._console.print(
            Panel(Align.center(body), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="cyr.section", characters="─")

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[cyr.success][✔] OK:[/cyr.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[cyr.warning][⚠] WARNING:[/cyr.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message.

        Markup in *message* is escaped, since reasons may quote arbitrary
        user input.
        """
        text = Text.from_markup("[cyr.error][✘] Error:[/cyr.error] ")
        text.append(message)
        self._console.print(text, soft_wrap=True)

    def info(self, message: str) -> None:
        self._console.print(f"[cyr.info][ℹ][/cyr.info] {message}")

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each cell is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style, overflow="fold")

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)
