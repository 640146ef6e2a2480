"""
CyrCipher Configuration Management
===================================

Centralized configuration for the CyrCipher toolkit using Python
dataclasses and TOML-based persistence.

Every section falls back to its dataclass defaults, so a partial (or
absent) ``config.toml`` is always valid.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Cipher-Specific Configs ========================


@dataclass(frozen=False, slots=True)
class ShiftConfig:
    """Defaults for the shift (Gronsfeld) cipher.

    ``default_key`` is used when the CLI is called without ``--key``;
    an empty string means the key must always be given explicitly.
    """

    default_key: str = ""


@dataclass(frozen=False, slots=True)
class TableConfig:
    """Defaults for the columnar transposition cipher.

    ``default_cols`` of 0 means there is no default column count.
    ``strict_length`` only accepts texts that fill the grid exactly.
    """

    default_cols: int = 0
    strict_length: bool = False


@dataclass(frozen=False, slots=True)
class CheckConfig:
    """Sample texts for the round-trip ``check`` command."""

    samples: list[str] = field(
        default_factory=lambda: [
            "ПРИВЕТ",
            "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ",
            "СЕКРЕТНОЕСООБЩЕНИЕ",
            "Привет, Мир!",
        ]
    )


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Settings shared by every command: logging and the default cipher."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    default_cipher: str = "shift"
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class CyrConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = CyrConfig.load()                  # from default path
        >>> config = CyrConfig.load("custom.toml")     # from custom path
        >>> config.table.default_cols
        0
        >>> config.global_settings.default_cipher
        'shift'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    shift: ShiftConfig = field(default_factory=ShiftConfig)
    table: TableConfig = field(default_factory=TableConfig)
    check: CheckConfig = field(default_factory=CheckConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> CyrConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`CyrConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            shift=cls._build_section(ShiftConfig, raw.get("shift", {})),
            table=cls._build_section(TableConfig, raw.get("table", {})),
            check=cls._build_section(CheckConfig, raw.get("check", {})),
        )

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
