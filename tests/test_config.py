from __future__ import annotations

import pytest

from shared.config import CyrConfig


def test_defaults_without_file():
    config = CyrConfig.load()
    assert config.global_settings.default_cipher == "shift"
    assert config.global_settings.log_level == "WARNING"
    assert config.table.default_cols == 0
    assert config.check.samples


def test_load_from_toml(tmp_path):
    path = tmp_path / "cyr.toml"
    path.write_text(
        "[global]\n"
        'default_cipher = "table"\n'
        'unknown_key = "ignored"\n'
        "[shift]\n"
        'default_key = "БВГ"\n'
        "[table]\n"
        "default_cols = 4\n"
        "strict_length = true\n"
        "[check]\n"
        'samples = ["МИР"]\n',
        encoding="utf-8",
    )
    config = CyrConfig.load(path)
    assert config.global_settings.default_cipher == "table"
    assert config.global_settings.log_level == "WARNING"
    assert config.shift.default_key == "БВГ"
    assert config.table.default_cols == 4
    assert config.table.strict_length is True
    assert config.check.samples == ["МИР"]


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CyrConfig.load(tmp_path / "nope.toml")
