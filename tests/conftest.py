"""Shared fixtures for the CyrCipher test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

import shared.config as config_module
from shared.config import CyrConfig
from cyrcipher.core.engine import CipherEngine


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep a developer's local config.toml out of the tests."""
    monkeypatch.setattr(
        config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "absent.toml"
    )


@pytest.fixture
def engine() -> CipherEngine:
    return CipherEngine(CyrConfig())


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
