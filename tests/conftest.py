"""Shared fixtures for salvage reward tests."""

import logging
from pathlib import Path
from typing import Callable

import pytest

import salvage_rewards.log as salvage_log

UNITY_HEADER = """%YAML 1.1
%TAG !u! tag:unity3d.com,2011:
--- !u!114 &11400000
"""


def make_asset_text(
    name: str = "SALV_CopperWire",
    currencies: str | None = """
    - m_Currency: {fileID: 11400000, guid: 4f1e0b1c2d3e4f5a6b7c8d9e0f1a2b3c, type: 2}
      m_MinInitialValue: 5
      m_MaxInitialValue: 8
      m_MassBasedValue: 1
""",
) -> str:
    """Build the text of a Unity salvage asset.

    Args:
        name: Value of m_Name
        currencies: Raw YAML placed after "m_AwardedCurrencies:", or None
            to leave the field out
    """
    text = UNITY_HEADER + f"""MonoBehaviour:
  m_ObjectHideFlags: 0
  m_CorrespondingSourceObject: {{fileID: 0}}
  m_GameObject: {{fileID: 0}}
  m_Enabled: 1
  m_Script: {{fileID: 11500000, guid: 0a1b2c3d4e5f60718293a4b5c6d7e8f9, type: 3}}
  m_Name: {name}
  m_EditorClassIdentifier:
  m_Data:
    m_Weight: 0.25
"""
    if currencies is not None:
        text += "    m_AwardedCurrencies:" + currencies
    return text


@pytest.fixture
def write_asset(tmp_path: Path) -> Callable[..., Path]:
    """Write an asset file into tmp_path and return its path."""

    def _write(filename: str, text: str | None = None, **kwargs) -> Path:
        path = tmp_path / filename
        path.write_text(text if text is not None else make_asset_text(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch: pytest.MonkeyPatch):
    """Undo configure_logging() between tests."""
    logger = logging.getLogger(salvage_log.PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(salvage_log, "_configured", False)
    yield
    logger.handlers = handlers
    logger.setLevel(level)
