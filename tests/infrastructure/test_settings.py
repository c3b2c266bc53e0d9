"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.constants import DEFAULT_COMPANY_NAME, DEFAULT_MONTHLY_WINDOW
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import ReportSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in (
        "REPORT_COMPANY_NAME",
        "REPORT_MONTHLY_WINDOW",
        "REPORT_OUTPUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(tmp_path) -> None:
    """Unset variables fall back to the defaults."""
    settings = ReportSettings.from_env()

    assert settings.company_name == DEFAULT_COMPANY_NAME
    assert settings.monthly_window == DEFAULT_MONTHLY_WINDOW
    assert settings.output_dir == tmp_path / "reports"


def test_from_env_reads_overrides(monkeypatch, tmp_path: Path) -> None:
    """Environment values override every default."""
    monkeypatch.setenv("REPORT_COMPANY_NAME", "Acme Fleet")
    monkeypatch.setenv("REPORT_MONTHLY_WINDOW", "12")
    monkeypatch.setenv("REPORT_OUTPUT_DIR", str(tmp_path / "out"))

    settings = ReportSettings.from_env()

    assert settings.company_name == "Acme Fleet"
    assert settings.monthly_window == 12
    assert settings.output_dir == (tmp_path / "out").resolve()


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_window_falls_back_with_warning(raw) -> None:
    """Invalid windows are replaced by the default and logged."""
    logger = MagicMock()

    assert ReportSettings._parse_window(raw, logger=logger) == DEFAULT_MONTHLY_WINDOW
    logger.warning.assert_called_once()
