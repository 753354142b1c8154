"""Тесты исключений GLMY."""

from __future__ import annotations

from pathlib import Path

import pytest

from glmy.exceptions import (
    CONFIG_UNAVAILABLE_MESSAGE,
    HOME_UNAVAILABLE_MESSAGE,
    ConfigUnavailableError,
    DirectoryListingError,
    GLMYError,
    HomeUnavailableError,
)


def test_base_error_logs_details(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = GLMYError("boom", details={"key": "value"})
    assert str(error) == "boom"
    assert "boom" in caplog.text
    assert "value" in caplog.text


def test_home_unavailable_has_fixed_message() -> None:
    error = HomeUnavailableError()
    assert error.message == HOME_UNAVAILABLE_MESSAGE
    assert error.details == {}


def test_config_unavailable_hides_reason(tmp_path: Path) -> None:
    error = ConfigUnavailableError(tmp_path / "config.json", "Expecting value")
    assert error.message == CONFIG_UNAVAILABLE_MESSAGE
    assert error.reason == "Expecting value"
    assert error.details == {}


def test_listing_error_exposes_reason_and_path(tmp_path: Path) -> None:
    error = DirectoryListingError(tmp_path, "Permission denied")
    assert error.message == "Permission denied"
    assert error.details == {"path": str(tmp_path)}
