"""Тесты нормализации относительных путей."""

from __future__ import annotations

from glmy.utils.paths import normalize_subpath


def test_strips_outer_separators() -> None:
    assert normalize_subpath("/notes/") == "notes"


def test_converts_backslashes() -> None:
    assert normalize_subpath("notes\\daily") == "notes/daily"


def test_root_becomes_empty() -> None:
    assert normalize_subpath("//") == ""


def test_whitespace_is_part_of_the_name() -> None:
    assert normalize_subpath(" notes ") == " notes "
    assert normalize_subpath(" / ") == " / "
