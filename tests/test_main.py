"""Тесты вспомогательных функций модуля main."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from glmy.bridge import CommandBridge
from glmy.filesystem.local import LocalFileSystem
from glmy.main import initialize_workdir


class FixedHomeFileSystem(LocalFileSystem):
    def __init__(self, home: Optional[Path]) -> None:
        super().__init__()
        self._home = home

    def home_dir(self) -> Optional[Path]:
        return self._home

    def current_dir(self) -> Optional[Path]:
        return None


class DummySession:
    """Подменяет SessionBootstrapper и запоминает вызовы."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def initialize(self, home_candidate: str = "") -> str:
        self.calls.append(("initialize", home_candidate))
        return json.dumps({"status": "success", "result": {"version": "0.1.0"}})

    def read_dir(self, subpath: str = "") -> str:
        self.calls.append(("read_dir", subpath))
        return json.dumps({"status": "error", "message": "missing"})


def test_initialize_workdir_creates_structure(tmp_path: Path) -> None:
    home = initialize_workdir(FixedHomeFileSystem(tmp_path))

    assert home is not None
    assert home.name == "GLMY"
    assert (home / "notes" / "start.md").exists()
    logging.getLogger("glmy.test").info("workdir entry")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "workdir entry" in (home / "logs" / "app.log").read_text(encoding="utf-8")


def test_initialize_workdir_with_explicit_home(tmp_path: Path) -> None:
    custom = tmp_path / "custom"
    custom.mkdir()

    assert initialize_workdir(FixedHomeFileSystem(None), str(custom)) == custom
    assert (custom / "todos").is_dir()


def test_initialize_workdir_without_home() -> None:
    assert initialize_workdir(FixedHomeFileSystem(None)) is None


def test_bridge_delegates_and_emits() -> None:
    session = DummySession()
    bridge = CommandBridge(session)  # type: ignore[arg-type]
    events: List[Tuple[str, str]] = []
    bridge.responded.connect(lambda method, response: events.append((method, response)))

    init_response = bridge.initialize("/tmp/home")
    list_response = bridge.read_dir("notes")

    assert session.calls == [("initialize", "/tmp/home"), ("read_dir", "notes")]
    assert events == [("initialize", init_response), ("read_dir", list_response)]
    assert json.loads(list_response)["status"] == "error"
