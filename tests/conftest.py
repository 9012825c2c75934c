# tests/conftest.py
# Isolation fixtures so tests never touch the real config dir or terminal

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("COUNTDOWN_DEBUG", raising=False)
    return tmp_path / "xdg" / "countdown"


class FakeScreen:
    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.width = width
        self.height = height
        self.calls = []

    def size(self):
        return self.width, self.height

    def clear(self):
        self.calls.append(("clear",))

    def write(self, x, y, text):
        self.calls.append(("write", x, y, text))

    def flush(self):
        self.calls.append(("flush",))

    @property
    def writes(self):
        return [call[1:] for call in self.calls if call[0] == "write"]


@pytest.fixture
def screen():
    return FakeScreen()
