import io

import pytest

from pish.history import HistoryStore
from pish.session import Session, SessionMode


@pytest.fixture
def history(tmp_path):
    return HistoryStore(str(tmp_path / "pish_history"))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def make_session(history):
    def _make(text="", mode=SessionMode.INTERACTIVE):
        return Session(mode, io.StringIO(text), history)

    return _make
