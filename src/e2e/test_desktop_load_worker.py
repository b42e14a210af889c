import importlib.util
from pathlib import Path

import pytest

pytest.importorskip("tkinter")
pytest.importorskip("customtkinter")

APP_PATH = Path(__file__).resolve().parents[2] / "app.py"


def _load_app_module():
    spec = importlib.util.spec_from_file_location("fuzzyfind_desktop_app", APP_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class _FailingEngine:
    def load(self, sources):
        raise FileNotFoundError(sources[0])


class _AppStub:
    """Stands in for the window: records scheduled callbacks instead of running a Tk loop."""

    def __init__(self):
        self._engine = _FailingEngine()
        self.scheduled = []
        self.errors = []

    def after(self, ms, fn):
        self.scheduled.append(fn)

    def _on_load_error(self, exc):
        self.errors.append(exc)


def test_load_failure_is_reported_on_the_event_loop():
    app_module = _load_app_module()
    stub = _AppStub()

    app_module.FuzzyFinderApp._load_worker(stub, "missing.txt")
    assert stub.errors == []          # nothing runs until the loop picks it up

    for fn in stub.scheduled:
        fn()
    assert len(stub.errors) == 1
    assert isinstance(stub.errors[0], FileNotFoundError)
