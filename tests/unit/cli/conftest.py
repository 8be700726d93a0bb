import io

import pytest
from rich.console import Console

from sessionshortener.constants import ENV


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    for name in (*ENV.App, *ENV.Shortener):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    """Keep CLI invocations from reconfiguring the root logger."""
    monkeypatch.setattr('sessionshortener.cli.main.initialize_logging', lambda **kwargs: None)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def scripted(*lines: str):
    """Return a read_line callable replaying `lines`, then signalling EOF."""
    remaining = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def script():
    return scripted
