from __future__ import annotations

import logging

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from runningstats import RunningStats  # noqa: E402


@pytest.fixture
def stats() -> RunningStats:
    return RunningStats()


@pytest.fixture
def no_show(monkeypatch):
    """Replace plt.show so plotting tests never block."""
    import matplotlib.pyplot as plt

    calls = []
    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: calls.append(1))
    yield calls
    plt.close("all")


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("runningstats")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
