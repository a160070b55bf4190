"""Pytest fixtures for clifx tests."""

from __future__ import annotations

import io
import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="clifx-tests-"))
os.environ["CLIFX_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ["CLIFX_DEBUG"] = "0"
os.environ.pop("CLIFX_LOG_LEVEL", None)

from clifx.presenter import Presenter  # noqa: E402

settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def presenter(output: io.StringIO) -> Presenter:
    """Presenter writing truecolor escapes into an in-memory buffer."""
    return Presenter.for_stream(output)


@pytest.fixture
def sleeps() -> list[float]:
    """Recorded sleep durations; pass ``sleeps.append`` as the injected sleep."""
    return []


@pytest.fixture
def no_sleep(monkeypatch) -> list[float]:
    """Patch ``time.sleep`` for code paths that do not take an injected sleep."""
    calls: list[float] = []
    monkeypatch.setattr("time.sleep", calls.append)
    return calls
