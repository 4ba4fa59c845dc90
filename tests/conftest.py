import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from services import session_service as session_module


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandom:
    """Random source that cycles through a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def zero_rng():
    return FixedRandom(0.0)


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def sequence_rng():
    return SequenceRandom


@pytest.fixture(autouse=True)
def fresh_session(monkeypatch):
    """Give every test its own session with no simulated latency and no
    lingering feed task from a previous test.
    """
    monkeypatch.setattr("config.settings.analysis_latency_seconds", 0.0)
    session = session_module.AnalysisSession(rng=FixedRandom(0.0))
    monkeypatch.setattr(session_module, "session_service", session)
    yield session
    if session._feed is not None:
        session._feed.stop()
