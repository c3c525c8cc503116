import pytest

from balatro_advisor.advisor import Advisor
from balatro_advisor.config import AdvisorConfig
from balatro_advisor.engine.scoring import ScoringEngine


@pytest.fixture
def engine() -> ScoringEngine:
    """Fresh scoring engine with every hand at level 1."""
    return ScoringEngine()


@pytest.fixture
def advisor() -> Advisor:
    return Advisor(AdvisorConfig())


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's config file out of the tests."""
    monkeypatch.delenv("BALATRO_ADVISOR_CONFIG", raising=False)
