"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date

from src.models.cycle import CycleState
from src.models.phase import PhaseLengths
from src.utils.api import ApiClient
from src.utils.session import Session

BASE_URL = "https://api.test/api/v1/"

@pytest.fixture
def session() -> Session:
    """Create an empty session."""
    return Session()

@pytest.fixture
def logged_in_session() -> Session:
    """Create a session holding a token."""
    return Session(token="test-token", onboarding_completed=True)

@pytest.fixture
def api_client(session) -> ApiClient:
    """Create an API client with no active session."""
    return ApiClient(session, base_url=BASE_URL, timeout=5)

@pytest.fixture
def authed_api_client(logged_in_session) -> ApiClient:
    """Create an API client with an active session."""
    return ApiClient(logged_in_session, base_url=BASE_URL, timeout=5)

@pytest.fixture
def lengths_28() -> PhaseLengths:
    """Phase lengths for a 28-day cycle."""
    return PhaseLengths(menstrual=5, follicular=9, ovulatory=1, luteal=13)

@pytest.fixture
def follicular_state() -> CycleState:
    """Dashboard snapshot during the follicular phase."""
    return CycleState(
        current_phase="Follicular",
        days_until_next_phase=3,
        avg_cycle_length=28,
        last_period_start=date(2025, 3, 1),
        next_period_start=date(2025, 3, 29),
        days_until_next_period=17
    )

@pytest.fixture
def dashboard_payload() -> dict:
    """Dashboard response body as sent by the API."""
    return {
        "currentPhase": "Luteal phase",
        "lastPeriodStart": "2025-02-23",
        "avgCycleLength": 28,
        "nextPeriodStart": "2025-03-24",
        "daysUntilNextPeriod": 5,
        "daysUntilNextPhase": 5
    }
