"""
Service module for the cycle dashboard.

Fetches the dashboard cycle summary and turns it into a phase timeline.
"""
from typing import Optional

from aws_lambda_powertools import Logger

from src.models.api import ApiResponse
from src.models.cycle import CycleState
from src.models.phase import CyclePhase, CycleTimeline
from src.services.phase import phase_index
from src.services.timeline import build_cycle_timeline
from src.utils.api import ApiClient
from src.utils.middleware import require_session

logger = Logger()

class DashboardService:
    """Dashboard summary and phase details endpoints."""

    DASHBOARD_URL = "cycles/dashboard/"
    DASHBOARD_DETAILS_URL = "cycles/dashboard/details/"

    def __init__(self, api: ApiClient):
        self.api = api

    @require_session
    def get_dashboard(self) -> ApiResponse:
        return self.api.get(self.DASHBOARD_URL)

    @require_session
    def get_dashboard_details(self, phase: CyclePhase) -> ApiResponse:
        """Get recommendations and phase information for ``phase``."""
        return self.api.get(self.DASHBOARD_DETAILS_URL, {"phase": phase_index(phase)})

    def get_cycle_state(self) -> Optional[CycleState]:
        """
        Get the dashboard cycle summary.

        Returns:
            CycleState, or None if the request failed

        Raises:
            AuthenticationError: If no session is active
        """
        response = self.get_dashboard()
        if not response.success:
            logger.warning("Dashboard unavailable", extra={
                "status": response.status,
                "error_code": response.error.code if response.error else None
            })
            return None
        return CycleState.model_validate(response.data or {})

    def get_cycle_timeline(self) -> CycleTimeline:
        """
        Fetch the dashboard and build the phase timeline.

        Raises:
            ApiError: If the dashboard request failed
            InsufficientCycleDataError: If the dashboard lacks cycle length or last period start
            AuthenticationError: If no session is active
        """
        response = self.get_dashboard().raise_for_error()
        state = CycleState.model_validate(response.data or {})
        return build_cycle_timeline(state)
