"""
Service module for the signed-in user's profile.
"""
from datetime import date
from typing import Optional

from src.models.api import ApiResponse
from src.models.user import UserProfile
from src.utils.api import ApiClient
from src.utils.case import to_camel_case
from src.utils.middleware import require_session

class UserService:
    """Read and write profile details."""

    DETAILS_URL = "users/details/"

    def __init__(self, api: ApiClient):
        self.api = api

    @require_session
    def get_user_details(self) -> ApiResponse:
        return self.api.get(self.DETAILS_URL)

    def get_profile(self) -> Optional[UserProfile]:
        """
        Get the profile as a model.

        Returns:
            UserProfile, or None if the request failed or returned no data

        Raises:
            AuthenticationError: If no session is active
        """
        response = self.get_user_details()
        if not response.success or not response.data:
            return None
        return UserProfile(**response.data)

    @require_session
    def add_user_details(
        self,
        first_name: str,
        last_name: str,
        dob: Optional[date] = None,
        height: Optional[float] = None,
        weight: Optional[float] = None
    ) -> ApiResponse:
        """
        Create profile details during onboarding.

        Marks onboarding as completed on the session when the call succeeds.
        """
        response = self.api.post(
            self.DETAILS_URL,
            self._details_body(first_name, last_name, dob, height, weight)
        )
        if response.success:
            self.api.session.complete_onboarding()
        return response

    @require_session
    def update_user_details(
        self,
        first_name: str,
        last_name: str,
        dob: Optional[date] = None,
        height: Optional[float] = None,
        weight: Optional[float] = None
    ) -> ApiResponse:
        """Update existing profile details."""
        return self.api.patch(
            self.DETAILS_URL,
            self._details_body(first_name, last_name, dob, height, weight)
        )

    @staticmethod
    def _details_body(first_name, last_name, dob, height, weight) -> dict:
        return to_camel_case({
            "first_name": first_name,
            "last_name": last_name,
            "dob": dob.isoformat() if dob else None,
            "height": height,
            "weight": weight
        })
