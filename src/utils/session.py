"""
Session state for the signed-in user.
"""
from typing import Optional

from aws_lambda_powertools import Logger

logger = Logger()

class Session:
    """
    Holds the auth token and onboarding flag for one user.

    A session is created empty, started by login or signup and cleared by
    logout. It is passed explicitly to the API client instead of being read
    from global state.
    """

    def __init__(self, token: Optional[str] = None, onboarding_completed: bool = False):
        self.token = token
        self.onboarding_completed = onboarding_completed

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token)

    def start(self, token: str, onboarding_completed: bool = False) -> None:
        """
        Start the session after a successful login or signup.

        Args:
            token: Bearer token issued by the API
            onboarding_completed: Whether the user already has profile details
        """
        self.token = token
        self.onboarding_completed = bool(onboarding_completed)
        logger.debug("Session started", extra={
            "onboarding_completed": self.onboarding_completed
        })

    def complete_onboarding(self) -> None:
        self.onboarding_completed = True

    def clear(self) -> None:
        """End the session, dropping the token and onboarding flag."""
        self.token = None
        self.onboarding_completed = False
        logger.debug("Session cleared")

    def auth_headers(self) -> dict:
        """Authorization header for the current token, empty when logged out."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
