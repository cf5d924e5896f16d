"""
Service module for signing users in and out of the tracking API.
"""
from enum import IntEnum

from aws_lambda_powertools import Logger

from src.models.api import ApiResponse
from src.utils.api import ApiClient

logger = Logger()

class AuthType(IntEnum):
    """Auth mode sent to the auth endpoint."""
    LOGIN = 1
    SIGNUP = 2

class AuthService:
    """Login, signup and logout against the auth endpoint."""

    BASE_PATH = "auth/"

    def __init__(self, api: ApiClient):
        self.api = api

    @property
    def session(self):
        return self.api.session

    def login(self, email: str, password: str) -> ApiResponse:
        """
        Sign in an existing user.

        On success the session is started with the issued token. The API's
        ``exists`` flag tells whether the user already finished onboarding.

        Args:
            email: Account email
            password: Account password

        Returns:
            ApiResponse from the auth endpoint
        """
        response = self.api.post(self.BASE_PATH, {
            "auth_type": AuthType.LOGIN.value,
            "email": email,
            "password": password
        })

        if response.success and response.data:
            self.session.start(
                response.data["token"],
                onboarding_completed=bool(response.data.get("exists"))
            )
            logger.info("User logged in", extra={
                "onboarding_completed": self.session.onboarding_completed
            })

        return response

    def signup(self, email: str, password: str) -> ApiResponse:
        """
        Register a new user and start a session for them.

        New users always start with onboarding pending.
        """
        response = self.api.post(self.BASE_PATH, {
            "auth_type": AuthType.SIGNUP.value,
            "email": email,
            "password": password
        })

        if response.success and response.data:
            self.session.start(response.data["token"], onboarding_completed=False)
            logger.info("User signed up")

        return response

    def logout(self) -> ApiResponse:
        """Clear the local session. No request is sent."""
        self.session.clear()
        return ApiResponse(success=True, data=None, error=None)
