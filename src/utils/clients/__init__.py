"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application. All
services share one ApiClient and therefore one Session.
"""
from aws_lambda_powertools import Logger
from src.utils.api import ApiClient
from src.utils.session import Session
from src.services.auth import AuthService
from src.services.user import UserService
from src.services.cycle import CycleService
from src.services.dashboard import DashboardService

logger = Logger()

# Initialize shared clients (lazy loading)
_api = None
_services = None

def get_api() -> ApiClient:
    """Get or create the API client, configured from the environment."""
    global _api
    if _api is None:
        _api = ApiClient(Session())
        logger.debug("API client created", extra={"base_url": _api.base_url})
    return _api

def get_services():
    """Get auth, user, cycle and dashboard services bound to the shared client."""
    global _services
    if _services is None:
        api = get_api()
        _services = (
            AuthService(api),
            UserService(api),
            CycleService(api),
            DashboardService(api)
        )
    return _services

def reset_clients() -> None:
    """Drop the shared clients so the next call rebuilds them."""
    global _api, _services
    _api = None
    _services = None
