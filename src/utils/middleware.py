"""
Decorators applied to API service methods.
"""
from functools import wraps
from typing import Any, Callable

from aws_lambda_powertools import Logger
from src.services.exceptions import AuthenticationError

logger = Logger()

def require_session(f: Callable) -> Callable:
    """
    Decorator to require a signed-in session for service methods.

    The wrapped method's instance must expose an ``api`` attribute holding an
    ApiClient. The check runs before any request is sent.

    Args:
        f: Service method to wrap

    Returns:
        Wrapped service method

    Raises:
        AuthenticationError: If the client's session has no token
    """
    @wraps(f)
    def wrapped(self, *args: Any, **kwargs: Any) -> Any:
        if not self.api.session.is_logged_in:
            logger.warning("Call attempted without a session", extra={
                "operation": f.__qualname__
            })
            raise AuthenticationError(f"{f.__qualname__} requires a signed-in session")
        return f(self, *args, **kwargs)

    return wrapped
