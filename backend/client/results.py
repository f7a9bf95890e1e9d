"""
Tagged results of client calls, and error message extraction.

Callers match on the result type instead of poking at error shapes:

    result = await session.refresh()
    if isinstance(result, Ok):
        ...
    elif isinstance(result, AuthError):
        prompt_login()
    else:
        show_toast(result.message)
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class FunctionError(Exception):
    """
    A server endpoint answered with an error status.

    context holds the parsed JSON error body, so the message the server
    produced is available as context["error"].
    """

    def __init__(self, message: str, status_code: int, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.context = context or {}


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The call succeeded."""
    value: T


@dataclass(frozen=True)
class ProviderError:
    """The server, Stripe or the network failed. message is user-facing."""
    message: str


@dataclass(frozen=True)
class AuthError:
    """The caller has no valid session."""
    message: str


Result = Union[Ok[T], ProviderError, AuthError]


def get_error_message(error: BaseException) -> str:
    """
    Best-effort human readable text for an error.

    Prefers the server's own message (a string under context["error"]),
    then the exception text, then a generic fallback.
    """
    context = getattr(error, "context", None)
    if isinstance(context, dict) and isinstance(context.get("error"), str):
        return context["error"]
    return str(error) or GENERIC_ERROR_MESSAGE


def is_auth_failure(error: FunctionError) -> bool:
    """Whether a function error means the session is missing or invalid."""
    return error.status_code == 401 or get_error_message(error).startswith("User not authenticated")


def to_error_result(error: Exception) -> Union[ProviderError, AuthError]:
    """Classify a failed call."""
    if isinstance(error, FunctionError) and is_auth_failure(error):
        return AuthError(get_error_message(error))
    return ProviderError(get_error_message(error))
