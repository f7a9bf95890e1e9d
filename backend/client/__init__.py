"""
Python client for the VideoCut API.

Plays the part of the SPA's service layer: checkout and portal
initiators and the session-scoped entitlement cache.

Public API:
- VideoCutClient: HTTP client for the API
- EntitlementSession: Cached entitlement with refresh()
- start_checkout, open_customer_portal: Redirect URL initiators
- Ok, ProviderError, AuthError: Tagged call results
- get_error_message: Human readable text for a failed call
"""

from .api_client import VideoCutClient
from .session import EntitlementSession, start_checkout, open_customer_portal
from .results import (
    Ok,
    ProviderError,
    AuthError,
    Result,
    FunctionError,
    get_error_message,
)

__all__ = [
    "VideoCutClient",
    "EntitlementSession",
    "start_checkout",
    "open_customer_portal",
    "Ok",
    "ProviderError",
    "AuthError",
    "Result",
    "FunctionError",
    "get_error_message",
]
