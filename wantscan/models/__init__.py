"""Data models for the application."""
from .requests import LoginRequest, LookupRequest
from .responses import LookupResponse, SessionStatusResponse, WantListResponse
from .session import LoginResult, LoginStatus
from .want import LookupResult, LookupSource, ScanOutcome, Want

__all__ = [
    "LoginRequest",
    "LookupRequest",
    "LookupResponse",
    "SessionStatusResponse",
    "WantListResponse",
    "LoginResult",
    "LoginStatus",
    "LookupResult",
    "LookupSource",
    "ScanOutcome",
    "Want",
]
