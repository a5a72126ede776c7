"""Login session models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class LoginStatus(str, Enum):
    """Login outcome enumeration."""

    AUTHENTICATED = "authenticated"
    BAD_CREDENTIALS = "bad_credentials"
    FAILED = "failed"


class LoginResult(BaseModel):
    """Outcome of a login attempt."""

    status: LoginStatus
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LoginStatus.AUTHENTICATED
