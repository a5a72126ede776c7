"""Want-list data models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Want(BaseModel):
    """A single wanted record matched by a scan."""

    model_config = ConfigDict(frozen=True)

    barcode: str = Field(..., description="Digits of the matched barcode")
    artist: str
    album: str
    wants: str = Field(..., description="Number of open wants, as reported")


class ScanOutcome(str, Enum):
    """Feedback class of a single scan."""

    MATCH = "match"
    NO_MATCH = "no_match"
    INVALID = "invalid"
    ERROR = "error"


class LookupSource(str, Enum):
    """Where wants are looked up."""

    ONLINE = "online"
    OFFLINE = "offline"


class LookupResult(BaseModel):
    """Result of looking up one barcode."""

    outcome: ScanOutcome
    barcode: str
    want: Optional[Want] = None
    error_message: Optional[str] = None

    @classmethod
    def matched(cls, want: Want) -> "LookupResult":
        return cls(outcome=ScanOutcome.MATCH, barcode=want.barcode, want=want)

    @classmethod
    def no_match(cls, barcode: str) -> "LookupResult":
        return cls(outcome=ScanOutcome.NO_MATCH, barcode=barcode)

    @classmethod
    def invalid(cls, raw: str) -> "LookupResult":
        return cls(
            outcome=ScanOutcome.INVALID,
            barcode=raw,
            error_message="Barcode may only contain digits, spaces and hyphens",
        )

    @classmethod
    def failed(cls, barcode: str, error_message: str) -> "LookupResult":
        return cls(
            outcome=ScanOutcome.ERROR, barcode=barcode, error_message=error_message
        )

    def describe(self) -> str:
        """One-line message for the result."""
        if self.outcome == ScanOutcome.MATCH:
            return f"{self.want.album} by {self.want.artist} (wants: {self.want.wants})"
        if self.outcome == ScanOutcome.NO_MATCH:
            return f"No want for {self.barcode}"
        return self.error_message or "Unknown error"
