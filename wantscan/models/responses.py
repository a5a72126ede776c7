"""Response models for API endpoints."""
from typing import Optional

from pydantic import BaseModel, Field

from .want import LookupSource, ScanOutcome, Want


class LookupResponse(BaseModel):
    """Response model for the lookup endpoint."""

    outcome: ScanOutcome = Field(..., description="Feedback class of the scan")
    barcode: str = Field(..., description="Normalized barcode, or raw input if rejected")
    want: Optional[Want] = None
    message: str = Field(..., description="Human-readable message")

    class Config:
        json_schema_extra = {
            "example": {
                "outcome": "match",
                "barcode": "602527347122",
                "want": {
                    "barcode": "602527347122",
                    "artist": "Bon Iver",
                    "album": "Bon Iver, Bon Iver",
                    "wants": "4",
                },
                "message": "Bon Iver, Bon Iver by Bon Iver (wants: 4)",
            }
        }


class SessionStatusResponse(BaseModel):
    """Response model for the session status endpoint."""

    source: LookupSource
    authenticated: bool
    wants_loaded: int = Field(0, description="Wants held by the offline list")


class WantListResponse(BaseModel):
    """Response model for want-list uploads."""

    loaded: int = Field(..., description="Number of wants loaded")
    message: str
