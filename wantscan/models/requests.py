"""Request models for API endpoints."""
from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request model for the login endpoint."""

    username: Optional[str] = Field(
        None, description="Account name. Falls back to the configured username."
    )
    password: Optional[str] = Field(
        None, description="Account password. Falls back to the configured password."
    )

    class Config:
        json_schema_extra = {
            "example": {"username": "shop@example.com", "password": "secret"}
        }


class LookupRequest(BaseModel):
    """Request model for the lookup endpoint."""

    barcode: str = Field(
        ..., description="Scanned or typed barcode; spaces and hyphens are ignored"
    )

    class Config:
        json_schema_extra = {"example": {"barcode": "0 602527 34712-2"}}
