"""Geo API request/response schemas."""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Device registration body (camelCase from the browser tracker)."""

    device_id: str | None = Field(default=None, alias="deviceId")
    county: str | None = None
    town: str | None = None
    category: str | None = None

    class Config:
        populate_by_name = True


class TrackRequest(BaseModel):
    """Location ping without a device id."""

    county: str | None = None
    town: str | None = None
    category: str | None = None


class CurrentLocation(BaseModel):
    county: str | None = None
    town: str | None = None
    category: str = "UNKNOWN"


class CurrentLocationResponse(BaseModel):
    """Visitor location derived from edge headers."""

    success: bool
    location: CurrentLocation
