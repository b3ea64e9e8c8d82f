"""API request and response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class ThresholdsResponse(BaseModel):
    """Configured severity thresholds."""

    critical_days: int
    warning_days: int


class RecordResponse(BaseModel):
    """A stored domain record in its wire representation."""

    model_config = ConfigDict(populate_by_name=True)

    domain: str
    system: str
    registrar: str | None = None
    registration_date: str = Field(alias="registrationDate", description="ISO date or 'Unknown'")
    expiration_date: str = Field(alias="expirationDate", description="ISO date or 'Unknown'")


class StatusResponse(BaseModel):
    """Derived expiration status."""

    remaining_days: int | Literal["N/A"]
    total_days: int | Literal["N/A"]
    progress_percent: float = Field(ge=0, le=100)
    severity: str = Field(description="expired, critical, warning, healthy or unknown")
    color: str = Field(description="Indicator color for the severity")


class DomainEntryResponse(BaseModel):
    """A record with its derived status."""

    record: RecordResponse
    status: StatusResponse


class OverviewResponse(BaseModel):
    """Categorized view of all tracked domains."""

    generated_at: datetime
    access: str = Field(description="viewer or administrator")
    is_admin: bool
    summary: str
    counts: dict[str, int]
    by_urgency: list[str] = Field(description="Tracked domains, most urgent first")
    thresholds: ThresholdsResponse
    top_level: list[DomainEntryResponse]
    second_level_and_custom: list[DomainEntryResponse]


class UpdateRequest(BaseModel):
    """Body of the mutation endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    action: str = Field(default="update", description="'update' or 'delete'")
    domain: str
    registrar: str | None = None
    registration_date: str | None = Field(default=None, alias="registrationDate")
    expiration_date: str | None = Field(default=None, alias="expirationDate")
    system: str | None = None


class MutationResponse(BaseModel):
    """Response from the mutation endpoint."""

    success: bool
    action: str
    domain: str
    record: RecordResponse | None = None
    created: bool = False
    lookup_attempted: bool = False


class SyncResponse(BaseModel):
    """Response from an explicit single-domain sync."""

    record: RecordResponse
    lookup_succeeded: bool
    created: bool


class DiscoveryResponse(BaseModel):
    """Response from a zone discovery pass."""

    summary: str
    zones: int
    created: list[str]
    refreshed: list[str]
    unchanged: list[str]
    lookup_failures: list[str]
    skipped: list[str]


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
    field: str | None = None
