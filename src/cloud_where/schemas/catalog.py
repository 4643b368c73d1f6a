"""Schemas for validating raw catalog rows."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Region, Status


class RegionRow(BaseModel):
    code: str = Field(min_length=1)
    name: str = ""
    provider: str = Field(min_length=1)
    country: str = ""
    city: str = ""
    continent: str = ""
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    status: Status = Status.ACTIVE
    launch_date: date | None = None
    zones: tuple[str, ...] = ()

    @field_validator("code", "name", "provider", "country", "city", "continent", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("provider", mode="after")
    @classmethod
    def _lower_provider(cls, value: str) -> str:
        return value.lower()

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_float(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.replace(",", "").strip()
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> Status:
        if isinstance(value, Status):
            return value
        if value is None or value == "":
            return Status.ACTIVE
        return Status.parse(str(value))

    @field_validator("launch_date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> date | None:
        # Spreadsheet cells come back as datetimes
        if isinstance(value, datetime):
            return value.date()
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @field_validator("zones", mode="before")
    @classmethod
    def _split_zones(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(str(item).strip() for item in value if str(item).strip())
        return tuple(item.strip() for item in str(value).split(";") if item.strip())

    def to_region(self) -> Region:
        return Region(
            code=self.code,
            name=self.name,
            provider=self.provider,
            country=self.country,
            city=self.city,
            continent=self.continent,
            latitude=self.latitude,
            longitude=self.longitude,
            status=self.status,
            launch_date=self.launch_date,
            zones=self.zones,
        )
