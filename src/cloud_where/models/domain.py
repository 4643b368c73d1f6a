"""Domain models for cloud region records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum

from ..services.geospatial import haversine_km


class Status(IntEnum):
    """Operational status of a cloud region."""

    ACTIVE = 0
    DEPRECATED = 1
    PREVIEW = 2

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: str) -> "Status":
        """Parse the serialized form ("active", "deprecated", "preview")."""
        normalized = (value or "").strip().upper()
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Unknown region status '{value}'") from None


def status_name(value: int) -> str:
    """Render any numeric status; values outside the enum render as "unknown"."""
    try:
        return str(Status(value))
    except ValueError:
        return "unknown"


@dataclass(frozen=True, slots=True)
class Region:
    """A cloud provider region with location and lifecycle metadata."""

    code: str
    name: str
    provider: str
    country: str
    city: str
    continent: str
    latitude: float
    longitude: float
    status: Status = Status.ACTIVE
    launch_date: date | None = None
    zones: tuple[str, ...] = field(default_factory=tuple)

    def distance(self, other: Region) -> float:
        """Great-circle distance to another region in kilometers."""
        return haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)

    def is_active(self) -> bool:
        return self.status == Status.ACTIVE

    def is_near(self, lat: float, lng: float, radius_km: float) -> bool:
        """True when the region lies within ``radius_km`` of the point, boundary included."""
        return haversine_km(self.latitude, self.longitude, lat, lng) <= radius_km

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "provider": self.provider,
            "country": self.country,
            "city": self.city,
            "continent": self.continent,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "status": status_name(self.status),
            "launch_date": self.launch_date.isoformat() if self.launch_date else None,
            "zones": list(self.zones),
        }
