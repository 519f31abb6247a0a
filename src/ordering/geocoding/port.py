"""Geocoder port (abstract interface).

Adapters turn a shipping city and country into coordinates. Geocoding is
best-effort: an adapter returns ``None`` rather than raising when it cannot
produce a result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GeocodeResult:
    """Coordinates for a resolved address."""

    latitude: float
    longitude: float
    formatted_address: str


class Geocoder(ABC):
    """Abstract geocoder interface."""

    @abstractmethod
    def resolve(self, city: str, country: str) -> GeocodeResult | None:
        """Resolve a city and country, or return None when no result is available."""
        ...


def build_query(city: str | None, country: str | None) -> str:
    """Join the non-blank parts as ``"<city>, <country>"``."""
    parts = [part.strip() for part in (city, country) if part and part.strip()]
    return ", ".join(parts)
