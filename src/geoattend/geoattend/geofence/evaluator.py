"""Great-circle admission check around the office anchor point."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..common.validators import require_in_range, require_non_negative
from ..core.constants import EARTH_RADIUS_M


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    @classmethod
    def parse(cls, latitude, longitude) -> "Coordinates":
        """Build from untrusted input (non-finite or out-of-range values are rejected)."""
        return cls(
            latitude=require_in_range(latitude, "Latitude", -90.0, 90.0),
            longitude=require_in_range(longitude, "Longitude", -180.0, 180.0),
        )


@dataclass(frozen=True)
class GeofenceResult:
    distance_m: float
    radius_m: float
    admitted: bool


def haversine_distance_m(origin: Coordinates, target: Coordinates) -> float:
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(target.latitude)
    delta_phi = math.radians(target.latitude - origin.latitude)
    delta_lambda = math.radians(target.longitude - origin.longitude)

    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def evaluate(position: Coordinates, anchor: Coordinates, radius_m: float) -> GeofenceResult:
    """Admit ``position`` when it lies within ``radius_m`` of ``anchor`` (boundary inclusive)."""
    radius = require_non_negative(radius_m, "Radius")
    distance = haversine_distance_m(position, anchor)
    return GeofenceResult(distance_m=distance, radius_m=radius, admitted=distance <= radius)
