"""Module-level query functions backed by the shared default client."""

from __future__ import annotations

from inpincode.client import default_client
from inpincode.models import (
    Coordinates,
    DistrictResult,
    LocationHierarchy,
    LocationRecord,
    LookupResult,
    PlaceResult,
    State,
    StateResult,
)


def find(postal_code: str) -> LookupResult:
    return default_client().find(postal_code)


def find_state(postal_code: str) -> StateResult:
    return default_client().find_state(postal_code)


def find_district(postal_code: str) -> DistrictResult:
    return default_client().find_district(postal_code)


def find_place(postal_code: str) -> PlaceResult:
    return default_client().find_place(postal_code)


def find_coordinates(postal_code: str) -> Coordinates:
    return default_client().find_coordinates(postal_code)


def find_hierarchy(postal_code: str) -> LocationHierarchy:
    return default_client().find_hierarchy(postal_code)


def find_by_place(place: str, state_code: str) -> list[LocationRecord]:
    return default_client().find_by_place(place, state_code)


def find_by_district(district: str, state_code: str) -> list[LocationRecord]:
    return default_client().find_by_district(district, state_code)


def find_by_radius(
    latitude: float, longitude: float, radius_km: float
) -> list[LocationRecord]:
    return default_client().find_by_radius(latitude, longitude, radius_km)


def get_states() -> list[State]:
    return default_client().get_states()
