"""Typed records and result models for inpincode.

Every result model defaults to its "miss" shape: empty strings, zero
coordinates and ``is_valid=False``. A lookup that matches nothing simply
returns the model constructed with no arguments.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LocationRecord:
    """One postal code and the location data attached to it."""

    postal_code: str         # 6 digits, unique key in the store
    place_name: str
    state_name: str
    state_code: str          # 2 digits, e.g. "01"
    district_name: str
    district_code: str
    sub_district_name: str
    latitude: float          # decimal degrees
    longitude: float         # decimal degrees

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return asdict(self)


@dataclass(frozen=True)
class RawPostalRow:
    """A parsed line of the GeoNames postal code dump."""

    country_code: str
    postal_code: str
    place_name: str
    state_name: str
    state_code: str
    district_name: str
    district_code: str
    sub_district_name: str
    community_code: str      # empty in the Indian dump
    latitude: float
    longitude: float
    accuracy: int = 0

    def to_record(self) -> LocationRecord:
        return LocationRecord(
            postal_code=self.postal_code,
            place_name=self.place_name,
            state_name=self.state_name,
            state_code=self.state_code,
            district_name=self.district_name,
            district_code=self.district_code,
            sub_district_name=self.sub_district_name,
            latitude=self.latitude,
            longitude=self.longitude,
        )


@dataclass(frozen=True)
class LookupResult:
    """Complete result of a postal code lookup."""

    state: str = ""
    state_code: str = ""
    district: str = ""
    sub_district: str = ""
    place: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    is_valid: bool = False

    @classmethod
    def from_record(cls, record: LocationRecord) -> "LookupResult":
        return cls(
            state=record.state_name,
            state_code=record.state_code,
            district=record.district_name,
            sub_district=record.sub_district_name,
            place=record.place_name,
            latitude=record.latitude,
            longitude=record.longitude,
            is_valid=True,
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return asdict(self)


@dataclass(frozen=True)
class StateResult:
    state: str = ""
    state_code: str = ""
    is_valid: bool = False

    @classmethod
    def from_record(cls, record: LocationRecord) -> "StateResult":
        return cls(
            state=record.state_name,
            state_code=record.state_code,
            is_valid=True,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DistrictResult:
    district: str = ""
    district_code: str = ""
    state: str = ""
    state_code: str = ""
    is_valid: bool = False

    @classmethod
    def from_record(cls, record: LocationRecord) -> "DistrictResult":
        return cls(
            district=record.district_name,
            district_code=record.district_code,
            state=record.state_name,
            state_code=record.state_code,
            is_valid=True,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PlaceResult:
    place: str = ""
    is_valid: bool = False

    @classmethod
    def from_record(cls, record: LocationRecord) -> "PlaceResult":
        return cls(place=record.place_name, is_valid=True)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Coordinates:
    latitude: float = 0.0
    longitude: float = 0.0
    is_valid: bool = False

    @classmethod
    def from_record(cls, record: LocationRecord) -> "Coordinates":
        return cls(
            latitude=record.latitude,
            longitude=record.longitude,
            is_valid=True,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LocationHierarchy:
    """State down to place for a postal code, without coordinates."""

    state: str = ""
    state_code: str = ""
    district: str = ""
    district_code: str = ""
    sub_district: str = ""
    place: str = ""
    is_valid: bool = False

    @classmethod
    def from_record(cls, record: LocationRecord) -> "LocationHierarchy":
        return cls(
            state=record.state_name,
            state_code=record.state_code,
            district=record.district_name,
            district_code=record.district_code,
            sub_district=record.sub_district_name,
            place=record.place_name,
            is_valid=True,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class State:
    """An entry of the state / union territory directory."""

    code: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)
