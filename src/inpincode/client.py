"""InPincode client — the main entry point for the library."""

from __future__ import annotations

import math
import numbers
import threading
from pathlib import Path
from typing import Optional

import structlog

from inpincode import config, pincode
from inpincode._loader import DEFAULT_COUNTRY
from inpincode.exceptions import PincodeInvalid
from inpincode.geo import haversine_km
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
from inpincode.store import RecordStore

logger = structlog.get_logger(__name__)


class InPincode:
    """
    Indian postal code lookup over an in-memory record store.

    Initialise with a path to a GeoNames-format dump, or with a ready
    RecordStore. With neither, the configured data file is loaded.
    Queries never raise: a miss is a result with ``is_valid=False`` or
    an empty list.
    """

    def __init__(
        self,
        data_file: str | Path | None = None,
        store: Optional[RecordStore] = None,
        country_code: str = DEFAULT_COUNTRY,
    ):
        self._country_code = country_code
        if store is not None:
            self._data_file: Optional[Path] = None
            self._store = store
        else:
            self._data_file = Path(data_file) if data_file else config.data_file()
            self._store = RecordStore.from_file(self._data_file, country_code)

    # ── Public API: lookups by postal code ────────────────────────

    def find(self, postal_code: str) -> LookupResult:
        """Return state, district, sub-district, place and coordinates."""
        record = self._lookup(postal_code)
        if record is None:
            return LookupResult()
        return LookupResult.from_record(record)

    def find_state(self, postal_code: str) -> StateResult:
        record = self._lookup(postal_code)
        if record is None:
            return StateResult()
        return StateResult.from_record(record)

    def find_district(self, postal_code: str) -> DistrictResult:
        record = self._lookup(postal_code)
        if record is None:
            return DistrictResult()
        return DistrictResult.from_record(record)

    def find_place(self, postal_code: str) -> PlaceResult:
        record = self._lookup(postal_code)
        if record is None:
            return PlaceResult()
        return PlaceResult.from_record(record)

    def find_coordinates(self, postal_code: str) -> Coordinates:
        record = self._lookup(postal_code)
        if record is None:
            return Coordinates()
        return Coordinates.from_record(record)

    def find_hierarchy(self, postal_code: str) -> LocationHierarchy:
        """Return the administrative hierarchy, without coordinates."""
        record = self._lookup(postal_code)
        if record is None:
            return LocationHierarchy()
        return LocationHierarchy.from_record(record)

    # ── Public API: reverse queries ───────────────────────────────

    def find_by_place(
        self, place: str, state_code: str
    ) -> list[LocationRecord]:
        """
        Return every record whose place name equals *place* (ignoring
        case) within the state identified by *state_code*.
        """
        return self._match_attribute("place_name", place, state_code)

    def find_by_district(
        self, district: str, state_code: str
    ) -> list[LocationRecord]:
        """
        Return every record in *district* (ignoring case) within the
        state identified by *state_code*.
        """
        return self._match_attribute("district_name", district, state_code)

    def find_by_radius(
        self, latitude: float, longitude: float, radius_km: float
    ) -> list[LocationRecord]:
        """
        Return records within *radius_km* of the given point, nearest
        first. Records at equal distance keep their store order.

        Non-finite coordinates or a non-positive radius give [].
        """
        if not (
            _is_finite(latitude)
            and _is_finite(longitude)
            and _is_finite(radius_km)
        ) or radius_km <= 0:
            return []

        hits = []
        for record in self._store:
            distance = haversine_km(
                latitude, longitude, record.latitude, record.longitude
            )
            if distance <= radius_km:
                hits.append((distance, record))

        hits.sort(key=lambda hit: hit[0])
        return [record for _, record in hits]

    def get_states(self) -> list[State]:
        """Return each distinct state code with the first name seen for it."""
        names: dict[str, str] = {}
        for record in self._store:
            names.setdefault(record.state_code, record.state_name)
        return [State(code=code, name=name) for code, name in names.items()]

    # ── Public API: maintenance ───────────────────────────────────

    def reload(self, data_file: str | Path | None = None) -> None:
        """
        Rebuild the store from *data_file* (or the previous / configured
        file) and swap it in. Queries running during the reload keep
        using the old store.
        """
        path = Path(data_file) if data_file else (
            self._data_file or config.data_file()
        )
        store = RecordStore.from_file(path, self._country_code)
        self._data_file = path
        self._store = store
        logger.info("client.reloaded", path=str(path), records=len(store))

    def health_check(self) -> dict:
        """
        Report whether any records are loaded.

        Returns a dict with status information.
        """
        return {
            "healthy": len(self._store) > 0,
            "records": len(self._store),
            "data_file": str(self._data_file) if self._data_file else None,
        }

    @property
    def store(self) -> RecordStore:
        return self._store

    def __len__(self) -> int:
        return len(self._store)

    # ── Private helpers ───────────────────────────────────────────

    def _lookup(self, postal_code: str) -> Optional[LocationRecord]:
        """Normalise *postal_code* and fetch its record, or None."""
        try:
            code = pincode.normalise(postal_code)
        except PincodeInvalid:
            return None
        return self._store.get(code)

    def _match_attribute(
        self, field: str, name: str, state_code: str
    ) -> list[LocationRecord]:
        if not isinstance(name, str) or not isinstance(state_code, str):
            return []
        wanted = name.strip().casefold()
        state = state_code.strip()
        if not wanted or not state:
            return []

        return [
            record
            for record in self._store
            if record.state_code == state
            and getattr(record, field).casefold() == wanted
        ]


def _is_finite(value: object) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


# ── Process-wide default client ───────────────────────────────────

_default_client: Optional[InPincode] = None
_default_lock = threading.Lock()


def default_client() -> InPincode:
    """Return the shared client, loading the configured data file once."""
    global _default_client
    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = InPincode()
    return _default_client


def reset_default_client() -> None:
    """Drop the shared client; the next call to default_client() reloads."""
    global _default_client
    with _default_lock:
        _default_client = None
