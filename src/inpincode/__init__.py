"""inpincode — Look up Indian postal codes (PIN codes) and search nearby."""

from inpincode.client import InPincode, default_client
from inpincode.exceptions import (
    DataFileInvalid,
    DataFileNotFound,
    InPincodeError,
    PincodeInvalid,
)
from inpincode.lookup import (
    find,
    find_by_district,
    find_by_place,
    find_by_radius,
    find_coordinates,
    find_district,
    find_hierarchy,
    find_place,
    find_state,
    get_states,
)
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

__all__ = [
    "InPincode",
    "RecordStore",
    "default_client",
    "find",
    "find_state",
    "find_district",
    "find_place",
    "find_coordinates",
    "find_hierarchy",
    "find_by_place",
    "find_by_district",
    "find_by_radius",
    "get_states",
    "LocationRecord",
    "LookupResult",
    "StateResult",
    "DistrictResult",
    "PlaceResult",
    "Coordinates",
    "LocationHierarchy",
    "State",
    "InPincodeError",
    "PincodeInvalid",
    "DataFileNotFound",
    "DataFileInvalid",
]
