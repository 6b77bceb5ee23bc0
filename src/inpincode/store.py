"""In-memory record store keyed by postal code."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

import structlog

from inpincode._loader import DEFAULT_COUNTRY, read_records
from inpincode.exceptions import InPincodeError
from inpincode.models import LocationRecord

logger = structlog.get_logger(__name__)


class RecordStore:
    """
    Read-only mapping of postal code -> LocationRecord.

    Built once from a sequence of records; a later record with the same
    postal code replaces the earlier one. Iteration follows the order in
    which codes were first inserted.
    """

    def __init__(self, records: Iterable[LocationRecord] = ()):
        by_code: dict[str, LocationRecord] = {}
        for record in records:
            by_code[record.postal_code] = record
        self._records: Mapping[str, LocationRecord] = MappingProxyType(by_code)

    @classmethod
    def from_file(
        cls, path: str | Path, country_code: str = DEFAULT_COUNTRY
    ) -> RecordStore:
        """
        Load a store from a GeoNames dump.

        A missing or unreadable file yields an empty store; the failure
        is logged, never raised.
        """
        try:
            records = read_records(path, country_code)
        except InPincodeError as exc:
            logger.error("store.load_failed", path=str(path), error=str(exc))
            return cls()
        store = cls(records)
        logger.info("store.loaded", path=str(path), records=len(store))
        return store

    def get(self, postal_code: str) -> Optional[LocationRecord]:
        return self._records.get(postal_code)

    @property
    def records(self) -> Mapping[str, LocationRecord]:
        return self._records

    def __contains__(self, postal_code: object) -> bool:
        return postal_code in self._records

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore(records={len(self)})"
