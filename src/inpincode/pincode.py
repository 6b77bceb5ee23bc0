"""Indian postal code (PIN) validation and normalisation."""

import re

from inpincode.exceptions import PincodeInvalid

_PINCODE_RE = re.compile(r"[0-9]{6}")


def validate(raw: object) -> bool:
    """Return True if *raw* is exactly six ASCII digits once trimmed."""
    if not isinstance(raw, str):
        return False
    return _PINCODE_RE.fullmatch(raw.strip()) is not None


def normalise(raw: object) -> str:
    """
    Normalise to the bare 6-digit form, e.g. ' 744301\\n' -> '744301'.

    Raises PincodeInvalid if the input is not a valid postal code.
    """
    if not validate(raw):
        raise PincodeInvalid(raw)
    return raw.strip()
