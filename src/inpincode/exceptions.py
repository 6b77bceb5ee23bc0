"""Custom exception hierarchy for inpincode."""


class InPincodeError(Exception):
    """Base exception for all inpincode errors."""


class PincodeInvalid(InPincodeError):
    """The provided value is not a 6-digit Indian postal code."""

    def __init__(self, pincode: object):
        self.pincode = pincode
        super().__init__(f"Invalid Indian postal code: {pincode!r}")


class DataFileNotFound(InPincodeError):
    """The postal code data file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Postal code data file not found at: {path}")


class DataFileInvalid(InPincodeError):
    """The data file exists but could not be read or decoded."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid data file at {path}: {detail}")
