"""Shared test fixtures — a small GeoNames dump with realistic data."""

from pathlib import Path

import pytest
import structlog

ANDAMAN = "Andaman & Nicobar Islands"


def _row(*fields) -> str:
    return "\t".join(str(f) for f in fields)


FIXTURE_LINES = [
    _row("IN", "744301", "Carnicobar", ANDAMAN, "01", "Nicobar", "638",
         "Carnicobar", "", "9.1833", "92.7667", "4"),
    _row("IN", "744302", "Sawai", ANDAMAN, "01", "Nicobar", "638",
         "Nancowrie", "", "8.0333", "93.5333", "4"),
    # Too few fields
    _row("IN", "744303", "Kamorta", ANDAMAN),
    _row("IN", "744305", "SAWAI", ANDAMAN, "01", "Nicobar", "638",
         "Nancowrie", "", "8.05", "93.55", "4"),
    # Same place name in another state
    _row("IN", "322001", "Sawai", "Rajasthan", "24", "Sawai Madhopur", "119",
         "Sawai Madhopur", "", "26.0167", "76.3500", "4"),
    "",
    # Same coordinates as 744301
    _row("IN", "744309", "Mus", ANDAMAN, "01", "Nicobar", "638",
         "Carnicobar", "", "9.1833", "92.7667", "4"),
    # Non-numeric latitude
    _row("IN", "999998", "Nowhere", "Delhi", "07", "Central Delhi", "077",
         "New Delhi", "", "abc", "77.2", "4"),
    # Other country
    _row("PK", "744399", "Karachi", "Sindh", "05", "Karachi", "",
         "", "", "24.8600", "67.0100", "4"),
    _row("IN", "110001", "Connaught Place", "Delhi", "07", "Central Delhi",
         "077", "New Delhi", "", "28.6333", "77.2167", "4"),
    _row("IN", "110002", "Old Name", "Delhi", "07", "Central Delhi", "077",
         "Daryaganj", "", "28.6000", "77.2000", "1"),
    # Duplicate code, last one wins
    _row("IN", "110002", "Darya Ganj", "Delhi", "07", "Central Delhi", "077",
         "Daryaganj", "", "28.6400", "77.2400", "4"),
    _row("IN", "400001", "Fort", "Maharashtra", "16", "Mumbai", "482",
         "Mumbai", "", "18.9333", "72.8333", "4"),
    # Empty accuracy defaults to 0 and the row is kept
    _row("IN", "700001", "Dalhousie Square", "West Bengal", "28", "Kolkata",
         "342", "Kolkata", "", "22.5726", "88.3500", ""),
]

# Postal codes of the valid IN rows, in first-insertion order
FIXTURE_CODES = [
    "744301", "744302", "744305", "322001", "744309",
    "110001", "110002", "400001", "700001",
]


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    """Write the fixture dump to a temporary IN.txt."""
    path = tmp_path / "IN.txt"
    path.write_text("\n".join(FIXTURE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def client(data_file: Path):
    """Create an InPincode client over the fixture dump."""
    from inpincode import InPincode

    return InPincode(data_file=data_file)


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Undo structlog configuration and the shared default client."""
    from inpincode.client import reset_default_client

    reset_default_client()
    yield
    reset_default_client()
    structlog.reset_defaults()
