"""Shared fixtures for the trip planner tests."""

from pathlib import Path

import pytest

from wl_trip_planner.adapters.request_guard import RequestGuard
from wl_trip_planner.adapters.station_data import JsonStationDirectory
from wl_trip_planner.domain.models import Station

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def stations() -> list[Station]:
    """A small station table."""
    return [
        Station(platform_text="Stephansplatz", diva=60201198, longitude=16.3724, latitude=48.2083),
        Station(platform_text="Karlsplatz", diva=60200657, longitude=16.3699, latitude=48.2003),
        Station(platform_text="Westbahnhof", diva=60201476, longitude=16.3385, latitude=48.1965),
        Station(platform_text="Karlsplatz", diva=99999999, longitude=0.0, latitude=0.0),
    ]


@pytest.fixture
def station_directory(stations: list[Station]) -> JsonStationDirectory:
    """Directory over the small station table."""
    return JsonStationDirectory(stations)


@pytest.fixture
def sample_response() -> str:
    """A recorded-style trip response with two trips."""
    return (FIXTURES / "trip_response.xml").read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def reset_request_guards() -> None:
    """Reset shared request guards between tests."""
    RequestGuard._instances.clear()
    RequestGuard._registry_lock = None
