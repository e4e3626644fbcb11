"""Station directory adapter backed by a static JSON station table."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wl_trip_planner.domain.models.station import Station
from wl_trip_planner.domain.ports.station_directory import NOT_FOUND_DIVA, StationDirectory

logger = logging.getLogger(__name__)

BUNDLED_STATION_DATA = Path(__file__).resolve().parent.parent.parent / "data" / "haltestellen.json"


class StationRecord(BaseModel):
    """One record of the station reference table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    platform_text: str = Field(alias="PlatformText")
    diva: int = Field(alias="DIVA")
    longitude: float = Field(alias="Longitude")
    latitude: float = Field(alias="Latitude")

    def to_station(self) -> Station:
        """Convert the record into a Station domain object."""
        return Station(
            platform_text=self.platform_text,
            diva=self.diva,
            longitude=self.longitude,
            latitude=self.latitude,
        )


class JsonStationDirectory(StationDirectory):
    """Read-only station lookup by exact, case-sensitive platform name."""

    def __init__(self, stations: Iterable[Station]) -> None:
        """Initialize with the stations of the reference table.

        Args:
            stations: Stations in table order. When a platform name occurs more
                than once, the first station wins.
        """
        index: dict[str, Station] = {}
        for station in stations:
            index.setdefault(station.platform_text, station)
        self._stations = MappingProxyType(index)

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "JsonStationDirectory":
        """Load the directory from a JSON station table.

        Args:
            path: Path to the JSON file. Defaults to the table bundled with the package.

        Returns:
            JsonStationDirectory with all valid records of the file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a JSON array of records.
        """
        data_path = Path(path) if path else BUNDLED_STATION_DATA
        if not data_path.exists():
            raise FileNotFoundError(f"Station data file not found: {data_path}")

        with open(data_path, encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Station data file {data_path} is not valid JSON: {e}") from e

        if not isinstance(raw, list):
            raise ValueError(f"Station data file {data_path} must contain a JSON array")

        stations = cls._parse_records(raw, data_path)
        logger.info(f"Loaded {len(stations)} station(s) from {data_path}")
        return cls(stations)

    @staticmethod
    def _parse_records(raw: list[Any], data_path: Path) -> list[Station]:
        """Validate records, skipping the ones that cannot be used."""
        stations: list[Station] = []
        skipped = 0
        for item in raw:
            try:
                stations.append(StationRecord.model_validate(item).to_station())
            except ValidationError as e:
                skipped += 1
                logger.debug(f"Skipping station record {item!r}: {e.error_count()} error(s)")
        if skipped:
            logger.warning(f"Skipped {skipped} invalid station record(s) in {data_path}")
        return stations

    def __len__(self) -> int:
        return len(self._stations)

    def find_station(self, name: str) -> Station | None:
        """Return the station with exactly this platform name."""
        return self._stations.get(name)

    def resolve_identifier(self, name: str) -> int:
        """Return the DIVA number, or NOT_FOUND_DIVA if the name is unknown."""
        station = self.find_station(name)
        return station.diva if station else NOT_FOUND_DIVA

    def resolve_coordinates(self, name: str) -> tuple[float, float] | None:
        """Return (longitude, latitude), or None if the name is unknown."""
        station = self.find_station(name)
        if station is None:
            return None
        return station.longitude, station.latitude

    def exists(self, name: str) -> bool:
        """Check whether a station with this platform name exists."""
        return name in self._stations
