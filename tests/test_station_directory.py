"""Tests for the JSON station directory."""

import json
import logging
from pathlib import Path

import pytest

from wl_trip_planner.adapters.station_data import JsonStationDirectory, StationRecord
from wl_trip_planner.domain.models import Station
from wl_trip_planner.domain.ports import NOT_FOUND_DIVA
from wl_trip_planner.domain.station_names import strip_city_prefix


def _write_table(path: Path, records: object) -> Path:
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return path


class TestLookup:
    """Tests for name lookups."""

    def test_resolve_identifier(self, station_directory: JsonStationDirectory) -> None:
        """Known names resolve to their DIVA number."""
        assert station_directory.resolve_identifier("Stephansplatz") == 60201198

    def test_unknown_name_resolves_to_zero(self, station_directory: JsonStationDirectory) -> None:
        """Unknown names resolve to the not-found sentinel."""
        assert station_directory.resolve_identifier("Atlantis") == NOT_FOUND_DIVA == 0
        assert station_directory.resolve_coordinates("Atlantis") is None
        assert station_directory.find_station("Atlantis") is None
        assert not station_directory.exists("Atlantis")

    def test_lookup_is_exact_and_case_sensitive(
        self, station_directory: JsonStationDirectory
    ) -> None:
        """No trimming, prefix handling or case folding is applied."""
        assert station_directory.exists("Stephansplatz")
        assert not station_directory.exists("stephansplatz")
        assert not station_directory.exists(" Stephansplatz")
        assert not station_directory.exists("Wien Stephansplatz")

    def test_coordinates_are_longitude_then_latitude(
        self, station_directory: JsonStationDirectory
    ) -> None:
        """Coordinates come back as stored in the table."""
        assert station_directory.resolve_coordinates("Westbahnhof") == (16.3385, 48.1965)

    def test_first_duplicate_wins(self, station_directory: JsonStationDirectory) -> None:
        """The first record of a duplicated platform name is used."""
        assert station_directory.resolve_identifier("Karlsplatz") == 60200657
        assert len(station_directory) == 3

    def test_answers_are_stable(self, station_directory: JsonStationDirectory) -> None:
        """Repeated lookups give the same answers."""
        first = station_directory.find_station("Karlsplatz")

        assert station_directory.find_station("Karlsplatz") == first
        assert station_directory.resolve_identifier("Karlsplatz") == first.diva


class TestFromFile:
    """Tests for loading the station table from JSON."""

    def test_loads_records(self, tmp_path: Path) -> None:
        """Records with the four table fields become stations."""
        path = _write_table(
            tmp_path / "haltestellen.json",
            [
                {
                    "PlatformText": "Schwedenplatz",
                    "DIVA": 60201184,
                    "Longitude": 16.3778,
                    "Latitude": 48.2115,
                }
            ],
        )

        directory = JsonStationDirectory.from_file(path)

        assert directory.find_station("Schwedenplatz") == Station(
            platform_text="Schwedenplatz", diva=60201184, longitude=16.3778, latitude=48.2115
        )

    def test_invalid_records_are_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Records missing a field or with a bad DIVA are skipped with a warning."""
        path = _write_table(
            tmp_path / "haltestellen.json",
            [
                {
                    "PlatformText": "Praterstern",
                    "DIVA": 60201040,
                    "Longitude": 16.39,
                    "Latitude": 48.21,
                },
                {"PlatformText": "Kagran", "Longitude": 16.44, "Latitude": 48.24},
                {
                    "PlatformText": "Ottakring",
                    "DIVA": "abc",
                    "Longitude": 16.31,
                    "Latitude": 48.21,
                },
            ],
        )

        with caplog.at_level(logging.WARNING):
            directory = JsonStationDirectory.from_file(path)

        assert len(directory) == 1
        assert directory.exists("Praterstern")
        assert "Skipped 2 invalid station record(s)" in caplog.text

    def test_numeric_strings_are_accepted(self, tmp_path: Path) -> None:
        """Numbers written as strings are read as numbers."""
        path = _write_table(
            tmp_path / "haltestellen.json",
            [
                {
                    "PlatformText": "Kagran",
                    "DIVA": "60200627",
                    "Longitude": "16.44",
                    "Latitude": "48.24",
                }
            ],
        )

        directory = JsonStationDirectory.from_file(path)

        assert directory.resolve_identifier("Kagran") == 60200627
        assert directory.resolve_coordinates("Kagran") == (16.44, 48.24)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Station data file not found"):
            JsonStationDirectory.from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """A file that is not JSON raises ValueError."""
        path = tmp_path / "haltestellen.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(ValueError, match="not valid JSON"):
            JsonStationDirectory.from_file(path)

    def test_top_level_must_be_array(self, tmp_path: Path) -> None:
        """A JSON object instead of an array raises ValueError."""
        path = _write_table(tmp_path / "haltestellen.json", {"PlatformText": "Kagran"})

        with pytest.raises(ValueError, match="must contain a JSON array"):
            JsonStationDirectory.from_file(path)

    def test_bundled_table(self) -> None:
        """The bundled table is used when no path is given."""
        directory = JsonStationDirectory.from_file()

        assert directory.resolve_identifier("Stephansplatz") == 60201198
        assert directory.resolve_identifier("Westbahnhof") == 60201476
        assert directory.exists("Oper, Karlsplatz U")


class TestStationRecord:
    """Tests for the station record model."""

    def test_aliases(self) -> None:
        """Records are read by their table column names."""
        record = StationRecord.model_validate(
            {
                "PlatformText": "Heiligenstadt",
                "DIVA": 60200515,
                "Longitude": 16.36,
                "Latitude": 48.25,
            }
        )

        assert record.to_station().platform_text == "Heiligenstadt"
        assert record.to_station().diva == 60200515


class TestStripCityPrefix:
    """Tests for removing the city prefix from stop names."""

    def test_removes_leading_prefix(self) -> None:
        assert strip_city_prefix("Wien Karlsplatz") == "Karlsplatz"

    def test_keeps_names_without_prefix(self) -> None:
        assert strip_city_prefix("Karlsplatz") == "Karlsplatz"

    def test_only_leading_prefix_is_removed(self) -> None:
        assert strip_city_prefix("Wien Wien Mitte") == "Wien Mitte"
        assert strip_city_prefix("Station Wien ") == "Station Wien "

    def test_prefix_needs_the_space(self) -> None:
        assert strip_city_prefix("Wienerberg") == "Wienerberg"
