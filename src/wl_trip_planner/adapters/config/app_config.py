"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wl_trip_planner.domain.models.point_selection import PointSelection

DEFAULT_ROUTING_API_URL = "http://www.wienerlinien.at/ogd_routing/XML_TRIP_REQUEST2"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Routing API configuration
    routing_api_url: str = Field(
        default=DEFAULT_ROUTING_API_URL,
        description="URL of the Wiener Linien XML_TRIP_REQUEST2 endpoint",
    )
    request_timeout_seconds: float = Field(
        default=30, description="Timeout for trip requests in seconds"
    )

    # Station reference data
    # If not set, the table bundled with the package is used
    station_data_file: str | None = Field(
        default=None,
        description="Path to a JSON station table with PlatformText, DIVA, Longitude, Latitude",
    )

    # Extraction
    point_selection: PointSelection = Field(
        default=PointSelection.ALL,
        description="Stop points to keep per partial route: 'all' or 'skip_boarding'",
    )

    # Map markers
    strip_city_prefix: bool = Field(
        default=True,
        description="Remove a leading 'Wien ' from stop names before marker lookup",
    )
    swap_marker_coordinates: bool = Field(
        default=False,
        description="Swap longitude and latitude of map markers (historical app behavior)",
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/Vienna",
        description="Timezone for default request date/time (IANA timezone name)",
    )
    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    @field_validator("point_selection", mode="before")
    @classmethod
    def validate_point_selection(cls, v: object) -> object:
        """Validate point selection is either 'all' or 'skip_boarding'."""
        if isinstance(v, str):
            v = v.lower()
            if v not in {selection.value for selection in PointSelection}:
                raise ValueError("point_selection must be either 'all' or 'skip_boarding'")
        return v

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()
