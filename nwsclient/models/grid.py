"""Grid metadata resolved from a /points lookup."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridDescriptor:
    grid_id: str  # forecast office, e.g. "BOU"
    grid_x: int
    grid_y: int
    forecast_url: str
    forecast_hourly_url: str
    observation_stations_url: str
    city: str
    state: str
    time_zone: str

    @classmethod
    def from_api(cls, properties: dict) -> "GridDescriptor":
        """Build from the properties of a points response.

        Raises KeyError when one of the downstream URLs is missing.
        """
        location = (properties.get("relativeLocation") or {}).get("properties") or {}
        return cls(
            grid_id=properties.get("gridId", ""),
            grid_x=int(properties.get("gridX", 0)),
            grid_y=int(properties.get("gridY", 0)),
            forecast_url=properties["forecast"],
            forecast_hourly_url=properties["forecastHourly"],
            observation_stations_url=properties["observationStations"],
            city=location.get("city", ""),
            state=location.get("state", ""),
            time_zone=properties.get("timeZone", ""),
        )
