"""NWS forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastPeriod:
    number: int
    name: str  # e.g. "Tonight", "Monday"; empty for hourly periods
    start_time: str  # ISO 8601
    end_time: str
    is_daytime: bool
    temperature: int
    temperature_unit: str
    wind_speed: str  # e.g. "10 mph"
    wind_direction: str
    icon: str
    short_forecast: str
    detailed_forecast: str

    @classmethod
    def from_api(cls, p: dict) -> "ForecastPeriod":
        return cls(
            number=int(p.get("number", 0)),
            name=p.get("name", ""),
            start_time=p.get("startTime", ""),
            end_time=p.get("endTime", ""),
            is_daytime=bool(p.get("isDaytime", False)),
            temperature=int(p.get("temperature", 0)),
            temperature_unit=p.get("temperatureUnit", "F"),
            wind_speed=p.get("windSpeed", ""),
            wind_direction=p.get("windDirection", ""),
            icon=p.get("icon", ""),
            short_forecast=p.get("shortForecast", ""),
            detailed_forecast=p.get("detailedForecast", ""),
        )


def parse_periods(raw: dict) -> list[ForecastPeriod]:
    """Unwrap the periods array of a forecast response, keeping provider order."""
    properties = raw.get("properties", {})
    return [ForecastPeriod.from_api(p) for p in properties.get("periods", [])]
