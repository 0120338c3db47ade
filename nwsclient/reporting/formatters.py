"""Output formatters for forecasts, alerts and observations."""

import json
from dataclasses import asdict
from typing import Any

from nwsclient.models.alert import Alert
from nwsclient.models.forecast import ForecastPeriod
from nwsclient.models.observation import ObservationReading, QuantitativeValue

# wmoUnit:degC -> degC
_UNIT_PREFIX = "wmoUnit:"


def format_forecast_text(periods: list[ForecastPeriod]) -> str:
    """One line per period."""
    if not periods:
        return "No forecast periods"
    lines = []
    for p in periods:
        label = p.name or p.start_time
        lines.append(
            f"{label}: {p.temperature}°{p.temperature_unit}, {p.short_forecast} "
            f"(wind {p.wind_direction} {p.wind_speed})"
        )
    return "\n".join(lines)


def format_alerts_text(alerts: list[Alert]) -> str:
    if not alerts:
        return "No active alerts"
    lines = [f"=== {len(alerts)} active alert(s) ==="]
    for a in alerts:
        lines.append(f"[{a.severity}] {a.event} until {a.expires}")
        if a.headline:
            lines.append(f"  {a.headline}")
        lines.append(f"  Area: {a.area_desc}")
    return "\n".join(lines)


def format_observation_text(obs: ObservationReading) -> str:
    lines = [
        f"=== Station {obs.station_id} | {obs.timestamp} ===",
        obs.text_description or "(no description)",
        f"Temperature: {_quantity(obs.temperature)}",
        f"Dewpoint: {_quantity(obs.dewpoint)}",
        f"Humidity: {_quantity(obs.relative_humidity)}",
        f"Wind: {_quantity(obs.wind_speed)} from {_quantity(obs.wind_direction)}, "
        f"gusts {_quantity(obs.wind_gust)}",
        f"Pressure: {_quantity(obs.barometric_pressure)}",
        f"Visibility: {_quantity(obs.visibility)}",
    ]
    if obs.wind_chill.value is not None:
        lines.append(f"Wind chill: {_quantity(obs.wind_chill)}")
    if obs.heat_index.value is not None:
        lines.append(f"Heat index: {_quantity(obs.heat_index)}")
    return "\n".join(lines)


def format_json(data: Any) -> str:
    """JSON for programmatic consumption. Accepts a dataclass or a list of them."""
    if isinstance(data, list):
        payload = [asdict(item) for item in data]
    else:
        payload = asdict(data)
    return json.dumps(payload, indent=2)


def _quantity(q: QuantitativeValue) -> str:
    if q.value is None:
        return "n/a"
    unit = q.unit_code.removeprefix(_UNIT_PREFIX)
    return f"{q.value:.1f} {unit}".rstrip()
