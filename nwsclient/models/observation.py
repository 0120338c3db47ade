"""Station observation models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuantitativeValue:
    unit_code: str  # e.g. "wmoUnit:degC"
    value: float | None  # None when the sensor did not report

    @classmethod
    def from_api(cls, raw: dict | None) -> "QuantitativeValue":
        if not raw:
            return cls(unit_code="", value=None)
        value = raw.get("value")
        return cls(
            unit_code=raw.get("unitCode", ""),
            value=float(value) if value is not None else None,
        )


@dataclass(frozen=True)
class ObservationReading:
    station_id: str
    timestamp: str
    text_description: str
    temperature: QuantitativeValue
    dewpoint: QuantitativeValue
    wind_direction: QuantitativeValue
    wind_speed: QuantitativeValue
    wind_gust: QuantitativeValue
    barometric_pressure: QuantitativeValue
    visibility: QuantitativeValue
    relative_humidity: QuantitativeValue
    wind_chill: QuantitativeValue
    heat_index: QuantitativeValue

    @classmethod
    def from_api(cls, raw: dict, station_id: str) -> "ObservationReading":
        props = raw.get("properties", {})
        q = QuantitativeValue.from_api
        return cls(
            station_id=station_id,
            timestamp=props.get("timestamp", ""),
            text_description=props.get("textDescription") or "",
            temperature=q(props.get("temperature")),
            dewpoint=q(props.get("dewpoint")),
            wind_direction=q(props.get("windDirection")),
            wind_speed=q(props.get("windSpeed")),
            wind_gust=q(props.get("windGust")),
            barometric_pressure=q(props.get("barometricPressure")),
            visibility=q(props.get("visibility")),
            relative_humidity=q(props.get("relativeHumidity")),
            wind_chill=q(props.get("windChill")),
            heat_index=q(props.get("heatIndex")),
        )
