"""Active weather alert models."""

from dataclasses import dataclass
from enum import StrEnum


class AlertSeverity(StrEnum):
    MINOR = "Minor"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    EXTREME = "Extreme"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str | None) -> "AlertSeverity":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Alert:
    id: str
    area_desc: str
    sent: str
    effective: str
    expires: str
    status: str
    message_type: str
    category: str
    severity: AlertSeverity
    certainty: str
    urgency: str
    event: str
    headline: str | None
    description: str | None
    instruction: str | None

    @classmethod
    def from_api(cls, feature: dict) -> "Alert":
        props = feature.get("properties", {})
        return cls(
            id=props.get("id") or feature.get("id", ""),
            area_desc=props.get("areaDesc", ""),
            sent=props.get("sent", ""),
            effective=props.get("effective", ""),
            expires=props.get("expires", ""),
            status=props.get("status", ""),
            message_type=props.get("messageType", ""),
            category=props.get("category", ""),
            severity=AlertSeverity.parse(props.get("severity")),
            certainty=props.get("certainty", ""),
            urgency=props.get("urgency", ""),
            event=props.get("event", ""),
            headline=props.get("headline"),
            description=props.get("description"),
            instruction=props.get("instruction"),
        )


def parse_alerts(raw: dict) -> list[Alert]:
    """Unwrap the features array of an alerts response. Provider order is kept."""
    return [Alert.from_api(f) for f in raw.get("features", [])]
