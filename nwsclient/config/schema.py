"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "nwsclient/0.1.0 (https://github.com/nwsclient/nwsclient)"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_BASE_URL
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_attempts: int = Field(default=4, ge=1)
    retry_base_delay_seconds: float = Field(default=1.0, ge=0.0)


class CacheTtlConfig(BaseModel):
    model_config = {"extra": "forbid"}

    points_seconds: int = Field(default=86400, ge=0)  # grid assignment is static
    forecast_seconds: int = Field(default=1800, ge=0)
    hourly_forecast_seconds: int = Field(default=3600, ge=0)
    alerts_seconds: int = Field(default=60, ge=0)
    stations_seconds: int = Field(default=86400, ge=0)
    observation_seconds: int = Field(default=300, ge=0)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    cache: CacheTtlConfig = CacheTtlConfig()
    locations: list[LocationConfig] = []

    def find_location(self, slug: str) -> LocationConfig | None:
        for loc in self.locations:
            if loc.slug == slug:
                return loc
        return None
