"""NWS API client: coordinate-to-grid resolution and typed forecast operations."""

import logging
import time
from collections.abc import Callable

import httpx

from nwsclient.config.schema import (
    DEFAULT_USER_AGENT,
    NWS_BASE_URL,
    CacheTtlConfig,
    ClientConfig,
)
from nwsclient.ingest.errors import NwsApiError
from nwsclient.ingest.fetcher import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RETRY_BASE_DELAY,
    CachedFetcher,
)
from nwsclient.models.alert import Alert, parse_alerts
from nwsclient.models.common import format_point
from nwsclient.models.forecast import ForecastPeriod, parse_periods
from nwsclient.models.grid import GridDescriptor
from nwsclient.models.observation import ObservationReading

logger = logging.getLogger(__name__)


class NwsClient:
    """Async client for api.weather.gov.

    Every operation except active alerts first resolves the coordinate to
    its forecast grid. Responses are cached per URL for the lifetime of the
    client, with TTLs taken from CacheTtlConfig.
    """

    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_base_delay: float = DEFAULT_RETRY_BASE_DELAY,
        ttls: CacheTtlConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.base_url = base_url.rstrip("/")
        self.ttls = ttls or CacheTtlConfig()
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout, follow_redirects=True
        )
        self.fetcher = CachedFetcher(
            self._http,
            user_agent=user_agent,
            max_attempts=max_attempts,
            retry_base_delay=retry_base_delay,
            clock=clock,
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: httpx.AsyncClient | None = None
    ) -> "NwsClient":
        return cls(
            base_url=config.api.base_url,
            user_agent=config.api.user_agent,
            timeout=config.api.timeout_seconds,
            max_attempts=config.api.max_attempts,
            retry_base_delay=config.api.retry_base_delay_seconds,
            ttls=config.cache,
            http_client=http_client,
        )

    async def __aenter__(self) -> "NwsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def clear_cache(self) -> None:
        self.fetcher.cache.clear()

    async def get_grid_point(self, lat: float, lon: float) -> GridDescriptor:
        """Resolve a coordinate to its forecast grid and downstream URLs."""
        url = f"{self.base_url}/points/{format_point(lat, lon)}"
        raw = await self.fetcher.fetch(url, self.ttls.points_seconds)
        try:
            return GridDescriptor.from_api(raw["properties"])
        except (KeyError, TypeError) as e:
            logger.error("Malformed points response from %s: missing %s", url, e)
            raise NwsApiError(
                f"Malformed points response: missing {e}", 0, url, False
            ) from e

    async def get_forecast(self, lat: float, lon: float) -> list[ForecastPeriod]:
        """12-hour forecast periods, about seven days out."""
        grid = await self.get_grid_point(lat, lon)
        raw = await self.fetcher.fetch(grid.forecast_url, self.ttls.forecast_seconds)
        return parse_periods(raw)

    async def get_hourly_forecast(self, lat: float, lon: float) -> list[ForecastPeriod]:
        grid = await self.get_grid_point(lat, lon)
        raw = await self.fetcher.fetch(
            grid.forecast_hourly_url, self.ttls.hourly_forecast_seconds
        )
        return parse_periods(raw)

    async def get_active_alerts(self, lat: float, lon: float) -> list[Alert]:
        url = f"{self.base_url}/alerts/active?point={format_point(lat, lon)}"
        raw = await self.fetcher.fetch(url, self.ttls.alerts_seconds)
        return parse_alerts(raw)

    async def get_latest_observation(self, lat: float, lon: float) -> ObservationReading:
        """Latest reading from the first station listed for the grid."""
        grid = await self.get_grid_point(lat, lon)
        stations_url = grid.observation_stations_url
        stations = await self.fetcher.fetch(stations_url, self.ttls.stations_seconds)

        features = stations.get("features") or []
        if not features:
            logger.error("No observation stations listed at %s", stations_url)
            raise NwsApiError(
                f"No observation stations found (lat: {lat}, lon: {lon}) "
                f"at {stations_url}",
                0,
                stations_url,
                False,
            )

        try:
            station_id = features[0]["properties"]["stationIdentifier"]
        except (KeyError, TypeError) as e:
            logger.error("Malformed station list from %s: missing %s", stations_url, e)
            raise NwsApiError(
                f"Malformed station list: missing {e}", 0, stations_url, False
            ) from e

        obs_url = f"{self.base_url}/stations/{station_id}/observations/latest"
        raw = await self.fetcher.fetch(obs_url, self.ttls.observation_seconds)
        return ObservationReading.from_api(raw, station_id)
