"""CLI entry point for the NWS client."""

import argparse
import asyncio
import logging

from nwsclient.config.loader import get_config_value, load_config
from nwsclient.config.schema import ClientConfig
from nwsclient.ingest.errors import NwsApiError
from nwsclient.ingest.nws_client import NwsClient
from nwsclient.reporting.formatters import (
    format_alerts_text,
    format_forecast_text,
    format_json,
    format_observation_text,
)

WEATHER_COMMANDS = ("forecast", "hourly", "alerts", "observation")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nwsclient",
        description="National Weather Service API client",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("forecast", "Show the 7-day forecast"),
        ("hourly", "Show the hourly forecast"),
        ("alerts", "Show active alerts"),
        ("observation", "Show the latest station observation"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--lat", type=float, help="Latitude")
        p.add_argument("--lon", type=float, help="Longitude")
        p.add_argument("--location", help="Named location slug from config")
        p.add_argument("--json", action="store_true", help="JSON output")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. cache.alerts_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command in WEATHER_COMMANDS:
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _resolve_coordinates(config: ClientConfig, args) -> tuple[float, float] | None:
    if args.location:
        loc = config.find_location(args.location)
        if loc is None:
            print(f"Error: unknown location '{args.location}'")
            return None
        return loc.lat, loc.lon
    if args.lat is None or args.lon is None:
        print("Error: use --location SLUG or both --lat and --lon")
        return None
    return args.lat, args.lon


def _cmd_weather(config: ClientConfig, args) -> int:
    coords = _resolve_coordinates(config, args)
    if coords is None:
        return 1
    lat, lon = coords
    try:
        output = asyncio.run(_run_weather(config, args.command, lat, lon, args.json))
    except NwsApiError as e:
        print(f"Error: {e.message} (status {e.status_code})")
        return 1
    print(output)
    return 0


async def _run_weather(
    config: ClientConfig, command: str, lat: float, lon: float, as_json: bool
) -> str:
    async with NwsClient.from_config(config) as client:
        if command == "forecast":
            periods = await client.get_forecast(lat, lon)
            return format_json(periods) if as_json else format_forecast_text(periods)
        if command == "hourly":
            periods = await client.get_hourly_forecast(lat, lon)
            return format_json(periods) if as_json else format_forecast_text(periods)
        if command == "alerts":
            alerts = await client.get_active_alerts(lat, lon)
            return format_json(alerts) if as_json else format_alerts_text(alerts)
        obs = await client.get_latest_observation(lat, lon)
        return format_json(obs) if as_json else format_observation_text(obs)


def _cmd_config(config: ClientConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(f"{args.key} = {value}")
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1
