"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from nwsclient.cli import main

POINTS_URL = "https://api.weather.gov/points/39.7456,-104.9994"
FORECAST_URL = "https://api.weather.gov/gridpoints/BOU/63,62/forecast"
ALERTS_URL = "https://api.weather.gov/alerts/active?point=39.7,-104.9"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "api.weather.gov" in captured.out

    def test_config_get(self, capsys):
        result = main(["config", "get", "cache.observation_seconds"])
        assert result == 0
        assert "cache.observation_seconds = 300" in capsys.readouterr().out

    def test_config_get_unknown_key(self, capsys):
        assert main(["config", "get", "bogus"]) == 1

    def test_missing_coordinates(self, capsys):
        assert main(["forecast"]) == 1
        assert "--lat" in capsys.readouterr().out

    def test_unknown_location(self, capsys):
        assert main(["alerts", "--location", "atlantis"]) == 1
        assert "unknown location" in capsys.readouterr().out

    @respx.mock
    def test_forecast_by_location(
        self, capsys, points_denver: dict, forecast_denver: dict
    ):
        respx.get(POINTS_URL).mock(return_value=httpx.Response(200, json=points_denver))
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_denver))

        result = main(["forecast", "--location", "denver"])

        assert result == 0
        assert "Tonight: 41°F" in capsys.readouterr().out

    @respx.mock
    def test_alerts_json(self, capsys, alerts_denver: dict):
        respx.get(ALERTS_URL).mock(return_value=httpx.Response(200, json=alerts_denver))

        result = main(["alerts", "--lat", "39.7", "--lon", "-104.9", "--json"])

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["event"] == "Red Flag Warning"

    @respx.mock
    def test_api_error_returns_1(self, capsys):
        respx.get(POINTS_URL).mock(return_value=httpx.Response(404))

        result = main(["observation", "--location", "denver"])

        assert result == 1
        assert "status 404" in capsys.readouterr().out
