"""Default named locations for the command line."""

from nwsclient.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(name="Denver", slug="denver", lat=39.7456, lon=-104.9994),
    LocationConfig(name="New York City", slug="nyc", lat=40.7128, lon=-74.006),
    LocationConfig(name="Chicago", slug="chicago", lat=41.8781, lon=-87.6298),
    LocationConfig(name="Seattle", slug="seattle", lat=47.6062, lon=-122.3321),
    LocationConfig(name="Miami", slug="miami", lat=25.7617, lon=-80.1918),
]
