"""Common helpers shared across models."""


def format_coordinate(value: float) -> str:
    """Render a coordinate the way the points endpoint expects it.

    The API accepts at most four decimal places and redirects otherwise.
    """
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_point(lat: float, lon: float) -> str:
    return f"{format_coordinate(lat)},{format_coordinate(lon)}"
