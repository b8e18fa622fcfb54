"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

# WMO Weather Interpretation Codes (https://open-meteo.com/en/docs),
# abbreviated to fit a single printed line.
WMO_CONDITIONS: dict[int, str] = {
    0: "Clear",
    1: "Mostly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light Drizzle",
    53: "Drizzle",
    55: "Heavy Drizzle",
    56: "Frz Drizzle",
    57: "Frz Drizzle",
    61: "Slight Rain",
    63: "Rain",
    65: "Heavy Rain",
    66: "Light Frz Rain",
    67: "Heavy Frz Rain",
    71: "Light Snow",
    73: "Snow",
    75: "Heavy Snow",
    77: "Snow",
    80: "Light Showers",
    81: "Showers",
    82: "Heavy Showers",
    85: "Snow Showers",
    86: "Heavy Snow Showers",
    95: "Thunderstorms",
    96: "Hail Storms",
    99: "Heavy Hail Storms",
}

UNKNOWN_CONDITIONS = "Unknown"


def wmo_code_to_conditions(code: int) -> str:
    """Convert a WMO weather code to a short condition label."""
    return WMO_CONDITIONS.get(code, UNKNOWN_CONDITIONS)
