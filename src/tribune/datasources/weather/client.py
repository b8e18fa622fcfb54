"""Open-Meteo API client constants.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Daily variables we request from Open-Meteo
DAILY_VARS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
    "daylight_duration",
    "wind_speed_10m_max",
]

# Units the paper prints in
UNITS = {
    "temperature_unit": "fahrenheit",
    "wind_speed_unit": "mph",
    "precipitation_unit": "inch",
}
