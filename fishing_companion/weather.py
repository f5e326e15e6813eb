"""
Weather, sun and tide data.

Proxies OpenWeatherMap (imperial units) and sunrise-sunset.org, converts
OpenWeatherMap payloads into observations for the conditions scorer, and
serves fixed tide samples for coastal longitudes.
"""
import asyncio
import datetime
from typing import Any, Dict, List, Optional

import httpx

from .config import settings
from .schemas import SunData, TideData, WeatherObservation

# Semaphore to limit concurrent API requests (prevents rate limiting)
_SEM: asyncio.Semaphore = asyncio.Semaphore(settings.MAX_CONCURRENT_WEATHER_REQUESTS)

LUNAR_CYCLE_DAYS: float = 29.5

# Mocked tide table; there is no tide model behind it.
SAMPLE_TIDES: List[TideData] = [
    TideData(time="03:42:00", height=1.2, type="low"),
    TideData(time="09:56:00", height=4.5, type="high"),
    TideData(time="16:12:00", height=0.8, type="low"),
    TideData(time="22:24:00", height=3.9, type="high"),
]


class MissingApiKeyError(RuntimeError):
    """Raised when OpenWeatherMap is called without a configured key."""


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.WEATHER_API_TIMEOUT)


async def _get_json(url: str, params: Dict[str, Any]) -> Any:
    async with _SEM:
        async with _client() as client:
            r = await client.get(url, params=params)
            r.raise_for_status()
            return r.json()


async def _openweather(endpoint: str, lat: float, lon: float) -> Dict[str, Any]:
    if not settings.OPENWEATHER_API_KEY:
        raise MissingApiKeyError("Missing OPENWEATHER_API_KEY")
    params = {
        "lat": lat,
        "lon": lon,
        "appid": settings.OPENWEATHER_API_KEY,
        "units": "imperial",
    }
    return await _get_json(f"{settings.OPENWEATHER_URL}/{endpoint}", params)


async def fetch_current(lat: float, lon: float) -> Dict[str, Any]:
    """
    Fetch current conditions from OpenWeatherMap.

    Raises:
        MissingApiKeyError: If no API key is configured
        httpx.HTTPError: If the request fails
    """
    return await _openweather("weather", lat, lon)


async def fetch_forecast(lat: float, lon: float) -> Dict[str, Any]:
    """Fetch the 5-day / 3-hour forecast from OpenWeatherMap."""
    return await _openweather("forecast", lat, lon)


async def fetch_sun(lat: float, lon: float, date: datetime.date) -> SunData:
    """Fetch sunrise and sunset (UTC) and attach an estimated moon phase."""
    params = {"lat": lat, "lng": lon, "date": date.isoformat(), "formatted": 0}
    payload = await _get_json(settings.SUNRISE_SUNSET_URL, params)
    results = payload["results"]
    return SunData(
        sunrise=clock_time(results["sunrise"]),
        sunset=clock_time(results["sunset"]),
        moon_phase=moon_phase(date),
    )


def clock_time(timestamp: str) -> str:
    """'2024-05-01T10:22:11+00:00' -> '10:22:11'"""
    return timestamp.split("T")[1].split("+")[0]


def get_wind_direction(degrees: Optional[float]) -> Optional[str]:
    """
    Convert wind direction degrees to cardinal direction.

    Args:
        degrees: Wind direction in degrees (0-360)

    Returns:
        Cardinal direction string (N, NNE, NE, etc.), or None if unknown
    """
    if degrees is None:
        return None

    directions: List[str] = [
        "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
        "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"
    ]
    index: int = round(degrees / 22.5) % 16
    return directions[index]


def to_observation(payload: Dict[str, Any]) -> WeatherObservation:
    """
    Convert one OpenWeatherMap reading (current or forecast item) into an
    observation. Precipitation is last-hour rain, 0 when absent.
    """
    main: Dict[str, Any] = payload.get("main", {})
    wind: Dict[str, Any] = payload.get("wind", {})
    rain: Dict[str, Any] = payload.get("rain") or {}
    conditions: List[Dict[str, Any]] = payload.get("weather") or [{}]

    dt = payload.get("dt")
    date = (
        datetime.datetime.fromtimestamp(dt, tz=datetime.timezone.utc).isoformat()
        if dt is not None else None
    )

    return WeatherObservation(
        date=date,
        temperature=main.get("temp"),
        wind_speed=wind.get("speed", 0.0),
        wind_direction=get_wind_direction(wind.get("deg")),
        pressure=main.get("pressure"),
        humidity=main.get("humidity"),
        precipitation=rain.get("1h") or 0.0,
        conditions=conditions[0].get("description"),
        icon=conditions[0].get("icon"),
    )


def forecast_observations(payload: Dict[str, Any]) -> List[WeatherObservation]:
    return [to_observation(item) for item in payload.get("list", [])]


def moon_phase(date: datetime.date) -> float:
    """Rough lunar phase in [0, 1): days since the Unix epoch modulo 29.5."""
    days = (date - datetime.date(1970, 1, 1)).days
    return (days % LUNAR_CYCLE_DAYS) / LUNAR_CYCLE_DAYS


def moon_phase_name(phase: float) -> str:
    if phase == 0:
        return "New Moon"
    if phase < 0.25:
        return "Waxing Crescent"
    if phase == 0.25:
        return "First Quarter"
    if phase < 0.5:
        return "Waxing Gibbous"
    if phase == 0.5:
        return "Full Moon"
    if phase < 0.75:
        return "Waning Gibbous"
    if phase == 0.75:
        return "Last Quarter"
    return "Waning Crescent"


def is_coastal(lon: float) -> bool:
    """Crude coast check: US Pacific/Atlantic longitude bands or the eastern Mediterranean."""
    lon_abs = abs(lon)
    us_coast = abs(lon_abs - 123) < 3 or abs(lon_abs - 74) < 3
    med_coast = 33 <= lon_abs <= 36
    return us_coast or med_coast


def tides_for(lon: float) -> List[TideData]:
    """Sample tides for coastal longitudes, nothing inland."""
    if not is_coastal(lon):
        return []
    return [t.model_copy() for t in SAMPLE_TIDES]
