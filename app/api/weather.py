from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.api.deps import get_forecast_client, get_location_store
from app.core.config import settings
from app.models.forecast import ForecastResult
from app.services.location_store import LocationStore
from app.services.open_meteo import OpenMeteoClient

router = APIRouter(prefix="/weatherforecast", tags=["weather"])


class WeatherForecastOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    latitude: float
    longitude: float
    timezone: str
    temperature: float
    windspeed: float
    wind_direction: float
    weather_code: int
    is_day: int
    # "YYYY-MM-DD HH:MM:SSZ"
    time: str

    @classmethod
    def from_forecast(cls, forecast: ForecastResult) -> "WeatherForecastOut":
        current = forecast.current_weather
        return cls(
            latitude=forecast.latitude,
            longitude=forecast.longitude,
            timezone=forecast.timezone,
            temperature=current.temperature,
            windspeed=current.windspeed,
            wind_direction=current.winddirection,
            weather_code=current.weathercode,
            is_day=current.is_day,
            time=_universal_time(current.time),
        )


def _universal_time(value: datetime) -> str:
    # naive values are provider wall clock and are rendered as-is
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%SZ")


def _current_weather(client: OpenMeteoClient, latitude: float, longitude: float) -> WeatherForecastOut:
    forecast = client.get_current_weather(latitude, longitude, timeout=settings.weather_api_timeout_seconds)
    if forecast is None or forecast.current_weather is None:
        raise HTTPException(status_code=404, detail="Weather data not available.")
    return WeatherForecastOut.from_forecast(forecast)


@router.get("", response_model=WeatherForecastOut)
def get_weather_by_coordinates(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    client: OpenMeteoClient = Depends(get_forecast_client),
):
    """Current weather for explicit coordinates, e.g. ``/weatherforecast?latitude=78.88&longitude=-21.77``."""
    return _current_weather(client, latitude, longitude)


@router.get("/{location_id}", response_model=WeatherForecastOut)
def get_weather_by_location(
    location_id: int,
    store: LocationStore = Depends(get_location_store),
    client: OpenMeteoClient = Depends(get_forecast_client),
):
    """Current weather for a stored location."""
    location = store.get_by_id(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail=f"Location with ID {location_id} not found.")
    latitude, longitude = location.latitude, location.longitude
    # no pooled connection is held while waiting on the provider
    store.release()
    return _current_weather(client, latitude, longitude)
