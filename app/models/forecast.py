"""Open-Meteo ``/forecast`` payload with ``current_weather=true``.

Only the fields the service exposes are modelled; everything else the
provider sends (``generationtime_ms``, ``elevation``, units blocks, ...) is
ignored.
"""
from datetime import datetime

from pydantic import BaseModel, Field, StrictInt, field_validator


class CurrentWeather(BaseModel):
    temperature: float
    windspeed: float
    winddirection: float
    weathercode: int
    # provider sends 0/1; kept as int, JSON booleans rejected
    is_day: StrictInt = Field(ge=0, le=1)
    # provider-local wall clock, no offset
    time: datetime


class ForecastResult(BaseModel):
    latitude: float
    longitude: float
    timezone: str = ""
    current_weather: CurrentWeather | None = None

    @field_validator("timezone", mode="before")
    @classmethod
    def _blank_timezone(cls, value):
        return "" if value is None else value
