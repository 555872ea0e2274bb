from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.services.location_store import LocationStore
from app.services.open_meteo import OpenMeteoClient


def get_location_store(db: Session = Depends(get_db)) -> LocationStore:
    return LocationStore(db)


@lru_cache
def get_forecast_client() -> OpenMeteoClient:
    # one client (and connection pool) per process
    return OpenMeteoClient(
        base_url=settings.weather_api_base_url,
        timeout=settings.weather_api_timeout_seconds,
    )
