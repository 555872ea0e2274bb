from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.api.deps import get_location_store
from app.services.location_store import LocationStore

router = APIRouter(prefix="/locations", tags=["locations"])


class AddLocationRequest(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class LocationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    latitude: float
    longitude: float
    creation_time: datetime

    @field_validator("creation_time")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo; they are stored as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


@router.post("", response_model=LocationOut)
def add_location(req: AddLocationRequest, store: LocationStore = Depends(get_location_store)):
    """
    Add a location. If the same latitude/longitude is already stored the
    existing row is returned unchanged; both cases answer 200.
    """
    return store.upsert_location(req.latitude, req.longitude)


@router.get("", response_model=list[LocationOut])
def list_locations(store: LocationStore = Depends(get_location_store)):
    locations = store.list_all()
    if not locations:
        raise HTTPException(status_code=404, detail="No locations found.")
    return locations


@router.get("/{location_id}", response_model=LocationOut)
def get_location(location_id: int, store: LocationStore = Depends(get_location_store)):
    location = store.get_by_id(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail=f"Location with ID {location_id} not found.")
    return location


@router.delete("/{location_id}", status_code=204)
def delete_location(location_id: int, store: LocationStore = Depends(get_location_store)):
    if not store.delete_by_id(location_id):
        raise HTTPException(status_code=404, detail=f"Location with ID {location_id} not found.")
    return Response(status_code=204)
