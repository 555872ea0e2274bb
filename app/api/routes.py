from fastapi import APIRouter

from app.api import locations, weather

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


router.include_router(locations.router)
router.include_router(weather.router)
