from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, UniqueConstraint

from app.models.base import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    # set once on insert, never updated
    creation_time = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        UniqueConstraint("latitude", "longitude", name="uq_locations_latitude_longitude"),
        # ids are never handed out twice, even after deletes
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<Location id={self.id} lat={self.latitude} lon={self.longitude}>"
