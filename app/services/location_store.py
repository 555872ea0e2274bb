import logging
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageError
from app.models.location import Location

logger = logging.getLogger(__name__)


class LocationStore:
    """Deduplicated CRUD over the ``locations`` table, bound to one session.

    The unique constraint on (latitude, longitude) is what keeps concurrent
    writers from creating duplicates; ``upsert_location`` inserts
    optimistically and falls back to re-reading the row when it loses a race.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _storage_errors(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Storage failure while %s: %s", action, exc)
            raise StorageError(f"Storage failure while {action}") from exc

    def _find_by_coordinates(self, latitude: float, longitude: float) -> Location | None:
        stmt = select(Location).where(Location.latitude == latitude, Location.longitude == longitude)
        return self.session.scalars(stmt).first()

    def upsert_location(self, latitude: float, longitude: float) -> Location:
        """Return the row for (latitude, longitude), inserting it if missing.

        Ranges are expected to be validated by the caller.
        """
        with self._storage_errors("adding location"):
            existing = self._find_by_coordinates(latitude, longitude)
            if existing is not None:
                return existing

            location = Location(latitude=latitude, longitude=longitude)
            self.session.add(location)
            try:
                self.session.commit()
            except IntegrityError:
                # Another writer inserted the same pair between our lookup and
                # our insert. Anything else is a real constraint failure.
                self.session.rollback()
                winner = self._find_by_coordinates(latitude, longitude)
                if winner is None:
                    raise
                logger.info(
                    "Concurrent insert for (%s, %s); returning location %s", latitude, longitude, winner.id
                )
                return winner

            self.session.refresh(location)
            logger.info("Stored location %s at (%s, %s)", location.id, latitude, longitude)
            return location

    def get_by_id(self, location_id: int) -> Location | None:
        with self._storage_errors("reading location"):
            return self.session.get(Location, location_id)

    def list_all(self) -> list[Location]:
        """All locations ordered by id.

        Read-only: nothing is flushed and the returned rows are detached, so
        the session does not track them.
        """
        with self._storage_errors("listing locations"), self.session.no_autoflush:
            stmt = select(Location).order_by(Location.id)
            locations = list(self.session.scalars(stmt).all())
            for location in locations:
                self.session.expunge(location)
            return locations

    def release(self):
        """End the current transaction and hand the connection back to the pool.

        Rows already loaded stay readable. Call before slow non-database work.
        """
        self.session.close()

    def delete_by_id(self, location_id: int) -> bool:
        with self._storage_errors("deleting location"):
            location = self.session.get(Location, location_id)
            if location is None:
                return False
            self.session.delete(location)
            self.session.commit()
            logger.info("Deleted location %s", location_id)
            return True
