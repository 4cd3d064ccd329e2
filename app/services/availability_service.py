import logging
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.driver import Driver
from app.models.engineer import Engineer
from app.models.mission import Mission, MissionStatus
from app.models.vehicle import Vehicle
from app.schemas.mission import snapshot_ids, stored_snapshot

logger = logging.getLogger(__name__)


def _active(column):
    return select(column).where(Mission.status == MissionStatus.ACTIVE)


class AvailabilityService:
    """
    Availability is derived on every call: a driver, vehicle or engineer is
    available iff no active mission references it. Nothing is cached.
    """

    def available_drivers(self, db: Session) -> list[Driver]:
        return db.query(Driver).filter(Driver.id.not_in(_active(Mission.driver_id))).all()

    def available_vehicles(self, db: Session) -> list[Vehicle]:
        return db.query(Vehicle).filter(Vehicle.id.not_in(_active(Mission.vehicle_id))).all()

    def available_engineers(self, db: Session) -> list[Engineer]:
        engineers = db.query(Engineer).all()
        snapshots = db.query(Mission.id, Mission.engineers)\
                      .filter(Mission.status == MissionStatus.ACTIVE).all()

        used_ids: set[int] = set()
        for mission_id, raw in snapshots:
            try:
                entries = stored_snapshot.validate_json(raw)
            except ValidationError:
                logger.warning(f"Skipping malformed engineers snapshot of mission #{mission_id}")
                continue
            used_ids |= snapshot_ids(entries)

        return [e for e in engineers if e.id not in used_ids]


availability_service = AvailabilityService()
