import logging
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.models.driver import Driver
from app.models.mission import Mission, MissionStatus
from app.models.vehicle import Vehicle
from app.schemas.mission import MissionCreateRequest, engineer_snapshot, fits_sql_int, stored_snapshot
from app.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


def _decode_engineers(m: Mission) -> list:
    try:
        return stored_snapshot.validate_json(m.engineers)
    except ValidationError:
        logger.warning(f"Mission #{m.id} has a malformed engineers snapshot, listing it as empty")
        return []


def _serialize(m: Mission, driver_name: str | None, plate: str | None) -> dict:
    return {
        "id":           m.id,
        "driver_id":    m.driver_id,
        "vehicle_id":   m.vehicle_id,
        "engineers":    _decode_engineers(m),
        "start_time":   m.start_time,
        "end_time":     m.end_time,
        "status":       m.status.value,
        "driver_name":  driver_name,
        "plate_number": plate,
    }


class MissionService:

    def create_mission(self, db: Session, data: MissionCreateRequest) -> int:
        if not db.query(Driver.id).filter(Driver.id == data.driver_id).first():
            raise NotFoundException("Driver", field="driver_id")
        if not db.query(Vehicle.id).filter(Vehicle.id == data.vehicle_id).first():
            raise NotFoundException("Vehicle", field="vehicle_id")

        m = Mission(
            driver_id=data.driver_id,
            vehicle_id=data.vehicle_id,
            engineers=engineer_snapshot.dump_json(data.engineers).decode(),
            start_time=data.start_time,
            end_time=data.end_time,
            status=MissionStatus.ACTIVE,
        )
        db.add(m)
        db.commit()
        logger.info(f"Mission #{m.id} created: driver={m.driver_id} vehicle={m.vehicle_id} "
                    f"engineers={len(data.engineers)}")
        return m.id

    def list_missions(self, db: Session) -> list[dict]:
        # Inner joins: a mission whose driver or vehicle row is gone is left out.
        rows = db.query(Mission, Driver.name, Vehicle.plate)\
                 .join(Driver, Driver.id == Mission.driver_id)\
                 .join(Vehicle, Vehicle.id == Mission.vehicle_id)\
                 .order_by(Mission.id.desc())\
                 .all()
        return [_serialize(m, name, plate) for m, name, plate in rows]

    def complete_mission(self, db: Session, mission_id: int) -> bool:
        """
        Mark a mission completed. Unknown and already completed ids are not
        distinguished: both are a successful no-op.
        """
        # No row can have an id outside the INTEGER range.
        if not fits_sql_int(mission_id):
            return True
        count = db.query(Mission).filter(Mission.id == mission_id)\
                  .update({Mission.status: MissionStatus.COMPLETED})
        db.commit()
        logger.info(f"Mission #{mission_id} completed (rows={count})")
        return True

    def delete_mission(self, db: Session, mission_id: int) -> bool:
        if not fits_sql_int(mission_id):
            return True
        count = db.query(Mission).filter(Mission.id == mission_id)\
                  .delete()
        db.commit()
        logger.info(f"Mission #{mission_id} deleted (rows={count})")
        return True


mission_service = MissionService()
