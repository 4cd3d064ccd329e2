import enum
from sqlalchemy import Column, Integer, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.database import Base


class MissionStatus(str, enum.Enum):
    ACTIVE    = "active"
    COMPLETED = "completed"


class Mission(Base):
    __tablename__ = "missions"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    driver_id  = Column(Integer, ForeignKey("drivers.id"), nullable=False)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False)
    engineers  = Column(Text, nullable=False)   # JSON snapshot, see app.schemas.mission
    start_time = Column(Text)
    end_time   = Column(Text)
    status     = Column(
        Enum(MissionStatus, native_enum=False, length=20,
             values_callable=lambda e: [m.value for m in e]),
        default=MissionStatus.ACTIVE, nullable=False, index=True,
    )

    # ─── Relationships ─────────────────────────────────────────────────────────
    driver  = relationship("Driver", back_populates="missions")
    vehicle = relationship("Vehicle", back_populates="missions")

    def __repr__(self):
        return f"<Mission id={self.id} status={self.status} driverId={self.driver_id} vehicleId={self.vehicle_id}>"
