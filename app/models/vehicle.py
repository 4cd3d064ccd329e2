from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id    = Column(Integer, primary_key=True, autoincrement=True)
    plate = Column(Text)

    # ─── Relationships ─────────────────────────────────────────────────────────
    missions = relationship("Mission", back_populates="vehicle")

    def __repr__(self):
        return f"<Vehicle id={self.id} plate={self.plate}>"
