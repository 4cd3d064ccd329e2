from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from app.database import Base


class Driver(Base):
    __tablename__ = "drivers"

    id   = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)

    # ─── Relationships ─────────────────────────────────────────────────────────
    missions = relationship("Mission", back_populates="driver")

    def __repr__(self):
        return f"<Driver id={self.id} name={self.name}>"
