"""
Import all models here so that:
1. Base.metadata knows every table when init_db() creates the schema
2. Relationships between models resolve correctly

Order matters — import parent tables before child tables.
"""

from app.models.driver import Driver
from app.models.vehicle import Vehicle
from app.models.engineer import Engineer
from app.models.mission import Mission, MissionStatus

__all__ = [
    "Driver",
    "Vehicle",
    "Engineer",
    "Mission",
    "MissionStatus",
]
