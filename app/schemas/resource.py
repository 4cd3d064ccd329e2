from pydantic import BaseModel
from typing import Optional


class DriverOut(BaseModel):
    id:   int
    name: Optional[str] = None
    model_config = {"from_attributes": True}


class VehicleOut(BaseModel):
    id:    int
    plate: Optional[str] = None
    model_config = {"from_attributes": True}


class EngineerOut(BaseModel):
    id:     int
    name:   Optional[str] = None
    branch: Optional[str] = None
    model_config = {"from_attributes": True}
