from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.resource import DriverOut, VehicleOut, EngineerOut
from app.services.availability_service import availability_service

router = APIRouter()


@router.get("/available-drivers", response_model=list[DriverOut],
            summary="Drivers not on an active mission")
def available_drivers(db: Session = Depends(get_db)):
    return availability_service.available_drivers(db)


@router.get("/available-vehicles", response_model=list[VehicleOut],
            summary="Vehicles not on an active mission")
def available_vehicles(db: Session = Depends(get_db)):
    return availability_service.available_vehicles(db)


@router.get("/available-engineers", response_model=list[EngineerOut],
            summary="Engineers not on an active mission")
def available_engineers(db: Session = Depends(get_db)):
    return availability_service.available_engineers(db)
