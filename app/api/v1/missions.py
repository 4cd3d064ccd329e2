from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import SuccessFlag, success_flag
from app.schemas.mission import MissionCreateRequest, MissionCreatedOut, MissionOut
from app.services.mission_service import mission_service

router = APIRouter(prefix="/missions")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MissionCreatedOut,
             summary="Create mission")
def create_mission(body: MissionCreateRequest, db: Session = Depends(get_db)):
    return {"id": mission_service.create_mission(db, body)}


@router.get("", response_model=list[MissionOut], summary="List missions (newest first)")
def list_missions(db: Session = Depends(get_db)):
    return mission_service.list_missions(db)


@router.delete("/{mission_id}", response_model=SuccessFlag, summary="Delete mission")
def delete_mission(mission_id: int, db: Session = Depends(get_db)):
    return success_flag(mission_service.delete_mission(db, mission_id))


@router.put("/{mission_id}/complete", response_model=SuccessFlag, summary="Mark mission completed")
def complete_mission(mission_id: int, db: Session = Depends(get_db)):
    return success_flag(mission_service.complete_mission(db, mission_id))
