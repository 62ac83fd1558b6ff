"""
Rooms API

樓層經理的病房分配相關端點
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ..config import MAX_FLOOR_NUMBER, MIN_FLOOR_NUMBER
from ..core.hospital import Hospital
from ..exceptions import HospitalError
from ..models.requests import RoomAssignmentRequest, RoomReleaseRequest
from ..models.responses import PatientSummary, RoomAssignmentResponse, RoomAvailabilityResponse
from .deps import get_hospital

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get(
    "/floors/{floor_number}/available",
    response_model=RoomAvailabilityResponse,
    summary="樓層可用病房"
)
async def available_rooms(
    floor_number: int = Path(..., ge=MIN_FLOOR_NUMBER, le=MAX_FLOOR_NUMBER),
    hospital: Hospital = Depends(get_hospital)
) -> RoomAvailabilityResponse:
    rooms = hospital.available_rooms(floor_number)
    return RoomAvailabilityResponse(
        floor_number=floor_number,
        rooms=rooms,
        available_count=len(rooms)
    )


@router.get(
    "/awaiting",
    response_model=List[PatientSummary],
    summary="等待分配病房的病患",
    description="已報到且尚未分配病房的病患"
)
async def patients_awaiting_room(hospital: Hospital = Depends(get_hospital)):
    return [PatientSummary.from_person(p) for p in hospital.patients_awaiting_room()]


@router.get("/occupied", response_model=List[PatientSummary], summary="已分配病房的病患")
async def patients_with_rooms(hospital: Hospital = Depends(get_hospital)):
    return [PatientSummary.from_person(p) for p in hospital.patients_with_rooms()]


@router.post(
    "/assign",
    response_model=RoomAssignmentResponse,
    summary="分配病房",
    description="樓層經理將自己負責樓層的病房分配給病患"
)
async def assign_room(
    request: RoomAssignmentRequest,
    hospital: Hospital = Depends(get_hospital)
) -> RoomAssignmentResponse:
    try:
        room_number, floor_number = hospital.assign_room(
            manager_id=request.manager_id,
            patient_id=request.patient_id,
            room_number=request.room_number
        )
        patient = hospital.get_patient(request.patient_id)
        return RoomAssignmentResponse(
            success=True,
            message=(
                f"Patient {patient.name} has been assigned to room number "
                f"{room_number} on floor {floor_number}."
            ),
            patient_id=patient.person_id,
            room_number=room_number,
            floor_number=floor_number
        )
    except (HTTPException, HospitalError):
        raise
    except Exception as e:
        logger.exception("病房分配失敗")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"病房分配失敗: {str(e)}"
        )


@router.post("/unassign", response_model=RoomAssignmentResponse, summary="釋放病房")
async def unassign_room(
    request: RoomReleaseRequest,
    hospital: Hospital = Depends(get_hospital)
) -> RoomAssignmentResponse:
    room_number, floor_number = hospital.unassign_room(request.patient_id)
    return RoomAssignmentResponse(
        success=True,
        message=f"Room number {room_number} on floor {floor_number} has been unassigned.",
        patient_id=request.patient_id,
        room_number=room_number,
        floor_number=floor_number
    )
