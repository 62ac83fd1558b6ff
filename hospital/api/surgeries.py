"""
hospital/api/surgeries.py
手術指派與外科醫師排程 API 路由 (FastAPI)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.hospital import Hospital
from ..exceptions import HospitalError
from ..models.requests import SurgeryAssignmentRequest, SurgeryCompletionRequest
from ..models.responses import (
    PatientStatusResponse,
    PatientSummary,
    ScheduledSurgeryResponse,
    SurgeonScheduleResponse,
)
from .deps import get_hospital

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/surgeries", tags=["surgeries"])


# === API 端點 ===

@router.get("/ready", response_model=List[PatientSummary])
async def patients_ready_for_surgery(hospital: Hospital = Depends(get_hospital)):
    """已報到、已有病房且尚未指派外科醫師的病患"""
    return [PatientSummary.from_person(p) for p in hospital.patients_ready_for_surgery()]


@router.post("/assign", response_model=PatientStatusResponse)
async def assign_surgeon(
    request: SurgeryAssignmentRequest,
    hospital: Hospital = Depends(get_hospital)
) -> PatientStatusResponse:
    """
    指派外科醫師並排定手術

    Args:
        request: 病患、外科醫師與手術時間

    Returns:
        更新後的病患狀態
    """
    try:
        hospital.assign_surgeon(
            patient_id=request.patient_id,
            surgeon_id=request.surgeon_id,
            surgery_time=request.surgery_time
        )
        return PatientStatusResponse(**hospital.patient_view(request.patient_id).to_dict())
    except (HTTPException, HospitalError):
        raise
    except Exception as e:
        logger.exception("手術排程失敗")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"手術排程失敗: {str(e)}"
        )


@router.post("/perform", response_model=PatientStatusResponse)
async def perform_surgery(
    request: SurgeryCompletionRequest,
    hospital: Hospital = Depends(get_hospital)
) -> PatientStatusResponse:
    """執行手術：移除排程並標記手術完成"""
    hospital.perform_surgery(request.surgeon_id, request.patient_id)
    return PatientStatusResponse(**hospital.patient_view(request.patient_id).to_dict())


@router.get("/surgeons/{surgeon_id}/schedule", response_model=SurgeonScheduleResponse)
async def surgeon_schedule(
    surgeon_id: int,
    hospital: Hospital = Depends(get_hospital)
) -> SurgeonScheduleResponse:
    """外科醫師排程（依手術時間排序）"""
    surgeon = hospital.get_surgeon(surgeon_id)
    surgeries = [
        ScheduledSurgeryResponse(**s.to_dict())
        for s in hospital.surgeon_schedule(surgeon_id)
    ]
    return SurgeonScheduleResponse(
        surgeon_id=surgeon.person_id,
        surgeon_name=surgeon.name,
        surgeries=surgeries
    )


@router.get("/surgeons/{surgeon_id}/patients", response_model=List[PatientSummary])
async def surgeon_patients(
    surgeon_id: int,
    hospital: Hospital = Depends(get_hospital)
):
    """外科醫師的病患（依排入順序）"""
    return [PatientSummary.from_person(p) for p in hospital.surgeon_patients(surgeon_id)]
