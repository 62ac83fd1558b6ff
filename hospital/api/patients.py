"""
Patients API

病患報到、離院與狀態查詢
"""

from fastapi import APIRouter, Depends

from ..core.hospital import Hospital
from ..models.responses import PatientStatusResponse
from .deps import get_hospital

router = APIRouter(prefix="/api/patients", tags=["patients"])


@router.get("/{patient_id}", response_model=PatientStatusResponse, summary="病患狀態")
async def patient_status(
    patient_id: int,
    hospital: Hospital = Depends(get_hospital)
) -> PatientStatusResponse:
    """房間、外科醫師與手術時間"""
    return PatientStatusResponse(**hospital.patient_view(patient_id).to_dict())


@router.post("/{patient_id}/check-in", response_model=PatientStatusResponse, summary="報到")
async def check_in(
    patient_id: int,
    hospital: Hospital = Depends(get_hospital)
) -> PatientStatusResponse:
    hospital.check_in(patient_id)
    return PatientStatusResponse(**hospital.patient_view(patient_id).to_dict())


@router.post("/{patient_id}/check-out", response_model=PatientStatusResponse, summary="離院")
async def check_out(
    patient_id: int,
    hospital: Hospital = Depends(get_hospital)
) -> PatientStatusResponse:
    """手術完成後才能離院；房間保留到樓層經理釋放"""
    hospital.check_out(patient_id)
    return PatientStatusResponse(**hospital.patient_view(patient_id).to_dict())
