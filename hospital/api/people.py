"""
People API

註冊、登入、個人資料與變更密碼

Endpoints:
    POST /api/people/patients        - 病患註冊
    POST /api/people/floor-managers  - 樓層經理註冊
    POST /api/people/surgeons        - 外科醫師註冊
    POST /api/people/login           - 登入
    GET  /api/people/{person_id}     - 個人資料
    PUT  /api/people/{person_id}/password - 變更密碼

密碼雜湊會阻塞，這些路由是同步函式，由 FastAPI 在執行緒池執行。
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.hospital import Hospital
from ..exceptions import HospitalError
from ..models.requests import (
    FloorManagerRegistration,
    LoginRequest,
    PasswordChangeRequest,
    PatientRegistration,
    SurgeonRegistration,
)
from ..models.responses import PersonResponse
from .deps import get_hospital

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/people", tags=["people"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.exception(f"{action}失敗")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action}失敗: {str(e)}"
    )


@router.post(
    "/patients",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="病患註冊"
)
def register_patient(
    request: PatientRegistration,
    hospital: Hospital = Depends(get_hospital)
) -> PersonResponse:
    try:
        person = hospital.register_patient(
            name=request.name,
            age=request.age,
            email=request.email,
            mobile_number=request.mobile_number,
            password=request.password
        )
        return PersonResponse.from_person(person)
    except (HTTPException, HospitalError):
        raise
    except Exception as e:
        raise _unexpected("病患註冊", e)


@router.post(
    "/floor-managers",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="樓層經理註冊"
)
def register_floor_manager(
    request: FloorManagerRegistration,
    hospital: Hospital = Depends(get_hospital)
) -> PersonResponse:
    try:
        person = hospital.register_floor_manager(
            name=request.name,
            age=request.age,
            email=request.email,
            mobile_number=request.mobile_number,
            password=request.password,
            staff_id=request.staff_id,
            floor_number=request.floor_number
        )
        return PersonResponse.from_person(person)
    except (HTTPException, HospitalError):
        raise
    except Exception as e:
        raise _unexpected("樓層經理註冊", e)


@router.post(
    "/surgeons",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="外科醫師註冊"
)
def register_surgeon(
    request: SurgeonRegistration,
    hospital: Hospital = Depends(get_hospital)
) -> PersonResponse:
    try:
        person = hospital.register_surgeon(
            name=request.name,
            age=request.age,
            email=request.email,
            mobile_number=request.mobile_number,
            password=request.password,
            staff_id=request.staff_id,
            speciality=request.speciality
        )
        return PersonResponse.from_person(person)
    except (HTTPException, HospitalError):
        raise
    except Exception as e:
        raise _unexpected("外科醫師註冊", e)


@router.post("/login", response_model=PersonResponse, summary="登入")
def login(
    request: LoginRequest,
    hospital: Hospital = Depends(get_hospital)
) -> PersonResponse:
    person = hospital.login(request.email, request.password)
    return PersonResponse.from_person(person)


@router.get("/{person_id}", response_model=PersonResponse, summary="個人資料")
def get_person(
    person_id: int,
    hospital: Hospital = Depends(get_hospital)
) -> PersonResponse:
    return PersonResponse.from_person(hospital.get_person(person_id))


@router.put("/{person_id}/password", summary="變更密碼")
def change_password(
    person_id: int,
    request: PasswordChangeRequest,
    hospital: Hospital = Depends(get_hospital)
):
    hospital.change_password(person_id, request.new_password)
    return {"success": True, "message": "Password has been changed."}
