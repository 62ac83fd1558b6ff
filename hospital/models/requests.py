"""
Request Models

API 請求模型。原始輸入在這裡驗證完畢，核心只接收型別正確的值。
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from ..config import (
    EMAIL_PATTERN,
    MAX_AGE,
    MAX_AGE_FLOOR_MANAGER,
    MAX_AGE_SURGEON,
    MAX_FLOOR_NUMBER,
    MAX_ROOM_NUMBER,
    MAX_STAFF_ID,
    MIN_AGE_PATIENT,
    MIN_AGE_STAFF,
    MIN_FLOOR_NUMBER,
    MIN_PASSWORD_LENGTH,
    MIN_ROOM_NUMBER,
    MIN_STAFF_ID,
    MOBILE_NUMBER_PATTERN,
)
from ..utils import parse_surgery_time
from .person import Speciality


class RegistrationBase(BaseModel):
    """註冊共用欄位"""
    name: str = Field(..., description="姓名（僅字母與空白）")
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Email（不分大小寫唯一）")
    mobile_number: str = Field(..., pattern=MOBILE_NUMBER_PATTERN, description="手機號碼（0 開頭 10 碼）")
    password: str = Field(..., description="密碼（至少 8 碼，含大小寫與數字）")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not value.strip() or not all(c.isalpha() or c == " " for c in value):
            raise ValueError("Supplied name is invalid")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if (
            not value.strip()
            or len(value) < MIN_PASSWORD_LENGTH
            or not any(c.isupper() for c in value)
            or not any(c.islower() for c in value)
            or not any(c.isdigit() for c in value)
        ):
            raise ValueError("Supplied password is invalid")
        return value


class PatientRegistration(RegistrationBase):
    age: int = Field(..., ge=MIN_AGE_PATIENT, le=MAX_AGE, description="年齡")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Alice Smith",
                "age": 30,
                "email": "alice@example.com",
                "mobile_number": "0123456789",
                "password": "Passw0rd!"
            }
        }


class FloorManagerRegistration(RegistrationBase):
    age: int = Field(..., ge=MIN_AGE_STAFF, le=MAX_AGE_FLOOR_MANAGER, description="年齡")
    staff_id: int = Field(..., ge=MIN_STAFF_ID, le=MAX_STAFF_ID, description="員工編號")
    floor_number: int = Field(..., ge=MIN_FLOOR_NUMBER, le=MAX_FLOOR_NUMBER, description="負責樓層")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Bob Jones",
                "age": 45,
                "email": "bob@example.com",
                "mobile_number": "0987654321",
                "password": "Manag3rPass",
                "staff_id": 101,
                "floor_number": 1
            }
        }


class SurgeonRegistration(RegistrationBase):
    age: int = Field(..., ge=MIN_AGE_STAFF, le=MAX_AGE_SURGEON, description="年齡")
    staff_id: int = Field(..., ge=MIN_STAFF_ID, le=MAX_STAFF_ID, description="員工編號")
    speciality: Speciality = Field(..., description="專科")


class LoginRequest(BaseModel):
    email: str
    password: str


class PasswordChangeRequest(BaseModel):
    new_password: str = Field(..., min_length=1, description="新密碼")


class RoomAssignmentRequest(BaseModel):
    """病房分配請求（使用樓層經理負責的樓層）"""
    manager_id: int = Field(..., description="樓層經理 id")
    patient_id: int = Field(..., description="病患 id")
    room_number: int = Field(..., ge=MIN_ROOM_NUMBER, le=MAX_ROOM_NUMBER, description="房號")


class RoomReleaseRequest(BaseModel):
    patient_id: int = Field(..., description="病患 id")


class SurgeryAssignmentRequest(BaseModel):
    """指派外科醫師並排定手術"""
    patient_id: int
    surgeon_id: int
    surgery_time: datetime = Field(..., description="手術時間 HH:mm dd/MM/yyyy")

    @field_validator("surgery_time", mode="before")
    @classmethod
    def parse_time(cls, value):
        if isinstance(value, str):
            return parse_surgery_time(value)
        return value

    class Config:
        json_schema_extra = {
            "example": {
                "patient_id": 1,
                "surgeon_id": 3,
                "surgery_time": "14:30 01/01/2025"
            }
        }


class SurgeryCompletionRequest(BaseModel):
    surgeon_id: int
    patient_id: int
