"""
Response Models

API 回應模型
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .person import FloorManagerRole, PatientState, Person, SurgeonRole


class PersonResponse(BaseModel):
    """人員資訊（不含密碼）"""
    person_id: int
    name: str
    age: int
    email: str
    mobile_number: str
    role: str
    staff_id: Optional[int] = None
    floor_number: Optional[int] = Field(None, description="樓層經理負責樓層")
    speciality: Optional[str] = None
    checked_in: Optional[bool] = None

    @classmethod
    def from_person(cls, person: Person) -> "PersonResponse":
        fields = dict(
            person_id=person.person_id,
            name=person.name,
            age=person.age,
            email=person.email,
            mobile_number=person.mobile_number,
            role=person.role_name,
        )
        match person.role:
            case PatientState(checked_in=checked_in):
                fields.update(checked_in=checked_in)
            case FloorManagerRole(staff_id=staff_id, floor_number=floor_number):
                fields.update(staff_id=staff_id, floor_number=floor_number)
            case SurgeonRole(staff_id=staff_id, speciality=speciality):
                fields.update(staff_id=staff_id, speciality=speciality.value)
        return cls(**fields)


class PatientSummary(BaseModel):
    person_id: int
    name: str

    @classmethod
    def from_person(cls, person: Person) -> "PatientSummary":
        return cls(person_id=person.person_id, name=person.name)


class PatientStatusResponse(BaseModel):
    """病患狀態"""
    person_id: int
    name: str
    state: str
    checked_in: bool
    surgery_completed: bool
    room_number: Optional[int] = None
    floor_number: Optional[int] = None
    surgeon_id: Optional[int] = None
    surgeon_name: Optional[str] = None
    surgery_time: Optional[str] = Field(None, description="HH:mm dd/MM/yyyy")

    class Config:
        json_schema_extra = {
            "example": {
                "person_id": 1,
                "name": "Alice Smith",
                "state": "checked_in",
                "checked_in": True,
                "surgery_completed": False,
                "room_number": 3,
                "floor_number": 1,
                "surgeon_id": 3,
                "surgeon_name": "Dr X",
                "surgery_time": "14:30 01/01/2025"
            }
        }


class RoomAvailabilityResponse(BaseModel):
    floor_number: int
    rooms: List[int]
    available_count: int


class RoomAssignmentResponse(BaseModel):
    success: bool
    message: str
    patient_id: int
    room_number: int
    floor_number: int


class ScheduledSurgeryResponse(BaseModel):
    patient_id: int
    patient_name: str
    surgery_time: str


class SurgeonScheduleResponse(BaseModel):
    """外科醫師排程（依時間排序）"""
    surgeon_id: int
    surgeon_name: str
    surgeries: List[ScheduledSurgeryResponse]

