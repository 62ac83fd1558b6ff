"""
人員資料模型

A person is one record of identity fields plus a role variant carrying the
role-specific data. Role behaviour is dispatched by matching on the variant.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from ..core.credential import Credential


class Speciality(str, Enum):
    """外科醫師專科"""
    GENERAL = "General Surgeon"
    ORTHOPAEDIC = "Orthopaedic Surgeon"
    CARDIOTHORACIC = "Cardiothoracic Surgeon"
    NEUROSURGEON = "Neurosurgeon"


@dataclass
class PatientState:
    """病患狀態（外科醫師與手術時間由排程推導，不在此保存）"""
    checked_in: bool = False
    room_number: Optional[int] = None
    floor_number: Optional[int] = None
    surgery_completed: bool = False

    @property
    def has_room(self) -> bool:
        return self.room_number is not None


@dataclass
class FloorManagerRole:
    """樓層經理"""
    staff_id: int
    floor_number: int


@dataclass
class SurgeonRole:
    """外科醫師"""
    staff_id: int
    speciality: Speciality


Role = Union[PatientState, FloorManagerRole, SurgeonRole]


@dataclass(eq=False)
class Person:
    """人員資料模型"""
    name: str
    age: int
    email: str
    mobile_number: str
    credential: Credential = field(repr=False)
    role: Role
    person_id: Optional[int] = None  # 由 Directory 註冊時指派

    @property
    def role_name(self) -> str:
        match self.role:
            case PatientState():
                return "patient"
            case FloorManagerRole():
                return "floor_manager"
            case SurgeonRole():
                return "surgeon"
        raise TypeError(f"Unknown role variant: {type(self.role).__name__}")

    @property
    def staff_id(self) -> Optional[int]:
        match self.role:
            case FloorManagerRole(staff_id=staff_id) | SurgeonRole(staff_id=staff_id):
                return staff_id
            case _:
                return None

    def authenticate(self, email: str, password: str) -> bool:
        return self.credential.authenticate(self.email, email, password)

    def change_password(self, new_password: str) -> None:
        self.credential.change_password(new_password)


@dataclass
class Appointment:
    """手術排程項目（只存在於外科醫師的排程表中）"""
    patient_id: int
    surgery_time: datetime
    sequence: int = field(default=0, compare=False)  # 加入順序（全域遞增）
