"""
Hospital

組合 Directory、RoomAllocator、SurgeryScheduler 與 PatientLifecycle，
提供樓層經理、外科醫師與病患使用的操作。

所有操作都在同一把 RLock 之下執行。人員路由（密碼雜湊）是同步路由，
FastAPI 在執行緒池執行，與事件迴圈上的非同步路由同時存取 Hospital；
uniqueness 與房間佔用的檢查不能被交錯執行。
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..config import MAX_FLOOR_NUMBER, ROOM_NUMBERS
from ..exceptions import (
    EmailNotRegistered,
    FloorManagerNotFound,
    NoAvailableRooms,
    NoRegisteredPeople,
    NoRoomAssigned,
    PatientNotFound,
    PatientNotScheduled,
    PersonNotFound,
    RoomAlreadyAssigned,
    RoomNotFound,
    SurgeonNotFound,
    WrongPassword,
)
from ..models.person import (
    Appointment,
    FloorManagerRole,
    PatientState,
    Person,
    SurgeonRole,
    Speciality,
)
from ..utils import format_surgery_time
from .credential import Credential
from .directory import Directory
from .lifecycle import LifecycleState, PatientLifecycle
from .rooms import RoomAllocator
from .scheduler import SurgeryScheduler

logger = logging.getLogger(__name__)


@dataclass
class PatientView:
    """病患目前狀態（外科醫師與手術時間由排程推導）"""
    person_id: int
    name: str
    state: LifecycleState
    checked_in: bool
    surgery_completed: bool
    room_number: Optional[int]
    floor_number: Optional[int]
    surgeon_id: Optional[int]
    surgeon_name: Optional[str]
    surgery_time: Optional[datetime]

    def to_dict(self):
        """轉換為字典"""
        return {
            'person_id': self.person_id,
            'name': self.name,
            'state': self.state.value,
            'checked_in': self.checked_in,
            'surgery_completed': self.surgery_completed,
            'room_number': self.room_number,
            'floor_number': self.floor_number,
            'surgeon_id': self.surgeon_id,
            'surgeon_name': self.surgeon_name,
            'surgery_time': format_surgery_time(self.surgery_time)
        }


@dataclass
class ScheduledSurgery:
    """外科醫師排程中的一台手術"""
    patient_id: int
    patient_name: str
    surgery_time: datetime

    def to_dict(self):
        """轉換為字典"""
        return {
            'patient_id': self.patient_id,
            'patient_name': self.patient_name,
            'surgery_time': format_surgery_time(self.surgery_time)
        }


class Hospital:
    def __init__(self, config: Dict = None):
        self.config = config or {}

        room_numbers = self.config.get('room_numbers', ROOM_NUMBERS)
        max_floors = self.config.get('max_floors', MAX_FLOOR_NUMBER)

        self.directory = Directory(max_floors=max_floors)
        self.rooms = RoomAllocator(self.directory, room_numbers)
        self.scheduler = SurgeryScheduler()
        self.lifecycle = PatientLifecycle()
        self._lock = threading.RLock()

        logger.info(f"初始化醫院: 房間={self.rooms.room_numbers}, 樓層數={max_floors}")

    # ==================== 註冊與登入 ====================

    def register_patient(
        self,
        name: str,
        age: int,
        email: str,
        mobile_number: str,
        password: str
    ) -> Person:
        return self._register(name, age, email, mobile_number, password, PatientState())

    def register_floor_manager(
        self,
        name: str,
        age: int,
        email: str,
        mobile_number: str,
        password: str,
        staff_id: int,
        floor_number: int
    ) -> Person:
        role = FloorManagerRole(staff_id=staff_id, floor_number=floor_number)
        return self._register(name, age, email, mobile_number, password, role)

    def register_surgeon(
        self,
        name: str,
        age: int,
        email: str,
        mobile_number: str,
        password: str,
        staff_id: int,
        speciality: Speciality
    ) -> Person:
        role = SurgeonRole(staff_id=staff_id, speciality=Speciality(speciality))
        return self._register(name, age, email, mobile_number, password, role)

    def _register(self, name, age, email, mobile_number, password, role) -> Person:
        person = Person(
            name=name,
            age=age,
            email=email,
            mobile_number=mobile_number,
            credential=Credential(password),
            role=role
        )
        with self._lock:
            return self.directory.register(person)

    def login(self, email: str, password: str) -> Person:
        with self._lock:
            if not self.directory.has_people():
                raise NoRegisteredPeople()
            person = self.directory.find_by_email(email)
            if person is None:
                logger.warning("登入失敗: email 未註冊")
                raise EmailNotRegistered()
            if not person.authenticate(email, password):
                logger.warning(f"登入失敗: #{person.person_id} 密碼錯誤")
                raise WrongPassword()
            logger.info(f"{person.role_name} #{person.person_id} 登入")
            return person

    def change_password(self, person_id: int, new_password: str) -> None:
        with self._lock:
            person = self.get_person(person_id)
            person.change_password(new_password)
            logger.info(f"#{person_id} 已變更密碼")

    # ==================== 查詢 ====================

    def get_person(self, person_id: int) -> Person:
        person = self.directory.get(person_id)
        if person is None:
            raise PersonNotFound()
        return person

    def get_patient(self, patient_id: int) -> Person:
        person = self.directory.get(patient_id)
        if person is None or not isinstance(person.role, PatientState):
            raise PatientNotFound()
        return person

    def get_surgeon(self, surgeon_id: int) -> Person:
        person = self.directory.get(surgeon_id)
        if person is None or not isinstance(person.role, SurgeonRole):
            raise SurgeonNotFound()
        return person

    def get_floor_manager(self, manager_id: int) -> Person:
        person = self.directory.get(manager_id)
        if person is None or not isinstance(person.role, FloorManagerRole):
            raise FloorManagerNotFound()
        return person

    def current_surgery(self, patient_id: int) -> Optional[Tuple[Person, datetime]]:
        """病患目前的 (外科醫師, 手術時間)"""
        with self._lock:
            current = self.scheduler.current_for(patient_id)
            if current is None:
                return None
            surgeon_id, surgery_time = current
            return self.directory.get(surgeon_id), surgery_time

    def patient_view(self, patient_id: int) -> PatientView:
        with self._lock:
            patient = self.get_patient(patient_id)
            status = patient.role
            current = self.current_surgery(patient_id)
            surgeon, surgery_time = current if current else (None, None)
            return PatientView(
                person_id=patient.person_id,
                name=patient.name,
                state=self.lifecycle.state(patient),
                checked_in=status.checked_in,
                surgery_completed=status.surgery_completed,
                room_number=status.room_number,
                floor_number=status.floor_number,
                surgeon_id=surgeon.person_id if surgeon else None,
                surgeon_name=surgeon.name if surgeon else None,
                surgery_time=surgery_time
            )

    def patients_awaiting_room(self) -> List[Person]:
        """已報到且尚未分配房間的病患"""
        with self._lock:
            return [p for p in self.directory.list_checked_in_patients() if not p.role.has_room]

    def patients_ready_for_surgery(self) -> List[Person]:
        """已報到、已有房間且尚未指派外科醫師的病患"""
        with self._lock:
            return [
                p for p in self.directory.list_checked_in_patients()
                if p.role.has_room and self.scheduler.current_for(p.person_id) is None
            ]

    def patients_with_rooms(self) -> List[Person]:
        with self._lock:
            return [p for p in self.directory.list_patients() if p.role.has_room]

    # ==================== 病患狀態 ====================

    def check_in(self, patient_id: int) -> Person:
        with self._lock:
            patient = self.get_patient(patient_id)
            self.lifecycle.check_in(patient)
            return patient

    def check_out(self, patient_id: int) -> Person:
        with self._lock:
            patient = self.get_patient(patient_id)
            self.lifecycle.check_out(patient)
            dropped = self.scheduler.drop_patient(patient_id)
            if dropped:
                logger.info(f"病患 #{patient_id} 離院，移除剩餘 {dropped} 筆排程")
            return patient

    # ==================== 病房 ====================

    def available_rooms(self, floor_number: int) -> List[int]:
        with self._lock:
            return self.rooms.available_rooms(floor_number)

    def assign_room(self, manager_id: int, patient_id: int, room_number: int) -> Tuple[int, int]:
        """樓層經理將自己樓層的房間分配給病患，回傳 (房號, 樓層)"""
        with self._lock:
            manager = self.get_floor_manager(manager_id)
            patient = self.get_patient(patient_id)
            floor_number = manager.role.floor_number

            available = self.rooms.available_rooms(floor_number)
            if not available:
                raise NoAvailableRooms()
            if room_number not in self.rooms.room_numbers:
                raise RoomNotFound()
            if room_number not in available:
                raise RoomAlreadyAssigned()

            self.rooms.assign(patient, room_number, floor_number)
            return room_number, floor_number

    def unassign_room(self, patient_id: int) -> Tuple[int, int]:
        """釋放病患的房間，回傳被釋放的 (房號, 樓層)"""
        with self._lock:
            patient = self.get_patient(patient_id)
            if not patient.role.has_room:
                raise NoRoomAssigned()
            released = (patient.role.room_number, patient.role.floor_number)
            self.rooms.unassign(patient)
            return released

    # ==================== 手術 ====================

    def assign_surgeon(self, patient_id: int, surgeon_id: int, surgery_time: datetime) -> Appointment:
        with self._lock:
            patient = self.get_patient(patient_id)
            surgeon = self.get_surgeon(surgeon_id)
            return self.scheduler.schedule(surgeon.person_id, patient.person_id, surgery_time)

    def perform_surgery(self, surgeon_id: int, patient_id: int) -> Person:
        with self._lock:
            surgeon = self.get_surgeon(surgeon_id)
            patient = self.get_patient(patient_id)
            if not self.scheduler.has_patient(surgeon_id, patient_id):
                raise PatientNotScheduled()
            self.scheduler.complete(surgeon_id, patient_id)
            self.lifecycle.mark_surgery_completed(patient)
            logger.info(f"手術完成: {patient.name} 由 {surgeon.name} 執刀")
            return patient

    def surgeon_schedule(self, surgeon_id: int) -> List[ScheduledSurgery]:
        """外科醫師排程（依時間排序）"""
        with self._lock:
            self.get_surgeon(surgeon_id)
            return [
                self._scheduled(appointment)
                for appointment in self.scheduler.list_sorted(surgeon_id)
            ]

    def surgeon_patients(self, surgeon_id: int) -> List[Person]:
        """外科醫師的病患（依排入順序，不重複）"""
        with self._lock:
            self.get_surgeon(surgeon_id)
            seen = []
            for appointment in self.scheduler.appointments(surgeon_id):
                if appointment.patient_id not in seen:
                    seen.append(appointment.patient_id)
            return [self.directory.get(pid) for pid in seen]

    def _scheduled(self, appointment: Appointment) -> ScheduledSurgery:
        patient = self.directory.get(appointment.patient_id)
        return ScheduledSurgery(
            patient_id=appointment.patient_id,
            patient_name=patient.name if patient else '',
            surgery_time=appointment.surgery_time
        )
