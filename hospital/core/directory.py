"""
Directory

所有已註冊人員的登記簿。人員以遞增整數 id 保存（arena），其他元件只保存 id，
不持有人員物件的參考。
"""

import logging
from typing import Dict, List, Optional

from ..config import MAX_FLOOR_NUMBER, MIN_FLOOR_NUMBER
from ..exceptions import (
    AllFloorsAssigned,
    DuplicateEmail,
    DuplicateFloor,
    DuplicateStaffID,
    FloorNotFound,
)
from ..models.person import FloorManagerRole, PatientState, Person, SurgeonRole

logger = logging.getLogger(__name__)


class Directory:
    """
    人員登記簿

    `register` is the only mutator. Every uniqueness rule is checked before
    the person is stored, so a rejected registration leaves nothing behind.
    """

    def __init__(self, max_floors: int = MAX_FLOOR_NUMBER):
        self.max_floors = max_floors
        self._people: Dict[int, Person] = {}
        self._next_id = 1

    # ==================== 註冊 ====================

    def register(self, person: Person) -> Person:
        """註冊人員並指派 person_id"""
        if self.email_exists(person.email):
            raise DuplicateEmail()

        staff_id = person.staff_id
        if staff_id is not None and self.exists_staff_id(staff_id):
            raise DuplicateStaffID()

        if isinstance(person.role, FloorManagerRole):
            if not MIN_FLOOR_NUMBER <= person.role.floor_number <= self.max_floors:
                raise FloorNotFound()
            if len(self.list_assigned_floors()) >= self.max_floors:
                raise AllFloorsAssigned()
            if self.exists_floor(person.role.floor_number):
                raise DuplicateFloor()

        person.person_id = self._next_id
        self._people[person.person_id] = person
        self._next_id += 1

        logger.info(f"註冊 {person.role_name} #{person.person_id}: {person.name}")
        return person

    # ==================== 查詢 ====================

    def get(self, person_id: int) -> Optional[Person]:
        return self._people.get(person_id)

    def find_by_email(self, email: str) -> Optional[Person]:
        """以 email 查詢（不分大小寫）"""
        wanted = email.casefold()
        return next(
            (p for p in self._people.values() if p.email.casefold() == wanted),
            None
        )

    def email_exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def exists_staff_id(self, staff_id: int) -> bool:
        return any(p.staff_id == staff_id for p in self._people.values())

    def exists_floor(self, floor_number: int) -> bool:
        return floor_number in self.list_assigned_floors()

    def has_people(self) -> bool:
        return bool(self._people)

    def __len__(self) -> int:
        return len(self._people)

    # ==================== 清單（皆為快照） ====================

    def list_patients(self) -> List[Person]:
        return [p for p in self._people.values() if isinstance(p.role, PatientState)]

    def list_checked_in_patients(self) -> List[Person]:
        return [p for p in self.list_patients() if p.role.checked_in]

    def list_surgeons(self) -> List[Person]:
        return [p for p in self._people.values() if isinstance(p.role, SurgeonRole)]

    def list_floor_managers(self) -> List[Person]:
        return [p for p in self._people.values() if isinstance(p.role, FloorManagerRole)]

    def list_assigned_floors(self) -> List[int]:
        return [p.role.floor_number for p in self.list_floor_managers()]
