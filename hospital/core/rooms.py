"""
Room Allocator

病房分配。病房不是獨立保存的實體：某樓層某房號「可用」，
代表目前沒有任何病患持有該 (房號, 樓層)。
"""

import logging
from typing import Dict, List, Optional

from ..config import ROOM_NUMBERS
from ..models.person import Person
from .directory import Directory

logger = logging.getLogger(__name__)


class RoomAllocator:
    """
    病房分配器

    `assign` does not re-check availability; callers check
    `available_rooms` first. Assigning a patient who already holds a room
    overwrites it; the previous room shows up as available again since no
    patient references it.
    """

    def __init__(self, directory: Directory, room_numbers: Optional[List[int]] = None):
        self.directory = directory
        self.room_numbers = sorted(ROOM_NUMBERS if room_numbers is None else room_numbers)

    def occupied(self, floor_number: int) -> Dict[int, Person]:
        """取得樓層上已被佔用的房號 -> 病患"""
        return {
            p.role.room_number: p
            for p in self.directory.list_patients()
            if p.role.room_number is not None and p.role.floor_number == floor_number
        }

    def available_rooms(self, floor_number: int) -> List[int]:
        """取得樓層可用房號（遞增排序）"""
        taken = self.occupied(floor_number)
        return [room for room in self.room_numbers if room not in taken]

    def assign(self, patient: Person, room_number: int, floor_number: int) -> None:
        state = patient.role
        if state.room_number is not None:
            # 覆寫舊房號（沒有先 unassign）
            logger.warning(
                f"病患 #{patient.person_id} 已持有房間 {state.room_number} "
                f"(樓層 {state.floor_number})，改為 {room_number} (樓層 {floor_number})"
            )
        state.room_number = room_number
        state.floor_number = floor_number
        logger.info(f"病患 #{patient.person_id} 分配至房間 {room_number} (樓層 {floor_number})")

    def unassign(self, patient: Person) -> None:
        state = patient.role
        logger.info(
            f"病患 #{patient.person_id} 釋放房間 {state.room_number} (樓層 {state.floor_number})"
        )
        state.room_number = None
        state.floor_number = None
