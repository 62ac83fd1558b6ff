"""
Surgery Scheduler

外科醫師排程表。排程表是手術指派的唯一來源：
病患目前的外科醫師與手術時間由 `current_for` 從排程推導。
完成手術時記下病患的水位（當時的序號），水位之前加入的項目不再算是病患目前的手術。
"""

import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..models.person import Appointment

logger = logging.getLogger(__name__)


class SurgeryScheduler:
    """
    手術排程器

    Each surgeon id maps to an insertion-ordered list of appointments.
    No overlap or duplicate check is done: scheduling the same patient twice
    keeps both entries.
    """

    def __init__(self):
        self._schedules: Dict[int, List[Appointment]] = defaultdict(list)
        self._counter = 0
        self._completed_at: Dict[int, int] = {}

    def schedule(self, surgeon_id: int, patient_id: int, surgery_time: datetime) -> Appointment:
        self._counter += 1
        appointment = Appointment(
            patient_id=patient_id,
            surgery_time=surgery_time,
            sequence=self._counter
        )
        self._schedules[surgeon_id].append(appointment)
        logger.info(
            f"外科醫師 #{surgeon_id} 排定病患 #{patient_id} 手術: {surgery_time.isoformat()}"
        )
        return appointment

    def complete(self, surgeon_id: int, patient_id: int) -> int:
        """
        移除該醫師排程中此病患的所有項目，回傳移除筆數

        其他醫師排程中的項目保留，但病患目前的手術被清空。
        """
        removed = self._remove(surgeon_id, patient_id)
        self._completed_at[patient_id] = self._counter
        logger.info(f"外科醫師 #{surgeon_id} 完成病患 #{patient_id} 手術，移除 {removed} 筆排程")
        return removed

    def drop_patient(self, patient_id: int) -> int:
        """從所有醫師的排程移除此病患"""
        return sum(self._remove(surgeon_id, patient_id) for surgeon_id in list(self._schedules))

    def _remove(self, surgeon_id: int, patient_id: int) -> int:
        entries = self._schedules.get(surgeon_id)
        if not entries:
            return 0
        kept = [a for a in entries if a.patient_id != patient_id]
        self._schedules[surgeon_id] = kept
        return len(entries) - len(kept)

    def appointments(self, surgeon_id: int) -> List[Appointment]:
        """排程（依加入順序，複本）"""
        return list(self._schedules.get(surgeon_id, []))

    def list_sorted(self, surgeon_id: int) -> List[Appointment]:
        """排程（依手術時間遞增；同時間保持加入順序）"""
        return sorted(self.appointments(surgeon_id), key=lambda a: a.surgery_time)

    def has_patient(self, surgeon_id: int, patient_id: int) -> bool:
        return any(a.patient_id == patient_id for a in self._schedules.get(surgeon_id, []))

    def current_for(self, patient_id: int) -> Optional[Tuple[int, datetime]]:
        """推導病患目前的 (外科醫師 id, 手術時間)：取上次完成手術後最新加入的一筆"""
        watermark = self._completed_at.get(patient_id, 0)
        candidates = [
            (appointment.sequence, surgeon_id, appointment.surgery_time)
            for surgeon_id, entries in self._schedules.items()
            for appointment in entries
            if appointment.patient_id == patient_id and appointment.sequence > watermark
        ]
        if not candidates:
            return None
        _, surgeon_id, surgery_time = max(candidates, key=lambda c: c[0])
        return surgeon_id, surgery_time
