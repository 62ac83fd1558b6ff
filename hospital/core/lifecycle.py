"""
Patient Lifecycle

病患狀態機：
    REGISTERED --check_in--> CHECKED_IN --check_out--> CHECKED_OUT

- 報到：手術尚未完成才允許。手術一旦完成，永遠無法再報到。
- 離院：必須已報到且手術已完成。房間保留，直到樓層經理釋放。
"""

import logging
from enum import Enum

from ..exceptions import InvalidStateTransition
from ..models.person import Person

logger = logging.getLogger(__name__)


class LifecycleState(str, Enum):
    REGISTERED = "registered"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"


class PatientLifecycle:
    """病患報到 / 離院的狀態閘門"""

    @staticmethod
    def state(patient: Person) -> LifecycleState:
        status = patient.role
        if status.checked_in:
            return LifecycleState.CHECKED_IN
        if status.surgery_completed:
            return LifecycleState.CHECKED_OUT
        return LifecycleState.REGISTERED

    def check_in(self, patient: Person) -> None:
        status = patient.role
        if status.checked_in:
            raise InvalidStateTransition(f"Patient {patient.name} is already checked in.")
        if status.surgery_completed:
            logger.warning(f"病患 #{patient.person_id} 手術已完成，拒絕報到")
            raise InvalidStateTransition("You are unable to check in at this time.")
        status.checked_in = True
        logger.info(f"病患 #{patient.person_id} 已報到")

    def check_out(self, patient: Person) -> None:
        """離院（外科醫師排程由 Hospital 另外清除）"""
        status = patient.role
        if not status.checked_in:
            raise InvalidStateTransition(f"Patient {patient.name} is not checked in.")
        if not status.surgery_completed:
            logger.warning(f"病患 #{patient.person_id} 手術尚未完成，拒絕離院")
            raise InvalidStateTransition("You are unable to check out at this time.")
        status.checked_in = False
        logger.info(f"病患 #{patient.person_id} 已離院")

    def mark_surgery_completed(self, patient: Person) -> None:
        patient.role.surgery_completed = True
