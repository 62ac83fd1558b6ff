"""
Command Interface

`execute(hospital, command, params)` 讓任何前端（CLI、測試、網路服務）
以指令名稱與已驗證的參數呼叫核心，統一取得 `CommandResult`。
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ..exceptions import HospitalError
from ..models.person import Person
from .hospital import Hospital

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """指令執行結果"""
    ok: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    message: Optional[str] = None


def _person_summary(person: Person) -> Dict[str, Any]:
    return {'person_id': person.person_id, 'name': person.name, 'role': person.role_name}


def _register_patient(hospital: Hospital, params: Dict) -> Dict:
    person = hospital.register_patient(
        params['name'], params['age'], params['email'],
        params['mobile_number'], params['password']
    )
    return _person_summary(person)


def _register_floor_manager(hospital: Hospital, params: Dict) -> Dict:
    person = hospital.register_floor_manager(
        params['name'], params['age'], params['email'],
        params['mobile_number'], params['password'],
        params['staff_id'], params['floor_number']
    )
    return _person_summary(person)


def _register_surgeon(hospital: Hospital, params: Dict) -> Dict:
    person = hospital.register_surgeon(
        params['name'], params['age'], params['email'],
        params['mobile_number'], params['password'],
        params['staff_id'], params['speciality']
    )
    return _person_summary(person)


def _login(hospital: Hospital, params: Dict) -> Dict:
    return _person_summary(hospital.login(params['email'], params['password']))


def _change_password(hospital: Hospital, params: Dict) -> Dict:
    hospital.change_password(params['person_id'], params['new_password'])
    return {'person_id': params['person_id']}


def _check_in(hospital: Hospital, params: Dict) -> Dict:
    hospital.check_in(params['patient_id'])
    return hospital.patient_view(params['patient_id']).to_dict()


def _check_out(hospital: Hospital, params: Dict) -> Dict:
    hospital.check_out(params['patient_id'])
    return hospital.patient_view(params['patient_id']).to_dict()


def _available_rooms(hospital: Hospital, params: Dict) -> Dict:
    floor_number = params['floor_number']
    return {'floor_number': floor_number, 'rooms': hospital.available_rooms(floor_number)}


def _assign_room(hospital: Hospital, params: Dict) -> Dict:
    room_number, floor_number = hospital.assign_room(
        params['manager_id'], params['patient_id'], params['room_number']
    )
    return {'patient_id': params['patient_id'], 'room_number': room_number, 'floor_number': floor_number}


def _unassign_room(hospital: Hospital, params: Dict) -> Dict:
    room_number, floor_number = hospital.unassign_room(params['patient_id'])
    return {'patient_id': params['patient_id'], 'room_number': room_number, 'floor_number': floor_number}


def _assign_surgeon(hospital: Hospital, params: Dict) -> Dict:
    hospital.assign_surgeon(params['patient_id'], params['surgeon_id'], params['surgery_time'])
    return hospital.patient_view(params['patient_id']).to_dict()


def _perform_surgery(hospital: Hospital, params: Dict) -> Dict:
    hospital.perform_surgery(params['surgeon_id'], params['patient_id'])
    return hospital.patient_view(params['patient_id']).to_dict()


def _patient_view(hospital: Hospital, params: Dict) -> Dict:
    return hospital.patient_view(params['patient_id']).to_dict()


def _surgeon_schedule(hospital: Hospital, params: Dict) -> Dict:
    schedule = hospital.surgeon_schedule(params['surgeon_id'])
    return {'surgeon_id': params['surgeon_id'], 'schedule': [s.to_dict() for s in schedule]}


COMMANDS: Dict[str, Callable[[Hospital, Dict], Dict]] = {
    'register_patient': _register_patient,
    'register_floor_manager': _register_floor_manager,
    'register_surgeon': _register_surgeon,
    'login': _login,
    'change_password': _change_password,
    'check_in': _check_in,
    'check_out': _check_out,
    'available_rooms': _available_rooms,
    'assign_room': _assign_room,
    'unassign_room': _unassign_room,
    'assign_surgeon': _assign_surgeon,
    'perform_surgery': _perform_surgery,
    'patient_view': _patient_view,
    'surgeon_schedule': _surgeon_schedule,
}


def execute(hospital: Hospital, command: str, params: Optional[Dict] = None) -> CommandResult:
    """
    執行指令

    Domain errors come back as a failed result carrying the error class
    name; a missing parameter raises KeyError to the caller.
    """
    handler = COMMANDS.get(command)
    if handler is None:
        return CommandResult(ok=False, error='UnknownCommand', message=f"Unknown command: {command}")

    try:
        data = handler(hospital, params or {})
    except HospitalError as e:
        logger.warning(f"指令 {command} 失敗: {type(e).__name__}: {e}")
        return CommandResult(ok=False, error=type(e).__name__, message=str(e))

    return CommandResult(ok=True, data=data)
