from hospital.core.commands import execute

from .conftest import PASSWORD


def register_alice(hospital):
    return execute(hospital, 'register_patient', {
        'name': 'Alice',
        'age': 30,
        'email': 'a@b.com',
        'mobile_number': '0123456789',
        'password': PASSWORD,
    })


def test_unknown_command(hospital):
    result = execute(hospital, 'teleport', {})

    assert not result.ok
    assert result.error == 'UnknownCommand'


def test_register_and_login(hospital):
    registered = register_alice(hospital)
    assert registered.ok
    assert registered.data == {'person_id': 1, 'name': 'Alice', 'role': 'patient'}

    login = execute(hospital, 'login', {'email': 'a@b.com', 'password': PASSWORD})
    assert login.ok
    assert login.data['person_id'] == 1


def test_domain_errors_become_results(hospital):
    register_alice(hospital)
    duplicate = register_alice(hospital)

    assert not duplicate.ok
    assert duplicate.error == 'DuplicateEmail'
    assert duplicate.message == 'Email must be unique.'

    wrong = execute(hospital, 'login', {'email': 'a@b.com', 'password': 'nope'})
    assert wrong.error == 'WrongPassword'


def test_scenario_through_commands(hospital, surgery_time):
    patient_id = register_alice(hospital).data['person_id']
    manager_id = execute(hospital, 'register_floor_manager', {
        'name': 'Fiona', 'age': 40, 'email': 'f@h.com', 'mobile_number': '0111111111',
        'password': PASSWORD, 'staff_id': 101, 'floor_number': 1,
    }).data['person_id']
    surgeon_id = execute(hospital, 'register_surgeon', {
        'name': 'Dr X', 'age': 50, 'email': 'x@h.com', 'mobile_number': '0222222222',
        'password': PASSWORD, 'staff_id': 201, 'speciality': 'General Surgeon',
    }).data['person_id']

    assert execute(hospital, 'check_in', {'patient_id': patient_id}).data['checked_in'] is True
    room = execute(hospital, 'assign_room', {
        'manager_id': manager_id, 'patient_id': patient_id, 'room_number': 3,
    })
    assert room.data == {'patient_id': patient_id, 'room_number': 3, 'floor_number': 1}
    assert 3 not in execute(hospital, 'available_rooms', {'floor_number': 1}).data['rooms']

    scheduled = execute(hospital, 'assign_surgeon', {
        'patient_id': patient_id, 'surgeon_id': surgeon_id, 'surgery_time': surgery_time,
    })
    assert scheduled.data['surgeon_name'] == 'Dr X'
    assert scheduled.data['surgery_time'] == '14:30 01/01/2025'

    schedule = execute(hospital, 'surgeon_schedule', {'surgeon_id': surgeon_id})
    assert schedule.data['schedule'] == [
        {'patient_id': patient_id, 'patient_name': 'Alice', 'surgery_time': '14:30 01/01/2025'}
    ]

    done = execute(hospital, 'perform_surgery', {'surgeon_id': surgeon_id, 'patient_id': patient_id})
    assert done.data['surgery_completed'] is True
    assert done.data['surgeon_name'] is None
    assert done.data['room_number'] == 3

    assert execute(hospital, 'check_out', {'patient_id': patient_id}).ok
    again = execute(hospital, 'check_in', {'patient_id': patient_id})
    assert again.error == 'InvalidStateTransition'

    released = execute(hospital, 'unassign_room', {'patient_id': patient_id})
    assert released.data['room_number'] == 3
    assert execute(hospital, 'patient_view', {'patient_id': patient_id}).data['room_number'] is None


def test_unknown_surgeon_command(hospital, surgery_time):
    patient_id = register_alice(hospital).data['person_id']

    result = execute(hospital, 'assign_surgeon', {
        'patient_id': patient_id, 'surgeon_id': 42, 'surgery_time': surgery_time,
    })

    assert result.error == 'SurgeonNotFound'
    assert execute(hospital, 'patient_view', {'patient_id': patient_id}).data['surgeon_id'] is None


def test_change_password_command(hospital):
    patient_id = register_alice(hospital).data['person_id']

    assert execute(hospital, 'change_password', {'person_id': patient_id, 'new_password': 'N3wPassword'}).ok
    assert execute(hospital, 'login', {'email': 'a@b.com', 'password': 'N3wPassword'}).ok
