from datetime import datetime

import pytest

from hospital.core.hospital import Hospital
from hospital.core.lifecycle import LifecycleState
from hospital.exceptions import (
    DuplicateEmail,
    DuplicateFloor,
    EmailNotRegistered,
    FloorManagerNotFound,
    FloorNotFound,
    InvalidStateTransition,
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
from hospital.models.person import Speciality

from .conftest import PASSWORD


def test_full_patient_journey(hospital, alice, manager, surgeon, surgery_time):
    hospital.check_in(alice.person_id)
    assert hospital.assign_room(manager.person_id, alice.person_id, 3) == (3, 1)

    hospital.assign_surgeon(alice.person_id, surgeon.person_id, surgery_time)
    view = hospital.patient_view(alice.person_id)
    assert view.surgeon_name == "Dr X"
    assert view.surgery_time == surgery_time

    hospital.perform_surgery(surgeon.person_id, alice.person_id)
    view = hospital.patient_view(alice.person_id)
    assert view.surgery_completed is True
    assert view.surgeon_id is None
    assert view.surgeon_name is None
    assert view.surgery_time is None
    assert (view.room_number, view.floor_number) == (3, 1)

    hospital.check_out(alice.person_id)
    view = hospital.patient_view(alice.person_id)
    assert view.state == LifecycleState.CHECKED_OUT
    assert (view.room_number, view.floor_number) == (3, 1)

    with pytest.raises(InvalidStateTransition):
        hospital.check_in(alice.person_id)
    assert hospital.patient_view(alice.person_id).checked_in is False


def test_register_rejects_email_differing_only_in_case(hospital, alice):
    with pytest.raises(DuplicateEmail):
        hospital.register_patient("Alicia", 31, "A@B.com", "0123456789", PASSWORD)

    assert len(hospital.directory.list_patients()) == 1


def test_two_managers_for_same_floor(hospital):
    hospital.register_floor_manager("One", 30, "one@h.com", "0111111111", PASSWORD, 101, 2)

    with pytest.raises(DuplicateFloor):
        hospital.register_floor_manager("Two", 30, "two@h.com", "0111111112", PASSWORD, 102, 2)


def test_login(hospital, alice):
    assert hospital.login("a@b.com", PASSWORD) is alice


def test_login_with_email_in_other_case_fails_authentication(hospital, alice):
    # lookup ignores case, authentication does not
    with pytest.raises(WrongPassword):
        hospital.login("A@B.com", PASSWORD)


def test_login_errors(hospital):
    with pytest.raises(NoRegisteredPeople):
        hospital.login("a@b.com", PASSWORD)

    hospital.register_patient("Alice", 30, "a@b.com", "0123456789", PASSWORD)

    with pytest.raises(EmailNotRegistered):
        hospital.login("nobody@b.com", PASSWORD)
    with pytest.raises(WrongPassword):
        hospital.login("a@b.com", "Wr0ngPassword")


def test_change_password(hospital, alice):
    hospital.change_password(alice.person_id, "An0therPass")

    assert hospital.login("a@b.com", "An0therPass") is alice
    with pytest.raises(WrongPassword):
        hospital.login("a@b.com", PASSWORD)
    with pytest.raises(PersonNotFound):
        hospital.change_password(999, "An0therPass")


def test_role_lookups(hospital, alice, manager, surgeon):
    with pytest.raises(PatientNotFound):
        hospital.get_patient(surgeon.person_id)
    with pytest.raises(SurgeonNotFound):
        hospital.get_surgeon(alice.person_id)
    with pytest.raises(FloorManagerNotFound):
        hospital.get_floor_manager(surgeon.person_id)
    assert hospital.get_floor_manager(manager.person_id) is manager


def test_assign_room_uses_manager_floor(hospital, alice, manager):
    hospital.check_in(alice.person_id)
    hospital.assign_room(manager.person_id, alice.person_id, 7)

    assert 7 not in hospital.available_rooms(1)
    assert 7 in hospital.available_rooms(2)


def test_assign_room_errors(hospital, alice, manager):
    with pytest.raises(PatientNotFound):
        hospital.assign_room(manager.person_id, 999, 1)

    hospital.assign_room(manager.person_id, alice.person_id, 1)
    bob = hospital.register_patient("Bob", 40, "bob@b.com", "0123456780", PASSWORD)

    with pytest.raises(RoomAlreadyAssigned):
        hospital.assign_room(manager.person_id, bob.person_id, 1)
    with pytest.raises(RoomNotFound):
        hospital.assign_room(manager.person_id, bob.person_id, 11)
    assert bob.role.room_number is None


def test_full_floor_reports_no_available_rooms():
    hospital = Hospital(config={'room_numbers': [1, 2]})
    manager = hospital.register_floor_manager("M", 30, "m@h.com", "0111111111", PASSWORD, 101, 1)
    patients = [
        hospital.register_patient(f"P {c}", 20, f"p{c}@h.com", "0123456789", PASSWORD)
        for c in "abc"
    ]
    hospital.assign_room(manager.person_id, patients[0].person_id, 1)
    hospital.assign_room(manager.person_id, patients[1].person_id, 2)

    with pytest.raises(NoAvailableRooms):
        hospital.assign_room(manager.person_id, patients[2].person_id, 1)


def test_configured_floor_and_room_limits():
    hospital = Hospital(config={'max_floors': 2, 'room_numbers': []})

    with pytest.raises(FloorNotFound):
        hospital.register_floor_manager("M", 30, "m@h.com", "0111111111", PASSWORD, 101, 5)

    manager = hospital.register_floor_manager("M", 30, "m@h.com", "0111111111", PASSWORD, 101, 2)
    patient = hospital.register_patient("P", 20, "p@h.com", "0123456789", PASSWORD)
    with pytest.raises(NoAvailableRooms):
        hospital.assign_room(manager.person_id, patient.person_id, 1)


def test_unassign_room(hospital, alice, manager):
    hospital.assign_room(manager.person_id, alice.person_id, 3)

    assert hospital.unassign_room(alice.person_id) == (3, 1)
    assert 3 in hospital.available_rooms(1)
    with pytest.raises(NoRoomAssigned):
        hospital.unassign_room(alice.person_id)


def test_assign_unknown_surgeon_leaves_patient_unchanged(hospital, alice, surgery_time):
    with pytest.raises(SurgeonNotFound):
        hospital.assign_surgeon(alice.person_id, 999, surgery_time)

    view = hospital.patient_view(alice.person_id)
    assert view.surgeon_id is None
    assert view.surgery_time is None


def test_assign_surgeon_to_unknown_patient(hospital, surgeon, surgery_time):
    with pytest.raises(PatientNotFound):
        hospital.assign_surgeon(999, surgeon.person_id, surgery_time)

    assert hospital.surgeon_schedule(surgeon.person_id) == []


def test_perform_surgery_requires_schedule(hospital, alice, surgeon):
    with pytest.raises(PatientNotScheduled):
        hospital.perform_surgery(surgeon.person_id, alice.person_id)

    assert alice.role.surgery_completed is False


def test_surgeon_schedule_sorted_and_patients_in_order(hospital, alice, surgeon):
    bob = hospital.register_patient("Bob", 40, "bob@b.com", "0123456780", PASSWORD)
    hospital.assign_surgeon(alice.person_id, surgeon.person_id, datetime(2025, 3, 1, 10, 0))
    hospital.assign_surgeon(bob.person_id, surgeon.person_id, datetime(2025, 2, 1, 10, 0))
    hospital.assign_surgeon(alice.person_id, surgeon.person_id, datetime(2025, 4, 1, 10, 0))

    schedule = hospital.surgeon_schedule(surgeon.person_id)
    assert [s.patient_name for s in schedule] == ["Bob", "Alice", "Alice"]
    assert schedule[0].to_dict()['surgery_time'] == "10:00 01/02/2025"

    assert hospital.surgeon_patients(surgeon.person_id) == [alice, bob]

    hospital.perform_surgery(surgeon.person_id, alice.person_id)
    assert [s.patient_name for s in hospital.surgeon_schedule(surgeon.person_id)] == ["Bob"]


def test_check_out_drops_remaining_appointments(hospital, alice, surgery_time):
    first = hospital.register_surgeon("Dr A", 40, "dra@h.com", "0333333333", PASSWORD, 301, Speciality.ORTHOPAEDIC)
    second = hospital.register_surgeon("Dr B", 40, "drb@h.com", "0444444444", PASSWORD, 302, "Neurosurgeon")
    hospital.check_in(alice.person_id)
    hospital.assign_surgeon(alice.person_id, first.person_id, surgery_time)
    hospital.assign_surgeon(alice.person_id, second.person_id, surgery_time)

    hospital.perform_surgery(second.person_id, alice.person_id)
    view = hospital.patient_view(alice.person_id)
    assert view.surgeon_name is None
    assert view.surgery_time is None
    assert [s.patient_name for s in hospital.surgeon_schedule(first.person_id)] == ["Alice"]

    hospital.check_out(alice.person_id)
    assert hospital.surgeon_schedule(first.person_id) == []
    assert hospital.patient_view(alice.person_id).surgeon_id is None


def test_selection_lists(hospital, alice, manager, surgeon, surgery_time):
    bob = hospital.register_patient("Bob", 40, "bob@b.com", "0123456780", PASSWORD)
    hospital.check_in(alice.person_id)
    hospital.check_in(bob.person_id)

    assert hospital.patients_awaiting_room() == [alice, bob]
    assert hospital.patients_ready_for_surgery() == []

    hospital.assign_room(manager.person_id, alice.person_id, 1)
    assert hospital.patients_awaiting_room() == [bob]
    assert hospital.patients_ready_for_surgery() == [alice]
    assert hospital.patients_with_rooms() == [alice]

    hospital.assign_surgeon(alice.person_id, surgeon.person_id, surgery_time)
    assert hospital.patients_ready_for_surgery() == []
