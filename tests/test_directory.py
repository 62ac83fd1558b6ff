import pytest

from hospital.core.credential import Credential
from hospital.core.directory import Directory
from hospital.exceptions import (
    AllFloorsAssigned,
    DuplicateEmail,
    DuplicateFloor,
    DuplicateStaffID,
    FloorNotFound,
)
from hospital.models.person import FloorManagerRole, PatientState, Person, SurgeonRole, Speciality

from .conftest import PASSWORD


def make_person(email, role=None, name="Test Person"):
    return Person(
        name=name,
        age=40,
        email=email,
        mobile_number="0123456789",
        credential=Credential(PASSWORD),
        role=role or PatientState(),
    )


def test_register_assigns_increasing_ids():
    directory = Directory()
    first = directory.register(make_person("one@example.com"))
    second = directory.register(make_person("two@example.com"))

    assert first.person_id == 1
    assert second.person_id == 2
    assert directory.get(2) is second
    assert len(directory) == 2


def test_duplicate_email_is_case_insensitive():
    directory = Directory()
    directory.register(make_person("a@b.com"))

    with pytest.raises(DuplicateEmail):
        directory.register(make_person("A@B.COM"))

    assert len(directory) == 1


def test_find_by_email_ignores_case():
    directory = Directory()
    person = directory.register(make_person("Mixed@Case.com"))

    assert directory.find_by_email("mixed@case.com") is person
    assert directory.find_by_email("nobody@case.com") is None


def test_staff_id_unique_across_roles():
    directory = Directory()
    directory.register(make_person("fm@h.com", FloorManagerRole(staff_id=150, floor_number=1)))

    with pytest.raises(DuplicateStaffID):
        directory.register(make_person("s@h.com", SurgeonRole(staff_id=150, speciality=Speciality.NEUROSURGEON)))

    assert directory.exists_staff_id(150)
    assert not directory.exists_staff_id(151)
    assert directory.find_by_email("s@h.com") is None


def test_second_manager_for_same_floor_fails():
    directory = Directory()
    directory.register(make_person("one@h.com", FloorManagerRole(staff_id=101, floor_number=2)))

    with pytest.raises(DuplicateFloor):
        directory.register(make_person("two@h.com", FloorManagerRole(staff_id=102, floor_number=2)))

    assert directory.list_assigned_floors() == [2]


def test_seventh_floor_manager_fails_when_all_floors_taken():
    directory = Directory()
    for floor in range(1, 7):
        directory.register(
            make_person(f"fm{floor}@h.com", FloorManagerRole(staff_id=100 + floor, floor_number=floor))
        )

    with pytest.raises(AllFloorsAssigned):
        directory.register(make_person("fm7@h.com", FloorManagerRole(staff_id=107, floor_number=3)))

    assert sorted(directory.list_assigned_floors()) == [1, 2, 3, 4, 5, 6]


def test_floor_outside_configured_floors_fails():
    directory = Directory(max_floors=2)

    with pytest.raises(FloorNotFound):
        directory.register(make_person("fm.com", FloorManagerRole(staff_id=101, floor_number=5)))
    with pytest.raises(FloorNotFound):
        directory.register(make_person("fm.com", FloorManagerRole(staff_id=101, floor_number=0)))

    assert len(directory) == 0
    directory.register(make_person("fm.com", FloorManagerRole(staff_id=101, floor_number=2)))
    assert directory.list_assigned_floors() == [2]

def test_listings_are_snapshots():
    directory = Directory()
    patient = directory.register(make_person("p@h.com"))
    directory.register(make_person("s@h.com", SurgeonRole(staff_id=300, speciality=Speciality.GENERAL)))

    patients = directory.list_patients()
    directory.register(make_person("q@h.com"))

    assert patients == [patient]
    assert len(directory.list_patients()) == 2
    assert len(directory.list_surgeons()) == 1
    assert directory.list_checked_in_patients() == []

    patient.role.checked_in = True
    assert directory.list_checked_in_patients() == [patient]
