import os

# pbkdf2 with few iterations keeps registration fast in tests
os.environ.setdefault("HOSPITAL_PASSWORD_HASH", "pbkdf2:sha256:1000")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from hospital.core.hospital import Hospital
from hospital.main import create_app
from hospital.models.person import Speciality

PASSWORD = "Passw0rd!"


@pytest.fixture
def hospital():
    return Hospital()


@pytest.fixture
def alice(hospital):
    return hospital.register_patient("Alice", 30, "a@b.com", "0123456789", PASSWORD)


@pytest.fixture
def manager(hospital):
    return hospital.register_floor_manager(
        "Fiona Floor", 45, "fiona@hospital.com", "0111111111", PASSWORD, 101, 1
    )


@pytest.fixture
def surgeon(hospital):
    return hospital.register_surgeon(
        "Dr X", 50, "x@hospital.com", "0222222222", PASSWORD, 201, Speciality.GENERAL
    )


@pytest.fixture
def surgery_time():
    return datetime(2025, 1, 1, 14, 30)


@pytest.fixture
def client(hospital):
    with TestClient(create_app(hospital)) as test_client:
        yield test_client
