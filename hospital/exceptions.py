"""
Domain errors

每個錯誤都是可恢復的：訊息回傳給呼叫端顯示，程序不中斷。
"""


class HospitalError(Exception):
    """Base class for all recoverable hospital errors."""

    default_message = "Hospital operation failed."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class DuplicateEmail(HospitalError):
    """Raised when an email (compared case-insensitively) is already registered."""

    default_message = "Email must be unique."


class DuplicateStaffID(HospitalError):
    """Raised when a staff ID is already used by another staff member."""

    default_message = "Staff ID is already registered."


class DuplicateFloor(HospitalError):
    """Raised when a floor already has a floor manager."""

    default_message = "Floor has been assigned to another floor manager."


class AllFloorsAssigned(DuplicateFloor):
    """Raised when every floor already has a floor manager."""

    default_message = "All floors are assigned."


class FloorNotFound(HospitalError):
    """Raised when a floor number is outside the hospital's floors."""

    default_message = "Supplied floor is out of range."


class NoRegisteredPeople(HospitalError):
    """Raised on login when nobody has registered yet."""

    default_message = "There are no people registered."


class EmailNotRegistered(HospitalError):
    """Raised on login when the email is unknown."""

    default_message = "Email is not registered."


class WrongPassword(HospitalError):
    """Raised on login when the password does not match."""

    default_message = "Wrong Password."


class PersonNotFound(HospitalError):
    """Raised when a person id is unknown."""

    default_message = "Person not found."


class PatientNotFound(PersonNotFound):
    """Raised when a patient id is unknown or belongs to staff."""

    default_message = "Patient not found."


class SurgeonNotFound(PersonNotFound):
    """Raised when a surgeon id is unknown or belongs to someone else."""

    default_message = "Surgeon not found."


class FloorManagerNotFound(PersonNotFound):
    """Raised when a floor manager id is unknown or belongs to someone else."""

    default_message = "Floor manager not found."


class NoAvailableRooms(HospitalError):
    """Raised when every room on the floor is held by a patient."""

    default_message = "All rooms on this floor are assigned."


class RoomAlreadyAssigned(HospitalError):
    """Raised when the requested room is held by another patient."""

    default_message = "Room has been assigned to another patient."


class RoomNotFound(HospitalError):
    """Raised when a room number is outside the hospital's room pool."""

    default_message = "Supplied room is out of range."


class NoRoomAssigned(HospitalError):
    """Raised when unassigning a patient who holds no room."""

    default_message = "Patient does not have an assigned room."


class PatientNotScheduled(HospitalError):
    """Raised when a surgeon operates on a patient missing from their schedule."""

    default_message = "Patient is not on this surgeon's schedule."


class InvalidStateTransition(HospitalError):
    """Raised when the lifecycle rejects a check-in or check-out."""

    default_message = "Invalid patient state transition."


# Mapping of domain errors to HTTP status codes
CUSTOM_ERRORS = {
    DuplicateEmail: 409,
    DuplicateStaffID: 409,
    DuplicateFloor: 409,
    AllFloorsAssigned: 409,
    FloorNotFound: 422,
    NoRegisteredPeople: 401,
    EmailNotRegistered: 401,
    WrongPassword: 401,
    PersonNotFound: 404,
    PatientNotFound: 404,
    SurgeonNotFound: 404,
    FloorManagerNotFound: 404,
    NoAvailableRooms: 409,
    RoomAlreadyAssigned: 409,
    RoomNotFound: 404,
    NoRoomAssigned: 409,
    PatientNotScheduled: 409,
    InvalidStateTransition: 422,
}


def status_code_for(error: HospitalError) -> int:
    """Resolve the HTTP status for an error, walking its class hierarchy."""
    for cls in type(error).__mro__:
        if cls in CUSTOM_ERRORS:
            return CUSTOM_ERRORS[cls]
    return 400
