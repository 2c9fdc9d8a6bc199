from datetime import date

from growguide.shared.core.exceptions import (
    AuthenticationError,
    SetupDayConflictError,
    SetupNotFoundError,
    ValidationError,
    is_client_error,
)


def test_validation_error_is_unprocessable():
    error = ValidationError("Date is required", field="date", constraint="required")

    assert error.status_code == 422
    assert error.error_code == "VALIDATION_ERROR"
    assert error.details == {"field": "date", "constraint": "required"}
    assert is_client_error(error)


def test_setup_not_found_details():
    error = SetupNotFoundError(5, user_id=2)

    assert error.status_code == 404
    assert error.details["setup_id"] == 5
    assert error.details["resource_id"] == "5"


def test_conflict_carries_existing_entry():
    existing = {"id": 3, "date": "2024-01-10"}
    error = SetupDayConflictError(setup_id=1, entry_date=date(2024, 1, 10), existing_day_entry=existing)

    assert error.status_code == 409
    assert error.to_dict()["error"]["details"]["existing_day_entry"] == existing


def test_authentication_error_status():
    assert AuthenticationError().status_code == 401
