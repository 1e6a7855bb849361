"""Error Hierarchy - response envelopes and status codes."""

from contacts_api.core.errors import (
    ContactNotFoundError,
    ContactsError,
    DuplicateFieldError,
    ErrorCategory,
    InvalidIdentifierError,
    MissingFieldsError,
    StorageUnavailableError,
)


def test_duplicate_field_names_the_field():
    body = DuplicateFieldError("email").to_response()
    assert body["error"] == "Duplicate email"
    assert body["message"] == "A contact with this email already exists"
    assert body["field"] == "email"


def test_duplicate_field_on_update_says_another_contact():
    err = DuplicateFieldError("phone", updating=True)
    assert err.http_status == 409
    assert err.message == "Another contact with this phone already exists"


def test_not_found_carries_id_in_context():
    err = ContactNotFoundError("abc")
    assert err.http_status == 404
    assert err.context.contact_id == "abc"
    assert err.to_response() == {
        "error": "Contact not found",
        "message": "Contact with id abc does not exist",
        "code": "CONTACT_NOT_FOUND",
    }


def test_storage_errors_are_server_errors():
    err = StorageUnavailableError("Connection or operational error", "execute")
    assert isinstance(err, ContactsError)
    assert err.http_status == 500
    assert err.category == ErrorCategory.DATABASE
    assert err.to_response()["error"] == "Server error"


def test_invalid_id_keeps_raw_value_in_context():
    err = InvalidIdentifierError("12345")
    assert err.context.contact_id == "12345"
    assert err.to_response() == {
        "error": "Invalid ID",
        "message": "The provided ID is not valid",
        "code": "INVALID_ID",
    }


def test_every_category_is_raised_by_some_error():
    raised = {
        MissingFieldsError(["name"]).category,
        InvalidIdentifierError("x").category,
        ContactNotFoundError("x").category,
        DuplicateFieldError("email").category,
        StorageUnavailableError("down", "execute").category,
    }
    assert raised == set(ErrorCategory)
