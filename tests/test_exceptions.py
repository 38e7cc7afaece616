import pytest

from app.core.errors import format_validation_error
from app.core.exceptions import (
    IdentityProviderError,
    ValidationError,
    translate_provider_error,
)


@pytest.mark.parametrize(
    "code, status_code, message",
    [
        ("auth/email-already-exists", 409, "An account with this email already exists"),
        ("auth/user-not-found", 404, "No user found with this email"),
        ("auth/wrong-password", 401, "Invalid email or password"),
        ("auth/invalid-email", 400, "The email address is invalid"),
        ("auth/weak-password", 400, "The password is too weak"),
        ("auth/quota-exceeded", 500, "An unexpected error occurred"),
    ],
)
def test_provider_codes_translate_to_taxonomy(code, status_code, message):
    error = translate_provider_error(IdentityProviderError(code))
    assert error.status_code == status_code
    assert error.message == message


def test_validation_messages_are_joined():
    error = ValidationError.from_messages(["Project name is required", "Description is required"])
    assert error.status_code == 400
    assert error.message == "Project name is required, Description is required"


def test_validation_error_without_messages_falls_back():
    assert ValidationError.from_messages([]).message == "Validation failed"


def test_format_validation_error():
    assert format_validation_error({"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}) == "Invalid JSON body"
    assert format_validation_error({"type": "missing", "loc": ("body",), "msg": "Field required"}) == "Request body is required"
    assert (
        format_validation_error({"type": "value_error", "loc": ("body", "name"), "msg": "Value error, Invalid status"})
        == "Invalid status"
    )
    assert (
        format_validation_error({"type": "dict_type", "loc": ("body",), "msg": "Input should be a valid dictionary"})
        == "Input should be a valid dictionary"
    )
    assert format_validation_error({"type": "int_parsing", "loc": ("query", "limit"), "msg": "bad"}) == "query.limit: bad"
