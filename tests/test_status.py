import pytest

from vecops.status import NotFoundError, Status, UndefinedTypeError, VectorError


@pytest.mark.parametrize(
    ("code", "name"),
    [
        (200, "OK"),
        (400, "BAD_REQUEST"),
        (404, "NOT_FOUND"),
        (409, "CONFLICT"),
        (503, "MEMORY_ALLOCATION_ERROR"),
        (504, "UNDEFINED_TYPE"),
    ],
)
def test_status_codes_match_source(code, name):
    status = Status(code)
    assert status.name == name
    assert int(status) == code


def test_status_lookup_by_value():
    assert Status(409) is Status.CONFLICT
    assert Status(400) is Status.BAD_REQUEST


def test_status_rejects_unknown_code():
    with pytest.raises(ValueError):
        Status(999)


def test_not_found_error_carries_status():
    err = NotFoundError("missing operand")
    assert isinstance(err, VectorError)
    assert err.status is Status.NOT_FOUND
    assert str(err) == "missing operand"


def test_undefined_type_error_carries_status():
    err = UndefinedTypeError()
    assert err.status is Status.UNDEFINED_TYPE
    assert isinstance(err, VectorError)
    assert str(err) == "undefined type"