"""Tests for error response classification."""

import pytest
from httpx import Response

from pterodactyl_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnparseableErrorBodyError,
    ValidationError,
)
from pterodactyl_client.errors.handler import raise_for_status


def error_response(status_code: int, code: str = "HttpException", detail: str = "Something failed", **kwargs):
    return Response(
        status_code=status_code,
        json={"errors": [{"code": code, "status": str(status_code), "detail": detail}]},
        **kwargs,
    )


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201, 204])
def test_raise_for_status_success_response(status_code):
    """Test raise_for_status doesn't raise for successful responses."""
    raise_for_status(Response(status_code=status_code))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, ValidationError),
        (429, RateLimitError),
        (418, ClientError),
        (500, ServerError),
        (502, ServerError),
    ],
)
def test_raise_for_status_maps_status_codes(status_code, exc_class):
    """Test each status lands on its exception class."""
    response = error_response(status_code)

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.response is response


@pytest.mark.unit
def test_raise_for_status_404_not_found():
    """Test the panel's 404 envelope becomes a NotFoundError with its fields."""
    response = error_response(404, "NotFoundHttpException", "The requested resource could not be found.")

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response)

    error = exc_info.value
    assert str(error) == "HTTP 404: NotFoundHttpException: The requested resource could not be found."
    assert error.code == "NotFoundHttpException"
    assert error.status == "404"
    assert error.detail == "The requested resource could not be found."
    assert len(error.errors) == 1


@pytest.mark.unit
def test_raise_for_status_422_validation_error():
    """Test validation entries carrying meta are exposed separately."""
    response = Response(
        status_code=422,
        json={
            "errors": [
                {
                    "code": "ValidationException",
                    "status": "422",
                    "detail": "The email field is required.",
                    "meta": {"source_field": "email", "rule": "required"},
                },
                {
                    "code": "ValidationException",
                    "status": "422",
                    "detail": "The username has already been taken.",
                    "meta": {"source_field": "username", "rule": "unique"},
                },
            ]
        },
    )

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    error = exc_info.value
    assert len(error.validation_errors) == 2
    assert error.validation_errors[0].meta["source_field"] == "email"
    assert "(field: email)" in str(error)
    assert "(field: username)" in str(error)


@pytest.mark.unit
def test_raise_for_status_429_with_retry_after():
    """Test RateLimitError exposes the Retry-After header."""
    response = error_response(429, "TooManyRequestsHttpException", headers={"Retry-After": "60"})

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after == 60


@pytest.mark.unit
def test_raise_for_status_429_with_invalid_retry_after():
    """Test a non-numeric Retry-After is ignored."""
    response = error_response(429, headers={"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"})

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after is None


@pytest.mark.unit
def test_raise_for_status_empty_errors_list():
    """Test an envelope without entries still raises with the status."""
    response = Response(status_code=500, json={"errors": []})

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 500: Unknown API error"
    assert exc_info.value.code is None
    assert exc_info.value.detail is None


@pytest.mark.unit
def test_raise_for_status_unrelated_json_object():
    """Test any JSON object is accepted as an (empty) envelope."""
    response = Response(status_code=404, json={"message": "Not Found"})

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.errors == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"text": "<html>502 Bad Gateway</html>"},
        {"text": "not json"},
        {"json": ["not", "an", "object"]},
    ],
    ids=["empty", "html", "text", "array"],
)
def test_raise_for_status_unparseable_body(kwargs):
    """Test bodies that are not an error envelope still report the status."""
    response = Response(status_code=502, **kwargs)

    with pytest.raises(UnparseableErrorBodyError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 502
    assert exc_info.value.response is response
    assert "502" in str(exc_info.value)
    assert not isinstance(exc_info.value, APIError)


@pytest.mark.unit
def test_raise_for_status_unusual_status_code():
    """Test statuses outside 4xx/5xx fall back to APIError."""
    response = error_response(304)

    with pytest.raises(APIError) as exc_info:
        raise_for_status(response)

    assert type(exc_info.value) is APIError
    assert exc_info.value.status_code == 304
