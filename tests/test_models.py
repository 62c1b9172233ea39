import pytest
from pydantic import ValidationError

from netlayer.domain.errors import (
    ApplicationError,
    ErrorKind,
    NetworkError,
    NetworkUnreachableError,
    ServerError,
)
from netlayer.models.envelope import ResponseEnvelope
from netlayer.models.request import ExecutorConfig, HTTPMethod, RequestDescriptor
from netlayer.models.result import RequestResult


def test_descriptor_defaults_and_immutability():
    descriptor = RequestDescriptor(url="https://api.example.com/x")

    assert descriptor.method == HTTPMethod.GET
    assert descriptor.headers == {}
    assert descriptor.body is None
    assert descriptor.timeout is None

    with pytest.raises(ValidationError):
        descriptor.url = "https://other.example.com"


def test_descriptor_effective_timeout():
    assert RequestDescriptor(url="https://a.io").effective_timeout(60.0) == 60.0
    assert RequestDescriptor(url="https://a.io", timeout=5).effective_timeout(60.0) == 5


def test_descriptor_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        RequestDescriptor(url="https://a.io", timeout=0)


def test_json_request_encodes_body_and_merges_headers():
    descriptor = RequestDescriptor.json_request(
        "https://api.example.com/items",
        {"a": 1},
        method=HTTPMethod.PUT,
        headers={"Authorization": "Bearer t"},
    )

    assert descriptor.method == HTTPMethod.PUT
    assert descriptor.body == b'{"a": 1}'
    assert descriptor.headers == {
        "Content-Type": "application/json",
        "Authorization": "Bearer t",
    }


def test_executor_config_requires_positive_timeout():
    assert ExecutorConfig(default_timeout=1.5).log_response_bodies is False
    with pytest.raises(ValidationError):
        ExecutorConfig(default_timeout=-1)


def test_envelope_reads_error_fields_and_ignores_extras():
    envelope = ResponseEnvelope.model_validate_json(
        '{"errorCode": 252, "errorMsg": "Session expired", "data": [1]}'
    )

    assert envelope.error_code == "252"
    assert envelope.error_msg == "Session expired"
    assert envelope.has_error


def test_envelope_without_error_fields():
    envelope = ResponseEnvelope.model_validate_json('{"value": 42}')

    assert envelope.error_code is None
    assert not envelope.has_error


def test_result_success_and_failure():
    ok = RequestResult.success({"value": 1})
    assert ok.ok
    assert ok.unwrap() == {"value": 1}

    failed = RequestResult.failure(NetworkUnreachableError())
    assert not failed.ok
    with pytest.raises(NetworkUnreachableError):
        failed.unwrap()


def test_result_cannot_hold_value_and_error():
    with pytest.raises(ValueError):
        RequestResult(value=1, error=ServerError())


def test_error_kinds_and_defaults():
    assert NetworkUnreachableError().message == "Please check your connectivity"
    assert ServerError().code == 0
    assert ServerError().message == "Server error"
    assert ServerError.kind == ErrorKind.SERVER_ERROR
    assert issubclass(ApplicationError, NetworkError)


@pytest.mark.parametrize(
    "code, expired",
    [("0000252", True), ("101", True), ("252", False), (None, False)],
)
def test_application_error_session_expiry(code, expired):
    assert ApplicationError(code, "msg").is_session_expired is expired


def test_result_requires_value_or_error():
    with pytest.raises(ValueError):
        RequestResult()


def test_result_accepts_none_as_decoded_value():
    result = RequestResult.success(None)

    assert result.ok
    assert result.unwrap() is None
    assert RequestResult.failure(ServerError()).value is None
