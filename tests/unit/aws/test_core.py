import pytest

from awsclients.aws.api.core import (
    CORE_ERROR_CODES,
    RETRYABLE_CORE_ERRORS,
    AsyncCallerContext,
    AWSError,
    CoreErrors,
    OperationError,
    Outcome,
    is_set,
)


def test_is_set():
    request = {"applicationId": "abc", "executionId": None, "count": 0, "tags": {}}

    assert is_set(request, "applicationId")
    assert is_set(request, "count")
    assert is_set(request, "tags")
    assert not is_set(request, "executionId")
    assert not is_set(request, "unknown")


class TestOutcome:
    def test_success(self):
        outcome = Outcome.success({"foo": "bar"})

        assert outcome
        assert outcome.is_success
        assert outcome.unwrap() == {"foo": "bar"}

    def test_failure(self):
        error = AWSError.from_kind(CoreErrors.THROTTLING, "Rate exceeded")
        outcome = Outcome.failure(error)

        assert not outcome
        assert outcome.error is error
        with pytest.raises(OperationError) as e:
            outcome.unwrap()
        assert e.value.error is error
        assert str(e.value) == "Throttling: Rate exceeded"

    def test_result_and_error_are_exclusive(self):
        with pytest.raises(ValueError):
            Outcome(result={}, error=AWSError.from_kind(CoreErrors.UNKNOWN, "oops"))

    def test_equality(self):
        assert Outcome.success({"a": 1}) == Outcome.success({"a": 1})
        assert Outcome.success({"a": 1}) != Outcome.success({"a": 2})


class TestAWSError:
    @pytest.mark.parametrize("kind", list(CoreErrors))
    def test_from_kind(self, kind):
        error = AWSError.from_kind(kind, "message")

        assert error.kind == kind
        assert error.code == kind.value
        assert error.retryable == (kind in RETRYABLE_CORE_ERRORS)

    def test_headers_are_not_compared(self):
        first = AWSError.from_kind(CoreErrors.ACCESS_DENIED, "denied", headers={"x-req": "1"})
        second = AWSError.from_kind(CoreErrors.ACCESS_DENIED, "denied", headers={"x-req": "2"})

        assert first == second


def test_retryable_core_errors():
    assert RETRYABLE_CORE_ERRORS == {
        CoreErrors.INTERNAL_FAILURE,
        CoreErrors.SERVICE_UNAVAILABLE,
        CoreErrors.THROTTLING,
        CoreErrors.SLOW_DOWN,
        CoreErrors.REQUEST_TIME_TOO_SKEWED,
        CoreErrors.REQUEST_EXPIRED,
        CoreErrors.REQUEST_TIMEOUT,
        CoreErrors.NETWORK_CONNECTION,
    }


@pytest.mark.parametrize(
    "code, kind",
    [
        ("ThrottlingException", CoreErrors.THROTTLING),
        ("Throttling", CoreErrors.THROTTLING),
        ("AccessDeniedException", CoreErrors.ACCESS_DENIED),
        ("ValidationException", CoreErrors.VALIDATION),
        ("ServiceUnavailable", CoreErrors.SERVICE_UNAVAILABLE),
        ("InternalFailure", CoreErrors.INTERNAL_FAILURE),
        ("RequestTimeTooSkewed", CoreErrors.REQUEST_TIME_TOO_SKEWED),
    ],
)
def test_core_error_codes(code, kind):
    assert CORE_ERROR_CODES[code] == kind


def test_async_caller_context():
    first = AsyncCallerContext()
    second = AsyncCallerContext()

    assert first.uuid != second.uuid
    assert AsyncCallerContext(uuid="request-1").uuid == "request-1"
