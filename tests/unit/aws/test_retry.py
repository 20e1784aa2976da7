import pytest
from botocore.exceptions import EndpointConnectionError
from botocore.retries.standard import RetryContext

from awsclients.aws.api.core import AWSError, CoreErrors
from awsclients.aws.retry import ERROR_CONTEXT_KEY, RetryStrategy
from awsclients.aws.spec import load_service


class HttpResponse:
    def __init__(self, status_code: int, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self.content = b""


@pytest.fixture(scope="module")
def operation():
    return load_service("m2").operation_model("DeleteApplication")


@pytest.fixture
def throttled():
    return AWSError.from_kind(CoreErrors.THROTTLING, "Rate exceeded")


def _context(operation, attempt_number, error=None, **kwargs) -> RetryContext:
    context = RetryContext(attempt_number=attempt_number, operation_model=operation, **kwargs)
    if error is not None:
        context.request_context[ERROR_CONTEXT_KEY] = error
    return context


def test_should_retry(operation, throttled):
    strategy = RetryStrategy(max_attempts=3)

    assert strategy.should_retry(_context(operation, 1, throttled))
    assert strategy.should_retry(_context(operation, 2, throttled))
    assert not strategy.should_retry(_context(operation, 3, throttled))


def test_should_not_retry_non_retryable_error(operation):
    error = AWSError.from_kind(CoreErrors.ACCESS_DENIED, "denied")

    assert not RetryStrategy(max_attempts=10).should_retry(_context(operation, 1, error))


def test_single_attempt(operation, throttled):
    assert not RetryStrategy(max_attempts=1).should_retry(_context(operation, 1, throttled))


def test_throttling_code_is_retried(operation):
    error = AWSError(kind=CoreErrors.UNKNOWN, code="ThrottlingException", message="slow down")
    context = _context(
        operation, 1, error, parsed_response={"Error": {"Code": "ThrottlingException"}}
    )

    assert RetryStrategy(max_attempts=3).should_retry(context)


def test_transient_status_is_retried(operation):
    error = AWSError(kind=CoreErrors.UNKNOWN, code="Unknown", message="bad gateway")
    context = _context(operation, 1, error, http_response=HttpResponse(502))

    assert RetryStrategy(max_attempts=3).should_retry(context)
    assert not RetryStrategy(max_attempts=1).should_retry(context)


def test_connection_error_is_retried(operation):
    exception = EndpointConnectionError(endpoint_url="https://m2.us-east-1.amazonaws.com")
    error = AWSError.from_kind(CoreErrors.NETWORK_CONNECTION, str(exception))
    context = _context(operation, 1, error, caught_exception=exception)

    assert RetryStrategy(max_attempts=2).should_retry(context)


def test_client_error_is_not_retried(operation):
    error = AWSError(kind=CoreErrors.UNKNOWN, code="ValidationException", message="invalid")
    context = _context(
        operation,
        1,
        error,
        parsed_response={"Error": {"Code": "ValidationException"}},
        http_response=HttpResponse(400),
    )

    assert not RetryStrategy(max_attempts=3).should_retry(context)


def test_delay_without_jitter_is_zero(operation, throttled):
    strategy = RetryStrategy(random=lambda: 0.0)

    assert strategy.delay(_context(operation, 1, throttled)) == 0.0
    assert strategy.delay(_context(operation, 5, throttled)) == 0.0


@pytest.mark.parametrize("attempt_number", [1, 2, 5, 10, 30])
def test_delay_is_capped(operation, throttled, attempt_number):
    strategy = RetryStrategy(max_delay=0.5)

    delay = strategy.delay(_context(operation, attempt_number, throttled))

    assert 0.0 <= delay <= 0.5


def test_delay_reaches_the_cap(operation, throttled):
    strategy = RetryStrategy(max_delay=5, random=lambda: 1.0)

    assert strategy.delay(_context(operation, 30, throttled)) == 5


def test_delay_scales_with_jitter(operation, throttled):
    full = RetryStrategy(max_delay=5, random=lambda: 1.0)
    half = RetryStrategy(max_delay=5, random=lambda: 0.5)

    for attempt_number in (1, 2, 3):
        context = _context(operation, attempt_number, throttled)
        assert half.delay(context) == pytest.approx(full.delay(context) / 2)
