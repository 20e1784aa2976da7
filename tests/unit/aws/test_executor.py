import json
from typing import Dict, List, Optional

import pytest
from botocore.credentials import Credentials
from botocore.exceptions import (
    CredentialRetrievalError,
    EndpointConnectionError,
    PartialCredentialsError,
    ProfileNotFound,
    ReadTimeoutError,
)

from awsclients.aws.api.core import CoreErrors, HttpMethod, SignerType
from awsclients.aws.api.gamelift import GameLiftClient
from awsclients.aws.api.m2 import MainframeModernizationClient, MainframeModernizationErrors
from awsclients.aws.api.route53 import Route53Client, Route53Errors
from awsclients.aws.configuration import ClientConfiguration
from awsclients.aws.endpoints import Endpoint
from awsclients.aws.executor import BotocoreRequestExecutor
from awsclients.aws.retry import RetryStrategy
from awsclients.aws.spec import load_service

M2_URL = "https://m2.us-east-1.amazonaws.com"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: bytes = b"", headers: Dict[str, str] = None):
        self.status_code = status_code
        self.content = body
        self.headers = headers or {}


class FakeHttpSession:
    """Returns the queued responses (or raises the queued exceptions) in order, and records the sent requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def send(self, request):
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


class NoCredentials:
    def get_credentials(self) -> Optional[Credentials]:
        return None


class FailingCredentials:
    def __init__(self, exception: Exception):
        self.exception = exception

    def get_credentials(self) -> Optional[Credentials]:
        raise self.exception


class CountingCredentials:
    """Returns no credentials for the first ``missing`` calls, then test credentials."""

    def __init__(self, missing: int = 0):
        self.missing = missing
        self.calls = 0

    def get_credentials(self) -> Optional[Credentials]:
        self.calls += 1
        if self.calls <= self.missing:
            return None
        return Credentials("test", "test")


def _create_executor(
    client_class,
    http_session,
    sleeps: List[float] = None,
    credentials=None,
    retry_strategy: RetryStrategy = None,
    **config,
):
    configuration = ClientConfiguration(region="us-east-1", **config)
    return BotocoreRequestExecutor(
        load_service(client_class.service, client_class.version),
        configuration,
        credentials=credentials or Credentials("test", "test"),
        service_errors=client_class.errors,
        retryable_errors=client_class.retryable_errors,
        retry_strategy=retry_strategy,
        http_session=http_session,
        sleep=(sleeps if sleeps is not None else []).append,
    )


def _delete_application(executor, signer: SignerType = SignerType.SIGV4):
    request = {"applicationId": "abc"}
    return executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, MainframeModernizationClient.delete_application, request),
        HttpMethod.DELETE,
        signer,
    )


def _endpoint(url: str, operation, request) -> Endpoint:
    endpoint = Endpoint(url)
    operation.render_path(endpoint, request)
    return endpoint


def test_rest_json_request_is_signed_and_sent():
    session = FakeHttpSession(FakeResponse(200, b"{}", {"x-amzn-requestid": "req-1"}))
    executor = _create_executor(MainframeModernizationClient, session)
    operation = MainframeModernizationClient.delete_application
    request = {"applicationId": "abc"}

    outcome = executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, operation, request),
        HttpMethod.DELETE,
        SignerType.SIGV4,
    )

    assert outcome.is_success, outcome.error
    assert outcome.result["ResponseMetadata"]["RequestId"] == "req-1"
    assert len(session.requests) == 1
    sent = session.requests[0]
    assert sent.method == "DELETE"
    assert sent.url == "https://m2.us-east-1.amazonaws.com/applications/abc"
    authorization = sent.headers["Authorization"]
    if isinstance(authorization, bytes):
        authorization = authorization.decode("utf-8")
    assert authorization.startswith("AWS4-HMAC-SHA256 Credential=test/")
    assert "/us-east-1/m2/aws4_request" in authorization


def test_json_request_carries_target_and_body():
    body = json.dumps({"FleetAttributes": {"FleetId": "fleet-1", "Name": "my-fleet"}}).encode()
    session = FakeHttpSession(FakeResponse(200, body))
    executor = _create_executor(GameLiftClient, session)
    request = {"Name": "my-fleet"}

    outcome = executor.execute(
        "CreateFleet",
        request,
        _endpoint("https://gamelift.us-east-1.amazonaws.com", GameLiftClient.create_fleet, request),
        HttpMethod.POST,
        SignerType.SIGV4,
    )

    assert outcome.result["FleetAttributes"]["FleetId"] == "fleet-1"
    sent = session.requests[0]
    assert sent.url == "https://gamelift.us-east-1.amazonaws.com/"
    target = sent.headers["X-Amz-Target"]
    if isinstance(target, bytes):
        target = target.decode("utf-8")
    assert target == "GameLift.CreateFleet"
    assert json.loads(sent.body) == {"Name": "my-fleet"}


def test_unsigned_request_does_not_need_credentials():
    session = FakeHttpSession(FakeResponse(200, b"{}"))
    executor = _create_executor(MainframeModernizationClient, session, credentials=NoCredentials())
    request = {"applicationId": "abc"}

    outcome = executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, MainframeModernizationClient.delete_application, request),
        HttpMethod.DELETE,
        SignerType.NULL,
    )

    assert outcome.is_success
    assert "Authorization" not in session.requests[0].headers


def test_missing_credentials():
    session = FakeHttpSession(FakeResponse(200, b"{}"))
    executor = _create_executor(MainframeModernizationClient, session, credentials=NoCredentials())
    request = {"applicationId": "abc"}

    outcome = executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, MainframeModernizationClient.delete_application, request),
        HttpMethod.DELETE,
        SignerType.SIGV4,
    )

    assert outcome.error.kind == CoreErrors.MISSING_AUTHENTICATION_TOKEN
    assert session.requests == []


@pytest.mark.parametrize(
    "exception",
    [
        CredentialRetrievalError(provider="sso", error_msg="Token has expired and refresh failed"),
        PartialCredentialsError(provider="env", cred_var="AWS_SECRET_ACCESS_KEY"),
        ProfileNotFound(profile="does-not-exist"),
    ],
)
def test_broken_credential_chain_is_returned_as_error(exception):
    session = FakeHttpSession(FakeResponse(200, b"{}"))
    sleeps = []
    executor = _create_executor(
        MainframeModernizationClient,
        session,
        sleeps,
        credentials=FailingCredentials(exception),
        max_attempts=3,
    )

    outcome = _delete_application(executor)

    error = outcome.error
    assert error.kind == CoreErrors.INVALID_CLIENT_TOKEN_ID
    assert error.message == f"Unable to resolve credentials: {exception}"
    assert not error.retryable
    assert session.requests == []
    assert sleeps == []


def test_default_credential_chain_errors_are_returned_as_error(monkeypatch):
    monkeypatch.delenv("AWS_ACCESS_KEY_ID")
    monkeypatch.delenv("AWS_SECRET_ACCESS_KEY")
    monkeypatch.setenv("AWS_PROFILE", "does-not-exist")
    monkeypatch.setenv("AWS_CONFIG_FILE", "/dev/null")
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", "/dev/null")
    session = FakeHttpSession(FakeResponse(200, b"{}"))
    configuration = ClientConfiguration(region="us-east-1")
    executor = BotocoreRequestExecutor(
        load_service("m2"), configuration, http_session=session, sleep=lambda delay: None
    )

    outcome = _delete_application(executor)

    assert outcome.error.kind == CoreErrors.INVALID_CLIENT_TOKEN_ID
    assert "does-not-exist" in outcome.error.message
    assert session.requests == []


def test_credentials_are_resolved_once():
    session = FakeHttpSession(FakeResponse(200, b"{}"))
    credentials = CountingCredentials()
    executor = _create_executor(MainframeModernizationClient, session, credentials=credentials)

    assert _delete_application(executor).is_success
    assert _delete_application(executor).is_success

    assert credentials.calls == 1
    assert len(session.requests) == 2


def test_missing_credentials_are_looked_up_again():
    session = FakeHttpSession(FakeResponse(200, b"{}"))
    credentials = CountingCredentials(missing=1)
    executor = _create_executor(MainframeModernizationClient, session, credentials=credentials)

    assert _delete_application(executor).error.kind == CoreErrors.MISSING_AUTHENTICATION_TOKEN
    assert _delete_application(executor).is_success
    assert _delete_application(executor).is_success

    assert credentials.calls == 2
    assert len(session.requests) == 2


def test_retryable_service_error_is_retried():
    throttled = FakeResponse(
        429,
        b'{"message": "Rate exceeded"}',
        {
            "x-amzn-errortype": "ThrottlingException:http://internal.amazon.com/",
            "x-amzn-requestid": "req-1",
        },
    )
    session = FakeHttpSession(throttled)
    sleeps = []
    executor = _create_executor(
        MainframeModernizationClient,
        session,
        sleeps,
        retry_strategy=RetryStrategy(max_attempts=3, max_delay=0.01, random=lambda: 1.0),
    )
    request = {"applicationId": "abc"}

    outcome = executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, MainframeModernizationClient.delete_application, request),
        HttpMethod.DELETE,
        SignerType.SIGV4,
    )

    error = outcome.error
    assert error.kind == MainframeModernizationErrors.THROTTLING
    assert error.code == "ThrottlingException"
    assert error.message == "Rate exceeded"
    assert error.retryable
    assert error.status_code == 429
    assert error.request_id == "req-1"
    assert len(session.requests) == 3
    assert sleeps == [0.01, 0.01]


def test_retry_delays_are_jittered():
    session = FakeHttpSession(
        FakeResponse(503, b"{}", {"x-amzn-errortype": "ServiceUnavailableException"})
    )
    sleeps = []
    executor = _create_executor(MainframeModernizationClient, session, sleeps, max_attempts=5)

    outcome = _delete_application(executor)

    assert outcome.error.retryable
    assert len(session.requests) == 5
    assert len(sleeps) <= 4
    assert all(0 < delay <= 20.0 for delay in sleeps)


def test_retry_succeeds_after_transient_error():
    session = FakeHttpSession(
        FakeResponse(
            503, b'{"message": "try again"}', {"x-amzn-errortype": "ServiceUnavailableException"}
        ),
        FakeResponse(200, b"{}"),
    )
    executor = _create_executor(MainframeModernizationClient, session, max_attempts=3)
    request = {"applicationId": "abc"}

    outcome = executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, MainframeModernizationClient.delete_application, request),
        HttpMethod.DELETE,
        SignerType.SIGV4,
    )

    assert outcome.is_success
    assert len(session.requests) == 2


def test_non_retryable_service_error():
    body = (
        b'<?xml version="1.0"?>\n'
        b'<ErrorResponse xmlns="https://route53.amazonaws.com/doc/2013-04-01/">'
        b"<Error><Type>Sender</Type><Code>NoSuchHostedZone</Code>"
        b"<Message>No hosted zone found with ID: Z123</Message></Error>"
        b"<RequestId>req-2</RequestId></ErrorResponse>"
    )
    session = FakeHttpSession(FakeResponse(404, body, {"content-type": "text/xml"}))
    executor = _create_executor(Route53Client, session, max_attempts=3)
    request = {"Id": "Z123"}

    outcome = executor.execute(
        "GetHostedZone",
        request,
        _endpoint("https://route53.amazonaws.com", Route53Client.get_hosted_zone, request),
        HttpMethod.GET,
        SignerType.SIGV4,
    )

    error = outcome.error
    assert error.kind == Route53Errors.NO_SUCH_HOSTED_ZONE
    assert error.message == "No hosted zone found with ID: Z123"
    assert not error.retryable
    assert len(session.requests) == 1
    assert session.requests[0].url == "https://route53.amazonaws.com/2013-04-01/hostedzone/Z123"


@pytest.mark.parametrize(
    "exception, kind",
    [
        (EndpointConnectionError(endpoint_url=M2_URL), CoreErrors.NETWORK_CONNECTION),
        (
            ReadTimeoutError(endpoint_url=M2_URL, error="timed out"),
            CoreErrors.REQUEST_TIMEOUT,
        ),
    ],
)
def test_transport_errors(exception, kind):
    session = FakeHttpSession(exception)
    executor = _create_executor(MainframeModernizationClient, session, max_attempts=2)
    request = {"applicationId": "abc"}

    outcome = executor.execute(
        "DeleteApplication",
        request,
        _endpoint(M2_URL, MainframeModernizationClient.delete_application, request),
        HttpMethod.DELETE,
        SignerType.SIGV4,
    )

    assert outcome.error.kind == kind
    assert outcome.error.retryable
    assert len(session.requests) == 2

