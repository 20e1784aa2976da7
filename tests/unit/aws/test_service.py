import copy
import logging
import threading

import pytest
from botocore.exceptions import CredentialRetrievalError

from awsclients.aws.api.clouddirectory import CloudDirectoryClient
from awsclients.aws.api.core import AsyncCallerContext, CoreErrors, HttpMethod, SignerType
from awsclients.aws.api.gamelift import GameLiftClient
from awsclients.aws.api.m2 import MainframeModernizationClient
from awsclients.aws.api.route53 import Route53Client
from awsclients.aws.api.waf import WAFClient
from awsclients.aws.configuration import ClientConfiguration
from awsclients.aws.service import BoundOperation, Operation
from awsclients.utils.executor import DaemonThreadPool

from ..conftest import TEST_AWS_REGION_NAME, FakeEndpointProvider

CLIENTS = [
    CloudDirectoryClient,
    GameLiftClient,
    MainframeModernizationClient,
    Route53Client,
    WAFClient,
]

ALL_OPERATIONS = [
    pytest.param(client_class, operation, id=f"{client_class.service}.{operation.name}")
    for client_class in CLIENTS
    for operation in client_class.operations.values()
]

REQUIRED_MEMBERS = [
    pytest.param(
        client_class, operation, member, id=f"{client_class.service}.{operation.name}.{member}"
    )
    for client_class in CLIENTS
    for operation in client_class.operations.values()
    for member in operation.required
]


def _complete_request(operation: Operation) -> dict:
    return {member: f"value-of-{member}" for member in operation.required}


@pytest.mark.parametrize(
    "client_class, attribute, request_, method, path",
    [
        (
            MainframeModernizationClient,
            "delete_application",
            {"applicationId": "abc"},
            HttpMethod.DELETE,
            "/applications/abc",
        ),
        (
            MainframeModernizationClient,
            "cancel_batch_job_execution",
            {"applicationId": "app-1", "executionId": "exec-1"},
            HttpMethod.POST,
            "/applications/app-1/batch-job-executions/exec-1/cancel",
        ),
        (
            MainframeModernizationClient,
            "get_application_version",
            {"applicationId": "app-1", "applicationVersion": 3},
            HttpMethod.GET,
            "/applications/app-1/versions/3",
        ),
        (
            MainframeModernizationClient,
            "update_environment",
            {"environmentId": "env-1", "engineVersion": "8.0.10"},
            HttpMethod.PATCH,
            "/environments/env-1",
        ),
        (MainframeModernizationClient, "list_applications", {}, HttpMethod.GET, "/applications"),
        (
            CloudDirectoryClient,
            "create_directory",
            {
                "Name": "my-directory",
                "SchemaArn": "arn:aws:clouddirectory:us-east-1:000000000000:schema/published/s/1",
            },
            HttpMethod.PUT,
            "/amazonclouddirectory/2017-01-11/directory/create",
        ),
        (
            CloudDirectoryClient,
            "get_directory",
            {"DirectoryArn": "arn:aws:clouddirectory:us-east-1:000000000000:directory/d"},
            HttpMethod.POST,
            "/amazonclouddirectory/2017-01-11/directory/get",
        ),
        (
            CloudDirectoryClient,
            "list_directories",
            {},
            HttpMethod.POST,
            "/amazonclouddirectory/2017-01-11/directory/list",
        ),
        (
            Route53Client,
            "change_resource_record_sets",
            {"HostedZoneId": "Z123", "ChangeBatch": {"Changes": []}},
            HttpMethod.POST,
            "/2013-04-01/hostedzone/Z123/rrset/",
        ),
        (
            Route53Client,
            "list_resource_record_sets",
            {"HostedZoneId": "Z123"},
            HttpMethod.GET,
            "/2013-04-01/hostedzone/Z123/rrset",
        ),
        (
            Route53Client,
            "delete_hosted_zone",
            {"Id": "Z123"},
            HttpMethod.DELETE,
            "/2013-04-01/hostedzone/Z123",
        ),
        (
            Route53Client,
            "change_tags_for_resource",
            {"ResourceType": "hostedzone", "ResourceId": "Z123"},
            HttpMethod.POST,
            "/2013-04-01/tags/hostedzone/Z123",
        ),
        (Route53Client, "get_checker_ip_ranges", {}, HttpMethod.GET, "/2013-04-01/checkeripranges"),
        (GameLiftClient, "create_fleet", {"Name": "fleet"}, HttpMethod.POST, "/"),
        (WAFClient, "get_rule", {"RuleId": "rule-1"}, HttpMethod.POST, "/"),
    ],
)
def test_operation_path_and_method(
    create_client, request_executor, client_class, attribute, request_, method, path
):
    client = create_client(client_class)

    outcome = getattr(client, attribute)(request_)

    assert outcome.is_success, outcome.error
    assert outcome.result["path"] == path
    assert outcome.result["method"] == method.value
    assert len(request_executor.calls) == 1
    operation_name, sent_request, url, sent_method, signer = request_executor.calls[0]
    assert operation_name == getattr(client_class, attribute).name
    assert sent_request == request_
    assert url == f"https://fake.amazonaws.com{path}"
    assert sent_method == method
    assert signer == SignerType.SIGV4


@pytest.mark.parametrize("client_class, operation, member", REQUIRED_MEMBERS)
def test_missing_required_member(
    create_client, endpoint_provider, request_executor, client_class, operation, member
):
    client = create_client(client_class)
    request = _complete_request(operation)
    del request[member]

    outcome = client.dispatch(operation, request)

    assert not outcome
    assert outcome.error.kind == CoreErrors.MISSING_PARAMETER
    assert outcome.error.code == "MISSING_PARAMETER"
    assert outcome.error.message == f"Missing required field [{member}]"
    assert not outcome.error.retryable
    assert request_executor.calls == []
    assert endpoint_provider.calls == []


def test_missing_required_member_is_logged(create_client, request_executor, caplog):
    client = create_client(MainframeModernizationClient)

    with caplog.at_level(logging.ERROR):
        outcome = client.delete_application({})

    assert outcome.error.kind == CoreErrors.MISSING_PARAMETER
    assert "DeleteApplication: Required field: applicationId, is not set" in caplog.text


def test_member_set_to_none_is_missing(create_client, request_executor):
    client = create_client(MainframeModernizationClient)

    outcome = client.cancel_batch_job_execution({"applicationId": "app-1", "executionId": None})

    assert outcome.error.message == "Missing required field [executionId]"
    assert request_executor.calls == []


@pytest.mark.parametrize("client_class, operation", ALL_OPERATIONS)
def test_endpoint_resolution_failure(configuration, request_executor, client_class, operation):
    client = client_class(
        configuration=configuration,
        endpoint_provider=FakeEndpointProvider(fail=True),
        request_executor=request_executor,
    )

    outcome = client.dispatch(operation, _complete_request(operation))

    assert outcome.error.kind == CoreErrors.ENDPOINT_RESOLUTION_FAILURE
    assert "no endpoint for you" in outcome.error.message
    assert not outcome.error.retryable
    assert request_executor.calls == []


def test_nulled_endpoint_provider(create_client, request_executor):
    client = create_client(MainframeModernizationClient)
    client.endpoint_provider = None

    outcome = client.delete_application({"applicationId": "abc"})

    assert outcome.error.kind == CoreErrors.ENDPOINT_RESOLUTION_FAILURE
    assert request_executor.calls == []


def test_credential_errors_are_returned_as_outcome(configuration, endpoint_provider):
    class ExpiredSsoToken:
        def get_credentials(self):
            raise CredentialRetrievalError(provider="sso", error_msg="token expired")

    client = MainframeModernizationClient(
        configuration=configuration,
        credentials=ExpiredSsoToken(),
        endpoint_provider=endpoint_provider,
    )

    outcome = client.delete_application({"applicationId": "abc"})

    assert outcome.error.kind == CoreErrors.INVALID_CLIENT_TOKEN_ID
    assert "token expired" in outcome.error.message
    assert not outcome.error.retryable


def test_path_members_are_percent_encoded(create_client):
    client = create_client(Route53Client)

    outcome = client.get_hosted_zone({"Id": "/hostedzone/Z 1"})

    assert outcome.result["path"] == "/2013-04-01/hostedzone/%2Fhostedzone%2FZ%201"


def test_request_members_as_keyword_arguments(create_client, request_executor):
    client = create_client(MainframeModernizationClient)

    outcome = client.delete_application(applicationId="abc")

    assert outcome.result["path"] == "/applications/abc"
    assert request_executor.calls[0][1] == {"applicationId": "abc"}


def test_dispatch_is_idempotent(create_client, request_executor):
    client = create_client(MainframeModernizationClient)
    request = {"applicationId": "app-1", "executionId": "exec-1"}
    original = copy.deepcopy(request)

    first = client.cancel_batch_job_execution(request)
    second = client.cancel_batch_job_execution(request)

    assert first == second
    assert request == original
    assert request_executor.calls[0] == request_executor.calls[1]


def test_operation_by_name(create_client):
    client = create_client(MainframeModernizationClient)

    operation = client.operation("DeleteApplication")

    assert isinstance(operation, BoundOperation)
    assert operation.operation is MainframeModernizationClient.delete_application
    assert operation({"applicationId": "abc"}).result["path"] == "/applications/abc"

    with pytest.raises(ValueError):
        client.operation("DeleteEverything")


def test_operations_are_registered_by_wire_name():
    assert len(MainframeModernizationClient.operations) == 34
    operation = MainframeModernizationClient.operations["DeleteApplication"]
    assert operation.attribute == "delete_application"
    assert MainframeModernizationClient.operations["DeleteApplication"].method == HttpMethod.DELETE
    assert "DeleteApplication" not in Route53Client.operations


def test_override_endpoint(create_client, endpoint_provider, request_executor):
    client = create_client(MainframeModernizationClient)

    client.override_endpoint("http://localhost:4566")
    client.delete_application({"applicationId": "abc"})

    assert request_executor.calls[0][2] == "http://localhost:4566/applications/abc"


def test_endpoint_provider_is_initialized_with_configuration(
    create_client, endpoint_provider, configuration
):
    create_client(MainframeModernizationClient)

    assert endpoint_provider.configuration is configuration


class TestFutureDispatch:
    def test_futures_resolved_out_of_order(
        self, endpoint_provider, request_executor, deferred_executor
    ):
        client = MainframeModernizationClient(
            configuration=ClientConfiguration(
                region=TEST_AWS_REGION_NAME, executor=deferred_executor
            ),
            endpoint_provider=endpoint_provider,
            request_executor=request_executor,
        )
        requests = [{"applicationId": f"app-{i}"} for i in range(10)]

        futures = [client.delete_application.future(request) for request in requests]
        # the copies are dispatched, not the requests of the caller
        for request in requests:
            request["applicationId"] = "changed"
        assert not any(future.done() for future in futures)

        deferred_executor.run_all(reverse=True)

        for i, future in enumerate(futures):
            outcome = future.result(timeout=1)
            assert outcome.result["request"] == {"applicationId": f"app-{i}"}
            assert outcome.result["path"] == f"/applications/app-{i}"
        assert [call[1]["applicationId"] for call in request_executor.calls] == [
            f"app-{i}" for i in reversed(range(10))
        ]

    def test_future_of_missing_member(self, endpoint_provider, request_executor, deferred_executor):
        client = MainframeModernizationClient(
            configuration=ClientConfiguration(
                region=TEST_AWS_REGION_NAME, executor=deferred_executor
            ),
            endpoint_provider=endpoint_provider,
            request_executor=request_executor,
        )

        future = client.delete_application.future({})
        deferred_executor.run_all()

        assert future.result().error.kind == CoreErrors.MISSING_PARAMETER

    def test_future_on_thread_pool(self, endpoint_provider, request_executor):
        pool = DaemonThreadPool(4)
        try:
            client = MainframeModernizationClient(
                configuration=ClientConfiguration(region=TEST_AWS_REGION_NAME, executor=pool),
                endpoint_provider=endpoint_provider,
                request_executor=request_executor,
            )
            futures = {
                f"app-{i}": client.delete_application.future(applicationId=f"app-{i}")
                for i in range(20)
            }
            for application_id, future in futures.items():
                assert future.result(timeout=5).result["path"] == f"/applications/{application_id}"
        finally:
            pool.shutdown()


class TestCallbackDispatch:
    def test_handler_receives_request_copy(
        self, endpoint_provider, request_executor, deferred_executor
    ):
        client = MainframeModernizationClient(
            configuration=ClientConfiguration(
                region=TEST_AWS_REGION_NAME, executor=deferred_executor
            ),
            endpoint_provider=endpoint_provider,
            request_executor=request_executor,
        )
        request = {"applicationId": "app-1", "executionId": "exec-1"}
        expected = copy.deepcopy(request)
        context = AsyncCallerContext()
        received = []

        def handler(handler_client, handler_request, outcome, handler_context):
            received.append((handler_client, handler_request, outcome, handler_context))

        client.cancel_batch_job_execution.callback(request, handler, context)
        request["executionId"] = "changed"
        deferred_executor.run_all()

        assert len(received) == 1
        handler_client, handler_request, outcome, handler_context = received[0]
        assert handler_client is client
        assert handler_request == expected
        assert handler_request is not request
        assert outcome.result["path"] == "/applications/app-1/batch-job-executions/exec-1/cancel"
        assert handler_context is context

    def test_handler_runs_on_worker_thread(self, endpoint_provider, request_executor):
        pool = DaemonThreadPool(2)
        try:
            client = MainframeModernizationClient(
                configuration=ClientConfiguration(region=TEST_AWS_REGION_NAME, executor=pool),
                endpoint_provider=endpoint_provider,
                request_executor=request_executor,
            )
            threads = []
            done = threading.Event()

            def handler(_client, _request, _outcome, _context):
                threads.append(threading.current_thread())
                done.set()

            client.delete_application.callback({"applicationId": "abc"}, handler)

            assert done.wait(timeout=5)
            assert threads[0] is not threading.current_thread()
            assert threads[0].daemon
        finally:
            pool.shutdown()

    def test_handler_error_is_logged(
        self, endpoint_provider, request_executor, deferred_executor, caplog
    ):
        client = MainframeModernizationClient(
            configuration=ClientConfiguration(
                region=TEST_AWS_REGION_NAME, executor=deferred_executor
            ),
            endpoint_provider=endpoint_provider,
            request_executor=request_executor,
        )

        def handler(*args):
            raise RuntimeError("oh no")

        future = client.delete_application.callback({"applicationId": "abc"}, handler)
        deferred_executor.run_all()

        assert future.result() is None
        assert "Error in the completion handler of DeleteApplication" in caplog.text
