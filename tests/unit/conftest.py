import copy
import threading
from concurrent.futures import Executor, Future
from typing import Any, Callable, List, Mapping, Optional, Tuple

import pytest

from awsclients.aws.api.core import (
    EndpointResolutionError,
    HttpMethod,
    Outcome,
    ServiceRequest,
    SignerType,
)
from awsclients.aws.configuration import ClientConfiguration
from awsclients.aws.endpoints import Endpoint

TEST_AWS_ACCESS_KEY_ID = "test"
TEST_AWS_SECRET_ACCESS_KEY = "test"
TEST_AWS_REGION_NAME = "us-east-1"
TEST_ENDPOINT_URL = "https://fake.amazonaws.com"


@pytest.fixture(autouse=True)
def set_boto_test_credentials_and_region(monkeypatch):
    """
    Automatically sets the default credentials and region for all unit tests.
    """
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", TEST_AWS_ACCESS_KEY_ID)
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", TEST_AWS_SECRET_ACCESS_KEY)
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_AWS_REGION_NAME)


class FakeEndpointProvider:
    """Endpoint provider which resolves a fixed url, or always fails if created with ``fail=True``."""

    def __init__(self, url: str = TEST_ENDPOINT_URL, fail: bool = False):
        self.url = url
        self.fail = fail
        self.configuration: Optional[ClientConfiguration] = None
        self.calls: List[Mapping[str, Any]] = []

    def init_built_in_parameters(self, configuration: ClientConfiguration) -> None:
        self.configuration = configuration

    def override_endpoint(self, url: str) -> None:
        self.url = url

    def resolve_endpoint(self, context_params: Mapping[str, Any]) -> Endpoint:
        self.calls.append(context_params)
        if self.fail:
            raise EndpointResolutionError("Invalid Configuration: no endpoint for you")
        return Endpoint(self.url)


class RecordingRequestExecutor:
    """
    Request executor which records its calls and returns a deterministic result derived from the request.
    """

    def __init__(self):
        self.calls: List[Tuple[str, ServiceRequest, str, HttpMethod, SignerType]] = []
        self._lock = threading.Lock()

    def execute(
        self,
        operation_name: str,
        request: ServiceRequest,
        endpoint: Endpoint,
        method: HttpMethod,
        signer: SignerType,
    ) -> Outcome:
        with self._lock:
            self.calls.append(
                (operation_name, copy.deepcopy(request), endpoint.url, method, signer)
            )
        return Outcome.success(
            {
                "operation": operation_name,
                "method": method.value,
                "path": endpoint.path,
                "request": copy.deepcopy(request),
            }
        )


class DeferredExecutor(Executor):
    """
    Executor which only queues submitted tasks. They run when ``run_all`` is called, optionally in reverse order.
    """

    def __init__(self):
        self.tasks: List[Tuple[Future, Callable, tuple, dict]] = []

    def submit(self, fn, /, *args, **kwargs) -> Future:
        future = Future()
        self.tasks.append((future, fn, args, kwargs))
        return future

    def run_all(self, reverse: bool = False):
        tasks = list(reversed(self.tasks)) if reverse else list(self.tasks)
        self.tasks.clear()
        for future, fn, args, kwargs in tasks:
            future.set_running_or_notify_cancel()
            try:
                future.set_result(fn(*args, **kwargs))
            except Exception as e:
                future.set_exception(e)


@pytest.fixture
def endpoint_provider():
    return FakeEndpointProvider()


@pytest.fixture
def request_executor():
    return RecordingRequestExecutor()


@pytest.fixture
def deferred_executor():
    return DeferredExecutor()


@pytest.fixture
def configuration():
    return ClientConfiguration(region=TEST_AWS_REGION_NAME)


@pytest.fixture
def create_client(configuration, endpoint_provider, request_executor):
    """Factory for clients which use the fake endpoint provider and request executor."""

    def _create(client_class, **kwargs):
        kwargs.setdefault("configuration", configuration)
        kwargs.setdefault("endpoint_provider", endpoint_provider)
        kwargs.setdefault("request_executor", request_executor)
        return client_class(**kwargs)

    yield _create
