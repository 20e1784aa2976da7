"""
Base classes of the generated service clients.

A client class declares one ``Operation`` per API operation. Accessed on a client instance, the operation is bound to
it and can be called synchronously, or dispatched on the executor of the client configuration::

    client = MainframeModernizationClient()
    outcome = client.delete_application({"applicationId": "abc"})
    future = client.delete_application.future({"applicationId": "abc"})
    client.delete_application.callback({"applicationId": "abc"}, handler, context)
"""
import copy
import logging
import re
from concurrent.futures import Future
from enum import Enum
from typing import (
    Any,
    Callable,
    ClassVar,
    Collection,
    Dict,
    Generic,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from botocore.credentials import Credentials
from botocore.model import OperationNotFoundError, ServiceModel

from awsclients.aws.api.core import (
    AsyncCallerContext,
    AWSError,
    CoreErrors,
    EndpointResolutionError,
    HttpMethod,
    Outcome,
    ServiceRequest,
    SignerType,
    is_set,
)
from awsclients.aws.configuration import ClientConfiguration
from awsclients.aws.endpoints import Endpoint, EndpointProvider, RulesetEndpointProvider
from awsclients.aws.executor import BotocoreRequestExecutor, CredentialsProvider, RequestExecutor
from awsclients.aws.spec import load_service

LOG = logging.getLogger(__name__)

Req = TypeVar("Req", bound=ServiceRequest)
Res = TypeVar("Res")

_path_label = re.compile(r"(\{[^}]+\})")

CallbackHandler = Callable[
    ["ServiceClient", ServiceRequest, Outcome, Optional[AsyncCallerContext]], Any
]


class Operation(Generic[Req, Res]):
    """
    Declaration of a single API operation: its wire name, request and response shapes, HTTP method, path template and
    the members which have to be set before the request is sent.

    The path template references request members by name, f.e. ``/applications/{applicationId}``.
    """

    def __init__(
        self,
        name: str,
        request_type: Type[Req],
        response_type: Any = None,
        method: HttpMethod = HttpMethod.POST,
        path: str = "/",
        required: Tuple[str, ...] = (),
        signer: SignerType = SignerType.SIGV4,
    ):
        self.name = name
        self.request_type = request_type
        self.response_type = response_type
        self.method = method
        self.path = path
        self.required = tuple(required)
        self.signer = signer
        self.attribute: Optional[str] = None

    def __set_name__(self, owner, name):
        self.attribute = name

    def __get__(
        self, client: Optional["ServiceClient"], owner=None
    ) -> Union["Operation", "BoundOperation[Req, Res]"]:
        if client is None:
            return self
        return BoundOperation(client, self)

    def missing_member(self, request: Mapping[str, Any]) -> Optional[str]:
        """Returns the first required member which is not set in the request, or None."""
        for member in self.required:
            if not is_set(request, member):
                return member
        return None

    def render_path(self, endpoint: Endpoint, request: Mapping[str, Any]) -> None:
        """Appends the path of this operation, with the labels replaced by the request members, to the endpoint."""
        for part in _path_label.split(self.path):
            if not part:
                continue
            if part.startswith("{"):
                member = part[1:-1]
                value = request.get(member)
                if value is None:
                    raise EndpointResolutionError(f"Path member {member} of {self.name} is not set")
                endpoint.add_path_segment(value)
            else:
                endpoint.add_path_segments(part)

    def __repr__(self):
        return f"Operation({self.name!r}, {self.method.value} {self.path})"


class BoundOperation(Generic[Req, Res]):
    """An operation bound to a client."""

    def __init__(self, client: "ServiceClient", operation: Operation[Req, Res]):
        self.client = client
        self.operation = operation

    @property
    def name(self) -> str:
        return self.operation.name

    def __call__(self, request: Req = None, **kwargs) -> Outcome[Res]:
        """
        Sends the request and blocks until the outcome is available. Members can also be passed as keyword arguments.
        """
        return self.client.dispatch(self.operation, _build_request(request, kwargs))

    def future(self, request: Req = None, **kwargs) -> "Future[Outcome[Res]]":
        """
        Dispatches a copy of the request on the executor of the client and returns a future of its outcome.
        """
        request = copy.deepcopy(_build_request(request, kwargs))
        return self.client.executor.submit(self.client.dispatch, self.operation, request)

    def callback(
        self,
        request: Req,
        handler: CallbackHandler,
        context: Optional[AsyncCallerContext] = None,
    ) -> "Future[None]":
        """
        Dispatches a copy of the request on the executor of the client. Once the outcome is available, the handler is
        called on the worker thread with ``(client, request, outcome, context)``.

        :return: a future which is done after the handler returned
        """
        request = copy.deepcopy(_build_request(request, {}))
        return self.client.executor.submit(
            _dispatch_with_callback, self.client, self.operation, request, handler, context
        )

    def __repr__(self):
        return f"<bound {self.operation!r} of {self.client!r}>"


def _build_request(request: Optional[Mapping[str, Any]], kwargs: Dict[str, Any]) -> ServiceRequest:
    if request is None:
        return kwargs
    if kwargs:
        return {**request, **kwargs}
    return request


def _dispatch_with_callback(
    client: "ServiceClient",
    operation: Operation,
    request: ServiceRequest,
    handler: CallbackHandler,
    context: Optional[AsyncCallerContext],
) -> None:
    outcome = client.dispatch(operation, request)
    try:
        handler(client, request, outcome, context)
    except Exception:
        LOG.exception("Error in the completion handler of %s", operation.name)


class ServiceClient:
    """
    Base class of the generated service clients.
    """

    service: ClassVar[str]
    version: ClassVar[str]
    client_name: ClassVar[str]
    errors: ClassVar[Optional[Type[Enum]]] = None
    retryable_errors: ClassVar[Collection[Enum]] = frozenset()
    operations: ClassVar[Dict[str, Operation]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        operations = dict(cls.operations)
        for value in vars(cls).values():
            if isinstance(value, Operation):
                operations[value.name] = value
        cls.operations = operations

    def __init__(
        self,
        configuration: Optional[ClientConfiguration] = None,
        credentials: Union[Credentials, CredentialsProvider, None] = None,
        endpoint_provider: Optional[EndpointProvider] = None,
        request_executor: Optional[RequestExecutor] = None,
    ):
        """
        :param configuration: the client settings, by default created from the environment
        :param credentials: credentials, or a provider like a ``boto3.session.Session``, used to sign requests.
            By default, the credential chain of boto3 is used.
        :param endpoint_provider: resolves the endpoints, by default the endpoint rule set of the service
        :param request_executor: performs the requests, by default a ``BotocoreRequestExecutor``
        """
        self.configuration = configuration or ClientConfiguration()

        if endpoint_provider is None:
            endpoint_provider = RulesetEndpointProvider(self.service, self.version)
        endpoint_provider.init_built_in_parameters(self.configuration)
        self.endpoint_provider = endpoint_provider

        if request_executor is None:
            request_executor = BotocoreRequestExecutor(
                self.service_model,
                self.configuration,
                credentials=credentials,
                service_errors=self.errors,
                retryable_errors=self.retryable_errors,
            )
        self.request_executor = request_executor

    @property
    def service_model(self) -> ServiceModel:
        return load_service(self.service, self.version)

    @property
    def executor(self):
        return self.configuration.executor

    def override_endpoint(self, url: str) -> None:
        self.endpoint_provider.override_endpoint(url)

    def operation(self, name: str) -> BoundOperation:
        """Returns the operation with the given wire name, f.e. ``client.operation("DeleteApplication")``."""
        try:
            return BoundOperation(self, self.operations[name])
        except KeyError:
            raise ValueError(f"{self.service} has no operation {name}") from None

    def dispatch(self, operation: Operation, request: ServiceRequest) -> Outcome:
        """
        Validates the request, resolves the endpoint of the operation and sends the request through the request
        executor. Failures are returned as the error of the outcome.
        """
        if self.endpoint_provider is None:
            error = AWSError.from_kind(
                CoreErrors.ENDPOINT_RESOLUTION_FAILURE, "Unexpected nulled endpoint provider"
            )
            return Outcome.failure(error)

        if missing := operation.missing_member(request):
            LOG.error("%s: Required field: %s, is not set", operation.name, missing)
            return Outcome.failure(
                AWSError(
                    kind=CoreErrors.MISSING_PARAMETER,
                    code="MISSING_PARAMETER",
                    message=f"Missing required field [{missing}]",
                    retryable=False,
                )
            )

        try:
            context_params = self._context_params(operation, request)
            endpoint = self.endpoint_provider.resolve_endpoint(context_params)
            operation.render_path(endpoint, request)
        except EndpointResolutionError as e:
            LOG.debug("Unable to resolve the endpoint of %s: %s", operation.name, e)
            error = AWSError.from_kind(CoreErrors.ENDPOINT_RESOLUTION_FAILURE, str(e))
            return Outcome.failure(error)

        return self.request_executor.execute(
            operation.name, request, endpoint, operation.method, operation.signer
        )

    def _context_params(self, operation: Operation, request: ServiceRequest) -> Dict[str, Any]:
        try:
            operation_model = self.service_model.operation_model(operation.name)
        except OperationNotFoundError:
            return {}

        params = {param.name: param.value for param in operation_model.static_context_parameters}
        for param in operation_model.context_parameters:
            if is_set(request, param.member_name):
                params[param.name] = request[param.member_name]
        return params

    def __repr__(self):
        return f"<{type(self).__name__} {self.configuration.region}>"
