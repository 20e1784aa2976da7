import dataclasses
import uuid
from enum import Enum
from typing import Any, Dict, Generic, Mapping, Optional, TypedDict, TypeVar, Union


class ServiceRequest(TypedDict, total=False):
    """
    Base of all request shapes. A member counts as set if its key is present and its value is not ``None``.
    """

    pass


ServiceResponse = Any

R = TypeVar("R")


def is_set(request: Mapping[str, Any], member: str) -> bool:
    return request.get(member) is not None


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"


class SignerType(str, Enum):
    SIGV4 = "v4"
    NULL = "none"


class CoreErrors(str, Enum):
    """Error kinds shared by all services. The values are the canonical wire codes."""

    INCOMPLETE_SIGNATURE = "IncompleteSignature"
    INTERNAL_FAILURE = "InternalFailure"
    INVALID_ACTION = "InvalidAction"
    INVALID_CLIENT_TOKEN_ID = "InvalidClientTokenId"
    INVALID_PARAMETER_COMBINATION = "InvalidParameterCombination"
    INVALID_PARAMETER_VALUE = "InvalidParameterValue"
    INVALID_QUERY_PARAMETER = "InvalidQueryParameter"
    MALFORMED_QUERY_STRING = "MalformedQueryString"
    MISSING_ACTION = "MissingAction"
    MISSING_AUTHENTICATION_TOKEN = "MissingAuthenticationToken"
    MISSING_PARAMETER = "MissingParameter"
    OPT_IN_REQUIRED = "OptInRequired"
    REQUEST_EXPIRED = "RequestExpired"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    THROTTLING = "Throttling"
    VALIDATION = "Validation"
    ACCESS_DENIED = "AccessDenied"
    RESOURCE_NOT_FOUND = "ResourceNotFound"
    UNRECOGNIZED_CLIENT = "UnrecognizedClient"
    SLOW_DOWN = "SlowDown"
    REQUEST_TIME_TOO_SKEWED = "RequestTimeTooSkewed"
    INVALID_SIGNATURE = "InvalidSignature"
    SIGNATURE_DOES_NOT_MATCH = "SignatureDoesNotMatch"
    INVALID_ACCESS_KEY_ID = "InvalidAccessKeyId"
    REQUEST_TIMEOUT = "RequestTimeout"
    NETWORK_CONNECTION = "NetworkConnection"
    ENDPOINT_RESOLUTION_FAILURE = "EndpointResolutionFailure"
    UNKNOWN = "Unknown"


RETRYABLE_CORE_ERRORS = frozenset(
    {
        CoreErrors.INTERNAL_FAILURE,
        CoreErrors.SERVICE_UNAVAILABLE,
        CoreErrors.THROTTLING,
        CoreErrors.SLOW_DOWN,
        CoreErrors.REQUEST_TIME_TOO_SKEWED,
        CoreErrors.REQUEST_EXPIRED,
        CoreErrors.REQUEST_TIMEOUT,
        CoreErrors.NETWORK_CONNECTION,
    }
)

# wire codes of the common errors, including the variants some protocols append "Exception" or "Error" to
CORE_ERROR_CODES: Dict[str, CoreErrors] = {
    **{error.value: error for error in CoreErrors},
    "IncompleteSignatureException": CoreErrors.INCOMPLETE_SIGNATURE,
    "InternalFailureException": CoreErrors.INTERNAL_FAILURE,
    "InternalServerError": CoreErrors.INTERNAL_FAILURE,
    "InternalError": CoreErrors.INTERNAL_FAILURE,
    "InvalidActionException": CoreErrors.INVALID_ACTION,
    "InvalidClientTokenIdException": CoreErrors.INVALID_CLIENT_TOKEN_ID,
    "InvalidParameterCombinationException": CoreErrors.INVALID_PARAMETER_COMBINATION,
    "InvalidParameterValueException": CoreErrors.INVALID_PARAMETER_VALUE,
    "InvalidQueryParameterException": CoreErrors.INVALID_QUERY_PARAMETER,
    "MalformedQueryStringException": CoreErrors.MALFORMED_QUERY_STRING,
    "MissingActionException": CoreErrors.MISSING_ACTION,
    "MissingAuthenticationTokenException": CoreErrors.MISSING_AUTHENTICATION_TOKEN,
    "MissingParameterException": CoreErrors.MISSING_PARAMETER,
    "OptInRequiredException": CoreErrors.OPT_IN_REQUIRED,
    "RequestExpiredException": CoreErrors.REQUEST_EXPIRED,
    "ServiceUnavailableException": CoreErrors.SERVICE_UNAVAILABLE,
    "ServiceUnavailableError": CoreErrors.SERVICE_UNAVAILABLE,
    "ThrottlingException": CoreErrors.THROTTLING,
    "ThrottledException": CoreErrors.THROTTLING,
    "TooManyRequestsException": CoreErrors.THROTTLING,
    "RequestLimitExceeded": CoreErrors.THROTTLING,
    "ValidationError": CoreErrors.VALIDATION,
    "ValidationException": CoreErrors.VALIDATION,
    "AccessDeniedException": CoreErrors.ACCESS_DENIED,
    "ResourceNotFoundException": CoreErrors.RESOURCE_NOT_FOUND,
    "UnrecognizedClientException": CoreErrors.UNRECOGNIZED_CLIENT,
    "SlowDownException": CoreErrors.SLOW_DOWN,
    "RequestTimeTooSkewedException": CoreErrors.REQUEST_TIME_TOO_SKEWED,
    "InvalidSignatureException": CoreErrors.INVALID_SIGNATURE,
    "SignatureDoesNotMatchException": CoreErrors.SIGNATURE_DOES_NOT_MATCH,
    "InvalidAccessKeyIdException": CoreErrors.INVALID_ACCESS_KEY_ID,
    "RequestTimeoutException": CoreErrors.REQUEST_TIMEOUT,
    "PriorRequestNotComplete": CoreErrors.THROTTLING,
}


ErrorKind = Union[CoreErrors, Enum]


@dataclasses.dataclass(frozen=True)
class AWSError:
    """
    An error returned by an operation. ``kind`` is either one of the ``CoreErrors`` or a member of the error enum of the
    service which returned it, ``code`` the error code as it was sent on the wire (or created locally).
    """

    kind: ErrorKind
    code: str
    message: str
    retryable: bool = False
    status_code: Optional[int] = None
    request_id: Optional[str] = None
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict, compare=False)

    @classmethod
    def from_kind(cls, kind: CoreErrors, message: str, **kwargs) -> "AWSError":
        """Creates an error of a core kind with the wire code and retryability of that kind."""
        kwargs.setdefault("retryable", kind in RETRYABLE_CORE_ERRORS)
        return cls(kind=kind, code=kind.value, message=message, **kwargs)

    def __str__(self):
        return f"{self.code}: {self.message}"


@dataclasses.dataclass(frozen=True)
class Outcome(Generic[R]):
    """The result of an operation: either the parsed response, or an ``AWSError``."""

    result: Optional[R] = None
    error: Optional[AWSError] = None

    def __post_init__(self):
        if self.error is not None and self.result is not None:
            raise ValueError("an outcome holds either a result or an error")

    @classmethod
    def success(cls, result: R) -> "Outcome[R]":
        return cls(result=result)

    @classmethod
    def failure(cls, error: AWSError) -> "Outcome[R]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def __bool__(self):
        return self.is_success

    def unwrap(self) -> R:
        """Returns the result, or raises ``OperationError`` if the outcome is an error."""
        if self.error is not None:
            raise OperationError(self.error)
        return self.result


class OperationError(Exception):
    """Raised by ``Outcome.unwrap`` for a failed outcome."""

    def __init__(self, error: AWSError):
        self.error = error
        super().__init__(str(error))


class EndpointResolutionError(Exception):
    """Raised by endpoint providers if no endpoint can be resolved for the given parameters."""

    pass


@dataclasses.dataclass(frozen=True)
class AsyncCallerContext:
    """Opaque value passed through to the handler of a callback dispatch, to correlate completions with calls."""

    uuid: str = dataclasses.field(default_factory=lambda: str(uuid.uuid4()))
    data: Any = dataclasses.field(default=None, compare=False)
