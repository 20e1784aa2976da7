from awsclients.aws.api.core import (
    AsyncCallerContext,
    AWSError,
    CoreErrors,
    EndpointResolutionError,
    HttpMethod,
    OperationError,
    Outcome,
    ServiceRequest,
    ServiceResponse,
    SignerType,
)

__all__ = [
    "AsyncCallerContext",
    "AWSError",
    "CoreErrors",
    "EndpointResolutionError",
    "HttpMethod",
    "OperationError",
    "Outcome",
    "ServiceRequest",
    "ServiceResponse",
    "SignerType",
]
