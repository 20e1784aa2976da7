"""Utils to turn the HTTP responses of AWS services into results and errors of client operations."""
import logging
from enum import Enum
from typing import Collection, Dict, Mapping, Optional, Type

from botocore.model import OperationModel, ServiceModel
from botocore.parsers import ResponseParser, create_parser

from awsclients.aws.api.core import (
    CORE_ERROR_CODES,
    RETRYABLE_CORE_ERRORS,
    AWSError,
    CoreErrors,
    ErrorKind,
    ServiceResponse,
)

LOG = logging.getLogger(__name__)

# wire protocols with a botocore serializer and parser, in the order they are preferred
SUPPORTED_PROTOCOLS = ("json", "rest-json", "rest-xml", "query", "ec2")


def get_protocol(service_model: ServiceModel) -> str:
    """
    Returns the wire protocol used to talk to the service. Newer service models list several protocols (for example
    ``smithy-rpc-v2-cbor`` next to ``json``), the first supported one is used.
    """
    for protocol in service_model.metadata.get("protocols") or ():
        if protocol in SUPPORTED_PROTOCOLS:
            return protocol
    return service_model.protocol


def _add_modeled_error_fields(
    response_dict: Dict,
    parsed_response: Dict,
    operation_model: OperationModel,
    parser: ResponseParser,
):
    """
    Adds the members of the modeled error shape (other than message, code, and type) to an already parsed error
    response. Port of botocore's Endpoint#_add_modeled_error_fields.
    """
    error_code = parsed_response.get("Error", {}).get("Code")
    if error_code is None:
        return
    error_shape = operation_model.service_model.shape_for_error_code(error_code)
    if error_shape is None:
        return
    modeled_parse = parser.parse(response_dict, error_shape)
    parsed_response.update(modeled_parse)


def parse_response(
    operation: OperationModel, response_dict: Dict, include_response_metadata: bool = True
) -> ServiceResponse:
    """
    Parses a response dict (as created by ``botocore.endpoint.convert_to_response_dict``) into the response object of
    the operation.

    :param operation: the operation of the original request
    :param response_dict: dict with the ``status_code``, ``headers`` and ``body`` of the HTTP response
    :param include_response_metadata: True if the ResponseMetadata (typical for boto response dicts) should be included
    :return: a parsed dictionary as it is returned by botocore
    """
    parser = create_parser(get_protocol(operation.service_model))
    parsed_response = parser.parse(response_dict, operation.output_shape)

    if response_dict["status_code"] >= 301:
        _add_modeled_error_fields(response_dict, parsed_response, operation, parser)

    if not include_response_metadata:
        parsed_response.pop("ResponseMetadata", None)

    return parsed_response


def normalize_error_code(code: str) -> str:
    """
    Strips the namespace and suffix some protocols add to error codes, f.e.,
    ``aws.protocoltests.restjson#ThrottlingException:http://internal.amazon.com/`` becomes ``ThrottlingException``.
    """
    return code.rsplit("#", 1)[-1].split(":", 1)[0]


def get_error_kind(code: str, service_errors: Optional[Type[Enum]] = None) -> ErrorKind:
    """
    Looks up the kind of the given wire error code, first in the error enum of the service, then in the common errors.
    """
    if service_errors is not None:
        try:
            return service_errors(code)
        except ValueError:
            pass
    return CORE_ERROR_CODES.get(code, CoreErrors.UNKNOWN)


def is_retryable(
    kind: ErrorKind, status_code: Optional[int], retryable_errors: Collection[Enum] = ()
) -> bool:
    if kind in retryable_errors or kind in RETRYABLE_CORE_ERRORS:
        return True
    if status_code is None:
        return False
    return status_code >= 500 or status_code == 429


def parse_service_error(
    status_code: int,
    parsed_response: Dict,
    headers: Mapping[str, str] = None,
    service_errors: Optional[Type[Enum]] = None,
    retryable_errors: Collection[Enum] = (),
) -> Optional[AWSError]:
    """
    Creates an AWSError from a parsed response (one that botocore would return).

    :param status_code: the HTTP status code of the response
    :param parsed_response: the parsed response
    :param headers: the HTTP headers of the response
    :param service_errors: the error enum of the service, its values are the wire codes of the modeled errors
    :param retryable_errors: members of the service error enum which are retryable
    :return: the AWSError, or None if the response is not an error response
    """
    if status_code < 301 or "Error" not in parsed_response:
        return None

    error = parsed_response["Error"]
    code = normalize_error_code(error.get("Code") or f"{status_code}")
    kind = get_error_kind(code, service_errors)
    if kind is CoreErrors.UNKNOWN:
        LOG.debug("Unknown error code %s with status %s", code, status_code)

    request_id = parsed_response.get("ResponseMetadata", {}).get("RequestId")
    return AWSError(
        kind=kind,
        code=code,
        message=error.get("Message", ""),
        retryable=is_retryable(kind, status_code, retryable_errors),
        status_code=status_code,
        request_id=request_id,
        headers=dict(headers or {}),
    )
