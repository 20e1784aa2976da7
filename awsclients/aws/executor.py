"""
Request executors perform the HTTP round trip of a client operation: serialization, signing, sending, retrying and
parsing the response into an ``Outcome``.
"""
import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Type, Union

from boto3.session import Session
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest, create_request_object, prepare_request_dict
from botocore.credentials import Credentials
from botocore.exceptions import (
    BotoCoreError,
    ConnectionError as BotocoreConnectionError,
    ConnectTimeoutError,
    HTTPClientError,
    NoCredentialsError,
    ParamValidationError,
    ReadTimeoutError,
)
from botocore.httpsession import URLLib3Session
from botocore.model import OperationModel, ServiceModel
from botocore.parsers import ResponseParserError
from botocore.retries.standard import RetryContext
from botocore.serialize import create_serializer

from awsclients import config
from awsclients.aws.api.core import (
    AWSError,
    CoreErrors,
    HttpMethod,
    Outcome,
    ServiceRequest,
    SignerType,
)
from awsclients.aws.client import (
    get_protocol,
    is_retryable,
    parse_response,
    parse_service_error,
)
from awsclients.aws.configuration import ClientConfiguration
from awsclients.aws.endpoints import Endpoint
from awsclients.aws.retry import ERROR_CONTEXT_KEY, RetryStrategy
from awsclients.utils.strings import truncate

LOG = logging.getLogger(__name__)
LOG_REQUEST = logging.getLogger("awsclients.request")


class CredentialsProvider(Protocol):
    def get_credentials(self) -> Optional[Credentials]:
        ...


class RequestExecutor(Protocol):
    """
    Performs a single client operation against a resolved endpoint. Implementations never raise for transport or
    service errors, these are returned as the error of the outcome.
    """

    def execute(
        self,
        operation_name: str,
        request: ServiceRequest,
        endpoint: Endpoint,
        method: HttpMethod,
        signer: SignerType,
    ) -> Outcome:
        ...


class BotocoreRequestExecutor:
    """
    Request executor built from botocore's serializers, signer, HTTP session and parsers.
    """

    def __init__(
        self,
        service_model: ServiceModel,
        configuration: ClientConfiguration,
        credentials: Union[Credentials, CredentialsProvider, None] = None,
        service_errors: Optional[Type[Enum]] = None,
        retryable_errors=(),
        retry_strategy: RetryStrategy = None,
        http_session: URLLib3Session = None,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        self.service_model = service_model
        self.configuration = configuration
        self.service_errors = service_errors
        self.retryable_errors = retryable_errors
        self.retry_strategy = retry_strategy or RetryStrategy(
            max_attempts=configuration.max_attempts
        )
        self.http_session = http_session or URLLib3Session(
            verify=configuration.verify_ssl,
            proxies=configuration.proxies,
            timeout=(configuration.connect_timeout, configuration.read_timeout),
            max_pool_connections=configuration.max_pool_connections,
        )
        self._credentials = credentials
        self._resolved_credentials: Optional[Credentials] = None
        self._credentials_lock = threading.Lock()
        self._serializer = create_serializer(get_protocol(service_model), include_validation=False)
        self._sleep = sleep

    def get_credentials(self) -> Credentials:
        """
        Resolves the credentials once, either from the given provider or from the default boto3 credential chain.
        Refreshable credentials renew themselves when they are frozen for signing.

        :raises NoCredentialsError: if no credentials could be found
        :raises BotoCoreError: if the credential chain or the profile configuration is broken
        """
        with self._credentials_lock:
            if self._resolved_credentials is not None:
                return self._resolved_credentials

            credentials = self._credentials
            if credentials is None:
                credentials = Session().get_credentials()
            elif not isinstance(credentials, Credentials):
                credentials = credentials.get_credentials()

            if credentials is None:
                raise NoCredentialsError()
            self._resolved_credentials = credentials
            return credentials

    def execute(
        self,
        operation_name: str,
        request: ServiceRequest,
        endpoint: Endpoint,
        method: HttpMethod,
        signer: SignerType,
    ) -> Outcome:
        operation = self.service_model.operation_model(operation_name)

        attempt_number = 1
        while True:
            context = RetryContext(attempt_number=attempt_number, operation_model=operation)
            outcome = self._attempt(operation, request, endpoint, method, signer, context)
            if outcome.is_success:
                return outcome

            context.request_context[ERROR_CONTEXT_KEY] = outcome.error
            if not self.retry_strategy.should_retry(context):
                return outcome

            delay = self.retry_strategy.delay(context)
            LOG.debug(
                "Retrying %s.%s after %s (attempt %d, delay %.3fs)",
                self.service_model.service_name,
                operation_name,
                outcome.error.code,
                attempt_number,
                delay,
            )
            if delay > 0:
                self._sleep(delay)
            attempt_number += 1

    def _attempt(
        self,
        operation: OperationModel,
        request: ServiceRequest,
        endpoint: Endpoint,
        method: HttpMethod,
        signer: SignerType,
        context: RetryContext,
    ) -> Outcome:
        """
        Performs a single attempt. The HTTP response, the parsed response, or the caught exception are stored in the
        retry context to decide about the next attempt.
        """
        try:
            aws_request = self._create_request(operation, request, endpoint, method)
        except (ParamValidationError, ValueError, TypeError) as e:
            return Outcome.failure(AWSError.from_kind(CoreErrors.INVALID_PARAMETER_VALUE, str(e)))

        if signer is not SignerType.NULL:
            try:
                self._sign(aws_request, endpoint)
            except NoCredentialsError as e:
                context.caught_exception = e
                error = AWSError.from_kind(CoreErrors.MISSING_AUTHENTICATION_TOKEN, str(e))
                return Outcome.failure(error)
            except BotoCoreError as e:
                # f.e. an expired sso token or an unknown profile
                context.caught_exception = e
                error = AWSError.from_kind(
                    CoreErrors.INVALID_CLIENT_TOKEN_ID,
                    f"Unable to resolve credentials: {e}",
                    retryable=False,
                )
                return Outcome.failure(error)

        try:
            _log_request(operation, aws_request)
            http_response = self.http_session.send(aws_request.prepare())
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            context.caught_exception = e
            return Outcome.failure(AWSError.from_kind(CoreErrors.REQUEST_TIMEOUT, str(e)))
        except (BotocoreConnectionError, HTTPClientError) as e:
            context.caught_exception = e
            return Outcome.failure(AWSError.from_kind(CoreErrors.NETWORK_CONNECTION, str(e)))
        except BotoCoreError as e:
            context.caught_exception = e
            error = AWSError.from_kind(CoreErrors.UNKNOWN, str(e), retryable=False)
            return Outcome.failure(error)

        context.http_response = http_response
        response_dict = {
            "headers": http_response.headers,
            "status_code": http_response.status_code,
            "body": http_response.content,
            "context": {"operation_name": operation.name},
        }
        _log_response(operation, response_dict)
        try:
            parsed = parse_response(operation, response_dict)
        except ResponseParserError as e:
            status_code = http_response.status_code
            return Outcome.failure(
                AWSError(
                    kind=CoreErrors.UNKNOWN,
                    code=CoreErrors.UNKNOWN.value,
                    message=f"Unable to parse response: {e}",
                    retryable=is_retryable(CoreErrors.UNKNOWN, status_code),
                    status_code=status_code,
                    headers=dict(http_response.headers),
                )
            )

        context.parsed_response = parsed
        if error := parse_service_error(
            http_response.status_code,
            parsed,
            headers=http_response.headers,
            service_errors=self.service_errors,
            retryable_errors=self.retryable_errors,
        ):
            return Outcome.failure(error)

        return Outcome.success(parsed)

    def _create_request(
        self,
        operation: OperationModel,
        request: ServiceRequest,
        endpoint: Endpoint,
        method: HttpMethod,
    ) -> AWSRequest:
        params = {key: value for key, value in request.items() if value is not None}
        request_dict: Dict[str, Any] = self._serializer.serialize_to_request(params, operation)
        # the client computed the path from the same members the serializer used to render the uri template
        request_dict["url_path"] = endpoint.path
        request_dict["method"] = method.value
        request_dict["headers"].update(endpoint.headers)

        prepare_request_dict(
            request_dict,
            endpoint_url=f"{endpoint.scheme}://{endpoint.netloc}",
            user_agent=self.configuration.user_agent,
            context={"operation_name": operation.name},
        )
        return create_request_object(request_dict)

    def _sign(self, aws_request: AWSRequest, endpoint: Endpoint) -> None:
        credentials = self.get_credentials().get_frozen_credentials()
        signing_name = endpoint.signing_name or self.service_model.signing_name
        signing_region = endpoint.signing_region or self.configuration.signer_region
        SigV4Auth(credentials, signing_name, signing_region).add_auth(aws_request)


def _log_request(operation: OperationModel, request: AWSRequest) -> None:
    if not config.is_trace_logging_enabled():
        return
    LOG_REQUEST.debug(
        "%s %s => %s %s headers=%s body=%s",
        operation.service_model.service_name,
        operation.name,
        request.method,
        request.url,
        dict(request.headers),
        truncate(request.data, 1000),
    )


def _log_response(operation: OperationModel, response_dict: Mapping[str, Any]) -> None:
    if not config.is_trace_logging_enabled():
        return
    LOG_REQUEST.debug(
        "%s %s <= %s headers=%s body=%s",
        operation.service_model.service_name,
        operation.name,
        response_dict["status_code"],
        dict(response_dict["headers"]),
        truncate(response_dict["body"], 1000),
    )
