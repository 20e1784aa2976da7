import json

import pytest
from botocore.model import ServiceModel

from awsclients.aws.api.core import CoreErrors
from awsclients.aws.api.m2 import RETRYABLE_ERRORS as M2_RETRYABLE_ERRORS
from awsclients.aws.api.m2 import MainframeModernizationErrors
from awsclients.aws.api.route53 import RETRYABLE_ERRORS as ROUTE53_RETRYABLE_ERRORS
from awsclients.aws.api.route53 import Route53Errors
from awsclients.aws.client import (
    get_error_kind,
    get_protocol,
    is_retryable,
    normalize_error_code,
    parse_response,
    parse_service_error,
)
from awsclients.aws.spec import load_service


@pytest.mark.parametrize(
    "code, expected",
    [
        ("ThrottlingException", "ThrottlingException"),
        ("aws.protocoltests.restjson#ThrottlingException", "ThrottlingException"),
        (
            "aws.protocoltests.restjson#ThrottlingException:http://internal.amazon.com/coral/",
            "ThrottlingException",
        ),
        ("ConflictException:http://internal.amazon.com/", "ConflictException"),
    ],
)
def test_normalize_error_code(code, expected):
    assert normalize_error_code(code) == expected


class TestGetErrorKind:
    def test_service_error(self):
        kind = get_error_kind("ConflictException", MainframeModernizationErrors)

        assert kind == MainframeModernizationErrors.CONFLICT

    def test_service_errors_take_precedence(self):
        kind = get_error_kind("ThrottlingException", MainframeModernizationErrors)

        assert kind == MainframeModernizationErrors.THROTTLING

    def test_modeled_core_code_resolves_to_service_error(self):
        assert get_error_kind("ThrottlingException", Route53Errors) == Route53Errors.THROTTLING

    def test_core_error(self):
        assert not hasattr(Route53Errors, "ACCESS_DENIED")
        assert get_error_kind("AccessDeniedException", Route53Errors) == CoreErrors.ACCESS_DENIED
        assert get_error_kind("AccessDeniedException") == CoreErrors.ACCESS_DENIED

    def test_unknown_error(self):
        assert get_error_kind("SomethingWentWrong", Route53Errors) == CoreErrors.UNKNOWN


class TestIsRetryable:
    def test_retryable_service_error(self):
        assert is_retryable(Route53Errors.PRIOR_REQUEST_NOT_COMPLETE, 400, ROUTE53_RETRYABLE_ERRORS)
        assert not is_retryable(Route53Errors.NO_SUCH_HOSTED_ZONE, 404, ROUTE53_RETRYABLE_ERRORS)

    def test_retryable_core_error(self):
        assert is_retryable(CoreErrors.THROTTLING, 400)
        assert not is_retryable(CoreErrors.ACCESS_DENIED, 403)

    @pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504])
    def test_retryable_status_codes(self, status_code):
        assert is_retryable(CoreErrors.UNKNOWN, status_code)

    def test_local_error(self):
        assert not is_retryable(CoreErrors.UNKNOWN, None)


class TestParseServiceError:
    def test_success_response(self):
        assert parse_service_error(200, {"applications": []}) is None

    def test_modeled_error(self):
        parsed = {
            "Error": {"Code": "ConflictException", "Message": "application already exists"},
            "ResponseMetadata": {"RequestId": "req-1"},
        }

        error = parse_service_error(
            409,
            parsed,
            headers={"x-amzn-requestid": "req-1"},
            service_errors=MainframeModernizationErrors,
            retryable_errors=M2_RETRYABLE_ERRORS,
        )

        assert error.kind == MainframeModernizationErrors.CONFLICT
        assert error.code == "ConflictException"
        assert error.message == "application already exists"
        assert error.status_code == 409
        assert error.request_id == "req-1"
        assert error.headers == {"x-amzn-requestid": "req-1"}
        assert not error.retryable

    def test_retryable_modeled_error(self):
        parsed = {"Error": {"Code": "PriorRequestNotComplete", "Message": "try again later"}}

        error = parse_service_error(400, parsed, None, Route53Errors, ROUTE53_RETRYABLE_ERRORS)

        assert error.kind == Route53Errors.PRIOR_REQUEST_NOT_COMPLETE
        assert error.retryable

    def test_error_without_code(self):
        error = parse_service_error(503, {"Error": {"Code": "", "Message": ""}})

        assert error.code == "503"
        assert error.kind == CoreErrors.UNKNOWN
        assert error.retryable


def test_parse_rest_json_error_response():
    service = load_service("m2")
    operation = service.operation_model("GetApplication")
    response_dict = {
        "status_code": 404,
        "headers": {
            "x-amzn-requestid": "req-2",
            "x-amzn-errortype": "ResourceNotFoundException:http://internal.amazon.com/coral/",
        },
        "body": json.dumps(
            {
                "message": "application abc not found",
                "resourceId": "abc",
                "resourceType": "application",
            }
        ).encode(),
    }

    parsed = parse_response(operation, response_dict)
    error = parse_service_error(404, parsed, response_dict["headers"], MainframeModernizationErrors)

    assert parsed["resourceId"] == "abc"
    assert error.kind == MainframeModernizationErrors.RESOURCE_NOT_FOUND
    assert error.message == "application abc not found"
    assert error.request_id == "req-2"


def test_parse_response_without_metadata():
    service = load_service("m2")
    operation = service.operation_model("ListApplications")
    response_dict = {
        "status_code": 200,
        "headers": {"x-amzn-requestid": "req-3"},
        "body": json.dumps({"applications": []}).encode(),
    }

    parsed = parse_response(operation, response_dict, include_response_metadata=False)

    assert parsed == {"applications": []}


@pytest.mark.parametrize(
    "metadata, expected",
    [
        ({"protocol": "json"}, "json"),
        ({"protocol": "smithy-rpc-v2-cbor", "protocols": ["smithy-rpc-v2-cbor", "json"]}, "json"),
        ({"protocol": "rest-xml", "protocols": ["rest-xml"]}, "rest-xml"),
        ({"protocol": "query", "protocols": ["smithy-rpc-v2-cbor", "query", "json"]}, "query"),
    ],
)
def test_get_protocol(metadata, expected):
    service_model = ServiceModel({"metadata": metadata, "operations": {}, "shapes": {}})

    assert get_protocol(service_model) == expected


def test_parse_json_response_of_multi_protocol_service():
    service = load_service("gamelift")
    operation = service.operation_model("DescribeFleetAttributes")
    response_dict = {
        "status_code": 200,
        "headers": {"x-amzn-requestid": "req-4"},
        "body": json.dumps({"FleetAttributes": [{"FleetId": "fleet-1"}]}).encode(),
    }

    parsed = parse_response(operation, response_dict)

    assert parsed["FleetAttributes"] == [{"FleetId": "fleet-1"}]
    assert parsed["ResponseMetadata"]["RequestId"] == "req-4"
