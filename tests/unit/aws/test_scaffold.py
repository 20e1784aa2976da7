import pytest
from botocore.model import ServiceModel
from click.testing import CliRunner

from awsclients.aws.api.clouddirectory import CloudDirectoryClient
from awsclients.aws.api.gamelift import GameLiftClient
from awsclients.aws.api.m2 import MainframeModernizationClient
from awsclients.aws.api.route53 import Route53Client
from awsclients.aws.api.waf import WAFClient
from awsclients.aws.scaffold import (
    generate,
    generate_code,
    get_client_prefix,
    get_error_code,
    get_path_template,
    get_required_members,
    to_valid_python_name,
)
from awsclients.aws.spec import load_service

GENERATED_CLIENTS = [
    ("clouddirectory", CloudDirectoryClient),
    ("gamelift", GameLiftClient),
    ("m2", MainframeModernizationClient),
    ("route53", Route53Client),
    ("waf", WAFClient),
]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Route53", "Route53"),
        ("Optional", "Optional_"),
        ("type", "type_"),
        ("1stValue", "i_1stValue"),
        ("Some-Name.V2", "Some_Name_V2"),
    ],
)
def test_to_valid_python_name(name, expected):
    assert to_valid_python_name(name) == expected


def test_get_client_prefix():
    assert get_client_prefix(load_service("route53")) == "Route53"
    assert get_client_prefix(load_service("m2")) == "MainframeModernization"
    assert get_client_prefix(load_service("clouddirectory")) == "CloudDirectory"


def test_get_error_code():
    model = ServiceModel(
        {
            "metadata": {"protocol": "query", "apiVersion": "2010-01-01"},
            "operations": {},
            "shapes": {
                "Plain": {"type": "structure", "members": {}, "exception": True},
                "Custom": {
                    "type": "structure",
                    "members": {},
                    "exception": True,
                    "error": {"code": "CustomCode", "httpStatusCode": 400},
                },
            },
        }
    )

    assert get_error_code(model.shape_for("Plain")) == "Plain"
    assert get_error_code(model.shape_for("Custom")) == "CustomCode"


def test_get_path_template():
    route53 = load_service("route53")
    m2 = load_service("m2")

    assert (
        get_path_template(route53.operation_model("ChangeResourceRecordSets"))
        == "/2013-04-01/hostedzone/{HostedZoneId}/rrset/"
    )
    assert (
        get_path_template(m2.operation_model("GetBatchJobExecution"))
        == "/applications/{applicationId}/batch-job-executions/{executionId}"
    )


def test_get_required_members():
    route53 = load_service("route53")

    # the change batch is a required member of the payload
    operation = route53.operation_model("ChangeResourceRecordSets")
    assert get_required_members(operation) == ["HostedZoneId"]
    assert get_required_members(route53.operation_model("ListHostedZones")) == []


@pytest.mark.parametrize("service, client_class", GENERATED_CLIENTS)
def test_generated_code_defines_client(service, client_class):
    code = generate_code(service)
    namespace = {}

    exec(compile(code, f"<{service}>", "exec"), namespace)

    generated = namespace[client_class.__name__]
    assert generated.service == client_class.service
    assert generated.version == client_class.version
    # newer service models may add operations, but never remove existing ones
    assert set(client_class.operations).issubset(generated.operations)
    assert set(client_class.errors.__members__).issubset(generated.errors.__members__)


def test_generated_operation_matches_committed_client():
    code = generate_code("route53")
    namespace = {}
    exec(compile(code, "<route53>", "exec"), namespace)

    generated = namespace["Route53Client"].operations["ChangeResourceRecordSets"]
    committed = Route53Client.operations["ChangeResourceRecordSets"]

    assert generated.method == committed.method
    assert generated.path == committed.path
    assert generated.required == committed.required


def test_generate_cli_prints_module():
    runner = CliRunner()

    result = runner.invoke(generate, ["m2", "--print"])

    assert result.exit_code == 0
    assert "class MainframeModernizationClient(ServiceClient):" in result.output
    assert 'service = "m2"' in result.output


def test_generate_cli_saves_module(tmp_path):
    runner = CliRunner()

    result = runner.invoke(generate, ["waf", "--save", "--path", str(tmp_path)])

    assert result.exit_code == 0
    assert "class WAFClient(ServiceClient):" in (tmp_path / "waf" / "__init__.py").read_text()


def test_generate_cli_unknown_service():
    runner = CliRunner()

    result = runner.invoke(generate, ["does-not-exist", "--print"])

    assert result.exit_code != 0
    assert "unknown service does-not-exist" in result.output
