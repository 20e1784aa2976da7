import pytest

from awsclients import config
from awsclients.aws.configuration import ClientConfiguration, compute_signer_region


@pytest.mark.parametrize(
    "region, signer_region",
    [
        ("eu-west-1", "eu-west-1"),
        ("aws-global", "us-east-1"),
        ("fips-aws-global", "us-east-1"),
        ("fips-us-gov-west-1", "us-gov-west-1"),
        ("us-west-2-fips", "us-west-2"),
    ],
)
def test_compute_signer_region(region, signer_region):
    assert compute_signer_region(region) == signer_region
    assert ClientConfiguration(region=region).signer_region == signer_region


def test_defaults(monkeypatch):
    monkeypatch.setattr(config, "AWS_ENDPOINT_URL", None)
    configuration = ClientConfiguration(region="eu-central-1")

    assert configuration.region == "eu-central-1"
    assert configuration.endpoint_override is None
    assert configuration.max_attempts == config.MAX_ATTEMPTS
    assert configuration.user_agent.startswith("awsclients/")
    assert configuration.executor is not None


def test_region_from_config(monkeypatch):
    monkeypatch.setattr(config, "AWS_REGION", "ap-southeast-2")

    assert ClientConfiguration().region == "ap-southeast-2"


def test_region_from_boto_session(monkeypatch):
    monkeypatch.setattr(config, "AWS_REGION", None)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "sa-east-1")

    assert ClientConfiguration().region == "sa-east-1"


def test_endpoint_override_from_config(monkeypatch):
    monkeypatch.setattr(config, "AWS_ENDPOINT_URL", "http://localhost:4566")

    assert ClientConfiguration().endpoint_override == "http://localhost:4566"


def test_invalid_max_attempts():
    with pytest.raises(ValueError):
        ClientConfiguration(max_attempts=0)
