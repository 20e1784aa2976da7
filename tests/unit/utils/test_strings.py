import pytest

from awsclients.utils.strings import camel_to_snake_case, to_constant_case, truncate


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ChangeResourceRecordSets", "change_resource_record_sets"),
        ("GetHostedZone", "get_hosted_zone"),
        ("ListTagsForResource", "list_tags_for_resource"),
        ("GetIPSet", "get_ip_set"),
        ("CreateVPCAssociationAuthorization", "create_vpc_association_authorization"),
        ("ListHostedZonesByVPC", "list_hosted_zones_by_vpc"),
        ("applicationId", "application_id"),
    ],
)
def test_camel_to_snake_case(value, expected):
    assert camel_to_snake_case(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("NoSuchHostedZone", "NO_SUCH_HOSTED_ZONE"),
        ("WAFInternalError", "WAF_INTERNAL_ERROR"),
        ("Throttling", "THROTTLING"),
        ("some-error.code", "SOME_ERROR_CODE"),
    ],
)
def test_to_constant_case(value, expected):
    assert to_constant_case(value) == expected


def test_truncate():
    assert truncate("short") == "short"
    assert truncate("x" * 120, max_length=10) == "x" * 10 + "..."
    assert truncate(None) == ""
