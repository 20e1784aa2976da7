from awsclients.aws.spec import PatchingLoader, load_endpoint_ruleset, load_partitions, load_service


def test_patch_marks_prior_request_not_complete_as_retryable():
    service = load_service("route53")

    shape = service.shape_for("PriorRequestNotComplete")

    assert shape.metadata["retryable"] == {"throttling": True}


def test_load_service_is_cached():
    assert load_service("waf") is load_service("waf")
    assert load_service("waf").api_version == "2015-08-24"


def test_load_endpoint_ruleset():
    ruleset = load_endpoint_ruleset("gamelift")

    assert "Region" in ruleset["parameters"]
    assert ruleset["rules"]


def test_load_partitions():
    partitions = load_partitions()

    assert "aws" in [partition["id"] for partition in partitions["partitions"]]


def test_patching_loader():
    patches = {
        "waf/2015-08-24/service-2": [
            {"op": "add", "path": "/metadata/serviceAbbreviation", "value": "Patched WAF"},
        ]
    }
    loader = PatchingLoader(patches)

    description = loader.load_service_model("waf", "service-2", "2015-08-24")

    assert description["metadata"]["serviceAbbreviation"] == "Patched WAF"
