import pytest

from awsclients.aws.api.core import EndpointResolutionError
from awsclients.aws.configuration import ClientConfiguration
from awsclients.aws.endpoints import Endpoint, RulesetEndpointProvider, StaticEndpointProvider


class TestEndpoint:
    def test_empty_path(self):
        endpoint = Endpoint("https://m2.us-east-1.amazonaws.com")

        assert endpoint.path == "/"
        assert endpoint.url == "https://m2.us-east-1.amazonaws.com/"

    def test_add_path_segments(self):
        endpoint = Endpoint("https://route53.amazonaws.com")

        endpoint.add_path_segments("/2013-04-01/hostedzone/")
        endpoint.add_path_segment("Z123")
        endpoint.add_path_segments("/rrset/")

        assert endpoint.segments == ["2013-04-01", "hostedzone", "Z123", "rrset"]
        assert endpoint.path == "/2013-04-01/hostedzone/Z123/rrset/"

    def test_trailing_slash_only_after_last_literal(self):
        endpoint = Endpoint("https://route53.amazonaws.com")

        endpoint.add_path_segments("/2013-04-01/hostedzone/")
        endpoint.add_path_segment("Z123")

        assert endpoint.path == "/2013-04-01/hostedzone/Z123"

    def test_path_segment_is_encoded(self):
        endpoint = Endpoint("https://clouddirectory.us-east-1.amazonaws.com")

        endpoint.add_path_segment("arn:aws:clouddirectory:us-east-1:000000000000:directory/d 1")

        assert endpoint.path == (
            "/arn%3Aaws%3Aclouddirectory%3Aus-east-1%3A000000000000%3Adirectory%2Fd%201"
        )

    def test_base_path_is_kept(self):
        endpoint = Endpoint("http://localhost:4566/custom/")

        endpoint.add_path_segments("/applications")

        assert endpoint.base_url == "http://localhost:4566/custom"
        assert endpoint.url == "http://localhost:4566/custom/applications"

    def test_invalid_url(self):
        with pytest.raises(EndpointResolutionError):
            Endpoint("not-a-url")


class TestStaticEndpointProvider:
    def test_resolve(self):
        provider = StaticEndpointProvider("http://localhost:4566")
        configuration = ClientConfiguration(region="eu-west-1", endpoint_override=None)
        provider.init_built_in_parameters(configuration)

        endpoint = provider.resolve_endpoint({})

        assert endpoint.url == "http://localhost:4566/"
        assert endpoint.signing_region == "eu-west-1"

    def test_configured_endpoint_wins(self):
        provider = StaticEndpointProvider("http://localhost:4566")
        provider.init_built_in_parameters(
            ClientConfiguration(region="eu-west-1", endpoint_override="http://localhost:1234")
        )

        assert provider.resolve_endpoint({}).base_url == "http://localhost:1234"

        provider.override_endpoint("http://localhost:5678")
        assert provider.resolve_endpoint({}).base_url == "http://localhost:5678"


class TestRulesetEndpointProvider:
    def _provider(self, service, version, **config) -> RulesetEndpointProvider:
        config.setdefault("region", "us-east-1")
        config.setdefault("endpoint_override", None)
        config.setdefault("use_fips", False)
        config.setdefault("use_dualstack", False)
        provider = RulesetEndpointProvider(service, version)
        provider.init_built_in_parameters(ClientConfiguration(**config))
        return provider

    def test_regional_endpoint(self):
        provider = self._provider("m2", "2021-04-28", region="eu-west-1")

        endpoint = provider.resolve_endpoint({})

        assert endpoint.url == "https://m2.eu-west-1.amazonaws.com/"

    def test_fips_endpoint(self):
        provider = self._provider("m2", "2021-04-28", region="us-east-1", use_fips=True)

        assert provider.resolve_endpoint({}).base_url == "https://m2-fips.us-east-1.amazonaws.com"

    def test_global_endpoint_reports_signing_region(self):
        provider = self._provider("route53", "2013-04-01", region="eu-central-1")

        endpoint = provider.resolve_endpoint({})

        assert endpoint.base_url == "https://route53.amazonaws.com"
        assert endpoint.signing_region == "us-east-1"

    def test_auth_scheme_properties(self):
        ruleset = {
            "version": "1.0",
            "parameters": {
                "Region": {"builtIn": "AWS::Region", "required": False, "type": "String"},
            },
            "rules": [
                {
                    "conditions": [],
                    "endpoint": {
                        "url": "https://directory.{Region}.example.com",
                        "properties": {
                            "authSchemes": [
                                {
                                    "name": "sigv4",
                                    "signingName": "clouddirectory",
                                    "signingRegion": "{Region}",
                                }
                            ]
                        },
                        "headers": {"x-custom": ["a", "b"]},
                    },
                    "type": "endpoint",
                }
            ],
        }
        provider = RulesetEndpointProvider("clouddirectory", ruleset=ruleset)
        provider.init_built_in_parameters(
            ClientConfiguration(
                region="eu-west-1", endpoint_override=None, use_fips=False, use_dualstack=False
            )
        )

        endpoint = provider.resolve_endpoint({})

        assert endpoint.base_url == "https://directory.eu-west-1.example.com"
        assert endpoint.signing_name == "clouddirectory"
        assert endpoint.signing_region == "eu-west-1"
        assert endpoint.headers == {"x-custom": "a,b"}

    def test_endpoint_override(self):
        provider = self._provider("waf", "2015-08-24", endpoint_override="http://localhost:4566")

        assert provider.resolve_endpoint({}).base_url == "http://localhost:4566"

        provider.override_endpoint("http://localhost:1234")
        assert provider.resolve_endpoint({}).base_url == "http://localhost:1234"

    def test_invalid_configuration(self):
        provider = self._provider(
            "m2", "2021-04-28", use_fips=True, endpoint_override="http://localhost:4566"
        )

        with pytest.raises(EndpointResolutionError) as e:
            provider.resolve_endpoint({})

        e.match("FIPS and custom endpoint are not supported")
