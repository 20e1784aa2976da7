"""
Endpoint resolution for service clients.

The ``Endpoint`` returned by a provider is the base URL of a single request. The client appends the path segments of
the operation to it before passing it on to the request executor.
"""
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Protocol
from urllib.parse import urlsplit

from botocore.endpoint_provider import EndpointProvider as RuleSetEngine
from botocore.exceptions import EndpointProviderError
from botocore.utils import percent_encode

from awsclients.aws.api.core import EndpointResolutionError
from awsclients.aws.spec import load_endpoint_ruleset, load_partitions

if TYPE_CHECKING:
    from awsclients.aws.configuration import ClientConfiguration

LOG = logging.getLogger(__name__)


class Endpoint:
    """
    A resolved endpoint URL, plus the signing properties the endpoint rules reported for it.
    """

    def __init__(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        signing_name: Optional[str] = None,
        signing_region: Optional[str] = None,
    ):
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise EndpointResolutionError(f"Invalid endpoint url: {url}")

        self.scheme = parts.scheme
        self.netloc = parts.netloc
        self.base_path = parts.path.rstrip("/")
        self.headers: Dict[str, str] = dict(headers or {})
        self.signing_name = signing_name
        self.signing_region = signing_region
        self.segments: List[str] = []
        self.trailing_slash = False

    def add_path_segments(self, path: str) -> None:
        """
        Appends every non-empty part of a literal path. A trailing slash of the path is kept in the rendered path.

        :param path: a literal path like ``/2013-04-01/hostedzone``
        """
        parts = [part for part in path.split("/") if part]
        self.segments.extend(parts)
        if parts:
            self.trailing_slash = path.endswith("/")

    def add_path_segment(self, value: Any) -> None:
        """
        Appends a single, request-derived path segment. The value is percent-encoded, including any ``/`` it contains.
        """
        self.segments.append(percent_encode(str(value), safe="-._~"))
        self.trailing_slash = False

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.netloc}{self.base_path}"

    @property
    def path(self) -> str:
        path = self.base_path + "".join(f"/{segment}" for segment in self.segments)
        if self.trailing_slash and self.segments:
            path += "/"
        return path or "/"

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.netloc}{self.path}"

    def __repr__(self):
        return f"Endpoint({self.url!r})"


class EndpointProvider(Protocol):
    """
    Resolves the endpoint of a client operation. Implementations are shared by all operations of a client and may be
    used concurrently, so ``resolve_endpoint`` must not modify the state of the provider.
    """

    def init_built_in_parameters(self, configuration: "ClientConfiguration") -> None:
        """Takes over the endpoint relevant settings (region, fips, dual-stack, endpoint url) of the configuration."""
        ...

    def resolve_endpoint(self, context_params: Mapping[str, Any]) -> Endpoint:
        """
        Resolves a new endpoint for a single request.

        :param context_params: operation specific endpoint parameters
        :raises EndpointResolutionError: if no endpoint can be resolved
        """
        ...

    def override_endpoint(self, url: str) -> None:
        """Replaces the endpoint of all subsequent requests with the given url."""
        ...


class RulesetEndpointProvider:
    """
    Endpoint provider which evaluates the endpoint rule set of a service using botocore's rule engine.
    """

    def __init__(
        self,
        service: str,
        version: Optional[str] = None,
        ruleset: dict = None,
        partitions: dict = None,
    ):
        self.service = service
        self.version = version
        self._ruleset = ruleset
        self._partitions = partitions
        self._engine: Optional[RuleSetEngine] = None
        self.built_in_parameters: Dict[str, Any] = {}

    @property
    def engine(self) -> RuleSetEngine:
        if self._engine is None:
            ruleset = self._ruleset or load_endpoint_ruleset(self.service, self.version)
            partitions = self._partitions or load_partitions()
            self._engine = RuleSetEngine(ruleset_data=ruleset, partition_data=partitions)
        return self._engine

    def init_built_in_parameters(self, configuration: "ClientConfiguration") -> None:
        self.built_in_parameters = {
            "Region": configuration.region,
            "UseFIPS": configuration.use_fips,
            "UseDualStack": configuration.use_dualstack,
        }
        if configuration.endpoint_override:
            self.built_in_parameters["Endpoint"] = configuration.endpoint_override

    def override_endpoint(self, url: str) -> None:
        self.built_in_parameters["Endpoint"] = url

    def resolve_endpoint(self, context_params: Mapping[str, Any]) -> Endpoint:
        params = {**self.built_in_parameters, **context_params}
        # the rule engine rejects parameters set to None
        params = {key: value for key, value in params.items() if value is not None}

        try:
            resolved = self.engine.resolve_endpoint(**params)
        except EndpointProviderError as e:
            raise EndpointResolutionError(str(e)) from e

        signing_name, signing_region = _get_sigv4_properties(resolved.properties)
        headers = {key: ",".join(values) for key, values in (resolved.headers or {}).items()}
        LOG.debug("Resolved endpoint %s of %s for %s", resolved.url, self.service, params)
        return Endpoint(
            resolved.url,
            headers=headers,
            signing_name=signing_name,
            signing_region=signing_region,
        )


def _get_sigv4_properties(properties: Optional[dict]):
    for auth_scheme in (properties or {}).get("authSchemes") or []:
        if auth_scheme.get("name") == "sigv4":
            return auth_scheme.get("signingName"), auth_scheme.get("signingRegion")
    return None, None


class StaticEndpointProvider:
    """
    Endpoint provider which always returns the same URL, f.e., the one of a locally running emulator.
    """

    def __init__(self, url: str, signing_region: Optional[str] = None):
        self.url = url
        self.signing_region = signing_region

    def init_built_in_parameters(self, configuration: "ClientConfiguration") -> None:
        if configuration.endpoint_override:
            self.url = configuration.endpoint_override
        self.signing_region = self.signing_region or configuration.region

    def override_endpoint(self, url: str) -> None:
        self.url = url

    def resolve_endpoint(self, context_params: Mapping[str, Any]) -> Endpoint:
        return Endpoint(self.url, signing_region=self.signing_region)
