import dataclasses
import logging
from concurrent.futures import Executor
from typing import Dict, Optional

from boto3.session import Session

from awsclients import config
from awsclients.constants import (
    AWS_GLOBAL_REGION,
    DEFAULT_MAX_POOL_CONNECTIONS,
    DEFAULT_REGION,
    FIPS_AWS_GLOBAL_REGION,
    FIPS_PREFIX,
    FIPS_SUFFIX,
    USER_AGENT_NAME,
    VERSION,
)
from awsclients.utils.executor import get_default_executor

LOG = logging.getLogger(__name__)


def _default_region() -> str:
    if config.AWS_REGION:
        return config.AWS_REGION
    # shared config files (~/.aws/config) and the AWS_DEFAULT_REGION of the boto3 session
    if region := Session().region_name:
        return region
    return DEFAULT_REGION


@dataclasses.dataclass
class ClientConfiguration:
    """
    Settings of a service client. The configuration is read by the client and its collaborators when they are created,
    and treated as read-only afterwards.
    """

    region: Optional[str] = None
    endpoint_override: Optional[str] = dataclasses.field(
        default_factory=lambda: config.AWS_ENDPOINT_URL
    )
    use_fips: bool = dataclasses.field(default_factory=lambda: config.AWS_USE_FIPS_ENDPOINT)
    use_dualstack: bool = dataclasses.field(
        default_factory=lambda: config.AWS_USE_DUALSTACK_ENDPOINT
    )
    max_attempts: int = dataclasses.field(default_factory=lambda: config.MAX_ATTEMPTS)
    connect_timeout: float = dataclasses.field(default_factory=lambda: config.CONNECT_TIMEOUT)
    read_timeout: float = dataclasses.field(default_factory=lambda: config.READ_TIMEOUT)
    verify_ssl: bool = dataclasses.field(default_factory=lambda: config.VERIFY_SSL)
    proxies: Optional[Dict[str, str]] = None
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS
    user_agent: str = f"{USER_AGENT_NAME}/{VERSION}"
    executor: Optional[Executor] = None

    def __post_init__(self):
        if not self.region:
            self.region = _default_region()
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.executor is None:
            self.executor = get_default_executor()

    @property
    def signer_region(self) -> str:
        return compute_signer_region(self.region)


def compute_signer_region(region: str) -> str:
    """
    Returns the region requests are signed for. Pseudo regions like ``aws-global`` or ``us-west-2-fips`` sign for the
    region they stand for.

    >>> compute_signer_region("fips-us-gov-west-1")
    'us-gov-west-1'
    """
    if region in (AWS_GLOBAL_REGION, FIPS_AWS_GLOBAL_REGION):
        return DEFAULT_REGION
    if region.startswith(FIPS_PREFIX):
        return region[len(FIPS_PREFIX) :]
    if region.endswith(FIPS_SUFFIX):
        return region[: -len(FIPS_SUFFIX)]
    return region
