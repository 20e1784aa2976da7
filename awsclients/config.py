"""
Process-wide settings of awsclients, read once from the environment when the module is imported.

Individual clients take their settings from a ``ClientConfiguration``, which uses the values below as defaults.
"""
import logging
import os
from typing import Optional, Union

from awsclients.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_READ_TIMEOUT,
    FALSE_STRINGS,
    LOG_LEVELS,
    TRACE_LOG_LEVELS,
    TRUE_STRINGS,
)

LOG = logging.getLogger(__name__)


def eval_log_type(env_var_name: str) -> Union[str, bool]:
    """Get the log type from environment variable"""
    log_type = os.environ.get(env_var_name, "").lower().strip()
    return log_type if log_type in LOG_LEVELS else False


def parse_boolean_env(env_var_name: str) -> Optional[bool]:
    """Parse the value of the given env variable and return True/False, or None if it is not a boolean value."""
    value = os.environ.get(env_var_name, "").lower().strip()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    return None


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def is_env_not_false(env_var_name: str) -> bool:
    """Whether the given environment variable is empty or has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() not in FALSE_STRINGS


def parse_number_env(env_var_name: str, default: float, cast=float):
    """Parse a numeric env variable, falling back to the default for empty or malformed values."""
    value = os.environ.get(env_var_name, "").strip()
    if not value:
        return default
    try:
        return cast(value)
    except ValueError:
        LOG.warning("Ignoring invalid value %r of %s, using %s", value, env_var_name, default)
        return default


# log level of the awsclients loggers (trace, debug, info, warn, error)
AWSCLIENTS_LOG = eval_log_type("AWSCLIENTS_LOG")

# whether debug logging is enabled
DEBUG = is_env_true("DEBUG") or AWSCLIENTS_LOG in TRACE_LOG_LEVELS

# region of new clients, if the configuration does not define one
AWS_REGION = os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or None

# endpoint url which replaces the resolved endpoint of every client
AWS_ENDPOINT_URL = os.environ.get("AWS_ENDPOINT_URL") or None

# whether clients should resolve FIPS / dual-stack endpoints
AWS_USE_FIPS_ENDPOINT = is_env_true("AWS_USE_FIPS_ENDPOINT")
AWS_USE_DUALSTACK_ENDPOINT = is_env_true("AWS_USE_DUALSTACK_ENDPOINT")

# total number of attempts for a request (1 disables retries)
MAX_ATTEMPTS = parse_number_env("AWSCLIENTS_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS, int)

# http timeouts in seconds
CONNECT_TIMEOUT = parse_number_env("AWSCLIENTS_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
READ_TIMEOUT = parse_number_env("AWSCLIENTS_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)

# whether TLS certificates of the endpoints are verified
VERIFY_SSL = is_env_not_false("AWSCLIENTS_VERIFY_SSL")

# number of worker threads of the shared executor used for asynchronous operations
MAX_WORKERS = parse_number_env("AWSCLIENTS_MAX_WORKERS", DEFAULT_MAX_WORKERS, int)


def is_trace_logging_enabled():
    if AWSCLIENTS_LOG:
        return AWSCLIENTS_LOG.lower() in TRACE_LOG_LEVELS
    return False
