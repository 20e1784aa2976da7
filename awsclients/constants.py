import awsclients

# awsclients version
VERSION = awsclients.__version__

# name used in the User-Agent header of outgoing requests
USER_AGENT_NAME = "awsclients"

# region used when neither the configuration, the environment nor the boto3 session define one
AWS_REGION_US_EAST_1 = "us-east-1"
DEFAULT_REGION = AWS_REGION_US_EAST_1

# pseudo regions which sign requests for a real region
AWS_GLOBAL_REGION = "aws-global"
FIPS_AWS_GLOBAL_REGION = "fips-aws-global"
FIPS_PREFIX = "fips-"
FIPS_SUFFIX = "-fips"

# model type names as used by the botocore loader
SERVICE_MODEL_TYPE = "service-2"
ENDPOINT_RULESET_MODEL_TYPE = "endpoint-rule-set-1"
PARTITIONS_DATA = "partitions"

# defaults of the client configuration (timeouts are in seconds)
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_CONNECT_TIMEOUT = 1.0
DEFAULT_READ_TIMEOUT = 3.0
DEFAULT_MAX_POOL_CONNECTIONS = 25
DEFAULT_MAX_WORKERS = 8

# backoff of the default retry strategy (seconds)
DEFAULT_RETRY_MAX_DELAY = 20.0

# values considered true/false in environment variables
TRUE_STRINGS = ("1", "true", "True")
FALSE_STRINGS = ("0", "false", "False")

# log level values of AWSCLIENTS_LOG
LOG_LEVEL_TRACE = "trace"
LOG_LEVELS = (LOG_LEVEL_TRACE, "debug", "info", "warn", "error", "warning")
TRACE_LOG_LEVELS = [LOG_LEVEL_TRACE]
