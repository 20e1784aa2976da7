import logging
import sys
import warnings

from awsclients import config, constants

from .format import AddFormattedAttributes, DefaultFormatter

# default levels of third-party and awsclients loggers, applied on top of the configured level
default_log_levels = {
    "boto3": logging.INFO,
    "botocore": logging.ERROR,
    "urllib3": logging.WARNING,
    "awsclients.aws.spec": logging.INFO,
    "awsclients.request": logging.INFO,
}

# levels applied when AWSCLIENTS_LOG=trace
trace_log_levels = {
    "botocore": logging.INFO,
    "awsclients.aws.spec": logging.DEBUG,
    "awsclients.request": logging.DEBUG,
}


def get_log_level_from_config() -> int:
    # overriding the log level if AWSCLIENTS_LOG has been set
    if config.AWSCLIENTS_LOG:
        log_level = str(config.AWSCLIENTS_LOG).upper()
        if log_level.lower() in constants.TRACE_LOG_LEVELS:
            log_level = "DEBUG"
        return logging.getLevelName(log_level)

    return logging.DEBUG if config.DEBUG else logging.INFO


def setup_logging_from_config():
    setup_logging(get_log_level_from_config())

    if config.is_trace_logging_enabled():
        for name, level in trace_log_levels.items():
            logging.getLogger(name).setLevel(level)


def create_default_handler(log_level: int):
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_handler.setLevel(log_level)
    log_handler.setFormatter(DefaultFormatter())
    log_handler.addFilter(AddFormattedAttributes())
    return log_handler


def setup_logging(log_level=logging.INFO) -> None:
    """
    Configures the python logging environment for applications using awsclients.

    :param log_level: the optional log level.
    """
    log_handler = create_default_handler(log_level)

    # replace any existing handlers
    logging.basicConfig(level=log_level, handlers=[log_handler], force=True)

    logging.captureWarnings(True)
    warnings.filterwarnings("ignore", module="botocore")

    logging.root.setLevel(log_level)
    logging.getLogger("awsclients").setLevel(log_level)
    for logger, level in default_log_levels.items():
        logging.getLogger(logger).setLevel(level)
