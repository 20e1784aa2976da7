import logging

from awsclients.logging.format import AddFormattedAttributes, DefaultFormatter, compress_logger_name


def test_compress_logger_name():
    assert compress_logger_name("log", 1) == "l"
    assert compress_logger_name("log", 2) == "lo"
    assert compress_logger_name("log", 3) == "log"
    assert compress_logger_name("log", 5) == "log"
    assert compress_logger_name("my.very.long.logger.name", 1) == "m.v.l.l.n"
    assert compress_logger_name("my.very.long.logger.name", 11) == "m.v.l.l.nam"
    assert compress_logger_name("my.very.long.logger.name", 12) == "m.v.l.l.name"
    assert compress_logger_name("my.very.long.logger.name", 16) == "m.v.l.l.name"
    assert compress_logger_name("my.very.long.logger.name", 17) == "m.v.l.logger.name"
    assert compress_logger_name("my.very.long.logger.name", 24) == "my.very.long.logger.name"
    assert compress_logger_name("awsclients.aws.executor", 16) == "a.aws.executor"


def test_formatted_attributes():
    record = logging.LogRecord(
        name="awsclients.aws.service",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Required field: %s, is not set",
        args=("applicationId",),
        exc_info=None,
    )
    record.threadName = "awsclients_worker_long_name"

    assert AddFormattedAttributes(max_name_len=16, max_thread_len=8).filter(record)

    assert record.short_level == "WARN"
    assert record.short_name == "a.aws.service"
    assert record.short_thread == "ong_name"

    line = DefaultFormatter().format(record)
    assert line.endswith(" : Required field: applicationId, is not set")
    assert " WARN --- [" in line
