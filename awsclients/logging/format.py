"""Formatting of the awsclients log output."""
import logging
from functools import lru_cache

MAX_THREAD_NAME_LEN = 12
MAX_NAME_LEN = 26

LOG_FORMAT = f"%(asctime)s.%(msecs)03d %(short_level)5s --- [%(short_thread){MAX_THREAD_NAME_LEN}s] %(short_name)-{MAX_NAME_LEN}s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

SHORT_LEVEL_NAMES = {
    logging.CRITICAL: "FATAL",
    logging.ERROR: "ERROR",
    logging.WARNING: "WARN",
    logging.INFO: "INFO",
    logging.DEBUG: "DEBUG",
}


class DefaultFormatter(logging.Formatter):
    """
    A formatter that uses ``LOG_FORMAT`` and ``LOG_DATE_FORMAT``. Needs the ``AddFormattedAttributes`` filter on the
    handler, since the format references the attributes it adds.
    """

    def __init__(self, fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT):
        super().__init__(fmt=fmt, datefmt=datefmt)


class AddFormattedAttributes(logging.Filter):
    """
    Filter that adds the shortened attributes ``short_level``, ``short_name`` and ``short_thread`` to a log record.
    """

    def __init__(self, max_name_len: int = None, max_thread_len: int = None):
        super().__init__()
        self.max_name_len = max_name_len or MAX_NAME_LEN
        self.max_thread_len = max_thread_len or MAX_THREAD_NAME_LEN

    def filter(self, record):
        record.short_level = SHORT_LEVEL_NAMES.get(record.levelno, record.levelname)
        record.short_name = self._compress(record.name)
        record.short_thread = record.threadName[-self.max_thread_len :]
        return True

    @lru_cache(maxsize=256)
    def _compress(self, name: str) -> str:
        return compress_logger_name(name, self.max_name_len)


def compress_logger_name(name: str, length: int) -> str:
    """
    Shortens a dotted logger name to at most ``length`` characters. Parts are collapsed to their first letter from
    the left, so the most specific parts stay readable, e.g., ``awsclients.aws.executor`` with a length of 16 turns
    into ``a.aws.executor``.

    :param name: the logger name
    :param length: the max length of the logger name
    :return: the compressed name
    """
    if len(name) <= length:
        return name

    parts = name.split(".")
    # the shortest possible form "a.b.c" needs one char per part plus the dots
    size = 2 * len(parts) - 1
    expanded = 0

    # expand parts from the right as long as they fit
    for part in reversed(parts):
        if size + len(part) - 1 > length:
            break
        size += len(part) - 1
        expanded += 1

    collapsed = [part[0] for part in parts[: len(parts) - expanded]]
    kept = parts[len(parts) - expanded :]

    if not kept:
        # not even the last part fits, show as much of it as the remaining space allows
        last = parts[-1][: max(length - size + 1, 1)]
        collapsed[-1] = last

    return ".".join(collapsed + kept)
