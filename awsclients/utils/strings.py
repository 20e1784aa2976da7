import re

_re_camel_to_snake_case = re.compile("((?<=[a-z0-9])[A-Z]|(?!^)[A-Z](?=[a-z]))")


def camel_to_snake_case(string: str) -> str:
    return _re_camel_to_snake_case.sub(r"_\1", string).replace("__", "_").lower()


def to_constant_case(string: str) -> str:
    """Turns a CamelCase or kebab-case name into CONSTANT_CASE, e.g., ``NoSuchHostedZone`` -> ``NO_SUCH_HOSTED_ZONE``."""
    return camel_to_snake_case(string.replace("-", "_").replace(".", "_")).upper()


def truncate(data: str, max_length: int = 100) -> str:
    data = str(data or "")
    return f"{data[:max_length]}..." if len(data) > max_length else data
