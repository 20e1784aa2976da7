"""
Generator of the service client modules in ``awsclients/aws/api``.

For a botocore service model, the generated module contains the request and response shapes as ``TypedDict``, string
enums as ``Literal`` aliases, the error enum of the service, and the client class with one ``Operation`` per API
operation::

    python -m awsclients.aws.scaffold generate route53 --save
"""
import io
import keyword
import re
from functools import cached_property
from multiprocessing import Pool
from pathlib import Path
from typing import Dict, List, Set

import click
from botocore.exceptions import UnknownServiceError
from botocore.model import ListShape, MapShape, OperationModel, ServiceModel, Shape, StructureShape

from awsclients.aws.spec import load_service
from awsclients.logging.setup import setup_logging_from_config
from awsclients.utils.strings import camel_to_snake_case, to_constant_case

# Some minification packages might treat "type" as a keyword, some specs define shapes called like the type "Optional"
KEYWORDS = list(keyword.kwlist) + ["type", "Optional", "Union"]
is_keyword = KEYWORDS.__contains__

# names imported by every generated module
IMPORTED_NAMES = [
    "Any",
    "Dict",
    "Enum",
    "HttpMethod",
    "List",
    "Literal",
    "Operation",
    "Required",
    "ServiceClient",
    "ServiceRequest",
    "SignerType",
    "TypedDict",
    "datetime",
]

# attributes of ServiceClient which operations must not shadow
CLIENT_ATTRIBUTES = [
    "client_name",
    "configuration",
    "dispatch",
    "endpoint_provider",
    "errors",
    "executor",
    "operation",
    "operations",
    "override_endpoint",
    "request_executor",
    "retryable_errors",
    "service",
    "service_model",
    "version",
]

# client names which do not follow from the service id
CLIENT_NAMES = {"m2": "MainframeModernization"}

# request members in these locations have to be set before a request is sent, payload members are validated by the
# service
REQUIRED_LOCATIONS = ("uri", "querystring", "header", "headers")

PRIMITIVE_TYPES = {
    "string": "str",
    "integer": "int",
    "long": "int",
    "float": "float",
    "double": "float",
    "boolean": "bool",
    "blob": "bytes",
    "timestamp": "datetime",
}

DEFAULT_API_PATH = "./awsclients/aws/api"


def to_valid_python_name(spec_name: str) -> str:
    sanitized = re.sub(r"[^0-9a-zA-Z_]+", "_", spec_name)

    if sanitized[0].isnumeric():
        sanitized = "i_" + sanitized

    if is_keyword(sanitized):
        sanitized += "_"

    if sanitized.startswith("__"):
        sanitized = sanitized[1:]

    return sanitized


def is_valid_member_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


def html_to_rst(html: str):
    import pypandoc

    doc = pypandoc.convert_text(html, "rst", format="html")
    doc = doc.replace("\\_", "_")
    doc = doc.replace("\\|", "|")
    doc = doc.replace("\\ ", " ")
    doc = doc.replace("\\", "\\\\")
    return doc.strip()


def get_client_prefix(service: ServiceModel) -> str:
    """
    The prefix of the client and error class names, f.e. ``Route53`` for the service id ``Route 53``.
    """
    if name := CLIENT_NAMES.get(service.service_name):
        return name
    return re.sub(r"[^0-9a-zA-Z]", "", service.metadata.get("serviceId") or service.service_name)


def get_error_code(shape: Shape) -> str:
    return shape.metadata.get("error", {}).get("code", shape.name)


def get_required_members(operation: OperationModel) -> List[str]:
    """
    Returns the required input members of the operation which are serialized into the URI, the query string, or the
    headers of the request.
    """
    input_shape = operation.input_shape
    if input_shape is None:
        return []
    return [
        member
        for member in input_shape.required_members
        if input_shape.members[member].serialization.get("location") in REQUIRED_LOCATIONS
    ]


def is_unsigned(operation: OperationModel) -> bool:
    return operation.auth_type == "none"


def format_tuple(values: List[str]) -> str:
    if len(values) == 1:
        return f'("{values[0]}",)'
    return "(" + ", ".join(f'"{value}"' for value in values) + ")"


def get_path_template(operation: OperationModel) -> str:
    """
    Returns the request URI of the operation, with the labels referencing the members by name instead of their wire
    location name, and without the query part.
    """
    request_uri = operation.http.get("requestUri", "/").split("?")[0]
    input_shape = operation.input_shape
    if input_shape is None:
        return request_uri

    location_names = {
        shape.serialization.get("name", member): member
        for member, shape in input_shape.members.items()
        if shape.serialization.get("location") == "uri"
    }

    def _replace(match: re.Match) -> str:
        label = match.group(1).rstrip("+")
        return "{%s}" % location_names.get(label, label)

    return re.sub(r"\{([^}]+)\}", _replace, request_uri)


class ServiceNode:
    """
    Collects the shapes of a service which are reachable from the input and output of its operations, and assigns
    their python names.
    """

    service: ServiceModel

    def __init__(self, service: ServiceModel):
        self.service = service

    @cached_property
    def prefix(self) -> str:
        return get_client_prefix(self.service)

    @cached_property
    def client_class_name(self) -> str:
        return f"{self.prefix}Client"

    @cached_property
    def errors_class_name(self) -> str:
        return f"{self.prefix}Errors"

    @cached_property
    def reserved_names(self) -> Set[str]:
        return {*IMPORTED_NAMES, self.client_class_name, self.errors_class_name, "RETRYABLE_ERRORS"}

    @cached_property
    def operations(self) -> List[OperationModel]:
        return [self.service.operation_model(name) for name in self.service.operation_names]

    @cached_property
    def request_shape_names(self) -> Set[str]:
        return {op.input_shape.name for op in self.operations if op.input_shape is not None}

    def python_name(self, shape_name: str) -> str:
        name = to_valid_python_name(shape_name)
        if name in self.reserved_names:
            name += "_"
        return name

    @cached_property
    def _reachable(self):
        structures: List[StructureShape] = []
        enums: Dict[str, Shape] = {}
        visited: Set[str] = set()

        def _visit(shape: Shape):
            if isinstance(shape, StructureShape):
                if shape.is_document_type or shape.name in visited:
                    return
                visited.add(shape.name)
                for member in shape.members.values():
                    _visit(member)
                structures.append(shape)
            elif isinstance(shape, ListShape):
                _visit(shape.member)
            elif isinstance(shape, MapShape):
                _visit(shape.key)
                _visit(shape.value)
            elif shape.type_name == "string" and shape.enum:
                enums[shape.name] = shape

        for operation in self.operations:
            if operation.input_shape is not None:
                _visit(operation.input_shape)
            if operation.output_shape is not None:
                _visit(operation.output_shape)

        return structures, [enums[name] for name in sorted(enums)]

    @property
    def structures(self) -> List[StructureShape]:
        """The structures in dependency order (except for cycles)."""
        return self._reachable[0]

    @property
    def enums(self) -> List[Shape]:
        return self._reachable[1]

    @cached_property
    def error_shapes(self) -> List[Shape]:
        shapes = [self.service.shape_for(name) for name in self.service.shape_names]
        return sorted(
            (shape for shape in shapes if shape.metadata.get("exception")), key=lambda s: s.name
        )

    @cached_property
    def error_members(self) -> Dict[str, str]:
        """Maps the error codes of the service to the names of their error enum members."""
        codes = [get_error_code(shape) for shape in self.error_shapes]
        short_names = [to_constant_case(re.sub(r"Exception$", "", code)) for code in codes]
        result = {}
        for code, short_name in zip(codes, short_names):
            if short_names.count(short_name) > 1 or not short_name:
                short_name = to_constant_case(code)
            result[code] = to_valid_python_name(short_name)
        return result


class ModuleWriter:
    """Writes the module of a single service."""

    def __init__(self, node: ServiceNode, output: io.StringIO, doc: bool = False):
        self.node = node
        self.output = output
        self.doc = doc
        self.printed: Set[str] = set()

    def write(self, text: str = ""):
        self.output.write(text)

    def type_expression(self, shape: Shape) -> str:
        if isinstance(shape, StructureShape):
            if shape.is_document_type:
                return "Any"
            name = self.node.python_name(shape.name)
            return name if shape.name in self.printed else f'"{name}"'
        if isinstance(shape, ListShape):
            return f"List[{self.type_expression(shape.member)}]"
        if isinstance(shape, MapShape):
            return f"Dict[{self.type_expression(shape.key)}, {self.type_expression(shape.value)}]"
        if shape.type_name == "string" and shape.enum:
            return self.node.python_name(shape.name)
        return PRIMITIVE_TYPES.get(shape.type_name, "Any")

    def member_expression(self, structure: StructureShape, member: str) -> str:
        expression = self.type_expression(structure.members[member])
        if member in structure.required_members:
            return f"Required[{expression}]"
        return expression

    def write_imports(self):
        self.write("from datetime import datetime\n")
        self.write("from enum import Enum\n")
        self.write("from typing import Any, Dict, List, Literal, Required, TypedDict\n")
        self.write("\n")
        self.write("from awsclients.aws.api.core import HttpMethod, ServiceRequest, SignerType\n")
        self.write("from awsclients.aws.service import Operation, ServiceClient\n")

    def write_enums(self):
        if not self.node.enums:
            return
        self.write("\n")
        for shape in self.node.enums:
            values = ", ".join(f'"{value}"' for value in shape.enum)
            self.write(f"{self.node.python_name(shape.name)} = Literal[{values}]\n")

    def write_errors(self):
        node = self.node
        self.write("\n\n")
        self.write(f"class {node.errors_class_name}(str, Enum):\n")
        if not node.error_members:
            self.write("    pass\n")
        for code, member in node.error_members.items():
            self.write(f'    {member} = "{code}"\n')

        retryable = [
            node.error_members[get_error_code(shape)]
            for shape in node.error_shapes
            if shape.metadata.get("retryable") is not None
        ]
        self.write("\n\n")
        if retryable:
            self.write("RETRYABLE_ERRORS = frozenset(\n")
            self.write("    {\n")
            for member in retryable:
                self.write(f"        {node.errors_class_name}.{member},\n")
            self.write("    }\n")
            self.write(")\n")
        else:
            self.write("RETRYABLE_ERRORS = frozenset()\n")

    def write_structure(self, shape: StructureShape):
        name = self.node.python_name(shape.name)
        members = list(shape.members)
        self.write("\n\n")

        if not all(map(is_valid_member_name, members)):
            self.write(f'{name} = TypedDict(\n    "{name}",\n    {{\n')
            for member in members:
                self.write(f'        "{member}": {self.member_expression(shape, member)},\n')
            self.write("    },\n    total=False,\n)\n")
            self.printed.add(shape.name)
            return

        if shape.name in self.node.request_shape_names:
            base = "ServiceRequest, total=False"
        else:
            base = "TypedDict, total=False"
        self.write(f"class {name}({base}):\n")
        if self.doc and shape.documentation:
            self.write(f'    """{html_to_rst(shape.documentation)}\n    """\n')
        if not members:
            self.write("    pass\n")
        for member in members:
            self.write(f"    {member}: {self.member_expression(shape, member)}\n")
        self.printed.add(shape.name)

    def write_client(self):
        node = self.node
        service = node.service
        self.write("\n\n")
        self.write(f"class {node.client_class_name}(ServiceClient):\n")
        full_name = service.metadata.get("serviceFullName", service.service_name)
        self.write(f'    """Client of {full_name} ({service.api_version})."""\n')
        self.write("\n")
        self.write(f'    service = "{service.service_name}"\n')
        self.write(f'    version = "{service.api_version}"\n')
        self.write(f'    client_name = "{full_name}"\n')
        self.write(f"    errors = {node.errors_class_name}\n")
        self.write("    retryable_errors = RETRYABLE_ERRORS\n")

        for operation in node.operations:
            self.write_operation(operation)

    def write_operation(self, operation: OperationModel):
        node = self.node
        attribute = camel_to_snake_case(operation.name)
        if is_keyword(attribute) or attribute in CLIENT_ATTRIBUTES:
            attribute += "_"

        if operation.input_shape is not None:
            request_type = node.python_name(operation.input_shape.name)
        else:
            request_type = "ServiceRequest"
        if operation.output_shape is not None:
            response_type = node.python_name(operation.output_shape.name)
        else:
            response_type = "None"

        arguments = [
            f'"{operation.name}"',
            request_type,
            response_type,
            f"method=HttpMethod.{operation.http.get('method', 'POST')}",
        ]
        path = get_path_template(operation)
        if path != "/":
            arguments.append(f'path="{path}"')
        if required := get_required_members(operation):
            arguments.append(f"required={format_tuple(required)}")
        if is_unsigned(operation):
            arguments.append("signer=SignerType.NULL")

        self.write("\n")
        if self.doc and operation.documentation:
            for line in html_to_rst(operation.documentation).splitlines():
                self.write(f"    # {line}\n".rstrip() + "\n")
        self.write(f"    {attribute} = Operation(\n")
        for argument in arguments:
            self.write(f"        {argument},\n")
        self.write("    )\n")

    def write_module(self):
        self.write_imports()
        self.write_enums()
        self.write_errors()
        for shape in self.node.structures:
            self.write_structure(shape)
        self.write_client()


def generate_service_module(output, service: ServiceModel, doc=False):
    ModuleWriter(ServiceNode(service), output, doc=doc).write_module()


@click.group()
def scaffold():
    """Code generator of the service client modules."""
    setup_logging_from_config()


@scaffold.command(name="generate")
@click.argument("service", type=str)
@click.option("--doc/--no-doc", default=False, help="whether or not to generate docstrings")
@click.option(
    "--save/--print",
    default=False,
    help="whether or not to save the result into the api directory",
)
@click.option(
    "--path", default=DEFAULT_API_PATH, help="the path where the client module should be saved"
)
def generate(service: str, doc: bool, save: bool, path: str):
    """
    Generate the types and the client of a given AWS service.

    SERVICE is the service to generate the client for (e.g., route53, or m2)
    """
    from click import ClickException

    try:
        code = generate_code(service, doc=doc)
    except UnknownServiceError:
        raise ClickException(f"unknown service {service}")

    if not save:
        click.echo(code)
        return

    create_code_directory(service, code, path)
    click.echo("done!")


def generate_code(service_name: str, doc: bool = False) -> str:
    model = load_service(service_name)
    output = io.StringIO()
    generate_service_module(output, model, doc=doc)
    return output.getvalue()


def create_code_directory(service_name: str, code: str, base_path: str):
    service_name = service_name.replace("-", "_")
    # handle service names which are reserved keywords in python (f.e. lambda)
    if is_keyword(service_name):
        service_name += "_"
    path = Path(base_path, service_name)

    if not path.exists():
        click.echo(f"creating directory {path}")
        path.mkdir()

    file = path / "__init__.py"
    click.echo(f"writing to file {file}")
    file.write_text(code)


@scaffold.command()
@click.option("--doc/--no-doc", default=False, help="whether or not to generate docstrings")
@click.option(
    "--path",
    default=DEFAULT_API_PATH,
    help="the path in which to upgrade the client modules",
)
def upgrade(path: str, doc: bool = False):
    """
    Execute the code generation for all existing client modules.
    """
    services = [
        d.name.rstrip("_").replace("_", "-")
        for d in Path(path).iterdir()
        if d.is_dir() and not d.name.startswith("__")
    ]

    with Pool() as pool:
        pool.starmap(_do_generate_code, [(service, path, doc) for service in services])

    click.echo("done!")


def _do_generate_code(service: str, path: str, doc: bool):
    try:
        code = generate_code(service, doc)
    except UnknownServiceError:
        click.echo(f"unknown service {service}! skipping...")
        return
    create_code_directory(service, code, base_path=path)


if __name__ == "__main__":
    scaffold()
