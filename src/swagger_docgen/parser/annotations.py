"""Comment annotation parsing.

Route annotations sit in the comment block above a controller method::

    // @Title getPet
    // @Description find a pet by ID
    // @Param   petId   path   int   true   "The pet ID"
    // @Success 200 {object} models.Pet
    // @Failure 404 pet not found
    // @router /pets/:petId [get]

General annotations (@APIVersion, @Title, @SubApi...) live in the
main API file and describe the resource listing.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from swagger_docgen.parser.base import (
    ApiRef,
    Operation,
    Parameter,
    PrimitiveKind,
    ResourceListing,
    ResponseMessage,
)
from swagger_docgen.parser.types import SwaggerType, swagger_type

ANNOTATION_RE = re.compile(r"^@(\w+)\s*(.*)$")
PARAM_RE = re.compile(r'^(\S+)\s+(\w+)\s+(\S+)\s+(\w+)(?:\s+"(.*)")?')
RESPONSE_TYPE_RE = re.compile(r"^\{(\w+)\}\s+(\S+)\s*(.*)$")
ROUTER_RE = re.compile(r"^(\S+)\s+\[(\w+)\]")
SUBAPI_RE = re.compile(r"^(.*?)\s*\[([^\]]+)\]")

DEFAULT_GROUP = "default"

MIME_TYPES = {
    "json": "application/json",
    "xml": "application/xml",
    "plain": "text/plain",
    "html": "text/html",
    "mpfd": "multipart/form-data",
    "x-www-form-urlencoded": "application/x-www-form-urlencoded",
}


@dataclass
class ParsedRoute:
    """One operation extracted from a controller method's comments."""

    group_key: str
    path: str
    operation: Operation
    model_refs: set[str] = field(default_factory=set)


def iter_annotations(comment_lines: list[str]):
    """Yield (name, value) for every ``@Name value`` line."""
    for line in comment_lines:
        match = ANNOTATION_RE.match(line)
        if match:
            yield match.group(1), match.group(2).strip()


def parse_general_info(comment_lines: list[str], listing: ResourceListing) -> None:
    """Apply main-file annotations to the resource listing in place."""
    info = listing.info
    for name, value in iter_annotations(comment_lines):
        key = name.lower()
        if key == "apiversion":
            listing.api_version = value
        elif key == "title":
            info.title = value
        elif key == "description":
            info.description = value
        elif key == "contact":
            info.contact = value
        elif key == "termsofserviceurl":
            info.terms_of_service_url = value
        elif key == "license":
            info.license = value
        elif key == "licenseurl":
            info.license_url = value
        elif key == "subapi":
            match = SUBAPI_RE.match(value)
            if match:
                description, path = match.groups()
                path = "/" + path.strip().strip("/")
                listing.apis = [a for a in listing.apis if a.path != path]
                listing.apis.append(ApiRef(path=path, description=description))


def parse_operation(
    comment_lines: list[str], overrides: Mapping[str, PrimitiveKind]
) -> ParsedRoute | None:
    """Build a ParsedRoute from a method's comments, or None without @router."""
    operation = Operation(method="GET")
    refs: set[str] = set()
    path = None
    resource = None

    for name, value in iter_annotations(comment_lines):
        key = name.lower()
        if key == "title":
            operation.nickname = value
        elif key == "description":
            operation.notes = value
            if not operation.summary:
                operation.summary = value
        elif key == "summary":
            operation.summary = value
        elif key == "accept":
            operation.consumes = _mime_types(value)
            if not operation.produces:
                operation.produces = list(operation.consumes)
        elif key == "produce":
            operation.produces = _mime_types(value)
        elif key == "param":
            parameter = _parse_param(value, overrides, refs)
            if parameter is not None:
                operation.parameters.append(parameter)
        elif key == "success":
            message = _parse_response(value, overrides, refs)
            if message is not None:
                operation.response_messages.append(message[0])
                if message[1] is not None:
                    _apply_return_type(operation, message[1])
        elif key == "failure":
            message = _parse_response(value, overrides, refs)
            if message is not None:
                operation.response_messages.append(message[0])
        elif key == "resource":
            resource = value
        elif key == "router":
            match = ROUTER_RE.match(value)
            if match:
                path = match.group(1)
                operation.method = match.group(2).upper()

    if path is None:
        return None
    return ParsedRoute(
        group_key=_group_key(resource, path),
        path=path,
        operation=operation,
        model_refs=refs,
    )


def _group_key(resource: str | None, path: str) -> str:
    """Return a group key usable as a single path segment, e.g. ``/api/users`` -> ``api_users``."""
    if resource and resource.strip("/"):
        return "_".join(s for s in resource.split("/") if s)
    segments = [s for s in path.split("/") if s]
    return segments[0] if segments else DEFAULT_GROUP


def _mime_types(value: str) -> list[str]:
    names = [v.strip() for v in re.split(r"[,\s]+", value) if v.strip()]
    return [MIME_TYPES.get(n.lower(), n) for n in names]


def _parse_param(value: str, overrides, refs: set[str]) -> Parameter | None:
    match = PARAM_RE.match(value)
    if not match:
        return None
    name, param_type, data_type, required, description = match.groups()

    resolved = swagger_type(data_type, overrides)
    refs |= resolved.model_refs
    parameter = Parameter(
        param_type=param_type,
        name=name,
        description=description or "",
        required=required.lower() == "true",
    )
    if resolved.ref:
        parameter.type = resolved.ref
    else:
        parameter.type = resolved.type or "string"
        parameter.format = resolved.format
        if resolved.items is not None:
            parameter.items = resolved.items.to_items()
            parameter.allow_multiple = param_type == "query"
    return parameter


def _parse_response(value: str, overrides, refs: set[str]) -> tuple[ResponseMessage, SwaggerType | None] | None:
    code, _, rest = value.partition(" ")
    try:
        status = int(code)
    except ValueError:
        return None

    rest = rest.strip()
    match = RESPONSE_TYPE_RE.match(rest)
    if not match:
        return ResponseMessage(code=status, message=rest.strip('"')), None

    kind, type_name, message = match.groups()
    resolved = swagger_type(type_name, overrides)
    if kind.lower() == "array" and resolved.type != "array":
        resolved = SwaggerType(type="array", items=resolved)
    refs |= resolved.model_refs

    model = resolved.ref or (resolved.items.ref if resolved.items else None)
    return ResponseMessage(code=status, message=message.strip().strip('"'), response_model=model), resolved


def _apply_return_type(operation: Operation, resolved: SwaggerType) -> None:
    if resolved.ref:
        operation.type = resolved.ref
    else:
        operation.type = resolved.type or "void"
        operation.format = resolved.format
        if resolved.items is not None:
            operation.items = resolved.items.to_items()
