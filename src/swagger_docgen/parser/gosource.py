"""Line-based scanner for Go source files.

Extracts just enough structure for documentation: top-level function
declarations with the comment block above them, and struct types with
their exported fields. It does not attempt to parse Go expressions.
"""

import re
from dataclasses import dataclass, field

FUNC_RE = re.compile(
    r"^func\s*"
    r"(?:\(\s*(?:\w+\s+)?(\*?)\s*([\w.]+)(?:\[[^\]]*\])?\s*\)\s*)?"
    r"(\w+)\s*[\[(]"
)
STRUCT_RE = re.compile(r"^type\s+(\w+)\s+struct\s*\{(.*)$")
TYPE_BLOCK_RE = re.compile(r"^type\s*\(\s*$")
BLOCK_STRUCT_RE = re.compile(r"^(\w+)\s+struct\s*\{(.*)$")
FIELD_RE = re.compile(r"^([A-Za-z_]\w*(?:\s*,\s*[A-Za-z_]\w*)*)\s+([^\s`]+)\s*(?:`([^`]*)`)?")
EMBEDDED_RE = re.compile(r"^(\*?[A-Za-z_][\w.]*)\s*(?:`([^`]*)`)?\s*$")
JSON_TAG_RE = re.compile(r'json:"([^"]*)"')
# Field types encoding/json can not marshal.
UNSUPPORTED_TYPE_RE = re.compile(r"^(?:func\b|chan\b|<-)")


@dataclass
class GoFunc:
    name: str
    receiver: str | None
    pointer_receiver: bool
    comments: list[str] = field(default_factory=list)


@dataclass
class GoField:
    name: str
    go_type: str
    json_name: str
    omit_empty: bool = False
    embedded: bool = False


@dataclass
class GoStruct:
    name: str
    fields: list[GoField] = field(default_factory=list)


@dataclass
class GoFile:
    functions: list[GoFunc] = field(default_factory=list)
    structs: dict[str, GoStruct] = field(default_factory=dict)


def scan_go_source(text: str) -> GoFile:
    """Scan Go source text into functions and struct declarations."""
    result = GoFile()
    comments: list[str] = []
    in_type_block = False
    lines = text.splitlines()
    i = 0

    while i < len(lines):
        line = lines[i].strip()
        i += 1

        if line.startswith("//"):
            comments.append(line[2:].strip())
            continue

        func_match = FUNC_RE.match(line)
        if func_match:
            star, receiver, name = func_match.groups()
            result.functions.append(
                GoFunc(
                    name=name,
                    receiver=receiver.rsplit(".", 1)[-1] if receiver else None,
                    pointer_receiver=bool(star),
                    comments=comments,
                )
            )
        else:
            struct_match = STRUCT_RE.match(line) or (in_type_block and BLOCK_STRUCT_RE.match(line))
            if struct_match:
                name, rest = struct_match.groups()
                body, i = _collect_struct_body(rest, lines, i)
                result.structs[name] = GoStruct(name=name, fields=_parse_fields(body))
            elif TYPE_BLOCK_RE.match(line):
                in_type_block = True
            elif in_type_block and line == ")":
                in_type_block = False

        comments = []

    return result


def comment_lines(text: str) -> list[str]:
    """Return the text of every ``//`` comment line in a file."""
    return [
        line.strip()[2:].strip()
        for line in text.splitlines()
        if line.strip().startswith("//")
    ]


def _collect_struct_body(rest: str, lines: list[str], i: int) -> tuple[list[str], int]:
    """Collect the top-level lines of a struct body, skipping nested blocks."""
    rest = _strip_comment(rest).strip()
    if rest.count("}") > rest.count("{"):
        # One-line body: ``struct{ A int; B string }``.
        inline = rest[: rest.rindex("}")]
        return [f.strip() for f in inline.split(";") if f.strip()], i

    body: list[str] = [rest] if rest else []
    depth = 1 + rest.count("{") - rest.count("}")
    while i < len(lines) and depth > 0:
        line = _strip_comment(lines[i]).strip()
        i += 1
        if depth == 1 and line and line != "}":
            body.append(line)
        depth += line.count("{") - line.count("}")
    return body, i


def _strip_comment(line: str) -> str:
    if "`" in line:
        head, _, tail = line.rpartition("`")
        return head + "`" + tail.split("//", 1)[0]
    return line.split("//", 1)[0]


def _parse_fields(body: list[str]) -> list[GoField]:
    fields: list[GoField] = []
    for line in body:
        field_match = FIELD_RE.match(line)
        if field_match:
            names, go_type, tag = field_match.groups()
            if go_type.endswith("{"):
                go_type = go_type[:-1] or "struct"
            if UNSUPPORTED_TYPE_RE.match(go_type):
                continue
            for name in (n.strip() for n in names.split(",")):
                parsed = _make_field(name, go_type, tag or "")
                if parsed is not None:
                    fields.append(parsed)
            continue

        embedded_match = EMBEDDED_RE.match(line)
        if embedded_match:
            go_type, tag = embedded_match.groups()
            name = go_type.lstrip("*").rsplit(".", 1)[-1]
            fields.append(GoField(name=name, go_type=go_type, json_name=name, embedded=True))
    return fields


def _make_field(name: str, go_type: str, tag: str) -> GoField | None:
    if not name[0].isupper():
        return None

    json_name, omit_empty = name, False
    tag_match = JSON_TAG_RE.search(tag)
    if tag_match:
        tag_name, _, options = tag_match.group(1).partition(",")
        if tag_name == "-":
            return None
        json_name = tag_name or name
        omit_empty = "omitempty" in options.split(",")
    return GoField(name=name, go_type=go_type, json_name=json_name, omit_empty=omit_empty)
