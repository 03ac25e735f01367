"""Mapping from Go types to Swagger 1.2 types."""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from swagger_docgen.parser.base import Items, PrimitiveKind

PRIMITIVES: dict[str, tuple[str, str | None]] = {
    "bool": ("boolean", None),
    "string": ("string", None),
    "byte": ("integer", "int32"),
    "rune": ("integer", "int32"),
    "int8": ("integer", "int32"),
    "int16": ("integer", "int32"),
    "int32": ("integer", "int32"),
    "uint8": ("integer", "int32"),
    "uint16": ("integer", "int32"),
    "uint32": ("integer", "int32"),
    "int": ("integer", "int64"),
    "int64": ("integer", "int64"),
    "uint": ("integer", "int64"),
    "uint64": ("integer", "int64"),
    "float32": ("number", "float"),
    "float64": ("number", "double"),
    "float": ("number", "float"),
    "double": ("number", "double"),
    "integer": ("integer", "int64"),
    "number": ("number", "double"),
    "boolean": ("boolean", None),
    "time.Time": ("string", "date-time"),
    "file": ("File", None),
    "object": ("object", None),
}

OVERRIDE_TYPES: dict[PrimitiveKind, tuple[str, str | None]] = {
    PrimitiveKind.STRING: ("string", None),
    PrimitiveKind.INT: ("integer", "int64"),
    PrimitiveKind.FLOAT: ("number", "double"),
    PrimitiveKind.BOOL: ("boolean", None),
}

FIXED_ARRAY_RE = re.compile(r"^\[\d*\]")


@dataclass
class SwaggerType:
    """A Swagger type: either a primitive/container ``type`` or a model ``ref``."""

    type: str | None = None
    format: str | None = None
    ref: str | None = None
    items: "SwaggerType | None" = None

    def to_items(self) -> Items:
        return Items(type=self.type, format=self.format, ref=self.ref)

    @property
    def model_refs(self) -> set[str]:
        refs = {self.ref} if self.ref else set()
        if self.items is not None:
            refs |= self.items.model_refs
        return refs


def swagger_type(go_type: str, overrides: Mapping[str, PrimitiveKind]) -> SwaggerType:
    """Map a Go type expression such as ``*[]models.User`` to a SwaggerType."""
    go_type = go_type.strip().lstrip("*")

    array_match = FIXED_ARRAY_RE.match(go_type)
    if array_match:
        return SwaggerType(type="array", items=swagger_type(go_type[array_match.end():], overrides))
    if go_type.startswith("map[") or go_type in ("interface{}", "any", "struct"):
        return SwaggerType(type="object")
    if go_type in PRIMITIVES:
        return SwaggerType(*PRIMITIVES[go_type])

    name = go_type.rsplit(".", 1)[-1]
    if name in overrides:
        return SwaggerType(*OVERRIDE_TYPES[PrimitiveKind(overrides[name])])
    return SwaggerType(ref=name)
