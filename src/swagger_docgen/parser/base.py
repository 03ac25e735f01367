"""Swagger 1.2 data models for parsed API documentation.

The parser builds these from Go source annotations; every emitter
consumes them. Field names are snake_case in Python and camelCase on
the wire, so always dump with ``by_alias=True``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SWAGGER_VERSION = "1.2"


class PrimitiveKind(str, Enum):
    """Primitive kinds a wrapper type can be documented as."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


# Nullable wrappers from database/sql, documented as their payload type.
DEFAULT_TYPE_OVERRIDES: dict[str, PrimitiveKind] = {
    "NullString": PrimitiveKind.STRING,
    "NullInt64": PrimitiveKind.INT,
    "NullFloat64": PrimitiveKind.FLOAT,
    "NullBool": PrimitiveKind.BOOL,
}


class SwaggerModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Info(SwaggerModel):
    title: str = ""
    description: str = ""
    contact: str = ""
    terms_of_service_url: str = ""
    license: str = ""
    license_url: str = ""


class ApiRef(SwaggerModel):
    """A reference from the resource listing to one API group."""

    path: str
    description: str = ""


class ResourceListing(SwaggerModel):
    """Root summary of the whole documented API."""

    api_version: str = ""
    swagger_version: str = SWAGGER_VERSION
    base_path: str = ""
    apis: list[ApiRef] = []
    info: Info = Field(default_factory=Info)


class Items(SwaggerModel):
    type: str | None = None
    format: str | None = None
    ref: str | None = Field(default=None, alias="$ref")


class Parameter(SwaggerModel):
    param_type: str  # path / query / form / header / body
    name: str
    description: str = ""
    type: str = "string"
    format: str | None = None
    items: Items | None = None
    required: bool = False
    allow_multiple: bool = False


class ResponseMessage(SwaggerModel):
    code: int
    message: str = ""
    response_model: str | None = None


class Operation(SwaggerModel):
    """One HTTP method on one route."""

    method: str
    nickname: str = ""
    type: str = "void"
    format: str | None = None
    items: Items | None = None
    summary: str = ""
    notes: str = ""
    parameters: list[Parameter] = []
    response_messages: list[ResponseMessage] = []
    consumes: list[str] = []
    produces: list[str] = []


class ApiEntry(SwaggerModel):
    """One documented route; ``path`` holds the raw template until translated."""

    path: str
    description: str = ""
    operations: list[Operation] = []


class ModelProperty(SwaggerModel):
    type: str | None = None
    format: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    items: Items | None = None
    description: str = ""


class Model(SwaggerModel):
    id: str
    required: list[str] = []
    properties: dict[str, ModelProperty] = {}


class ApiDeclaration(SwaggerModel):
    """All routes of one API group."""

    api_version: str = ""
    swagger_version: str = SWAGGER_VERSION
    base_path: str = ""
    resource_path: str = ""
    produces: list[str] = []
    consumes: list[str] = []
    apis: list[ApiEntry] = []
    models: dict[str, Model] = {}


class ApiModel(BaseModel):
    """Everything an emitter needs: the root listing plus every group."""

    resource_listing: ResourceListing
    top_level_apis: dict[str, ApiDeclaration]
