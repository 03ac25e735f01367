"""Generator configuration.

GeneratorParams is a frozen snapshot threaded through the pipeline;
nothing reads configuration from module state.
"""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from swagger_docgen.errors import ConfigurationError

SEARCH_PATH_ENV = "GOPATH"
DEFAULT_BASE_PATH = "{{.}}"


class GeneratorParams(BaseModel):
    """Options for a single generation run."""

    model_config = ConfigDict(frozen=True)

    api_package: str
    main_api_file: str = ""
    output_format: str = "go"
    output_spec: Path = Path(".")
    controller_class: str | None = None
    base_path: str = DEFAULT_BASE_PATH

    @model_validator(mode="before")
    @classmethod
    def default_main_api_file(cls, data):
        if isinstance(data, dict) and not data.get("main_api_file") and data.get("api_package"):
            data = {**data, "main_api_file": f"{data['api_package']}/main.go"}
        return data


def search_path_from_env(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Return the colon-separated source roots from $GOPATH."""
    environ = os.environ if environ is None else environ
    value = environ.get(SEARCH_PATH_ENV, "")
    if not value:
        raise ConfigurationError(f"Please, set ${SEARCH_PATH_ENV} environment variable")
    return [Path(d) for d in value.split(":") if d]


def load_config_file(file_path: Path) -> dict:
    """Load option defaults from a YAML file.

    Keys use the GeneratorParams field names, e.g. ``api_package``.
    """
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Can not read config file {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {file_path} must contain a mapping")

    unknown = set(data) - set(GeneratorParams.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown option(s) in {file_path}: {', '.join(sorted(unknown))}")
    return data


def build_params(**options) -> GeneratorParams:
    """Build GeneratorParams, converting validation failures to ConfigurationError."""
    try:
        return GeneratorParams(**{k: v for k, v in options.items() if v is not None})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator options: {e}") from e
