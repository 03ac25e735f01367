"""Shared serialisation and file-writing helpers for emitters."""

from pathlib import Path

from pydantic import BaseModel

from swagger_docgen.errors import OutputError, SerializationError

JSON_INDENT = 4


def to_json(model: BaseModel, what: str) -> str:
    """Serialise a Swagger model with wire names and 4-space indentation."""
    try:
        return model.model_dump_json(by_alias=True, exclude_none=True, indent=JSON_INDENT)
    except ValueError as e:
        raise SerializationError(f"Can not serialise {what} to JSON: {e}") from e


def to_jsonable(model: BaseModel, what: str) -> dict:
    try:
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)
    except ValueError as e:
        raise SerializationError(f"Can not serialise {what} to JSON: {e}") from e


def group_dir(output: Path, key: str) -> Path:
    """Return the directory for an API group, rejecting keys unsafe as a path segment."""
    segment = key.strip("/")
    if not segment or segment in (".", "..") or "/" in segment or "\\" in segment:
        raise OutputError(f"API group key {key!r} can not be used as a directory name")
    return output / segment


def write_file(file_path: Path, content: str) -> None:
    """Write ``content``, creating parent directories as needed."""
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Can not create the {file_path} file: {e}") from e
