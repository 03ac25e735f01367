"""Output format dispatch."""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from swagger_docgen.errors import ConfigurationError
from swagger_docgen.generator.embedded import generate_swagger_docs
from swagger_docgen.generator.markup import (
    MarkupAsciiDoc,
    MarkupConfluence,
    MarkupMarkdown,
    generate_markup,
)
from swagger_docgen.generator.swagger_tree import generate_swagger_ui_files
from swagger_docgen.parser.base import ApiModel

AVAILABLE_FORMATS = ("go", "swagger", "asciidoc", "markdown", "confluence")


@dataclass(frozen=True)
class Emitter:
    """Writes one output format and says so when done."""

    emit: Callable[[ApiModel, Path], object]
    confirm_msg: str


EMITTERS: dict[str, Emitter] = {
    "go": Emitter(generate_swagger_docs, "Doc file generated"),
    "swagger": Emitter(generate_swagger_ui_files, "Swagger UI files generated"),
    "asciidoc": Emitter(
        partial(generate_markup, dialect=MarkupAsciiDoc(), extension=".adoc"),
        "AsciiDoc file generated",
    ),
    "markdown": Emitter(
        partial(generate_markup, dialect=MarkupMarkdown(), extension=".md"),
        "MarkDown file generated",
    ),
    "confluence": Emitter(
        partial(generate_markup, dialect=MarkupConfluence(), extension=".confluence"),
        "Confluence file generated",
    ),
}


def select_emitter(format_name: str) -> Emitter:
    """Return the emitter for a format name, matched case-insensitively."""
    emitter = EMITTERS.get(format_name.lower())
    if emitter is None:
        raise ConfigurationError(
            f"Invalid --format {format_name!r} specified. Must be one of {'|'.join(AVAILABLE_FORMATS)}."
        )
    return emitter


def dispatch(format_name: str, model: ApiModel, output: Path) -> str:
    """Emit ``model`` to ``output`` in the requested format; returns the confirmation message."""
    emitter = select_emitter(format_name)
    emitter.emit(model, output)
    return emitter.confirm_msg
