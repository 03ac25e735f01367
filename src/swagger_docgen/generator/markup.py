"""Human-readable API documentation in AsciiDoc, Markdown or Confluence wiki markup.

Each dialect supplies the handful of primitives the document needs
(headers, tables, inline code); ``render_markup`` lays out the content
once for all of them.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from swagger_docgen.generator.output import write_file
from swagger_docgen.generator.paths import translate_path
from swagger_docgen.parser.base import ApiDeclaration, ApiModel, Items, Operation

MARKUP_FILE_STEM = "API"


class MarkupDialect(ABC):
    """Formatting primitives for one markup language."""

    name = ""

    @abstractmethod
    def section_header(self, level: int, text: str) -> str:
        ...

    @abstractmethod
    def table(self, header: list[str], rows: list[list[str]]) -> str:
        ...

    def code(self, text: str) -> str:
        return f"`{text}`"

    def bold(self, text: str) -> str:
        return f"*{text}*"


class MarkupMarkdown(MarkupDialect):
    name = "markdown"

    def section_header(self, level: int, text: str) -> str:
        return f"{'#' * level} {text}\n"

    def bold(self, text: str) -> str:
        return f"**{text}**"

    def table(self, header: list[str], rows: list[list[str]]) -> str:
        lines = [self._row(header), "| " + " | ".join("---" for _ in header) + " |"]
        lines.extend(self._row(row) for row in rows)
        return "\n".join(lines) + "\n"

    def _row(self, cells: list[str]) -> str:
        return "| " + " | ".join(c.replace("|", "\\|") for c in cells) + " |"


class MarkupAsciiDoc(MarkupDialect):
    name = "asciidoc"

    def section_header(self, level: int, text: str) -> str:
        return f"{'=' * level} {text}\n"

    def code(self, text: str) -> str:
        return f"`+{text}+`"

    def table(self, header: list[str], rows: list[list[str]]) -> str:
        lines = ['[options="header"]', "|==="]
        lines.append(" ".join("|" + self._cell(c) for c in header))
        lines.extend(" ".join("|" + self._cell(c) for c in row) for row in rows)
        lines.append("|===")
        return "\n".join(lines) + "\n"

    def _cell(self, text: str) -> str:
        return text.replace("|", "\\|")


class MarkupConfluence(MarkupDialect):
    name = "confluence"

    def section_header(self, level: int, text: str) -> str:
        return f"h{level}. {text}\n"

    def code(self, text: str) -> str:
        return "{{" + text + "}}"

    def table(self, header: list[str], rows: list[list[str]]) -> str:
        lines = ["||" + "||".join(self._cell(c) for c in header) + "||"]
        lines.extend("|" + "|".join(self._cell(c) for c in row) + "|" for row in rows)
        return "\n".join(lines) + "\n"

    def _cell(self, text: str) -> str:
        # Confluence renders an empty cell as a merged border.
        return text.replace("|", "\\|") or " "


def render_markup(model: ApiModel, dialect: MarkupDialect) -> str:
    """Render the whole API model as one document."""
    listing = model.resource_listing
    info = listing.info
    blocks = [dialect.section_header(1, info.title or "API Documentation")]
    if info.description:
        blocks.append(info.description + "\n")

    facts = [
        ("Version", listing.api_version),
        ("Contact", info.contact),
        ("Terms of service", info.terms_of_service_url),
        ("License", " ".join(x for x in (info.license, info.license_url) if x)),
    ]
    facts = [f"{dialect.bold(label)}: {value}" for label, value in facts if value]
    if facts:
        blocks.append("\n\n".join(facts) + "\n")

    for key in sorted(model.top_level_apis):
        blocks.extend(_render_declaration(key, model.top_level_apis[key], dialect))

    return "\n".join(blocks)


def _render_declaration(key: str, declaration: ApiDeclaration, dialect: MarkupDialect) -> list[str]:
    blocks = [dialect.section_header(2, f"API: {key}")]
    for entry in declaration.apis:
        path = translate_path(entry.path)
        for operation in entry.operations:
            blocks.extend(_render_operation(path, operation, dialect))

    if declaration.models:
        blocks.append(dialect.section_header(3, "Models"))
        for name in sorted(declaration.models):
            model = declaration.models[name]
            blocks.append(dialect.section_header(4, name))
            rows = [
                [
                    prop_name,
                    _type_name(prop.type, prop.ref, prop.items),
                    "yes" if prop_name in model.required else "no",
                    prop.description,
                ]
                for prop_name, prop in model.properties.items()
            ]
            blocks.append(dialect.table(["Field", "Type", "Required", "Description"], rows))
    return blocks


def _render_operation(path: str, operation: Operation, dialect: MarkupDialect) -> list[str]:
    blocks = [dialect.section_header(3, f"{operation.method} {path}")]
    if operation.summary:
        blocks.append(operation.summary + "\n")
    if operation.notes and operation.notes != operation.summary:
        blocks.append(operation.notes + "\n")

    details = [f"{dialect.bold('Returns')}: {dialect.code(_type_name(operation.type, None, operation.items))}"]
    if operation.nickname:
        details.append(f"{dialect.bold('Nickname')}: {dialect.code(operation.nickname)}")
    if operation.consumes:
        details.append(f"{dialect.bold('Accepts')}: {', '.join(operation.consumes)}")
    blocks.append("\n\n".join(details) + "\n")

    if operation.parameters:
        rows = [
            [
                p.name,
                p.param_type,
                _type_name(p.type, None, p.items),
                "yes" if p.required else "no",
                p.description,
            ]
            for p in operation.parameters
        ]
        blocks.append(dialect.table(["Name", "In", "Type", "Required", "Description"], rows))

    if operation.response_messages:
        rows = [
            [str(r.code), r.response_model or "", r.message]
            for r in operation.response_messages
        ]
        blocks.append(dialect.table(["Code", "Model", "Message"], rows))
    return blocks


def _type_name(type_: str | None, ref: str | None, items: Items | None) -> str:
    if ref:
        return ref
    if type_ == "array" and items is not None:
        return f"array[{items.ref or items.type}]"
    return type_ or ""


def generate_markup(model: ApiModel, output: Path, dialect: MarkupDialect, extension: str) -> Path:
    """Write ``<output>/API<extension>`` in the given dialect."""
    file_path = output / f"{MARKUP_FILE_STEM}{extension}"
    write_file(file_path, render_markup(model, dialect))
    return file_path
