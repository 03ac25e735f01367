"""Static Swagger UI JSON tree emitter."""

from pathlib import Path

import click

from swagger_docgen.generator.output import group_dir, to_json, write_file
from swagger_docgen.parser.base import ApiModel

INDEX_FILE = "index.json"


def generate_swagger_ui_files(model: ApiModel, output: Path) -> list[Path]:
    """Write ``index.json`` plus one ``<group>/index.json`` per API group.

    Groups are written in sorted key order. A failure part-way through
    leaves the files already written in place.
    """
    written = []

    root_index = output / INDEX_FILE
    write_file(root_index, to_json(model.resource_listing, "the resource listing"))
    written.append(root_index)

    for key in sorted(model.top_level_apis):
        directory = group_dir(output, key)
        content = to_json(model.top_level_apis[key], f"the {key!r} API declaration")
        write_file(directory / INDEX_FILE, content)
        written.append(directory / INDEX_FILE)
        click.echo(f"Wrote {directory.name}/{INDEX_FILE}")

    return written
