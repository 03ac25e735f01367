"""End-to-end generation: resolve, parse, emit."""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import click

from swagger_docgen.config import GeneratorParams, search_path_from_env
from swagger_docgen.generator.dispatch import select_emitter
from swagger_docgen.parser.api import Parser
from swagger_docgen.parser.base import DEFAULT_TYPE_OVERRIDES
from swagger_docgen.parser.filters import RouteFilter, build_route_filter
from swagger_docgen.parser.resolver import resolve_main_api


def init_parser(params: GeneratorParams, route_filter: RouteFilter, search_path: list[Path]) -> Parser:
    """Create a parser with the default type overrides installed."""
    type_overrides = MappingProxyType(dict(DEFAULT_TYPE_OVERRIDES))
    return Parser(route_filter, type_overrides, search_path, base_path=params.base_path)


def generate(
    params: GeneratorParams,
    search_path: list[Path] | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Generate documentation for ``params.api_package``.

    Configuration is validated before any file is read. Returns the
    confirmation message of the emitter that ran.
    """
    emitter = select_emitter(params.output_format)
    route_filter = build_route_filter(params.controller_class)
    if search_path is None:
        search_path = search_path_from_env(environ)

    parser = init_parser(params, route_filter, search_path)

    click.echo("Start parsing")
    resolve_main_api(parser, search_path, params.main_api_file)
    parser.parse_api(params.api_package)
    click.echo("Finish parsing")

    emitter.emit(parser.api_model(), params.output_spec)
    click.echo(emitter.confirm_msg)
    return emitter.confirm_msg
