"""CLI entry point for swagger-docgen."""

from pathlib import Path

import click

from swagger_docgen.config import build_params, load_config_file
from swagger_docgen.errors import DocgenError
from swagger_docgen.generator.dispatch import AVAILABLE_FORMATS
from swagger_docgen.pipeline import generate


@click.command()
@click.option("--api-package", default=None, help="The package that implements the API controllers, relative to $GOPATH/src.")
@click.option("--main-api-file", default=None, help="The file with the general API annotations, relative to $GOPATH/src. Defaults to <api-package>/main.go.")
@click.option("--format", "output_format", default=None, help=f"Output format: {'|'.join(AVAILABLE_FORMATS)}. Defaults to go.")
@click.option("--output", "output_spec", default=None, type=click.Path(path_type=Path), help="Output directory for the generated file(s).")
@click.option("--controller-class", default=None, help="Only parse methods whose pointer receiver type matches this regular expression.")
@click.option("--base-path", default=None, help="Base path written into every API declaration.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML file with default values for the options above.")
@click.pass_context
def main(ctx, api_package, main_api_file, output_format, output_spec, controller_class, base_path, config_path):
    """Generate Swagger documentation from annotated Go controllers."""
    try:
        options = load_config_file(config_path) if config_path else {}
        flags = {
            "api_package": api_package,
            "main_api_file": main_api_file,
            "output_format": output_format,
            "output_spec": output_spec,
            "controller_class": controller_class,
            "base_path": base_path,
        }
        options.update({k: v for k, v in flags.items() if v is not None})

        if not options.get("api_package"):
            click.echo(ctx.get_help())
            return

        generate(build_params(**options))
    except DocgenError as e:
        raise click.ClickException(str(e)) from e
