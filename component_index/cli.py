"""CLI entry point for `s component`"""

import json
import logging
import os
from pathlib import Path

import click
from rich.console import Console

from component_index import __version__
from component_index.config import ROOT_HOME_ENV, get_config
from component_index.errors import DOCS_URL, HumanWarning, UnknownRegistryError
from component_index.logging_config import LOG_LEVEL_ENV, setup_logging
from component_index.registries import DEFAULT_REGISTRY, REGISTRIES, resolve_registry
from component_index.rendering import (
    build_detail_table,
    build_listing_table,
    delete_hint,
    detail_rows,
    listing_title,
)
from component_index.scanner import ComponentScanner

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

COMPONENT_HELP = f"""Get details of installed components.

\b
Example:
    $ s component
    $ s component --component fc-api

📖 Document: {DOCS_URL}
"""


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="s")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(verbose, debug):
    """Serverless Devs - inspect installed components"""
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    setup_logging(level)


@cli.command(
    help=COMPONENT_HELP,
    context_settings=dict(
        ignore_unknown_options=True,
        allow_extra_args=True,
        **CONTEXT_SETTINGS,
    ),
)
@click.option(
    "--component",
    "component_name",
    is_flag=False,
    flag_value="",
    metavar="[componentName]",
    help="Gets the specified component information (like: fc, devsapp/fc)",
)
@click.option(
    "--registry",
    help=(
        "Registry to look the component up in, used with --component only "
        "(URL or 'serverless'/'github'; default: set-config.yml)"
    ),
)
@click.option(
    "--root-home",
    type=click.Path(path_type=Path),
    envvar=ROOT_HOME_ENV,
    help="Override the tool home (default: ~/.s)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def component(ctx, component_name, registry, root_home, output_json):
    try:
        scanner = ComponentScanner(root_home=root_home)

        if component_name:
            _show_component(scanner, component_name, registry, output_json)
        elif component_name is None and not ctx.args:
            if registry:
                logger.debug("--registry %s is ignored when listing all components", registry)
            _show_all(scanner, output_json)
        else:
            click.echo(ctx.get_help())

    except HumanWarning as w:
        w.show()
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


def _show_all(scanner: ComponentScanner, output_json: bool) -> None:
    listings = scanner.scan_all()

    if output_json:
        click.echo(
            json.dumps(
                {
                    listing.registry.label: [entry.to_dict() for entry in listing.entries]
                    for listing in listings
                },
                indent=2,
            )
        )
        return

    console = Console()
    for listing in listings:
        console.print(listing_title(listing.registry))
        console.print(build_listing_table(listing.entries))


def _show_component(scanner: ComponentScanner, name: str, registry_value, output_json: bool) -> None:
    if not registry_value:
        registry_value = get_config("registry", DEFAULT_REGISTRY.url, root_home=scanner.root_home)

    registry = resolve_registry(registry_value)
    if registry is None:
        raise UnknownRegistryError(str(registry_value), [r.url for r in REGISTRIES])

    entry = scanner.lookup(name, registry)
    if entry is None:
        return

    if output_json:
        click.echo(json.dumps(dict(detail_rows(entry, registry)), indent=2))
        return

    console = Console()
    console.print(build_detail_table(entry, registry))
    console.print(delete_hint(name))


if __name__ == "__main__":
    cli()
