import logging

import click

from .cli_utils import load_target
from .outline import render_outline


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def json_schema_model(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@json_schema_model.command()
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True), help="Write the outline to a file")
@click.argument("target", type=str)
def outline(output, target):
    """Print the outline of a Model or Schema given as MODULE:ATTRIBUTE."""
    out = render_outline(load_target(target))
    if output is None:
        click.echo(out, nl=False)
        return

    with open(output, "w") as f:
        f.write(out)
