"""Command line interface: ``polysplit [opts] INPUT OUTPUT``."""

import click

from .core.errors import PolysplitError
from .core.types import DEFAULT_DRIVER, DEFAULT_MAX_DEPTH, DEFAULT_MAX_VERTICES
from .io import MIN_MAX_VERTICES, split_file

__version__ = "0.1.0"


def _check_max_vertices(ctx, param, value):
    if value < MIN_MAX_VERTICES:
        raise click.BadParameter(f"must be greater than {MIN_MAX_VERTICES - 1}, got {value}")
    return value


@click.command()
@click.version_option(version=__version__, prog_name="polysplit")
@click.argument("source")
@click.argument("destination", type=click.Path())
@click.option("-i", "--input-layer", default=None, help="Input layer name (default: first layer)")
@click.option("-o", "--output-layer", default=None, help="Output layer name")
@click.option(
    "-f",
    "--format",
    "driver",
    default=DEFAULT_DRIVER,
    show_default=True,
    help="OGR output driver name",
)
@click.option("-n", "--id-field", default=None, help="ID field name (must be integer type)")
@click.option(
    "-m",
    "--max-vertices",
    type=int,
    default=DEFAULT_MAX_VERTICES,
    show_default=True,
    callback=_check_max_vertices,
    help="Max vertices per output polygon",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Stop subdividing after this many quadrant levels",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose mode")
def main(source, destination, input_layer, output_layer, driver, id_field,
         max_vertices, max_depth, verbose):
    """Split polygons in SOURCE into pieces of at most --max-vertices points.

    Every piece is written to DESTINATION with the ID of the feature it came
    from.
    """
    try:
        stats = split_file(
            source,
            destination,
            max_vertices=max_vertices,
            source_layer=input_layer,
            destination_layer=output_layer,
            driver=driver,
            id_field=id_field,
            max_depth=max_depth,
            verbose=verbose,
        )
    except PolysplitError as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(stats), err=True)


if __name__ == "__main__":
    main()
