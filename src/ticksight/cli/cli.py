"""
TickSight CLI - tick sighting tracker
"""

import click

from ticksight import __version__

from .commands import (
    activity,
    cache,
    config,
    list_sightings,
    list_species,
    report_sighting,
    share,
    show_sighting,
)


@click.group()
@click.version_option(version=__version__, prog_name="ticksight")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file (overrides the standard search paths)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(config_path: str, verbose: bool) -> None:
    """TickSight - UK tick sightings tracker

    Use 'ticksight COMMAND --help' for more information on a command.
    """
    from ticksight.cli.service_helpers import reset_factory
    from ticksight.core.config import get_config, load_config_cascade, set_config
    from ticksight.core.logger import set_level

    if config_path:
        set_config(load_config_cascade(config_path))
        reset_factory()

    set_level("DEBUG" if verbose else get_config().get("logging", "level", "WARNING"))


# Register commands
cli.add_command(list_sightings)
cli.add_command(show_sighting)
cli.add_command(list_species)
cli.add_command(report_sighting)
cli.add_command(activity)
cli.add_command(share)
cli.add_command(cache)
cli.add_command(config)


if __name__ == "__main__":
    cli()
