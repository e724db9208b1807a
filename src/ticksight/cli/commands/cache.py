"""Local sightings cache commands."""

import click


@click.group()
def cache() -> None:
    """Inspect sightings saved locally while the service was unavailable."""
    pass


@cache.command("list")
def cache_list() -> None:
    """List locally saved sightings."""
    from ticksight.cli.progress import print_table
    from ticksight.cli.service_helpers import services

    cached = services.cache.load_all()
    if not cached:
        click.echo("No locally saved sightings.")
        return

    print_table(
        f"Locally Saved Sightings ({len(cached)})",
        ["ID", "Date", "Location", "Species", "Severity"],
        [[s.id, s.formatted_date, s.location, s.species, s.severity or ""] for s in cached],
    )


@cache.command("path")
def cache_path() -> None:
    """Show the cache file location."""
    from ticksight.cli.service_helpers import services

    click.echo(str(services.cache.path))


@cache.command("clear")
@click.confirmation_option(prompt="Delete all locally saved sightings?")
def cache_clear() -> None:
    """Delete all locally saved sightings."""
    from ticksight.cli.progress import print_success
    from ticksight.cli.service_helpers import services

    removed = services.cache.clear()
    print_success(f"Removed {removed} locally saved sighting(s)")
