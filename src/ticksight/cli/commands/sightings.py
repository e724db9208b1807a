"""Sighting commands: browse, filter, inspect, and report tick sightings."""

import click

from ticksight.core.constants import SEVERITY_LEVELS

SEVERITY_CHOICES = list(SEVERITY_LEVELS) + ["Med"]


def _load_tracker(quiet: bool = False):
    """Fetch sightings into the shared tracker, reporting any fallback."""
    from ticksight.cli.progress import LoadingIndicator, print_warning
    from ticksight.cli.service_helpers import get_tracker, handle_result

    tracker = get_tracker()
    result = tracker.initialize(on_loading=LoadingIndicator("Loading sightings...", disable=quiet))
    handle_result(result)
    if not quiet:
        for warning in result.warnings:
            print_warning(warning)
    return tracker


@click.command("list")
@click.option("--date", "date_prefix", default=None, help="Date prefix, e.g. 2024 or 2024-11")
@click.option("--species", "-s", default=None, help="Exact species name")
@click.option("--severity", type=click.Choice(SEVERITY_CHOICES), default=None, help="Severity level")
@click.option("--json", "as_json", is_flag=True, help="Print sightings as JSON")
def list_sightings(date_prefix: str, species: str, severity: str, as_json: bool) -> None:
    """List sightings matching the given filters."""
    import json

    from ticksight.cli.progress import console, print_table
    from ticksight.core.filters import FilterCriteria

    tracker = _load_tracker(quiet=as_json)
    visible = tracker.apply_filters(
        FilterCriteria(date_prefix=date_prefix, species=species, severity=severity)
    )
    now = tracker.now()

    if as_json:
        payload = []
        for sighting in visible:
            record = sighting.to_api_payload()
            record["severity"] = sighting.effective_severity(now)
            payload.append(record)
        click.echo(json.dumps(payload, indent=2))
        return

    if tracker.results.is_empty:
        click.echo(tracker.results.empty_message)
        return

    rows = [
        [card.sighting_id, card.date, card.location, card.species, card.severity]
        for card in tracker.results.cards
    ]
    print_table(
        f"Tick Sightings ({len(rows)})",
        ["ID", "Date", "Location", "Species", "Severity"],
        rows,
    )
    console.print(f"[dim]{len(tracker.markers.ids)} of {len(rows)} sightings mapped[/dim]")


@click.command("show")
@click.argument("sighting_id")
def show_sighting(sighting_id: str) -> None:
    """Show the details of one sighting."""
    from ticksight.cli.progress import console
    from ticksight.cli.service_helpers import exit_with_error

    tracker = _load_tracker()
    details = tracker.select(sighting_id)
    if details is None:
        exit_with_error(f"Sighting not found: {sighting_id}")

    sighting = details.sighting
    console.print(f"\n[bold]{sighting.species}[/bold] [dim]({details.latin_name})[/dim]\n")
    console.print(f"  Location: {sighting.location}")
    console.print(f"  Date:     {details.date}")
    console.print(f"  Time:     {details.time}")
    console.print(f"  Severity: {details.severity}")
    if sighting.has_coordinates:
        console.print(f"  Coords:   {sighting.lat}, {sighting.lng}")
    if sighting.notes:
        console.print(f"  Notes:    {sighting.notes}")
    console.print(f"  Directions: {tracker.directions_url()}", soft_wrap=True)

    if details.show_timeline:
        console.print(f"\n[bold]Recent sightings in {sighting.location}[/bold]")
        for entry in details.timeline:
            console.print(f"  {entry.formatted_date}  {entry.species}")
    console.print()


@click.command("species")
def list_species() -> None:
    """List the species present in the sightings, with Latin names."""
    from ticksight.core.constants import get_latin_name

    tracker = _load_tracker()
    for name in tracker.species_options():
        click.echo(f"{name} ({get_latin_name(name)})")


@click.command("report")
@click.option("--date", default="", help="Sighting date (YYYY-MM-DD)")
@click.option("--time", "time_", default="", help="Sighting time (HH:MM)")
@click.option("--location", "-l", default="", help="Location name")
@click.option("--species", "-s", default="", help="Species name")
@click.option("--severity", default="", help="Severity level")
@click.option("--notes", default="", help="Free-text notes")
@click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Photo of the tick (max 5MB)",
)
def report_sighting(
    date: str,
    time_: str,
    location: str,
    species: str,
    severity: str,
    notes: str,
    image: str,
) -> None:
    """Report a new tick sighting.

    If the sightings service is unavailable the report is saved locally and
    shown alongside the remote sightings.
    """
    import os

    from ticksight.cli.progress import LoadingIndicator, print_error, print_success, print_warning
    from ticksight.cli.service_helpers import exit_with_error, get_tracker
    from ticksight.models.sighting import SightingForm

    form = SightingForm(
        date=date,
        time=time_,
        location=location,
        species=species,
        severity=severity,
        notes=notes,
        image_path=image,
        image_size=os.path.getsize(image) if image else None,
    )

    tracker = get_tracker()
    result = tracker.report(form, on_loading=LoadingIndicator("Submitting..."))
    if not result.success:
        for field_name, message in result.metadata.get("errors", {}).items():
            print_error(f"{field_name}: {message}")
        exit_with_error(result.error or "Unknown error")

    submission = result.data
    if submission.saved_remotely:
        print_success(submission.message)
    else:
        print_warning(submission.message)
    click.echo(f"ID: {submission.sighting.id}")


@click.command("activity")
@click.option("--city", default=None, help="Only count sightings in this location")
@click.option("--year", default=None, help="Only count sightings in this year")
@click.option("--output", "-o", default=None, help="Save the chart to a PNG/JPEG file")
def activity(city: str, year: str, output: str) -> None:
    """Show monthly sighting counts."""
    from ticksight.cli.progress import print_success, print_table

    tracker = _load_tracker()
    seasonal = tracker.seasonal_activity(city=city, year=year)

    print_table(
        seasonal.title,
        ["Month", "Sightings"],
        [[label, count] for label, count in zip(seasonal.labels, seasonal.counts)],
    )
    click.echo(f"Total: {seasonal.total}")

    if output:
        from ticksight.core.visualize import plot_seasonal_activity

        path = plot_seasonal_activity(seasonal, output)
        print_success(f"Saved chart to {path}")


@click.command("share")
@click.argument("sighting_id")
@click.option("--url", "page_url", default="", help="Page URL to append to the message")
def share(sighting_id: str, page_url: str) -> None:
    """Print share text and a directions link for a sighting."""
    from ticksight.cli.service_helpers import exit_with_error

    tracker = _load_tracker()
    if tracker.select(sighting_id) is None:
        exit_with_error(f"Sighting not found: {sighting_id}")

    click.echo(tracker.share_text(page_url))
    click.echo(tracker.directions_url())
