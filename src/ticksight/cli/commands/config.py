"""Configuration management commands."""

import click


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    from ticksight.cli.progress import console
    from ticksight.cli.service_helpers import get_factory

    config_obj = get_factory().config

    console.print("\n[bold]Current Configuration[/bold]")
    if config_obj._source:
        console.print(f"[dim]Source: {config_obj._source}[/dim]\n")
    else:
        console.print("[dim]Source: defaults (no config file found)[/dim]\n")

    for section_name, section in config_obj.to_dict().items():
        if section:
            console.print(f"[bold blue]\\[{section_name}][/bold blue]")
            for key, value in section.items():
                console.print(f"  {key} = {value}", soft_wrap=True)
            console.print()


@config.command("init")
@click.option("--output", "-o", default="ticksight.toml", help="Output file path")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file")
def config_init(output: str, force: bool) -> None:
    """Create a default configuration file."""
    from pathlib import Path

    from ticksight.cli.progress import print_error, print_success
    from ticksight.core.config import create_default_config_file

    if Path(output).exists() and not force:
        print_error(f"File already exists: {output}")
        click.echo("Use --force to overwrite.")
        raise SystemExit(1)

    path = create_default_config_file(output)
    print_success(f"Created configuration file: {path}")


@config.command("path")
def config_path() -> None:
    """Show configuration file search paths."""
    from ticksight.cli.progress import console
    from ticksight.core.config import get_config_locations

    console.print("\n[bold]Configuration File Search Paths[/bold]\n")
    console.print("Files are searched in order (first found wins):\n")
    for i, location in enumerate(get_config_locations(), 1):
        status = "[green]exists[/green]" if location.exists() else "[dim]not found[/dim]"
        console.print(f"  {i}. {location} {status}", soft_wrap=True)
    console.print()
