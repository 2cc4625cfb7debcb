"""Main CLI interface for the travel log."""

import click
from pathlib import Path
import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from travel_log.application.engine import TravelLogEngine
from travel_log.application.config import Config
from travel_log.domain.models import MONTH_NAMES
from travel_log.search.presentation import (
    CATEGORY_LABELS,
    describe,
    display_order,
    group_results,
)

console = Console()


def _parse_month(value: str) -> int:
    """Accept a month name, abbreviation or 1-12 number; return 0-11."""
    value = value.strip().lower()
    if value.isdigit() and 1 <= int(value) <= 12:
        return int(value) - 1
    for index, name in enumerate(MONTH_NAMES):
        if name.lower() == value or name.lower()[:3] == value:
            return index
    raise click.BadParameter(f"Unknown month: {value}")


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--storage-path', '-d', type=click.Path(), help='Directory for travel data')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, config, storage_path, verbose):
    """Travel Log - Record your travels and find them again."""
    ctx.ensure_object(dict)

    overrides = {}
    if storage_path:
        overrides['storage_path'] = Path(storage_path)
    if verbose:
        overrides['log_level'] = "DEBUG"

    # Load configuration
    if config:
        config_obj = Config.load_from_file(Path(config))
        if overrides:
            config_obj = Config(**{**config_obj.model_dump(), **overrides})
    else:
        config_obj = Config(**overrides)

    ctx.obj['config'] = config_obj
    ctx.obj['engine'] = TravelLogEngine(config_obj)


@cli.command()
@click.argument('year', type=int)
@click.argument('month')
@click.argument('location')
@click.option('--details', default='', help='Trip details')
@click.pass_context
def add(ctx, year, month, location, details):
    """Add a travel entry."""
    engine = ctx.obj['engine']

    try:
        entry = engine.add_entry(year, _parse_month(month), location, details)
        console.print(f"[green]Added {entry.location} ({entry.id})[/green]")
    except click.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]Error adding entry: {e}[/red]")


@cli.command()
@click.argument('year', type=int)
@click.argument('month')
@click.argument('entry_id')
@click.option('--location', required=True, help='New location')
@click.option('--details', default='', help='New details')
@click.option('--move-to', help='Move the entry to another month')
@click.pass_context
def edit(ctx, year, month, entry_id, location, details, move_to):
    """Edit a travel entry."""
    engine = ctx.obj['engine']

    try:
        new_month = _parse_month(move_to) if move_to else None
        entry = engine.update_entry(year, _parse_month(month), entry_id, location, details, new_month)
        console.print(f"[green]Updated {entry.location}[/green]")
    except click.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]Error editing entry: {e}[/red]")


@cli.command()
@click.argument('year', type=int)
@click.argument('month')
@click.argument('entry_id')
@click.pass_context
def remove(ctx, year, month, entry_id):
    """Delete a travel entry."""
    engine = ctx.obj['engine']

    try:
        if engine.remove_entry(year, _parse_month(month), entry_id):
            console.print(f"[green]Removed {entry_id}[/green]")
        else:
            console.print(f"[yellow]No entry {entry_id} found[/yellow]")
    except click.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]Error removing entry: {e}[/red]")


@cli.command(name='list')
@click.option('--year', '-y', type=int, help='Year to show (defaults to the latest)')
@click.pass_context
def list_entries(ctx, year):
    """Show the month grid for a year."""
    engine = ctx.obj['engine']

    try:
        engine.initialize()
        years = engine.store.years()
        if year is None:
            if not years:
                console.print("[yellow]No travels yet[/yellow]")
                return
            year = max(years)

        year_data = engine.store.get_year(year)

        table = Table(title=f"Travels in {year}")
        table.add_column("Month", style="cyan")
        table.add_column("Location", style="magenta")
        table.add_column("Details")
        table.add_column("ID", style="dim")

        for month, name in enumerate(MONTH_NAMES):
            entries = year_data.get(month, [])
            if not entries:
                table.add_row(name, "[dim]No travels yet[/dim]", "", "")
                continue
            for i, entry in enumerate(entries):
                table.add_row(name if i == 0 else "", entry.location, entry.details, entry.id)

        console.print(table)

    except Exception as e:
        console.print(f"[red]Error listing entries: {e}[/red]")


@cli.command()
@click.argument('query')
@click.option('--select', 'select_index', type=int, help='Choose the result at this position (1-based)')
@click.option('--format', 'output_format', default='rich',
              type=click.Choice(['rich', 'plain', 'json']))
@click.pass_context
def search(ctx, query, select_index, output_format):
    """Search travel entries, years and months."""
    engine = ctx.obj['engine']
    preview_length = ctx.obj['config'].search.details_preview_length

    try:
        if select_index is not None:
            action = engine.select(query, select_index - 1)
            if action is None:
                console.print("[yellow]No results found[/yellow]")
            else:
                click.echo(json.dumps(action.to_dict()))
            return

        results = display_order(engine.search(query))

        if output_format == 'json':
            output = {
                'query': query,
                'results': [describe(result, preview_length) for result in results]
            }
            click.echo(json.dumps(output, indent=2))
            return

        if not results:
            console.print("No results found")
            console.print("[dim]Try searching for locations, years, or months[/dim]")
            return

        if output_format == 'plain':
            for i, result in enumerate(results, 1):
                data = describe(result, preview_length)
                click.echo(f"{i}. [{data['type']}] {data['title']} - {data['subtitle']}")
            return

        table = Table(title=f"Results for: {query}")
        table.add_column("#", style="dim")
        table.add_column("Title", style="magenta")
        table.add_column("Subtitle")
        table.add_column("Score", style="yellow")

        position = 1
        for result_type, group in group_results(results).items():
            if not group:
                continue
            table.add_row("", f"[bold cyan]{CATEGORY_LABELS[result_type]}[/bold cyan]", "", "")
            for result in group:
                data = describe(result, preview_length)
                table.add_row(str(position), data['title'], data['subtitle'], str(result.score))
                position += 1

        console.print(table)

    except Exception as e:
        console.print(f"[red]Error during search: {e}[/red]")


@cli.command()
@click.option('--clear', is_flag=True, help='Forget all past searches')
@click.pass_context
def history(ctx, clear):
    """Show recent searches."""
    engine = ctx.obj['engine']

    try:
        if clear:
            engine.clear_history()
            console.print("[green]Search history cleared[/green]")
            return

        engine.initialize()
        if not len(engine.history):
            console.print("[dim]No recent searches[/dim]")
            return
        for i, item in enumerate(engine.history, 1):
            console.print(f"{i}. {item}")

    except Exception as e:
        console.print(f"[red]Error reading history: {e}[/red]")


@cli.command(name='export')
@click.argument('output', type=click.Path())
@click.pass_context
def export_data(ctx, output):
    """Export all travel data to a JSON file."""
    engine = ctx.obj['engine']

    try:
        path = engine.export_data(Path(output))
        console.print(f"[green]Exported travel data to {path}[/green]")
    except Exception as e:
        console.print(f"[red]Error exporting data: {e}[/red]")


@cli.command(name='import')
@click.argument('input_file', type=click.Path(exists=True))
@click.pass_context
def import_data(ctx, input_file):
    """Merge travel data from an exported JSON file."""
    engine = ctx.obj['engine']

    try:
        added = engine.import_data(Path(input_file))
        console.print(f"[green]Imported {added} entries[/green]")
    except Exception as e:
        console.print(f"[red]Error importing file: {e}[/red]")


@cli.command()
@click.pass_context
def stats(ctx):
    """Show store statistics."""
    engine = ctx.obj['engine']

    try:
        stats = engine.get_statistics()

        table = Table(title="Travel Log Statistics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="magenta")

        table.add_row("Total Entries", str(stats['total_entries']))
        table.add_row("Years", str(stats['years']))
        if stats['year_range']:
            table.add_row("Year Range", f"{stats['year_range'][0]} to {stats['year_range'][1]}")
        table.add_row("Recent Searches", str(stats['history_size']))
        table.add_row("Data File", stats['data_file'])

        console.print(table)

    except Exception as e:
        console.print(f"[red]Error getting statistics: {e}[/red]")


@cli.command()
@click.pass_context
def config_show(ctx):
    """Show current configuration."""
    config = ctx.obj['config']

    config_json = json.dumps(config.model_dump(mode="json"), indent=2)

    panel = Panel(
        config_json,
        title="Current Configuration",
        border_style="green"
    )
    console.print(panel)


@cli.command()
@click.option('--output', '-o', required=True, help='Output file path')
@click.pass_context
def config_save(ctx, output):
    """Save current configuration to file."""
    config = ctx.obj['config']
    output_path = Path(output)

    try:
        config.save_to_file(output_path)
        console.print(f"[green]Configuration saved to {output_path}[/green]")
    except Exception as e:
        console.print(f"[red]Error saving configuration: {e}[/red]")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
