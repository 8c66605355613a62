"""
Command-line interface for the Sportmonks API SDK.
"""

import json
from datetime import datetime
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .client import SportmonksClient
from .config import Settings
from .errors import BadStatusError, RateLimitError, SportmonksError
from .models.common import ResponseDetails
from .models.fixture import Fixture

app = typer.Typer(
    name="sportmonks",
    help="Sportmonks API SDK - Command Line Interface",
    no_args_is_help=True,
)
console = Console()

DATE_FORMATS = ["%Y-%m-%d"]

IncludeOption = typer.Option(
    None, "--include", "-i", help="Relation to include (repeatable)"
)
FilterOption = typer.Option(
    None, "--filter", "-f", help="Filter as name=1,2,3 (repeatable)"
)
JsonOption = typer.Option(False, "--json", help="Print the raw response data as JSON")


def parse_filters(raw: Optional[list[str]]) -> dict[str, list[int]]:
    """Parse ``name=1,2,3`` options into a filter mapping."""
    filters: dict[str, list[int]] = {}

    for item in raw or []:
        name, sep, values = item.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"Expected name=1,2,3, got '{item}'")
        try:
            filters[name] = [int(v) for v in values.split(",") if v.strip()]
        except ValueError:
            raise typer.BadParameter(f"Filter values must be integers: '{item}'")

    return filters


def handle_api_error(e: Exception) -> None:
    """Print an API error and exit."""
    if isinstance(e, RateLimitError):
        console.print(f"[red]Rate limit reached: {e.message or 'no message'}[/red]")
        if e.resets_in_seconds is not None:
            console.print(f"[yellow]Quota resets in {e.resets_in_seconds}s[/yellow]")
    elif isinstance(e, BadStatusError):
        console.print(f"[red]Request failed with status {e.status_code}: {e.message or 'no message'}[/red]")
    elif isinstance(e, httpx.TimeoutException):
        console.print(f"[red]Request timed out: {e}[/red]")
    else:
        console.print(f"[red]Error: {e}[/red]")
    raise typer.Exit(1)


def get_client() -> SportmonksClient:
    """Get configured client instance."""
    try:
        settings = Settings()
        return SportmonksClient(settings)
    except Exception as e:
        console.print(f"[red]Error creating client: {e}[/red]")
        raise typer.Exit(1)


def print_details(details: ResponseDetails) -> None:
    rate_limit = details.rate_limit
    if rate_limit.remaining is not None:
        console.print(
            f"[dim]{rate_limit.remaining} calls remaining for "
            f"{rate_limit.requested_entity or 'entity'}, resets in {rate_limit.resets_in_seconds}s[/dim]"
        )
    if details.pagination is not None and details.pagination.has_more:
        console.print(f"[dim]More results: page {details.pagination.current_page + 1}[/dim]")


def print_fixtures(fixtures: list[Fixture], title: str) -> None:
    if not fixtures:
        console.print("[yellow]No fixtures found.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Fixture", style="white")
    table.add_column("Kick-off", justify="center")
    table.add_column("Result")

    for fixture in fixtures:
        table.add_row(
            str(fixture.id),
            fixture.name,
            fixture.starting_at or "TBD",
            fixture.result_info or "",
        )

    console.print(table)


def print_json(data) -> None:
    if isinstance(data, list):
        payload = [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in data]
    elif data is None:
        payload = None
    else:
        payload = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    console.print_json(json.dumps(payload))


@app.command()
def fixture(
    fixture_id: int = typer.Argument(help="Fixture ID"),
    include: Optional[list[str]] = IncludeOption,
    filter_opts: Optional[list[str]] = FilterOption,
    as_json: bool = JsonOption,
) -> None:
    """Get a single fixture."""

    filters = parse_filters(filter_opts)

    with get_client() as client:
        try:
            data, details = client.fixtures.get_fixture(fixture_id, include, filters)
        except (SportmonksError, httpx.HTTPError) as e:
            handle_api_error(e)

    if as_json:
        print_json(data)
        return

    if data is None:
        console.print(f"[yellow]Fixture {fixture_id} not found.[/yellow]")
        return

    info_text = f"""
[cyan]Fixture:[/cyan] {data.name}
[cyan]ID:[/cyan] {data.id}
[cyan]Kick-off:[/cyan] {data.starting_at or 'TBD'}
[cyan]League:[/cyan] {data.league.name if data.league else data.league_id}
[cyan]Season:[/cyan] {data.season.name if data.season else data.season_id}
[cyan]Result:[/cyan] {data.result_info or 'Unknown'}
    """.strip()

    if data.venue is not None:
        info_text += f"\n[cyan]Venue:[/cyan] {data.venue.name}"

    panel = Panel(info_text, title="Fixture Information", border_style="blue")
    console.print(panel)
    print_details(details)


@app.command()
def fixtures_date(
    day: datetime = typer.Argument(help="Date (YYYY-MM-DD)", formats=DATE_FORMATS),
    include: Optional[list[str]] = IncludeOption,
    filter_opts: Optional[list[str]] = FilterOption,
    as_json: bool = JsonOption,
) -> None:
    """List fixtures played on a date."""

    filters = parse_filters(filter_opts)

    with get_client() as client:
        try:
            data, details = client.fixtures.get_fixtures_by_date(day, include, filters)
        except (SportmonksError, httpx.HTTPError) as e:
            handle_api_error(e)

    if as_json:
        print_json(data)
        return

    print_fixtures(data, f"Fixtures on {day:%Y-%m-%d}")
    print_details(details)


@app.command()
def fixtures_between(
    start: datetime = typer.Argument(help="Start date (YYYY-MM-DD)", formats=DATE_FORMATS),
    end: datetime = typer.Argument(help="End date (YYYY-MM-DD)", formats=DATE_FORMATS),
    team: Optional[int] = typer.Option(None, "--team", help="Only fixtures for this team ID"),
    include: Optional[list[str]] = IncludeOption,
    filter_opts: Optional[list[str]] = FilterOption,
    as_json: bool = JsonOption,
) -> None:
    """List fixtures between two dates, optionally for one team."""

    filters = parse_filters(filter_opts)

    with get_client() as client:
        try:
            if team is None:
                data, details = client.fixtures.get_fixtures_between(start, end, include, filters)
            else:
                data, details = client.fixtures.get_fixtures_between_for_team(
                    start, end, team, include, filters
                )
        except (SportmonksError, httpx.HTTPError) as e:
            handle_api_error(e)

    if as_json:
        print_json(data)
        return

    print_fixtures(data, f"Fixtures {start:%Y-%m-%d} to {end:%Y-%m-%d}")
    print_details(details)


@app.command()
def head_to_head(
    team_one: int = typer.Argument(help="First team ID"),
    team_two: int = typer.Argument(help="Second team ID"),
    include: Optional[list[str]] = IncludeOption,
    as_json: bool = JsonOption,
) -> None:
    """List fixtures played between two teams."""

    with get_client() as client:
        try:
            data, details = client.fixtures.get_head_to_head(team_one, team_two, include)
        except (SportmonksError, httpx.HTTPError) as e:
            handle_api_error(e)

    if as_json:
        print_json(data)
        return

    print_fixtures(data, f"Head to head: {team_one} vs {team_two}")
    print_details(details)


@app.command()
def league(
    league_id: int = typer.Argument(help="League ID"),
    include: Optional[list[str]] = IncludeOption,
    as_json: bool = JsonOption,
) -> None:
    """Get a single league."""

    with get_client() as client:
        try:
            data, details = client.leagues.get_league(league_id, include)
        except (SportmonksError, httpx.HTTPError) as e:
            handle_api_error(e)

    if as_json:
        print_json(data)
        return

    if data is None:
        console.print(f"[yellow]League {league_id} not found.[/yellow]")
        return

    info_text = f"""
[cyan]League:[/cyan] {data.name}
[cyan]ID:[/cyan] {data.id}
[cyan]Code:[/cyan] {data.short_code or 'Unknown'}
[cyan]Type:[/cyan] {data.type or 'Unknown'}
[cyan]Active:[/cyan] {'yes' if data.active else 'no'}
    """.strip()

    console.print(Panel(info_text, title="League Information", border_style="blue"))
    print_details(details)


@app.command()
def team(
    team_id: int = typer.Argument(help="Team ID"),
    include: Optional[list[str]] = IncludeOption,
    as_json: bool = JsonOption,
) -> None:
    """Get a single team."""

    with get_client() as client:
        try:
            data, details = client.teams.get_team(team_id, include)
        except (SportmonksError, httpx.HTTPError) as e:
            handle_api_error(e)

    if as_json:
        print_json(data)
        return

    if data is None:
        console.print(f"[yellow]Team {team_id} not found.[/yellow]")
        return

    info_text = f"""
[cyan]Team:[/cyan] {data.name}
[cyan]ID:[/cyan] {data.id}
[cyan]Code:[/cyan] {data.short_code or 'Unknown'}
[cyan]Founded:[/cyan] {data.founded or 'Unknown'}
    """.strip()

    console.print(Panel(info_text, title="Team Information", border_style="blue"))
    print_details(details)


@app.command()
def version() -> None:
    """Show version information."""

    from . import __version__

    info_text = f"""
[cyan]Sportmonks API SDK[/cyan]
[white]Version:[/white] {__version__}
    """.strip()

    console.print(Panel(info_text, title="Version Info", border_style="blue"))


if __name__ == "__main__":
    app()
