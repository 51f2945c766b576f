"""
CLI — a thin operator wrapper around EventManager.

Commands:
    pager init       — Save the integration key and defaults
    pager trigger    — Trigger (or re-trigger) an incident
    pager resolve    — Resolve an incident by its dedup key
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

from pagerevents import __version__
from pagerevents.config import PAGER_CONFIG_FILE, PagerConfig, load_config, save_config
from pagerevents.errors import PagerEventsError
from pagerevents.events import EventSeverity
from pagerevents.manager import EventManager

console = Console()

_SEVERITIES = [s.value for s in EventSeverity]


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=PAGER_CONFIG_FILE,
    show_default=True,
    help="Config file",
)
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP activity")
@click.pass_context
def main(ctx: click.Context, config_path: Path, verbose: bool) -> None:
    """pager — trigger and resolve PagerDuty incidents."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
    ctx.obj = config_path


def _manager(config: PagerConfig, key: str | None) -> EventManager:
    integration_key = key or config.integration_key
    if not integration_key:
        console.print("[red]Error: No integration key. Run 'pager init' or pass --key.[/red]")
        sys.exit(2)
    return EventManager(integration_key)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


@main.command()
@click.pass_obj
def init(config_path: Path) -> None:
    """Interactive setup — integration key and event defaults."""
    current = load_config(config_path)

    console.print("\n[bold green]pager setup[/bold green]\n")

    key = Prompt.ask(
        "  Integration key",
        password=True,
        default=current.integration_key,
        show_default=False,
    )
    source = Prompt.ask("  Default source", default=current.default_source)
    severity = Prompt.ask(
        "  Default severity",
        choices=_SEVERITIES,
        default=current.default_severity.value,
    )

    save_config(
        PagerConfig(
            integration_key=key,
            default_source=source,
            default_severity=EventSeverity(severity),
        ),
        config_path,
    )
    console.print(f"\n[green]>[/green] Config saved to {config_path}\n")


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@main.command()
@click.argument("summary")
@click.option("--source", "-s", default=None, help="Affected host or component")
@click.option("--severity", type=click.Choice(_SEVERITIES), default=None)
@click.option("--event-id", default=None, help="Dedup key of an incident to re-trigger")
@click.option("--key", default=None, help="Integration key (overrides config)")
@click.pass_obj
def trigger(
    config_path: Path,
    summary: str,
    source: str | None,
    severity: str | None,
    event_id: str | None,
    key: str | None,
) -> None:
    """Trigger an incident and print its dedup key."""
    config = load_config(config_path)
    source = source or config.default_source
    if not source:
        console.print("[red]Error: Provide --source or set a default with 'pager init'.[/red]")
        sys.exit(2)

    with _manager(config, key) as events:
        try:
            dedup_key = events.trigger(
                event_id,
                summary,
                source,
                EventSeverity(severity) if severity else config.default_severity,
            )
        except PagerEventsError as exc:
            console.print(f"[red]Trigger failed: {exc}[/red]")
            sys.exit(1)

    click.echo(dedup_key)


@main.command()
@click.argument("event_id")
@click.option("--key", default=None, help="Integration key (overrides config)")
@click.pass_obj
def resolve(config_path: Path, event_id: str, key: str | None) -> None:
    """Resolve the incident identified by EVENT_ID."""
    config = load_config(config_path)

    with _manager(config, key) as events:
        try:
            events.resolve(event_id)
        except PagerEventsError as exc:
            console.print(f"[red]Resolve failed: {exc}[/red]")
            sys.exit(1)

    console.print(f"[green]>[/green] Resolved {event_id}")


if __name__ == "__main__":
    main()
