"""CLI entry point for the task board."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from taskboard.board import BoardController, BoardData, BoardState, GroupingMode, SortingMode
from taskboard.config import BoardConfig, ConfigError, load_config
from taskboard.logging import setup_logging
from taskboard.preferences import PreferenceStore, PreferenceStoreError
from taskboard.source import BoardDataSource, load_board_data, parse_board_document

config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to taskboard.yaml (auto-detected if not specified)",
)


def _load_config(config_path: Path | None) -> BoardConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _read_data_file(path: Path) -> BoardData:
    try:
        document = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        click.echo(f"Error: cannot read {path}: {e}", err=True)
        sys.exit(1)
    if not isinstance(document, dict):
        click.echo(f"Error: {path} must contain a JSON object", err=True)
        sys.exit(1)
    return parse_board_document(document)


def render_board(state: BoardState) -> str:
    """Render the board as plain-text columns."""
    lines: list[str] = []
    for label, tickets in state.groups.items():
        lines.append(f"{label} ({len(tickets)})")
        for ticket in tickets:
            tags = f"  [{', '.join(ticket.tags)}]" if ticket.tags else ""
            lines.append(f"  {ticket.id}  {ticket.title}{tags}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


@click.group()
@click.version_option(package_name="taskboard")
def main() -> None:
    """Task board - group, sort and reorder tickets."""
    pass


@main.command()
@config_option
@click.option(
    "--group-by",
    "grouping",
    type=click.Choice([m.value for m in GroupingMode]),
    default=None,
    help="Grouping mode (saved for next time; default: last used, or status)",
)
@click.option(
    "--sort-by",
    "sorting",
    type=click.Choice([m.value for m in SortingMode]),
    default=None,
    help="Sorting mode within each group (not saved)",
)
@click.option(
    "--data-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read tickets and users from a JSON file instead of the data URL",
)
@click.option("--json", "as_json", is_flag=True, help="Print the board as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Also log to the console")
def show(
    config_path: Path | None,
    grouping: str | None,
    sorting: str | None,
    data_file: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Print the board."""
    config = _load_config(config_path)
    setup_logging(config, console=verbose)

    if data_file is not None:
        data = _read_data_file(data_file)
    else:
        source = BoardDataSource(config.data_url, timeout=config.fetch_timeout)
        try:
            data = load_board_data(source)
        finally:
            source.close()

    try:
        preferences = PreferenceStore(config.db_path)
    except PreferenceStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        controller = BoardController(preferences=preferences, data=data)
        if grouping is not None:
            controller.set_grouping(GroupingMode(grouping))
        if sorting is not None:
            controller.set_sorting(SortingMode(sorting))
        state = controller.state
    except PreferenceStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        preferences.close()

    if as_json:
        click.echo(json.dumps(state.to_dict(), indent=2))
    else:
        click.echo(render_board(state), nl=False)


@main.command()
@config_option
@click.option("--host", default=None, help="Interface to bind (default: from config)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: from config)")
def serve(config_path: Path | None, host: str | None, port: int | None) -> None:
    """Run the REST API server."""
    import uvicorn  # noqa: PLC0415

    from taskboard.api import create_app  # noqa: PLC0415

    config = _load_config(config_path)
    setup_logging(config, console=True)

    uvicorn.run(
        create_app(config),
        host=host or config.host,
        port=port or config.port,
    )


if __name__ == "__main__":
    main()
