"""Command-line interface for Larder."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Optional

import typer

from larder.models.snapshot import KitchenSnapshot
from larder.services import plan_week, refresh_shopping_list
from larder.store import InMemoryStore

app = typer.Typer(help="Larder meal-planning commands.")


def _load_store(snapshot_path: str) -> InMemoryStore:
    with open(snapshot_path, "r", encoding="utf-8") as fh:
        payload = json.load(fh)
    return InMemoryStore.from_snapshot(KitchenSnapshot.model_validate(payload))


def _echo_json(payload: Any, pretty: bool) -> None:
    if pretty:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        typer.echo(json.dumps(payload))


def _parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got '{value}'") from exc


@app.command("plan-week")
def plan_week_command(
    snapshot_path: str,
    week_offset: int = typer.Option(0, "--week-offset", help="Weeks relative to the current one."),
    today: Optional[str] = typer.Option(
        None,
        "--today",
        help="Reference date (YYYY-MM-DD) used to pick the week.",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Plan Monday to Friday dinners for the kitchen snapshot JSON file.
    """
    store = _load_store(snapshot_path)
    plans = plan_week(store, week_offset, _parse_today(today))
    _echo_json([plan.model_dump(mode="json") for plan in plans], pretty)


@app.command("shopping-list")
def shopping_list_command(
    snapshot_path: str,
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Build the shopping list for the meal plans in the kitchen snapshot JSON file.
    """
    store = _load_store(snapshot_path)
    items = refresh_shopping_list(store)
    _echo_json([item.model_dump(mode="json") for item in items], pretty)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m larder`."""
    app(prog_name="larder", args=argv)


if __name__ == "__main__":
    main()
