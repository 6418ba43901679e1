"""CLI startup entrypoint for the long-term planner."""

from __future__ import annotations

import typer
from rich import print

from longterm_planner.cli import CliPlanHandler, parse_actions
from longterm_planner.config import settings
from longterm_planner.models import ActionNotApplicableError, GameState
from longterm_planner.planner import LongTermPlanner
from longterm_planner.telemetry import LoggingTelemetry, configure_logging

app = typer.Typer(help="Long-term build order planner")


def _build_handler(wait_ticks: int | None = None, max_iterations: int | None = None) -> CliPlanHandler:
    configure_logging(settings.log_level)
    overrides: dict[str, int] = {}
    if wait_ticks is not None:
        overrides["wait_ticks"] = wait_ticks
    if max_iterations is not None:
        overrides["max_iterations"] = max_iterations
    config = settings.model_copy(update=overrides)
    return CliPlanHandler(LongTermPlanner.from_settings(config, telemetry=LoggingTelemetry()))


@app.command()
def start() -> None:
    """Show the effective planner configuration."""
    print(settings.model_dump())


@app.command()
def plan(
    gold: int = typer.Option(0, help="Initial gold"),
    gold_per_tick: int = typer.Option(1, help="Initial gold income per tick"),
    stone: int = typer.Option(0, help="Initial stone"),
    stone_per_tick: int = typer.Option(0, help="Initial stone income per tick"),
    target_gold: int = typer.Option(0, help="Target gold"),
    target_gold_per_tick: int = typer.Option(0, help="Target gold income per tick"),
    target_stone: int = typer.Option(0, help="Target stone"),
    target_stone_per_tick: int = typer.Option(0, help="Target stone income per tick"),
    wait_ticks: int = typer.Option(None, help="Override the wait width in ticks"),
    max_iterations: int = typer.Option(None, help="Override the search budget"),
) -> None:
    """Search for a build order that reaches the target resources."""
    if wait_ticks is not None and wait_ticks <= 0:
        raise typer.BadParameter("--wait-ticks must be positive")
    if max_iterations is not None and max_iterations <= 0:
        raise typer.BadParameter("--max-iterations must be positive")

    handler = _build_handler(wait_ticks=wait_ticks, max_iterations=max_iterations)
    initial = GameState(gold=gold, gold_per_tick=gold_per_tick, stone=stone, stone_per_tick=stone_per_tick)
    target = GameState(
        gold=target_gold,
        gold_per_tick=target_gold_per_tick,
        stone=target_stone,
        stone_per_tick=target_stone_per_tick,
    )
    found, payload = handler.plan(initial, target)
    print(payload)
    if not found:
        raise typer.Exit(code=1)


@app.command()
def replay(
    actions: str = typer.Argument(..., help="Comma-separated actions, e.g. wait,build_bank"),
    gold: int = typer.Option(0, help="Initial gold"),
    gold_per_tick: int = typer.Option(1, help="Initial gold income per tick"),
    stone: int = typer.Option(0, help="Initial stone"),
    stone_per_tick: int = typer.Option(0, help="Initial stone income per tick"),
    wait_ticks: int = typer.Option(None, help="Override the wait width in ticks"),
) -> None:
    """Apply a sequence of actions and report where it ends up."""
    if wait_ticks is not None and wait_ticks <= 0:
        raise typer.BadParameter("--wait-ticks must be positive")

    try:
        parsed = parse_actions(actions)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    handler = _build_handler(wait_ticks=wait_ticks)
    initial = GameState(gold=gold, gold_per_tick=gold_per_tick, stone=stone, stone_per_tick=stone_per_tick)
    try:
        payload = handler.replay(initial, parsed)
    except ActionNotApplicableError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print(payload)


if __name__ == "__main__":
    app()
