# src/cli/run_maze.py

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from app.logging_config import configure_logging
from app.runtime import RouteReport, run_scenario
from env.loader import DEFAULT_SCENARIOS_PATH, load_scenario
from interfaces.types import CellCode, Location
from monitoring.bus import EventBus
from monitoring.logger import JsonFileLogger
from pathing.astar import a_star_search
from pathing.diagram import came_from_diagram
from pathing.errors import PathingError

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_ERROR = 2

# glyph, style per cell code
CELL_STYLES = {
    CellCode.OPEN: ("·", "yellow"),
    CellCode.WALL: ("█", "grey50"),
    CellCode.FOREST: ("♣", "green"),
    CellCode.PATH: ("●", "bold red"),
}


def _parse_location(raw: str) -> Location:
    try:
        x, y = (int(part) for part in raw.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {raw!r}") from None
    return Location(x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run A* over a grid scenario and print the encoded maze."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_SCENARIOS_PATH,
        help="Path to scenarios.yaml",
    )
    parser.add_argument("--scenario", default=None, help="Scenario name (defaults to the active one)")
    parser.add_argument("--start", type=_parse_location, default=None, help="Override start as X,Y")
    parser.add_argument("--goal", type=_parse_location, default=None, help="Override goal as X,Y")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Root log level",
    )
    parser.add_argument("--events-log", type=Path, default=None, help="Write trace events as JSONL here")
    parser.add_argument("--arrows", action="store_true", help="Also print the came-from arrow diagram")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON only")
    return parser


def render_maze(report: RouteReport) -> Text:
    text = Text()
    for row in report.maze:
        for code in row:
            glyph, style = CELL_STYLES[CellCode(code)]
            text.append(glyph + " ", style=style)
        text.append("\n")
    return text


def _summary(report: RouteReport) -> str:
    result = report.result
    if result.success:
        return f"path: {len(result.path)} nodes, cost {result.cost:.1f}"
    return f"no path ({result.reason})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    console = Console()
    bus = EventBus()
    sink: Optional[JsonFileLogger] = None
    if args.events_log is not None:
        sink = JsonFileLogger(args.events_log, bus)

    try:
        try:
            scenario = load_scenario(args.scenario, path=args.config)
        except (FileNotFoundError, KeyError, ValueError) as exc:
            log.error("Could not load scenario: %s", exc)
            return EXIT_ERROR

        if args.start is not None:
            scenario.start = args.start
        if args.goal is not None:
            scenario.goal = args.goal

        try:
            report = run_scenario(scenario, bus=bus)
        except PathingError as exc:
            log.error("Search rejected: %s", exc)
            return EXIT_ERROR
    finally:
        if sink is not None:
            sink.close()

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, sort_keys=True))
    else:
        console.print(Panel(render_maze(report), title=f"scenario: {report.scenario}", expand=False))
        console.print(_summary(report))
        if args.arrows:
            search = a_star_search(report.grid, scenario.start, scenario.goal)
            console.print(came_from_diagram(report.grid, search.came_from), markup=False, highlight=False)

    return EXIT_OK if report.result.success else EXIT_NO_PATH


if __name__ == "__main__":
    raise SystemExit(main())
