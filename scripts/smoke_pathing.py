# scripts/smoke_pathing.py

from __future__ import annotations

import sys
import time
from pathlib import Path

# ---------------------------------------------------------------------------
# Make sure src/ is on sys.path so imports like `pathing` and `env` work
# when running this script directly from the project root.
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from app.logging_config import configure_logging
from app.runtime import run_scenario, run_traversal
from env.loader import load_scenario
from monitoring.bus import EventBus
from pathing.diagram import terrain_diagram
from pathing.graphs import AdjacencyGraph


def main() -> int:
    configure_logging()

    bus = EventBus()
    bus.subscribe(lambda evt: print(f"  [{evt.event_type.name}] {evt.message}"))

    print("BFS over the five-node example graph:\n")
    graph = AdjacencyGraph(
        edges={
            "A": ["B"],
            "B": ["A", "C", "D"],
            "C": ["A"],
            "D": ["E", "A"],
            "E": ["B"],
        }
    )
    order = run_traversal(graph, "A", bus=bus)

    print("\nA* over every shipped scenario:\n")
    failures = 0
    for name in ("open_10x10", "diagram4", "rat_maze"):
        scenario = load_scenario(name)
        start = time.time()
        report = run_scenario(scenario, bus=bus)
        elapsed = time.time() - start

        print(terrain_diagram(report.grid, report.result.path))
        print(f"{name}: success={report.result.success} cost={report.result.cost} "
              f"elapsed={elapsed * 1000:.2f}ms\n")
        if not report.result.success:
            failures += 1

    # Weak sanity checks
    if order != ["A", "B", "C", "D", "E"]:
        print("[WARN] unexpected BFS order:", order)
        failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
