from __future__ import annotations

from .types import ResourceSpec

SLATE = ResourceSpec(
    key="slate",
    filename="slate.json",
    required=True,
    participates_in_lookback=False,
)

INJURIES = ResourceSpec(key="injuries", filename="injuries.json")
DEPTH_CHARTS = ResourceSpec(key="depth_charts", filename="nba_depth_charts.json")
STARTING_LINEUPS = ResourceSpec(key="starting_lineups", filename="nba_starting_lineups.json")
ROTATIONS = ResourceSpec(key="rotations", filename="rotations.json", history_gated=True)
BOXSCORES = ResourceSpec(key="boxscores", filename="boxscores.json", history_gated=True)
STATS = ResourceSpec(key="stats", filename="stats.json")

ALL_RESOURCES: tuple[ResourceSpec, ...] = (
    SLATE,
    INJURIES,
    DEPTH_CHARTS,
    STARTING_LINEUPS,
    ROTATIONS,
    BOXSCORES,
    STATS,
)

# Exactly one dataset is fetched without fallback and decides `ok`.
(REQUIRED_RESOURCE,) = (spec for spec in ALL_RESOURCES if spec.required)
OPTIONAL_RESOURCES: tuple[ResourceSpec, ...] = tuple(
    spec for spec in ALL_RESOURCES if not spec.required
)


def build_url(base_url: str, date_str: str, filename: str) -> str:
    """`<base>/<YYYY-MM-DD>/<filename>`"""

    return f"{base_url.rstrip('/')}/{date_str}/{filename}"
