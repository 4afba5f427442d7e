from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Json = Any


def camel_key(key: str) -> str:
    """`starting_lineups` -> `startingLineups`"""

    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class ResourceSpec:
    """One dataset in the daily ecosystem.

    `key` is the Python-side name used in the bundle; `filename` is the
    object name under the date prefix.
    """

    key: str
    filename: str
    required: bool = False
    participates_in_lookback: bool = True
    history_gated: bool = False


# -----------------------------
# Raw fetch outcomes
# -----------------------------


@dataclass(frozen=True)
class FetchSuccess:
    data: Json
    last_modified: str | None = None


@dataclass(frozen=True)
class FetchNotFound:
    pass


@dataclass(frozen=True)
class FetchTransientError:
    message: str


FetchOutcome = FetchSuccess | FetchNotFound | FetchTransientError


# -----------------------------
# Resolution + bundle
# -----------------------------


@dataclass(frozen=True)
class ResolvedResource:
    data: Json | None
    as_of_date: str
    source_url: str
    last_modified: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class HistoryData:
    rotations: Json | None
    boxscores: Json | None
    stats: Json | None
    as_of: str


@dataclass(frozen=True)
class EcosystemData:
    slate: Json | None
    injuries: Json | None
    depth_charts: Json | None
    starting_lineups: Json | None
    history: HistoryData


@dataclass(frozen=True)
class LastModified:
    per_resource: Mapping[str, str | None] = field(default_factory=dict)
    latest: str | None = None

    def get(self, key: str) -> str | None:
        return self.per_resource.get(key)


@dataclass(frozen=True)
class EcosystemBundle:
    ok: bool
    data: EcosystemData
    loaded_from: Mapping[str, str]
    last_modified: LastModified
    errors: Mapping[str, str] | None = None

    @property
    def has_warnings(self) -> bool:
        """Usable slate, but at least one enrichment dataset is missing."""

        return self.ok and bool(self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase JSON shape consumed by the front end."""

        last_modified: dict[str, Any] = {
            camel_key(k): v for k, v in self.last_modified.per_resource.items() if v is not None
        }
        if self.last_modified.latest is not None:
            last_modified["latest"] = self.last_modified.latest

        payload: dict[str, Any] = {
            "ok": self.ok,
            "data": {
                "slate": self.data.slate,
                "injuries": self.data.injuries,
                "depthCharts": self.data.depth_charts,
                "startingLineups": self.data.starting_lineups,
                "history": {
                    "rotations": self.data.history.rotations,
                    "boxscores": self.data.history.boxscores,
                    "stats": self.data.history.stats,
                    "asOf": self.data.history.as_of,
                },
            },
            "loadedFrom": {camel_key(k): v for k, v in self.loaded_from.items()},
            "lastModified": last_modified,
        }
        if self.errors:
            payload["errors"] = {camel_key(k): v for k, v in self.errors.items()}
        return payload
