from __future__ import annotations

import asyncio
from collections.abc import Mapping

from slate_ecosystem.core.config import settings
from slate_ecosystem.core.log import get_logger

from .client import DocumentClient
from .fallback import resolve_optional
from .freshness import select_latest_modified
from .resources import (
    BOXSCORES,
    DEPTH_CHARTS,
    INJURIES,
    OPTIONAL_RESOURCES,
    REQUIRED_RESOURCE,
    ROTATIONS,
    STARTING_LINEUPS,
    STATS,
    build_url,
)
from .types import (
    EcosystemBundle,
    EcosystemData,
    FetchNotFound,
    FetchOutcome,
    FetchSuccess,
    FetchTransientError,
    HistoryData,
    LastModified,
    ResolvedResource,
    ResourceSpec,
)

logger = get_logger("ecosystem")

TASK_FAILED = "Fetch failed"


def _required_failure_message(outcome: FetchOutcome) -> str:
    if isinstance(outcome, FetchNotFound):
        return "HTTP 404"
    if isinstance(outcome, FetchTransientError) and outcome.message:
        return outcome.message
    return f"Failed to load {REQUIRED_RESOURCE.filename}"


def _settle_required(result: FetchOutcome | BaseException) -> FetchOutcome:
    if isinstance(result, Exception):
        logger.error("%s fetch raised", REQUIRED_RESOURCE.filename, exc_info=result)
        return FetchTransientError(TASK_FAILED)
    if isinstance(result, BaseException):
        raise result
    return result


def _settle_optional(
    spec: ResourceSpec,
    result: ResolvedResource | BaseException,
    *,
    target_date: str,
    base_url: str,
) -> ResolvedResource:
    if isinstance(result, Exception):
        logger.error("%s resolution raised", spec.filename, exc_info=result)
        return ResolvedResource(
            data=None,
            as_of_date=target_date,
            source_url=build_url(base_url, target_date, spec.filename),
            error=TASK_FAILED,
        )
    if isinstance(result, BaseException):
        raise result
    return result


def _skipped(spec: ResourceSpec, *, target_date: str, base_url: str) -> ResolvedResource:
    return ResolvedResource(
        data=None,
        as_of_date=target_date,
        source_url=build_url(base_url, target_date, spec.filename),
    )


async def resolve_resource(
    client: DocumentClient,
    spec: ResourceSpec,
    *,
    target_date: str,
    include_history: bool,
    base_url: str,
    max_lookback_days: int,
) -> ResolvedResource:
    """Resolve one optional dataset according to its catalog flags.

    History-gated datasets resolve empty, with no request, when history is off.
    Datasets outside the lookback get a single attempt at `target_date`.
    """

    if spec.required:
        raise ValueError(f"{spec.filename} is required and is never resolved with fallback")

    if spec.history_gated and not include_history:
        return _skipped(spec, target_date=target_date, base_url=base_url)

    return await resolve_optional(
        client,
        target_date,
        spec.filename,
        base_url=base_url,
        max_lookback_days=max_lookback_days if spec.participates_in_lookback else 1,
    )


def _last_modified(
    slate: FetchOutcome, resolved: Mapping[str, ResolvedResource]
) -> LastModified:
    per_resource: dict[str, str | None] = {
        REQUIRED_RESOURCE.key: slate.last_modified if isinstance(slate, FetchSuccess) else None,
    }
    for spec in OPTIONAL_RESOURCES:
        per_resource[spec.key] = resolved[spec.key].last_modified

    return LastModified(
        per_resource=per_resource,
        latest=select_latest_modified(per_resource.values()),
    )


def _loaded_from(slate_url: str, resolved: Mapping[str, ResolvedResource]) -> dict[str, str]:
    loaded_from = {REQUIRED_RESOURCE.key: slate_url}
    for spec in OPTIONAL_RESOURCES:
        loaded_from[spec.key] = resolved[spec.key].source_url
    return loaded_from


def build_failed_bundle(
    *,
    target_date: str,
    slate_url: str,
    slate: FetchOutcome,
    resolved: Mapping[str, ResolvedResource],
) -> EcosystemBundle:
    """Bundle for a missing/failed slate: no data, but diagnostics for every resource."""

    return EcosystemBundle(
        ok=False,
        data=EcosystemData(
            slate=None,
            injuries=None,
            depth_charts=None,
            starting_lineups=None,
            history=HistoryData(rotations=None, boxscores=None, stats=None, as_of=target_date),
        ),
        loaded_from=_loaded_from(slate_url, resolved),
        last_modified=_last_modified(slate, resolved),
        errors={REQUIRED_RESOURCE.key: _required_failure_message(slate)},
    )


def build_bundle(
    *,
    target_date: str,
    slate_url: str,
    slate: FetchSuccess,
    resolved: Mapping[str, ResolvedResource],
) -> EcosystemBundle:
    """Bundle for a loaded slate; optional gaps are reported in `errors`."""

    errors = {
        spec.key: resolved[spec.key].error
        for spec in OPTIONAL_RESOURCES
        if resolved[spec.key].error
    }

    rotations = resolved[ROTATIONS.key]
    boxscores = resolved[BOXSCORES.key]
    stats = resolved[STATS.key]

    return EcosystemBundle(
        ok=True,
        data=EcosystemData(
            slate=slate.data,
            injuries=resolved[INJURIES.key].data,
            depth_charts=resolved[DEPTH_CHARTS.key].data,
            starting_lineups=resolved[STARTING_LINEUPS.key].data,
            history=HistoryData(
                rotations=rotations.data,
                boxscores=boxscores.data,
                stats=stats.data,
                as_of=(
                    rotations.as_of_date
                    or boxscores.as_of_date
                    or stats.as_of_date
                    or target_date
                ),
            ),
        ),
        loaded_from=_loaded_from(slate_url, resolved),
        last_modified=_last_modified(slate, resolved),
        errors=errors or None,
    )


async def _load(
    client: DocumentClient,
    *,
    target_date: str,
    include_history: bool,
    base_url: str,
    max_lookback_days: int,
) -> EcosystemBundle:
    slate_url = build_url(base_url, target_date, REQUIRED_RESOURCE.filename)

    optional_tasks = [
        resolve_resource(
            client,
            spec,
            target_date=target_date,
            include_history=include_history,
            base_url=base_url,
            max_lookback_days=max_lookback_days,
        )
        for spec in OPTIONAL_RESOURCES
    ]

    # Settle everything before deciding: a failed slate must not cancel the
    # optional walks, whose URLs/timestamps are still reported.
    slate_result, *optional_results = await asyncio.gather(
        client.fetch_raw(slate_url), *optional_tasks, return_exceptions=True
    )

    slate = _settle_required(slate_result)
    resolved = {
        spec.key: _settle_optional(spec, result, target_date=target_date, base_url=base_url)
        for spec, result in zip(OPTIONAL_RESOURCES, optional_results, strict=True)
    }

    if not isinstance(slate, FetchSuccess):
        bundle = build_failed_bundle(
            target_date=target_date, slate_url=slate_url, slate=slate, resolved=resolved
        )
        logger.warning(
            "%s unavailable for %s: %s", REQUIRED_RESOURCE.filename, target_date, bundle.errors
        )
        return bundle

    bundle = build_bundle(
        target_date=target_date, slate_url=slate_url, slate=slate, resolved=resolved
    )
    logger.info(
        "Loaded ecosystem for %s: missing=%s latest=%s",
        target_date,
        sorted(bundle.errors or {}),
        bundle.last_modified.latest,
    )
    return bundle


async def load_ecosystem(
    target_date: str,
    *,
    include_history: bool = True,
    base_url: str | None = None,
    max_lookback_days: int | None = None,
    client: DocumentClient | None = None,
) -> EcosystemBundle:
    """Load the slate plus every optional dataset for `target_date`.

    Returns ok=False only when slate.json itself could not be loaded; optional
    datasets degrade to None with a message in `errors`. A caller-supplied
    `client` is left open; otherwise one is created and closed here.
    """

    base = base_url or settings.base_url
    lookback = settings.max_lookback_days if max_lookback_days is None else max_lookback_days

    owns_client = client is None
    http = client if client is not None else DocumentClient()
    try:
        return await _load(
            http,
            target_date=target_date,
            include_history=include_history,
            base_url=base,
            max_lookback_days=lookback,
        )
    finally:
        if owns_client:
            await http.aclose()


def load_ecosystem_sync(target_date: str, **kwargs) -> EcosystemBundle:
    """Blocking wrapper around load_ecosystem() for callers without an event loop."""

    return asyncio.run(load_ecosystem(target_date, **kwargs))
