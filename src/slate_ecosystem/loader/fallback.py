from __future__ import annotations

from slate_ecosystem.core.config import settings
from slate_ecosystem.core.dates import previous_date
from slate_ecosystem.core.log import get_logger

from .client import DocumentClient
from .resources import build_url
from .types import FetchSuccess, FetchTransientError, ResolvedResource

logger = get_logger("fallback")


async def resolve_optional(
    client: DocumentClient,
    target_date: str,
    filename: str,
    *,
    base_url: str | None = None,
    max_lookback_days: int | None = None,
) -> ResolvedResource:
    """Resolve an optional dataset, walking back one day at a time.

    The first date that yields non-null data wins. A 404 or a `null` body is a
    clean absence; any other failure is remembered (latest wins) but does not
    stop the walk.
    On exhaustion the result is anchored to `target_date`, not the last date tried.
    """

    base = base_url or settings.base_url
    lookback = settings.max_lookback_days if max_lookback_days is None else max_lookback_days

    current_date = target_date
    last_error: str | None = None

    for _ in range(max(0, lookback)):
        url = build_url(base, current_date, filename)
        outcome = await client.fetch_raw(url)

        if isinstance(outcome, FetchSuccess) and outcome.data is not None:
            if current_date != target_date:
                logger.info("%s: using %s (requested %s)", filename, current_date, target_date)
            return ResolvedResource(
                data=outcome.data,
                as_of_date=current_date,
                source_url=url,
                last_modified=outcome.last_modified,
            )

        if isinstance(outcome, FetchTransientError):
            last_error = outcome.message

        current_date = previous_date(current_date, 1)

    if last_error:
        logger.warning("%s: unresolved for %s, last error: %s", filename, target_date, last_error)
    else:
        logger.info("%s: nothing published in %s days before %s", filename, lookback, target_date)

    error = last_error or f"No {filename} found in last {lookback} days"
    return ResolvedResource(
        data=None,
        as_of_date=target_date,
        source_url=build_url(base, target_date, filename),
        error=error,
    )
