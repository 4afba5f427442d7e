from slate_ecosystem.loader.client import DocumentClient
from slate_ecosystem.loader.ecosystem import load_ecosystem, load_ecosystem_sync
from slate_ecosystem.loader.fallback import resolve_optional
from slate_ecosystem.loader.types import (
    EcosystemBundle,
    FetchNotFound,
    FetchOutcome,
    FetchSuccess,
    FetchTransientError,
    ResolvedResource,
    ResourceSpec,
)

__all__ = [
    "DocumentClient",
    "EcosystemBundle",
    "FetchNotFound",
    "FetchOutcome",
    "FetchSuccess",
    "FetchTransientError",
    "ResolvedResource",
    "ResourceSpec",
    "load_ecosystem",
    "load_ecosystem_sync",
    "resolve_optional",
]
