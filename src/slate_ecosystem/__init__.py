from slate_ecosystem.core.dates import previous_date
from slate_ecosystem.loader import EcosystemBundle, load_ecosystem, load_ecosystem_sync

__all__ = [
    "EcosystemBundle",
    "load_ecosystem",
    "load_ecosystem_sync",
    "previous_date",
]
