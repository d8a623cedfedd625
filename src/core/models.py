"""Shared literal types and bucket layouts of Dokploy records.

A project record (project.one) carries a list of environments; each
environment holds its services in per-kind buckets.
"""

from __future__ import annotations

from typing import Literal, Tuple


# "mongodb" is the public name; the Dokploy API itself says "mongo" and both are accepted.
DatabaseType = Literal["postgres", "mysql", "mongodb", "redis", "mariadb", "mongo"]
AppType = Literal["docker", "git", "github"]
MountType = Literal["bind", "volume", "file"]
ServiceType = Literal["application", "compose", "postgres", "mysql", "mariadb", "mongo", "redis"]
PortProtocol = Literal["tcp", "udp"]
ScheduleType = Literal["application", "compose", "server", "dokploy-server"]
RegistryType = Literal["cloud"]

ENVIRONMENTS_KEY = "environments"
ENVIRONMENT_ID_KEY = "environmentId"
ENVIRONMENT_NAME_KEY = "name"

APPLICATION_BUCKETS: Tuple[str, ...] = ("applications",)

# Order matters: listings follow this bucket order within each environment.
DATABASE_BUCKETS: Tuple[str, ...] = ("postgres", "mysql", "mariadb", "mongo", "redis")

_UPSTREAM_DATABASE_TYPES = {"mongodb": "mongo"}


def upstream_database_type(db_type: str) -> str:
    """Map a public database type to the name the Dokploy API expects."""
    return _UPSTREAM_DATABASE_TYPES.get(db_type, db_type)
