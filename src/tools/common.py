"""Helpers shared by the tool modules: project lookups and result text."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from clients.dokploy_client import DokployClient
from core.lookup import fetch_parent, flatten_groups, resolve_default_child
from core.models import ENVIRONMENT_ID_KEY, ENVIRONMENT_NAME_KEY, ENVIRONMENTS_KEY


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def render(summary: Optional[str], data: Any = None) -> str:
    """Normalized tool output: a human summary, then the raw data as JSON."""
    if summary is None:
        return data if isinstance(data, str) else to_json(data)
    if data is None:
        return summary
    return f"{summary}\n\n{to_json(data)}"


async def fetch_project(client: DokployClient, project_id: str) -> Dict[str, Any]:
    return await fetch_parent(
        lambda: client.request("/project.one", params={"projectId": project_id}),
        label=f"Project '{project_id}'",
    )


async def resolve_environment_id(
    client: DokployClient, project_id: str, environment_id: Optional[str]
) -> str:
    """Return `environment_id`, or the project's default environment when omitted."""
    if environment_id:
        return environment_id
    return await resolve_default_child(
        lambda: client.request("/project.one", params={"projectId": project_id}),
        label=f"Project '{project_id}'",
        children_key=ENVIRONMENTS_KEY,
        id_key=ENVIRONMENT_ID_KEY,
        is_default=lambda env: bool(env.get("isDefault")),
        child_label="default environment",
    )


async def list_project_children(
    client: DokployClient,
    project_id: str,
    *,
    buckets: Sequence[str],
    bucket_tag: Optional[str] = None,
) -> List[Dict[str, Any]]:
    project = await fetch_project(client, project_id)
    return flatten_groups(
        project.get(ENVIRONMENTS_KEY),
        buckets=buckets,
        group_id_key=ENVIRONMENT_ID_KEY,
        group_name_key=ENVIRONMENT_NAME_KEY,
        tag_id_key="environmentId",
        tag_name_key="environmentName",
        bucket_tag=bucket_tag,
    )
