"""Client-side composition helpers shared by the tool handlers.

The Dokploy API has no lookup-by-child endpoints, so two shapes are
derived locally from a parent record:
  - default-child resolution (e.g. a project's default environment),
  - flattened listing of children nested in several buckets of several
    groupings (e.g. databases inside each environment).
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from core.errors import NotFoundError, UpstreamError

Record = Dict[str, Any]


async def fetch_parent(fetch: Callable[[], Awaitable[Any]], *, label: str) -> Record:
    """Fetch a parent record, mapping 404/empty answers to NotFoundError."""
    try:
        parent = await fetch()
    except UpstreamError as e:
        if e.status_code == 404:
            raise NotFoundError(f"{label} not found") from e
        raise
    if not isinstance(parent, dict) or not parent:
        raise NotFoundError(f"{label} not found")
    return parent


async def resolve_default_child(
    fetch: Callable[[], Awaitable[Any]],
    *,
    label: str,
    children_key: str,
    id_key: str,
    is_default: Callable[[Mapping[str, Any]], bool],
    child_label: str = "default child",
) -> str:
    """Return the id of the child flagged default among the parent's children."""
    parent = await fetch_parent(fetch, label=label)
    for child in parent.get(children_key) or []:
        if isinstance(child, dict) and is_default(child) and child.get(id_key):
            return str(child[id_key])
    raise NotFoundError(f"No {child_label} found for {label}")


def flatten_groups(
    groups: Optional[Sequence[Any]],
    *,
    buckets: Sequence[str],
    group_id_key: str,
    group_name_key: str,
    tag_id_key: str,
    tag_name_key: str,
    bucket_tag: Optional[str] = None,
) -> List[Record]:
    """Concatenate children of every bucket of every group, in order, tagged with their group."""
    out: List[Record] = []
    for group in groups or []:
        if not isinstance(group, dict):
            continue
        for bucket in buckets:
            for child in group.get(bucket) or []:
                if not isinstance(child, dict):
                    continue
                item = dict(child)
                item[tag_id_key] = group.get(group_id_key)
                item[tag_name_key] = group.get(group_name_key)
                if bucket_tag:
                    item[bucket_tag] = bucket
                out.append(item)
    return out
