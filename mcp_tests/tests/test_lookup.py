import pytest

from core.errors import NotFoundError, UpstreamError
from core.lookup import fetch_parent, flatten_groups, resolve_default_child


def _fetcher(value, calls):
    async def fetch():
        calls.append(1)
        if isinstance(value, Exception):
            raise value
        return value

    return fetch


def _is_default(env):
    return bool(env.get("isDefault"))


@pytest.mark.asyncio
async def test_resolve_default_child_picks_flagged_child():
    calls = []
    parent = {
        "projectId": "p1",
        "environments": [
            {"environmentId": "e-prod", "isDefault": False},
            {"environmentId": "e-dev", "isDefault": True},
        ],
    }

    out = await resolve_default_child(
        _fetcher(parent, calls),
        label="Project 'p1'",
        children_key="environments",
        id_key="environmentId",
        is_default=_is_default,
    )

    assert out == "e-dev"
    assert calls == [1]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "parent",
    [
        {"projectId": "p1", "environments": [{"environmentId": "e1", "isDefault": False}]},
        {"projectId": "p1", "environments": []},
        {"projectId": "p1"},
        {"projectId": "p1", "environments": [{"isDefault": True}]},
    ],
)
async def test_resolve_default_child_without_default_raises(parent):
    with pytest.raises(NotFoundError) as exc:
        await resolve_default_child(
            _fetcher(parent, []),
            label="Project 'p1'",
            children_key="environments",
            id_key="environmentId",
            is_default=_is_default,
            child_label="default environment",
        )
    assert "Project 'p1'" in str(exc.value)
    assert "default environment" in str(exc.value)


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, {}, [], UpstreamError(404, "Project not found")])
async def test_fetch_parent_missing_raises_not_found(value):
    with pytest.raises(NotFoundError) as exc:
        await fetch_parent(_fetcher(value, []), label="Project 'p9'")
    assert "Project 'p9'" in str(exc.value)


@pytest.mark.asyncio
async def test_fetch_parent_propagates_other_upstream_errors():
    with pytest.raises(UpstreamError) as exc:
        await fetch_parent(_fetcher(UpstreamError(500, "boom"), []), label="Project 'p1'")
    assert exc.value.status_code == 500


def test_flatten_groups_concatenates_in_group_then_child_order():
    groups = [
        {"environmentId": "e1", "name": "production", "applications": [{"applicationId": "a1"}, {"applicationId": "a2"}]},
        {"environmentId": "e2", "name": "staging", "applications": []},
        {"environmentId": "e3", "name": "preview", "applications": [{"applicationId": "a3"}]},
    ]

    out = flatten_groups(
        groups,
        buckets=("applications",),
        group_id_key="environmentId",
        group_name_key="name",
        tag_id_key="environmentId",
        tag_name_key="environmentName",
    )

    assert [item["applicationId"] for item in out] == ["a1", "a2", "a3"]
    assert [item["environmentId"] for item in out] == ["e1", "e1", "e3"]
    assert [item["environmentName"] for item in out] == ["production", "production", "preview"]


def test_flatten_groups_walks_buckets_in_given_order_and_tags_bucket():
    groups = [
        {"environmentId": "e1", "name": "prod", "redis": [{"redisId": "r1"}], "postgres": [{"postgresId": "pg1"}]},
        {"environmentId": "e2", "name": "dev", "postgres": [{"postgresId": "pg2"}], "mysql": None},
    ]

    out = flatten_groups(
        groups,
        buckets=("postgres", "mysql", "redis"),
        group_id_key="environmentId",
        group_name_key="name",
        tag_id_key="environmentId",
        tag_name_key="environmentName",
        bucket_tag="databaseType",
    )

    assert [(item["environmentId"], item["databaseType"]) for item in out] == [
        ("e1", "postgres"),
        ("e1", "redis"),
        ("e2", "postgres"),
    ]


def test_flatten_groups_does_not_mutate_input():
    child = {"applicationId": "a1"}
    groups = [{"environmentId": "e1", "name": "prod", "applications": [child]}]

    flatten_groups(
        groups,
        buckets=("applications",),
        group_id_key="environmentId",
        group_name_key="name",
        tag_id_key="environmentId",
        tag_name_key="environmentName",
    )

    assert child == {"applicationId": "a1"}


def test_flatten_groups_handles_missing_groups():
    assert flatten_groups(
        None,
        buckets=("applications",),
        group_id_key="environmentId",
        group_name_key="name",
        tag_id_key="environmentId",
        tag_name_key="environmentName",
    ) == []
