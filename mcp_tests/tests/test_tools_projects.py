import json

import httpx
import pytest

from conftest import FakeDokployClient
from core.errors import NotFoundError, UpstreamError
from tools import projects as projects_tool


PROJECT = {
    "projectId": "p1",
    "name": "demo",
    "environments": [
        {"environmentId": "e1", "name": "production", "description": "", "isDefault": True, "applications": []},
        {"environmentId": "e2", "name": "staging", "description": "pre-prod", "isDefault": False},
    ],
}


@pytest.mark.asyncio
async def test_create_project_end_to_end_success(registry, make_client):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"projectId": "p-new", "name": "demo"})

    projects_tool.register(registry, client=make_client(handler))

    out = await registry.dispatch("create-project", {"name": "demo"})

    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert requests[0].url.path == "/api/project.create"
    assert json.loads(requests[0].content) == {"name": "demo", "description": ""}
    assert out.startswith("Project created successfully!")
    assert '"projectId": "p-new"' in out


@pytest.mark.asyncio
async def test_create_project_end_to_end_unauthorized(registry, make_client):
    projects_tool.register(registry, client=make_client(lambda r: httpx.Response(401, text="Unauthorized")))

    with pytest.raises(UpstreamError) as exc:
        await registry.dispatch("create-project", {"name": "demo"})

    assert exc.value.status_code == 401
    assert exc.value.body == "Unauthorized"
    assert "created successfully" not in str(exc.value)


@pytest.mark.asyncio
async def test_list_projects_relays_json(registry):
    client = FakeDokployClient({"/project.all": [{"projectId": "p1"}]})
    projects_tool.register(registry, client=client)

    out = await registry.dispatch("list-projects")

    assert json.loads(out) == [{"projectId": "p1"}]
    assert client.calls == [{"path": "/project.all", "method": "GET", "params": None, "body": None}]


@pytest.mark.asyncio
async def test_update_project_only_sends_given_fields(registry):
    client = FakeDokployClient()
    projects_tool.register(registry, client=client)

    await registry.dispatch("update-project", {"projectId": "p1", "description": "new"})

    assert client.calls[0]["path"] == "/project.update"
    assert client.calls[0]["body"] == {"projectId": "p1", "description": "new"}


@pytest.mark.asyncio
async def test_delete_project_posts_remove(registry):
    client = FakeDokployClient()
    projects_tool.register(registry, client=client)

    out = await registry.dispatch("delete-project", {"projectId": "p1"})

    assert out == "Project deleted successfully!"
    assert client.calls[0]["path"] == "/project.remove"
    assert client.calls[0]["method"] == "POST"


@pytest.mark.asyncio
async def test_list_environments_summarizes_project(registry):
    client = FakeDokployClient({"/project.one": PROJECT})
    projects_tool.register(registry, client=client)

    out = json.loads(await registry.dispatch("list-environments", {"projectId": "p1"}))

    assert out == [
        {"environmentId": "e1", "name": "production", "description": "", "isDefault": True},
        {"environmentId": "e2", "name": "staging", "description": "pre-prod", "isDefault": False},
    ]
    assert client.calls[0]["params"] == {"projectId": "p1"}


@pytest.mark.asyncio
async def test_get_project_not_found(registry):
    client = FakeDokployClient({"/project.one": UpstreamError(404, "missing")})
    projects_tool.register(registry, client=client)

    with pytest.raises(NotFoundError):
        await registry.dispatch("get-project", {"projectId": "nope"})


@pytest.mark.asyncio
async def test_create_environment_body(registry):
    client = FakeDokployClient()
    projects_tool.register(registry, client=client)

    await registry.dispatch("create-environment", {"projectId": "p1", "name": "staging"})

    assert client.calls[0]["path"] == "/environment.create"
    assert client.calls[0]["body"] == {"projectId": "p1", "name": "staging", "description": ""}
