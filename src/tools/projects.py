"""MCP tools for Dokploy projects and their environments.

Registers list/get/create/update/delete for projects, plus environment
listing (derived from project.one) and creation.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from clients.dokploy_client import DokployClient
from core.registry import OperationRegistry
from tools.common import fetch_project, render

ProjectId = Annotated[str, Field(description="The project ID")]


def register(registry: OperationRegistry, *, client: DokployClient) -> None:
    @registry.tool(name="list-projects", title="List Projects")
    async def list_projects() -> str:
        """List all projects in your Dokploy instance."""
        projects = await client.request("/project.all")
        return render(None, projects)

    @registry.tool(name="get-project", title="Get Project")
    async def get_project(projectId: ProjectId) -> str:
        """Get a project with its environments and services."""
        project = await fetch_project(client, projectId)
        return render(None, project)

    @registry.tool(name="create-project", title="Create Project")
    async def create_project(
        name: Annotated[str, Field(description="Project name")],
        description: Annotated[Optional[str], Field(description="Project description")] = None,
    ) -> str:
        """Create a new project in Dokploy."""
        result = await client.request(
            "/project.create",
            "POST",
            body={"name": name, "description": description or ""},
        )
        return render("Project created successfully!", result)

    @registry.tool(name="update-project", title="Update Project")
    async def update_project(
        projectId: ProjectId,
        name: Annotated[Optional[str], Field(description="New project name")] = None,
        description: Annotated[Optional[str], Field(description="New project description")] = None,
    ) -> str:
        """Rename a project or change its description."""
        body = {"projectId": projectId}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        result = await client.request("/project.update", "POST", body=body)
        return render("Project updated successfully!", result)

    @registry.tool(name="delete-project", title="Delete Project")
    async def delete_project(
        projectId: Annotated[str, Field(description="The ID of the project to delete")],
    ) -> str:
        """Delete a project from Dokploy."""
        await client.request("/project.remove", "POST", body={"projectId": projectId})
        return render("Project deleted successfully!")

    @registry.tool(name="list-environments", title="List Environments")
    async def list_environments(projectId: ProjectId) -> str:
        """List the environments of a project, flagging the default one."""
        project = await fetch_project(client, projectId)
        environments = [
            {
                "environmentId": env.get("environmentId"),
                "name": env.get("name"),
                "description": env.get("description"),
                "isDefault": bool(env.get("isDefault")),
            }
            for env in project.get("environments") or []
            if isinstance(env, dict)
        ]
        return render(None, environments)

    @registry.tool(name="create-environment", title="Create Environment")
    async def create_environment(
        projectId: ProjectId,
        name: Annotated[str, Field(description="Environment name (e.g. staging)")],
        description: Annotated[Optional[str], Field(description="Environment description")] = None,
    ) -> str:
        """Create a new environment inside a project."""
        result = await client.request(
            "/environment.create",
            "POST",
            body={"projectId": projectId, "name": name, "description": description or ""},
        )
        return render("Environment created successfully!", result)
