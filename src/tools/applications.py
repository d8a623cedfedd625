"""MCP tools for Dokploy applications.

Covers the application lifecycle (create, deploy, start/stop/restart,
delete), monitoring (logs, status) and environment variables. Listing
walks every environment of the project since the API nests applications
per environment.
"""

from __future__ import annotations

from typing import Annotated, Dict, Optional

from pydantic import Field

from clients.dokploy_client import DokployClient
from core.models import APPLICATION_BUCKETS, AppType
from core.registry import OperationRegistry
from tools.common import list_project_children, render, resolve_environment_id

ApplicationId = Annotated[str, Field(description="The application ID")]

_LIFECYCLE = (
    # (tool name, title, api verb, description, summary)
    ("deploy-application", "Deploy Application", "deploy",
     "Deploy an application in Dokploy.", "Deployment started!"),
    ("redeploy-application", "Redeploy Application", "redeploy",
     "Rebuild and redeploy an application from its current source.", "Redeployment started!"),
    ("stop-application", "Stop Application", "stop",
     "Stop a running application.", "Application stopped successfully!"),
    ("start-application", "Start Application", "start",
     "Start a stopped application.", "Application started successfully!"),
    ("restart-application", "Restart Application", "restart",
     "Restart an application.", "Application restarted successfully!"),
)


def _register_lifecycle(
    registry: OperationRegistry,
    client: DokployClient,
    *,
    name: str,
    title: str,
    verb: str,
    description: str,
    summary: str,
) -> None:
    async def lifecycle(applicationId: ApplicationId) -> str:
        result = await client.request(f"/application.{verb}", "POST", body={"applicationId": applicationId})
        return render(summary, result)

    registry.add(lifecycle, name=name, title=title, description=description)


def register(registry: OperationRegistry, *, client: DokployClient) -> None:
    @registry.tool(name="list-applications", title="List Applications")
    async def list_applications(
        projectId: Annotated[str, Field(description="The project ID to list applications from")],
    ) -> str:
        """List all applications in a project, across all of its environments."""
        apps = await list_project_children(client, projectId, buckets=APPLICATION_BUCKETS)
        return render(None, apps)

    @registry.tool(name="get-application", title="Get Application")
    async def get_application(applicationId: ApplicationId) -> str:
        """Get the full record of an application."""
        app = await client.request("/application.one", params={"applicationId": applicationId})
        return render(None, app)

    @registry.tool(name="create-application", title="Create Application")
    async def create_application(
        projectId: Annotated[str, Field(description="The project ID to create the application in")],
        name: Annotated[str, Field(description="Application name")],
        environmentId: Annotated[
            Optional[str],
            Field(description="Target environment ID; defaults to the project's default environment"),
        ] = None,
        appType: Annotated[AppType, Field(description="Application type")] = "github",
        repository: Annotated[Optional[str], Field(description="Git repository URL (for git/github types)")] = None,
        branch: Annotated[str, Field(description="Git branch to deploy")] = "main",
        buildPath: Annotated[str, Field(description="Build path in repository")] = "/",
        dockerfile: Annotated[Optional[str], Field(description="Path to Dockerfile (for docker type)")] = None,
        env: Annotated[
            Optional[Dict[str, str]], Field(description="Environment variables as key-value pairs")
        ] = None,
    ) -> str:
        """Create a new application in Dokploy."""
        env_id = await resolve_environment_id(client, projectId, environmentId)
        result = await client.request(
            "/application.create",
            "POST",
            body={
                "projectId": projectId,
                "environmentId": env_id,
                "name": name,
                "appType": appType,
                "repository": repository,
                "branch": branch,
                "buildPath": buildPath,
                "dockerfile": dockerfile,
                "env": env or {},
            },
        )
        return render("Application created successfully!", result)

    for name, title, verb, description, summary in _LIFECYCLE:
        _register_lifecycle(
            registry, client,
            name=name, title=title, verb=verb, description=description, summary=summary,
        )

    @registry.tool(name="delete-application", title="Delete Application")
    async def delete_application(
        applicationId: Annotated[str, Field(description="The ID of the application to delete")],
    ) -> str:
        """Delete an application from Dokploy."""
        await client.request(client.path_for_delete("application"), "POST", body={"applicationId": applicationId})
        return render("Application deleted successfully!")

    @registry.tool(name="get-logs", title="Get Application Logs")
    async def get_logs(
        applicationId: ApplicationId,
        lines: Annotated[int, Field(description="Number of log lines to retrieve", ge=1)] = 100,
    ) -> str:
        """Get recent logs for an application."""
        logs = await client.request(
            "/application.logs",
            params={"applicationId": applicationId, "lines": lines},
        )
        return render(None, logs)

    @registry.tool(name="get-application-status", title="Get Application Status")
    async def get_application_status(applicationId: ApplicationId) -> str:
        """Get the current status and health of an application."""
        status = await client.request("/application.status", params={"applicationId": applicationId})
        return render(None, status)

    @registry.tool(name="update-env-vars", title="Update Environment Variables")
    async def update_env_vars(
        applicationId: ApplicationId,
        env: Annotated[Dict[str, str], Field(description="Environment variables as key-value pairs")],
    ) -> str:
        """Update environment variables for an application."""
        result = await client.request(
            "/application.updateEnv",
            "POST",
            body={"applicationId": applicationId, "env": env},
        )
        return render("Environment variables updated successfully!", result)
