"""MCP tools for Dokploy databases, domains and backups."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from clients.dokploy_client import DokployClient
from core.models import DATABASE_BUCKETS, DatabaseType, upstream_database_type
from core.registry import OperationRegistry
from tools.common import list_project_children, render, resolve_environment_id

DatabaseId = Annotated[str, Field(description="The database ID")]
ApplicationId = Annotated[str, Field(description="The application ID")]


def register(registry: OperationRegistry, *, client: DokployClient) -> None:
    # --- Databases ---

    @registry.tool(name="create-database", title="Create Database")
    async def create_database(
        projectId: Annotated[str, Field(description="The project ID to create the database in")],
        name: Annotated[str, Field(description="Database service name")],
        type: Annotated[DatabaseType, Field(description="Database type")],
        environmentId: Annotated[
            Optional[str],
            Field(description="Target environment ID; defaults to the project's default environment"),
        ] = None,
        databaseName: Annotated[Optional[str], Field(description="Database name (for SQL databases)")] = None,
        username: Annotated[Optional[str], Field(description="Database username")] = None,
        password: Annotated[Optional[str], Field(description="Database password")] = None,
    ) -> str:
        """Create a new database (PostgreSQL, MySQL, MongoDB, Redis, or MariaDB)."""
        env_id = await resolve_environment_id(client, projectId, environmentId)
        result = await client.request(
            "/database.create",
            "POST",
            body={
                "projectId": projectId,
                "environmentId": env_id,
                "name": name,
                "type": upstream_database_type(type),
                "databaseName": databaseName,
                "username": username,
                "password": password,
            },
        )
        return render("Database created successfully!", result)

    @registry.tool(name="list-databases", title="List Databases")
    async def list_databases(
        projectId: Annotated[str, Field(description="The project ID to list databases from")],
    ) -> str:
        """List all databases in a project, across all environments and engines."""
        databases = await list_project_children(
            client, projectId, buckets=DATABASE_BUCKETS, bucket_tag="databaseType"
        )
        return render(None, databases)

    @registry.tool(name="delete-database", title="Delete Database")
    async def delete_database(
        databaseId: Annotated[str, Field(description="The ID of the database to delete")],
        type: Annotated[DatabaseType, Field(description="Database type")],
    ) -> str:
        """Delete a database from Dokploy."""
        await client.request(
            client.path_for_delete("database"),
            "POST",
            body={"databaseId": databaseId, "type": upstream_database_type(type)},
        )
        return render("Database deleted successfully!")

    # --- Domains ---

    @registry.tool(name="add-domain", title="Add Domain")
    async def add_domain(
        applicationId: ApplicationId,
        domain: Annotated[str, Field(description="Domain name (e.g., example.com)")],
        enableSSL: Annotated[bool, Field(description="Enable automatic SSL with Let's Encrypt")] = True,
    ) -> str:
        """Add a custom domain to an application."""
        result = await client.request(
            "/domain.create",
            "POST",
            body={"applicationId": applicationId, "domain": domain, "enableSSL": enableSSL},
        )
        return render("Domain added successfully!", result)

    @registry.tool(name="list-domains", title="List Domains")
    async def list_domains(applicationId: ApplicationId) -> str:
        """List all domains for an application."""
        domains = await client.request("/domain.all", params={"applicationId": applicationId})
        return render(None, domains)

    @registry.tool(name="delete-domain", title="Delete Domain")
    async def delete_domain(
        domainId: Annotated[str, Field(description="The ID of the domain to delete")],
    ) -> str:
        """Remove a domain from its application."""
        await client.request("/domain.delete", "POST", body={"domainId": domainId})
        return render("Domain deleted successfully!")

    # --- Backups ---

    @registry.tool(name="create-backup", title="Create Backup")
    async def create_backup(
        databaseId: Annotated[str, Field(description="The database ID to backup")],
    ) -> str:
        """Create a backup of a database."""
        result = await client.request("/backup.create", "POST", body={"databaseId": databaseId})
        return render("Backup created successfully!", result)

    @registry.tool(name="list-backups", title="List Backups")
    async def list_backups(databaseId: DatabaseId) -> str:
        """List all backups for a database."""
        backups = await client.request("/backup.all", params={"databaseId": databaseId})
        return render(None, backups)

    @registry.tool(name="restore-backup", title="Restore Backup")
    async def restore_backup(
        backupId: Annotated[str, Field(description="The backup ID to restore")],
    ) -> str:
        """Restore a database from a backup."""
        result = await client.request("/backup.restore", "POST", body={"backupId": backupId})
        return render("Backup restored successfully!", result)
