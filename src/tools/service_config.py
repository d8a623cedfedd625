"""MCP tools for per-service configuration: mounts, ports and schedules."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from clients.dokploy_client import DokployClient
from core.errors import ValidationError
from core.models import MountType, PortProtocol, ScheduleType, ServiceType
from core.registry import OperationRegistry
from tools.common import render


def register(registry: OperationRegistry, *, client: DokployClient) -> None:
    @registry.tool(name="create-mount", title="Create Mount")
    async def create_mount(
        serviceId: Annotated[str, Field(description="ID of the service the mount belongs to")],
        serviceType: Annotated[ServiceType, Field(description="Kind of service")],
        type: Annotated[MountType, Field(description="Mount type")],
        mountPath: Annotated[str, Field(description="Path inside the container")],
        hostPath: Annotated[Optional[str], Field(description="Host path (bind mounts)")] = None,
        volumeName: Annotated[Optional[str], Field(description="Volume name (volume mounts)")] = None,
        content: Annotated[Optional[str], Field(description="File content (file mounts)")] = None,
    ) -> str:
        """Attach a bind, volume or file mount to a service."""
        required = {"bind": ("hostPath", hostPath), "volume": ("volumeName", volumeName), "file": ("content", content)}
        field, value = required[type]
        if not value:
            raise ValidationError(f"'{field}' is required for {type} mounts", fields=[field])

        result = await client.request(
            "/mounts.create",
            "POST",
            body={
                "serviceId": serviceId,
                "serviceType": serviceType,
                "type": type,
                "mountPath": mountPath,
                "hostPath": hostPath,
                "volumeName": volumeName,
                "content": content,
            },
        )
        return render("Mount created successfully!", result)

    @registry.tool(name="delete-mount", title="Delete Mount")
    async def delete_mount(
        mountId: Annotated[str, Field(description="The mount ID")],
    ) -> str:
        """Remove a mount from its service."""
        await client.request("/mounts.remove", "POST", body={"mountId": mountId})
        return render("Mount deleted successfully!")

    @registry.tool(name="create-port", title="Create Port")
    async def create_port(
        applicationId: Annotated[str, Field(description="The application ID")],
        publishedPort: Annotated[int, Field(description="Port published on the host", ge=1, le=65535)],
        targetPort: Annotated[int, Field(description="Port inside the container", ge=1, le=65535)],
        protocol: Annotated[PortProtocol, Field(description="Transport protocol")] = "tcp",
    ) -> str:
        """Publish a container port of an application."""
        result = await client.request(
            "/port.create",
            "POST",
            body={
                "applicationId": applicationId,
                "publishedPort": publishedPort,
                "targetPort": targetPort,
                "protocol": protocol,
            },
        )
        return render("Port created successfully!", result)

    @registry.tool(name="delete-port", title="Delete Port")
    async def delete_port(
        portId: Annotated[str, Field(description="The port ID")],
    ) -> str:
        """Remove a published port."""
        await client.request("/port.delete", "POST", body={"portId": portId})
        return render("Port deleted successfully!")

    @registry.tool(name="list-schedules", title="List Schedules")
    async def list_schedules(
        id: Annotated[str, Field(description="ID of the application, compose service or server")],
        scheduleType: Annotated[ScheduleType, Field(description="Kind of owner")] = "application",
    ) -> str:
        """List scheduled jobs of an application, compose service or server."""
        schedules = await client.request("/schedule.list", params={"id": id, "scheduleType": scheduleType})
        return render(None, schedules)
