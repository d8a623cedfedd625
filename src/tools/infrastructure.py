"""MCP tools for instance-wide objects.

Servers, users, registries, certificates, notifications, git providers
and SSH keys. Most of these are plain listings.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from clients.dokploy_client import DokployClient
from core.models import RegistryType
from core.registry import OperationRegistry
from tools.common import render

_LISTINGS = (
    # (tool name, title, path, description)
    ("list-servers", "List Servers", "/server.all", "List remote servers attached to the instance."),
    ("list-users", "List Users", "/user.all", "List users of the instance."),
    ("list-registries", "List Registries", "/registry.all", "List configured container registries."),
    ("list-certificates", "List Certificates", "/certificates.all", "List custom TLS certificates."),
    ("list-notifications", "List Notifications", "/notification.all", "List notification channels."),
    ("list-git-providers", "List Git Providers", "/gitProvider.getAll", "List connected git providers."),
    ("list-ssh-keys", "List SSH Keys", "/sshKey.all", "List stored SSH keys."),
)


def _register_listing(
    registry: OperationRegistry, client: DokployClient, *, name: str, title: str, path: str, description: str
) -> None:
    async def listing() -> str:
        return render(None, await client.request(path))

    registry.add(listing, name=name, title=title, description=description)


def register(registry: OperationRegistry, *, client: DokployClient) -> None:
    for name, title, path, description in _LISTINGS:
        _register_listing(registry, client, name=name, title=title, path=path, description=description)

    @registry.tool(name="create-registry", title="Create Registry")
    async def create_registry(
        registryName: Annotated[str, Field(description="Display name of the registry")],
        registryUrl: Annotated[str, Field(description="Registry URL (e.g. ghcr.io)")],
        username: Annotated[str, Field(description="Registry username")],
        password: Annotated[str, Field(description="Registry password or token")],
        imagePrefix: Annotated[Optional[str], Field(description="Prefix applied to pushed images")] = None,
        registryType: Annotated[RegistryType, Field(description="Registry type")] = "cloud",
        serverId: Annotated[Optional[str], Field(description="Server the registry is bound to")] = None,
    ) -> str:
        """Add a container registry."""
        result = await client.request(
            "/registry.create",
            "POST",
            body={
                "registryName": registryName,
                "registryUrl": registryUrl,
                "username": username,
                "password": password,
                "imagePrefix": imagePrefix,
                "registryType": registryType,
                "serverId": serverId,
            },
        )
        return render("Registry created successfully!", result)

    @registry.tool(name="create-certificate", title="Create Certificate")
    async def create_certificate(
        name: Annotated[str, Field(description="Certificate name")],
        certificateData: Annotated[str, Field(description="PEM-encoded certificate chain")],
        privateKey: Annotated[str, Field(description="PEM-encoded private key")],
        autoRenew: Annotated[bool, Field(description="Renew automatically")] = False,
        serverId: Annotated[Optional[str], Field(description="Server the certificate is installed on")] = None,
    ) -> str:
        """Upload a custom TLS certificate."""
        result = await client.request(
            "/certificates.create",
            "POST",
            body={
                "name": name,
                "certificateData": certificateData,
                "privateKey": privateKey,
                "autoRenew": autoRenew,
                "serverId": serverId,
            },
        )
        return render("Certificate created successfully!", result)

    @registry.tool(name="create-ssh-key", title="Create SSH Key")
    async def create_ssh_key(
        name: Annotated[str, Field(description="Key name")],
        publicKey: Annotated[str, Field(description="OpenSSH public key")],
        privateKey: Annotated[str, Field(description="OpenSSH private key")],
        description: Annotated[Optional[str], Field(description="Key description")] = None,
    ) -> str:
        """Store an SSH key pair for git or server access."""
        result = await client.request(
            "/sshKey.create",
            "POST",
            body={
                "name": name,
                "description": description or "",
                "publicKey": publicKey,
                "privateKey": privateKey,
            },
        )
        return render("SSH key created successfully!", result)

    @registry.tool(name="delete-ssh-key", title="Delete SSH Key")
    async def delete_ssh_key(
        sshKeyId: Annotated[str, Field(description="The SSH key ID")],
    ) -> str:
        """Delete a stored SSH key."""
        await client.request("/sshKey.remove", "POST", body={"sshKeyId": sshKeyId})
        return render("SSH key deleted successfully!")
