from pathlib import Path
from typing import Mapping

from mcp.server.fastmcp import FastMCP

from config import DokployConfig


BASE_DIR = Path(__file__).parent


def _read(filename: str, values: Mapping[str, str]) -> str:
    text = (BASE_DIR / filename).read_text(encoding="utf-8")
    for key, value in values.items():
        text = text.replace("{" + key + "}", value)
    return text


def register_resources(mcp: FastMCP, *, config: DokployConfig) -> None:
    """
    Register Dokploy documentation resources for the MCP server.
    """
    values = {
        "base_url": config.base_url,
        "api_url": config.api_url,
        "delete_verb": config.delete_verb,
        "auth_header": (
            "Authorization: Bearer YOUR_API_TOKEN" if config.auth_scheme == "bearer" else "x-api-key: YOUR_API_TOKEN"
        ),
    }

    @mcp.resource(
        "dokploy://docs",
        name="dokploy-docs",
        title="Dokploy Documentation",
        mime_type="text/markdown",
        description="Official Dokploy documentation and guides",
    )
    def dokploy_docs() -> str:
        return _read("dokploy_docs.md", values)

    @mcp.resource(
        "dokploy://quickstart",
        name="dokploy-quickstart",
        title="Dokploy Quick Start Guide",
        mime_type="text/markdown",
        description="Quick start guide for deploying your first application",
    )
    def dokploy_quickstart() -> str:
        return _read("dokploy_quickstart.md", values)

    @mcp.resource(
        "dokploy://api-reference",
        name="dokploy-api-reference",
        title="Dokploy API Reference",
        mime_type="text/markdown",
        description="API reference for the Dokploy REST endpoints used by this server",
    )
    def dokploy_api_reference() -> str:
        return _read("dokploy_api_reference.md", values)
