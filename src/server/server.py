"""Server bootstrap for the Dokploy MCP service.

Resolves configuration, creates the FastMCP instance and the Dokploy
client, registers tools, resources and prompts, and starts the MCP
server on the configured transport (stdio by default).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.dokploy_client import DokployClient
from config import load_config
from core.registry import OperationRegistry

from tools.projects import register as register_projects
from tools.applications import register as register_applications
from tools.databases import register as register_databases
from tools.service_config import register as register_service_config
from tools.infrastructure import register as register_infrastructure

from resources.dokploy_docs import register_resources
from prompts.dokploy_prompts import register_prompts

config = load_config()
mcp = FastMCP("dokploy-mcp")
registry = OperationRegistry(mcp)


def register_tools() -> None:
    client = DokployClient(config)

    register_projects(registry, client=client)
    register_applications(registry, client=client)
    register_databases(registry, client=client)
    register_service_config(registry, client=client)
    register_infrastructure(registry, client=client)


def register_all() -> None:
    register_tools()
    register_resources(mcp, config=config)
    register_prompts(mcp)


register_all()


def main() -> None:
    # stdout carries the stdio protocol; logs go to stderr
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if config.debug:
        logging.getLogger("clients.dokploy_client").setLevel(logging.DEBUG)
    mcp.run(transport=config.transport)


if __name__ == "__main__":
    main()
