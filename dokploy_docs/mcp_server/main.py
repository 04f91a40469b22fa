"""Main MCP server for Dokploy documentation."""

import asyncio
import logging
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from dokploy_docs.catalog import DocsCatalog
from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.core.logging import setup_logging
from dokploy_docs.mcp_server.tools import DokployDocsTools
from dokploy_docs.models.config.server import ServerConfig

logger = logging.getLogger(__name__)


class UnknownToolError(Exception):
    """Raised for a tool name outside the catalog.

    The MCP server reports exceptions from a tool handler as a result
    with ``isError`` set and the exception message as its text.
    """


def tool_definitions(catalog: DocsCatalog) -> list[types.Tool]:
    """Build the MCP tool list from the catalog."""
    categories = catalog.categories
    guides = list(catalog.guide_files)

    return [
        types.Tool(
            name="dokploy_api_reference",
            description=(
                "Get Dokploy REST API reference for a specific category "
                "(projects, applications, databases, domains, deployments, compose, "
                "settings). Returns endpoint details with request/response formats."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "description": "API category: "
                        + ", ".join(f'"{c}"' for c in categories),
                        "enum": categories,
                    }
                },
                "required": ["category"],
            },
        ),
        types.Tool(
            name="dokploy_guide",
            description=(
                "Get a specific Dokploy guide. Available guides: deploy (deploying "
                "from GitHub), setup (VPS setup from scratch), auto-deploy (GitHub App "
                "integration), troubleshooting (common errors and fixes), domains-ssl "
                "(domain and certificate setup), databases (creating and managing DBs), "
                "docker-compose (compose deployments), github-integration (git "
                "providers and private repositories)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "guide": {
                        "type": "string",
                        "description": "Guide name",
                        "enum": guides,
                    }
                },
                "required": ["guide"],
            },
        ),
        types.Tool(
            name="dokploy_search",
            description=(
                "Search across all Dokploy documentation by keyword. "
                "Returns matching sections with context."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query (keyword or phrase)",
                    }
                },
                "required": ["query"],
            },
        ),
    ]


def create_server(config: ServerConfig, tools: DokployDocsTools) -> Server:
    """Create the MCP server with tool and resource handlers registered."""
    server = Server(config.server_name)
    definitions = tool_definitions(tools.catalog)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available MCP tools."""
        return definitions

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """Handle MCP tool calls."""
        logger.debug(f"Tool call: {name}", extra={"extra_data": arguments or {}})
        response = tools.call(name, arguments)
        if response.is_error:
            raise UnknownToolError(response.text)
        return [types.TextContent(type="text", text=response.text)]

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        """List documents exposed as browsable resources."""
        return [
            types.Resource(
                uri=resource.uri,
                name=resource.name,
                description=resource.description,
                mimeType=resource.mime_type,
            )
            for resource in tools.catalog.resources
        ]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        """Read a document resource by URI."""
        text, mime_type = tools.read_resource(str(uri))
        return [ReadResourceContents(content=text, mime_type=mime_type)]

    return server


async def main(config: ServerConfig | None = None):
    """Main entry point for the MCP server."""
    config = config or ServerConfig()
    setup_logging(config.log_level, config.log_file)

    loader = DocumentLoader(config.docs_dir)
    tools = DokployDocsTools(loader, DocsCatalog())
    server = create_server(config, tools)

    missing = [
        name for name in tools.catalog.doc_files if not loader.path_for(name).is_file()
    ]
    if missing:
        logger.warning(
            f"{len(missing)} documentation file(s) missing; run 'dokploy-docs refresh'",
            extra={"extra_data": {"docs_dir": config.docs_dir}},
        )

    logger.info(
        f"Dokploy Docs MCP server running on stdio (docs: {config.docs_dir})"
    )

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=config.server_name,
                server_version=config.server_version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli_main():
    """Synchronous entry point for script generation."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
