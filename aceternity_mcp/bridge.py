"""
Aceternity UI MCP Server - Main Entry Point
Run with: python -m aceternity_mcp

Tools:
- list_components: list the catalog, optionally filtered by category
- get_component_code: placeholder usage snippet for a component
- suggest_component: components whose description or use case matches a query
"""

import asyncio
import json
import logging
from typing import Any, Callable, Optional

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorData,
    TextContent,
    Tool,
)

from . import __version__
from .code_generator import get_component_code
from .component_library import LIBRARY, CatalogError
from .logging_config import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Create MCP server
app = Server(settings.server_name, version=__version__)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools"""
    categories = ", ".join(LIBRARY.get_categories())
    return [
        Tool(
            name="list_components",
            description="List all available Aceternity UI components with descriptions",
            inputSchema={
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "description": f"Optional category filter ({categories})"
                    }
                }
            }
        ),
        Tool(
            name="get_component_code",
            description="Get the implementation code for a specific component",
            inputSchema={
                "type": "object",
                "properties": {
                    "componentName": {
                        "type": "string",
                        "description": "Name of the component"
                    },
                    "customizations": {
                        "type": "object",
                        "description": "Component-specific customization parameters"
                    }
                },
                "required": ["componentName"]
            }
        ),
        Tool(
            name="suggest_component",
            description="Get component suggestions based on use case",
            inputSchema={
                "type": "object",
                "properties": {
                    "useCase": {
                        "type": "string",
                        "description": "Description of the intended use"
                    }
                },
                "required": ["useCase"]
            }
        ),
    ]


def _json_content(result: Any) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


def handle_list_components(arguments: dict) -> list[TextContent]:
    category = arguments.get("category")
    if not isinstance(category, str):
        category = None
    components = LIBRARY.list_components(category)
    return _json_content([c.to_dict() for c in components])


def handle_get_component_code(arguments: dict) -> list[TextContent]:
    customizations = arguments.get("customizations")
    if not isinstance(customizations, dict):
        customizations = None
    code = get_component_code(arguments.get("componentName"), customizations)
    return [TextContent(type="text", text=code)]


def handle_suggest_component(arguments: dict) -> list[TextContent]:
    suggestions = LIBRARY.suggest(arguments.get("useCase"))
    return _json_content([c.to_dict() for c in suggestions])


TOOL_HANDLERS: dict[str, Callable[[dict], list[TextContent]]] = {
    "list_components": handle_list_components,
    "get_component_code": handle_get_component_code,
    "suggest_component": handle_suggest_component,
}


def call_tool(params: Optional[types.CallToolRequestParams]) -> list[TextContent]:
    """Dispatch a tool call, raising McpError for rejected requests"""
    if params is None:
        logger.warning("Rejected tool call without parameters")
        raise McpError(ErrorData(code=INVALID_REQUEST, message="Missing request parameters"))

    name = params.name
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        logger.warning("Rejected call to unknown tool %r", name)
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    arguments = params.arguments or {}
    logger.debug("Calling tool %s with %s", name, arguments)
    try:
        return handler(arguments)
    except CatalogError as e:
        logger.warning("Tool %s failed: %s", name, e)
        raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e))) from e


async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
    """tools/call handler; McpError propagates to the client as a JSON-RPC error"""
    content = call_tool(req.params)
    return types.ServerResult(types.CallToolResult(content=content, isError=False))


# Registered directly rather than via @app.call_tool(), which would turn
# raised errors into tool results instead of protocol errors.
app.request_handlers[types.CallToolRequest] = handle_call_tool


async def main():
    """Run the server"""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Aceternity UI MCP server running on stdio")
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Console script entry point"""
    setup_logging(settings.log_level, settings.log_file)
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    run()
