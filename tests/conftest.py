"""Shared fixtures for the Aceternity UI MCP tests."""
import pytest
from mcp.types import CallToolRequestParams


@pytest.fixture()
def make_params():
    def _make(name: str, arguments: dict | None = None) -> CallToolRequestParams:
        return CallToolRequestParams(name=name, arguments=arguments)

    return _make
