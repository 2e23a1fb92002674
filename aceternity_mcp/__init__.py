"""
Aceternity UI MCP Server
Provides tools for browsing the Aceternity UI component catalog:
- Component listing and category filtering
- Use-case based component suggestions
- Placeholder usage snippets
"""

__version__ = "0.1.0"
