"""Service layer: tool strategies returning ToolResult.

Services must never import from commands or output.
"""
