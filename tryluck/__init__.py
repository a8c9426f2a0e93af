"""Random coin, dice and tarot results for the command line and an MCP server."""

__version__ = "0.2.0"
__all__ = ["__version__"]