"""MCP Server for Dokploy documentation.

This module provides a Model Context Protocol (MCP) server that exposes the
local Dokploy documentation corpus as tools and resources, so agents get
accurate API reference and guides without web searching.
"""

__version__ = "1.0.0"
