"""
Dokploy Docs: Dokploy documentation for AI agents over MCP.

Serves a local corpus of Dokploy markdown documentation through a Model
Context Protocol server and refreshes that corpus from the Context7 API.
"""

__version__ = "1.0.0"
