"""Command-line interface for Dokploy Docs."""
