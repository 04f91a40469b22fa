#!/usr/bin/env python3
"""Fetch the latest Dokploy documentation from Context7.

Pulls docs from the Context7 API (which indexes docs.dokploy.com) and saves
them as local markdown files for the MCP server. Run this when Dokploy
releases a new version to keep the served docs current.

Usage: python scripts/fetch_docs.py
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dokploy_docs.refresh.main import cli_main

if __name__ == "__main__":
    cli_main()
