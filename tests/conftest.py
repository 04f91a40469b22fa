"""Shared fixtures: a docs directory populated with small sample documents."""

import pytest

API_REFERENCE = """# Dokploy API Reference

All endpoints live under /api and take an x-api-key header.

## Projects
POST /project.create creates a project.
### Request body
name, description

## Applications
POST /application.create creates an application.
POST /application.deploy triggers a build.

## Docker Compose
POST /compose.create creates a compose service.

## Settings
GET /settings.getDokployVersion returns the version.
"""

SETUP_GUIDE = """# Setup Guide

Install Dokploy on a fresh VPS:

curl -sSL https://dokploy.com/install.sh | sh

Open ports 80, 443 and 3000 in the firewall.
"""

TROUBLESHOOTING = """# Troubleshooting

## Certificate not found
Traefik could not issue a certificate; check DNS records.
"""

AUTO_DEPLOY = """# Auto-Deploy

Install the GitHub App and enable autodeploy on the application.
"""

SAMPLE_DOCS = {
    "api-reference.md": API_REFERENCE,
    "setup-guide.md": SETUP_GUIDE,
    "troubleshooting.md": TROUBLESHOOTING,
    "auto-deploy.md": AUTO_DEPLOY,
}


def write_docs(directory, docs):
    directory.mkdir(parents=True, exist_ok=True)
    for filename, content in docs.items():
        (directory / filename).write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def docs_dir(tmp_path):
    """Docs directory holding four of the nine corpus files."""
    return write_docs(tmp_path / "docs", SAMPLE_DOCS)


@pytest.fixture
def empty_docs_dir(tmp_path):
    """Docs directory with no corpus files."""
    directory = tmp_path / "empty-docs"
    directory.mkdir()
    return directory
