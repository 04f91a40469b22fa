"""Fixed documentation catalog: filenames, tool enums, resources, refresh topics."""

from pydantic import BaseModel, ConfigDict, Field


class ResourceDefinition(BaseModel):
    """A document exposed as an MCP resource."""

    model_config = ConfigDict(frozen=True)

    uri: str
    filename: str
    name: str
    description: str
    mime_type: str = "text/markdown"


class RefreshTopic(BaseModel):
    """One Context7 query and the file its answer is written to."""

    model_config = ConfigDict(frozen=True)

    query: str
    filename: str
    description: str


# Search order matters: results are reported in this order
DOC_FILES: tuple[str, ...] = (
    "api-reference.md",
    "deploy-guide.md",
    "setup-guide.md",
    "auto-deploy.md",
    "troubleshooting.md",
    "github-integration.md",
    "domains-ssl.md",
    "databases.md",
    "docker-compose.md",
)

API_REFERENCE_FILE = "api-reference.md"

ALL_CATEGORY = "all"

SECTION_HEADINGS: dict[str, str] = {
    "projects": "## Projects",
    "applications": "## Applications",
    "databases": "## Databases",
    "domains": "## Domains",
    "deployments": "## Deployments",
    "compose": "## Docker Compose",
    "settings": "## Settings",
    "auto-deploy": "## Auto-deploy",
}

GUIDE_FILES: dict[str, str] = {
    "deploy": "deploy-guide.md",
    "setup": "setup-guide.md",
    "auto-deploy": "auto-deploy.md",
    "troubleshooting": "troubleshooting.md",
    "domains-ssl": "domains-ssl.md",
    "databases": "databases.md",
    "docker-compose": "docker-compose.md",
    "github-integration": "github-integration.md",
}

RESOURCES: tuple[ResourceDefinition, ...] = (
    ResourceDefinition(
        uri="dokploy://docs/api-reference",
        filename="api-reference.md",
        name="Dokploy API Reference",
        description="Complete REST API endpoint documentation",
    ),
    ResourceDefinition(
        uri="dokploy://docs/auto-deploy",
        filename="auto-deploy.md",
        name="Auto-Deploy Guide",
        description="GitHub App integration and auto-deploy setup",
    ),
    ResourceDefinition(
        uri="dokploy://docs/troubleshooting",
        filename="troubleshooting.md",
        name="Troubleshooting Guide",
        description="Common issues and solutions",
    ),
)

REFRESH_TOPICS: tuple[RefreshTopic, ...] = (
    RefreshTopic(
        query="Dokploy REST API endpoints application create deploy update project create environment all methods request response format",
        filename="api-reference.md",
        description="API Reference",
    ),
    RefreshTopic(
        query="Deploy application from GitHub repository step by step create project application environment build deploy",
        filename="deploy-guide.md",
        description="Deploy Guide",
    ),
    RefreshTopic(
        query="Install Dokploy on VPS server setup Docker Traefik firewall initial configuration",
        filename="setup-guide.md",
        description="Setup Guide",
    ),
    RefreshTopic(
        query="GitHub App auto-deploy autodeploy push branch automatic deployment configuration",
        filename="auto-deploy.md",
        description="Auto-Deploy Guide",
    ),
    RefreshTopic(
        query="Troubleshooting SSL Let's Encrypt certificate build errors deployment failures common issues",
        filename="troubleshooting.md",
        description="Troubleshooting Guide",
    ),
    RefreshTopic(
        query="GitHub integration private repositories GitHub App installation configuration git providers",
        filename="github-integration.md",
        description="GitHub Integration Guide",
    ),
    RefreshTopic(
        query="Domain configuration SSL certificate HTTPS Let's Encrypt Traefik custom domain setup",
        filename="domains-ssl.md",
        description="Domains & SSL Guide",
    ),
    RefreshTopic(
        query="PostgreSQL MySQL MongoDB Redis database create deploy connection string internal external",
        filename="databases.md",
        description="Databases Guide",
    ),
    RefreshTopic(
        query="Docker Compose deployment compose create update deploy raw YAML multi-container",
        filename="docker-compose.md",
        description="Docker Compose Guide",
    ),
)


class DocsCatalog(BaseModel):
    """Immutable lookup tables shared by the loader, search and MCP tools.

    Built once at startup and passed into each component.
    """

    model_config = ConfigDict(frozen=True)

    doc_files: tuple[str, ...] = DOC_FILES
    api_reference_file: str = API_REFERENCE_FILE
    section_headings: dict[str, str] = Field(
        default_factory=lambda: dict(SECTION_HEADINGS)
    )
    guide_files: dict[str, str] = Field(default_factory=lambda: dict(GUIDE_FILES))
    resources: tuple[ResourceDefinition, ...] = RESOURCES
    refresh_topics: tuple[RefreshTopic, ...] = REFRESH_TOPICS

    @property
    def categories(self) -> list[str]:
        """Valid ``dokploy_api_reference`` categories, ``all`` first."""
        return [ALL_CATEGORY, *self.section_headings]

    def resource_for(self, uri: str) -> ResourceDefinition | None:
        """Find the resource registered under ``uri``."""
        for resource in self.resources:
            if resource.uri == uri:
                return resource
        return None


__all__ = [
    "ALL_CATEGORY",
    "API_REFERENCE_FILE",
    "DOC_FILES",
    "GUIDE_FILES",
    "REFRESH_TOPICS",
    "RESOURCES",
    "SECTION_HEADINGS",
    "DocsCatalog",
    "RefreshTopic",
    "ResourceDefinition",
]
