"""HTTP client for the Context7 documentation API."""

import logging

import httpx

from dokploy_docs.models.config.refresh import RefreshConfig

logger = logging.getLogger(__name__)


class RefreshError(Exception):
    """Exception raised when the Context7 API request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class Context7Client:
    """Simple HTTP client for the Context7 query endpoint."""

    def __init__(
        self,
        config: RefreshConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client with configuration."""
        self.config = config
        self.base_url = config.api_url.rstrip("/")
        self.transport = transport

    async def post(self, endpoint: str, data: dict | None = None) -> dict:
        """Make a POST request to the Context7 API."""
        url = f"{self.base_url}{endpoint}"

        try:
            async with httpx.AsyncClient(
                timeout=self.config.request_timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    url,
                    json=data,
                    headers={"Content-Type": "application/json"},
                )
                return self._handle_response(response)

        except httpx.TimeoutException:
            raise RefreshError(f"Request timeout: {url}")
        except httpx.RequestError as e:
            raise RefreshError(f"Cannot connect to Context7 at {self.base_url}: {e}")

    def _handle_response(self, response: httpx.Response) -> dict:
        """Handle HTTP response and extract the JSON body."""
        if response.is_error:
            raise RefreshError(
                f"Context7 API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RefreshError(
                f"Invalid response body from Context7: {e}",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            raise RefreshError(
                "Unexpected response shape from Context7",
                status_code=response.status_code,
                details={"type": type(data).__name__},
            )
        return data

    async def query(self, query: str) -> str | None:
        """Query the configured library and return the ``content`` field.

        Args:
            query: Natural-language topic query

        Returns:
            The documentation text, or None when the request fails or the
            response carries no content
        """
        try:
            result = await self.post(
                "/query",
                {
                    "libraryId": self.config.library_id,
                    "query": query,
                    "maxTokens": self.config.max_tokens,
                },
            )
        except RefreshError as e:
            logger.error(e.message, extra={"extra_data": {"status": e.status_code}})
            return None

        content = result.get("content")
        return content if isinstance(content, str) and content else None


__all__ = ["Context7Client", "RefreshError"]
