"""Fetch a schema from a live GraphQL endpoint.

Sends the standard introspection query over HTTP and parses the answer
into a Schema.
"""

import asyncio
import logging
from typing import Any

import httpx
from graphql import get_introspection_query

from .errors import IntrospectionError
from .model import Schema
from .parser import parse_response

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = get_introspection_query(descriptions=True)


class IntrospectionClient:
    """Runs the introspection query against an endpoint.

    Examples:
        async with IntrospectionClient(url) as client:
            schema = await client.introspect()

        client = IntrospectionClient(url, headers={"Authorization": f"Bearer {token}"})
    """

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            headers: Extra request headers, e.g. for authentication
            timeout: Request timeout in seconds
            transport: Optional httpx transport (mainly for tests)
        """
        self.url = url
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "IntrospectionClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self.headers)

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self) -> dict[str, Any]:
        """Send the introspection query and return the decoded JSON response.

        Raises:
            httpx.HTTPStatusError: If the endpoint answers with a non-2xx status
            IntrospectionError: If the body is not JSON
        """
        client = await self._get_client()

        payload = {"operationName": "IntrospectionQuery", "query": INTROSPECTION_QUERY}
        logger.debug("POST %s (introspection query)", self.url)
        response = await client.post(self.url, json=payload)
        response.raise_for_status()

        logger.debug("Received %d bytes from %s", len(response.content), self.url)
        try:
            return response.json()
        except ValueError as e:
            raise IntrospectionError(f"Response from {self.url} is not valid JSON") from e

    async def introspect(self) -> Schema:
        """Fetch and parse the endpoint's schema."""
        schema = parse_response(await self.fetch())
        logger.info("Introspected %s: %d types", self.url, len(schema.types))
        return schema


def introspect(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
) -> Schema:
    """Synchronously introspect ``url`` and return its Schema."""

    async def _run() -> Schema:
        async with IntrospectionClient(url, headers, timeout=timeout) as client:
            return await client.introspect()

    return asyncio.run(_run())
