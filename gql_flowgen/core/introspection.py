"""Fetches introspection documents from a live GraphQL endpoint."""

from typing import Any

import httpx
from graphql import get_introspection_query

from .auth import Auth, NoAuth


class IntrospectionError(Exception):
    """Raised when an endpoint cannot produce an introspection result."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class IntrospectionClient:
    """Runs the standard introspection query against an endpoint.

    Examples:
        client = IntrospectionClient(url, auth=BearerAuth(token))
        document = asyncio.run(client.fetch())

        # Tests can inject a transport
        client = IntrospectionClient(url, transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (defaults to NoAuth)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth or NoAuth()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        headers.update(self._auth.get_headers())
        return headers

    async def fetch(self) -> dict[str, Any]:
        """Fetch the introspection response.

        Returns:
            The full response document, `{"data": {"__schema": ...}}`

        Raises:
            IntrospectionError: On transport failures, non-2xx statuses and
                responses carrying GraphQL errors
        """
        payload = {"query": get_introspection_query(descriptions=True)}
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self._headers(),
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise IntrospectionError(
                    f"Introspection request failed with status {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise IntrospectionError(f"Introspection request failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise IntrospectionError("Endpoint did not return JSON") from e
        if not isinstance(result, dict):
            raise IntrospectionError("Endpoint response is not a JSON object")

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise IntrospectionError(f"GraphQL errors: {error_messages}", result["errors"])

        return result
