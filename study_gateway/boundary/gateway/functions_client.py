"""
HTTP client for the hosted functions.

Posts JSON payloads to the function endpoints and returns the status code
with the decoded body. Does not interpret the body; classification happens in
error_classifier.

Dependencies: httpx
System role: Transport to the hosted completion and link functions
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class HostedFunctionClient:
    """Thin async wrapper over one shared httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 180.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the function client.

        Args:
            base_url: Base URL of the functions, e.g. https://x.supabase.co/functions/v1
            api_key: Key sent as bearer token and apikey header
            timeout: Transport timeout in seconds
            transport: Optional custom transport
        """
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
            headers["apikey"] = api_key

        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def invoke(self, function_name: str, payload: dict[str, Any]) -> tuple[int, Any]:
        """
        Invoke a hosted function.

        Args:
            function_name: Function to call, e.g. "ai-generate"
            payload: JSON request body

        Returns:
            tuple[int, Any]: HTTP status code and decoded JSON body (raw text when not JSON)

        Raises:
            httpx.HTTPError: On network failures and timeouts
        """
        response = await self._client.post(f"/{function_name}", json=payload)
        try:
            body = response.json()
        except ValueError:
            body = response.text or None

        if response.is_error:
            logger.warning(
                f"{__name__}:invoke - {function_name} returned {response.status_code}"
            )
        return response.status_code, body

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
