"""
Shared base for services that call the completion gateway.

Dependencies: study_gateway.boundary.gateway, study_gateway.configs
System role: Builds CompletionRequests and unwraps CompletionResults
"""

import logging

from study_gateway.boundary.gateway.completion_client import CompletionClient
from study_gateway.configs.generation import GenerationSettings
from study_gateway.models.chat import ChatMessage, CompletionRequest

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class GatewayService:
    """Base class holding the completion client and generation settings."""

    def __init__(
        self,
        completion_client: CompletionClient,
        settings: GenerationSettings,
        model: str = DEFAULT_MODEL,
    ) -> None:
        """
        Initialize gateway-backed service.

        Args:
            completion_client: Shared completion client
            settings: Generation budgets and temperatures
            model: Model identifier sent with every request
        """
        self.completion_client = completion_client
        self.settings = settings
        self.model = model

    async def _complete(
        self,
        messages: list[ChatMessage],
        temperature: float,
        operation: str,
        model: str | None = None,
    ) -> str:
        """
        Run one completion and return its content.

        Raises:
            RateLimitError, EmptyResultError, TransportError: From the result envelope
        """
        request = CompletionRequest(
            messages=tuple(messages),
            model=model or self.model,
            temperature=temperature,
        )
        result = await self.completion_client.complete(request)
        return result.unwrap(operation)
