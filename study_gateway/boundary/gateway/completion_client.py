"""
Completion client.

Sends completion, transcription and link-processing requests to the hosted
functions and returns a CompletionResult for every call: transport errors,
error bodies and empty answers come back as classified failures instead of
exceptions.

Dependencies: httpx, study_gateway.boundary.gateway
System role: Process-wide handle to the language model gateway
"""

import logging
from typing import Any

import httpx

from study_gateway.boundary.gateway.error_classifier import classify_exception, classify_response
from study_gateway.boundary.gateway.functions_client import HostedFunctionClient
from study_gateway.models.chat import CompletionRequest
from study_gateway.models.completion import CompletionResult, CompletionSuccess
from study_gateway.models.media import LinkType

logger = logging.getLogger(__name__)


class CompletionClient:
    """Gateway calls returning CompletionResult envelopes."""

    def __init__(
        self,
        functions: HostedFunctionClient,
        completion_function: str = "ai-generate",
        link_function: str = "process-link",
    ) -> None:
        """
        Initialize completion client.

        Args:
            functions: Transport to the hosted functions
            completion_function: Function serving chat and transcription requests
            link_function: Function extracting text from links
        """
        self._functions = functions
        self._completion_function = completion_function
        self._link_function = link_function

    async def _call(
        self,
        function_name: str,
        payload: dict[str, Any],
        content_key: str,
    ) -> tuple[CompletionResult, Any]:
        try:
            status_code, body = await self._functions.invoke(function_name, payload)
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:_call - {type(e).__name__}: {e}")
            return classify_exception(e), None

        result = classify_response(status_code, body, content_key=content_key)
        if not isinstance(result, CompletionSuccess):
            logger.warning(
                f"{__name__}:_call - {function_name} failed: {result.kind.value} ({result.message})"
            )
        return result, body

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        """
        Run one chat completion.

        Args:
            request: Messages, model and temperature

        Returns:
            CompletionResult: Content on success, classified failure otherwise
        """
        logger.info(
            f"{__name__}:complete - START model={request.model} messages={len(request.messages)}"
        )
        result, _ = await self._call(
            self._completion_function, request.to_payload(), content_key="content"
        )
        return result

    async def transcribe(
        self,
        storage_path: str | None = None,
        audio_base64: str | None = None,
        mime_type: str | None = None,
    ) -> CompletionResult:
        """
        Transcribe audio already in storage, or inline base64 audio.

        Args:
            storage_path: Object storage path of the audio (preferred)
            audio_base64: Base64 audio for small payloads
            mime_type: MIME type of the inline audio

        Returns:
            CompletionResult: Transcript text on success

        Raises:
            ValueError: If neither a storage path nor inline audio is given
        """
        payload: dict[str, Any] = {"type": "transcription"}
        if storage_path:
            payload["storagePath"] = storage_path
        elif audio_base64:
            payload["audioBase64"] = audio_base64
            payload["mimeType"] = mime_type or "audio/webm"
        else:
            raise ValueError("transcribe requires storage_path or audio_base64")

        logger.info(
            f"{__name__}:transcribe - START source={'storage' if storage_path else 'inline'}"
        )
        result, _ = await self._call(self._completion_function, payload, content_key="text")
        return result

    async def process_link(self, url: str, link_type: LinkType) -> tuple[CompletionResult, str | None]:
        """
        Extract text from a web page or Google Drive document.

        Args:
            url: Link to process
            link_type: Detected link type

        Returns:
            tuple[CompletionResult, str | None]: Extracted content and the page title, if any
        """
        logger.info(f"{__name__}:process_link - START type={link_type.value}")
        result, body = await self._call(
            self._link_function,
            {"url": url, "type": link_type.value},
            content_key="content",
        )
        title = body.get("title") if isinstance(body, dict) else None
        return result, title if isinstance(title, str) and title.strip() else None

    async def aclose(self) -> None:
        await self._functions.aclose()
