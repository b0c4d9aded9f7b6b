"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators (the
HTTP client, object storage, generators) are built once and cached;
request-scoped services receive the request's database session.

Dependencies: study_gateway.configs, study_gateway.application, study_gateway.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from study_gateway.application.services import (
    ChatService,
    LanguageService,
    MediaService,
    NoteGenerationService,
    StudyContentService,
    SummaryService,
)
from study_gateway.boundary.db import get_async_db, get_async_session_factory
from study_gateway.boundary.gateway import CompletionClient, HostedFunctionClient
from study_gateway.boundary.storage import ObjectStorageClient
from study_gateway.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._completion_client = None
        self._storage = None
        self._summary_service = None
        self._study_content_service = None
        self._language_service = None
        self._media_service = None
        self._note_generation_service = None

    @property
    def completion_client(self) -> CompletionClient:
        """Get cached completion client."""
        if self._completion_client is None:
            gateway = get_settings().gateway
            self._completion_client = CompletionClient(
                HostedFunctionClient(
                    base_url=gateway.functions_url,
                    api_key=gateway.api_key,
                    timeout=gateway.request_timeout,
                ),
                completion_function=gateway.completion_function,
                link_function=gateway.link_function,
            )
        return self._completion_client

    @property
    def storage(self) -> ObjectStorageClient:
        """Get cached object storage client."""
        if self._storage is None:
            storage = get_settings().storage
            self._storage = ObjectStorageClient(
                bucket=storage.bucket,
                region=storage.region,
                endpoint_url=storage.endpoint_url,
                key_prefix=storage.key_prefix,
            )
        return self._storage

    @property
    def summary_service(self) -> SummaryService:
        if self._summary_service is None:
            settings = get_settings()
            self._summary_service = SummaryService(
                self.completion_client, settings.generation, settings.gateway.default_model
            )
        return self._summary_service

    @property
    def study_content_service(self) -> StudyContentService:
        if self._study_content_service is None:
            settings = get_settings()
            self._study_content_service = StudyContentService(
                self.completion_client, settings.generation, settings.gateway.default_model
            )
        return self._study_content_service

    @property
    def language_service(self) -> LanguageService:
        if self._language_service is None:
            settings = get_settings()
            self._language_service = LanguageService(
                self.completion_client, settings.generation, settings.gateway.default_model
            )
        return self._language_service

    @property
    def media_service(self) -> MediaService:
        if self._media_service is None:
            self._media_service = MediaService(
                self.completion_client,
                storage=self.storage,
                inline_audio_max_bytes=get_settings().gateway.inline_audio_max_bytes,
            )
        return self._media_service

    @property
    def note_generation_service(self) -> NoteGenerationService:
        """Get cached note generation service; opens its own sessions per save."""
        if self._note_generation_service is None:
            self._note_generation_service = NoteGenerationService(
                summary_service=self.summary_service,
                study_content_service=self.study_content_service,
                language_service=self.language_service,
                session_factory=get_async_session_factory(),
                settings=get_settings().generation,
            )
        return self._note_generation_service

    async def aclose(self) -> None:
        """Close the shared HTTP client."""
        if self._completion_client is not None:
            await self._completion_client.aclose()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._completion_client = None
        self._storage = None
        self._summary_service = None
        self._study_content_service = None
        self._language_service = None
        self._media_service = None
        self._note_generation_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_summary_service() -> SummaryService:
    return get_service_cache().summary_service


def get_study_content_service() -> StudyContentService:
    return get_service_cache().study_content_service


def get_language_service() -> LanguageService:
    return get_service_cache().language_service


def get_media_service() -> MediaService:
    return get_service_cache().media_service


def get_note_generation_service() -> NoteGenerationService:
    return get_service_cache().note_generation_service


def get_chat_service(db: AsyncSession = Depends(get_async_db)) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatService: Chat service bound to the request's session
    """
    settings = get_settings()
    return ChatService(
        get_service_cache().completion_client,
        settings.generation,
        model=settings.gateway.default_model,
        history_turns=settings.gateway.history_turns,
        db=db,
    )
