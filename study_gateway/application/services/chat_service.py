"""
Chat service for note-grounded tutoring.

Builds a bounded conversation (note context as a system message plus the
most recent turns), forwards it to the completion gateway and, for note
chats, persists both sides of the exchange.

Dependencies: sqlalchemy, study_gateway.boundary.db, study_gateway.boundary.gateway
System role: Chat orchestration layer
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from study_gateway.application.services.gateway_service import DEFAULT_MODEL, GatewayService
from study_gateway.boundary.db.CRUD.conversation_crud import conversation_crud
from study_gateway.boundary.gateway.completion_client import CompletionClient
from study_gateway.configs.generation import GenerationSettings
from study_gateway.core.exceptions import GenerationError, RateLimitError, ValidationError
from study_gateway.core.prompts.assistant_prompt import build_tutor_system_message
from study_gateway.core.text.chunker import truncate_words
from study_gateway.models.chat import ChatMessage, ChatRole

logger = logging.getLogger(__name__)


class ChatService(GatewayService):
    """
    Chat service for conversational Q&A over a note.

    The database session is only needed for chat_with_note.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        settings: GenerationSettings,
        model: str = DEFAULT_MODEL,
        history_turns: int = 10,
        db: AsyncSession | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            completion_client: Shared completion client
            settings: Generation budgets and temperatures
            model: Default model identifier
            history_turns: Most recent non-system turns forwarded to the model
            db: AsyncSession for conversation persistence
        """
        super().__init__(completion_client, settings, model)
        self.history_turns = history_turns
        self.db = db

    def build_messages(
        self,
        messages: list[ChatMessage],
        context: str | None = None,
    ) -> list[ChatMessage]:
        """
        Bound a conversation for one completion call.

        Caller system messages come first, then the note context (truncated
        to the chat context budget), then the last history_turns turns.

        Raises:
            ValidationError: If there is no user or assistant turn
        """
        system_messages = [m for m in messages if m.role == ChatRole.SYSTEM]
        turns = [m for m in messages if m.role != ChatRole.SYSTEM]
        if not turns:
            raise ValidationError("At least one user message is required", field="messages")

        if context and context.strip():
            system_messages.append(
                build_tutor_system_message(
                    truncate_words(context.strip(), self.settings.chat_context_words)
                )
            )
        return system_messages + turns[-self.history_turns:]

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        context: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
    ) -> str:
        """
        Answer the latest turn of a conversation.

        Args:
            messages: Conversation so far, oldest first
            context: Optional note content to ground the answer in
            model: Model override
            temperature: Temperature override

        Returns:
            str: Assistant reply

        Raises:
            ValidationError: If the conversation has no turns
            RateLimitError: If the generation quota is exhausted
            GenerationError: For any other failure
        """
        bounded = self.build_messages(messages, context)
        logger.info(
            f"{__name__}:chat_completion - START turns={len(messages)} sent={len(bounded)}"
        )
        try:
            reply = await self._complete(
                bounded,
                self.settings.chat_temperature if temperature is None else temperature,
                "chat",
                model=model,
            )
        except RateLimitError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:chat_completion - {type(e).__name__}: {e}")
            raise GenerationError("chat", e, action="complete chat") from e
        return reply.strip()

    async def chat_with_note(
        self,
        user_id: UUID,
        note_id: UUID,
        message: str,
        context: str | None = None,
    ) -> tuple[UUID, str]:
        """
        Process one tutor chat message about a note.

        Flow:
        1. Fetch or create the user's conversation for the note
        2. Load recent history
        3. Complete with history plus the new message
        4. Store user message and reply

        Nothing is stored when the completion fails.

        Returns:
            tuple[UUID, str]: Conversation id and assistant reply
        """
        if self.db is None:
            raise RuntimeError("ChatService.chat_with_note requires a database session")

        logger.info(f"{__name__}:chat_with_note - START note_id={note_id}")
        conversation = await conversation_crud.get_or_create(self.db, user_id, note_id)
        history = await conversation_crud.get_recent_messages(
            self.db, conversation.id, limit=self.history_turns
        )

        messages = [ChatMessage(role=ChatRole(m.role), content=m.content) for m in history]
        messages.append(ChatMessage(role=ChatRole.USER, content=message))

        reply = await self.chat_completion(messages, context=context)

        await conversation_crud.add_message(self.db, conversation.id, ChatRole.USER.value, message)
        await conversation_crud.add_message(
            self.db, conversation.id, ChatRole.ASSISTANT.value, reply
        )
        await self.db.commit()

        logger.info(f"{__name__}:chat_with_note - SUCCESS conversation_id={conversation.id}")
        return conversation.id, reply
