"""
Chat conversation CRUD operations.

Dependencies: sqlalchemy, study_gateway.boundary.db
System role: Persistence for note tutor chats
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_gateway.boundary.db.CRUD.base_crud import BaseCRUD
from study_gateway.boundary.db.models.conversation_model import (
    ChatMessageModel,
    ConversationModel,
)


class ConversationCRUD(BaseCRUD[ConversationModel]):
    """CRUD operations for conversations and their messages."""

    def __init__(self) -> None:
        super().__init__(ConversationModel)

    async def get_or_create(
        self,
        session: AsyncSession,
        user_id: UUID,
        note_id: UUID | None = None,
    ) -> ConversationModel:
        """
        Return the user's conversation for a note, creating it if needed.

        Args:
            session: Async database session
            user_id: Conversation owner
            note_id: Note the conversation is about (None for a general chat)

        Returns:
            ConversationModel: Most recent matching conversation or a new one
        """
        stmt = (
            select(ConversationModel)
            .where(ConversationModel.user_id == user_id)
            .where(
                ConversationModel.note_id == note_id
                if note_id is not None
                else ConversationModel.note_id.is_(None)
            )
            .order_by(ConversationModel.updated_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        conversation = result.scalar_one_or_none()
        if conversation is not None:
            return conversation
        return await self.create(session, user_id=user_id, note_id=note_id)

    async def add_message(
        self,
        session: AsyncSession,
        conversation_id: UUID,
        role: str,
        content: str,
    ) -> ChatMessageModel:
        """
        Append a message to a conversation.

        Args:
            session: Async database session
            conversation_id: Conversation UUID
            role: "user" or "assistant"
            content: Message text

        Returns:
            ChatMessageModel: Persisted message

        Raises:
            ValueError: If role is not user or assistant
        """
        if role not in ("user", "assistant"):
            raise ValueError(f"Invalid chat message role: {role}")

        message = ChatMessageModel(conversation_id=conversation_id, role=role, content=content)
        session.add(message)
        await session.flush()
        await session.refresh(message)
        return message

    async def get_recent_messages(
        self,
        session: AsyncSession,
        conversation_id: UUID,
        limit: int = 10,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve the most recent messages in chronological order.

        Args:
            session: Async database session
            conversation_id: Conversation UUID
            limit: Maximum number of messages

        Returns:
            Sequence[ChatMessageModel]: Oldest first
        """
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.conversation_id == conversation_id)
            .order_by(ChatMessageModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))


conversation_crud = ConversationCRUD()
