"""
Chat conversation ORM models.

A conversation belongs to a user and optionally a note; messages are ordered
by creation time.

Dependencies: sqlalchemy
System role: Persistence of note tutor chats
"""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_gateway.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now


class ConversationModel(UUIDMixin, TimestampMixin, Base):
    """Chat conversation between a user and the tutor."""

    __tablename__ = "chat_conversations"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    note_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), index=True, nullable=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    messages: Mapped[list["ChatMessageModel"]] = relationship(
        back_populates="conversation",
        cascade="all, delete-orphan",
        order_by="ChatMessageModel.created_at",
    )

    def __repr__(self) -> str:
        return f"<ConversationModel(id={self.id}, user_id={self.user_id}, note_id={self.note_id})>"


class ChatMessageModel(UUIDMixin, Base):
    """Single persisted chat turn."""

    __tablename__ = "chat_messages"
    __table_args__ = (
        CheckConstraint("role IN ('user', 'assistant')", name="role"),
    )

    conversation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("chat_conversations.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    conversation: Mapped[ConversationModel] = relationship(back_populates="messages")
