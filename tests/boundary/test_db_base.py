"""
Test suite for the declarative base and shared mixins.

Tests constraint naming, client-side ids and timestamp columns.

System role: Verification of ORM foundations
"""

import uuid
from datetime import timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from study_gateway.boundary.db.base import Base, utc_now
from study_gateway.boundary.db.CRUD.study_content_crud import study_content_crud
from study_gateway.boundary.db.models import ChatMessageModel, ConversationModel, StudyContentModel


class TestNamingConvention:
    """Constraint and index names come from the shared convention."""

    def test_check_constraint_is_prefixed_with_table(self) -> None:
        names = {c.name for c in ChatMessageModel.__table__.constraints}

        assert "ck_chat_messages_role" in names
        assert "pk_chat_messages" in names

    def test_indexes_use_column_label(self) -> None:
        names = {ix.name for ix in StudyContentModel.__table__.indexes}

        assert "ix_study_content_note_id" in names
        assert "ix_study_content_updated_at" in names

    def test_all_tables_share_one_metadata(self) -> None:
        assert ConversationModel.__table__.metadata is Base.metadata
        assert StudyContentModel.__table__.metadata is Base.metadata


class TestMixins:
    """Test suite for UUIDMixin and TimestampMixin."""

    def test_utc_now_is_timezone_aware(self) -> None:
        assert utc_now().tzinfo is timezone.utc

    @pytest.mark.asyncio
    async def test_timestamps_are_set_on_create_and_kept_on_update(
        self, test_async_db: AsyncSession
    ) -> None:
        # Arrange
        note_id = uuid.uuid4()
        record = await study_content_crud.upsert_fields(test_async_db, note_id, summary="<p>v1</p>")
        created_at = record.created_at

        # Act
        updated = await study_content_crud.upsert_fields(test_async_db, note_id, summary="<p>v2</p>")

        # Assert
        assert isinstance(updated.id, uuid.UUID)
        assert created_at is not None
        assert updated.created_at == created_at
        assert updated.updated_at >= updated.created_at
