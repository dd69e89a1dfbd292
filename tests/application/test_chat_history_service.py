"""
Test suite for ChatHistoryService.

System role: Verification of user-scoped chat history
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from regchat.application.services import ChatHistoryService
from regchat.boundary.db.models import ChatLogModel
from regchat.core.exceptions import NotFoundError
from regchat.models.chat import ChatType


@pytest.fixture
async def seeded_logs(test_async_db) -> list[ChatLogModel]:
    """Insert three logs for user-1 and one for user-2, oldest first."""
    base = datetime(2024, 5, 1, tzinfo=timezone.utc)
    logs = [
        ChatLogModel(
            user_id="user-1",
            chat_type=ChatType.DOCUMENT,
            document_id="EPA-2024-001",
            prompt="first",
            response="a1",
            embedding=[0.1, 0.2],
            tokens_used=10,
            created_at=base,
        ),
        ChatLogModel(
            user_id="user-1",
            chat_type=ChatType.REGULATION,
            prompt="second",
            response="a2",
            embedding=[0.3, 0.4],
            tokens_used=20,
            created_at=base + timedelta(minutes=1),
        ),
        ChatLogModel(
            user_id="user-1",
            chat_type=ChatType.DOCUMENT,
            document_id="EPA-2024-001",
            prompt="third",
            response="a3",
            embedding=[0.5, 0.6],
            tokens_used=30,
            created_at=base + timedelta(minutes=2),
        ),
        ChatLogModel(
            user_id="user-2",
            chat_type=ChatType.DOCUMENT,
            document_id="EPA-2024-001",
            prompt="other user",
            response="b1",
            embedding=[0.7, 0.8],
            tokens_used=40,
            created_at=base + timedelta(minutes=3),
        ),
    ]
    test_async_db.add_all(logs)
    await test_async_db.commit()
    return logs


class TestListHistory:
    """Test list_history()."""

    async def test_own_entries_newest_first(self, test_async_db, seeded_logs):
        service = ChatHistoryService(test_async_db)

        page = await service.list_history("user-1")

        assert page.total == 3
        assert [item.prompt for item in page.items] == ["third", "second", "first"]

    async def test_document_filter(self, test_async_db, seeded_logs):
        service = ChatHistoryService(test_async_db)

        page = await service.list_history("user-1", document_id="EPA-2024-001")

        assert page.total == 2
        assert {item.chat_type for item in page.items} == {ChatType.DOCUMENT}

    async def test_pagination_keeps_total(self, test_async_db, seeded_logs):
        service = ChatHistoryService(test_async_db)

        page = await service.list_history("user-1", limit=1, offset=1)

        assert page.total == 3
        assert [item.prompt for item in page.items] == ["second"]

    async def test_unknown_user(self, test_async_db, seeded_logs):
        service = ChatHistoryService(test_async_db)

        page = await service.list_history("nobody")

        assert page.total == 0
        assert page.items == []


class TestDeleteEntry:
    """Test delete_entry()."""

    async def test_deletes_own_entry(self, test_async_db, seeded_logs):
        service = ChatHistoryService(test_async_db)

        await service.delete_entry("user-1", seeded_logs[0].id)

        page = await service.list_history("user-1")
        assert page.total == 2

    async def test_cannot_delete_other_users_entry(self, test_async_db, seeded_logs):
        """Test another user's entry looks missing and stays in place."""
        service = ChatHistoryService(test_async_db)

        with pytest.raises(NotFoundError):
            await service.delete_entry("user-1", seeded_logs[3].id)

        assert (await service.list_history("user-2")).total == 1

    async def test_missing_entry(self, test_async_db, seeded_logs):
        service = ChatHistoryService(test_async_db)

        with pytest.raises(NotFoundError) as exc_info:
            await service.delete_entry("user-1", uuid.uuid4())

        assert exc_info.value.message.startswith("Chat log not found")
