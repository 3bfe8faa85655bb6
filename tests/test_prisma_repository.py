"""PrismaConversationRepository against a mocked Prisma client."""

import asyncio
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

pytest.importorskip("prisma.errors")

from prisma.errors import PrismaError  # noqa: E402

from jai_backend.domain.entities.conversation import Conversation  # noqa: E402
from jai_backend.domain.entities.message import Sender  # noqa: E402
from jai_backend.domain.exceptions import StorageError  # noqa: E402
from jai_backend.domain.value_objects.conversation_id import ConversationId  # noqa: E402
from jai_backend.domain.value_objects.user_id import UserId  # noqa: E402
from jai_backend.infrastructure.persistence import PrismaConversationRepository  # noqa: E402

OWNER = UserId("user-1")
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
MESSAGE_ID = "3f2b8c1e-4d5a-4b6c-9e7f-0a1b2c3d4e5f"


def _record(conv_id="c1", messages=None):
    return SimpleNamespace(
        id=conv_id,
        user_id=OWNER.value,
        title="Explain decorators",
        created_at=NOW,
        updated_at=NOW + timedelta(minutes=1),
        messages=messages,
    )


def _message_record(sender="user", content="Explain decorators"):
    return SimpleNamespace(id=MESSAGE_ID, sender=sender, content=content, created_at=NOW)


@pytest.fixture()
def prisma():
    client = MagicMock()
    client.conversation.find_many = AsyncMock(return_value=[])
    client.conversation.find_first = AsyncMock(return_value=None)
    client.conversation.delete_many = AsyncMock(return_value=0)
    tx = MagicMock()
    tx.conversation.upsert = AsyncMock()
    tx.message.create_many = AsyncMock()
    # every message of the aggregate is found after the insert
    tx.message.count = AsyncMock(side_effect=lambda where: len(where["id"]["in"]))
    client.tx.return_value.__aenter__.return_value = tx
    client.tx.return_value.__aexit__.return_value = False
    client.mock_tx = tx
    return client


def test_list_summaries_scoped_and_newest_first(prisma):
    prisma.conversation.find_many.return_value = [_record("c2"), _record("c1")]
    repo = PrismaConversationRepository(prisma)

    summaries = asyncio.run(repo.list_summaries(OWNER))

    assert [s.id.value for s in summaries] == ["c2", "c1"]
    prisma.conversation.find_many.assert_awaited_once_with(
        where={"user_id": "user-1"}, order={"created_at": "desc"}
    )


def test_get_by_id_maps_messages(prisma):
    prisma.conversation.find_first.return_value = _record(
        messages=[_message_record(), _message_record("ai", "A decorator wraps...")]
    )
    repo = PrismaConversationRepository(prisma)

    conversation = asyncio.run(repo.get_by_id(OWNER, ConversationId("c1")))

    assert [m.sender for m in conversation.messages] == [Sender.USER, Sender.AI]
    assert conversation.owner_id == OWNER
    kwargs = prisma.conversation.find_first.await_args.kwargs
    assert kwargs["where"] == {"id": "c1", "user_id": "user-1"}
    assert kwargs["include"] == {"messages": {"order_by": {"seq": "asc"}}}


def test_get_by_id_missing_returns_none(prisma):
    repo = PrismaConversationRepository(prisma)
    assert asyncio.run(repo.get_by_id(OWNER, ConversationId("nope"))) is None


def test_recent_excluding_filters_and_limits(prisma):
    repo = PrismaConversationRepository(prisma)

    asyncio.run(repo.recent_excluding(OWNER, ConversationId("active"), 5))

    kwargs = prisma.conversation.find_many.await_args.kwargs
    assert kwargs["where"] == {"user_id": "user-1", "NOT": [{"id": "active"}]}
    assert kwargs["order"] == {"updated_at": "desc"}
    assert kwargs["take"] == 5
    assert kwargs["include"] == {"messages": {"order_by": {"seq": "desc"}, "take": 1}}


def test_save_upserts_and_appends_messages_in_one_transaction(prisma):
    conversation = Conversation.start(OWNER, "Explain decorators")
    conversation.append_exchange("Explain decorators", "A decorator wraps a function.")
    repo = PrismaConversationRepository(prisma)

    asyncio.run(repo.save(conversation))

    tx = prisma.mock_tx
    upsert = tx.conversation.upsert.await_args.kwargs
    assert upsert["where"] == {"id": conversation.id.value}
    assert upsert["data"]["create"]["title"] == "Explain decorators"
    assert set(upsert["data"]["update"]) == {"updated_at"}

    created = tx.message.create_many.await_args.kwargs
    assert created["skip_duplicates"] is True
    assert [(row["seq"], row["sender"]) for row in created["data"]] == [(0, "user"), (1, "ai")]



def test_save_rejects_messages_displaced_by_a_concurrent_append(prisma):
    conversation = Conversation.start(OWNER, "Explain decorators")
    conversation.append_exchange("Explain decorators", "A decorator wraps a function.")
    # another request already stored a message at seq 0, so ours was skipped
    prisma.mock_tx.message.count = AsyncMock(return_value=1)
    repo = PrismaConversationRepository(prisma)

    with pytest.raises(StorageError, match="concurrently"):
        asyncio.run(repo.save(conversation))


def test_resaving_stored_messages_is_accepted(prisma):
    conversation = Conversation.start(OWNER, "Explain decorators")
    conversation.append_exchange("Explain decorators", "A decorator wraps a function.")
    repo = PrismaConversationRepository(prisma)

    asyncio.run(repo.save(conversation))
    asyncio.run(repo.save(conversation))

    ids = [m.id.value for m in conversation.messages]
    prisma.mock_tx.message.count.assert_awaited_with(where={"id": {"in": ids}})

def test_delete_reports_whether_a_row_was_removed(prisma):
    repo = PrismaConversationRepository(prisma)
    assert asyncio.run(repo.delete(OWNER, ConversationId("c1"))) is False

    prisma.conversation.delete_many.return_value = 1
    assert asyncio.run(repo.delete(OWNER, ConversationId("c1"))) is True
    prisma.conversation.delete_many.assert_awaited_with(
        where={"id": "c1", "user_id": "user-1"}
    )


def test_prisma_errors_become_storage_errors(prisma):
    prisma.conversation.find_many.side_effect = PrismaError("connection refused")
    repo = PrismaConversationRepository(prisma)

    with pytest.raises(StorageError):
        asyncio.run(repo.list_summaries(OWNER))
