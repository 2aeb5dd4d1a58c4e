"""
Integration tests for SqlAlchemyKnowledgeStore.

Runs against a temporary SQLite database through aiosqlite with foreign
keys enabled.

Dependencies: pytest, pytest_asyncio, sqlalchemy, aiosqlite
System role: Knowledge store persistence verification
"""

import uuid

import pytest

from bizbot.core.exceptions import PersistenceError


async def add_document(store, business_id: str, name: str = "menu.txt") -> str:
    return await store.save_document(
        business_id=business_id,
        original_name=name,
        file_type="txt",
        size_bytes=42,
        content=f"Content of {name}",
        category="menu",
    )


async def add_chunk(store, business_id: str, document_id: str, index: int) -> str:
    return await store.save_chunk(
        business_id=business_id,
        document_id=document_id,
        chunk_index=index,
        content=f"chunk {index}",
        embedding=[0.1 * index, 1.0],
        category="menu",
        keywords="chunk",
    )


class TestBusinesses:
    """Test suite for business records."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, sql_store) -> None:
        """Should round-trip every business field."""
        created = await sql_store.save_business(
            name="Bright Tutors",
            phone="+919876543210",
            whatsapp="+919876543210",
            email="hi@bright.in",
            hours="Mon-Fri 9am - 6pm",
        )

        loaded = await sql_store.get_business_by_id(created.id)

        assert loaded == created
        assert loaded.address is None

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_ids(self, sql_store) -> None:
        """Should return None for ids that do not resolve."""
        assert await sql_store.get_business_by_id(str(uuid.uuid4())) is None
        assert await sql_store.get_business_by_id("not-a-uuid") is None


class TestDocumentsAndChunks:
    """Test suite for document and chunk records."""

    @pytest.mark.asyncio
    async def test_chunks_in_document_order(self, sql_store) -> None:
        """Should list chunks by document upload order then chunk index."""
        business = await sql_store.save_business(name="Spice Garden")
        first = await add_document(sql_store, business.id, "first.txt")
        second = await add_document(sql_store, business.id, "second.txt")
        await add_chunk(sql_store, business.id, second, 0)
        await add_chunk(sql_store, business.id, first, 1)
        await add_chunk(sql_store, business.id, first, 0)

        chunks = await sql_store.get_chunks_for_business(business.id)

        assert [(c.document_id, c.chunk_index) for c in chunks] == [(first, 0), (first, 1), (second, 0)]
        assert chunks[1].embedding == [0.1, 1.0]
        assert chunks[0].keywords == "chunk"

    @pytest.mark.asyncio
    async def test_chunks_are_scoped_to_business(self, sql_store) -> None:
        """Should not return chunks of another business."""
        mine = await sql_store.save_business(name="Mine")
        other = await sql_store.save_business(name="Other")
        await add_chunk(sql_store, other.id, await add_document(sql_store, other.id), 0)

        assert await sql_store.get_chunks_for_business(mine.id) == []
        assert await sql_store.get_chunks_for_business("garbage") == []

    @pytest.mark.asyncio
    async def test_document_for_unknown_business(self, sql_store) -> None:
        """Should reject documents whose business does not exist."""
        with pytest.raises(PersistenceError) as exc_info:
            await add_document(sql_store, str(uuid.uuid4()))

        assert exc_info.value.details["operation"] == "save_document"

    @pytest.mark.asyncio
    async def test_malformed_ids_on_write(self, sql_store) -> None:
        """Should raise PersistenceError for ids that are not UUIDs."""
        business = await sql_store.save_business(name="Spice Garden")

        with pytest.raises(PersistenceError):
            await add_document(sql_store, "not-a-uuid")
        with pytest.raises(PersistenceError):
            await add_chunk(sql_store, business.id, "not-a-uuid", 0)

    @pytest.mark.asyncio
    async def test_chunk_for_document_of_other_business(self, sql_store) -> None:
        """Should reject chunks whose document belongs to another business."""
        mine = await sql_store.save_business(name="Mine")
        other = await sql_store.save_business(name="Other")
        foreign_document = await add_document(sql_store, other.id)

        with pytest.raises(PersistenceError) as exc_info:
            await add_chunk(sql_store, mine.id, foreign_document, 0)
        with pytest.raises(PersistenceError):
            await add_chunk(sql_store, mine.id, str(uuid.uuid4()), 0)

        assert exc_info.value.details["operation"] == "save_chunk"
        assert await sql_store.get_chunks_for_business(mine.id) == []
        assert await sql_store.get_chunks_for_business(other.id) == []

    @pytest.mark.asyncio
    async def test_delete_business_cascades(self, sql_store) -> None:
        """Should remove documents and chunks with their business."""
        business = await sql_store.save_business(name="Spice Garden")
        document_id = await add_document(sql_store, business.id)
        await add_chunk(sql_store, business.id, document_id, 0)

        assert await sql_store.delete_business(business.id) is True

        assert await sql_store.get_business_by_id(business.id) is None
        assert await sql_store.get_chunks_for_business(business.id) == []
        assert await sql_store.delete_business(business.id) is False
