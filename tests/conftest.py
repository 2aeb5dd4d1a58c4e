"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic fake providers, knowledge stores, temp files and a
SQLite-backed async session factory
Dependencies: pytest, pytest_asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

import pytest
import pytest_asyncio

from bizbot.core.exceptions import EmbeddingError, ResponseGenerationError
from bizbot.models import ChatTurn

EMBEDDING_DIMENSION = 8


def bucket_vector(text: str, dimension: int = EMBEDDING_DIMENSION) -> list[float]:
    """Deterministic embedding: character counts bucketed by code point."""
    vector = [0.0] * dimension
    for char in text.lower():
        if char.isalnum():
            vector[ord(char) % dimension] += 1.0
    return vector


class FakeEmbeddingProvider:
    """
    EmbeddingProvider returning fixed vectors.

    Texts listed in `vectors` get that vector; any text containing a key of
    `failures` raises the mapped exception; everything else gets a bucket vector.
    """

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        failures: dict[str, Exception] | None = None,
        default: list[float] | None = None,
    ) -> None:
        self.vectors = vectors or {}
        self.failures = failures or {}
        self.default = default
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        for marker, error in self.failures.items():
            if marker in text:
                raise error
        if text in self.vectors:
            return list(self.vectors[text])
        if self.default is not None:
            return list(self.default)
        return bucket_vector(text)


class FakeChatProvider:
    """ChatProvider returning a fixed answer and recording every call."""

    def __init__(self, answer: str = "Happy to help!", error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[dict] = []

    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ChatTurn],
        user_message: str,
    ) -> str:
        self.calls.append({
            "system_prompt": system_prompt,
            "history": list(history),
            "user_message": user_message,
        })
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_embeddings() -> FakeEmbeddingProvider:
    """Provide embedding provider with bucket vectors."""
    return FakeEmbeddingProvider()


@pytest.fixture
def fake_chat() -> FakeChatProvider:
    """Provide chat provider returning a fixed answer."""
    return FakeChatProvider()


@pytest.fixture
def failing_chat() -> FakeChatProvider:
    """Provide chat provider that fails with a quota error."""
    return FakeChatProvider(error=ResponseGenerationError("429 quota exceeded"))


@pytest.fixture
def rate_limited_error() -> EmbeddingError:
    return EmbeddingError("rate limit reached for requests")


@pytest.fixture
def memory_store():
    """Provide empty in-memory knowledge store."""
    from bizbot.boundary.db.memory_store import InMemoryKnowledgeStore

    return InMemoryKnowledgeStore()


@pytest_asyncio.fixture
async def business(memory_store):
    """Seed a business with a full contact record."""
    return await memory_store.save_business(
        name="Spice Garden",
        description="Family restaurant serving North Indian food",
        phone="+91 98765 43210",
        email="hello@spicegarden.in",
        address="12 MG Road, Pune",
        website="https://spicegarden.in",
        hours="Mon-Sun 11am - 11pm",
    )


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="bizbot_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_file(temp_dir):
    """Write bytes or text into temp_dir and return the path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = temp_dir / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest_asyncio.fixture
async def sql_session_factory(temp_dir):
    """
    Create a file-backed SQLite database with all tables.

    Yields:
        async_sessionmaker: Session factory bound to the test engine
    """
    from bizbot.boundary.db.connection import create_tables, get_async_engine, get_async_session_factory
    from bizbot.configs.database import DatabaseSettings

    engine = get_async_engine(DatabaseSettings(url=f"sqlite+aiosqlite:///{temp_dir / 'test.db'}"))
    await create_tables(engine)

    yield get_async_session_factory(engine)

    await engine.dispose()


@pytest.fixture
def sql_store(sql_session_factory):
    """Provide SqlAlchemyKnowledgeStore over the test database."""
    from bizbot.boundary.db.knowledge_store import SqlAlchemyKnowledgeStore

    return SqlAlchemyKnowledgeStore(sql_session_factory)


@pytest.fixture
def fast_pipeline_settings():
    """Pipeline settings without the inter-batch delay."""
    from bizbot.core.document_processing.configs import DocumentPipelineSettings

    return DocumentPipelineSettings(batch_delay_seconds=0.0, embedding_timeout_seconds=1.0)


@pytest.fixture
def make_embeddings():
    """Provide the FakeEmbeddingProvider class for custom vectors and failures."""
    return FakeEmbeddingProvider


@pytest.fixture
def make_chat():
    """Provide the FakeChatProvider class for custom answers and errors."""
    return FakeChatProvider
