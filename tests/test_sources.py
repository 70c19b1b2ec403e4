import logging

import pytest
from pydantic import ValidationError

from documind.core.exceptions import NotFoundError
from documind.domains.documents.schemas import DocumentCreate
from documind.domains.documents.services import DocumentService
from documind.domains.sources.entities import SourceType
from documind.domains.sources.schemas import DeleteSourceInput, GetSourcesInput, SourceCreate
from documind.domains.sources.services import SourceService


async def _add(session_factory, document_id, **overrides):
    data = {
        "document_id": document_id,
        "title": "Test Text Source",
        "content": "This is test content for the source",
        "source_type": "text",
    }
    data.update(overrides)
    async with session_factory() as session:
        return await SourceService(session).create_source(SourceCreate(**data))


async def test_create_text_source(session_factory, document):
    source = await _add(session_factory, document.id)

    assert source.id is not None
    assert source.document_id == document.id
    assert source.source_type == SourceType.TEXT
    assert source.source_url is None
    assert source.created_at is not None


async def test_create_url_source_keeps_url_exactly(session_factory, document):
    source = await _add(
        session_factory, document.id,
        title="Article", source_type="url", source_url="https://example.com/research"
    )

    async with session_factory() as session:
        [stored] = await SourceService(session).get_sources(GetSourcesInput(document_id=document.id))

    assert stored.id == source.id
    assert stored.source_type == SourceType.URL
    assert stored.source_url == "https://example.com/research"


async def test_create_file_source(session_factory, document):
    source = await _add(session_factory, document.id, title="notes.pdf", source_type="file")
    assert source.source_type == SourceType.FILE


async def test_create_source_for_missing_document(session_factory):
    async with session_factory() as session:
        with pytest.raises(NotFoundError, match="Document with id 99999 not found"):
            await SourceService(session).create_source(SourceCreate(
                document_id=99999, title="Lost", content="Nowhere", source_type="text"
            ))


@pytest.mark.parametrize("overrides", [
    {"title": ""},
    {"content": ""},
    {"source_type": "video"},
    {"source_type": "url"},
    {"source_type": "url", "source_url": "not a url"},
    {"source_type": "text", "source_url": "https://example.com"},
])
def test_source_create_validation(overrides):
    data = {"document_id": 1, "title": "T", "content": "C", "source_type": "text"}
    data.update(overrides)
    with pytest.raises(ValidationError):
        SourceCreate(**data)


async def test_get_sources_empty_for_document_without_sources(session_factory, document):
    async with session_factory() as session:
        sources = await SourceService(session).get_sources(GetSourcesInput(document_id=document.id))
    assert sources == []


async def test_get_sources_for_missing_document_raises(session_factory, caplog):
    caplog.set_level(logging.WARNING, logger="documind.domains.sources.services")
    async with session_factory() as session:
        with pytest.raises(NotFoundError, match="Document not found"):
            await SourceService(session).get_sources(GetSourcesInput(document_id=99999))

    assert any(
        record.levelno == logging.WARNING and "99999" in record.getMessage()
        for record in caplog.records
    )


async def test_get_sources_only_for_given_document(session_factory, document, user):
    async with session_factory() as session:
        other = await DocumentService(session).create_document(DocumentCreate(title="Other", user_id=user.id))
    first = await _add(session_factory, document.id, title="First")
    second = await _add(session_factory, document.id, title="Second")
    await _add(session_factory, other.id, title="Elsewhere")

    async with session_factory() as session:
        sources = await SourceService(session).get_sources(GetSourcesInput(document_id=document.id))

    assert [source.id for source in sources] == [first.id, second.id]


async def test_delete_source(session_factory, document):
    source = await _add(session_factory, document.id)
    keep = await _add(session_factory, document.id, title="Keep")

    async with session_factory() as session:
        deleted = await SourceService(session).delete_source(
            DeleteSourceInput(id=source.id, document_id=document.id)
        )
    assert deleted is True

    async with session_factory() as session:
        remaining = await SourceService(session).get_sources(GetSourcesInput(document_id=document.id))
    assert [item.id for item in remaining] == [keep.id]


async def test_delete_source_with_wrong_document(session_factory, document, user):
    async with session_factory() as session:
        other = await DocumentService(session).create_document(DocumentCreate(title="Other", user_id=user.id))
    source = await _add(session_factory, document.id)

    async with session_factory() as session:
        deleted = await SourceService(session).delete_source(
            DeleteSourceInput(id=source.id, document_id=other.id)
        )
    assert deleted is False

    async with session_factory() as session:
        remaining = await SourceService(session).get_sources(GetSourcesInput(document_id=document.id))
    assert len(remaining) == 1


async def test_delete_missing_source(session_factory, document):
    async with session_factory() as session:
        deleted = await SourceService(session).delete_source(DeleteSourceInput(id=99999, document_id=document.id))
    assert deleted is False
