import httpx
import pytest

from documind.core.exceptions import NotFoundError
from documind.domains.assistance.entities import (
    AiAssistanceResponse, AssistanceType, GenerationContext, SourceExcerpt
)
from documind.domains.assistance.generators import (
    RemoteResponseGenerator, TemplateResponseGenerator, build_generator
)
from documind.domains.assistance.schemas import AiAssistanceRequest
from documind.domains.assistance.services import AiAssistanceService
from documind.domains.sources.schemas import SourceCreate
from documind.domains.sources.services import SourceService


class RecordingGenerator(TemplateResponseGenerator):
    def __init__(self):
        self.calls = []

    async def generate(self, prompt, context):
        self.calls.append((prompt, context))
        return await super().generate(prompt, context)


class FailingGenerator(TemplateResponseGenerator):
    async def generate(self, prompt, context):
        raise RuntimeError("model unavailable")


async def _request(session_factory, generator=None, **fields):
    async with session_factory() as session:
        return await AiAssistanceService(session, generator).request_assistance(AiAssistanceRequest(**fields))


async def test_write_request(session_factory, document):
    result = await _request(
        session_factory, document_id=document.id, prompt="Help me write an introduction", assistance_type="write"
    )

    assert result.id is not None
    assert result.document_id == document.id
    assert result.request_prompt == "Help me write an introduction"
    assert result.assistance_type == AssistanceType.WRITE
    assert "writing" in result.response_content
    assert result.created_at is not None


async def test_edit_request(session_factory, document):
    result = await _request(
        session_factory, document_id=document.id, prompt="Please review this paragraph",
        context="This is the selected text to edit", assistance_type="edit"
    )
    assert "editing suggestions" in result.response_content


async def test_study_guide_request(session_factory, document):
    result = await _request(
        session_factory, document_id=document.id, prompt="Create a study guide", assistance_type="study_guide"
    )
    assert "Study Guide" in result.response_content
    assert "Key Points" in result.response_content
    assert "Questions for Review" in result.response_content
    assert "Test Document" in result.response_content


async def test_summarize_request_mentions_title_and_word_count(session_factory, document):
    result = await _request(
        session_factory, document_id=document.id, prompt="Summarize", assistance_type="summarize"
    )
    assert "Summary" in result.response_content
    assert "Test Document" in result.response_content
    # "This is test document content for AI assistance." has 8 words
    assert "Approximately 8 words" in result.response_content


async def test_request_is_persisted(session_factory, document):
    result = await _request(session_factory, document_id=document.id, prompt="Write", assistance_type="write")

    async with session_factory() as session:
        history = await AiAssistanceService(session).get_responses(document.id)

    assert [item.id for item in history] == [result.id]
    assert history[0].response_content == result.response_content


async def test_context_includes_document_and_sources(session_factory, document):
    long_content = "x" * 600
    async with session_factory() as session:
        await SourceService(session).create_source(SourceCreate(
            document_id=document.id, title="Reference", content=long_content, source_type="text"
        ))

    generator = RecordingGenerator()
    await _request(
        session_factory, generator, document_id=document.id, prompt="Write",
        context="selected words", assistance_type="write"
    )

    [(prompt, context)] = generator.calls
    rendered = context.render()
    assert prompt == "Write"
    assert "Document Title: Test Document" in rendered
    assert "Document Content: This is test document content" in rendered
    assert "Selected Context: selected words" in rendered
    assert "Available Sources:" in rendered
    assert f"- Reference: {'x' * 500}...\n" in rendered
    assert "x" * 501 not in rendered


async def test_missing_document_raises(session_factory):
    with pytest.raises(NotFoundError, match="(?i)document not found"):
        await _request(session_factory, document_id=99999, prompt="Write", assistance_type="write")


async def test_generation_failure_leaves_no_record(session_factory, document):
    with pytest.raises(RuntimeError):
        await _request(
            session_factory, FailingGenerator(), document_id=document.id, prompt="Write", assistance_type="write"
        )

    async with session_factory() as session:
        assert await AiAssistanceService(session).get_responses(document.id) == []


async def test_history_newest_first(session_factory, document):
    first = await _request(session_factory, document_id=document.id, prompt="One", assistance_type="write")
    second = await _request(session_factory, document_id=document.id, prompt="Two", assistance_type="edit")

    async with session_factory() as session:
        history = await AiAssistanceService(session).get_responses(document.id)

    assert [item.id for item in history] == [second.id, first.id]
    assert history[0].created_at >= history[1].created_at


async def test_history_empty_for_document_without_requests(session_factory, document):
    async with session_factory() as session:
        assert await AiAssistanceService(session).get_responses(document.id) == []


def test_render_without_optional_parts():
    context = GenerationContext(
        assistance_type=AssistanceType.WRITE,
        document_title="T",
        document_content="C",
        word_count=1
    )
    assert context.render() == "Document Title: T\nDocument Content: C\n"


def test_response_entity_defaults_timestamp():
    record = AiAssistanceResponse(
        id=None, document_id=1, request_prompt="p", response_content="r", assistance_type=AssistanceType.EDIT
    )
    assert record.created_at is not None


async def test_remote_generator_posts_prompt_and_context():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json={"text": "generated"})

    generator = RemoteResponseGenerator("http://engine/", transport=httpx.MockTransport(handler))
    context = GenerationContext(
        assistance_type=AssistanceType.SUMMARIZE,
        document_title="Doc",
        document_content="Body",
        word_count=1,
        sources=[SourceExcerpt(title="S", excerpt="E")]
    )

    assert await generator.generate("Summarize", context) == "generated"
    assert seen["url"] == "http://engine/generate"
    assert b'"assistance_type":"summarize"' in seen["body"].replace(b" ", b"")


async def test_remote_generator_propagates_engine_errors():
    transport = httpx.MockTransport(lambda request: httpx.Response(503, json={"detail": "busy"}))
    generator = RemoteResponseGenerator("http://engine", transport=transport)
    context = GenerationContext(
        assistance_type=AssistanceType.WRITE, document_title="D", document_content="", word_count=0
    )

    with pytest.raises(httpx.HTTPStatusError):
        await generator.generate("Write", context)


def test_build_generator_selects_implementation():
    assert isinstance(build_generator(None), TemplateResponseGenerator)
    assert isinstance(build_generator("http://engine"), RemoteResponseGenerator)
