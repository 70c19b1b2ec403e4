import pytest
from httpx import ASGITransport, AsyncClient

from documind.api.deps import get_response_generator
from documind.client.rpc import DocuMindClient
from documind.core.db import get_db, make_engine, make_session_factory
from documind.db.base import Base
import documind.db.models  # noqa: F401
from documind.domains.assistance.generators import TemplateResponseGenerator
from documind.domains.documents.schemas import DocumentCreate
from documind.domains.documents.services import DocumentService
from documind.domains.identity.schemas import UserCreate
from documind.domains.identity.services import IdentityService
from documind.main import create_app


@pytest.fixture
async def engine(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'documind.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def app(session_factory):
    app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_response_generator] = TemplateResponseGenerator
    return app


@pytest.fixture
async def http_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def rpc(app):
    client = DocuMindClient(base_url="http://test", transport=ASGITransport(app=app))
    yield client
    await client.close()


@pytest.fixture
async def user(session_factory):
    async with session_factory() as session:
        return await IdentityService(session).create_user(
            UserCreate(email="test@example.com", name="Test User")
        )


@pytest.fixture
async def other_user(session_factory):
    async with session_factory() as session:
        return await IdentityService(session).create_user(
            UserCreate(email="other@example.com", name="Other User")
        )


@pytest.fixture
async def document(session_factory, user):
    async with session_factory() as session:
        return await DocumentService(session).create_document(
            DocumentCreate(
                title="Test Document",
                content="This is test document content for AI assistance.",
                user_id=user.id
            )
        )
