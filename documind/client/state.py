import logging
import time
from datetime import datetime
from typing import Dict, List, Optional

from documind.client.autosave import AutoSaveController
from documind.client.rpc import DocuMindClient, is_transport_failure
from documind.core.clock import utcnow
from documind.domains.assistance.entities import AssistanceType, GenerationContext
from documind.domains.assistance.generators import TemplateResponseGenerator
from documind.domains.assistance.schemas import AiAssistanceResponseOut
from documind.domains.documents.entities import count_words, strip_tags
from documind.domains.documents.schemas import DocumentResponse
from documind.domains.identity.schemas import UserResponse
from documind.domains.sources.entities import SourceType
from documind.domains.sources.schemas import SourceResponse

logger = logging.getLogger(__name__)


def demo_user(email: str = "user@example.com", name: str = "Demo User") -> UserResponse:
    """Захардкоженный пользователь вместо аутентификации"""
    return UserResponse(id=1, email=email, name=name, created_at=utcnow())


def _local_id() -> int:
    return int(time.time() * 1000)


def _demo_documents(user_id: int) -> List[DocumentResponse]:
    return [
        DocumentResponse(
            id=1,
            title="Research Paper Draft",
            content="<h1>Introduction</h1><p>This is my research paper about AI in education...</p>",
            user_id=user_id,
            created_at=datetime(2024, 1, 15),
            updated_at=datetime(2024, 1, 20)
        ),
        DocumentResponse(
            id=2,
            title="Meeting Notes",
            content="<h2>Weekly Team Meeting</h2><ul><li>Project updates</li><li>AI integration discussion</li></ul>",
            user_id=user_id,
            created_at=datetime(2024, 1, 10),
            updated_at=datetime(2024, 1, 10)
        ),
    ]


class AppState:
    """
    Клиентское состояние приложения: текущий пользователь, список документов,
    выбранный документ, источники и история AI по документам.

    С offline_fallback сбои доставки заменяются локально собранными записями
    (демо-режим); без него ошибки передаются вызывающему.
    """

    def __init__(self, client: DocuMindClient, current_user: UserResponse, offline_fallback: bool = False):
        self.client = client
        self.current_user = current_user
        self.offline_fallback = offline_fallback

        self.documents: List[DocumentResponse] = []
        self.selected_document: Optional[DocumentResponse] = None
        self.is_loading = False
        self.is_creating = False

        self.sources: Dict[int, List[SourceResponse]] = {}
        self.ai_history: Dict[int, List[AiAssistanceResponseOut]] = {}

    def _masked(self, exc: Exception, action: str) -> bool:
        """True, если ошибку можно заменить локальным результатом"""
        if self.offline_fallback and is_transport_failure(exc):
            logger.warning(f"{action} failed, using local data: {exc}")
            return True
        return False

    # Документы

    async def load_documents(self, limit: int = 50) -> List[DocumentResponse]:
        self.is_loading = True
        try:
            self.documents = await self.client.get_documents(self.current_user.id, limit=limit, offset=0)
        except Exception as exc:
            if not self._masked(exc, "Loading documents"):
                raise
            self.documents = _demo_documents(self.current_user.id)
        finally:
            self.is_loading = False
        return self.documents

    async def create_document(self, title: str) -> Optional[DocumentResponse]:
        """Новый документ встает в начало списка и становится выбранным"""
        if not title.strip():
            return None

        self.is_creating = True
        try:
            document = await self.client.create_document(title, self.current_user.id, content="")
        except Exception as exc:
            if not self._masked(exc, "Creating document"):
                raise
            now = utcnow()
            document = DocumentResponse(
                id=_local_id(), title=title, content="", user_id=self.current_user.id,
                created_at=now, updated_at=now
            )
        finally:
            self.is_creating = False

        self.documents = [document] + self.documents
        self.selected_document = document
        return document

    async def select_document(self, document_id: int) -> Optional[DocumentResponse]:
        try:
            document = await self.client.get_document(document_id, self.current_user.id)
        except Exception as exc:
            if not self._masked(exc, "Loading document"):
                raise
            document = next((doc for doc in self.documents if doc.id == document_id), None)
        self.selected_document = document
        return document

    def apply_document_update(self, document: DocumentResponse) -> None:
        """Сохраненная версия заменяет документ в списке и в выборе"""
        listed = any(doc.id == document.id for doc in self.documents)
        self.documents = [document if doc.id == document.id else doc for doc in self.documents]
        if self.selected_document is not None:
            if self.selected_document.id == document.id:
                self.selected_document = document
        elif listed:
            self.selected_document = document

    async def delete_document(self, document_id: int) -> bool:
        try:
            deleted = await self.client.delete_document(document_id, self.current_user.id)
        except Exception as exc:
            if not self._masked(exc, "Deleting document"):
                raise
            deleted = True

        if deleted:
            self.documents = [doc for doc in self.documents if doc.id != document_id]
            self.sources.pop(document_id, None)
            self.ai_history.pop(document_id, None)
            if self.selected_document and self.selected_document.id == document_id:
                self.selected_document = None
        return deleted

    def open_editor(self, delay: float = 2.0) -> AutoSaveController:
        """Сессия автосохранения для выбранного документа"""
        if self.selected_document is None:
            raise ValueError("No document selected")
        return AutoSaveController(
            self.client,
            self.selected_document,
            on_update=self.apply_document_update,
            delay=delay,
            offline_fallback=self.offline_fallback
        )

    async def append_generated_content(self, text: str) -> Optional[DocumentResponse]:
        """Дописывает сгенерированный текст в конец выбранного документа"""
        document = self.selected_document
        if document is None:
            return None

        content = document.content + "\n\n" + text
        try:
            updated = await self.client.update_document(document.id, content=content)
        except Exception as exc:
            if not self._masked(exc, "Appending content"):
                raise
            updated = None

        if updated is None:
            updated = document.model_copy(update={"content": content, "updated_at": utcnow()})
        self.apply_document_update(updated)
        return updated

    # Источники

    async def load_sources(self, document_id: int) -> List[SourceResponse]:
        try:
            sources = await self.client.get_sources(document_id)
        except Exception as exc:
            if not self._masked(exc, "Loading sources"):
                raise
            sources = self.sources.get(document_id, [])
        self.sources[document_id] = sources
        return sources

    async def add_source(
        self,
        document_id: int,
        title: str,
        content: str,
        source_type: SourceType,
        source_url: Optional[str] = None
    ) -> SourceResponse:
        try:
            source = await self.client.create_source(document_id, title, content, source_type, source_url)
        except Exception as exc:
            if not self._masked(exc, "Creating source"):
                raise
            source = SourceResponse(
                id=_local_id(), document_id=document_id, title=title, content=content,
                source_type=source_type, source_url=source_url, created_at=utcnow()
            )
        self.sources[document_id] = [source] + self.sources.get(document_id, [])
        return source

    async def remove_source(self, document_id: int, source_id: int) -> bool:
        try:
            deleted = await self.client.delete_source(source_id, document_id)
        except Exception as exc:
            if not self._masked(exc, "Deleting source"):
                raise
            deleted = True
        if deleted:
            self.sources[document_id] = [
                source for source in self.sources.get(document_id, []) if source.id != source_id
            ]
        return deleted

    # Помощь AI

    async def load_ai_history(self, document_id: int) -> List[AiAssistanceResponseOut]:
        try:
            history = await self.client.get_ai_responses(document_id, self.current_user.id)
        except Exception as exc:
            if not self._masked(exc, "Loading AI history"):
                raise
            history = self.ai_history.get(document_id, [])
        self.ai_history[document_id] = history
        return history

    async def request_ai_assistance(
        self,
        prompt: str,
        assistance_type: AssistanceType,
        context: Optional[str] = None,
        insert: bool = False
    ) -> Optional[AiAssistanceResponseOut]:
        """Запрос помощи по выбранному документу; insert дописывает ответ в документ"""
        document = self.selected_document
        if document is None or not prompt.strip():
            return None

        try:
            response = await self.client.request_ai_assistance(document.id, prompt, assistance_type, context)
        except Exception as exc:
            if not self._masked(exc, "AI assistance"):
                raise
            response = await self._local_ai_response(document, prompt, AssistanceType(assistance_type), context)

        self.ai_history[document.id] = [response] + self.ai_history.get(document.id, [])
        if insert:
            await self.append_generated_content(response.response_content)
        return response

    async def _local_ai_response(
        self,
        document: DocumentResponse,
        prompt: str,
        assistance_type: AssistanceType,
        context: Optional[str]
    ) -> AiAssistanceResponseOut:
        generation_context = GenerationContext(
            assistance_type=assistance_type,
            document_title=document.title,
            document_content=document.content,
            word_count=count_words(strip_tags(document.content)),
            selected_context=context
        )
        content = await TemplateResponseGenerator().generate(prompt, generation_context)
        return AiAssistanceResponseOut(
            id=_local_id(),
            document_id=document.id,
            request_prompt=prompt,
            response_content=content,
            assistance_type=assistance_type,
            created_at=utcnow()
        )
