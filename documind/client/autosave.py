"""
Автосохранение редактора.

Каждая правка помечает состояние как несохраненное и перезапускает
отложенную задачу сохранения; одновременно существует не более одной
такой задачи на сессию редактирования.
"""
import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from documind.client.rpc import DocuMindClient, is_transport_failure
from documind.core.clock import utcnow
from documind.domains.documents.entities import UNTITLED_TITLE, count_words
from documind.domains.documents.schemas import DocumentResponse

logger = logging.getLogger(__name__)


class DocumentMissing(LookupError):
    """Сервер не нашел сохраняемый документ"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Document {document_id} no longer exists")


class AutoSaveController:
    """Сессия редактирования одного документа"""

    def __init__(
        self,
        client: DocuMindClient,
        document: DocumentResponse,
        on_update: Optional[Callable[[DocumentResponse], None]] = None,
        delay: float = 2.0,
        offline_fallback: bool = False
    ):
        self.client = client
        self.on_update = on_update
        self.delay = delay
        self.offline_fallback = offline_fallback

        self.is_saving = False
        self.last_saved_at: Optional[datetime] = None
        self.last_error: Optional[Exception] = None

        self._pending: Optional[asyncio.Task] = None
        self._idle = asyncio.Event()
        self._idle.set()
        self._closed = False
        self._revision = 0
        self._session = 0
        self.load(document)

    def load(self, document: DocumentResponse) -> None:
        """Новый документ с сервера заменяет локальное состояние"""
        self._cancel_pending()
        # результат сохранения, начатого до смены документа, отбрасывается
        self._session += 1
        self.document = document
        self.title = document.title
        self.content = document.content
        self.has_unsaved_changes = False
        self.last_error = None

    # Правки

    def edit_title(self, title: str) -> None:
        self.title = title
        self._mark_dirty()

    def edit_content(self, content: str) -> None:
        self.content = content
        self._mark_dirty()

    def _mark_dirty(self) -> None:
        self._revision += 1
        self.has_unsaved_changes = True
        self._schedule()

    @property
    def word_count(self) -> int:
        return count_words(self.content)

    @property
    def character_count(self) -> int:
        return len(self.content)

    # Отложенное сохранение

    def _schedule(self) -> None:
        self._cancel_pending()
        if self._closed:
            return
        self._pending = asyncio.get_running_loop().create_task(self._save_after_delay())

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    async def _save_after_delay(self) -> None:
        await asyncio.sleep(self.delay)
        # после ожидания задачу уже нельзя отменить новой правкой
        self._pending = None
        try:
            await self.save()
        except Exception:
            logger.warning(f"Auto-save of document {self.document.id} failed", exc_info=True)

    # Сохранение

    async def save(self) -> Optional[DocumentResponse]:
        """Сохраняет текущие title/content; без несохраненных правок ничего не делает"""
        if not self.has_unsaved_changes or self.is_saving:
            return None

        session = self._session
        document = self.document
        revision = self._revision
        title = self.title.strip() or UNTITLED_TITLE
        content = self.content

        self.is_saving = True
        self._idle.clear()
        try:
            try:
                saved = await self.client.update_document(document.id, title=title, content=content)
            except Exception as exc:
                if not (self.offline_fallback and is_transport_failure(exc)):
                    if session == self._session:
                        self.last_error = exc
                    raise
                logger.warning(f"Save of document {document.id} failed, keeping local copy: {exc}")
                saved = document.model_copy(
                    update={"title": title, "content": content, "updated_at": utcnow()}
                )

            if session != self._session:
                logger.info(f"Document {document.id} saved after the editor switched documents")
                saved = None
            elif saved is None:
                if not self.offline_fallback:
                    self.last_error = DocumentMissing(document.id)
                    raise self.last_error
                logger.warning(f"Document {document.id} not found on save, keeping local copy")
                saved = document.model_copy(
                    update={"title": title, "content": content, "updated_at": utcnow()}
                )

            if saved is not None:
                self.document = saved
                self.last_saved_at = utcnow()
                self.last_error = None
                if revision == self._revision:
                    self.has_unsaved_changes = False
        finally:
            self.is_saving = False
            self._idle.set()

        if saved is not None and self.on_update:
            self.on_update(saved)

        # правки, сделанные во время сохранения, уходят следующим заходом
        if self.has_unsaved_changes and self._pending is None:
            self._schedule()

        return saved

    async def save_now(self) -> Optional[DocumentResponse]:
        """Ручное сохранение без ожидания"""
        self._cancel_pending()
        return await self.save()

    async def close(self, flush: bool = True) -> None:
        """Завершение сессии; по умолчанию несохраненные правки отправляются сразу"""
        self._closed = True
        self._cancel_pending()
        await self._idle.wait()
        if flush and self.has_unsaved_changes:
            await self.save()
