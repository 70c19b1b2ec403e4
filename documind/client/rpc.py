import logging
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel

from documind.domains.assistance.entities import AssistanceType
from documind.domains.assistance.schemas import AiAssistanceResponseOut
from documind.domains.documents.schemas import DocumentResponse
from documind.domains.identity.schemas import UserResponse
from documind.domains.sources.entities import SourceType
from documind.domains.sources.schemas import SourceResponse

logger = logging.getLogger(__name__)


class RPCError(Exception):
    """Сервер ответил ошибкой"""

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload
        if isinstance(payload, dict):
            message = payload.get("message") or payload.get("detail")
        else:
            message = payload
        super().__init__(f"{status_code}: {message}")


class NotFound(RPCError):
    pass


class Conflict(RPCError):
    pass


class ValidationFailed(RPCError):
    pass


_ERRORS_BY_STATUS = {404: NotFound, 409: Conflict, 422: ValidationFailed}


def error_from_response(response: httpx.Response) -> RPCError:
    try:
        payload = response.json()
    except ValueError:
        payload = response.text
    error_class = _ERRORS_BY_STATUS.get(response.status_code, RPCError)
    return error_class(response.status_code, payload)


def is_transport_failure(exc: BaseException) -> bool:
    """Сбой доставки или сервера, а не отказ по существу запроса"""
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, RPCError) and exc.status_code >= 500


class DocuMindClient:
    """Клиент RPC-интерфейса DocuMind"""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "DocuMindClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def call(self, procedure: str, payload: Dict[str, Any]) -> Any:
        body = {key: value for key, value in payload.items() if value is not None}
        response = await self._http.post(f"/rpc/{procedure}", json=body)
        if response.status_code >= 400:
            error = error_from_response(response)
            logger.debug(f"{procedure} failed: {error}")
            raise error
        return response.json()

    @staticmethod
    def _one(model: Type[BaseModel], data: Any):
        return model.model_validate(data) if data is not None else None

    @staticmethod
    def _many(model: Type[BaseModel], data: List[Any]):
        return [model.model_validate(item) for item in data]

    # Users
    async def create_user(self, email: str, name: str) -> UserResponse:
        return self._one(UserResponse, await self.call("createUser", {"email": email, "name": name}))

    # Documents
    async def create_document(self, title: str, user_id: int, content: str = "") -> DocumentResponse:
        data = await self.call("createDocument", {"title": title, "content": content, "user_id": user_id})
        return self._one(DocumentResponse, data)

    async def get_documents(self, user_id: int, limit: int = 20, offset: int = 0) -> List[DocumentResponse]:
        data = await self.call("getDocuments", {"user_id": user_id, "limit": limit, "offset": offset})
        return self._many(DocumentResponse, data)

    async def get_document(self, document_id: int, user_id: int) -> Optional[DocumentResponse]:
        data = await self.call("getDocument", {"id": document_id, "user_id": user_id})
        return self._one(DocumentResponse, data)

    async def update_document(
        self,
        document_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None
    ) -> Optional[DocumentResponse]:
        data = await self.call("updateDocument", {"id": document_id, "title": title, "content": content})
        return self._one(DocumentResponse, data)

    async def delete_document(self, document_id: int, user_id: int) -> bool:
        return await self.call("deleteDocument", {"id": document_id, "user_id": user_id})

    # Sources
    async def create_source(
        self,
        document_id: int,
        title: str,
        content: str,
        source_type: SourceType,
        source_url: Optional[str] = None
    ) -> SourceResponse:
        data = await self.call("createSource", {
            "document_id": document_id,
            "title": title,
            "content": content,
            "source_type": SourceType(source_type).value,
            "source_url": source_url,
        })
        return self._one(SourceResponse, data)

    async def get_sources(self, document_id: int) -> List[SourceResponse]:
        return self._many(SourceResponse, await self.call("getSources", {"document_id": document_id}))

    async def delete_source(self, source_id: int, document_id: int) -> bool:
        return await self.call("deleteSource", {"id": source_id, "document_id": document_id})

    # AI assistance
    async def request_ai_assistance(
        self,
        document_id: int,
        prompt: str,
        assistance_type: AssistanceType,
        context: Optional[str] = None
    ) -> AiAssistanceResponseOut:
        data = await self.call("requestAiAssistance", {
            "document_id": document_id,
            "prompt": prompt,
            "context": context,
            "assistance_type": AssistanceType(assistance_type).value,
        })
        return self._one(AiAssistanceResponseOut, data)

    async def get_ai_responses(self, document_id: int, user_id: int) -> List[AiAssistanceResponseOut]:
        data = await self.call("getAiResponses", {"id": document_id, "user_id": user_id})
        return self._many(AiAssistanceResponseOut, data)
