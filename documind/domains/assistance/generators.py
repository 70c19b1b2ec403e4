"""
Генераторы ответов AI.

Генератор - внешняя возможность с одной операцией generate(prompt, context).
TemplateResponseGenerator дает детерминированный текст по типу помощи и
используется в тестах и демо; RemoteResponseGenerator обращается к
отдельному AI-движку по HTTP.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from documind.domains.assistance.entities import AssistanceType, GenerationContext

logger = logging.getLogger(__name__)


class ResponseGenerator(ABC):

    @abstractmethod
    async def generate(self, prompt: str, context: GenerationContext) -> str:
        """Возвращает текст ответа на запрос"""


class TemplateResponseGenerator(ResponseGenerator):
    """Шаблонные ответы без обращения к модели"""

    async def generate(self, prompt: str, context: GenerationContext) -> str:
        title = context.document_title

        if context.assistance_type == AssistanceType.WRITE:
            return (
                f'Based on your prompt "{prompt}" and the document context, '
                "here's some content to help with your writing..."
            )
        if context.assistance_type == AssistanceType.EDIT:
            return f'Here are some editing suggestions for your text: "{prompt}"...'
        if context.assistance_type == AssistanceType.STUDY_GUIDE:
            return (
                f'Study Guide based on "{title}":\n\n'
                "Key Points:\n- Important concept 1\n- Important concept 2\n\n"
                "Questions for Review:\n1. What is...?\n2. How does...?"
            )
        if context.assistance_type == AssistanceType.SUMMARIZE:
            return (
                f'Summary of "{title}":\n\n'
                "This document covers the main topics of... The key insights include...\n\n"
                f"Word Count: Approximately {context.word_count} words"
            )
        return "AI assistance response generated successfully."


class RemoteResponseGenerator(ResponseGenerator):
    """Генерация через внешний AI-движок"""

    def __init__(self, base_url: str, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def generate(self, prompt: str, context: GenerationContext) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}/generate",
                json={
                    "prompt": prompt,
                    "context": context.render(),
                    "assistance_type": context.assistance_type.value,
                }
            )
            response.raise_for_status()
            data = response.json()

        text = data.get("text")
        if not isinstance(text, str):
            raise ValueError("AI engine returned no text")
        logger.info(f"AI engine answered {context.assistance_type.value} request ({len(text)} chars)")
        return text


def build_generator(ai_engine_url: Optional[str] = None, timeout: float = 30.0) -> ResponseGenerator:
    if ai_engine_url:
        return RemoteResponseGenerator(ai_engine_url, timeout=timeout)
    return TemplateResponseGenerator()
