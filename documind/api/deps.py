from functools import lru_cache

from documind.core.config import settings
from documind.domains.assistance.generators import ResponseGenerator, build_generator


@lru_cache
def get_response_generator() -> ResponseGenerator:
    """Генератор ответов AI, выбранный по настройкам"""
    return build_generator(settings.ai_engine_url, timeout=settings.ai_engine_timeout)
