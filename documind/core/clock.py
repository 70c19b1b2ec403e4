from datetime import datetime, timezone


def utcnow() -> datetime:
    """Текущее время UTC без tzinfo, в том виде, в каком его хранит БД"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
