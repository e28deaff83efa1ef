"""커스텀 SQLAlchemy 컬럼 타입.

Custom SQLAlchemy column types.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator[datetime]):
    """항상 UTC aware datetime을 저장/반환하는 컬럼 타입.

    Stores datetimes as UTC and always returns timezone-aware UTC values.
    PostgreSQL keeps the offset natively; SQLite drops it, so values are
    normalized to UTC before binding and tagged with UTC on load.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """현재 UTC 시각 (Current UTC time)."""
    return datetime.now(timezone.utc)
