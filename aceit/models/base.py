# aceit/models/base.py
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_on = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_on = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
