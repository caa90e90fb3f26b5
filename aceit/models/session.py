# aceit/models/session.py
from sqlalchemy import Column, DateTime, JSON, String

from aceit.database import Base
from aceit.models.base import TimestampMixin, utcnow


class CurrentEvent(Base, TimestampMixin):
    """
    The meeting a user last picked on the dashboard. One row per user,
    removed on logout.
    """

    __tablename__ = "current_events"

    email = Column(String, primary_key=True)
    event = Column(JSON, nullable=False)
    selected_on = Column(DateTime(timezone=True), default=utcnow, nullable=False)
