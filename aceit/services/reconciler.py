# aceit/services/reconciler.py
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError

from aceit.schema.event import MeetingEvent
from aceit.logging_config import app_logger

RawEvent = Union[MeetingEvent, Mapping[str, Any]]


def to_iso_string(timestamp: datetime) -> str:
    """
    UTC ISO-8601 with millisecond precision and a Z suffix,
    e.g. 2024-01-01T10:00:00.000Z. Naive timestamps are taken as UTC.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    timestamp = timestamp.astimezone(timezone.utc)
    return (
        f"{timestamp:%Y-%m-%dT%H:%M:%S}."
        f"{timestamp.microsecond // 1000:03d}Z"
    )


def composite_key(event: MeetingEvent) -> str:
    """Identity of a meeting occurrence: meeting id plus its start time"""
    if event.start_time is None:
        raise ValueError(f"Event {event.meeting_id} has no start_time")
    return f"{event.meeting_id}-{to_iso_string(event.start_time)}"


def _as_event(raw: RawEvent) -> MeetingEvent:
    if isinstance(raw, MeetingEvent):
        return raw
    return MeetingEvent.model_validate(raw)


def reconcile(raw_events: Iterable[RawEvent]) -> List[MeetingEvent]:
    """
    Collapse duplicate occurrences, keeping the first record seen for each
    composite key and the input order of those first records.

    Records that cannot produce a key (missing or unparsable start_time, or
    otherwise invalid) are logged and left out.
    """
    seen = set()
    events: List[MeetingEvent] = []

    for position, raw in enumerate(raw_events):
        try:
            event = _as_event(raw)
            key = composite_key(event)
        except (ValidationError, ValueError, TypeError, OverflowError) as e:
            app_logger.warning(f"Dropping malformed event at position {position}: {e}")
            continue

        if key in seen:
            continue
        seen.add(key)
        events.append(event)

    return events
