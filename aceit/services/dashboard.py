# aceit/services/dashboard.py
from datetime import timezone as dt_timezone
from typing import Optional
from urllib.parse import quote
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from aceit.models.base import utcnow
from aceit.models.session import CurrentEvent
from aceit.schema.event import (
    CurrentEventData,
    DashboardData,
    EventItem,
    EventList,
    EventSelection,
    FeedbackItem,
    FeedbackList,
    MeetingEvent,
    Profile,
    UserContext,
)
from aceit.services.api_client import AceItApiClient
from aceit.services.reconciler import composite_key, reconcile
from aceit.settings import settings
from aceit.logging_config import app_logger

NO_EVENTS_NOTICE = "no records for user found"
NO_FEEDBACK_NOTICE = "No feedback available."

# Kept unescaped in the password, on top of quote()'s defaults
URI_COMPONENT_SAFE = "!*'()"


def format_start(event: MeetingEvent, timezone: Optional[str] = None) -> str:
    """Start time in the display timezone, e.g. 1/1/2024, 5:00:00 AM"""
    start = event.start_time
    if start.tzinfo is None:
        start = start.replace(tzinfo=dt_timezone.utc)
    local = start.astimezone(ZoneInfo(timezone or settings.DISPLAY_TIMEZONE))
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {suffix}"
    )


def event_title(user: UserContext, event: MeetingEvent) -> str:
    other = event.invitee_name if user.is_admin else event.inviter_name
    return f"AceIt Interview with {other}"


def to_event_item(user: UserContext, event: MeetingEvent) -> EventItem:
    return EventItem(
        event=event,
        key=composite_key(event),
        title=event_title(user, event),
        starts_at=f"Starts at: {format_start(event)}",
    )


async def load_events(client: AceItApiClient, user: UserContext) -> EventList:
    raw_events = await client.fetch_events(user.email)
    events = reconcile(raw_events)
    if len(events) < len(raw_events):
        app_logger.info(
            f"Reconciled {len(raw_events)} raw events into {len(events)} "
            f"for {user.email}"
        )
    items = []
    for event in events:
        try:
            items.append(to_event_item(user, event))
        except (ValueError, OverflowError) as e:
            app_logger.warning(
                f"Dropping event {event.meeting_id} that cannot be displayed: {e}"
            )

    if not items:
        return EventList(items=[], notice=NO_EVENTS_NOTICE)
    return EventList(items=items)


async def load_feedback_summary(
    client: AceItApiClient, user: UserContext
) -> FeedbackList:
    summaries = await client.fetch_feedback_summary(user.display_name)
    if not summaries:
        return FeedbackList(items=[], notice=NO_FEEDBACK_NOTICE)
    return FeedbackList(
        items=[
            FeedbackItem(
                summary=summary,
                label=summary.label,
                details_path=f"/feedback/details/{summary.id}",
            )
            for summary in summaries
        ]
    )


async def load_dashboard(client: AceItApiClient, user: UserContext) -> DashboardData:
    return DashboardData(
        title=f"{user.display_name}'s Dashboard",
        profile=Profile(
            name=user.display_name,
            photo_url=user.photo_url,
            role=user.role_label,
        ),
        events=await load_events(client, user),
        feedback=await load_feedback_summary(client, user),
    )


def meeting_path(event: MeetingEvent) -> str:
    return (
        f"/zoomMeeting?meetingNumber={event.meeting_id}"
        f"&password={quote(event.password, safe=URI_COMPONENT_SAFE)}"
    )


def select_event(db: Session, user: UserContext, event: MeetingEvent) -> EventSelection:
    """
    Remember the picked event for the user and tell the client where to go.
    Admins also get the feedback form to open alongside the meeting.
    """
    payload = event.model_dump(mode="json")
    current = db.get(CurrentEvent, user.email)
    if current:
        current.event = payload
        current.selected_on = utcnow()
    else:
        db.add(CurrentEvent(email=user.email, event=payload))
    db.commit()

    app_logger.info(f"{user.email} selected meeting {event.meeting_id}")
    return EventSelection(
        event=event,
        meeting_path=meeting_path(event),
        feedback_path="/feedback" if user.is_admin else None,
    )


def get_current_event(db: Session, email: str) -> Optional[CurrentEventData]:
    current = db.get(CurrentEvent, email)
    if not current:
        return None
    return CurrentEventData.model_validate(current)


def clear_current_event(db: Session, email: str) -> bool:
    """Drop the user's cached event, returning whether there was one"""
    current = db.get(CurrentEvent, email)
    if not current:
        return False
    db.delete(current)
    db.commit()
    app_logger.info(f"Cleared current event for {email}")
    return True
