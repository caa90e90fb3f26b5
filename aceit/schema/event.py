# aceit/schema/event.py
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, field_validator

from aceit.schema.feedback import FeedbackSummary

ADMIN_ROLE = "admin"


class MeetingEvent(BaseModel):
    """A scheduled interview occurrence as returned by the remote API"""
    meeting_id: str
    start_time: Optional[datetime] = None
    password: str = ""
    invitee_name: Optional[str] = None
    inviter_name: Optional[str] = None
    id: Optional[Union[int, str]] = None

    model_config = {"frozen": True, "extra": "allow"}

    @field_validator("meeting_id", mode="before")
    @classmethod
    def stringify_meeting_id(cls, meeting_id):
        """Zoom meeting numbers often arrive as integers"""
        if isinstance(meeting_id, int) and not isinstance(meeting_id, bool):
            return str(meeting_id)
        return meeting_id

    @field_validator("password", mode="before")
    @classmethod
    def default_password(cls, password):
        return "" if password is None else password


class UserContext(BaseModel):
    """The signed-in user, as handed over by the auth provider"""
    email: str
    display_name: str
    photo_url: Optional[str] = None
    role: str = "fellow"

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    @property
    def role_label(self) -> str:
        return "Volunteer" if self.is_admin else "Fellow"


class EventItem(BaseModel):
    """A reconciled meeting event, shaped for the dashboard list"""
    event: MeetingEvent
    key: str
    title: str
    starts_at: str


class EventList(BaseModel):
    items: List[EventItem] = []
    notice: Optional[str] = None


class FeedbackItem(BaseModel):
    summary: FeedbackSummary
    label: str
    details_path: str


class FeedbackList(BaseModel):
    items: List[FeedbackItem] = []
    notice: Optional[str] = None


class Profile(BaseModel):
    name: str
    photo_url: Optional[str] = None
    role: str


class DashboardData(BaseModel):
    title: str
    profile: Profile
    events: EventList
    feedback: FeedbackList


class EventsRequest(BaseModel):
    email: str


class FeedbackSummaryRequest(BaseModel):
    interviewee_name: str


class SelectEventRequest(BaseModel):
    user: UserContext
    event: MeetingEvent


class EventSelection(BaseModel):
    """Where the client should go after picking an event"""
    event: MeetingEvent
    meeting_path: str
    feedback_path: Optional[str] = None


class CurrentEventData(BaseModel):
    email: str
    event: Dict[str, Any]
    selected_on: datetime

    class Config:
        from_attributes = True
