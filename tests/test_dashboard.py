from datetime import datetime, timezone

import pytest

from aceit.schema.event import MeetingEvent
from aceit.services import dashboard


def make_event(**fields):
    data = {
        "meeting_id": "83012345678",
        "start_time": "2024-01-01T15:00:00Z",
        "password": "a b/c&d!",
        "invitee_name": "Fran Fellow",
        "inviter_name": "Val Volunteer",
        "id": 1,
    }
    data.update(fields)
    return MeetingEvent(**data)


def test_format_start_in_new_york():
    event = make_event(start_time="2024-07-04T16:05:09Z")
    assert dashboard.format_start(event) == "7/4/2024, 12:05:09 PM"
    assert dashboard.format_start(make_event()) == "1/1/2024, 10:00:00 AM"


def test_format_start_midnight():
    event = make_event(start_time=datetime(2024, 1, 2, 5, 0, tzinfo=timezone.utc))
    assert dashboard.format_start(event) == "1/2/2024, 12:00:00 AM"


def test_event_title_depends_on_role(fellow, admin):
    event = make_event()
    assert dashboard.event_title(admin, event) == "AceIt Interview with Fran Fellow"
    assert dashboard.event_title(fellow, event) == "AceIt Interview with Val Volunteer"


def test_meeting_path_encodes_password():
    assert dashboard.meeting_path(make_event()) == (
        "/zoomMeeting?meetingNumber=83012345678&password=a%20b%2Fc%26d!"
    )


@pytest.mark.asyncio
async def test_load_events_reconciles(api_client, fake_api, fellow):
    fake_api.events = [
        {"meeting_id": "m1", "start_time": "2024-01-01T10:00:00Z", "id": 1},
        {"meeting_id": "m1", "start_time": "2024-01-01T10:00:00Z", "id": 2},
        {"meeting_id": "m2", "start_time": "bad", "id": 3},
        {"meeting_id": "m3", "start_time": "2024-01-01T11:00:00Z", "id": 4,
         "inviter_name": "Val Volunteer"},
    ]

    events = await dashboard.load_events(api_client, fellow)

    assert events.notice is None
    assert [item.event.id for item in events.items] == [1, 4]
    assert events.items[0].key == "m1-2024-01-01T10:00:00.000Z"
    assert events.items[1].title == "AceIt Interview with Val Volunteer"
    assert events.items[1].starts_at == "Starts at: 1/1/2024, 6:00:00 AM"


@pytest.mark.asyncio
async def test_load_events_skips_events_that_cannot_be_displayed(
    api_client, fake_api, fellow
):
    fake_api.events = [
        # Year 0 once moved to New York time
        {"meeting_id": "early", "start_time": "0001-01-01T02:00:00Z", "id": 1},
        {"meeting_id": "m1", "start_time": "2024-01-01T10:00:00Z", "id": 2},
    ]

    events = await dashboard.load_events(api_client, fellow)

    assert [item.event.meeting_id for item in events.items] == ["m1"]
    assert events.notice is None


@pytest.mark.asyncio
async def test_load_events_only_undisplayable_gives_notice(api_client, fake_api, fellow):
    fake_api.events = [{"meeting_id": "early", "start_time": "0001-01-01T02:00:00Z"}]
    events = await dashboard.load_events(api_client, fellow)
    assert events.items == []
    assert events.notice == "no records for user found"


@pytest.mark.asyncio
async def test_load_events_failure_gives_notice(api_client, fake_api, fellow):
    fake_api.fail_with = 503
    events = await dashboard.load_events(api_client, fellow)
    assert events.items == []
    assert events.notice == "no records for user found"


@pytest.mark.asyncio
async def test_load_dashboard(api_client, fake_api, fellow):
    fake_api.feedback = [{"id": 9, "total_grade": 87.5, "admin_name": "Val Volunteer"}]

    data = await dashboard.load_dashboard(api_client, fellow)

    assert data.title == "Fran Fellow's Dashboard"
    assert data.profile.role == "Fellow"
    assert data.events.notice == "no records for user found"
    assert data.feedback.items[0].label == "Score: 87.5 from Val Volunteer"
    assert data.feedback.items[0].details_path == "/feedback/details/9"


@pytest.mark.asyncio
async def test_load_feedback_summary_empty(api_client, admin):
    feedback = await dashboard.load_feedback_summary(api_client, admin)
    assert feedback.items == []
    assert feedback.notice == "No feedback available."


def test_select_event_stores_and_replaces(db_session, admin):
    first = make_event(meeting_id="m1")
    second = make_event(meeting_id="m2")

    selection = dashboard.select_event(db_session, admin, first)
    assert selection.feedback_path == "/feedback"
    assert selection.meeting_path.startswith("/zoomMeeting?meetingNumber=m1&")

    dashboard.select_event(db_session, admin, second)
    current = dashboard.get_current_event(db_session, admin.email)
    assert current.event["meeting_id"] == "m2"
    assert current.event["start_time"].startswith("2024-01-01T15:00:00")


def test_fellow_selection_has_no_feedback_path(db_session, fellow):
    selection = dashboard.select_event(db_session, fellow, make_event())
    assert selection.feedback_path is None


def test_clear_current_event(db_session, fellow):
    dashboard.select_event(db_session, fellow, make_event())
    assert dashboard.clear_current_event(db_session, fellow.email) is True
    assert dashboard.get_current_event(db_session, fellow.email) is None
    assert dashboard.clear_current_event(db_session, fellow.email) is False
