# aceit/api/routes/dashboard.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from aceit.api.dependencies.services import get_api_client
from aceit.database import get_db
from aceit.schema.base import BaseResponse
from aceit.schema.event import (
    CurrentEventData,
    DashboardData,
    EventList,
    EventSelection,
    FeedbackList,
    SelectEventRequest,
    UserContext,
)
from aceit.services import dashboard as dashboard_handler
from aceit.services.api_client import AceItApiClient

router = APIRouter(prefix="/dashboard")


@router.post("", response_model=BaseResponse[DashboardData])
async def get_dashboard(
    user: UserContext,
    client: AceItApiClient = Depends(get_api_client),
) -> BaseResponse[DashboardData]:
    """
    Profile, reconciled upcoming events and feedback summary in one view
    """
    data = await dashboard_handler.load_dashboard(client, user)
    return BaseResponse[DashboardData](data=data)


@router.post("/events", response_model=BaseResponse[EventList])
async def get_events(
    user: UserContext,
    client: AceItApiClient = Depends(get_api_client),
) -> BaseResponse[EventList]:
    events = await dashboard_handler.load_events(client, user)
    return BaseResponse[EventList](
        data=events,
        message=events.notice or "Success",
    )


@router.post("/feedback", response_model=BaseResponse[FeedbackList])
async def get_feedback_summary(
    user: UserContext,
    client: AceItApiClient = Depends(get_api_client),
) -> BaseResponse[FeedbackList]:
    feedback = await dashboard_handler.load_feedback_summary(client, user)
    return BaseResponse[FeedbackList](
        data=feedback,
        message=feedback.notice or "Success",
    )


@router.post("/current-event", response_model=BaseResponse[EventSelection])
async def select_current_event(
    request: SelectEventRequest,
    db: Session = Depends(get_db),
) -> BaseResponse[EventSelection]:
    selection = dashboard_handler.select_event(db, request.user, request.event)
    return BaseResponse[EventSelection](data=selection)


@router.get("/current-event/{email}", response_model=BaseResponse[CurrentEventData])
async def get_current_event(
    email: str,
    db: Session = Depends(get_db),
) -> BaseResponse[CurrentEventData]:
    current = dashboard_handler.get_current_event(db, email)
    if not current:
        raise HTTPException(status_code=404, detail="No current event")
    return BaseResponse[CurrentEventData](data=current)


@router.delete("/current-event/{email}", response_model=BaseResponse)
async def clear_current_event(
    email: str,
    db: Session = Depends(get_db),
) -> BaseResponse:
    """
    Called on logout: forget the event the user last picked
    """
    cleared = dashboard_handler.clear_current_event(db, email)
    return BaseResponse(
        message="Current event cleared" if cleared else "No current event",
    )
