# aceit/api/routes/scorecards.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from aceit.api.dependencies.services import get_api_client, get_scorecards
from aceit.schema.base import BaseResponse
from aceit.schema.feedback import (
    FeedbackRecord,
    GradeUpdateRequest,
    NoteUpdateRequest,
    OpenScorecardRequest,
    ScorecardData,
    SubmitScorecardRequest,
)
from aceit.services.api_client import AceItApiClient
from aceit.services.scorecard import ScorecardRegistry, describe
from aceit.settings import settings

router = APIRouter()


@router.post("/scorecards", response_model=BaseResponse[ScorecardData])
async def open_scorecard(
    request: Optional[OpenScorecardRequest] = None,
    scorecards: ScorecardRegistry = Depends(get_scorecards),
) -> BaseResponse[ScorecardData]:
    question_count = request.question_count if request else None
    scorecard_id = scorecards.open(question_count)
    return BaseResponse[ScorecardData](
        data=describe(scorecard_id, scorecards.get(scorecard_id)),
        message="Scorecard opened",
    )


@router.get("/scorecards/{scorecard_id}", response_model=BaseResponse[ScorecardData])
async def get_scorecard(
    scorecard_id: str,
    scorecards: ScorecardRegistry = Depends(get_scorecards),
) -> BaseResponse[ScorecardData]:
    return BaseResponse[ScorecardData](
        data=describe(scorecard_id, scorecards.get(scorecard_id))
    )


@router.put(
    "/scorecards/{scorecard_id}/questions/{question_number}/grade",
    response_model=BaseResponse[ScorecardData],
)
async def set_grade(
    scorecard_id: str,
    question_number: int,
    request: GradeUpdateRequest,
    scorecards: ScorecardRegistry = Depends(get_scorecards),
) -> BaseResponse[ScorecardData]:
    scorecard = scorecards.get(scorecard_id)
    scorecard.set_grade(question_number, request.grade)
    return BaseResponse[ScorecardData](data=describe(scorecard_id, scorecard))


@router.put(
    "/scorecards/{scorecard_id}/questions/{question_number}/notes",
    response_model=BaseResponse[ScorecardData],
)
async def set_note(
    scorecard_id: str,
    question_number: int,
    request: NoteUpdateRequest,
    scorecards: ScorecardRegistry = Depends(get_scorecards),
) -> BaseResponse[ScorecardData]:
    scorecard = scorecards.get(scorecard_id)
    scorecard.set_note(question_number, request.field, request.text)
    return BaseResponse[ScorecardData](data=describe(scorecard_id, scorecard))


@router.post(
    "/scorecards/{scorecard_id}/submit",
    response_model=BaseResponse[FeedbackRecord],
)
async def submit_scorecard(
    scorecard_id: str,
    request: SubmitScorecardRequest,
    scorecards: ScorecardRegistry = Depends(get_scorecards),
    client: AceItApiClient = Depends(get_api_client),
) -> BaseResponse[FeedbackRecord]:
    """
    Snapshot the scorecard and send it to the AceIt API. The scorecard is
    closed only once the API accepted it, so a failed submit can be retried.
    """
    require_complete = (
        request.require_complete
        if request.require_complete is not None
        else settings.REQUIRE_COMPLETE_SCORECARD
    )
    record = scorecards.get(scorecard_id).to_feedback_record(
        request.interviewee_name,
        request.admin_name,
        require_complete=require_complete,
    )
    await client.submit_feedback(record)
    scorecards.close(scorecard_id)
    return BaseResponse[FeedbackRecord](data=record, message="Feedback submitted")


@router.get("/feedback/{feedback_id}", response_model=BaseResponse[Dict[str, Any]])
async def get_feedback_detail(
    feedback_id: str,
    client: AceItApiClient = Depends(get_api_client),
) -> BaseResponse[Dict[str, Any]]:
    detail = await client.fetch_feedback_detail(feedback_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Feedback not found")
    return BaseResponse[Dict[str, Any]](data=detail)


@router.delete("/scorecards/{scorecard_id}", response_model=BaseResponse)
async def discard_scorecard(
    scorecard_id: str,
    scorecards: ScorecardRegistry = Depends(get_scorecards),
) -> BaseResponse:
    """
    Throw away an unsubmitted scorecard when the grader leaves the form
    """
    scorecards.get(scorecard_id)
    scorecards.close(scorecard_id)
    return BaseResponse(message="Scorecard discarded")
