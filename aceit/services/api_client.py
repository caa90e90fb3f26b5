# aceit/services/api_client.py
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from aceit.exceptions import FeedbackSubmissionError
from aceit.schema.feedback import FeedbackRecord, FeedbackSummary
from aceit.settings import settings
from aceit.logging_config import app_logger

API_HEADERS = {
    "accept": "application/json",
    "content-type": "application/json",
}


class AceItApiClient:
    """
    Client for the remote AceIt API. Lookups never raise: a failed fetch is
    logged and comes back empty, and the caller decides what to tell the user.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=API_HEADERS,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _post_for_list(self, path: str, payload: Dict[str, Any]) -> List[Any]:
        try:
            async with self._client() as client:
                response = await client.post(path, json=payload)
        except httpx.HTTPError as e:
            app_logger.error(f"Request to {path} failed: {e}")
            return []

        if not response.is_success:
            app_logger.error(
                f"AceIt API error on {path}: {response.status_code} {response.text}"
            )
            return []

        try:
            data = response.json()
        except ValueError:
            app_logger.error(f"AceIt API returned non-JSON body on {path}")
            return []

        if not isinstance(data, list):
            app_logger.info(f"No list received from {path}: {data}")
            return []
        return data

    async def fetch_events(self, email: str) -> List[Dict[str, Any]]:
        """Raw interview events for a user, duplicates included"""
        events = await self._post_for_list("/interviews", {"email": email})
        app_logger.info(f"Fetched {len(events)} events for {email}")
        return events

    async def fetch_feedback_summary(
        self, interviewee_name: str
    ) -> List[FeedbackSummary]:
        rows = await self._post_for_list(
            "/feedback", {"interviewee_name": interviewee_name}
        )
        summaries = []
        for row in rows:
            try:
                summaries.append(FeedbackSummary.model_validate(row))
            except ValidationError as e:
                app_logger.warning(f"Skipping malformed feedback summary {row}: {e}")
        return summaries

    async def fetch_feedback_detail(
        self, feedback_id: Union[int, str]
    ) -> Optional[Dict[str, Any]]:
        try:
            async with self._client() as client:
                response = await client.get(f"/feedback/{feedback_id}")
        except httpx.HTTPError as e:
            app_logger.error(f"Fetching feedback {feedback_id} failed: {e}")
            return None

        if not response.is_success:
            app_logger.error(
                f"Failed to fetch feedback {feedback_id}: {response.status_code}"
            )
            return None

        try:
            data = response.json()
        except ValueError:
            app_logger.error(f"Feedback {feedback_id} came back as non-JSON")
            return None
        return data if isinstance(data, dict) else None

    async def submit_feedback(self, record: FeedbackRecord) -> Dict[str, Any]:
        """Send a scorecard snapshot for persistence"""
        payload = record.model_dump(mode="json")
        app_logger.info(
            f"Submitting feedback for {record.interviewee_name} "
            f"from {record.admin_name}: total {record.total_grade}"
        )

        try:
            async with self._client() as client:
                response = await client.post("/feedback/submit", json=payload)
        except httpx.HTTPError as e:
            app_logger.error(f"Feedback submission failed: {e}")
            raise FeedbackSubmissionError(f"Feedback submission failed: {e}") from e

        if not response.is_success:
            error_msg = "Unknown error"
            try:
                response_data = response.json()
            except ValueError:
                response_data = None
            if isinstance(response_data, dict):
                if isinstance(response_data.get("error"), dict):
                    error_msg = response_data["error"].get("message", error_msg)
                elif "message" in response_data:
                    error_msg = response_data.get("message", error_msg)
            app_logger.error(
                f"AceIt API rejected feedback: {response.status_code} {error_msg}"
            )
            raise FeedbackSubmissionError(
                f"Feedback submission rejected ({response.status_code}): {error_msg}"
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        return data if isinstance(data, dict) else {}
