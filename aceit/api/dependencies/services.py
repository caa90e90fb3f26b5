# aceit/api/dependencies/services.py
from fastapi import Request

from aceit.services.api_client import AceItApiClient
from aceit.services.scorecard import ScorecardRegistry


def get_api_client(request: Request) -> AceItApiClient:
    return request.app.state.api_client


def get_scorecards(request: Request) -> ScorecardRegistry:
    return request.app.state.scorecards
