from contextlib import asynccontextmanager

from fastapi import FastAPI

from aceit.api.exceptions.handlers import register_exception_handlers
from aceit.api.routes.dashboard import router as dashboard_router
from aceit.api.routes.scorecards import router as scorecard_router
from aceit.database import init_db
from aceit.services.api_client import AceItApiClient
from aceit.services.scorecard import ScorecardRegistry
from aceit.settings import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app(api_client: AceItApiClient = None) -> FastAPI:
    app = FastAPI(title="AceIt Dashboard", debug=settings.DEBUG, lifespan=lifespan)
    app.state.api_client = api_client or AceItApiClient()
    app.state.scorecards = ScorecardRegistry(
        settings.SCORECARD_QUESTION_COUNT, settings.MAX_OPEN_SCORECARDS
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    register_exception_handlers(app)
    app.include_router(dashboard_router)
    app.include_router(scorecard_router)
    return app


app = create_app()
