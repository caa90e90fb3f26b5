from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # FastAPI
    API_VERSION: str = "v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Local cache database
    DB_URL: str = "sqlite:///./aceit.db"

    # AceIt remote API
    API_BASE_URL: str = "http://localhost:3000"
    API_TIMEOUT: float = 10.0

    # Dashboard
    DISPLAY_TIMEZONE: str = "America/New_York"

    # Scorecards
    SCORECARD_QUESTION_COUNT: int = 16
    REQUIRE_COMPLETE_SCORECARD: bool = False
    MAX_OPEN_SCORECARDS: int = 500

    class Config:
        env_file = ".env"


settings = Settings()
