# scripts/init_db.py
from aceit.database import init_db
from aceit.settings import settings
from aceit.logging_config import app_logger

# Create the local cache tables (current_events)
init_db()
app_logger.info(f"Initialized local cache database at {settings.DB_URL}")
