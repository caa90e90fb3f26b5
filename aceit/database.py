from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from aceit.settings import settings

Base = declarative_base()

# SQLite needs this to be shared with FastAPI's threadpool
connect_args = (
    {"check_same_thread": False} if settings.DB_URL.startswith("sqlite") else {}
)

engine = create_engine(settings.DB_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create the local cache tables if they do not exist yet"""
    # Register the models on Base.metadata
    import aceit.models.session  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# Dependency to get a local DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
