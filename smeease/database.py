# smeease/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from smeease.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

# SQLite connections are shared with FastAPI's worker threads
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False}
else:
    connect_args = {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # Import models so every table is registered on Base.metadata
    import smeease.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
