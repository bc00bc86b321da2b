from datetime import datetime, UTC

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from loyalty.config import settings

DATABASE_URL = settings.DATABASE_URL

# check_same_thread only applies to SQLite
if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)
