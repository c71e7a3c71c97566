from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from app.config.settings import Settings

DATABASE_URL = Settings.DATABASE['url']

connect_args = {}
if Settings.is_postgres():
    # Hosted PostgreSQL (Render or similar) expects sslmode=require
    connect_args = {"sslmode": Settings.DATABASE['sslmode']}
elif Settings.is_sqlite():
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# ✅ This is required to be imported wherever DB session is needed
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all tables registered on Base"""
    # Models must be imported so they are registered on the metadata
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
