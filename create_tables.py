# create_tables.py
import argparse
import logging

from app.database import Base, SessionLocal, engine, init_db
from app.services.seed import seed_database

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_tables(drop: bool = False, seed: bool = True):
    """Create all tables and optionally seed the default accounts and sample tasks"""
    if drop:
        Base.metadata.drop_all(bind=engine)
        logger.info("Dropped existing tables")

    init_db()
    logger.info("All tables created successfully")

    if seed:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()
        logger.info("Default users: admin@example.com / Admin123!, user@example.com / User123!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create Task Manager tables")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    parser.add_argument("--no-seed", action="store_true", help="skip default users and sample tasks")
    args = parser.parse_args()
    create_tables(drop=args.drop, seed=not args.no_seed)
