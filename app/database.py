from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import config

connect_args = {"check_same_thread": False} if config.SQLALCHEMY_DATABASE_URI.startswith("sqlite") else {}
engine = create_engine(config.SQLALCHEMY_DATABASE_URI, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all models
Base = declarative_base()


@contextmanager
def transactional(db: Session):
    """
    Unit of work for a service call.

    Commits when the block completes and rolls back on any exception, so every
    statement issued inside the block (seat counter updates included) lands
    together or not at all.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
