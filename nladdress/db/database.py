"""
Database Module
-------------
Handles database connections and the ORM model of the business records the geocoding job works on.
Uses SQLAlchemy; the schema only covers the columns geocoding reads and writes.
"""
from functools import lru_cache
import logging

from sqlalchemy import create_engine, Column, String, Float
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Get logger
logger = logging.getLogger(__name__)

Base = declarative_base()

# Define the business table structure
class BusinessDB(Base):
    __tablename__ = "businesses"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=True)
    address = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

@lru_cache(maxsize=None)
def get_engine(db_url: str) -> Engine:
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(db_url, connect_args=connect_args)

@lru_cache(maxsize=None)
def get_session_factory(db_url: str) -> sessionmaker:
    """One session factory per database URL for the life of the process."""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(db_url))

def create_tables(engine: Engine):
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created (if they didn't exist previously).")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise
