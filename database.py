# database.py
import logging
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
from paths import DATA_DIR, data_file

logger = logging.getLogger(__name__)

# Load environment variables from .env
load_dotenv()

# Make sure the Data directory exists for the default SQLite file
DATA_DIR.mkdir(exist_ok=True)

database_url = os.getenv('DATABASE_URL', f"sqlite:///{data_file('autoshop.db')}")
environment = os.getenv('ENVIRONMENT', 'development')
sql_echo = os.getenv('SQL_ECHO', '').lower() in ('1', 'true', 'yes')

def engine_options(url: str) -> dict:
    options = {"echo": sql_echo}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}  # Needed for SQLite
    return options

engine = create_engine(database_url, **engine_options(database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    from Models import Base
    Base.metadata.create_all(bind=bind or engine)
    logger.info(f"Environment: {environment}")
    logger.info(f"Database initialized at: {database_url}")

# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
