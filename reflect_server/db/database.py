# reflect_server/db/database.py
# MySQL connection setup; DATABASE_URL wins when set
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.engine import URL
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")

# otherwise build the MySQL URL from the individual variables
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_HOST = os.getenv("DB_HOST", "localhost")

DB_PORT_RAW = os.getenv("DB_PORT")
DB_PORT = int(DB_PORT_RAW) if DB_PORT_RAW else None

DB_NAME = os.getenv("DB_NAME")

if DATABASE_URL and DATABASE_URL.startswith("sqlite"):
    # sqlite (local dev, tests): one shared connection for every session
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    url = DATABASE_URL or URL.create(
        "mysql+pymysql",
        username=DB_USER,
        password=DB_PASS,
        host=DB_HOST,
        port=DB_PORT,
        database=DB_NAME,
    )

    engine = create_engine(
        url,
        pool_pre_ping=True,     # stale connection check
        pool_recycle=1800,      # recycle every 30 minutes
        pool_size=5,
        max_overflow=10
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# request-scoped session for FastAPI dependencies
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
