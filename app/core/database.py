import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Load environment variables
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("DATABASE_URL is not set in the .env file!")

if DATABASE_URL.startswith("sqlite"):
    # SQLite connections are handed across FastAPI's worker threads
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    # Database connection with pooling
    engine = create_engine(
        DATABASE_URL,
        pool_size=5,  # Max connections in pool
        max_overflow=10,  # Extra connections if needed
        pool_timeout=30,  # Wait time for a connection
        pool_recycle=1800,  # Recycle connections every 30 minutes
        pool_pre_ping=True,
    )
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# Dependency to get the DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    # Import models so they register on Base.metadata
    from app.models import business, card, company, employee, payment, recharge  # noqa: F401

    Base.metadata.create_all(bind=engine)
