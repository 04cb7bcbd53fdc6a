from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration from environment"""
    database_url: str
    database_echo: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def engine_options(database_url: str) -> Dict[str, Any]:
    """Engine keyword arguments for the configured backend"""
    if make_url(database_url).get_backend_name() == "sqlite":
        # Request handlers run in a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 300}


# Initialize settings
db_settings = DatabaseSettings()

# Create SQLAlchemy engine
engine = create_engine(
    db_settings.database_url,
    echo=db_settings.database_echo,
    **engine_options(db_settings.database_url)
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()
