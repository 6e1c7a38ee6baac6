"""
Application settings
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings from environment variables"""

    # SQLite file holding the squads
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "super_chase.db")

    # Extra CORS origins (comma-separated)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # Overs in a normal chase (a super over is always 1)
    TOTAL_OVERS: int = int(os.getenv("TOTAL_OVERS", "20"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
