import os
import logging
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.environ.get('DATABASE_URL', 'sqlite+aiosqlite:///./posts.db')

ENV = os.environ.get('ENV', 'development').lower()

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

PRODUCTION_ORIGINS = [
    "https://posts.example.com",
]

DEVELOPMENT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def cors_origins() -> list[str]:
    """CORS_ORIGINS (comma separated) wins over the ENV-selected defaults."""
    raw = os.environ.get('CORS_ORIGINS')
    if raw:
        return [origin.strip() for origin in raw.split(',') if origin.strip()]
    return PRODUCTION_ORIGINS if ENV == 'production' else DEVELOPMENT_ORIGINS


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s - %(message)s',
    )
