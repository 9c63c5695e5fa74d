"""
Client configuration
"""
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Where the client finds the API"""

    BOOKSTORE_API_URL: str = "http://localhost:8000"
    BOOKSTORE_API_TIMEOUT: float = 30.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
