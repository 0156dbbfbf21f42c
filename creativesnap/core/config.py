# creativesnap/core/config.py

"""Application configuration from environment variables"""

from pydantic_settings import BaseSettings # type: ignore
from typing import List


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Database
    DB_USER: str = ''
    DB_PASS: str = ''
    DB_CLUSTER: str = 'cluster0.h54g5oh.mongodb.net'
    MONGO_URI: str = ''
    DATABASE_NAME: str = 'CreativeSnap'

    # API
    API_TITLE: str = 'CreativeSnap Course Marketplace'
    API_VERSION: str = '1.0.0'
    PORT: int = 5000

    # Security - shared secret for signing bearer tokens
    ACCESS_KEY: str = 'change-me'
    JWT_ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_HOURS: int = 10

    # CORS
    CORS_ORIGINS: List[str] = ['*']

    # Stripe
    STRIPE_SECRET_KEY: str = ''
    STRIPE_API_URL: str = 'https://api.stripe.com'
    PAYMENT_CURRENCY: str = 'usd'

    # Logging
    LOG_LEVEL: str = 'INFO'

    class Config:
        env_file = '.env'
        case_sensitive = True

    @property
    def mongo_uri(self) -> str:
        """Connection string, built from the cluster credentials unless MONGO_URI is set"""
        if self.MONGO_URI:
            return self.MONGO_URI
        if self.DB_USER and self.DB_PASS:
            return (
                f"mongodb+srv://{self.DB_USER}:{self.DB_PASS}@{self.DB_CLUSTER}"
                "/?retryWrites=true&w=majority"
            )
        return 'mongodb://localhost:27017'


settings = Settings()
