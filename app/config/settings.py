# app/config/settings.py
# Application configuration loaded from environment variables

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Application settings"""

    DEBUG = os.getenv('DEBUG', 'false').lower() == 'true'

    DATABASE = {
        'url': os.getenv('DATABASE_URL', 'sqlite:///./task_manager.db'),
        'sslmode': os.getenv('DATABASE_SSLMODE', 'require'),
    }

    # Token settings
    JWT = {
        'secret_key': os.getenv('SECRET_KEY', ''),
        'algorithm': os.getenv('ALGORITHM', 'HS256'),
        'issuer': os.getenv('JWT_ISSUER', 'TaskManager.API'),
        'audience': os.getenv('JWT_AUDIENCE', 'TaskManager.Client'),
        'expire_minutes': int(os.getenv('ACCESS_TOKEN_EXPIRE_MINUTES', 15)),
    }

    CORS = {
        'allow_origins': _split(os.getenv('CORS_ORIGINS', 'http://localhost:3000,https://localhost:3000')),
    }

    SEED = {
        'enabled': os.getenv('SEED_DATA', 'true').lower() == 'true',
    }

    LOGGING = {
        'level': os.getenv('LOG_LEVEL', 'INFO').upper(),
        'format': os.getenv('LOG_FORMAT', '%(asctime)s %(levelname)s [%(name)s] %(message)s'),
    }

    @classmethod
    def jwt_secret(cls) -> str:
        """Get the token signing key, failing if it is not configured"""
        secret = cls.JWT['secret_key']
        if not secret:
            raise RuntimeError("SECRET_KEY not configured")
        return secret

    @classmethod
    def is_postgres(cls) -> bool:
        return cls.DATABASE['url'].startswith(('postgresql', 'postgres'))

    @classmethod
    def is_sqlite(cls) -> bool:
        return cls.DATABASE['url'].startswith('sqlite')
