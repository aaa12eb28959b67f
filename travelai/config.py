"""
TravelAI Service Configuration
Loads settings from environment variables
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment"""

    # OpenAI Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    OPENAI_TEMPERATURE: float = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
    OPENAI_MAX_TOKENS: int = int(os.getenv("OPENAI_MAX_TOKENS", "1000"))
    OPENAI_TIMEOUT: float = float(os.getenv("OPENAI_TIMEOUT", "30"))

    # Chat title generation
    TITLE_MAX_TOKENS: int = int(os.getenv("TITLE_MAX_TOKENS", "20"))
    TITLE_TEMPERATURE: float = float(os.getenv("TITLE_TEMPERATURE", "0.3"))

    # SerpAPI Configuration
    SERPAPI_KEY: str = os.getenv("SERPAPI_KEY", "")
    SERPAPI_BASE_URL: str = os.getenv("SERPAPI_BASE_URL", "https://serpapi.com/search.json")
    SEARCH_TIMEOUT: float = float(os.getenv("SEARCH_TIMEOUT", "15"))
    SEARCH_DEFAULT_LOCATION: str = os.getenv("SEARCH_DEFAULT_LOCATION", "United States")

    # Conversation context
    HISTORY_WINDOW: int = int(os.getenv("HISTORY_WINDOW", "10"))
    MODEL_HISTORY_TURNS: int = int(os.getenv("MODEL_HISTORY_TURNS", "6"))

    # Store Configuration
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", "memory")
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_ENV: str = os.getenv("API_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Configuration
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def openai_configured(self) -> bool:
        """True when a usable OpenAI key is present"""
        key = self.OPENAI_API_KEY.strip()
        return bool(key) and not key.startswith("sk-your")

    @property
    def search_configured(self) -> bool:
        """True when a SerpAPI key is present"""
        return bool(self.SERPAPI_KEY.strip())


# Global settings instance
settings = Settings()
