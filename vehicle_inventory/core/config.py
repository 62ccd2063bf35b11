from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    """
    Application configuration settings.
    Loads from environment variables or .env file.
    """
    
    # Application
    APP_NAME: str = "Vehicle Inventory GraphQL API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    CORS_ORIGINS: List[str] = ["*"]
    
    # Database
    MONGO_URL: str
    DATABASE_NAME: str = "vehicles"
    VEHICLES_COLLECTION: str = "vehiculos"
    PARTS_COLLECTION: str = "repuestos"
    
    # Joke enrichment
    # - fail: a joke API failure fails the whole read
    # - degrade: the joke field is returned as null and the failure is logged
    JOKE_API_URL: str = "https://official-joke-api.appspot.com/random_joke"
    JOKE_API_TIMEOUT: float = 5.0  # seconds
    JOKE_FAILURE_POLICY: Literal["fail", "degrade"] = "fail"
    JOKE_MAX_CONCURRENCY: int = 10  # simultaneous joke calls per request
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
