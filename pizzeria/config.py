"""
Configuration settings for the pizzeria persistence layer
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str = "sqlite:///pizzeria.db"
    SQL_ECHO: bool = False
    
    # Service
    SERVICE_NAME: str = "pizzeria"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
