from pydantic_settings import BaseSettings
from typing import List
import os

DEFAULT_JWT_SECRET = "cambia-este-secreto-por-uno-mas-largo-y-aleatorio"

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Consultorio Turnos"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    
    # Storage - two JSON documents under DATA_DIR
    DATA_DIR: str = "data"
    APPOINTMENTS_FILE: str = "turnos.json"
    PRACTITIONER_FILE: str = "medico.json"
    
    # Security
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10
    
    # Appointment statuses
    DEFAULT_STATUS: str = "pending"
    CANCELLED_STATUS: str = "cancelado"
    
    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
