from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Required Fields ---
    MONGO_URI: str = Field(min_length=1)  # empty counts as not set

    # --- Optional / Default Fields ---
    PROJECT_NAME: str = "Restaurant Orders API"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # --- Configuration ---
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # Other services share the same .env, ignore their variables
    )
