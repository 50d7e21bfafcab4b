from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_title: str = "OKR Engine API"
    api_version: str = "0.1.0"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_prefix = "OKR_"
