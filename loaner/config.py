from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "LOANER_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Display
    default_currency: str = ""  # Suffix appended to amounts, e.g. "€"

    # CLI remote mode
    api_url: str = "http://localhost:8000"
    request_timeout: float = 30.0


settings = Settings()
