from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_name: str = "IRR Genius"
    debug: bool = False
    log_level: str = "INFO"

    # API
    cors_origins: list[str] = ["*"]

    # Longest projection the API will build (12 points per year)
    max_years: float = 100.0


settings = Settings()
