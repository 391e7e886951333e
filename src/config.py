from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "TIMELINE_"}

    # Store
    data_file: str = "data/finance-timeline.json"

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Projection
    cumulative_since_year: int = 2020  # First month counted by cumulative balance
    default_horizon_years: int = 30
    max_projection_months: int = 1200  # Upper bound accepted by the API


settings = Settings()
