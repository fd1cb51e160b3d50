from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="INGREDIENTS_", extra="ignore")

    log_level: str = "INFO"

    # Unit normalization
    default_density_g_per_cup: float = 200.0

    # HTTP surface
    max_document_bytes: int = 5 * 1024 * 1024
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
