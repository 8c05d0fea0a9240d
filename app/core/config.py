from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field, model_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_PORT: int = 8001
    PROJECT_NAME: str = "Recipe Records"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    DATABASE_URL: str | None = None
    DB_NAME: str = ""
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = "postgres"
    DB_INTERNAL_PORT: int = 5432
    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = True

    @model_validator(mode="after")
    def check_required_field_are_set(self):
        if self.DATABASE_URL:
            return self

        missing_fields = []
        if not self.DB_NAME:
            missing_fields.append("DB_NAME")
        if not self.DB_USER:
            missing_fields.append("DB_USER")
        if not self.DB_PASSWORD:
            missing_fields.append("DB_PASSWORD")

        if missing_fields:
            raise ValueError(
                "Missing required environment variables: "
                f"{','.join(missing_fields)} (or set DATABASE_URL)"
            )

        return self

    @computed_field
    @property
    def ASYNC_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}@"
            f"{self.DB_HOST}:{self.DB_INTERNAL_PORT}/{self.DB_NAME}"
        )


settings = Settings()
