from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev-secret"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "Waterlily"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000

    JWT_SECRET: str = DEFAULT_JWT_SECRET
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120
    BCRYPT_ROUNDS: int = 10

    # SQLite connection string (read from .env)
    DATABASE_URL: str = "sqlite:///./dev.db"
    AUTO_CREATE_SCHEMA: bool = True
    SEED_DEMO_SURVEY: bool = True

    # Responses store the token subject only when this is on
    RECORD_RESPONDENT_ID: bool = False
    ANONYMOUS_RESPONDENT_ID: str = "demo-user"

    BACKEND_CORS_ORIGINS: str = ""
    LOG_LEVEL: str = "INFO"

    # Used by app.client
    API_BASE: str = "http://localhost:3000"

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET

settings = Settings()
