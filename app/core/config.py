from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "local"
    APP_NAME: str = "FiveStars Transport API"
    API_VERSION: str = "v1"
    # Comma-separated origins for CORS. If empty, uses localhost defaults.
    CORS_ORIGINS: str = ""
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./fivestars.db"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Render and others give postgres://; SQLAlchemy expects postgresql+psycopg2://."""
        if v and v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[11:]
        return v
    REDIS_URL: str = "redis://localhost:6379/0"

    # Response caching (quotes). Off by default so local runs need no Redis.
    CACHE_ENABLED: bool = False
    QUOTE_CACHE_TTL: int = 900

    # Localization
    DEFAULT_LOCALE: str = "en"
    SUPPORTED_LOCALES: str = "en,es,fr"

    # Pagination
    DEFAULT_PER_PAGE: int = 15
    MAX_PER_PAGE: int = 100

    SLOW_QUERY_MS: int = 1000

    # slowapi limit strings, counted per client address
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_GENERAL: str = "60/minute"
    RATE_LIMIT_QUOTE: str = "30/minute"
    RATE_LIMIT_AUTOCOMPLETE: str = "100/minute"
    RATE_LIMIT_RATES_READ: str = "120/minute"

    # JSON dump of the legacy catalog (airport/zones/locations), imported by app.seed
    INITIAL_DATA_PATH: str = ""

    @property
    def supported_locales(self) -> list[str]:
        return [l.strip() for l in self.SUPPORTED_LOCALES.split(",") if l.strip()]


settings = Settings()
