"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: str = "development"
    app_debug: bool = False
    app_port: int = 8000

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:5173"

    # Database - full URL override (e.g. sqlite+aiosqlite:///./cms.db)
    database_url_override: str = ""

    # Database - individual components
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "cms_db"

    @property
    def database_url(self) -> str:
        """Return the override URL, or construct an async Postgres URL from components."""
        if self.database_url_override:
            return self.database_url_override
        return f"postgresql+psycopg_async://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    # JWT Settings
    jwt_secret_key: str = "your-super-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 30
    jwt_refresh_token_expire_days: int = 7

    # Credentials fallback (plain text or a bcrypt hash)
    admin_username: str = ""
    admin_password: str = ""

    # Google OAuth
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_uri: str = "http://localhost:8000/api/auth/google/callback"

    # Comma-separated list of Google accounts allowed to sign in
    admin_emails: str = ""

    # Position management
    renumber_on_delete: bool = False
    atomic_swap: bool = True

    # Base URL the server-side action client calls
    api_base_url: str = "http://localhost:8000"

    # Logging
    log_level: str = "INFO"

    @property
    def admin_email_list(self) -> list[str]:
        """Normalized Google allow-list."""
        return [e.strip().lower() for e in self.admin_emails.split(",") if e.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
