"""Application settings and configuration.

This module defines all configuration options for the Nonna Kitchen API.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Nonna Kitchen", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Identity provider: tokens are HS256 JWTs signed with a shared secret
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    admin_role: str = Field(default="team_member", alias="ADMIN_ROLE")

    # Database configuration
    database_url: str = Field(default="sqlite:///./nonna.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Content limits
    thread_title_max_length: int = Field(default=120, alias="THREAD_TITLE_MAX_LENGTH")
    post_content_max_length: int = Field(default=5000, alias="POST_CONTENT_MAX_LENGTH")
    comment_content_max_length: int = Field(default=2000, alias="COMMENT_CONTENT_MAX_LENGTH")
    max_post_depth: int = Field(default=5, alias="MAX_POST_DEPTH")

    # AI moderation classifier (OpenAI-compatible)
    moderation_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    moderation_base_url: str = Field(
        default="https://api.openai.com",
        alias="MODERATION_BASE_URL",
    )
    moderation_model: str = Field(default="omni-moderation-latest", alias="MODERATION_MODEL")
    moderation_timeout_seconds: float = Field(default=5.0, alias="MODERATION_TIMEOUT_SECONDS")

    # Machine translation (LibreTranslate-compatible)
    translate_base_url: str | None = Field(default=None, alias="LIBRE_TRANSLATE_URL")
    translate_timeout_seconds: float = Field(default=20.0, alias="TRANSLATE_TIMEOUT_SECONDS")

    # Payment provider (Stripe-compatible)
    payment_secret_key: str | None = Field(default=None, alias="STRIPE_SECRET_KEY")
    payment_base_url: str = Field(default="https://api.stripe.com", alias="STRIPE_BASE_URL")
    print_price_amount: int = Field(default=1000, alias="PRINT_PRICE_AMOUNT")
    print_price_currency: str = Field(default="usd", alias="PRINT_PRICE_CURRENCY")
    print_product_name: str = Field(default="Print payment", alias="PRINT_PRODUCT_NAME")
    payment_timeout_seconds: float = Field(default=15.0, alias="PAYMENT_TIMEOUT_SECONDS")

    # Realtime message relay
    relay_base_url: str | None = Field(default=None, alias="RELAY_BASE_URL")
    relay_api_key: str | None = Field(default=None, alias="RELAY_API_KEY")
    relay_timeout_seconds: float = Field(default=3.0, alias="RELAY_TIMEOUT_SECONDS")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def moderation_enabled(self) -> bool:
        """Return True when the external moderation classifier is configured."""
        return bool(self.moderation_api_key)


settings = Settings()  # type: ignore[call-arg]
