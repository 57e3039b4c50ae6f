"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        WEBMALL_DB_HOST: Database host (default: localhost)
        WEBMALL_DB_PORT: Database port (default: 5432)
        WEBMALL_DB_DATABASE: Database name (default: webmall)
        WEBMALL_DB_USERNAME: Database user (default: webmall)
        WEBMALL_DB_PASSWORD: Database password (required in production)
        WEBMALL_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        WEBMALL_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        WEBMALL_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBMALL_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="webmall", description="Database name")
    username: str = Field(default="webmall", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OIDCSettings(BaseSettings):
    """Identity provider settings.

    Environment variables:
        WEBMALL_OIDC_ISSUER_URL: Issuer base URL used for discovery
        WEBMALL_OIDC_CLIENT_ID: Client identifier registered with the provider
        WEBMALL_OIDC_CLIENT_SECRET: Client secret for the password grant
        WEBMALL_OIDC_AUDIENCE: Expected token audience (default: client id)
        WEBMALL_OIDC_USER_ID_CLAIM: Claim holding the subject id (default: sub)
        WEBMALL_OIDC_JWKS_CACHE_TTL_SECONDS: JWKS cache lifetime (default: 3600)
        WEBMALL_OIDC_HTTP_TIMEOUT_SECONDS: Provider request timeout (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBMALL_OIDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    issuer_url: str = Field(
        default="http://localhost:8080/realms/webmall",
        description="OIDC issuer URL",
    )
    client_id: str = Field(default="webmall", description="OIDC client id")
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        description="OIDC client secret",
    )
    audience: str | None = Field(
        default=None,
        description="Expected audience claim, defaults to the client id",
    )
    user_id_claim: str = Field(default="sub", description="Subject id claim")
    jwks_cache_ttl_seconds: int = Field(default=3600, ge=0)
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    @property
    def effective_audience(self) -> str:
        """Audience tokens must be issued for."""
        return self.audience or self.client_id


class SecuritySettings(BaseSettings):
    """Request perimeter settings.

    Environment variables:
        WEBMALL_SECURITY_APP_URL: Public URL of the storefront
        WEBMALL_SECURITY_PLATFORM_HOST: Host assigned by the deployment platform
        WEBMALL_SECURITY_DEV_ORIGINS: JSON list of local development origins
        WEBMALL_SECURITY_API_PREFIX: Path prefix guarded by origin checks
        WEBMALL_SECURITY_RATE_LIMIT_CLEANUP_INTERVAL_SECONDS: Window purge interval
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBMALL_SECURITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_url: str | None = Field(default=None, description="Application URL")
    platform_host: str | None = Field(
        default=None,
        description="Deployment platform host, served over https",
    )
    dev_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"],
        description="Origins always accepted for local development",
    )
    api_prefix: str = Field(default="/api/", description="Guarded path prefix")
    rate_limit_cleanup_interval_seconds: int = Field(default=600, ge=1)

    @property
    def platform_url(self) -> str | None:
        """Platform host expanded to a full https URL."""
        if not self.platform_host:
            return None
        return f"https://{self.platform_host}"


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="WEBMALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="WebMall API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    currency: str = Field(default="LKR", description="Store currency code")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def oidc(self) -> OIDCSettings:
        """Get identity provider settings."""
        return get_oidc_settings()

    @property
    def security(self) -> SecuritySettings:
        """Get perimeter settings."""
        return get_security_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_oidc_settings() -> OIDCSettings:
    """Get cached identity provider settings."""
    return OIDCSettings()


@lru_cache
def get_security_settings() -> SecuritySettings:
    """Get cached perimeter settings."""
    return SecuritySettings()
