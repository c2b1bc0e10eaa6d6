"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        STOREFRONT_DB_HOST: Database host (default: localhost)
        STOREFRONT_DB_PORT: Database port (default: 5432)
        STOREFRONT_DB_DATABASE: Database name (default: storefront)
        STOREFRONT_DB_USERNAME: Database user (default: storefront)
        STOREFRONT_DB_PASSWORD: Database password (required in production)
        STOREFRONT_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        STOREFRONT_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="storefront", description="Database name")
    username: str = Field(default="storefront", description="Database username")
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


class TenancySettings(BaseSettings):
    """Tenant resolution settings.

    Environment variables:
        STOREFRONT_TENANCY_HEADER_NAME: Header carrying an explicit tenant slug
            (default: X-Tenant-Slug)
        STOREFRONT_TENANCY_RESERVED_SUBDOMAINS: Host labels that never name a
            tenant (default: www, api, app, admin, localhost)
        STOREFRONT_TENANCY_PATH_PREFIXES: Path segments followed by a tenant
            slug, e.g. /store/{slug} (default: store, t)
        STOREFRONT_TENANCY_EXEMPT_PATHS: Paths served without tenant
            resolution (default: /health)

    List values are given as JSON arrays, e.g. '["www", "api"]'.
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    header_name: str = Field(
        default="X-Tenant-Slug",
        description="Header carrying an explicit tenant slug",
    )
    reserved_subdomains: frozenset[str] = Field(
        default=frozenset({"www", "api", "app", "admin", "localhost"}),
        description="Host labels that are never treated as a tenant slug",
    )
    path_prefixes: tuple[str, ...] = Field(
        default=("store", "t"),
        description="Path segments that precede a tenant slug",
    )
    exempt_paths: tuple[str, ...] = Field(
        default=("/health",),
        description="Paths that bypass tenant resolution",
    )

    @field_validator("header_name")
    @classmethod
    def validate_header_name(cls, value: str) -> str:
        """Reject a blank header name."""
        value = value.strip()
        if not value:
            raise ValueError("header_name must not be empty")
        return value

    @field_validator("reserved_subdomains")
    @classmethod
    def normalize_reserved_subdomains(cls, value: frozenset[str]) -> frozenset[str]:
        """Compare reserved labels case-insensitively."""
        return frozenset(label.strip().lower() for label in value if label.strip())

    @field_validator("path_prefixes")
    @classmethod
    def validate_path_prefixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one non-empty prefix, stripped of slashes."""
        prefixes = tuple(p.strip().strip("/") for p in value if p.strip().strip("/"))
        if not prefixes:
            raise ValueError("path_prefixes must contain at least one prefix")
        return prefixes


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Storefront API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")


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
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenant resolution settings."""
    return TenancySettings()
