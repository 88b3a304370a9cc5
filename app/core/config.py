"""
Core configuration and settings for the Product Service
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service information
    service_name: str = Field(default="product-service")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=3000)
    host: str = Field(default="0.0.0.0")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Database configuration
    mongodb_uri: str = Field(default="mongodb://localhost:27017")

    # Auth service configuration
    auth_service_url: str = Field(default="http://localhost:4000")
    auth_service_timeout: Optional[float] = Field(default=None)  # None = wait indefinitely

    # Message broker configuration
    rabbitmq_url: Optional[str] = Field(default=None)
    rabbitmq_exchange: str = Field(default="products")
    rabbitmq_queue: str = Field(default="products")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/product-service.log")

    # Tracing configuration
    correlation_id_header: str = Field(default="X-Correlation-ID")
    telemetry_enabled: bool = Field(default=True)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def auth_verify_url(self) -> str:
        """Full URL of the external token verification endpoint"""
        return f"{self.auth_service_url.rstrip('/')}/auth/verify"


# Global config instance
config = Config()
