import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Catalog backend (serves both CategoryService and ProductService)
    catalog_service_host: str = os.getenv("CATALOG_SERVICE_HOST", "localhost")
    catalog_service_port: int = int(os.getenv("CATALOG_SERVICE_PORT", "9001"))

    # Order backend
    order_service_host: str = os.getenv("ORDER_SERVICE_HOST", "localhost")
    order_service_port: int = int(os.getenv("ORDER_SERVICE_PORT", "9002"))

    # Auth backend
    auth_service_host: str = os.getenv("AUTH_SERVICE_HOST", "localhost")
    auth_service_port: int = int(os.getenv("AUTH_SERVICE_PORT", "9003"))

    # RPC
    rpc_timeout: float = float(os.getenv("RPC_TIMEOUT", "30.0"))

    # API
    api_prefix: str = os.getenv("API_PREFIX", "/v1")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def catalog_service_url(self) -> str:
        """Base URL of the catalog backend."""
        return f"http://{self.catalog_service_host}:{self.catalog_service_port}"

    @property
    def order_service_url(self) -> str:
        """Base URL of the order backend."""
        return f"http://{self.order_service_host}:{self.order_service_port}"

    @property
    def auth_service_url(self) -> str:
        """Base URL of the auth backend."""
        return f"http://{self.auth_service_host}:{self.auth_service_port}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        for name in ("catalog_service_port", "order_service_port", "auth_service_port", "api_port"):
            port = getattr(self, name)
            if not 0 < port <= 65535:
                raise ValueError(f"{name.upper()} must be between 1 and 65535, got {port}")

        if self.rpc_timeout <= 0:
            raise ValueError("RPC_TIMEOUT must be positive")

        if not self.api_prefix.startswith("/"):
            raise ValueError(f"API_PREFIX must start with '/', got {self.api_prefix!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
