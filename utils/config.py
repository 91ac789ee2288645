"""
Configuration management.
"""

import os
from dataclasses import dataclass, field


def _split_origins(value: str) -> list:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Config:
    """
    Application configuration.

    Loads from environment variables with sensible defaults. Only the web
    server and the CLI read it; rendering itself takes no configuration.
    """

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    allowed_origins: list = field(
        default_factory=lambda: _split_origins(os.getenv("ALLOWED_ORIGINS", ""))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Rendering
    default_variant: str = field(
        default_factory=lambda: os.getenv("DEFAULT_VARIANT", "comprehensive")
    )

    # Output
    output_dir: str = field(default_factory=lambda: os.getenv("OUTPUT_DIR", "./reports/biodata"))

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "allowed_origins": self.allowed_origins,
            "log_level": self.log_level,
            "default_variant": self.default_variant,
            "output_dir": self.output_dir,
        }
