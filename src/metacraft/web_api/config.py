"""
Configuration settings for the web app.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Settings:
    """App configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Public origin used in og:image / twitter:image URLs; request origin when unset
    BASE_URL: Optional[str] = None

    # Idle delay before the page rewrites its query string
    SYNC_DELAY_MS: int = 150

    # UI copy (pt-BR | en)
    LOCALE: str = "pt-BR"

    # TrueType font for /api/og; system fonts are tried when unset
    OG_FONT_PATH: Optional[str] = None

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
