"""
Profile store application settings.

Extends the base settings with profile-store-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Profile-store-specific settings."""

    # ==========================================================================
    # Storage
    # ==========================================================================
    MONGODB_COLLECTION: str = "profiles"

    # ==========================================================================
    # Frontend URL (the only origin allowed by CORS)
    # ==========================================================================
    FRONTEND_URL: str = "https://digcard.netlify.app"

    def get_cors_origins(self) -> list:
        """Allow the frontend origin only."""
        return [self.FRONTEND_URL]


# Global settings instance
settings = Settings()
