from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
        frozen=True,
    )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Content
    POSTS_DIR: str = "posts"
    STATIC_DIR: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Integrations (presence only, values never leave the process)
    ANALYTICS_KEY_GOOGLE: Optional[str] = None
    ANALYTICS_KEY_MIXPANEL: Optional[str] = None
    STRIPE_API_KEY: Optional[str] = None

    # Stats endpoint bearer secret
    BACKEND_SECRET_KEY: Optional[str] = None

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def analytics_enabled(self) -> bool:
        return bool(self.ANALYTICS_KEY_GOOGLE and self.ANALYTICS_KEY_MIXPANEL)

    @property
    def payments_enabled(self) -> bool:
        return bool(self.STRIPE_API_KEY)

    @property
    def google_analytics_id(self) -> Optional[str]:
        if not self.ANALYTICS_KEY_GOOGLE:
            return None
        return f"GA-{self.ANALYTICS_KEY_GOOGLE[-8:]}"

    @property
    def mixpanel_token(self) -> Optional[str]:
        if not self.ANALYTICS_KEY_MIXPANEL:
            return None
        return f"{self.ANALYTICS_KEY_MIXPANEL[:4]}..."

    def integration_status(self) -> dict:
        """Which credentials are loaded, keyed by display name."""
        return {
            "Google Analytics": bool(self.ANALYTICS_KEY_GOOGLE),
            "Mixpanel Analytics": bool(self.ANALYTICS_KEY_MIXPANEL),
            "Stripe Payments": bool(self.STRIPE_API_KEY),
            "Backend Secret": bool(self.BACKEND_SECRET_KEY),
        }


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
