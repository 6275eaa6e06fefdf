from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # JWKS of the identity provider that issues our access tokens
    auth_jwks_url: str = ""
    auth_issuer: Optional[str] = None
    auth_audience: Optional[str] = None
    auth_jwks_ttl_seconds: int = 60 * 60

    app_timezone: str = "UTC"
    cors_origins: str = "*"
    log_level: str = "INFO"

    # chat / journal text limits (MySQL TEXT column)
    max_text_bytes: int = 65533

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
