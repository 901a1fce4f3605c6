"""
Application configuration.

Loads settings from environment variables with sensible defaults.
These are process-wide and read once at startup.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from the environment (WARDEN_ prefix)."""
    
    # ==========================================================================
    # Capabilities
    # ==========================================================================
    
    # Globally enabled capabilities; entity types may only narrow this set
    opts: str = (
        "authenticatable,registerable,confirmable,recoverable,"
        "lockable,trackable,unlockable_with_token,rememberable"
    )
    
    # ==========================================================================
    # Lockable
    # ==========================================================================
    
    unlock_timeout_minutes: int = 5
    max_failed_attempts: int = 5
    
    # ==========================================================================
    # Recoverable / Confirmable
    # ==========================================================================
    
    reset_token_expire_days: int = 2
    confirmation_token_expire_days: int = 5
    
    # ==========================================================================
    # Passwords
    # ==========================================================================
    
    password_min_length: int = 4
    bcrypt_log_rounds: int = 12
    
    # ==========================================================================
    # Helpers
    # ==========================================================================
    
    @property
    def opts_list(self) -> list[str]:
        return [o.strip() for o in self.opts.split(",") if o.strip()]
    
    class Config:
        env_prefix = "WARDEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
