"""
PCG64-DXSM Configuration

Loads configuration from environment variables (``PCG64DXSM_*``) and an
optional ``.env`` file.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from pcg64dxsm.constants import STRING_POOL_DEFAULT
from pcg64dxsm.engine.generator import Pcg64Dxsm
from pcg64dxsm.engine.seeding import EntropySeed, PairSeed, SeedInput

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """PCG64-DXSM settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PCG64DXSM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default seed (hex with 0x prefix, or decimal). Unset means entropy.
    seed_state: str | None = None
    seed_increment: str | None = None

    # Logging
    log_level: str = "WARNING"

    # Toolkit
    string_pool: str = STRING_POOL_DEFAULT

    def seed_input(self) -> SeedInput:
        """Seed described by these settings.

        A state without an increment uses increment 1, as 16-byte seeds do.
        """
        if self.seed_state is None:
            if self.seed_increment is not None:
                logger.warning("seed_increment is set without seed_state; seeding from entropy")
            return EntropySeed()
        return PairSeed(state=self.seed_state, increment=self.seed_increment or "1")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def generator_from_settings(settings: Settings | None = None) -> Pcg64Dxsm:
    """Build a generator seeded as configured."""
    settings = settings or get_settings()
    return Pcg64Dxsm(settings.seed_input())


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings."""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.WARNING))
