"""Environment driven configuration for comparison chains."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("ComparisonSettings", "get_settings")


class ComparisonSettings(BaseSettings):
    """Settings read from ``SWITCHIFY_*`` environment variables.

    Attributes:
        trace_resolution: Emit DEBUG records for each resolution step.
    """

    model_config = SettingsConfigDict(env_prefix="SWITCHIFY_", frozen=True)

    trace_resolution: bool = False


@lru_cache(maxsize=1)
def get_settings() -> ComparisonSettings:
    """Get the process wide settings.

    Returns:
        ComparisonSettings: Settings loaded from the environment on first call.
    """
    return ComparisonSettings()
