"""
Agent Pipeline Settings

Centralized settings with environment variable support.
Priority: Environment Variables > Defaults

Usage:
    from core.agent_pipeline.config import get_settings

    settings = get_settings()
    models = settings.available_models

Version: 1.0.0
"""

from functools import lru_cache
from typing import Any, Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings

from .. import defaults as pipeline_defaults
from ..enum import RouterStrategy, TriggerStrategy


class Defaults:
    """Fallback values used when no environment variable is provided."""

    # =========================================================================
    # Model Configuration
    # =========================================================================
    DEFAULT_MODEL = pipeline_defaults.DEFAULT_MODEL
    AVAILABLE_MODELS = list(pipeline_defaults.DEFAULT_AVAILABLE_MODELS)
    DEFAULT_TEMPERATURE = pipeline_defaults.DEFAULT_TEMPERATURE

    # =========================================================================
    # Strategy Configuration
    # =========================================================================
    DEFAULT_TRIGGER_STRATEGY = pipeline_defaults.DEFAULT_TRIGGER_STRATEGY
    DEFAULT_ROUTER_STRATEGY = pipeline_defaults.DEFAULT_ROUTER_STRATEGY

    # =========================================================================
    # Pipeline Configuration
    # =========================================================================
    ENFORCE_MODULE_ORDER = pipeline_defaults.DEFAULT_ENFORCE_MODULE_ORDER


class Settings(BaseSettings):
    """
    Agent pipeline settings with automatic environment variable loading.

    Environment variables are loaded with the prefix AGENT_PIPELINE_.
    Example: AGENT_PIPELINE_DEFAULT_MODEL overrides default_model
    """

    # =========================================================================
    # Model Configuration
    # =========================================================================
    default_model: str = Field(
        default=Defaults.DEFAULT_MODEL,
        description="Model preselected for new model modules"
    )
    available_models: List[str] = Field(
        default_factory=lambda: list(Defaults.AVAILABLE_MODELS),
        description="Models a model module may select"
    )
    default_temperature: float = Field(default=Defaults.DEFAULT_TEMPERATURE)

    # =========================================================================
    # Strategy Configuration
    # =========================================================================
    default_trigger_strategy: TriggerStrategy = Field(
        default=TriggerStrategy(Defaults.DEFAULT_TRIGGER_STRATEGY),
        description="Strategy of new trigger modules"
    )
    default_router_strategy: RouterStrategy = Field(
        default=RouterStrategy(Defaults.DEFAULT_ROUTER_STRATEGY),
        description="Strategy of new router modules"
    )

    # =========================================================================
    # Pipeline Configuration
    # =========================================================================
    enforce_module_order: bool = Field(
        default=Defaults.ENFORCE_MODULE_ORDER,
        description="Only expose outputs of preceding modules and warn on forward references"
    )

    model_config = {
        "env_prefix": "AGENT_PIPELINE_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def to_dict(self) -> Dict[str, Any]:
        """Export settings to dictionary."""
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Call Settings() directly if you need a fresh instance.

    Returns:
        Settings instance
    """
    return Settings()
