"""
Configuration Module

Provides agent pipeline configuration with environment variable support.

Usage:
    from core.agent_pipeline.config import get_settings, Defaults

    settings = get_settings()
"""

from .settings import Defaults, Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "Defaults",
]
