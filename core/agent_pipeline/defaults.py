"""
Agent Pipeline Default Values

Version: 1.0.0
"""

from .constants import (
    ROUTER_STRATEGY_ALL_DESTINATIONS,
    TRIGGER_STRATEGY_ANY_MATCH,
    TRIGGER_TYPE_ON_UPDATE,
    FILTER_IS_NOT_EMPTY,
)

# =============================================================================
# MODELS
# =============================================================================

DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_AVAILABLE_MODELS = [
    "google/gemini-2.5-pro",
    "google/gemini-2.5-flash",
    "google/gemini-2.5-flash-lite",
    "openai/gpt-5",
    "openai/gpt-5-mini",
    "openai/gpt-5-nano",
    "x-ai/grok-beta",
    "x-ai/grok-4-reasoning",
    "x-ai/grok-vision-beta",
]
DEFAULT_TEMPERATURE = 0.7
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0

# =============================================================================
# TRIGGERS
# =============================================================================

DEFAULT_TRIGGER_ENABLED = False
DEFAULT_TRIGGER_STRATEGY = TRIGGER_STRATEGY_ANY_MATCH
DEFAULT_NEW_TRIGGER_TYPE = TRIGGER_TYPE_ON_UPDATE
DEFAULT_NEW_FILTER_OPERATOR = FILTER_IS_NOT_EMPTY

# =============================================================================
# ROUTER
# =============================================================================

DEFAULT_ROUTER_STRATEGY = ROUTER_STRATEGY_ALL_DESTINATIONS

# =============================================================================
# PIPELINE
# =============================================================================

DEFAULT_ENFORCE_MODULE_ORDER = False

# Offset for the display order of destination inputs
DESTINATION_INPUT_ORDER_OFFSET = 1000
