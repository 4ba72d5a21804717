"""
Built-in Module Definitions

One definition per module type, plus a helper registering all of them.
"""

from typing import TYPE_CHECKING, List, Optional

from ..config import Settings
from ..interfaces import IModuleDefinition
from .base_module import BaseModuleDefinition
from .trigger_module import TriggerModuleDefinition
from .prompt_module import PromptModuleDefinition, extract_prompt_inputs
from .model_module import ModelModuleDefinition
from .json_extractor_module import JsonExtractorModuleDefinition, normalize_json_path
from .router_module import RouterModuleDefinition
from .destinations_module import DestinationsModuleDefinition
from .channels_module import ChannelsModuleDefinition

if TYPE_CHECKING:
    from ..runtimes.module_registry import ModuleRegistry


def builtin_module_definitions(settings: Optional[Settings] = None) -> List[IModuleDefinition]:
    """Fresh instances of every built-in definition, in picker order."""
    return [
        TriggerModuleDefinition(settings),
        PromptModuleDefinition(),
        ModelModuleDefinition(settings),
        JsonExtractorModuleDefinition(),
        RouterModuleDefinition(settings),
        DestinationsModuleDefinition(),
        ChannelsModuleDefinition(),
    ]


def register_builtin_modules(registry: "ModuleRegistry", settings: Optional[Settings] = None) -> None:
    """Register all built-in definitions with ``registry``."""
    for definition in builtin_module_definitions(settings):
        registry.register(definition)


__all__ = [
    "BaseModuleDefinition",
    "TriggerModuleDefinition",
    "PromptModuleDefinition",
    "ModelModuleDefinition",
    "JsonExtractorModuleDefinition",
    "RouterModuleDefinition",
    "DestinationsModuleDefinition",
    "ChannelsModuleDefinition",
    "builtin_module_definitions",
    "register_builtin_modules",
    "extract_prompt_inputs",
    "normalize_json_path",
]
