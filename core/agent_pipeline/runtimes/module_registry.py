"""
Module Registry

Maps module types to their definitions. Registries are plain instances;
applications keep one in their ``PipelineContext``.

Version: 1.0.0
"""

import logging
from typing import Dict, List, Optional, Union

from ..enum import ModuleType
from ..interfaces.module_interfaces import IModuleDefinition

logger = logging.getLogger(__name__)


def _key(module_type: Union[ModuleType, str]) -> str:
    return module_type.value if isinstance(module_type, ModuleType) else str(module_type)


class ModuleRegistry:
    """
    Keyed collection of module definitions.

    Registering a type twice replaces the earlier definition and logs a
    warning.
    """

    def __init__(self):
        self._definitions: Dict[str, IModuleDefinition] = {}

    def register(self, definition: IModuleDefinition) -> None:
        """
        Register a definition under its module type.

        Args:
            definition: Definition to register
        """
        key = _key(definition.module_type)
        if key in self._definitions:
            logger.warning("Module definition for type '%s' is already registered; overwriting", key)
        self._definitions[key] = definition
        logger.debug("Registered module definition: %s", key)

    def get(self, module_type: Union[ModuleType, str]) -> Optional[IModuleDefinition]:
        return self._definitions.get(_key(module_type))

    def has(self, module_type: Union[ModuleType, str]) -> bool:
        return _key(module_type) in self._definitions

    def unregister(self, module_type: Union[ModuleType, str]) -> bool:
        """
        Remove a definition.

        Returns:
            True if a definition was removed
        """
        return self._definitions.pop(_key(module_type), None) is not None

    def get_all(self) -> List[IModuleDefinition]:
        """All definitions in registration order."""
        return list(self._definitions.values())

    def types(self) -> List[str]:
        return list(self._definitions.keys())

    def clear(self) -> None:
        self._definitions.clear()

    def __contains__(self, module_type: object) -> bool:
        if not isinstance(module_type, (ModuleType, str)):
            return False
        return self.has(module_type)

    def __len__(self) -> int:
        return len(self._definitions)


def create_default_registry(settings=None) -> ModuleRegistry:
    """Fresh registry holding the built-in module definitions."""
    from ..modules import register_builtin_modules

    registry = ModuleRegistry()
    register_builtin_modules(registry, settings)
    return registry
