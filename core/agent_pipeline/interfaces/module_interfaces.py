"""
Module Definition Interfaces

Defines the abstract base class every pipeline module type implements.

Version: 1.0.0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..enum import ModuleType
from ..spec.io_models import InputElement
from ..spec.validation_models import ModuleValidationResult


class IModuleDefinition(ABC):
    """
    Behaviour of one module type.

    A definition knows the default configuration of its type, how to
    validate a configuration, and which inputs a configured module exposes
    to the rest of the pipeline.
    """

    @property
    @abstractmethod
    def module_type(self) -> ModuleType:
        """Module type handled by this definition."""
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Display name."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description shown in the module picker."""
        ...

    @property
    def execute_logic(self) -> str:
        """Plain-text description of what the execution service does with the module."""
        return ""

    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """
        Configuration of a freshly added module.

        Returns:
            A new dictionary on every call
        """
        ...

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> ModuleValidationResult:
        """
        Validate a module configuration.

        Args:
            config: Configuration dictionary as stored

        Returns:
            ModuleValidationResult; never raises for bad input
        """
        ...

    @abstractmethod
    def get_dynamic_outputs(self, config: Dict[str, Any], module_id: str) -> List[InputElement]:
        """
        Inputs a configured module exposes to other modules.

        Args:
            config: Configuration dictionary as stored
            module_id: Id of the module instance

        Returns:
            Exposed input elements, in display order
        """
        ...
