"""
Base Module Definition

Shared parsing and reporting for the built-in module definitions. A
subclass names its config model and implements ``_validate`` and
``_outputs`` against the parsed config.

Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from ..enum import ModuleType
from ..constants import ERROR_INVALID_CONFIG
from ..interfaces.module_interfaces import IModuleDefinition
from ..spec.io_models import InputElement
from ..spec.validation_models import ModuleValidationResult, ValidationIssue

logger = logging.getLogger(__name__)


class BaseModuleDefinition(IModuleDefinition):
    """
    Base implementation for module definitions.

    Subclasses set MODULE_TYPE, LABEL, DESCRIPTION, EXECUTE_LOGIC and
    CONFIG_MODEL.
    """

    MODULE_TYPE: ModuleType
    LABEL: str = ""
    DESCRIPTION: str = ""
    EXECUTE_LOGIC: str = ""
    CONFIG_MODEL: Type[BaseModel]

    @property
    def module_type(self) -> ModuleType:
        return self.MODULE_TYPE

    @property
    def label(self) -> str:
        return self.LABEL

    @property
    def description(self) -> str:
        return self.DESCRIPTION

    @property
    def execute_logic(self) -> str:
        return self.EXECUTE_LOGIC

    def get_default_config(self) -> Dict[str, Any]:
        return self.CONFIG_MODEL().model_dump(by_alias=True, mode="json")

    # =========================================================================
    # PARSING
    # =========================================================================

    def parse_config(self, config: Optional[Dict[str, Any]]) -> Tuple[Optional[BaseModel], List[ValidationIssue]]:
        """
        Parse a stored config into the typed config model.

        Returns:
            (parsed config, []) on success, (None, issues) otherwise
        """
        try:
            return self.CONFIG_MODEL.model_validate(config or {}), []
        except ValidationError as exc:
            return None, [
                ValidationIssue(
                    field=".".join(str(part) for part in error["loc"]) or "config",
                    message=ERROR_INVALID_CONFIG.format(error=error["msg"]),
                )
                for error in exc.errors()
            ]

    # =========================================================================
    # INTERFACE
    # =========================================================================

    def validate_config(self, config: Dict[str, Any]) -> ModuleValidationResult:
        errors: List[ValidationIssue] = []
        warnings: List[str] = []
        config = self._prepare(dict(config or {}), errors)
        if config is None:
            return ModuleValidationResult.from_issues(errors, warnings)
        parsed, parse_errors = self.parse_config(config)
        errors.extend(parse_errors)
        if parsed is not None:
            self._validate(parsed, errors, warnings)
        return ModuleValidationResult.from_issues(errors, warnings)

    def get_dynamic_outputs(self, config: Dict[str, Any], module_id: str) -> List[InputElement]:
        parsed, errors = self.parse_config(config)
        if parsed is None:
            logger.warning(
                "Module %s (%s) has an unreadable config; exposing no outputs: %s",
                module_id,
                self.MODULE_TYPE.value,
                "; ".join(issue.message for issue in errors),
            )
            return []
        return self._outputs(parsed, module_id)

    # =========================================================================
    # SUBCLASS HOOKS
    # =========================================================================

    def _prepare(self, config: Dict[str, Any], errors: List[ValidationIssue]) -> Optional[Dict[str, Any]]:
        """Check the raw config before parsing; return None to stop validation."""
        return config

    def _validate(self, config: Any, errors: List[ValidationIssue], warnings: List[str]) -> None:
        """Append findings for a parsed config."""

    def _outputs(self, config: Any, module_id: str) -> List[InputElement]:
        return []
