"""
Agent Pipeline Exceptions Module.

This module defines all custom exceptions used throughout the agent pipeline
subsystem. Validation findings are reported as data, not raised.
"""

from typing import Any, Dict, List, Optional

from .constants import (
    ERROR_DUPLICATE_MODULE_ID,
    ERROR_MODULE_NOT_REGISTERED,
    ERROR_MODULE_NOT_FOUND,
)


class AgentPipelineError(Exception):
    """Base exception for all agent pipeline errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ModuleNotRegisteredError(AgentPipelineError):
    """Raised when a module type has no definition in the registry."""

    def __init__(self, module_type: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ERROR_MODULE_NOT_REGISTERED.format(module_type=module_type),
            error_code="MODULE_NOT_REGISTERED",
            details=details,
        )
        self.module_type = module_type


class ModuleNotFoundInPipelineError(AgentPipelineError):
    """Raised when a module id is not part of the pipeline."""

    def __init__(self, module_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ERROR_MODULE_NOT_FOUND.format(module_id=module_id),
            error_code="MODULE_NOT_FOUND",
            details=details,
        )
        self.module_id = module_id


class DuplicateModuleIdError(AgentPipelineError, ValueError):
    """Raised when two modules of one pipeline share an id."""

    def __init__(self, module_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ERROR_DUPLICATE_MODULE_ID.format(module_id=module_id),
            error_code="DUPLICATE_MODULE_ID",
            details=details,
        )
        self.module_id = module_id


class PipelineValidationError(AgentPipelineError):
    """Raised by callers that choose to treat validation errors as fatal."""

    def __init__(
        self,
        message: str,
        validation_errors: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        all_details = details or {}
        all_details["validation_errors"] = validation_errors or []
        super().__init__(
            message,
            error_code="PIPELINE_VALIDATION_ERROR",
            details=all_details,
        )
        self.validation_errors = validation_errors or []


class FormulaSyntaxError(AgentPipelineError):
    """Raised while evaluating a formula that cannot be parsed."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(
            message,
            error_code="FORMULA_SYNTAX_ERROR",
            details={"position": position} if position is not None else None,
        )
        self.position = position
