"""
Model Module

Selects the LLM the execution service calls.

Version: 1.0.0
"""

from typing import Any, Dict, List, Optional

from ..enum import ModuleType
from ..defaults import MIN_TEMPERATURE, MAX_TEMPERATURE
from ..constants import (
    OUTPUT_ID_MODULE,
    OUTPUT_TYPE_LLM_RESPONSE,
    ERROR_MODEL_REQUIRED,
    ERROR_MODEL_UNKNOWN,
    ERROR_TEMPERATURE_RANGE,
    ERROR_MAX_TOKENS,
)
from ..config import Settings, get_settings
from ..spec.io_models import InputElement
from ..spec.module_models import ModelModuleConfig
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition


class ModelModuleDefinition(BaseModuleDefinition):
    """Definition of the model module; allowed models come from settings."""

    MODULE_TYPE = ModuleType.MODEL
    LABEL = "LLM model"
    DESCRIPTION = "Chooses the language model and its sampling parameters"
    EXECUTE_LOGIC = "Sends the rendered prompt and the source input to the selected model."
    CONFIG_MODEL = ModelModuleConfig

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def available_models(self) -> List[str]:
        return list(self._settings.available_models)

    def get_default_config(self) -> Dict[str, Any]:
        config = ModelModuleConfig(
            model=self._settings.default_model,
            temperature=self._settings.default_temperature,
        )
        return config.model_dump(by_alias=True, mode="json")

    def _validate(self, config: ModelModuleConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if not config.model or not config.model.strip():
            errors.append(ValidationIssue(field="model", message=ERROR_MODEL_REQUIRED))
        elif config.model not in self._settings.available_models:
            errors.append(ValidationIssue(field="model", message=ERROR_MODEL_UNKNOWN.format(model=config.model)))

        if not MIN_TEMPERATURE <= config.temperature <= MAX_TEMPERATURE:
            errors.append(ValidationIssue(
                field="temperature",
                message=ERROR_TEMPERATURE_RANGE.format(minimum=MIN_TEMPERATURE, maximum=MAX_TEMPERATURE),
            ))

        if config.max_tokens is not None and config.max_tokens <= 0:
            errors.append(ValidationIssue(field="maxTokens", message=ERROR_MAX_TOKENS))

    def _outputs(self, config: ModelModuleConfig, module_id: str) -> List[InputElement]:
        if not config.model:
            return []
        return [
            InputElement(
                id=OUTPUT_ID_MODULE.format(module_id=module_id),
                type=OUTPUT_TYPE_LLM_RESPONSE.format(module_id=module_id),
                label=f"{config.model} response",
            )
        ]
