"""
Trigger Module

Decides whether the agent runs: each input trigger combines its conditions
with a formula, and the strategy combines the input triggers.

Version: 1.0.0
"""

from typing import Any, Dict, List, Optional

from ..enum import ConditionType, ModuleType, TriggerStrategy
from ..constants import (
    OUTPUT_ID_TRIGGER_STATUS,
    WARN_NO_INPUT_TRIGGERS,
    ERROR_TRIGGER_INPUT_REQUIRED,
    ERROR_TRIGGER_CONDITIONS_REQUIRED,
    ERROR_TRIGGER_FORMULA,
    ERROR_TRIGGER_TYPE_REQUIRED,
    ERROR_FILTER_OPERATOR_REQUIRED,
    ERROR_TRIGGER_STRATEGY,
)
from ..formula.validator import validate_condition_logic
from ..spec.condition_models import TriggerConfig
from ..config import Settings, get_settings
from ..spec.io_models import InputElement
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition


class TriggerModuleDefinition(BaseModuleDefinition):
    """Definition of the trigger module."""

    MODULE_TYPE = ModuleType.TRIGGER
    LABEL = "Trigger"
    DESCRIPTION = "Runs the agent when task events or field values match"
    EXECUTE_LOGIC = (
        "Evaluates every input trigger against the incoming event, combines "
        "the results with the strategy and activates the configured module."
    )
    CONFIG_MODEL = TriggerConfig

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def get_default_config(self) -> Dict[str, Any]:
        config = TriggerConfig(strategy=self._settings.default_trigger_strategy)
        return config.model_dump(by_alias=True, mode="json")

    def _prepare(self, config: Dict[str, Any], errors: List[ValidationIssue]) -> Optional[Dict[str, Any]]:
        strategy = config.get("strategy")
        if strategy is not None and strategy not in {item.value for item in TriggerStrategy}:
            errors.append(ValidationIssue(field="strategy", message=ERROR_TRIGGER_STRATEGY))
            config.pop("strategy")
        return config

    def _validate(self, config: TriggerConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if not config.input_triggers:
            warnings.append(WARN_NO_INPUT_TRIGGERS)
            return

        for trigger_index, input_trigger in enumerate(config.input_triggers):
            position = trigger_index + 1
            field_prefix = f"inputTriggers.{trigger_index}"

            if not input_trigger.input_id.strip():
                errors.append(ValidationIssue(
                    field=f"{field_prefix}.inputId",
                    message=ERROR_TRIGGER_INPUT_REQUIRED.format(position=position),
                ))

            if not input_trigger.conditions:
                errors.append(ValidationIssue(
                    field=f"{field_prefix}.conditions",
                    message=ERROR_TRIGGER_CONDITIONS_REQUIRED.format(position=position),
                ))
                continue

            formula_result = validate_condition_logic(
                input_trigger.condition_logic, len(input_trigger.conditions)
            )
            for formula_error in formula_result.errors:
                errors.append(ValidationIssue(
                    field=f"{field_prefix}.conditionLogic",
                    message=ERROR_TRIGGER_FORMULA.format(position=position, message=formula_error.message),
                ))

            for condition_index, condition in enumerate(input_trigger.conditions):
                field = f"{field_prefix}.conditions.{condition_index}"
                if condition.type == ConditionType.TRIGGER and condition.trigger_type is None:
                    errors.append(ValidationIssue(
                        field=f"{field}.triggerType",
                        message=ERROR_TRIGGER_TYPE_REQUIRED.format(
                            position=position, condition=condition_index + 1
                        ),
                    ))
                elif condition.type == ConditionType.FILTER and condition.operator is None:
                    errors.append(ValidationIssue(
                        field=f"{field}.operator",
                        message=ERROR_FILTER_OPERATOR_REQUIRED.format(
                            position=position, condition=condition_index + 1
                        ),
                    ))

    def _outputs(self, config: TriggerConfig, module_id: str) -> List[InputElement]:
        if not config.enabled:
            return []
        output_id = OUTPUT_ID_TRIGGER_STATUS.format(module_id=module_id)
        return [InputElement(id=output_id, type=output_id, label="Trigger status")]
