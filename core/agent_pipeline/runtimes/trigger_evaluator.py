"""
Trigger Evaluator

Evaluates a trigger module against an event:

1. every condition of an input trigger yields a boolean;
2. the input trigger's formula combines them;
3. the strategy combines the input triggers (all_match = AND, any_match = OR).

Version: 1.0.0
"""

import logging
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import ValidationError

from ..enum import ConditionType, FilterOperator, TriggerStrategy, TriggerType
from ..formula.evaluator import evaluate_condition_logic
from ..spec.condition_models import (
    InputTrigger,
    InputTriggerResult,
    TriggerCondition,
    TriggerConfig,
    TriggerDecision,
    TriggerEvent,
)

logger = logging.getLogger(__name__)

_TYPE_PREFIX = "type_"
_MISSING = object()


def reduce_trigger_results(results: Sequence[bool], strategy: TriggerStrategy) -> bool:
    """
    Combine input trigger results.

    Returns:
        all() for all_match, any() otherwise; False when there are no results
    """
    if not results:
        return False
    if strategy == TriggerStrategy.ALL_MATCH:
        return all(results)
    return any(results)


def _is_empty(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return not value


def apply_filter(operator: Optional[FilterOperator], field_value: Any, expected: Any) -> bool:
    """
    Apply a filter operator to an input value.

    Values are compared as strings; a missing expected value counts as "".
    """
    expected_text = "" if expected is None else str(expected)

    if operator == FilterOperator.IS_EMPTY:
        return _is_empty(field_value)
    if operator == FilterOperator.IS_NOT_EMPTY:
        return not _is_empty(field_value)
    if operator == FilterOperator.EQUALS:
        return ("" if field_value is None else str(field_value)) == expected_text
    if operator == FilterOperator.NOT_CONTAINS:
        return not field_value or expected_text not in str(field_value)

    if not field_value:
        return False
    if operator == FilterOperator.CONTAINS:
        return expected_text in str(field_value)
    if operator == FilterOperator.STARTS_WITH:
        return str(field_value).startswith(expected_text)
    if operator == FilterOperator.ENDS_WITH:
        return str(field_value).endswith(expected_text)

    logger.warning("Unknown filter operator: %s", operator)
    return False


class TriggerEvaluator:
    """Evaluates trigger configurations against events."""

    def evaluate(self, config: Union[TriggerConfig, Dict[str, Any]], event: TriggerEvent) -> TriggerDecision:
        """
        Decide whether a trigger fires for an event.

        Args:
            config: Trigger config (model or stored dict)
            event: Event to evaluate

        Returns:
            TriggerDecision with per input trigger results and the module to
            activate next; an unreadable stored config never fires
        """
        if isinstance(config, dict):
            try:
                config = TriggerConfig.model_validate(config)
            except ValidationError as exc:
                logger.warning(
                    "Trigger config is unreadable; not firing: %s",
                    "; ".join(error["msg"] for error in exc.errors()),
                )
                return TriggerDecision()

        if not config.enabled and event.trigger_type != TriggerType.ON_DEMAND:
            logger.debug("Trigger disabled; ignoring %s event", event.trigger_type.value)
            return self._decision(config, False, [])

        results = [self.evaluate_input_trigger(input_trigger, event) for input_trigger in config.input_triggers]
        fired = reduce_trigger_results([result.matched for result in results], config.strategy)
        return self._decision(config, fired, results)

    @staticmethod
    def _decision(config: TriggerConfig, fired: bool, results) -> TriggerDecision:
        target = config.activation_target(fired)
        stop = TriggerConfig.is_stop(target)
        return TriggerDecision(
            fired=fired,
            trigger_results=results,
            activate_module_id=None if stop else target,
            stop=stop,
        )

    def evaluate_input_trigger(self, input_trigger: InputTrigger, event: TriggerEvent) -> InputTriggerResult:
        """Evaluate one input trigger; no conditions means no match."""
        if not input_trigger.conditions:
            logger.warning("Input trigger %s has no conditions; treating as not matched", input_trigger.id)
            return InputTriggerResult(input_trigger_id=input_trigger.id)

        condition_results = [
            self.evaluate_condition(condition, input_trigger.input_id, event)
            for condition in input_trigger.conditions
        ]
        matched = evaluate_condition_logic(input_trigger.condition_logic, condition_results)
        return InputTriggerResult(
            input_trigger_id=input_trigger.id,
            condition_results=condition_results,
            matched=matched,
        )

    def evaluate_condition(self, condition: TriggerCondition, input_id: str, event: TriggerEvent) -> bool:
        """Evaluate one condition of an input trigger."""
        if condition.type == ConditionType.TRIGGER:
            if condition.trigger_type != event.trigger_type:
                return False
            if condition.trigger_type == TriggerType.SCHEDULED and event.last_executed_at is not None:
                return event.last_executed_at.date() != event.now.date()
            return True

        field_value = self._input_value(input_id, event)
        if field_value is _MISSING:
            return False
        return apply_filter(condition.operator, field_value, condition.value)

    @staticmethod
    def _input_value(input_id: str, event: TriggerEvent) -> Any:
        if event.input_values is None:
            return _MISSING
        if input_id in event.input_values:
            return event.input_values[input_id]
        if input_id.startswith(_TYPE_PREFIX):
            return event.input_values.get(input_id[len(_TYPE_PREFIX):], _MISSING)
        return _MISSING
