"""
Trigger Condition Models

Defines the trigger module configuration: conditions, input triggers and
the strategy that combines them.

An input trigger watches one input and holds a list of conditions plus a
formula (``conditionLogic``) combining them by index, e.g. ``"0 AND (1 OR 2)"``.

Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..enum import ConditionType, FilterOperator, TriggerStrategy, TriggerType
from ..defaults import DEFAULT_TRIGGER_ENABLED, DEFAULT_TRIGGER_STRATEGY
from ..constants import POPULATE_BY_NAME, EXTRA, EXTRA_ALLOW, ACTIVATE_STOP


# =============================================================================
# CONDITION MODELS
# =============================================================================


class TriggerCondition(BaseModel):
    """
    One condition of an input trigger.

    Attributes:
        id: Stable identifier of the condition
        type: ``trigger`` (event based) or ``filter`` (value based)
        trigger_type: Event that satisfies a trigger condition
        operator: Comparison applied by a filter condition
        value: Comparison operand of a filter condition
        scheduled_time: Time of day for scheduled triggers (HH:MM)
        scheduled_timezone: Timezone of scheduled_time
    """
    id: str = Field(..., description="Condition identifier")
    type: ConditionType = Field(default=ConditionType.TRIGGER, description="Condition kind")
    trigger_type: Optional[TriggerType] = Field(default=None, alias="triggerType")
    operator: Optional[FilterOperator] = Field(default=None)
    value: Optional[Any] = Field(default=None)
    scheduled_time: Optional[str] = Field(default=None, alias="scheduledTime")
    scheduled_timezone: Optional[str] = Field(default=None, alias="scheduledTimezone")

    model_config = {POPULATE_BY_NAME: True, EXTRA: EXTRA_ALLOW}


class InputTrigger(BaseModel):
    """
    Conditions attached to one input, combined by a formula.

    Attributes:
        id: Stable identifier of the input trigger
        input_id: Input the conditions are evaluated against
        conditions: Ordered conditions; the formula refers to them by index
        condition_logic: Formula over condition indices
    """
    id: str = Field(..., description="Input trigger identifier")
    input_id: str = Field(default="", alias="inputId", description="Watched input")
    conditions: List[TriggerCondition] = Field(default_factory=list)
    condition_logic: str = Field(default="", alias="conditionLogic")

    model_config = {POPULATE_BY_NAME: True, EXTRA: EXTRA_ALLOW}


class TriggerConfig(BaseModel):
    """
    Configuration of a trigger module.

    Attributes:
        enabled: Whether the trigger reacts to events
        input_triggers: Independently evaluated input triggers
        strategy: all_match (AND) or any_match (OR) over input triggers
        correct_activate_module_id: Module activated when the trigger fires
        not_correct_activate_module_id: Module activated when it does not
    """
    enabled: bool = Field(default=DEFAULT_TRIGGER_ENABLED)
    input_triggers: List[InputTrigger] = Field(default_factory=list, alias="inputTriggers")
    strategy: TriggerStrategy = Field(default=TriggerStrategy(DEFAULT_TRIGGER_STRATEGY))
    correct_activate_module_id: Optional[str] = Field(
        default=None,
        alias="correctActivateModuleId",
        description="Module id to activate when fired, or 'stop'"
    )
    not_correct_activate_module_id: Optional[str] = Field(
        default=None,
        alias="notCorrectActivateModuleId",
        description="Module id to activate when not fired, or 'stop'"
    )

    model_config = {POPULATE_BY_NAME: True, EXTRA: EXTRA_ALLOW}

    def activation_target(self, fired: bool) -> Optional[str]:
        """Module id activated for the given outcome (None when unset)."""
        if fired:
            return self.correct_activate_module_id
        return self.not_correct_activate_module_id

    @staticmethod
    def is_stop(target: Optional[str]) -> bool:
        return target == ACTIVATE_STOP

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted dictionary shape."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# =============================================================================
# EVALUATION MODELS
# =============================================================================


class TriggerEvent(BaseModel):
    """
    An event a trigger module is evaluated against.

    Attributes:
        trigger_type: Kind of event
        input_values: Current input values keyed by input id; None when the
            source entity could not be loaded
        now: Evaluation time
        last_executed_at: Previous scheduled execution of the trigger
    """
    trigger_type: TriggerType
    input_values: Optional[Dict[str, Any]] = Field(default_factory=dict)
    now: datetime = Field(default_factory=datetime.now)
    last_executed_at: Optional[datetime] = None


class InputTriggerResult(BaseModel):
    """Evaluation of one input trigger."""
    input_trigger_id: str
    condition_results: List[bool] = Field(default_factory=list)
    matched: bool = False


class TriggerDecision(BaseModel):
    """
    Combined outcome of a trigger module.

    Attributes:
        fired: Whether the trigger fired
        trigger_results: Per input trigger results
        activate_module_id: Module to activate next, if configured
        stop: True when the configured target is 'stop'
    """
    fired: bool = False
    trigger_results: List[InputTriggerResult] = Field(default_factory=list)
    activate_module_id: Optional[str] = None
    stop: bool = False
