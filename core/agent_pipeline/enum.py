"""
Agent Pipeline Enumerations

Version: 1.0.0
"""

from enum import Enum

from .constants import (
    # Module types
    MODULE_TYPE_TRIGGER,
    MODULE_TYPE_PROMPT,
    MODULE_TYPE_MODEL,
    MODULE_TYPE_JSON_EXTRACTOR,
    MODULE_TYPE_ROUTER,
    MODULE_TYPE_DESTINATIONS,
    MODULE_TYPE_CHANNELS,
    # Conditions
    CONDITION_TYPE_TRIGGER,
    CONDITION_TYPE_FILTER,
    TRIGGER_TYPE_ON_CREATE,
    TRIGGER_TYPE_ON_UPDATE,
    TRIGGER_TYPE_ON_DELETE,
    TRIGGER_TYPE_SCHEDULED,
    TRIGGER_TYPE_ON_DEMAND,
    FILTER_IS_EMPTY,
    FILTER_IS_NOT_EMPTY,
    FILTER_EQUALS,
    FILTER_CONTAINS,
    FILTER_NOT_CONTAINS,
    FILTER_STARTS_WITH,
    FILTER_ENDS_WITH,
    TRIGGER_STRATEGY_ALL_MATCH,
    TRIGGER_STRATEGY_ANY_MATCH,
    # Router
    ROUTER_STRATEGY_ALL_DESTINATIONS,
    ROUTER_STRATEGY_BASED_ON_INPUT,
    ROUTER_STRATEGY_BASED_ON_LLM,
    # Destinations
    TARGET_TYPE_DATABASE,
    TARGET_TYPE_UI_COMPONENT,
    # Formula
    OPERATOR_AND,
    OPERATOR_OR,
    BRACKET_OPEN,
    BRACKET_CLOSE,
    FUNCTION_IF,
    FORMULA_ERROR_BRACKETS,
    FORMULA_ERROR_INDEX,
    FORMULA_ERROR_SYNTAX,
    FORMULA_ERROR_OPERATOR,
)


class ModuleType(str, Enum):
    """Kinds of configuration modules an agent pipeline can hold."""
    TRIGGER = MODULE_TYPE_TRIGGER
    PROMPT = MODULE_TYPE_PROMPT
    MODEL = MODULE_TYPE_MODEL
    JSON_EXTRACTOR = MODULE_TYPE_JSON_EXTRACTOR
    ROUTER = MODULE_TYPE_ROUTER
    DESTINATIONS = MODULE_TYPE_DESTINATIONS
    CHANNELS = MODULE_TYPE_CHANNELS


class ConditionType(str, Enum):
    """Trigger condition kinds."""
    TRIGGER = CONDITION_TYPE_TRIGGER
    FILTER = CONDITION_TYPE_FILTER


class TriggerType(str, Enum):
    """Events that can fire a trigger condition."""
    ON_CREATE = TRIGGER_TYPE_ON_CREATE
    ON_UPDATE = TRIGGER_TYPE_ON_UPDATE
    ON_DELETE = TRIGGER_TYPE_ON_DELETE
    SCHEDULED = TRIGGER_TYPE_SCHEDULED
    ON_DEMAND = TRIGGER_TYPE_ON_DEMAND


class FilterOperator(str, Enum):
    """Comparison operators of a filter condition."""
    IS_EMPTY = FILTER_IS_EMPTY
    IS_NOT_EMPTY = FILTER_IS_NOT_EMPTY
    EQUALS = FILTER_EQUALS
    CONTAINS = FILTER_CONTAINS
    NOT_CONTAINS = FILTER_NOT_CONTAINS
    STARTS_WITH = FILTER_STARTS_WITH
    ENDS_WITH = FILTER_ENDS_WITH


class TriggerStrategy(str, Enum):
    """How input trigger results combine into one decision."""
    ALL_MATCH = TRIGGER_STRATEGY_ALL_MATCH
    ANY_MATCH = TRIGGER_STRATEGY_ANY_MATCH


class RouterStrategy(str, Enum):
    """How a router picks destinations."""
    ALL_DESTINATIONS = ROUTER_STRATEGY_ALL_DESTINATIONS
    BASED_ON_INPUT = ROUTER_STRATEGY_BASED_ON_INPUT
    BASED_ON_LLM = ROUTER_STRATEGY_BASED_ON_LLM


class TargetType(str, Enum):
    """Where a destination writes its value."""
    DATABASE = TARGET_TYPE_DATABASE
    UI_COMPONENT = TARGET_TYPE_UI_COMPONENT


class LogicalOperator(str, Enum):
    """Boolean operators allowed in a condition formula."""
    AND = OPERATOR_AND
    OR = OPERATOR_OR


class BracketKind(str, Enum):
    """Grouping brackets in a condition formula."""
    OPEN = BRACKET_OPEN
    CLOSE = BRACKET_CLOSE


class FormulaFunction(str, Enum):
    """Function keywords recognised in a condition formula."""
    IF = FUNCTION_IF


class FormulaErrorType(str, Enum):
    """Categories of formula validation errors."""
    BRACKETS = FORMULA_ERROR_BRACKETS
    INDEX = FORMULA_ERROR_INDEX
    SYNTAX = FORMULA_ERROR_SYNTAX
    OPERATOR = FORMULA_ERROR_OPERATOR


class ExecutionStatus(str, Enum):
    """Outcome of one module in an execution log."""
    SUCCESS = "success"
    ERROR = "error"
    SKIPPED = "skipped"
