"""
Agent Pipeline Constants

Defines string constants for the agent pipeline module to maintain
consistency and enable easy refactoring.

Version: 1.0.0
"""

# =============================================================================
# MODULE TYPES
# =============================================================================

MODULE_TYPE_TRIGGER = "trigger"
MODULE_TYPE_PROMPT = "prompt"
MODULE_TYPE_MODEL = "model"
MODULE_TYPE_JSON_EXTRACTOR = "json_extractor"
MODULE_TYPE_ROUTER = "router"
MODULE_TYPE_DESTINATIONS = "destinations"
MODULE_TYPE_CHANNELS = "channels"

# =============================================================================
# TRIGGER CONDITIONS
# =============================================================================

CONDITION_TYPE_TRIGGER = "trigger"
CONDITION_TYPE_FILTER = "filter"

TRIGGER_TYPE_ON_CREATE = "on_create"
TRIGGER_TYPE_ON_UPDATE = "on_update"
TRIGGER_TYPE_ON_DELETE = "on_delete"
TRIGGER_TYPE_SCHEDULED = "scheduled"
TRIGGER_TYPE_ON_DEMAND = "on_demand"

FILTER_IS_EMPTY = "is_empty"
FILTER_IS_NOT_EMPTY = "is_not_empty"
FILTER_EQUALS = "equals"
FILTER_CONTAINS = "contains"
FILTER_NOT_CONTAINS = "not_contains"
FILTER_STARTS_WITH = "starts_with"
FILTER_ENDS_WITH = "ends_with"

TRIGGER_STRATEGY_ALL_MATCH = "all_match"
TRIGGER_STRATEGY_ANY_MATCH = "any_match"

# Activation target meaning "stop the pipeline here"
ACTIVATE_STOP = "stop"

# =============================================================================
# ROUTER
# =============================================================================

ROUTER_STRATEGY_ALL_DESTINATIONS = "all_destinations"
ROUTER_STRATEGY_BASED_ON_INPUT = "based_on_input"
ROUTER_STRATEGY_BASED_ON_LLM = "based_on_llm"

# =============================================================================
# DESTINATIONS
# =============================================================================

TARGET_TYPE_DATABASE = "database"
TARGET_TYPE_UI_COMPONENT = "ui_component"

# =============================================================================
# FORMULA TOKENS
# =============================================================================

OPERATOR_AND = "AND"
OPERATOR_OR = "OR"
BRACKET_OPEN = "("
BRACKET_CLOSE = ")"
FUNCTION_IF = "IF"
MATH_SYMBOLS = ("+", "-", "*", "/", "=")

FORMULA_ERROR_BRACKETS = "brackets"
FORMULA_ERROR_INDEX = "index"
FORMULA_ERROR_SYNTAX = "syntax"
FORMULA_ERROR_OPERATOR = "operator"

# =============================================================================
# INPUT / OUTPUT IDENTIFIERS
# =============================================================================

JSON_INPUT_PREFIX = "json_"
JSON_VARIABLE_CANONICAL_PREFIX = "type_json_"
JSON_VARIABLE_LEGACY_PREFIX = "json_var_"
DESTINATION_INPUT_PREFIX = "destination_"

OUTPUT_ID_MODULE = "module_{module_id}_output"
OUTPUT_TYPE_LLM_RESPONSE = "module_{module_id}_llm_response"
OUTPUT_ID_TRIGGER_STATUS = "module_{module_id}_trigger_status"
OUTPUT_ID_ROUTING_RESULT = "module_{module_id}_routing_result"
OUTPUT_ID_DESTINATIONS_RESULT = "module_{module_id}_destinations_result"
OUTPUT_ID_CHANNELS_RESULT = "module_{module_id}_channels_result"
OUTPUT_ID_PROMPT = "module_{module_id}_prompt"
OUTPUT_TYPE_PROMPT = "module_{module_id}_prompt_output"

OUTPUT_MARKER_PROMPT = "prompt_output"
OUTPUT_MARKER_LLM_RESPONSE = "llm_response"
OUTPUT_MARKER_ROUTING_RESULT = "routing_result"
OUTPUT_MARKER_DESTINATIONS_RESULT = "destinations_result"
OUTPUT_MARKER_CHANNELS_RESULT = "channels_result"
OUTPUT_MARKER_TRIGGER_STATUS = "trigger_status"

# =============================================================================
# INPUT GROUP NAMES
# =============================================================================

GROUP_TASK_FIELDS = "Task fields"
GROUP_PARTICIPANTS = "Participants"
GROUP_TASK_HIERARCHY = "Task hierarchy"
GROUP_DATES = "Dates and time"
GROUP_CONTENT = "Content and messages"
GROUP_COMPONENTS = "Component collection"
GROUP_PROMPTS = "Prompts"
GROUP_LLM_MODEL = "LLM model"
GROUP_JSON_EXTRACTOR = "JSON extractor"
GROUP_ROUTING = "Routing rules"
GROUP_DESTINATIONS = "Destinations"
GROUP_CHANNELS = "Channels"
GROUP_TRIGGERS = "Triggers"

# =============================================================================
# PROMPT MARKUP
# =============================================================================

AGENT_INPUT_TAG = "<agent-input"
EMPTY_PARAGRAPH = "<p></p>"

# =============================================================================
# MODEL CONFIGURATION KEYS
# =============================================================================

ARBITRARY_TYPES_ALLOWED = "arbitrary_types_allowed"
POPULATE_BY_NAME = "populate_by_name"
EXTRA = "extra"
EXTRA_ALLOW = "allow"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERROR_DUPLICATE_MODULE_ID = "Duplicate module id in pipeline: {module_id}"
ERROR_MODULE_NOT_REGISTERED = "No module definition registered for type: {module_type}"
ERROR_MODULE_NOT_FOUND = "Module not found in pipeline: {module_id}"
ERROR_INVALID_CONFIG = "Configuration could not be parsed: {error}"

# Formula validation
ERROR_FORMULA_REQUIRED = "A formula is required when more than one condition is defined"
ERROR_FORMULA_EXTRA_CLOSING = "Closing bracket without a matching opening bracket"
ERROR_FORMULA_UNCLOSED = "{count} bracket(s) left unclosed"
ERROR_FORMULA_EMPTY_GROUP = "Empty brackets"
ERROR_FORMULA_NEGATIVE_INDEX = "Condition index cannot be negative: {index}"
ERROR_FORMULA_INDEX_RANGE = "Condition {index} does not exist (valid range: 0-{max_index})"
ERROR_FORMULA_NO_CONDITIONS = "Condition {index} does not exist (no conditions defined)"
ERROR_FORMULA_UNKNOWN_TOKEN = "Unknown token: {token}"
ERROR_FORMULA_DOUBLE_OPERATOR = "Two operators in a row: {previous} {current}"
ERROR_FORMULA_DOUBLE_INDEX = "Missing operator between conditions {previous} and {current}"
ERROR_FORMULA_MISSING_OPERATOR = "Missing operator before: {token}"
ERROR_FORMULA_OPERATOR_AFTER_OPEN = "Operator directly after an opening bracket: {token}"
ERROR_FORMULA_OPERATOR_BEFORE_CLOSE = "Operator directly before a closing bracket: {token}"
ERROR_FORMULA_LEADING_OPERATOR = "Formula cannot start with an operator"
ERROR_FORMULA_TRAILING_OPERATOR = "Formula cannot end with an operator"
ERROR_FORMULA_FUNCTION_OPERAND = "Function {token} has no operand"

# Trigger module
WARN_NO_INPUT_TRIGGERS = "No input triggers configured"
ERROR_TRIGGER_INPUT_REQUIRED = "Input trigger {position}: input must be selected"
ERROR_TRIGGER_CONDITIONS_REQUIRED = "Input trigger {position}: at least one condition is required"
ERROR_TRIGGER_FORMULA = "Input trigger {position}: {message}"
ERROR_TRIGGER_TYPE_REQUIRED = "Input trigger {position}, condition {condition}: trigger type is required"
ERROR_FILTER_OPERATOR_REQUIRED = "Input trigger {position}, condition {condition}: operator is required"
ERROR_TRIGGER_STRATEGY = "Strategy must be all_match or any_match"

# Prompt module
WARN_PROMPT_EMPTY = "Prompt is empty"
WARN_PROMPT_NO_INPUTS = "Prompt does not reference any inputs"

# Model module
ERROR_MODEL_REQUIRED = "A model must be selected"
ERROR_MODEL_UNKNOWN = "Unknown model: {model}"
ERROR_TEMPERATURE_RANGE = "Temperature must be between {minimum} and {maximum}"
ERROR_MAX_TOKENS = "Max tokens must be a positive number"

# JSON extractor module
WARN_NO_VARIABLES = "No variables defined"
ERROR_VARIABLE_NAME_REQUIRED = "Variable {position}: name is required"
ERROR_VARIABLE_PATH_REQUIRED = "Variable {position}: path is required"
ERROR_VARIABLE_PATH_INVALID = "Variable {position}: invalid JSON path '{path}'"
ERROR_VARIABLE_DUPLICATE = "Duplicate variable name: {name}"
WARN_NO_SOURCE_INPUT = "No source input selected"

# Router module
ERROR_ROUTER_STRATEGY_REQUIRED = "A routing strategy must be selected"
ERROR_ROUTER_STRATEGY_INVALID = "Unknown routing strategy: {strategy}"
WARN_ROUTER_NO_RULES = "No routing rules configured"
ERROR_RULE_DESTINATION_REQUIRED = "Rule {position}: destination is required"
ERROR_RULE_SOURCE_REQUIRED = "Rule {position}: source variable is required"
WARN_ROUTER_NO_INSTRUCTIONS = "No routing instructions provided for the LLM"
WARN_ROUTER_RULES_IGNORED = "Rules are ignored when routing to all destinations"

# Destinations module
WARN_NO_DESTINATIONS = "No destinations configured"
ERROR_DESTINATION_LABEL_REQUIRED = "Destination {position}: label is required"
ERROR_DESTINATION_TYPE_REQUIRED = "Destination {position}: type is required"
ERROR_DESTINATION_TABLE_REQUIRED = "Destination {position}: target table is required"
ERROR_DESTINATION_COLUMN_REQUIRED = "Destination {position}: target column is required"
ERROR_DESTINATION_COMPONENT_REQUIRED = "Destination {position}: component name is required"
ERROR_DESTINATION_EVENT_REQUIRED = "Destination {position}: event type is required"

# Channels module
WARN_NO_CHANNELS = "No channels configured"
ERROR_CHANNEL_NAME_REQUIRED = "Channel {position}: name is required"

# Pipeline level
WARN_MODULE_NOT_REGISTERED = "Module {module_id}: no definition registered for type {module_type}"
WARN_ROUTER_WITHOUT_DESTINATIONS = "Router module {module_id} has no destinations module to route to"
WARN_RULE_UNKNOWN_DESTINATION = "Router module {module_id}: rule {rule_id} points at unknown destination {destination_id}"
WARN_FORWARD_REFERENCE = "Module {module_id} references {input_id}, produced by a later module ({source_module_id})"
