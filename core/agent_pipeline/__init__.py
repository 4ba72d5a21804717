"""
Agent Pipeline Module

Configuration model for task agents: an ordered pipeline of modules
(trigger, prompt, model, json_extractor, router, destinations, channels)
that an external execution service runs.

Version: 1.0.0

Components:
- Formula engine: parse, edit, validate and evaluate trigger condition formulas
- Module definitions: defaults, validation and exposed outputs per module type
- Resolvers: dynamic outputs, routing decisions and trigger decisions

Usage:
    from core.agent_pipeline import (
        PipelineContext, AgentPipeline, ModuleType,
    )

    with PipelineContext.create() as context:
        pipeline = AgentPipeline(agent_id="agent-1")
        pipeline = pipeline.add_module(ModuleType.PROMPT, context.registry)
        inputs = context.output_resolver.resolve_pipeline(pipeline)
        report = context.validator.validate(pipeline)
"""

# =============================================================================
# ENUMS
# =============================================================================

from .enum import (
    ModuleType,
    ConditionType,
    TriggerType,
    FilterOperator,
    TriggerStrategy,
    RouterStrategy,
    TargetType,
    LogicalOperator,
    BracketKind,
    FormulaFunction,
    FormulaErrorType,
    ExecutionStatus,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================

from .exceptions import (
    AgentPipelineError,
    ModuleNotRegisteredError,
    ModuleNotFoundInPipelineError,
    DuplicateModuleIdError,
    PipelineValidationError,
    FormulaSyntaxError,
)

# =============================================================================
# CONFIGURATION
# =============================================================================

from .config import Settings, get_settings

# =============================================================================
# PIPELINE MODELS
# =============================================================================

from .spec import (
    TriggerCondition,
    InputTrigger,
    TriggerConfig,
    TriggerEvent,
    InputTriggerResult,
    TriggerDecision,
    PromptConfig,
    ModelModuleConfig,
    JsonVariable,
    JsonExtractorConfig,
    ChannelsConfig,
    DestinationElement,
    DestinationsConfig,
    RouterRule,
    RouterConfig,
    Route,
    RoutingResult,
    InputElement,
    InputGroup,
    ValidationIssue,
    ModuleValidationResult,
    FormulaValidationError,
    FormulaValidationResult,
    ExecutionRequest,
    ExecutionResponse,
    ModuleExecutionLog,
    ExecutionValues,
    TableInfo,
    ColumnInfo,
    AgentModule,
    AgentPipeline,
)

# =============================================================================
# FORMULA ENGINE
# =============================================================================

from .formula import (
    ConditionRef,
    OperatorElement,
    BracketElement,
    FunctionElement,
    MathElement,
    ValueElement,
    FormulaState,
    tokenize,
    serialize,
    parse_formula,
    new_condition,
    add_condition,
    insert_element,
    remove_element,
    remove_condition,
    move_element,
    reorder_conditions,
    toggle_operator,
    update_condition,
    validate_condition_logic,
    evaluate_condition_logic,
)

# =============================================================================
# MODULE DEFINITIONS
# =============================================================================

from .interfaces import IModuleDefinition
from .modules import (
    BaseModuleDefinition,
    TriggerModuleDefinition,
    PromptModuleDefinition,
    ModelModuleDefinition,
    JsonExtractorModuleDefinition,
    RouterModuleDefinition,
    DestinationsModuleDefinition,
    ChannelsModuleDefinition,
    register_builtin_modules,
    extract_prompt_inputs,
)

# =============================================================================
# RUNTIMES
# =============================================================================

from .runtimes import (
    ModuleRegistry,
    create_default_registry,
    DynamicOutputResolver,
    ForwardReference,
    group_inputs,
    RouterResolver,
    canonical_variable_id,
    resolve_source_value,
    TriggerEvaluator,
    reduce_trigger_results,
    PipelineValidator,
    PipelineValidationReport,
    build_execution_request,
    parse_execution_response,
    PipelineContext,
)

__all__ = [
    # Enums
    "ModuleType",
    "ConditionType",
    "TriggerType",
    "FilterOperator",
    "TriggerStrategy",
    "RouterStrategy",
    "TargetType",
    "LogicalOperator",
    "BracketKind",
    "FormulaFunction",
    "FormulaErrorType",
    "ExecutionStatus",
    # Exceptions
    "AgentPipelineError",
    "ModuleNotRegisteredError",
    "ModuleNotFoundInPipelineError",
    "DuplicateModuleIdError",
    "PipelineValidationError",
    "FormulaSyntaxError",
    # Configuration
    "Settings",
    "get_settings",
    # Pipeline models
    "TriggerCondition",
    "InputTrigger",
    "TriggerConfig",
    "TriggerEvent",
    "InputTriggerResult",
    "TriggerDecision",
    "PromptConfig",
    "ModelModuleConfig",
    "JsonVariable",
    "JsonExtractorConfig",
    "ChannelsConfig",
    "DestinationElement",
    "DestinationsConfig",
    "RouterRule",
    "RouterConfig",
    "Route",
    "RoutingResult",
    "InputElement",
    "InputGroup",
    "ValidationIssue",
    "ModuleValidationResult",
    "FormulaValidationError",
    "FormulaValidationResult",
    "ExecutionRequest",
    "ExecutionResponse",
    "ModuleExecutionLog",
    "ExecutionValues",
    "TableInfo",
    "ColumnInfo",
    "AgentModule",
    "AgentPipeline",
    # Formula engine
    "ConditionRef",
    "OperatorElement",
    "BracketElement",
    "FunctionElement",
    "MathElement",
    "ValueElement",
    "FormulaState",
    "tokenize",
    "serialize",
    "parse_formula",
    "new_condition",
    "add_condition",
    "insert_element",
    "remove_element",
    "remove_condition",
    "move_element",
    "reorder_conditions",
    "toggle_operator",
    "update_condition",
    "validate_condition_logic",
    "evaluate_condition_logic",
    # Module definitions
    "IModuleDefinition",
    "BaseModuleDefinition",
    "TriggerModuleDefinition",
    "PromptModuleDefinition",
    "ModelModuleDefinition",
    "JsonExtractorModuleDefinition",
    "RouterModuleDefinition",
    "DestinationsModuleDefinition",
    "ChannelsModuleDefinition",
    "register_builtin_modules",
    "extract_prompt_inputs",
    # Runtimes
    "ModuleRegistry",
    "create_default_registry",
    "DynamicOutputResolver",
    "ForwardReference",
    "group_inputs",
    "RouterResolver",
    "canonical_variable_id",
    "resolve_source_value",
    "TriggerEvaluator",
    "reduce_trigger_results",
    "PipelineValidator",
    "PipelineValidationReport",
    "build_execution_request",
    "parse_execution_response",
    "PipelineContext",
]
