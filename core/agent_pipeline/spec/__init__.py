"""
Agent Pipeline Specification Models

This module contains the data models for pipelines, module configurations,
inputs, validation results and the execution boundary.
"""

from .condition_models import (
    TriggerCondition,
    InputTrigger,
    TriggerConfig,
    TriggerEvent,
    InputTriggerResult,
    TriggerDecision,
)
from .module_models import (
    PromptConfig,
    ModelModuleConfig,
    JsonVariable,
    JsonExtractorConfig,
    ChannelsConfig,
)
from .router_models import (
    DestinationElement,
    DestinationsConfig,
    RouterRule,
    RouterConfig,
    Route,
    RoutingResult,
)
from .io_models import (
    InputElement,
    InputGroup,
)
from .validation_models import (
    ValidationIssue,
    ModuleValidationResult,
    FormulaValidationError,
    FormulaValidationResult,
)
from .execution_models import (
    ExecutionRequest,
    ExecutionResponse,
    ModuleExecutionLog,
    TableInfo,
    ColumnInfo,
    ExecutionValues,
)
from .pipeline_models import (
    AgentModule,
    AgentPipeline,
)

__all__ = [
    # Trigger models
    "TriggerCondition",
    "InputTrigger",
    "TriggerConfig",
    "TriggerEvent",
    "InputTriggerResult",
    "TriggerDecision",
    # Module config models
    "PromptConfig",
    "ModelModuleConfig",
    "JsonVariable",
    "JsonExtractorConfig",
    "ChannelsConfig",
    # Router models
    "DestinationElement",
    "DestinationsConfig",
    "RouterRule",
    "RouterConfig",
    "Route",
    "RoutingResult",
    # IO models
    "InputElement",
    "InputGroup",
    # Validation models
    "ValidationIssue",
    "ModuleValidationResult",
    "FormulaValidationError",
    "FormulaValidationResult",
    # Execution models
    "ExecutionRequest",
    "ExecutionResponse",
    "ModuleExecutionLog",
    "TableInfo",
    "ColumnInfo",
    "ExecutionValues",
    # Pipeline models
    "AgentModule",
    "AgentPipeline",
]
