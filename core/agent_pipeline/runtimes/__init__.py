"""
Agent Pipeline Runtimes

Registry, resolvers and evaluators operating on pipeline configurations.
"""

from .module_registry import ModuleRegistry, create_default_registry
from .output_resolver import (
    DynamicOutputResolver,
    ForwardReference,
    group_inputs,
    referenced_input_ids,
)
from .router_resolver import (
    RouterResolver,
    canonical_variable_id,
    resolve_source_value,
)
from .trigger_evaluator import (
    TriggerEvaluator,
    apply_filter,
    reduce_trigger_results,
)
from .pipeline_validator import PipelineValidator, PipelineValidationReport
from .execution import build_execution_request, parse_execution_response
from .context import PipelineContext

__all__ = [
    # Registry
    "ModuleRegistry",
    "create_default_registry",
    # Outputs
    "DynamicOutputResolver",
    "ForwardReference",
    "group_inputs",
    "referenced_input_ids",
    # Routing
    "RouterResolver",
    "canonical_variable_id",
    "resolve_source_value",
    # Triggers
    "TriggerEvaluator",
    "apply_filter",
    "reduce_trigger_results",
    # Validation
    "PipelineValidator",
    "PipelineValidationReport",
    # Execution boundary
    "build_execution_request",
    "parse_execution_response",
    # Context
    "PipelineContext",
]
