"""
Execution Boundary

Builds the request the external execution service consumes and reads its
response. No network I/O happens here.

Version: 1.0.0
"""

from typing import Any, Dict, Optional

from ..enum import ModuleType
from ..config import Settings, get_settings
from ..spec.execution_models import ExecutionRequest, ExecutionResponse
from ..spec.pipeline_models import AgentPipeline


def build_execution_request(
    pipeline: AgentPipeline,
    user_input: Optional[Any] = None,
    context: Optional[Dict[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> ExecutionRequest:
    """
    Build the execution request for a pipeline.

    Args:
        pipeline: Pipeline to execute
        user_input: Input for the run, text or structured data
        context: Task data made available to the pipeline
        settings: Settings supplying the fallback model

    Returns:
        ExecutionRequest using the first model module's model (settings
        default otherwise) and the first prompt module's content
    """
    settings = settings or get_settings()

    model = settings.default_model
    model_module = pipeline.first_of_type(ModuleType.MODEL)
    if model_module and model_module.config.get("model"):
        model = model_module.config["model"]

    prompt = ""
    prompt_module = pipeline.first_of_type(ModuleType.PROMPT)
    if prompt_module:
        prompt = str(prompt_module.config.get("content") or "")

    return ExecutionRequest(
        agent_id=pipeline.agent_id,
        model=model,
        prompt=prompt,
        input=user_input,
        context=dict(context or {}),
    )


def parse_execution_response(data: Dict[str, Any]) -> ExecutionResponse:
    """Validate a response payload from the execution service."""
    return ExecutionResponse.model_validate(data)
