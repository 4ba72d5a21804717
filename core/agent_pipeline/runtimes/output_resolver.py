"""
Dynamic Output Resolver

Computes the inputs a pipeline exposes: each module contributes the outputs
its definition derives from its config, in pipeline order.

By default every output of the pipeline is visible to every module. With
``enforce_module_order`` a module only sees outputs of the modules before
it, and references to later modules are reported as forward references.

Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..enum import ModuleType
from ..constants import (
    JSON_INPUT_PREFIX,
    JSON_VARIABLE_CANONICAL_PREFIX,
    JSON_VARIABLE_LEGACY_PREFIX,
    DESTINATION_INPUT_PREFIX,
    OUTPUT_MARKER_PROMPT,
    OUTPUT_MARKER_LLM_RESPONSE,
    OUTPUT_MARKER_ROUTING_RESULT,
    OUTPUT_MARKER_DESTINATIONS_RESULT,
    OUTPUT_MARKER_CHANNELS_RESULT,
    OUTPUT_MARKER_TRIGGER_STATUS,
    GROUP_PROMPTS,
    GROUP_LLM_MODEL,
    GROUP_JSON_EXTRACTOR,
    GROUP_ROUTING,
    GROUP_DESTINATIONS,
    GROUP_CHANNELS,
    GROUP_TRIGGERS,
)
from ..catalog import static_input_groups
from ..config import Settings, get_settings
from ..modules.prompt_module import extract_prompt_inputs
from ..spec.io_models import InputElement, InputGroup
from ..spec.pipeline_models import AgentModule, AgentPipeline
from .module_registry import ModuleRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForwardReference:
    """A module referring to an input produced by a later module."""
    module_id: str
    input_id: str
    source_module_id: str


def _in_order(modules: Iterable[AgentModule]) -> List[AgentModule]:
    return sorted(modules, key=lambda module: module.order)


class DynamicOutputResolver:
    """
    Resolves the dynamic inputs of a pipeline.

    Attributes:
        registry: Registry providing the module definitions
        settings: Settings controlling module-order visibility
    """

    def __init__(self, registry: ModuleRegistry, settings: Optional[Settings] = None):
        self._registry = registry
        self._settings = settings or get_settings()

    @property
    def registry(self) -> ModuleRegistry:
        return self._registry

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def module_outputs(self, module: AgentModule) -> List[InputElement]:
        """Outputs of one module; unregistered types contribute nothing."""
        definition = self._registry.get(module.type)
        if definition is None:
            logger.warning("No module definition registered for type '%s'; skipping module %s",
                           module.type.value, module.id)
            return []
        return definition.get_dynamic_outputs(module.config, module.id)

    def resolve(self, modules: Sequence[AgentModule]) -> List[InputElement]:
        """
        All dynamic inputs of the given modules.

        Args:
            modules: Pipeline modules; walked in ``order``, ties in list order

        Returns:
            Concatenated module outputs
        """
        inputs: List[InputElement] = []
        for module in _in_order(modules):
            inputs.extend(self.module_outputs(module))
        return inputs

    def resolve_pipeline(self, pipeline: AgentPipeline) -> List[InputElement]:
        return self.resolve(pipeline.modules)

    def resolve_for(
        self,
        module_id: str,
        modules: Sequence[AgentModule],
        restrict_to_preceding: Optional[bool] = None,
    ) -> List[InputElement]:
        """
        Dynamic inputs visible to one module.

        Args:
            module_id: Module asking for inputs
            modules: Pipeline modules
            restrict_to_preceding: Only modules placed before module_id
                contribute; defaults to settings.enforce_module_order

        Returns:
            Visible inputs in pipeline order
        """
        if restrict_to_preceding is None:
            restrict_to_preceding = self._settings.enforce_module_order
        if not restrict_to_preceding:
            return self.resolve(modules)

        inputs: List[InputElement] = []
        for module in _in_order(modules):
            if module.id == module_id:
                break
            inputs.extend(self.module_outputs(module))
        return inputs

    # =========================================================================
    # FORWARD REFERENCES
    # =========================================================================

    def output_sources(self, modules: Sequence[AgentModule]) -> Dict[str, str]:
        """Map every id an output can be referenced by to its module id."""
        sources: Dict[str, str] = {}
        for module in _in_order(modules):
            for output in self.module_outputs(module):
                keys = [output.id, output.type]
                if output.type.startswith(JSON_INPUT_PREFIX):
                    name = output.type[len(JSON_INPUT_PREFIX):]
                    keys += [
                        f"{JSON_VARIABLE_CANONICAL_PREFIX}{name}",
                        f"{JSON_VARIABLE_LEGACY_PREFIX}{name}",
                    ]
                for key in keys:
                    sources.setdefault(key, module.id)
        return sources

    def find_forward_references(self, modules: Sequence[AgentModule]) -> List[ForwardReference]:
        """
        References to outputs of modules placed later in the pipeline.

        References are read from prompt ``<agent-input>`` tags, router rule
        sources, ``sourceInputId`` fields and input trigger inputs.
        """
        ordered = _in_order(modules)
        positions = {module.id: position for position, module in enumerate(ordered)}
        sources = self.output_sources(ordered)

        found: List[ForwardReference] = []
        for module in ordered:
            for input_id in referenced_input_ids(module):
                source_module_id = sources.get(input_id)
                if source_module_id is None or source_module_id == module.id:
                    continue
                if positions[source_module_id] > positions[module.id]:
                    found.append(ForwardReference(module.id, input_id, source_module_id))
        return found


def referenced_input_ids(module: AgentModule) -> List[str]:
    """Input ids a module's config refers to, read leniently from the raw config."""
    config: Dict[str, Any] = module.config or {}
    ids: List[str] = []

    if module.type == ModuleType.PROMPT:
        for element in extract_prompt_inputs(str(config.get("content") or "")):
            ids.append(element.id)
            if element.type:
                ids.append(element.type)
    elif module.type == ModuleType.ROUTER:
        for rule in config.get("rules") or []:
            if not isinstance(rule, dict):
                continue
            source = rule.get("sourceVariableId")
            if isinstance(source, str):
                ids.append(source)
            elif isinstance(source, list):
                ids.extend(item for item in source if isinstance(item, str))
    elif module.type == ModuleType.TRIGGER:
        for input_trigger in config.get("inputTriggers") or []:
            if isinstance(input_trigger, dict) and input_trigger.get("inputId"):
                ids.append(input_trigger["inputId"])

    source_input_id = config.get("sourceInputId")
    if isinstance(source_input_id, str) and source_input_id:
        ids.append(source_input_id)

    return [input_id for input_id in dict.fromkeys(ids) if input_id]


# =============================================================================
# GROUPING
# =============================================================================


def _group_name(element: InputElement) -> Optional[str]:
    if element.id.startswith(JSON_INPUT_PREFIX):
        return GROUP_JSON_EXTRACTOR
    if element.type.startswith(DESTINATION_INPUT_PREFIX):
        return GROUP_DESTINATIONS
    markers = [
        (OUTPUT_MARKER_PROMPT, GROUP_PROMPTS),
        (OUTPUT_MARKER_LLM_RESPONSE, GROUP_LLM_MODEL),
        (OUTPUT_MARKER_ROUTING_RESULT, GROUP_ROUTING),
        (OUTPUT_MARKER_DESTINATIONS_RESULT, GROUP_DESTINATIONS),
        (OUTPUT_MARKER_CHANNELS_RESULT, GROUP_CHANNELS),
        (OUTPUT_MARKER_TRIGGER_STATUS, GROUP_TRIGGERS),
    ]
    for marker, group in markers:
        if marker in element.type:
            return group
    return None


def group_inputs(inputs: Sequence[InputElement], include_static: bool = True) -> List[InputGroup]:
    """
    Arrange inputs into the groups of the input picker.

    Args:
        inputs: Dynamic inputs of a pipeline
        include_static: Prepend the static task input groups

    Returns:
        Static groups followed by one group per dynamic output kind
        (possibly empty). Inputs of no known kind are left out.
    """
    groups = static_input_groups() if include_static else []
    dynamic = {
        name: InputGroup(name=name)
        for name in (
            GROUP_PROMPTS,
            GROUP_LLM_MODEL,
            GROUP_JSON_EXTRACTOR,
            GROUP_ROUTING,
            GROUP_DESTINATIONS,
            GROUP_CHANNELS,
            GROUP_TRIGGERS,
        )
    }
    for element in inputs:
        name = _group_name(element)
        if name is None:
            logger.debug("Input %s does not belong to any group", element.id)
            continue
        dynamic[name].inputs.append(element)
    return groups + list(dynamic.values())
