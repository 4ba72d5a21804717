"""
Router Resolver

Decides which destinations receive a value, according to a router's
strategy:

- ``all_destinations``: every destination receives the produced value.
- ``based_on_input``: a rule routes when its source input(s) carry data.
- ``based_on_llm``: nothing is routed here; the instructions and rules are
  handed to the execution service.

Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type, Union

from pydantic import BaseModel, ValidationError

from ..enum import ModuleType, RouterStrategy
from ..constants import (
    JSON_INPUT_PREFIX,
    JSON_VARIABLE_CANONICAL_PREFIX,
    JSON_VARIABLE_LEGACY_PREFIX,
    DESTINATION_INPUT_PREFIX,
)
from ..spec.execution_models import ExecutionValues
from ..spec.module_models import JsonExtractorConfig, JsonVariable
from ..spec.pipeline_models import AgentPipeline
from ..spec.router_models import (
    DestinationElement,
    DestinationsConfig,
    Route,
    RouterConfig,
    RouterRule,
    RoutingResult,
)

logger = logging.getLogger(__name__)


def canonical_variable_id(source_id: str) -> str:
    """Rewrite the legacy ``json_var_<name>`` form to ``type_json_<name>``."""
    if source_id.startswith(JSON_VARIABLE_LEGACY_PREFIX):
        return f"{JSON_VARIABLE_CANONICAL_PREFIX}{source_id[len(JSON_VARIABLE_LEGACY_PREFIX):]}"
    return source_id


def _read_config(model: Type[BaseModel], config: Optional[Dict[str, Any]], owner: str) -> Optional[BaseModel]:
    """Parse a stored module config; an unreadable config is logged and yields None."""
    try:
        return model.model_validate(config or {})
    except ValidationError as exc:
        logger.warning(
            "%s has an unreadable %s; ignoring it: %s",
            owner,
            model.__name__,
            "; ".join(error["msg"] for error in exc.errors()),
        )
        return None


def resolve_source_value(
    source_id: str,
    values: ExecutionValues,
    variables: Sequence[JsonVariable] = (),
) -> Optional[Any]:
    """
    Look up the value behind a rule source id.

    Lookup order: module output with that id; ``type_json_<name>`` or
    ``json_var_<name>`` as extracted variable ``<name>``; ``json_<x>`` as the
    variable whose id (else name) is ``<x>``; ``destination_<id>`` as the
    value already delivered to that destination; the id as a variable name.

    Returns:
        The value, or None when the source carries no data
    """
    if values.module_outputs.get(source_id) is not None:
        return values.module_outputs[source_id]

    source_id = canonical_variable_id(source_id)
    if source_id.startswith(JSON_VARIABLE_CANONICAL_PREFIX):
        return values.extracted_variables.get(source_id[len(JSON_VARIABLE_CANONICAL_PREFIX):])

    if source_id.startswith(JSON_INPUT_PREFIX):
        key = source_id[len(JSON_INPUT_PREFIX):]
        name = next((variable.name for variable in variables if variable.id == key), key)
        return values.extracted_variables.get(name)

    if source_id.startswith(DESTINATION_INPUT_PREFIX):
        return values.destination_values.get(source_id[len(DESTINATION_INPUT_PREFIX):])

    return values.extracted_variables.get(source_id)


class RouterResolver:
    """Resolves router configurations into routes."""

    def resolve(
        self,
        config: Union[RouterConfig, Dict[str, Any]],
        destinations: Sequence[DestinationElement],
        produced_value: Optional[Any] = None,
        values: Optional[ExecutionValues] = None,
        variables: Sequence[JsonVariable] = (),
    ) -> RoutingResult:
        """
        Resolve one router.

        Args:
            config: Router config (model or stored dict)
            destinations: Configured destinations
            produced_value: Value routed by all_destinations
            values: Data available to based_on_input rules
            variables: JSON variables of the pipeline, for ``json_<id>`` sources

        Returns:
            RoutingResult; an unreadable stored config routes nothing
        """
        if isinstance(config, dict):
            config = _read_config(RouterConfig, config, "Router")
            if config is None:
                return RoutingResult()
        values = values or ExecutionValues()

        if config.strategy == RouterStrategy.ALL_DESTINATIONS:
            return RoutingResult(
                strategy=config.strategy,
                routes=[Route(destination=destination, value=produced_value) for destination in destinations],
            )

        if config.strategy == RouterStrategy.BASED_ON_LLM:
            return RoutingResult(
                strategy=config.strategy,
                deferred=True,
                instructions=config.content,
                rules=list(config.rules),
            )

        return self._resolve_by_input(config, destinations, values, variables)

    def _resolve_by_input(
        self,
        config: RouterConfig,
        destinations: Sequence[DestinationElement],
        values: ExecutionValues,
        variables: Sequence[JsonVariable],
    ) -> RoutingResult:
        by_id = {destination.id: destination for destination in destinations}
        routes: List[Route] = []
        unmatched: List[str] = []

        for rule in config.rules:
            destination = by_id.get(rule.destination_id or "")
            if destination is None:
                logger.debug("Rule %s points at unknown destination %s", rule.id, rule.destination_id)
                unmatched.append(rule.id)
                continue

            value = self._rule_value(rule, values, variables)
            if value is None:
                logger.debug("Rule %s has no source data; not routing", rule.id)
                continue

            routes.append(Route(
                destination=destination,
                value=value,
                rule_id=rule.id,
                source_ids=rule.source_ids,
            ))

        return RoutingResult(strategy=config.strategy, routes=routes, unmatched_rule_ids=unmatched)

    @staticmethod
    def _rule_value(
        rule: RouterRule,
        values: ExecutionValues,
        variables: Sequence[JsonVariable],
    ) -> Optional[Any]:
        """Single source -> its value; several -> the list of found values (scalar if one)."""
        found = [
            value
            for value in (resolve_source_value(source_id, values, variables) for source_id in rule.source_ids)
            if value is not None
        ]
        if not found:
            return None
        if len(found) == 1:
            return found[0]
        return found

    def resolve_pipeline(
        self,
        pipeline: AgentPipeline,
        produced_value: Optional[Any] = None,
        values: Optional[ExecutionValues] = None,
    ) -> RoutingResult:
        """
        Resolve the first router of a pipeline against its destinations.

        A pipeline without a router routes to all destinations. Modules with
        unreadable configs contribute nothing; an unreadable router routes
        nothing.
        """
        destinations: List[DestinationElement] = []
        for module in pipeline.modules_of_type(ModuleType.DESTINATIONS):
            parsed = _read_config(DestinationsConfig, module.config, f"Module {module.id}")
            if parsed is not None:
                destinations.extend(parsed.destinations)

        variables: List[JsonVariable] = []
        for module in pipeline.modules_of_type(ModuleType.JSON_EXTRACTOR):
            parsed = _read_config(JsonExtractorConfig, module.config, f"Module {module.id}")
            if parsed is not None:
                variables.extend(parsed.variables)

        router = pipeline.first_of_type(ModuleType.ROUTER)
        if router is None:
            return self.resolve(RouterConfig(), destinations, produced_value, values, variables)
        config = _read_config(RouterConfig, router.config, f"Module {router.id}")
        if config is None:
            return RoutingResult()
        return self.resolve(config, destinations, produced_value, values, variables)
