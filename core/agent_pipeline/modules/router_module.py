"""
Router Module

Chooses which destinations receive the pipeline result.

Version: 1.0.0
"""

from typing import Any, Dict, List, Optional

from ..enum import ModuleType, RouterStrategy
from ..constants import (
    EMPTY_PARAGRAPH,
    OUTPUT_ID_ROUTING_RESULT,
    ERROR_ROUTER_STRATEGY_REQUIRED,
    ERROR_ROUTER_STRATEGY_INVALID,
    WARN_ROUTER_NO_RULES,
    ERROR_RULE_DESTINATION_REQUIRED,
    ERROR_RULE_SOURCE_REQUIRED,
    WARN_ROUTER_NO_INSTRUCTIONS,
    WARN_ROUTER_RULES_IGNORED,
)
from ..config import Settings, get_settings
from ..spec.io_models import InputElement
from ..spec.router_models import RouterConfig
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition


class RouterModuleDefinition(BaseModuleDefinition):
    """Definition of the router module."""

    MODULE_TYPE = ModuleType.ROUTER
    LABEL = "Router"
    DESCRIPTION = "Routes the result to all destinations, by input values or by LLM decision"
    EXECUTE_LOGIC = (
        "all_destinations sends the result everywhere; based_on_input follows "
        "the rules whose source inputs carry data; based_on_llm lets the model "
        "pick destinations from the routing instructions."
    )
    CONFIG_MODEL = RouterConfig

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def get_default_config(self) -> Dict[str, Any]:
        config = RouterConfig(strategy=self._settings.default_router_strategy)
        return config.model_dump(by_alias=True, mode="json")

    def _prepare(self, config: Dict[str, Any], errors: List[ValidationIssue]) -> Optional[Dict[str, Any]]:
        strategy = config.get("strategy")
        if not strategy:
            errors.append(ValidationIssue(field="strategy", message=ERROR_ROUTER_STRATEGY_REQUIRED))
            return None
        if strategy not in {item.value for item in RouterStrategy}:
            errors.append(ValidationIssue(
                field="strategy",
                message=ERROR_ROUTER_STRATEGY_INVALID.format(strategy=strategy),
            ))
            return None
        return config

    def _validate(self, config: RouterConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if config.strategy == RouterStrategy.ALL_DESTINATIONS:
            if config.rules:
                warnings.append(WARN_ROUTER_RULES_IGNORED)
            return

        if not config.rules:
            warnings.append(WARN_ROUTER_NO_RULES)

        for index, rule in enumerate(config.rules):
            if rule.is_legacy:
                continue
            position = index + 1
            if not rule.destination_id:
                errors.append(ValidationIssue(
                    field=f"rules.{index}.destinationId",
                    message=ERROR_RULE_DESTINATION_REQUIRED.format(position=position),
                ))
            if config.strategy == RouterStrategy.BASED_ON_INPUT and not rule.source_ids:
                errors.append(ValidationIssue(
                    field=f"rules.{index}.sourceVariableId",
                    message=ERROR_RULE_SOURCE_REQUIRED.format(position=position),
                ))

        if config.strategy == RouterStrategy.BASED_ON_LLM:
            content = config.content.strip()
            if not content or content == EMPTY_PARAGRAPH:
                warnings.append(WARN_ROUTER_NO_INSTRUCTIONS)

    def get_dynamic_outputs(self, config: Dict[str, Any], module_id: str) -> List[InputElement]:
        output_id = OUTPUT_ID_ROUTING_RESULT.format(module_id=module_id)
        return [InputElement(id=output_id, type=output_id, label="Routing result")]
