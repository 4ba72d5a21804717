"""
Pipeline Validator

Runs every module's validation and adds pipeline-level findings. The report
is advisory: saving a pipeline is never blocked by it.

Version: 1.0.0
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..enum import ModuleType
from ..constants import (
    WARN_MODULE_NOT_REGISTERED,
    WARN_ROUTER_WITHOUT_DESTINATIONS,
    WARN_RULE_UNKNOWN_DESTINATION,
    WARN_FORWARD_REFERENCE,
)
from ..config import Settings, get_settings
from ..exceptions import PipelineValidationError
from ..spec.pipeline_models import AgentPipeline
from ..spec.router_models import DestinationsConfig, RouterConfig
from ..spec.validation_models import ModuleValidationResult
from .module_registry import ModuleRegistry
from .output_resolver import DynamicOutputResolver

logger = logging.getLogger(__name__)


class PipelineValidationReport(BaseModel):
    """
    Validation findings for a whole pipeline.

    Attributes:
        module_results: Result per module id
        errors: Flattened module errors, prefixed with the module id
        warnings: Module and pipeline-level warnings
    """
    module_results: Dict[str, ModuleValidationResult] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise PipelineValidationError when the report holds errors."""
        if self.errors:
            raise PipelineValidationError("Pipeline configuration is invalid", validation_errors=self.errors)


class PipelineValidator:
    """Validates pipelines against the registered module definitions."""

    def __init__(self, registry: ModuleRegistry, settings: Optional[Settings] = None):
        self._registry = registry
        self._settings = settings or get_settings()
        self._resolver = DynamicOutputResolver(registry, self._settings)

    def validate(self, pipeline: AgentPipeline) -> PipelineValidationReport:
        """
        Validate every module and the relations between modules.

        Args:
            pipeline: Pipeline to validate

        Returns:
            PipelineValidationReport
        """
        report = PipelineValidationReport()

        for module in pipeline.ordered_modules:
            definition = self._registry.get(module.type)
            if definition is None:
                report.warnings.append(WARN_MODULE_NOT_REGISTERED.format(
                    module_id=module.id, module_type=module.type.value
                ))
                continue

            result = definition.validate_config(module.config)
            report.module_results[module.id] = result
            report.errors.extend(f"{module.id}: {issue.field}: {issue.message}" for issue in result.errors)
            report.warnings.extend(f"{module.id}: {warning}" for warning in result.warnings)

        self._check_routers(pipeline, report)

        if self._settings.enforce_module_order:
            for reference in self._resolver.find_forward_references(pipeline.modules):
                report.warnings.append(WARN_FORWARD_REFERENCE.format(
                    module_id=reference.module_id,
                    input_id=reference.input_id,
                    source_module_id=reference.source_module_id,
                ))

        if report.errors:
            logger.debug("Pipeline %s has %d validation errors", pipeline.agent_id, len(report.errors))
        return report

    def _check_routers(self, pipeline: AgentPipeline, report: PipelineValidationReport) -> None:
        routers = pipeline.modules_of_type(ModuleType.ROUTER)
        if not routers:
            return

        destination_modules = pipeline.modules_of_type(ModuleType.DESTINATIONS)
        destination_ids = set()
        for module in destination_modules:
            try:
                destination_ids.update(
                    destination.id for destination in DestinationsConfig.model_validate(module.config).destinations
                )
            except ValidationError:
                continue

        for router in routers:
            if not destination_modules:
                report.warnings.append(WARN_ROUTER_WITHOUT_DESTINATIONS.format(module_id=router.id))
                continue
            try:
                config = RouterConfig.model_validate(router.config)
            except ValidationError:
                continue
            for rule in config.rules:
                if rule.destination_id and rule.destination_id not in destination_ids:
                    report.warnings.append(WARN_RULE_UNKNOWN_DESTINATION.format(
                        module_id=router.id,
                        rule_id=rule.id,
                        destination_id=rule.destination_id,
                    ))
