"""
Pipeline Context

Application-level object owning the module registry, the settings and the
resolvers built on them. Create one at startup and close it at shutdown:

    context = PipelineContext.create()
    inputs = context.output_resolver.resolve_pipeline(pipeline)
    context.close()

or use it as a context manager.

Version: 1.0.0
"""

import logging
from typing import Optional

from ..config import Settings, get_settings
from .module_registry import ModuleRegistry, create_default_registry
from .output_resolver import DynamicOutputResolver
from .pipeline_validator import PipelineValidator
from .router_resolver import RouterResolver
from .trigger_evaluator import TriggerEvaluator

logger = logging.getLogger(__name__)


class PipelineContext:
    """
    Registry, settings and resolvers for one application.

    Attributes:
        settings: Active settings
        registry: Module registry
        output_resolver: DynamicOutputResolver over the registry
        router_resolver: RouterResolver
        trigger_evaluator: TriggerEvaluator
        validator: PipelineValidator over the registry
    """

    def __init__(self, registry: ModuleRegistry, settings: Settings, owns_registry: bool = False):
        self.settings = settings
        self.registry = registry
        self.output_resolver = DynamicOutputResolver(registry, settings)
        self.router_resolver = RouterResolver()
        self.trigger_evaluator = TriggerEvaluator()
        self.validator = PipelineValidator(registry, settings)
        self._owns_registry = owns_registry
        self._closed = False

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        registry: Optional[ModuleRegistry] = None,
    ) -> "PipelineContext":
        """
        Build a context with the built-in module definitions.

        Args:
            settings: Settings to use (cached settings when omitted)
            registry: Pre-populated registry (built-ins when omitted); a
                registry passed in is left as-is on close
        """
        settings = settings or get_settings()
        owns_registry = registry is None
        if owns_registry:
            registry = create_default_registry(settings)
        logger.debug("Pipeline context created with %d module definitions", len(registry))
        return cls(registry, settings, owns_registry=owns_registry)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the registered definitions of a registry this context built."""
        if self._closed:
            return
        if self._owns_registry:
            self.registry.clear()
        self._closed = True
        logger.debug("Pipeline context closed")

    def __enter__(self) -> "PipelineContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
