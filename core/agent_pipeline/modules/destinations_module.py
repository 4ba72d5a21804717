"""
Destinations Module

Lists where pipeline results are written: database columns or UI components.

Version: 1.0.0
"""

from typing import List

from ..enum import ModuleType, TargetType
from ..defaults import DESTINATION_INPUT_ORDER_OFFSET
from ..constants import (
    DESTINATION_INPUT_PREFIX,
    OUTPUT_ID_DESTINATIONS_RESULT,
    WARN_NO_DESTINATIONS,
    ERROR_DESTINATION_LABEL_REQUIRED,
    ERROR_DESTINATION_TYPE_REQUIRED,
    ERROR_DESTINATION_TABLE_REQUIRED,
    ERROR_DESTINATION_COLUMN_REQUIRED,
    ERROR_DESTINATION_COMPONENT_REQUIRED,
    ERROR_DESTINATION_EVENT_REQUIRED,
)
from ..spec.io_models import InputElement
from ..spec.router_models import DestinationsConfig
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition


class DestinationsModuleDefinition(BaseModuleDefinition):
    """Definition of the destinations module."""

    MODULE_TYPE = ModuleType.DESTINATIONS
    LABEL = "Destinations"
    DESCRIPTION = "Database columns and UI components that receive the result"
    EXECUTE_LOGIC = "Writes each routed value to its table column or emits it to its component."
    CONFIG_MODEL = DestinationsConfig

    def _validate(self, config: DestinationsConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if not config.destinations:
            warnings.append(WARN_NO_DESTINATIONS)
            return

        for index, destination in enumerate(config.destinations):
            position = index + 1
            field = f"destinations.{index}"

            if not (destination.label or "").strip():
                errors.append(ValidationIssue(
                    field=f"{field}.label",
                    message=ERROR_DESTINATION_LABEL_REQUIRED.format(position=position),
                ))
            if not destination.type.strip():
                errors.append(ValidationIssue(
                    field=f"{field}.type",
                    message=ERROR_DESTINATION_TYPE_REQUIRED.format(position=position),
                ))

            if destination.target_type == TargetType.DATABASE:
                if not destination.target_table:
                    errors.append(ValidationIssue(
                        field=f"{field}.targetTable",
                        message=ERROR_DESTINATION_TABLE_REQUIRED.format(position=position),
                    ))
                if not destination.target_column:
                    errors.append(ValidationIssue(
                        field=f"{field}.targetColumn",
                        message=ERROR_DESTINATION_COLUMN_REQUIRED.format(position=position),
                    ))
            elif destination.target_type == TargetType.UI_COMPONENT:
                if not destination.component_name:
                    errors.append(ValidationIssue(
                        field=f"{field}.componentName",
                        message=ERROR_DESTINATION_COMPONENT_REQUIRED.format(position=position),
                    ))
                if not destination.event_type:
                    errors.append(ValidationIssue(
                        field=f"{field}.eventType",
                        message=ERROR_DESTINATION_EVENT_REQUIRED.format(position=position),
                    ))

    def _outputs(self, config: DestinationsConfig, module_id: str) -> List[InputElement]:
        outputs = [
            InputElement(
                id=destination.id,
                type=f"{DESTINATION_INPUT_PREFIX}{destination.id}",
                label=destination.display_label(),
                order=DESTINATION_INPUT_ORDER_OFFSET + index,
            )
            for index, destination in enumerate(config.destinations)
        ]
        summary_id = OUTPUT_ID_DESTINATIONS_RESULT.format(module_id=module_id)
        outputs.append(InputElement(id=summary_id, type=summary_id, label="Destinations result"))
        return outputs
