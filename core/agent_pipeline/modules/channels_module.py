"""
Channels Module

Version: 1.0.0
"""

from typing import List

from ..enum import ModuleType
from ..constants import (
    OUTPUT_ID_CHANNELS_RESULT,
    WARN_NO_CHANNELS,
    ERROR_CHANNEL_NAME_REQUIRED,
)
from ..spec.io_models import InputElement
from ..spec.module_models import ChannelsConfig
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition


class ChannelsModuleDefinition(BaseModuleDefinition):
    """Definition of the channels module."""

    MODULE_TYPE = ModuleType.CHANNELS
    LABEL = "Channels"
    DESCRIPTION = "Notification channels that receive the result"
    EXECUTE_LOGIC = "Sends the result, or the configured message, to every channel."
    CONFIG_MODEL = ChannelsConfig

    def _validate(self, config: ChannelsConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if not config.channels:
            warnings.append(WARN_NO_CHANNELS)
        for index, channel in enumerate(config.channels):
            if not channel.strip():
                errors.append(ValidationIssue(
                    field=f"channels.{index}",
                    message=ERROR_CHANNEL_NAME_REQUIRED.format(position=index + 1),
                ))

    def _outputs(self, config: ChannelsConfig, module_id: str) -> List[InputElement]:
        if not config.channels:
            return []
        output_id = OUTPUT_ID_CHANNELS_RESULT.format(module_id=module_id)
        return [InputElement(id=output_id, type=output_id, label="Channels result")]
