"""
Prompt Module

Holds the prompt markup. Inputs are embedded as ``<agent-input>`` tags that
carry the referenced input's id and type.

Version: 1.0.0
"""

import re
from typing import List

from ..enum import ModuleType
from ..constants import (
    AGENT_INPUT_TAG,
    OUTPUT_ID_PROMPT,
    OUTPUT_TYPE_PROMPT,
    WARN_PROMPT_EMPTY,
    WARN_PROMPT_NO_INPUTS,
)
from ..spec.io_models import InputElement
from ..spec.module_models import PromptConfig
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition

_AGENT_INPUT_TAG = re.compile(r"<agent-input\b([^>]*)>", re.IGNORECASE)
_TAG_ATTRIBUTE = re.compile(r'([\w-]+)="([^"]*)"')


def extract_prompt_inputs(content: str) -> List[InputElement]:
    """
    Inputs referenced by ``<agent-input>`` tags, in order of appearance.

    Tags without an ``elementid`` attribute are skipped.
    """
    inputs = []
    for match in _AGENT_INPUT_TAG.finditer(content or ""):
        attributes = {name.lower(): value for name, value in _TAG_ATTRIBUTE.findall(match.group(1))}
        element_id = attributes.get("elementid")
        if not element_id:
            continue
        inputs.append(InputElement(
            id=element_id,
            type=attributes.get("type", ""),
            label=attributes.get("label") or attributes.get("data-label"),
        ))
    return inputs


class PromptModuleDefinition(BaseModuleDefinition):
    """Definition of the prompt module."""

    MODULE_TYPE = ModuleType.PROMPT
    LABEL = "Prompt"
    DESCRIPTION = "Instructions sent to the model, with embedded inputs"
    EXECUTE_LOGIC = "Replaces every <agent-input> tag with the current value of its input."
    CONFIG_MODEL = PromptConfig

    def _validate(self, config: PromptConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if not config.content.strip():
            warnings.append(WARN_PROMPT_EMPTY)
        if AGENT_INPUT_TAG not in config.content:
            warnings.append(WARN_PROMPT_NO_INPUTS)

    def _outputs(self, config: PromptConfig, module_id: str) -> List[InputElement]:
        if not config.content.strip():
            return []
        return [
            InputElement(
                id=OUTPUT_ID_PROMPT.format(module_id=module_id),
                type=OUTPUT_TYPE_PROMPT.format(module_id=module_id),
                label="Prompt",
            )
        ]
