"""
JSON Extractor Module

Extracts named variables from a JSON source input with JSONPath expressions.

Version: 1.0.0
"""

import logging
from typing import Any, Dict, List

from jsonpath_ng import parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..enum import ModuleType
from ..constants import (
    JSON_INPUT_PREFIX,
    WARN_NO_VARIABLES,
    WARN_NO_SOURCE_INPUT,
    ERROR_VARIABLE_NAME_REQUIRED,
    ERROR_VARIABLE_PATH_REQUIRED,
    ERROR_VARIABLE_PATH_INVALID,
    ERROR_VARIABLE_DUPLICATE,
)
from ..spec.io_models import InputElement
from ..spec.module_models import JsonExtractorConfig
from ..spec.validation_models import ValidationIssue
from .base_module import BaseModuleDefinition

logger = logging.getLogger(__name__)


def normalize_json_path(path: str) -> str:
    """Prefix a bare path such as ``user.name`` with ``$.``."""
    path = path.strip()
    if path.startswith("$"):
        return path
    return f"$.{path.lstrip('.')}"


class JsonExtractorModuleDefinition(BaseModuleDefinition):
    """Definition of the json_extractor module."""

    MODULE_TYPE = ModuleType.JSON_EXTRACTOR
    LABEL = "JSON extractor"
    DESCRIPTION = "Pulls named values out of a JSON input"
    EXECUTE_LOGIC = "Evaluates each variable's JSONPath against the parsed source input."
    CONFIG_MODEL = JsonExtractorConfig

    def _validate(self, config: JsonExtractorConfig, errors: List[ValidationIssue], warnings: List[str]) -> None:
        if not config.variables:
            warnings.append(WARN_NO_VARIABLES)

        seen_names = set()
        for index, variable in enumerate(config.variables):
            position = index + 1
            field = f"variables.{index}"
            name = variable.name.strip()

            if not name:
                errors.append(ValidationIssue(
                    field=f"{field}.name",
                    message=ERROR_VARIABLE_NAME_REQUIRED.format(position=position),
                ))
            elif name in seen_names:
                errors.append(ValidationIssue(
                    field=f"{field}.name",
                    message=ERROR_VARIABLE_DUPLICATE.format(name=name),
                ))
            seen_names.add(name)

            if not variable.path.strip():
                errors.append(ValidationIssue(
                    field=f"{field}.path",
                    message=ERROR_VARIABLE_PATH_REQUIRED.format(position=position),
                ))
                continue
            try:
                parse(normalize_json_path(variable.path))
            except (JsonPathLexerError, JsonPathParserError):
                errors.append(ValidationIssue(
                    field=f"{field}.path",
                    message=ERROR_VARIABLE_PATH_INVALID.format(position=position, path=variable.path),
                ))

        if not config.source_input_id:
            warnings.append(WARN_NO_SOURCE_INPUT)

    def _outputs(self, config: JsonExtractorConfig, module_id: str) -> List[InputElement]:
        return [
            InputElement(
                id=f"{JSON_INPUT_PREFIX}{variable.id}",
                type=f"{JSON_INPUT_PREFIX}{variable.name}",
                label=variable.name,
                content=variable.description or variable.path,
            )
            for variable in config.variables
        ]

    def extract_variables(self, config: Dict[str, Any], data: Any) -> Dict[str, Any]:
        """
        Apply the configured variables to a JSON document.

        Args:
            config: Stored json_extractor config
            data: Parsed JSON document

        Returns:
            Variable name -> value; a single match gives the value itself,
            several matches a list, no match None
        """
        parsed, errors = self.parse_config(config)
        if parsed is None:
            logger.warning("Cannot extract variables from an unreadable config")
            return {}

        values: Dict[str, Any] = {}
        for variable in parsed.variables:
            if not variable.name or not variable.path.strip():
                continue
            try:
                expression = parse(normalize_json_path(variable.path))
            except (JsonPathLexerError, JsonPathParserError):
                logger.warning("Skipping variable %s with invalid path %r", variable.name, variable.path)
                continue
            matches = [match.value for match in expression.find(data)]
            if not matches:
                values[variable.name] = None
            elif len(matches) == 1:
                values[variable.name] = matches[0]
            else:
                values[variable.name] = matches
        return values
