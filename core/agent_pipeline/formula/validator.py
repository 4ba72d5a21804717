"""
Formula Validator

Advisory validation of condition formulas. Findings are returned, never
raised; an invalid formula can still be saved.

Version: 1.0.0
"""

from typing import List, Optional

from ..enum import FormulaErrorType
from ..constants import (
    ERROR_FORMULA_REQUIRED,
    ERROR_FORMULA_EXTRA_CLOSING,
    ERROR_FORMULA_UNCLOSED,
    ERROR_FORMULA_EMPTY_GROUP,
    ERROR_FORMULA_NEGATIVE_INDEX,
    ERROR_FORMULA_INDEX_RANGE,
    ERROR_FORMULA_NO_CONDITIONS,
    ERROR_FORMULA_UNKNOWN_TOKEN,
    ERROR_FORMULA_DOUBLE_OPERATOR,
    ERROR_FORMULA_DOUBLE_INDEX,
    ERROR_FORMULA_MISSING_OPERATOR,
    ERROR_FORMULA_OPERATOR_AFTER_OPEN,
    ERROR_FORMULA_OPERATOR_BEFORE_CLOSE,
    ERROR_FORMULA_LEADING_OPERATOR,
    ERROR_FORMULA_TRAILING_OPERATOR,
    ERROR_FORMULA_FUNCTION_OPERAND,
)
from ..spec.validation_models import FormulaValidationError, FormulaValidationResult
from .elements import (
    ConditionRef,
    FormulaElement,
    FunctionElement,
    MathElement,
    OperatorElement,
    ValueElement,
    is_close_bracket,
    is_open_bracket,
)
from .parser import tokenize


def _error(
    error_type: FormulaErrorType,
    message: str,
    position: Optional[int] = None,
) -> FormulaValidationError:
    return FormulaValidationError(type=error_type, message=message, position=position)


def _starts_operand(element: FormulaElement) -> bool:
    return isinstance(element, (ConditionRef, FunctionElement)) or is_open_bracket(element)


def _ends_operand(element: Optional[FormulaElement]) -> bool:
    return isinstance(element, ConditionRef) or is_close_bracket(element)


def validate_condition_logic(formula: str, condition_count: int) -> FormulaValidationResult:
    """
    Validate a condition formula.

    Args:
        formula: Formula over condition indices, e.g. ``"0 AND (1 OR 2)"``
        condition_count: Number of conditions the indices refer to

    Returns:
        FormulaValidationResult listing every problem found
    """
    tokens = tokenize(formula)
    errors: List[FormulaValidationError] = []

    if not tokens:
        if condition_count > 1:
            errors.append(_error(FormulaErrorType.SYNTAX, ERROR_FORMULA_REQUIRED))
        return FormulaValidationResult(is_valid=not errors, errors=errors)

    errors.extend(_check_brackets(tokens))
    errors.extend(_check_tokens(tokens, condition_count))
    errors.extend(_check_sequence(tokens))

    return FormulaValidationResult(is_valid=not errors, errors=errors)


def _check_brackets(tokens: List[FormulaElement]) -> List[FormulaValidationError]:
    errors = []
    depth = 0
    for position, element in enumerate(tokens):
        if is_open_bracket(element):
            depth += 1
        elif is_close_bracket(element):
            if depth == 0:
                errors.append(_error(FormulaErrorType.BRACKETS, ERROR_FORMULA_EXTRA_CLOSING, position))
            else:
                depth -= 1
    if depth > 0:
        errors.append(_error(FormulaErrorType.BRACKETS, ERROR_FORMULA_UNCLOSED.format(count=depth)))
    return errors


def _check_tokens(tokens: List[FormulaElement], condition_count: int) -> List[FormulaValidationError]:
    errors = []
    for position, element in enumerate(tokens):
        if isinstance(element, ConditionRef):
            if element.index < 0:
                errors.append(_error(
                    FormulaErrorType.INDEX,
                    ERROR_FORMULA_NEGATIVE_INDEX.format(index=element.index),
                    position,
                ))
            elif element.index >= condition_count:
                if condition_count == 0:
                    message = ERROR_FORMULA_NO_CONDITIONS.format(index=element.index)
                else:
                    message = ERROR_FORMULA_INDEX_RANGE.format(
                        index=element.index, max_index=condition_count - 1
                    )
                errors.append(_error(FormulaErrorType.INDEX, message, position))
        elif isinstance(element, (MathElement, ValueElement)):
            errors.append(_error(
                FormulaErrorType.OPERATOR,
                ERROR_FORMULA_UNKNOWN_TOKEN.format(token=element.token),
                position,
            ))
    return errors


def _check_sequence(tokens: List[FormulaElement]) -> List[FormulaValidationError]:
    errors = []
    previous: Optional[FormulaElement] = None

    for position, element in enumerate(tokens):
        if isinstance(element, OperatorElement):
            if previous is None:
                errors.append(_error(FormulaErrorType.SYNTAX, ERROR_FORMULA_LEADING_OPERATOR, position))
            elif isinstance(previous, OperatorElement):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_DOUBLE_OPERATOR.format(previous=previous.token, current=element.token),
                    position,
                ))
            elif is_open_bracket(previous):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_OPERATOR_AFTER_OPEN.format(token=element.token),
                    position,
                ))
            elif isinstance(previous, FunctionElement):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_FUNCTION_OPERAND.format(token=previous.token),
                    position - 1,
                ))
        elif is_close_bracket(element):
            if isinstance(previous, OperatorElement):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_OPERATOR_BEFORE_CLOSE.format(token=previous.token),
                    position - 1,
                ))
            elif is_open_bracket(previous):
                errors.append(_error(FormulaErrorType.SYNTAX, ERROR_FORMULA_EMPTY_GROUP, position - 1))
            elif isinstance(previous, FunctionElement):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_FUNCTION_OPERAND.format(token=previous.token),
                    position - 1,
                ))
        elif _starts_operand(element):
            if isinstance(previous, ConditionRef) and isinstance(element, ConditionRef):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_DOUBLE_INDEX.format(previous=previous.token, current=element.token),
                    position,
                ))
            elif _ends_operand(previous):
                errors.append(_error(
                    FormulaErrorType.SYNTAX,
                    ERROR_FORMULA_MISSING_OPERATOR.format(token=element.token),
                    position,
                ))
        previous = element

    last_position = len(tokens) - 1
    if isinstance(previous, OperatorElement) and last_position > 0:
        errors.append(_error(FormulaErrorType.SYNTAX, ERROR_FORMULA_TRAILING_OPERATOR, last_position))
    elif isinstance(previous, FunctionElement):
        errors.append(_error(
            FormulaErrorType.SYNTAX,
            ERROR_FORMULA_FUNCTION_OPERAND.format(token=previous.token),
            last_position,
        ))
    return errors
