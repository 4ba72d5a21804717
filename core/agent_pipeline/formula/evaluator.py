"""
Formula Evaluator

Evaluates a condition formula against the boolean results of its conditions.

Grammar (AND binds tighter than OR)::

    expression := term (OR term)*
    term       := factor (AND factor)*
    factor     := "(" expression ")" | IF factor | <condition index>

An empty formula is condition 0. A formula that cannot be evaluated falls
back to "every condition is true".

Version: 1.0.0
"""

import logging
from typing import List, Sequence

from ..enum import LogicalOperator
from ..exceptions import FormulaSyntaxError
from .elements import (
    ConditionRef,
    FormulaElement,
    FunctionElement,
    OperatorElement,
    is_close_bracket,
    is_open_bracket,
)
from .parser import tokenize

logger = logging.getLogger(__name__)


class _FormulaEvaluator:
    """Recursive-descent evaluator over one token list."""

    def __init__(self, tokens: List[FormulaElement], results: List[bool]):
        self._tokens = tokens
        self._results = results
        self._position = 0

    def evaluate(self) -> bool:
        value = self._expression()
        if self._position != len(self._tokens):
            raise FormulaSyntaxError(
                f"Unexpected token: {self._tokens[self._position].token}",
                self._position,
            )
        return value

    def _peek(self):
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _is_operator(self, operator: LogicalOperator) -> bool:
        element = self._peek()
        return isinstance(element, OperatorElement) and element.operator == operator

    def _expression(self) -> bool:
        value = self._term()
        while self._is_operator(LogicalOperator.OR):
            self._position += 1
            right = self._term()
            value = value or right
        return value

    def _term(self) -> bool:
        value = self._factor()
        while self._is_operator(LogicalOperator.AND):
            self._position += 1
            right = self._factor()
            value = value and right
        return value

    def _factor(self) -> bool:
        element = self._peek()
        if element is None:
            raise FormulaSyntaxError("Unexpected end of formula", self._position)

        if is_open_bracket(element):
            self._position += 1
            value = self._expression()
            if not is_close_bracket(self._peek()):
                raise FormulaSyntaxError("Missing closing bracket", self._position)
            self._position += 1
            return value

        if isinstance(element, FunctionElement):
            self._position += 1
            return self._factor()

        if isinstance(element, ConditionRef):
            if not 0 <= element.index < len(self._results):
                raise FormulaSyntaxError(f"Condition {element.index} does not exist", self._position)
            self._position += 1
            return self._results[element.index]

        raise FormulaSyntaxError(f"Unexpected token: {element.token}", self._position)


def evaluate_condition_logic(formula: str, results: Sequence[bool]) -> bool:
    """
    Evaluate a formula over condition results.

    Args:
        formula: Formula over condition indices
        results: Result of each condition, by index

    Returns:
        The formula's value. An empty formula means ``0``, the same implicit
        default the editor displays. A formula that cannot be evaluated
        yields ``all(results)``. No results is always False.
    """
    values = [bool(result) for result in results]
    if not values:
        return False

    tokens = tokenize(formula) or [ConditionRef(0)]
    try:
        return _FormulaEvaluator(tokens, values).evaluate()
    except FormulaSyntaxError as exc:
        reason = exc.message
    except RecursionError:
        reason = "nested too deeply"

    logger.warning(
        "Could not evaluate condition formula %r (%s); falling back to all conditions",
        formula,
        reason,
    )
    return all(values)
