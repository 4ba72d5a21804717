"""
Formula Elements

A condition formula is a whitespace-separated token sequence. Each token is
represented by one immutable element; ``token`` gives its serialized text.

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Union

from ..enum import BracketKind, FormulaFunction, LogicalOperator


@dataclass(frozen=True)
class ConditionRef:
    """Reference to a condition by its index in the condition list."""
    index: int

    @property
    def token(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class OperatorElement:
    """Boolean AND / OR."""
    operator: LogicalOperator

    @property
    def token(self) -> str:
        return self.operator.value

    def toggled(self) -> "OperatorElement":
        if self.operator == LogicalOperator.AND:
            return OperatorElement(LogicalOperator.OR)
        return OperatorElement(LogicalOperator.AND)


@dataclass(frozen=True)
class BracketElement:
    """Opening or closing bracket."""
    bracket: BracketKind

    @property
    def token(self) -> str:
        return self.bracket.value

    @property
    def is_open(self) -> bool:
        return self.bracket == BracketKind.OPEN

    @property
    def is_close(self) -> bool:
        return self.bracket == BracketKind.CLOSE


@dataclass(frozen=True)
class FunctionElement:
    """Function keyword applied to the operand that follows it."""
    function: FormulaFunction

    @property
    def token(self) -> str:
        return self.function.value


@dataclass(frozen=True)
class MathElement:
    """Arithmetic or comparison symbol; kept verbatim, not evaluated."""
    symbol: str

    @property
    def token(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class ValueElement:
    """Any other token, such as a literal value or an input placeholder."""
    text: str

    @property
    def token(self) -> str:
        return self.text


FormulaElement = Union[
    ConditionRef,
    OperatorElement,
    BracketElement,
    FunctionElement,
    MathElement,
    ValueElement,
]

OPEN_BRACKET = BracketElement(BracketKind.OPEN)
CLOSE_BRACKET = BracketElement(BracketKind.CLOSE)
AND = OperatorElement(LogicalOperator.AND)
OR = OperatorElement(LogicalOperator.OR)
IF = FunctionElement(FormulaFunction.IF)


def is_open_bracket(element: object) -> bool:
    return isinstance(element, BracketElement) and element.is_open


def is_close_bracket(element: object) -> bool:
    return isinstance(element, BracketElement) and element.is_close
