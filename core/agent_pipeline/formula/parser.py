"""
Formula Parser

Turns condition formulas into element lists and back.

``tokenize`` keeps every token so that validation can see the formula as
stored. ``parse_formula`` yields the list an editor works on: the implicit
single-condition default is filled in and references to conditions that no
longer exist are left out.

Version: 1.0.0
"""

import re
from typing import Iterable, List

from ..enum import BracketKind, FormulaFunction, LogicalOperator
from ..constants import MATH_SYMBOLS
from .elements import (
    BracketElement,
    ConditionRef,
    FormulaElement,
    FunctionElement,
    MathElement,
    OperatorElement,
    ValueElement,
)

_INTEGER = re.compile(r"-?[0-9]+")
_BRACKET = re.compile(r"([()])")


def classify_token(token: str) -> FormulaElement:
    """Map one raw token to its element."""
    upper = token.upper()
    if upper in (LogicalOperator.AND.value, LogicalOperator.OR.value):
        return OperatorElement(LogicalOperator(upper))
    if token in (BracketKind.OPEN.value, BracketKind.CLOSE.value):
        return BracketElement(BracketKind(token))
    if upper == FormulaFunction.IF.value:
        return FunctionElement(FormulaFunction.IF)
    if _INTEGER.fullmatch(token):
        return ConditionRef(int(token))
    if token in MATH_SYMBOLS:
        return MathElement(token)
    return ValueElement(token)


def tokenize(formula: str) -> List[FormulaElement]:
    """
    Split a formula on whitespace and classify every token.

    Brackets are tokens of their own even when written against an index,
    so ``(1 OR 2)`` reads like ``( 1 OR 2 )``.
    """
    if not formula:
        return []
    return [classify_token(token) for token in _BRACKET.sub(r" \1 ", formula).split()]


def serialize(elements: Iterable[FormulaElement]) -> str:
    """Join element tokens with single spaces, skipping empty placeholders."""
    return " ".join(element.token for element in elements if element.token)


def parse_formula(formula: str, condition_count: int) -> List[FormulaElement]:
    """
    Element list shown for a formula over ``condition_count`` conditions.

    Args:
        formula: Stored condition logic
        condition_count: Number of conditions the formula refers to

    Returns:
        ``[ConditionRef(0)]`` for an empty formula with conditions present,
        otherwise the tokens without out-of-range condition references.
    """
    if not formula or not formula.strip():
        return [ConditionRef(0)] if condition_count > 0 else []

    return [
        element
        for element in tokenize(formula)
        if not isinstance(element, ConditionRef) or 0 <= element.index < condition_count
    ]
