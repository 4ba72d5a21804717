"""
Condition Formula Engine

Parsing, editing, validation and evaluation of the boolean formulas that
combine an input trigger's conditions, e.g. ``"0 AND (1 OR 2)"``.
"""

from .elements import (
    ConditionRef,
    OperatorElement,
    BracketElement,
    FunctionElement,
    MathElement,
    ValueElement,
    FormulaElement,
    OPEN_BRACKET,
    CLOSE_BRACKET,
    AND,
    OR,
    IF,
)
from .parser import (
    classify_token,
    tokenize,
    serialize,
    parse_formula,
)
from .editor import (
    FormulaState,
    new_condition,
    add_condition,
    insert_element,
    remove_element,
    remove_condition,
    move_element,
    reorder_conditions,
    toggle_operator,
    update_condition,
)
from .validator import validate_condition_logic
from .evaluator import evaluate_condition_logic

__all__ = [
    # Elements
    "ConditionRef",
    "OperatorElement",
    "BracketElement",
    "FunctionElement",
    "MathElement",
    "ValueElement",
    "FormulaElement",
    "OPEN_BRACKET",
    "CLOSE_BRACKET",
    "AND",
    "OR",
    "IF",
    # Parsing
    "classify_token",
    "tokenize",
    "serialize",
    "parse_formula",
    # Editing
    "FormulaState",
    "new_condition",
    "add_condition",
    "insert_element",
    "remove_element",
    "remove_condition",
    "move_element",
    "reorder_conditions",
    "toggle_operator",
    "update_condition",
    # Validation and evaluation
    "validate_condition_logic",
    "evaluate_condition_logic",
]
