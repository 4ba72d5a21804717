"""
Formula Editor

Pure editing operations over an input trigger's conditions and its
condition formula. Every operation takes the current conditions and formula
and returns a new ``FormulaState``; nothing is modified in place.

Operations work on the element list produced by ``parse_formula`` and
serialize it once at the end, so the condition list and the formula always
change together. Positions outside the element list leave the state
unchanged.

Version: 1.0.0
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..enum import ConditionType, FilterOperator, TriggerType
from ..defaults import DEFAULT_NEW_FILTER_OPERATOR, DEFAULT_NEW_TRIGGER_TYPE
from ..spec.condition_models import TriggerCondition
from .elements import (
    ConditionRef,
    FormulaElement,
    FunctionElement,
    OperatorElement,
    ValueElement,
    is_close_bracket,
    is_open_bracket,
)
from .parser import parse_formula, serialize, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulaState:
    """Conditions and formula after an edit."""
    conditions: List[TriggerCondition] = field(default_factory=list)
    condition_logic: str = ""

    def elements(self) -> List[FormulaElement]:
        return parse_formula(self.condition_logic, len(self.conditions))


def new_condition(
    condition_type: ConditionType = ConditionType.TRIGGER,
    condition_id: Optional[str] = None,
) -> TriggerCondition:
    """Condition with the defaults the editor uses for a new row."""
    condition_id = condition_id or f"condition-{uuid.uuid4().hex[:12]}"
    if condition_type == ConditionType.FILTER:
        return TriggerCondition(
            id=condition_id,
            type=ConditionType.FILTER,
            operator=FilterOperator(DEFAULT_NEW_FILTER_OPERATOR),
        )
    return TriggerCondition(
        id=condition_id,
        type=ConditionType.TRIGGER,
        trigger_type=TriggerType(DEFAULT_NEW_TRIGGER_TYPE),
    )


def _unchanged(conditions: Sequence[TriggerCondition], formula: str) -> FormulaState:
    return FormulaState(list(conditions), formula or "")


# =============================================================================
# ADDING
# =============================================================================


def add_condition(
    conditions: Sequence[TriggerCondition],
    formula: str,
    condition: TriggerCondition,
) -> FormulaState:
    """
    Append a condition and AND it into the formula.

    An empty formula stands for the implicit ``0``; it becomes ``0`` for the
    first condition and ``0 AND 1 AND ... AND n`` afterwards.
    """
    new_index = len(conditions)
    updated = [*conditions, condition]

    if formula and formula.strip():
        logic = f"{formula.strip()} AND {new_index}"
    elif new_index == 0:
        logic = "0"
    else:
        logic = " AND ".join(str(index) for index in range(new_index + 1))

    return FormulaState(updated, logic)


def insert_element(
    conditions: Sequence[TriggerCondition],
    formula: str,
    element: FormulaElement,
    position: Optional[int] = None,
) -> FormulaState:
    """
    Insert an operator, bracket, function, math symbol or value token.

    Args:
        conditions: Current conditions
        formula: Current formula
        element: Element to insert
        position: Element position to insert at; appended when omitted or
            out of range

    Returns:
        New state with the element inserted
    """
    elements = parse_formula(formula, len(conditions))

    if isinstance(element, ConditionRef) and not 0 <= element.index < len(conditions):
        logger.debug("Ignoring reference to missing condition %s", element.index)
        return _unchanged(conditions, formula)

    if position is None or not 0 <= position <= len(elements):
        position = len(elements)

    # Value text is stored as the tokens it reads back as
    inserted = tokenize(element.text) if isinstance(element, ValueElement) else [element]
    elements[position:position] = inserted

    return FormulaState(list(conditions), serialize(elements))


# =============================================================================
# REMOVING
# =============================================================================


def remove_element(
    conditions: Sequence[TriggerCondition],
    formula: str,
    position: int,
) -> FormulaState:
    """
    Remove the element at ``position``.

    A condition reference removes its condition (see ``remove_condition``);
    any other element only removes its own token.
    """
    elements = parse_formula(formula, len(conditions))
    if not 0 <= position < len(elements):
        logger.debug("No formula element at position %s", position)
        return _unchanged(conditions, formula)

    element = elements[position]
    if isinstance(element, ConditionRef):
        return remove_condition(conditions, formula, element.index)

    del elements[position]
    return FormulaState(list(conditions), serialize(elements))


def remove_condition(
    conditions: Sequence[TriggerCondition],
    formula: str,
    index: int,
) -> FormulaState:
    """
    Remove condition ``index`` and rewrite the formula in one step.

    Every reference to the condition is dropped together with one adjoining
    operator, bracket groups left empty are dropped the same way, and the
    remaining references above ``index`` are decremented.
    """
    if not 0 <= index < len(conditions):
        logger.debug("No condition at index %s", index)
        return _unchanged(conditions, formula)

    remaining = [condition for position, condition in enumerate(conditions) if position != index]
    if not remaining:
        return FormulaState([], "")

    elements = parse_formula(formula, len(conditions))
    while True:
        position = next(
            (
                pos for pos, element in enumerate(elements)
                if isinstance(element, ConditionRef) and element.index == index
            ),
            None,
        )
        if position is None:
            break
        elements = _drop_operand(elements, position, position)

    elements = [
        ConditionRef(element.index - 1)
        if isinstance(element, ConditionRef) and element.index > index
        else element
        for element in elements
    ]
    return FormulaState(remaining, serialize(elements))


def _drop_operand(elements: List[FormulaElement], start: int, end: int) -> List[FormulaElement]:
    """Remove the operand spanning start..end with its function and one operator."""
    if start > 0 and isinstance(elements[start - 1], FunctionElement):
        start -= 1

    if start > 0 and isinstance(elements[start - 1], OperatorElement):
        start -= 1
    elif end + 1 < len(elements) and isinstance(elements[end + 1], OperatorElement):
        end += 1

    result = elements[:start] + elements[end + 1:]

    if 0 < start < len(result) and is_open_bracket(result[start - 1]) and is_close_bracket(result[start]):
        return _drop_operand(result, start - 1, start)
    return result


# =============================================================================
# REORDERING
# =============================================================================


def move_element(
    conditions: Sequence[TriggerCondition],
    formula: str,
    from_position: int,
    to_position: int,
) -> FormulaState:
    """
    Move one element of the formula (array move).

    Condition references are renumbered in their new order afterwards and the
    conditions are permuted to match.
    """
    elements = parse_formula(formula, len(conditions))
    if not (0 <= from_position < len(elements) and 0 <= to_position < len(elements)):
        logger.debug("Cannot move formula element %s to %s", from_position, to_position)
        return _unchanged(conditions, formula)

    element = elements.pop(from_position)
    elements.insert(to_position, element)
    return _renumber(conditions, elements)


def reorder_conditions(
    conditions: Sequence[TriggerCondition],
    formula: str,
    from_position: int,
    to_position: int,
) -> FormulaState:
    """
    Move a condition among the condition slots of the formula.

    Positions count condition references in formula order. Operators,
    brackets and functions keep their place; only the references move,
    are renumbered, and the conditions are permuted to match.
    """
    elements = parse_formula(formula, len(conditions))
    slots = [pos for pos, element in enumerate(elements) if isinstance(element, ConditionRef)]
    if not (0 <= from_position < len(slots) and 0 <= to_position < len(slots)):
        logger.debug("Cannot move condition slot %s to %s", from_position, to_position)
        return _unchanged(conditions, formula)

    refs = [elements[pos] for pos in slots]
    moved = refs.pop(from_position)
    refs.insert(to_position, moved)
    for pos, ref in zip(slots, refs):
        elements[pos] = ref
    return _renumber(conditions, elements)


def _renumber(
    conditions: Sequence[TriggerCondition],
    elements: List[FormulaElement],
) -> FormulaState:
    """Renumber references by first appearance and permute the conditions alike."""
    permutation: List[int] = []
    for element in elements:
        if isinstance(element, ConditionRef) and element.index not in permutation:
            permutation.append(element.index)
    permutation.extend(index for index in range(len(conditions)) if index not in permutation)

    mapping = {old: new for new, old in enumerate(permutation)}
    renumbered = [
        ConditionRef(mapping[element.index]) if isinstance(element, ConditionRef) else element
        for element in elements
    ]
    return FormulaState([conditions[old] for old in permutation], serialize(renumbered))


# =============================================================================
# UPDATING
# =============================================================================


def toggle_operator(
    conditions: Sequence[TriggerCondition],
    formula: str,
    position: int,
) -> FormulaState:
    """Flip the AND/OR operator at ``position``."""
    elements = parse_formula(formula, len(conditions))
    if not 0 <= position < len(elements) or not isinstance(elements[position], OperatorElement):
        logger.debug("No operator at formula position %s", position)
        return _unchanged(conditions, formula)

    elements[position] = elements[position].toggled()
    return FormulaState(list(conditions), serialize(elements))


def update_condition(
    conditions: Sequence[TriggerCondition],
    formula: str,
    condition_id: str,
    changes: Dict[str, Any],
) -> FormulaState:
    """Apply field changes to the condition with ``condition_id``; the formula is kept."""
    updated = []
    for condition in conditions:
        if condition.id == condition_id:
            data = condition.model_dump()
            data.update(changes)
            condition = TriggerCondition.model_validate(data)
        updated.append(condition)
    return FormulaState(updated, formula or "")
