"""
Static Input Catalogue

Task inputs that are always available to an agent, independent of its
pipeline.

Version: 1.0.0
"""

from typing import List, Tuple

from .constants import (
    GROUP_TASK_FIELDS,
    GROUP_PARTICIPANTS,
    GROUP_TASK_HIERARCHY,
    GROUP_DATES,
    GROUP_CONTENT,
    GROUP_COMPONENTS,
)
from .spec.io_models import InputElement, InputGroup

# =============================================================================
# STATIC INPUTS
# =============================================================================

STATIC_INPUTS: List[Tuple[str, List[Tuple[str, str]]]] = [
    (GROUP_TASK_FIELDS, [
        ("task_title", "Task title"),
        ("task_pitch", "Task pitch"),
        ("task_content", "Task content"),
        ("task_priority", "Task priority"),
        ("task_column", "Task stage"),
    ]),
    (GROUP_PARTICIPANTS, [
        ("task_owner", "Task owner"),
        ("task_assignees", "Task assignees"),
    ]),
    (GROUP_TASK_HIERARCHY, [
        ("task_parent_chain", "Parent chain"),
        ("profile_recommended_parents", "Recommended parents"),
        ("task_subtasks", "Subtasks"),
        ("all_tasks_list", "All tasks"),
    ]),
    (GROUP_DATES, [
        ("task_start_date", "Start date"),
        ("task_end_date", "End date"),
        ("task_planned_hours", "Planned hours"),
    ]),
    (GROUP_CONTENT, [
        ("editor_content", "Editor content"),
        ("incoming_messages", "Incoming messages"),
        ("custom_text", "Custom text"),
    ]),
    (GROUP_COMPONENTS, [
        ("ui_parent_suggestions", "Suggested parents"),
    ]),
]


def static_input_groups() -> List[InputGroup]:
    """Fresh copies of the static input groups."""
    return [
        InputGroup(
            name=name,
            inputs=[InputElement(id=input_id, type=input_id, label=label) for input_id, label in inputs],
        )
        for name, inputs in STATIC_INPUTS
    ]
