"""Interactive step flow for git-cc.

This package provides:
- models: Step, Effect, KeyPress, FlowState
- machine: transition, apply_outcome, CommitFlow
- view: render_view
- theme: presentation constants
"""

from git_cc.flow.models import (
    Effect,
    FlowState,
    KeyPress,
    Step,
)
from git_cc.flow.view import render_view
from git_cc.flow.machine import (
    CommitFlow,
    apply_outcome,
    transition,
)


__all__ = [
    "Effect",
    "FlowState",
    "KeyPress",
    "Step",
    "render_view",
    "CommitFlow",
    "apply_outcome",
    "transition",
]
