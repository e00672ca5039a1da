"""Rendering of the commit wizard screens.

Each screen is produced as a Rich markup string by `render_view`, a pure
function of the FlowState. User-entered text is escaped so brackets typed
into a scope or message are shown literally.
"""

from rich.markup import escape

from git_cc.flow import theme
from git_cc.flow.models import FlowState, Step


def _styled(style: str, text: str) -> str:
    return f"[{style}]{escape(text)}[/]"


def _input_line(value: str, placeholder: str) -> str:
    if not value:
        return theme.CURSOR + _styled(theme.MUTED_STYLE, placeholder)
    return escape(value) + theme.CURSOR


def _render_type_select(state: FlowState) -> str:
    lines = [_styled(theme.TITLE_STYLE, "Select the type of change"), ""]

    if state.filter_text:
        lines.append(_styled(theme.PROMPT_STYLE, "Filter: ") + escape(state.filter_text))
        lines.append("")

    visible = state.visible_types
    if not visible:
        lines.append(_styled(theme.MUTED_STYLE, "  No matching types"))

    selected = state.selected_type
    for item in visible:
        row = f"{item.tag:<{theme.TAG_COLUMN_WIDTH}} {item.description}"
        if item == selected:
            lines.append(_styled(theme.SELECTED_STYLE, theme.POINTER + row))
        else:
            lines.append("  " + escape(row))

    lines.append("")
    lines.append(_styled(theme.MUTED_STYLE, theme.TYPE_SELECT_HELP))
    return "\n".join(lines)


def _render_scope(state: FlowState) -> str:
    return "\n".join([
        _styled(theme.TITLE_STYLE, "Enter scope (optional, press Enter to skip):"),
        _input_line(state.scope, theme.SCOPE_PLACEHOLDER),
        "",
        _styled(theme.MUTED_STYLE, theme.INPUT_HELP),
    ])


def _render_message(state: FlowState) -> str:
    lines = [
        _styled(theme.TITLE_STYLE, "Enter commit message:"),
        _styled(theme.PROMPT_STYLE, state.header_prefix)
        + _input_line(state.message, theme.MESSAGE_PLACEHOLDER),
        "",
    ]
    if state.committing:
        lines.append(_styled(theme.MUTED_STYLE, "Committing..."))
    else:
        lines.append(_styled(theme.MUTED_STYLE, theme.INPUT_HELP))
    return "\n".join(lines)


def _render_error(state: FlowState) -> str:
    parts = [_styled(theme.ERROR_STYLE, "Commit Failed!")]
    if state.outcome is not None:
        parts.append(escape(state.outcome.message))
        details = state.outcome.get_details()
        if details:
            parts.append(escape(details))
    parts.append(_styled(theme.PROMPT_STYLE, "Press 'r' to retry or 'q' to quit"))
    return "\n\n".join(parts)


_RENDERERS = {
    Step.TYPE_SELECT: _render_type_select,
    Step.SCOPE: _render_scope,
    Step.MESSAGE: _render_message,
    Step.ERROR: _render_error,
}


def render_view(state: FlowState) -> str:
    """Render the screen for the current step.

    Args:
        state: The wizard state to display.

    Returns:
        Rich markup for the active screen.
    """
    return _RENDERERS[state.step](state)
