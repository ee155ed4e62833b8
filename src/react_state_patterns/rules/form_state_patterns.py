"""Forms assembled from many separate field and validation states."""

from __future__ import annotations

from react_state_patterns.analyzer.components import (
    Component,
    SourceModule,
    StateEntry,
    callee_identifier,
)
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import (
    CallExpression,
    Function,
    FunctionDeclaration,
    Identifier,
    VariableDeclarator,
)
from react_state_patterns.tree.walk import walk

NAME = "form-state-patterns"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    fields = [s for s in component.states if is_form_field(s.name)]
    validation = [s for s in component.states if is_validation_state(s.name)]
    total = len(fields) + len(validation)
    if total < patterns.FORM_WARNING_THRESHOLD:
        return []

    manual_reset = has_manual_reset(component, fields + validation)
    message = (
        f"Found {total} form-related state variables. "
        "Consider using a form library or unified state management."
    )
    if manual_reset:
        message += " Manual reset pattern detected."

    first = fields[0] if fields else validation[0]
    return [make_issue(
        NAME, module, first,
        severity="error" if total >= patterns.FORM_ERROR_THRESHOLD else "warning",
        message=message,
        suggestion=suggestion_for(
            total, [s.name for s in fields], [s.name for s in validation], manual_reset,
        ),
        fixable=True,
    )]


def is_form_field(name: str) -> bool:
    lowered = name.lower()
    return any(p.search(lowered) for p in patterns.FORM_FIELD_PATTERNS)


def is_validation_state(name: str) -> bool:
    lowered = name.lower()
    return any(p.search(lowered) for p in patterns.VALIDATION_STATE_PATTERNS)


def has_manual_reset(component: Component, states: list[StateEntry]) -> bool:
    """A function named like ``resetForm`` that calls three or more form setters."""
    setters = {s.setter_name for s in states}
    for node in walk(component.node):
        if not isinstance(node, Function) or not _is_reset_function(node):
            continue
        calls = sum(
            1 for n in walk(node)
            if isinstance(n, CallExpression) and callee_identifier(n) in setters
        )
        if calls >= patterns.MANUAL_RESET_MIN_SETTERS:
            return True
    return False


def _is_reset_function(fn: Function) -> bool:
    if isinstance(fn, FunctionDeclaration):
        return "reset" in (fn.name or "").lower()
    parent = fn.parent
    return (
        isinstance(parent, VariableDeclarator)
        and isinstance(parent.target, Identifier)
        and "reset" in parent.target.name.lower()
    )


def _default_values(field_names: list[str]) -> str:
    shown = ": '', ".join(field_names[:3])
    return shown + (": '', ..." if len(field_names) > 3 else ": ''")


def suggestion_for(
    total: int, field_names: list[str], validation_names: list[str], manual_reset: bool,
) -> str:
    if total >= patterns.FORM_ERROR_THRESHOLD:
        return (
            f"For complex forms with {total} states, consider React Hook Form for better "
            "performance and developer experience: "
            "const { register, handleSubmit, formState: { errors } } = useForm();"
        )
    if total >= patterns.FORM_DEFAULTS_THRESHOLD:
        return (
            "Consider React Hook Form or TanStack Form for better form management: "
            f"const form = useForm({{ defaultValues: {{ {_default_values(field_names)} }} }});"
        )
    if len(validation_names) >= 3 or manual_reset:
        reset_note = " and reset logic" if manual_reset else ""
        return (
            f"For forms with complex validation{reset_note}, consider React Hook Form or "
            "group related state: "
            f"const [formData, setFormData] = useState({{ {_default_values(field_names)} }});"
        )
    return (
        "Consider grouping related form fields or using useReducer for better state "
        "management: "
        f"const [formData, setFormData] = useState({{ {_default_values(field_names)} }});"
    )


RULE = Rule(
    name=NAME,
    description=(
        "Complex forms with many state variables should use form libraries "
        "or unified state management"
    ),
    severity="warning",
    check=per_component(check_component),
)
