"""
Application Status Workflow

Every status change goes through one table keyed by
``(current status, action, actor role)``. Anything not listed is refused.

    draft --submit--> submitted --shortlist--> shortlisted --interview--> interviewed --hire--> hired
                          |                         |                          |
                          +----------reject---------+-----------reject---------+--> rejected

``rejected`` and ``hired`` are terminal.
"""

import enum

from app.modules.applications.models import ApplicationStatus
from app.modules.shared import ServiceError
from app.modules.users.models import UserRole


class ApplicationAction(str, enum.Enum):
    SUBMIT = "submit"
    SHORTLIST = "shortlist"
    INTERVIEW = "interview"
    REJECT = "reject"
    HIRE = "hire"


_S = ApplicationStatus
_A = ApplicationAction
_R = UserRole

TRANSITIONS: dict[tuple[ApplicationStatus, ApplicationAction, UserRole], ApplicationStatus] = {
    (_S.DRAFT, _A.SUBMIT, _R.APPLICANT): _S.SUBMITTED,
    (_S.SUBMITTED, _A.SHORTLIST, _R.BOARD): _S.SHORTLISTED,
    (_S.SHORTLISTED, _A.INTERVIEW, _R.BOARD): _S.INTERVIEWED,
    (_S.INTERVIEWED, _A.HIRE, _R.BOARD): _S.HIRED,
    (_S.INTERVIEWED, _A.HIRE, _R.ADMIN): _S.HIRED,
    **{
        (status, _A.REJECT, role): _S.REJECTED
        for status in (_S.SUBMITTED, _S.SHORTLISTED, _S.INTERVIEWED)
        for role in (_R.BOARD, _R.ADMIN)
    },
}

TERMINAL_STATUSES: frozenset[ApplicationStatus] = frozenset({_S.REJECTED, _S.HIRED})

# The action that moves an application into each status
_ACTION_FOR_TARGET: dict[ApplicationStatus, ApplicationAction] = {
    _S.SUBMITTED: _A.SUBMIT,
    _S.SHORTLISTED: _A.SHORTLIST,
    _S.INTERVIEWED: _A.INTERVIEW,
    _S.REJECTED: _A.REJECT,
    _S.HIRED: _A.HIRE,
}


class InvalidStatusTransitionError(ServiceError):
    """Raised when an action is not allowed from the current status for the actor's role."""

    def __init__(
        self,
        current_status: ApplicationStatus,
        action: ApplicationAction | None,
        role: UserRole,
    ):
        self.current_status = current_status
        self.action = action
        self.role = role
        attempted = action.value if action else "update"
        super().__init__(
            message=(
                f"Cannot {attempted} an application that is {current_status.value} "
                f"(as {role.value}). Allowed: {[a.value for a in allowed_actions(current_status, role)]}"
            ),
            error_code="INVALID_STATUS_TRANSITION",
            status_code=409,
        )


def next_status(
    current: ApplicationStatus,
    action: ApplicationAction,
    role: UserRole,
) -> ApplicationStatus:
    """
    Resolve the status an action leads to.

    Raises:
        InvalidStatusTransitionError: If the triple is not in the table
    """
    target = TRANSITIONS.get((current, action, role))
    if target is None:
        raise InvalidStatusTransitionError(current, action, role)
    return target


def allowed_actions(
    current: ApplicationStatus,
    role: UserRole | None = None,
) -> list[ApplicationAction]:
    """Actions available from ``current``, optionally for one role only."""
    actions = {
        action
        for (status, action, actor), _target in TRANSITIONS.items()
        if status == current and (role is None or actor == role)
    }
    return sorted(actions, key=lambda a: list(ApplicationAction).index(a))


def action_for_target(target: ApplicationStatus) -> ApplicationAction | None:
    """The action that moves an application into ``target``; None for draft."""
    return _ACTION_FOR_TARGET.get(target)


def is_terminal(status: ApplicationStatus) -> bool:
    return status in TERMINAL_STATUSES
