"""Applicant registration-step state machine.

Onboarding is a fixed linear sequence::

    change-password -> personal-information -> job-preferences -> registration-complete

Each step is left by exactly one event. An event that does not belong to the
current step leaves the step where it is, so the sequence can never skip a
stage or move backwards regardless of the order in which updates arrive.
"""

import logging
from enum import Enum

from jobboard.models.applicant import Applicant

logger = logging.getLogger(__name__)


class RegistrationStep(str, Enum):
    CHANGE_PASSWORD = "change-password"
    PERSONAL_INFORMATION = "personal-information"
    JOB_PREFERENCES = "job-preferences"
    REGISTRATION_COMPLETE = "registration-complete"


class RegistrationEvent(str, Enum):
    PASSWORD_UPDATED = "password-updated"
    ACCOUNT_UPDATED = "account-updated"
    PREFERENCES_UPDATED = "preferences-updated"


INITIAL_STEP = RegistrationStep.CHANGE_PASSWORD

# current step -> (event that leaves it, step it leads to)
TRANSITIONS: dict[RegistrationStep, tuple[RegistrationEvent, RegistrationStep]] = {
    RegistrationStep.CHANGE_PASSWORD: (
        RegistrationEvent.PASSWORD_UPDATED,
        RegistrationStep.PERSONAL_INFORMATION,
    ),
    RegistrationStep.PERSONAL_INFORMATION: (
        RegistrationEvent.ACCOUNT_UPDATED,
        RegistrationStep.JOB_PREFERENCES,
    ),
    RegistrationStep.JOB_PREFERENCES: (
        RegistrationEvent.PREFERENCES_UPDATED,
        RegistrationStep.REGISTRATION_COMPLETE,
    ),
}


def parse_step(value: str | None) -> RegistrationStep | None:
    """Parse a stored step. Returns None for a value outside the sequence."""
    try:
        return RegistrationStep(value)
    except ValueError:
        return None


def next_step(current: RegistrationStep, event: RegistrationEvent) -> RegistrationStep:
    """Return the step that follows ``current`` when ``event`` happens."""
    transition = TRANSITIONS.get(current)
    if transition is None:
        return current
    trigger, target = transition
    return target if event == trigger else current


def advance(applicant: Applicant, event: RegistrationEvent) -> bool:
    """Apply ``event`` to the applicant row. Returns True if the step moved.

    A row whose stored step is not recognised is left untouched.
    The caller owns the transaction and must hold the row lock.
    """
    current = parse_step(applicant.registration_step)
    if current is None:
        logger.warning(
            f"Applicant {applicant.public_id} has unknown registration step "
            f"{applicant.registration_step!r}, ignoring {event.value}"
        )
        return False
    target = next_step(current, event)
    if target == current:
        return False
    applicant.registration_step = target.value
    logger.info(
        f"Applicant {applicant.public_id} registration step "
        f"{current.value} -> {target.value}"
    )
    return True
