"""Steps of the guest RSVP form: welcome -> question -> thanks."""

from dataclasses import dataclass, replace
from enum import Enum


class FormStep(str, Enum):
    WELCOME = "welcome"
    QUESTION = "question"
    THANKS = "thanks"


@dataclass(frozen=True)
class FormState:
    step: FormStep = FormStep.WELCOME
    name: str = ""
    response: str = ""

    @property
    def can_submit(self) -> bool:
        return (
            self.step == FormStep.QUESTION
            and bool(self.name.strip())
            and bool(self.response.strip())
        )


@dataclass(frozen=True)
class EnterName:
    name: str


@dataclass(frozen=True)
class ChooseResponse:
    response: str


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Submitted:
    """The RSVP was stored."""


FormAction = EnterName | ChooseResponse | Back | Submitted


def transition(state: FormState, action: FormAction) -> FormState:
    """Return the next state. Actions that do not apply leave the state unchanged."""
    if state.step == FormStep.WELCOME:
        if isinstance(action, EnterName) and action.name.strip():
            return replace(state, step=FormStep.QUESTION, name=action.name.strip())

    elif state.step == FormStep.QUESTION:
        if isinstance(action, ChooseResponse):
            return replace(state, response=action.response.strip())
        if isinstance(action, Back):
            return replace(state, step=FormStep.WELCOME)
        if isinstance(action, Submitted) and state.can_submit:
            return replace(state, step=FormStep.THANKS)

    return state
