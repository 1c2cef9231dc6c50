import pytest

from src.pages.form_state import (
    Back,
    ChooseResponse,
    EnterName,
    FormState,
    FormStep,
    Submitted,
    transition,
)


def test_initial_state_is_welcome():
    state = FormState()

    assert state.step == FormStep.WELCOME
    assert state.name == ""
    assert not state.can_submit


def test_enter_name_moves_to_question():
    state = transition(FormState(), EnterName("  Anna "))

    assert state == FormState(step=FormStep.QUESTION, name="Anna")


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_stays_on_welcome(name):
    state = FormState()

    assert transition(state, EnterName(name)) is state


def test_choose_response_stays_on_question():
    state = transition(FormState(step=FormStep.QUESTION, name="Anna"), ChooseResponse("Ja"))

    assert state.step == FormStep.QUESTION
    assert state.response == "Ja"
    assert state.can_submit


def test_back_keeps_name_and_response():
    question = FormState(step=FormStep.QUESTION, name="Anna", response="Nee")

    state = transition(question, Back())

    assert state == FormState(step=FormStep.WELCOME, name="Anna", response="Nee")


def test_submitted_moves_to_thanks():
    question = FormState(step=FormStep.QUESTION, name="Anna", response="Ja")

    assert transition(question, Submitted()).step == FormStep.THANKS


def test_submitted_without_response_stays_on_question():
    question = FormState(step=FormStep.QUESTION, name="Anna")

    assert transition(question, Submitted()) is question


@pytest.mark.parametrize("action", [EnterName("Bram"), ChooseResponse("Nee"), Back(), Submitted()])
def test_thanks_is_terminal(action):
    thanks = FormState(step=FormStep.THANKS, name="Anna", response="Ja")

    assert transition(thanks, action) is thanks


@pytest.mark.parametrize("action", [ChooseResponse("Ja"), Back(), Submitted()])
def test_welcome_ignores_other_actions(action):
    welcome = FormState()

    assert transition(welcome, action) is welcome


def test_enter_name_ignored_on_question():
    question = FormState(step=FormStep.QUESTION, name="Anna")

    assert transition(question, EnterName("Bram")) is question


def test_full_flow():
    state = FormState()
    for action in [EnterName("Anna"), Back(), EnterName("Anna B"), ChooseResponse("Ja"), Submitted()]:
        state = transition(state, action)

    assert state == FormState(step=FormStep.THANKS, name="Anna B", response="Ja")
